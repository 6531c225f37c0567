"""
Data model for generated worlds.

Every generated entity shares the WorldContent base shape and carries a fixed
``type`` tag naming the stage that produced it. Entities are frozen once built;
dungeons are the single exception because bosses are assigned after every
dungeon exists.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenerationLevel(float, Enum):
    """World levels. Numeric order is not execution order, see EXECUTION_ORDER."""

    PRIMORDIAL = 1
    COSMIC = 2
    GEOGRAPHY = 2.5
    CONCEPTUAL = 3
    DEMIGOD = 4
    MORTAL = 5
    ORGANIZATION = 6
    STANDOUT = 6.5
    LINEAGE = 7
    DUNGEON = 7.5


# Mortal races precede conceptual beings because concepts arise from worship.
EXECUTION_ORDER = (
    GenerationLevel.PRIMORDIAL,
    GenerationLevel.COSMIC,
    GenerationLevel.GEOGRAPHY,
    GenerationLevel.MORTAL,
    GenerationLevel.CONCEPTUAL,
    GenerationLevel.DEMIGOD,
    GenerationLevel.ORGANIZATION,
    GenerationLevel.STANDOUT,
    GenerationLevel.DUNGEON,
    GenerationLevel.LINEAGE,
)


class Alignment(str, Enum):
    GOOD = "good"
    NEUTRAL = "neutral"
    EVIL = "evil"


class CosmicElement(str, Enum):
    ROCK = "rock"
    WIND = "wind"
    WATER = "water"
    LIFE = "life"
    FIRE = "fire"
    EARTH = "earth"
    ICE = "ice"
    MAGIC = "magic"


class GeographyType(str, Enum):
    CONTINENT = "continent"
    OCEAN = "ocean"
    MOUNTAIN_RANGE = "mountain_range"
    RIVER = "river"
    UNDERGROUND_SYSTEM = "underground_system"
    FOREST = "forest"
    DESERT = "desert"
    PLAINS = "plains"
    ISLAND = "island"
    VOLCANO = "volcano"
    SWAMP = "swamp"
    TUNDRA = "tundra"
    CANYON = "canyon"
    ARCHIPELAGO = "archipelago"
    FJORD = "fjord"
    STEPPE = "steppe"
    JUNGLE = "jungle"
    BADLANDS = "badlands"
    GLACIER = "glacier"
    MARSH = "marsh"
    PLATEAU = "plateau"
    COAST = "coast"
    BAY = "bay"
    PENINSULA = "peninsula"


class Magnitude(str, Enum):
    """Size class of a geography feature."""

    VAST = "vast"
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"


class DemiGodType(str, Enum):
    HALF_GOD = "half_god"
    ANCIENT_CREATURE = "ancient_creature"
    DIVINE_EXPERIMENT = "divine_experiment"
    FALLEN_DIVINE = "fallen_divine"
    ASCENDED_MORTAL = "ascended_mortal"
    PRIMORDIAL_SPAWN = "primordial_spawn"


class DungeonKind(str, Enum):
    DUNGEON = "dungeon"
    TOWER = "tower"


class CreatorKind(str, Enum):
    ORGANIZATION = "organization"
    STANDOUT_MORTAL = "standout_mortal"


class BossKind(str, Enum):
    DEMIGOD = "demigod"
    STANDOUT_MORTAL = "standout_mortal"
    PROCGEN = "procgen"


class Location(BaseModel):
    """Abstract map position of a geography feature."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0, lt=1000)
    y: int = Field(ge=0, lt=1000)


class WorldContent(BaseModel):
    """Base shape shared by every generated entity."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable id derived from type, subtype and ordinal")
    name: str = Field(description="Generated display name")
    description: str = Field(description="Generated description")
    parent_id: Optional[str] = Field(
        default=None, description="Entity of an earlier stage that created this one"
    )
    created_at: int = Field(
        description="In-world year of creation; 0 is the present, negative is the past"
    )
    discovered_at: datetime = Field(
        default_factory=utcnow, description="Wall-clock time of generation"
    )
    metadata: Dict[str, Any] = Field(
        default_factory=dict, description="Seed/index provenance, not used by gameplay"
    )


class PrimordialBeing(WorldContent):
    type: Literal["primordial"] = "primordial"
    primordial_type: str = Field(description="Fundamental force, e.g. space or chaos")
    domain: str
    influence: List[str] = Field(default_factory=list)


class CosmicCreator(WorldContent):
    type: Literal["cosmic_creator"] = "cosmic_creator"
    element: CosmicElement
    created_by: str = Field(description="Primordial that brought this creator forth")
    creations: List[str] = Field(
        default_factory=list, description="Ids of entities this creator parented"
    )


class Geography(WorldContent):
    type: Literal["geography"] = "geography"
    geography_type: GeographyType
    created_by: str
    magnitude: Magnitude
    location: Location


class ConceptualBeing(WorldContent):
    type: Literal["conceptual_being"] = "conceptual_being"
    conceptual_type: str
    domain: str
    worshiped_by: List[str] = Field(default_factory=list)


class HalfGodTraits(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["half_god"] = "half_god"
    race: str


class AncientCreatureTraits(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["ancient_creature"] = "ancient_creature"
    creature: str


class DivineExperimentTraits(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["divine_experiment"] = "divine_experiment"
    features: List[str]


class FallenDivineTraits(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["fallen_divine"] = "fallen_divine"
    fallen_type: str


class AscendedMortalTraits(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["ascended_mortal"] = "ascended_mortal"


class PrimordialSpawnTraits(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["primordial_spawn"] = "primordial_spawn"
    spawn_type: str


DemiGodTraits = Annotated[
    Union[
        HalfGodTraits,
        AncientCreatureTraits,
        DivineExperimentTraits,
        FallenDivineTraits,
        AscendedMortalTraits,
        PrimordialSpawnTraits,
    ],
    Field(discriminator="kind"),
]


class DemiGod(WorldContent):
    type: Literal["demigod"] = "demigod"
    demigod_type: DemiGodType
    traits: DemiGodTraits
    origin: str = Field(description="Id of the being this demi-god descends from")
    age: int
    powers: List[str] = Field(default_factory=list)
    alignment: Alignment

    @computed_field  # type: ignore[misc]
    @property
    def is_boss(self) -> bool:
        return self.alignment == Alignment.EVIL


class Lifespan(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int


class MortalRace(WorldContent):
    type: Literal["mortal_race"] = "mortal_race"
    race_type: str
    created_by: str
    homeland: Optional[str] = Field(default=None, description="Geography id")
    characteristics: List[str] = Field(default_factory=list)
    lifespan: Lifespan
    population: int


class Organization(WorldContent):
    type: Literal["organization"] = "organization"
    magnitude: str = Field(description="Organization class, e.g. kingdom or warren")
    race: str
    location: Optional[str] = Field(default=None, description="Geography id")
    leader: Optional[str] = Field(default=None, description="Standout mortal id")
    members: int
    purpose: str
    founded: int


class StandoutMortal(WorldContent):
    type: Literal["standout_mortal"] = "standout_mortal"
    standout_type: str
    race: str
    organization: Optional[str] = None
    location: Optional[str] = None
    powers: List[str] = Field(default_factory=list)
    age: int
    alignment: Alignment
    level: Optional[int] = Field(default=None, description="Power level, set for promoted bosses and leaders")

    @computed_field  # type: ignore[misc]
    @property
    def is_boss(self) -> bool:
        return self.alignment == Alignment.EVIL


class FamilyConnection(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_id: str
    relationship: Literal["created", "influenced", "served", "betrayed", "loved", "hated"]
    description: str


class FamilyMember(WorldContent):
    type: Literal["family_member"] = "family_member"
    role: str
    race: str
    lineage: str
    location: Optional[str] = None
    notable_actions: List[str] = Field(default_factory=list)
    connections: List[FamilyConnection] = Field(default_factory=list)


class FamilyLineage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    race: str
    origin: Optional[str] = None
    members: List[str] = Field(default_factory=list)
    notable_members: List[str] = Field(default_factory=list)
    history: str
    founded: int
    parent_id: str


class WorldEvent(BaseModel):
    """Narrative side-channel entry emitted by a stage."""

    model_config = ConfigDict(frozen=True)

    type: str
    entity_id: str
    location_id: Optional[str] = None
    description: str
    year: int
    metadata: Dict[str, Any] = Field(default_factory=dict)


class DungeonBoss(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int
    boss_id: str
    boss_type: BossKind
    boss_name: str
    boss_race: Optional[str] = None
    boss_alignment: Optional[Alignment] = None


class Dungeon(WorldContent):
    """The one mutable entity: boss slots are filled after creation."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    type: Literal["dungeon"] = "dungeon"
    dungeon_type: DungeonKind
    location: str
    created_by: CreatorKind
    creator_id: str
    purpose: str
    age: int
    depth: int = Field(ge=50, le=100)
    seed: str
    final_boss: Optional[DungeonBoss] = None
    mid_bosses: List[DungeonBoss] = Field(default_factory=list)


class WorldGenerationConfig(BaseModel):
    """Inbound request for a generation run."""

    seed: str = Field(description="Seed string driving the whole run")
    include_levels: Optional[List[GenerationLevel]] = Field(
        default=None, description="Levels to generate; defaults depend on depth"
    )
    depth: Literal["full", "partial", "minimal"] = Field(default="full")
    custom_primordials: Optional[List[str]] = Field(default=None)
    custom_races: Optional[List[str]] = Field(default=None)
    organization_density: Literal["sparse", "normal", "dense"] = Field(default="normal")


class GeneratedWorld(BaseModel):
    """Immutable snapshot of one generation run."""

    model_config = ConfigDict(frozen=True)

    seed: str
    primordials: List[PrimordialBeing] = Field(default_factory=list)
    cosmic_creators: List[CosmicCreator] = Field(default_factory=list)
    geography: List[Geography] = Field(default_factory=list)
    conceptual_beings: List[ConceptualBeing] = Field(default_factory=list)
    demigods: List[DemiGod] = Field(default_factory=list)
    mortal_races: List[MortalRace] = Field(default_factory=list)
    organizations: List[Organization] = Field(default_factory=list)
    standout_mortals: List[StandoutMortal] = Field(default_factory=list)
    dungeons: List[Dungeon] = Field(default_factory=list)
    family_members: List[FamilyMember] = Field(default_factory=list)
    family_lineages: List[FamilyLineage] = Field(default_factory=list)
    world_events: List[WorldEvent] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=utcnow)

    def summary(self) -> Dict[str, int]:
        """Entity counts per collection."""
        return {
            "primordials": len(self.primordials),
            "cosmic_creators": len(self.cosmic_creators),
            "geography": len(self.geography),
            "conceptual_beings": len(self.conceptual_beings),
            "demigods": len(self.demigods),
            "mortal_races": len(self.mortal_races),
            "organizations": len(self.organizations),
            "standout_mortals": len(self.standout_mortals),
            "dungeons": len(self.dungeons),
            "family_members": len(self.family_members),
            "family_lineages": len(self.family_lineages),
            "world_events": len(self.world_events),
        }
