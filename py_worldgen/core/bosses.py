"""
Registration helpers for entities placed outside the stage pipeline.

Dungeon bosses and the organizations and leaders placed on a surface grid are
promoted to first-class entities with a synthesized history. The helpers only
build the entity; the caller decides where it is stored.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

import structlog
from pydantic import BaseModel, Field

from .context import GenerationContext
from .exceptions import GenerationOrderError
from .models import Alignment, Organization, StandoutMortal

logger = structlog.get_logger()

PRESENT_YEAR = 0

BOSS_RACE_MAPPING = {
    "Lich": "undead",
    "Ancient Dragon": "dragon",
    "Demon Lord": "demon",
    "Vampire Lord": "vampire",
    "Dark Archmage": "human",
    "Orc Warlord": "orc",
    "Troll Chieftain": "giant",
    "Dark Knight": "human",
    "Necromancer": "human",
    "Giant Spider Queen": "monster",
}

GRID_ORGANIZATION_PURPOSES = {
    "empire": "conquest and control",
    "kingdom": "ruling and governance",
    "city": "commerce and urban life",
    "town": "community and trade",
    "guild": "professional association",
    "horde": "warfare and conquest",
    "realm": "governing and protection",
    "tribe": "community and survival",
    "band": "exploration and adventure",
    "clan": "kinship and tradition",
    "circle": "magic and knowledge",
    "company": "trade and commerce",
    "mountainhome": "mining and craftsmanship",
    "nest": "survival and expansion",
    "canopy": "nature and harmony",
    "warren": "community and comfort",
    "stronghold": "defense and dominance",
    "enclave": "knowledge and secrecy",
    "colony": "expansion and settlement",
    "sanctuary": "refuge and protection",
    "hold": "craftsmanship and defense",
    "grove": "nature and druidic magic",
    "den": "shelter and security",
    "lair": "territory and hoarding",
    "court": "politics and intrigue",
    "coven": "dark magic and power",
    "coterie": "sophistication and immortality",
    "conclave": "faith and doctrine",
    "academy": "education and research",
    "colosseum": "entertainment and combat",
    "bazaar": "trade and commerce",
    "port": "shipping and trade",
    "fortress": "military defense",
    "temple": "worship and faith",
    "library": "knowledge and preservation",
    "forge": "craftsmanship and creation",
    "tower": "magic and research",
    "crypt": "death and undeath",
    "hive": "collective survival",
    "pack": "hunting and territory",
    "pride": "dominance and hunting",
    "flock": "migration and survival",
    "school": "aquatic community",
    "pod": "aquatic family",
    "murder": "cunning and survival",
    "swarm": "collective action",
}

GRID_MEMBERSHIP_RANGES = {
    "empire": (100000, 1000000),
    "kingdom": (10000, 100000),
    "horde": (5000, 50000),
    "realm": (5000, 50000),
    "city": (5000, 50000),
    "town": (500, 5000),
    "tribe": (100, 1000),
    "guild": (50, 500),
    "band": (5, 50),
    "clan": (20, 200),
    "circle": (10, 100),
    "company": (20, 200),
    "mountainhome": (1000, 10000),
    "nest": (100, 1000),
    "canopy": (500, 5000),
    "warren": (200, 2000),
    "stronghold": (500, 5000),
    "enclave": (50, 500),
    "colony": (100, 1000),
    "sanctuary": (50, 500),
    "hold": (200, 2000),
    "grove": (100, 1000),
    "den": (50, 500),
    "lair": (1, 10),
    "court": (100, 1000),
    "coven": (10, 100),
    "coterie": (20, 200),
    "conclave": (100, 1000),
    "academy": (200, 2000),
    "colosseum": (50, 500),
    "bazaar": (100, 1000),
    "port": (500, 5000),
    "fortress": (500, 5000),
    "temple": (100, 1000),
    "library": (50, 500),
    "forge": (100, 1000),
    "tower": (10, 100),
    "crypt": (50, 500),
    "hive": (1000, 10000),
    "pack": (50, 500),
    "pride": (20, 200),
    "flock": (100, 1000),
    "school": (500, 5000),
    "pod": (50, 500),
    "murder": (100, 1000),
    "swarm": (1000, 10000),
}

# Inclusive power level ranges
LEADER_LEVEL_RANGES = {
    "hero": (15, 25),
    "villain": (15, 25),
    "wizard": (10, 20),
    "archmage": (20, 30),
    "king": (10, 15),
    "queen": (10, 15),
    "emperor": (10, 15),
    "empress": (10, 15),
    "prince": (8, 15),
    "princess": (8, 15),
    "war_chief": (12, 18),
    "commander": (10, 18),
    "general": (10, 20),
    "admiral": (10, 20),
    "marshal": (10, 20),
    "champion": (15, 22),
    "vampire": (18, 25),
    "lich": (20, 30),
    "necromancer": (15, 22),
    "dungeon_boss": (15, 25),
    "high_priest": (12, 20),
    "oracle": (10, 18),
    "prophet": (10, 18),
    "witch": (12, 20),
    "warlock": (15, 22),
    "sorcerer": (12, 20),
    "enchanter": (12, 20),
    "alchemist": (12, 20),
    "guildmaster": (10, 18),
    "chieftain": (10, 18),
    "elder": (8, 15),
}
DEFAULT_LEADER_LEVEL_RANGE = (10, 20)

ROLLED_LEADER_TYPES = frozenset({"king", "queen", "hero", "paladin"})
EVIL_LEADER_TYPES = frozenset({"villain", "necromancer", "lich"})


class BossData(BaseModel):
    """A dungeon boss described by the level-layout generator."""

    name: str
    type: str = Field(description="Boss kind, e.g. Lich or Ancient Dragon")
    level: int = Field(description="Dungeon level the boss guards")
    dungeon_id: str
    dungeon_name: str
    powers: List[str] = Field(default_factory=list)
    description: str
    history: str
    is_main_boss: bool
    dungeon_age: int = Field(description="Years since the dungeon was built")


class GridOrganizationData(BaseModel):
    """An organization placed at a surface grid cell."""

    name: str
    type: str = Field(description="Organization magnitude, e.g. kingdom or guild")
    race_id: str
    race_name: str
    location_id: str
    location_name: str
    grid_x: int
    grid_y: int
    age: int = Field(description="Age in years")
    leader_name: Optional[str] = None
    leader_type: Optional[str] = None


class GridLeaderData(BaseModel):
    """The leader of a grid organization."""

    name: str
    organization_id: str
    organization_name: str
    race_id: str
    race_name: str
    location_id: str
    location_name: str
    leader_type: str
    grid_x: int
    grid_y: int
    birth_year: int
    rise_to_power_year: int


def slugify(name: str) -> str:
    """Lower-case a name and join its words with hyphens."""
    return re.sub(r"\s+", "-", name.strip()).lower()


def _resolve_boss_race(context: GenerationContext, boss_type: str) -> str:
    wanted = BOSS_RACE_MAPPING.get(boss_type, "human")
    for race in context.mortal_races:
        if wanted in race.race_type.lower() or wanted in race.name.lower():
            return race.id
    return context.mortal_races[0].id


def register_boss_entity(context: GenerationContext, boss: BossData) -> StandoutMortal:
    """
    Promote a dungeon boss to a standout mortal.

    The boss takes control of the dungeon 50-149 years after it was built.
    Main bosses have power level 80-99 and mid-bosses 50-79.

    Args:
        context: Generation context supplying races, geography and the run PRNG
        boss: Boss description

    Returns:
        A dungeon_boss standout mortal, not yet stored anywhere

    Raises:
        GenerationOrderError: If no mortal races exist to parent the boss
    """
    if not context.mortal_races:
        raise GenerationOrderError("Mortal races", "dungeon bosses")

    rng = context.rng
    built = -abs(boss.dungeon_age)
    control_year = built + rng.randrange(100) + 50

    race_id = _resolve_boss_race(context, boss.type)
    location_id = rng.choice(context.geography).id if context.geography else None

    slot = "main" if boss.is_main_boss else "mid"
    if boss.is_main_boss:
        level = 80 + rng.randrange(20)
    else:
        level = 50 + rng.randrange(30)

    logger.debug("Registering dungeon boss", dungeon=boss.dungeon_id, slot=slot, level=boss.level)

    return StandoutMortal(
        id=f"boss-{boss.dungeon_id}-{slot}-{boss.level}",
        standout_type="dungeon_boss",
        name=boss.name,
        description=boss.description,
        parent_id=race_id,
        created_at=control_year,
        discovered_at=context.discovered_at,
        race=race_id,
        location=location_id,
        powers=list(boss.powers),
        level=level,
        age=100 + rng.randrange(500),
        alignment=Alignment.EVIL,
        metadata={
            "seed": context.seed,
            "boss_type": boss.type,
            "dungeon_id": boss.dungeon_id,
            "dungeon_name": boss.dungeon_name,
            "dungeon_level": boss.level,
            "is_main_boss": boss.is_main_boss,
            "history": boss.history,
        },
    )


def register_grid_organization(
    context: GenerationContext, data: GridOrganizationData
) -> Organization:
    """Promote a grid-placed organization to an entity founded ``age`` years ago."""
    founded = PRESENT_YEAR - data.age
    purpose = GRID_ORGANIZATION_PURPOSES.get(data.type, "organization and community")
    low, high = GRID_MEMBERSHIP_RANGES.get(data.type, (100, 1000))
    members = low + context.rng.randrange(high - low)

    return Organization(
        id=f"org-grid-{data.grid_x}-{data.grid_y}-{slugify(data.name)}",
        magnitude=data.type,
        name=data.name,
        description=(
            f"The {data.name} is a {data.type} of the {data.race_name}, located in "
            f"{data.location_name}. Founded {data.age} years ago, it serves as a center "
            f"for {purpose}."
        ),
        parent_id=data.race_id,
        created_at=founded,
        discovered_at=context.discovered_at,
        race=data.race_id,
        location=data.location_id,
        members=members,
        purpose=purpose,
        founded=founded,
        metadata={
            "seed": context.seed,
            "grid_x": data.grid_x,
            "grid_y": data.grid_y,
            "age": data.age,
        },
    )


def _leader_powers(leader_type: str) -> List[str]:
    if leader_type in ("wizard", "archmage", "sorcerer"):
        return ["Arcane Magic", "Spell Mastery"]
    if leader_type in ("king", "queen", "emperor", "empress"):
        return ["Leadership", "Political Authority"]
    if leader_type in ("war_chief", "commander", "general"):
        return ["Combat Expertise", "Tactical Command"]
    return ["Leadership", "Expertise"]


def _leader_alignment(context: GenerationContext, leader_type: str) -> Alignment:
    if leader_type in ROLLED_LEADER_TYPES:
        return Alignment.GOOD if context.rng.random() > 0.5 else Alignment.NEUTRAL
    if leader_type in EVIL_LEADER_TYPES:
        return Alignment.EVIL
    return Alignment.NEUTRAL


def register_grid_leader(context: GenerationContext, data: GridLeaderData) -> StandoutMortal:
    """Promote the leader of a grid organization to a standout mortal."""
    low, high = LEADER_LEVEL_RANGES.get(data.leader_type, DEFAULT_LEADER_LEVEL_RANGE)
    level = context.rng.randint(low, high)
    alignment = _leader_alignment(context, data.leader_type)
    kind = data.leader_type.replace("_", " ")

    return StandoutMortal(
        id=f"leader-{data.organization_id}-{slugify(data.name)}",
        standout_type=data.leader_type,
        name=data.name,
        description=(
            f"{data.name} is the {kind} of {data.organization_name}, a {data.race_name} "
            f"organization located in {data.location_name}."
        ),
        parent_id=data.race_id,
        created_at=data.birth_year,
        discovered_at=context.discovered_at,
        race=data.race_id,
        organization=data.organization_id,
        location=data.location_id,
        powers=_leader_powers(data.leader_type),
        level=level,
        age=PRESENT_YEAR - data.birth_year,
        alignment=alignment,
        metadata={
            "seed": context.seed,
            "grid_x": data.grid_x,
            "grid_y": data.grid_y,
            "organization_id": data.organization_id,
            "organization_name": data.organization_name,
            "rise_to_power_year": data.rise_to_power_year,
        },
    )
