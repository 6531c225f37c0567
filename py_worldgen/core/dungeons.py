"""
Level 7.5: dungeons and their bosses.

Generation runs in two phases. First every dungeon is created: organizations
pass a probabilistic gate, and dungeon-building standout mortals always build
one and become its final boss. Then bosses are assigned from pools that are
drained on assignment, so no demi-god or standout mortal guards two dungeons.
Slots no entity can fill get a procedurally generated boss derived only from
the dungeon seed and the slot.
"""

from __future__ import annotations

from typing import List, Optional, Set

import structlog

from .alea_prng import AleaPRNG
from .context import GenerationContext
from .exceptions import NoGeographyError
from .models import (
    Alignment,
    BossKind,
    CreatorKind,
    DemiGod,
    Dungeon,
    DungeonBoss,
    DungeonKind,
    Organization,
    StandoutMortal,
)
from .name_generator import claim_name, simple_hash

logger = structlog.get_logger()

MID_BOSS_INTERVAL = 25
MIN_DEPTH = 50
MAX_DEPTH = 100

DUNGEON_LIKELY_KINDS = frozenset({"kingdom", "horde", "realm", "stronghold"})
DUNGEON_PURPOSE_KEYWORDS = ("mining", "fortress", "citadel", "stronghold", "vault")

DUNGEON_CREATOR_TYPES = frozenset(
    {"necromancer", "wizard", "archmage", "lich", "sorcerer", "warlock", "villain", "vampire"}
)
TOWER_BUILDER_TYPES = frozenset({"necromancer", "lich", "wizard", "archmage"})

DUNGEON_AGES = (-50, -100, -200, -500, -1000, -2000)

ORGANIZATION_PURPOSES = (
    "mining operation",
    "fortress",
    "vault",
    "prison",
    "temple",
    "laboratory",
    "barracks",
    "warehouse",
    "citadel",
)

MORTAL_PURPOSES = {
    "necromancer": ("necromantic research", "tower of undeath", "dark experiments"),
    "lich": ("phylactery vault", "undead sanctum", "dark citadel"),
    "wizard": ("magical research", "spell library", "arcane laboratory"),
    "archmage": ("grand library", "arcane tower", "spell repository"),
    "sorcerer": ("power focus", "magical nexus"),
    "warlock": ("pact sanctum", "dark altar"),
    "villain": ("hidden lair", "secret base"),
    "vampire": ("blood sanctum", "underground crypt"),
}

RACE_BOSS_TYPES = {
    "Orc": ("War-Chief", "Warlord", "Brute", "Berserker"),
    "Goblin": ("Chieftain", "King", "Overlord"),
    "Human": ("Bandit Lord", "Dark Knight", "Cult Leader"),
    "Elf": ("Dark Elf", "Corrupted Mage"),
    "Dwarf": ("King", "Lord"),
}
DEFAULT_RACE_BOSS_TYPES = ("Leader", "Lord", "King")

FALLBACK_BOSS_TYPES = (
    "Orc War-Chief",
    "Lich",
    "Necromancer",
    "Dragon",
    "Troll King",
    "Giant",
    "Demon",
    "Undead Lord",
)

BOSS_NAME_PREFIXES = ("The", "Lord", "King", "Master", "General")


def procgen_boss(
    dungeon_seed: str,
    slot: str,
    level: int,
    race_name: Optional[str] = None,
) -> DungeonBoss:
    """
    Synthesize a boss for an unfilled slot.

    The identity depends only on the boss seed ``{dungeon_seed}-boss-{slot}-{level}``,
    so the same dungeon always yields the same proc-gen boss.

    Args:
        dungeon_seed: Seed of the dungeon
        slot: "final" or "mid"
        level: Dungeon level of the slot
        race_name: Display name of the dungeon creator's race, for theming

    Returns:
        Proc-gen dungeon boss
    """
    boss_seed = f"{dungeon_seed}-boss-{slot}-{level}"
    boss_rng = AleaPRNG(boss_seed)

    if race_name:
        themes = RACE_BOSS_TYPES.get(race_name, DEFAULT_RACE_BOSS_TYPES)
        boss_type = f"{race_name} {boss_rng.choice(themes)}"
        boss_race = race_name
    else:
        boss_type = boss_rng.choice(FALLBACK_BOSS_TYPES)
        boss_race = "Orc" if "Orc" in boss_type else None

    prefix = BOSS_NAME_PREFIXES[simple_hash(boss_seed) % len(BOSS_NAME_PREFIXES)]

    return DungeonBoss(
        level=level,
        boss_id=f"procgen-boss-{boss_seed}",
        boss_type=BossKind.PROCGEN,
        boss_name=f"{prefix} {boss_type}",
        boss_race=boss_race,
        boss_alignment=Alignment.EVIL,
    )


def mid_boss_levels(depth: int) -> List[int]:
    """Every multiple of 25 strictly below the final level."""
    return list(range(MID_BOSS_INTERVAL, depth, MID_BOSS_INTERVAL))


def _demigod_boss(demigod: DemiGod, level: int) -> DungeonBoss:
    return DungeonBoss(
        level=level,
        boss_id=demigod.id,
        boss_type=BossKind.DEMIGOD,
        boss_name=demigod.name,
        boss_alignment=demigod.alignment,
    )


def _mortal_boss(mortal: StandoutMortal, level: int) -> DungeonBoss:
    return DungeonBoss(
        level=level,
        boss_id=mortal.id,
        boss_type=BossKind.STANDOUT_MORTAL,
        boss_name=mortal.name,
        boss_race=mortal.race,
        boss_alignment=mortal.alignment,
    )


class DungeonGenerator:
    """Generates dungeons and assigns every boss slot."""

    async def generate(self, context: GenerationContext) -> List[Dungeon]:
        """
        Generate dungeons from organizations and standout mortals.

        Args:
            context: Generation context

        Returns:
            Dungeons with final and mid bosses assigned

        Raises:
            NoGeographyError: a dungeon needs a location and no geography exists
        """
        if not context.organizations and not context.standout_mortals:
            logger.warning("No organizations or standout mortals found, skipping dungeon generation")
            return []

        if not context.geography:
            raise NoGeographyError("Geography must be generated before dungeons")

        logger.info("Generating dungeons", seed=context.seed)

        dungeons: List[Dungeon] = []
        used_names: Set[str] = set()

        for org in context.organizations:
            if self._organization_builds_dungeon(org, context.rng):
                dungeons.append(self._dungeon_from_organization(org, context, used_names))

        for mortal in context.standout_mortals:
            if mortal.standout_type in DUNGEON_CREATOR_TYPES:
                dungeons.append(self._dungeon_from_mortal(mortal, context, used_names))

        self._assign_bosses(dungeons, context)

        logger.info(
            f"Generated {len(dungeons)} dungeons",
            towers=sum(1 for d in dungeons if d.dungeon_type == DungeonKind.TOWER),
        )
        return dungeons

    def _organization_builds_dungeon(self, org: Organization, rng: AleaPRNG) -> bool:
        probability = 0.1
        if org.magnitude in DUNGEON_LIKELY_KINDS:
            probability = 0.3
        purpose = org.purpose.lower()
        if any(keyword in purpose for keyword in DUNGEON_PURPOSE_KEYWORDS):
            probability = 0.7
        return rng.random() < probability

    def _dungeon_from_organization(
        self, org: Organization, context: GenerationContext, used_names: Set[str]
    ) -> Dungeon:
        rng = context.rng
        location_id = org.location or rng.choice(context.geography).id

        has_tower_event = any(
            e.type == "built_tower" and e.location_id == location_id for e in context.world_events
        )
        dungeon_type = DungeonKind.TOWER if has_tower_event else DungeonKind.DUNGEON

        purpose_text = org.purpose.lower()
        if "mining" in purpose_text:
            purpose = "mining operation"
        elif "fortress" in purpose_text or "stronghold" in purpose_text:
            purpose = "fortress"
        else:
            purpose = rng.choice(ORGANIZATION_PURPOSES)

        age = rng.choice(DUNGEON_AGES)
        depth = rng.randint(MIN_DEPTH, MAX_DEPTH)

        prefix = rng.choice(("Ancient", "Forgotten", "Dark", "Cursed", "Lost"))
        if dungeon_type == DungeonKind.TOWER:
            suffix = rng.choice(("Tower", "Spire", "Keep", "Citadel", "Fortress"))
        else:
            suffix = rng.choice(("Caverns", "Depths", "Catacombs", "Mines", "Labyrinth"))
        name = f"{org.name}'s {suffix}" if rng.random() < 0.3 else f"{prefix} {suffix}"
        name = claim_name(name, rng, used_names)

        return Dungeon(
            id=f"dungeon-org-{org.id}",
            name=name,
            description=f"A {dungeon_type.value} built by {org.name} as a {purpose}.",
            parent_id=org.id,
            created_at=age,
            discovered_at=context.discovered_at,
            dungeon_type=dungeon_type,
            location=location_id,
            created_by=CreatorKind.ORGANIZATION,
            creator_id=org.id,
            purpose=purpose,
            age=age,
            depth=depth,
            seed=f"{context.seed}-dungeon-{org.id}",
            metadata={"organization_magnitude": org.magnitude, "organization_race": org.race},
        )

    def _dungeon_from_mortal(
        self, mortal: StandoutMortal, context: GenerationContext, used_names: Set[str]
    ) -> Dungeon:
        rng = context.rng

        org = context.find_organization(mortal.organization)
        if org is not None and org.location:
            location_id = org.location
        else:
            location_id = rng.choice(context.geography).id

        is_tower = mortal.standout_type in TOWER_BUILDER_TYPES
        dungeon_type = DungeonKind.TOWER if is_tower else DungeonKind.DUNGEON
        purpose = rng.choice(MORTAL_PURPOSES.get(mortal.standout_type, ("lair", "sanctum")))
        age = rng.choice(DUNGEON_AGES)
        depth = rng.randint(MIN_DEPTH, MAX_DEPTH)

        if is_tower and rng.random() < 0.7:
            name = f"{mortal.name}'s Tower"
        else:
            prefix = rng.choice(("Dark", "Forgotten", "Ancient", "Cursed"))
            suffixes = ("Tower", "Spire", "Keep") if is_tower else ("Sanctum", "Lair", "Crypt")
            name = f"{prefix} {rng.choice(suffixes)}"
        name = claim_name(name, rng, used_names)

        kind = mortal.standout_type.replace("_", " ")
        return Dungeon(
            id=f"dungeon-mortal-{mortal.id}",
            name=name,
            description=f"A {dungeon_type.value} built by {mortal.name}, a {kind}, as a {purpose}.",
            parent_id=mortal.id,
            created_at=age,
            discovered_at=context.discovered_at,
            dungeon_type=dungeon_type,
            location=location_id,
            created_by=CreatorKind.STANDOUT_MORTAL,
            creator_id=mortal.id,
            purpose=purpose,
            age=age,
            depth=depth,
            seed=f"{context.seed}-dungeon-{mortal.id}",
            # The creator guards its own dungeon
            final_boss=_mortal_boss(mortal, depth),
            metadata={
                "mortal_type": mortal.standout_type,
                "mortal_race": mortal.race,
                "mortal_alignment": mortal.alignment.value,
            },
        )

    def _assign_bosses(self, dungeons: List[Dungeon], context: GenerationContext) -> None:
        """
        Fill every empty final boss slot and every mid-boss slot.

        Both pools are drained on assignment and shared by all dungeons. The
        mortal pool excludes every dungeon creator, so a creator is never
        reused as another dungeon's boss.
        """
        rng = context.rng
        creator_ids = {
            d.creator_id for d in dungeons if d.created_by == CreatorKind.STANDOUT_MORTAL
        }
        demigod_pool = [d for d in context.demigods if d.is_boss]
        mortal_pool = [
            m for m in context.standout_mortals if m.is_boss and m.id not in creator_ids
        ]

        for dungeon in dungeons:
            race_name = self._creator_race_name(dungeon, context)

            if dungeon.final_boss is None:
                if demigod_pool and rng.random() < 0.6:
                    demigod = demigod_pool.pop(rng.randrange(len(demigod_pool)))
                    dungeon.final_boss = _demigod_boss(demigod, dungeon.depth)
                elif mortal_pool:
                    mortal = mortal_pool.pop(rng.randrange(len(mortal_pool)))
                    dungeon.final_boss = _mortal_boss(mortal, dungeon.depth)
                elif demigod_pool:
                    demigod = demigod_pool.pop(rng.randrange(len(demigod_pool)))
                    dungeon.final_boss = _demigod_boss(demigod, dungeon.depth)
                else:
                    dungeon.final_boss = procgen_boss(
                        dungeon.seed, "final", dungeon.depth, race_name
                    )

            mid_bosses = []
            for level in mid_boss_levels(dungeon.depth):
                if rng.random() < 0.3 and mortal_pool:
                    mortal = mortal_pool.pop(rng.randrange(len(mortal_pool)))
                    mid_bosses.append(_mortal_boss(mortal, level))
                else:
                    mid_bosses.append(procgen_boss(dungeon.seed, "mid", level, race_name))
            dungeon.mid_bosses = mid_bosses

    def _creator_race_name(self, dungeon: Dungeon, context: GenerationContext) -> Optional[str]:
        if dungeon.created_by == CreatorKind.ORGANIZATION:
            creator = context.find_organization(dungeon.creator_id)
        else:
            creator = next(
                (m for m in context.standout_mortals if m.id == dungeon.creator_id), None
            )
        if creator is None:
            return None
        race = context.find_race(creator.race)
        return race.name if race else None
