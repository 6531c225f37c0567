"""
Level 6.5: standout mortals, the heroes, villains and rulers of history.

Standouts are born inside organizations where possible, falling back to
geography when no organization exists. Necromancers leave a built_tower
event behind, which dungeon generation later reads.
"""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

import structlog

from ..config.name_templates import RACE_PERSONAL_NAMES
from .alea_prng import AleaPRNG
from .context import GenerationContext
from .exceptions import GenerationOrderError
from .models import Alignment, MortalRace, Organization, StandoutMortal, WorldEvent
from .name_generator import claim_name

logger = structlog.get_logger()

GOOD = Alignment.GOOD
NEUTRAL = Alignment.NEUTRAL
EVIL = Alignment.EVIL

# (type, count, base year)
STANDOUT_PLAN: Tuple[Tuple[str, int, int], ...] = (
    ("king", 3, -2300),
    ("queen", 2, -2300),
    ("prince", 2, -2250),
    ("princess", 2, -2250),
    ("emperor", 1, -2200),
    ("empress", 1, -2200),
    ("founder", 4, -2400),
    ("general", 3, -2350),
    ("commander", 3, -2300),
    ("war_chief", 2, -2250),
    ("marshal", 2, -2200),
    ("admiral", 1, -2150),
    ("knight", 4, -2400),
    ("champion", 3, -2350),
    ("hero", 5, -2500),
    ("dragon_slayer", 2, -2100),
    ("giant_slayer", 1, -2050),
    ("demon_slayer", 1, -2000),
    ("monster_slayer", 2, -1950),
    ("savior", 3, -2450),
    ("protector", 2, -2400),
    ("guardian", 2, -2350),
    ("wizard", 4, -2400),
    ("archmage", 2, -2350),
    ("necromancer", 2, -1900),
    ("lich", 1, -2150),
    ("sorcerer", 2, -2300),
    ("warlock", 1, -2250),
    ("witch", 2, -2200),
    ("enchanter", 2, -2150),
    ("alchemist", 2, -2100),
    ("villain", 3, -2450),
    ("vampire", 1, -2200),
    ("high_priest", 2, -2000),
    ("oracle", 1, -1850),
    ("prophet", 2, -1800),
)

TITLES = {
    "king": "King",
    "queen": "Queen",
    "prince": "Prince",
    "princess": "Princess",
    "emperor": "Emperor",
    "empress": "Empress",
    "founder": "Founder",
    "general": "General",
    "commander": "Commander",
    "war_chief": "War-Chief",
    "marshal": "Marshal",
    "admiral": "Admiral",
    "knight": "Knight",
    "champion": "Champion",
    "hero": "The Hero",
    "dragon_slayer": "Dragon Slayer",
    "giant_slayer": "Giant Slayer",
    "demon_slayer": "Demon Slayer",
    "monster_slayer": "Monster Slayer",
    "savior": "The Savior",
    "protector": "The Protector",
    "guardian": "The Guardian",
    "wizard": "Wizard",
    "archmage": "Archmage",
    "necromancer": "Necromancer",
    "lich": "Lich",
    "sorcerer": "Sorcerer",
    "warlock": "Warlock",
    "witch": "Witch",
    "enchanter": "Enchanter",
    "alchemist": "Alchemist",
    "villain": "The Villain",
    "vampire": "Vampire Lord",
    "high_priest": "High Priest",
    "oracle": "Oracle",
    "prophet": "Prophet",
}

DESCRIPTIONS = {
    "king": "{name} is a king of the {race}, born in {org} and ruler of their people.",
    "queen": "{name} is a queen of the {race}, born in {org} and ruler of their people.",
    "prince": "{name} is a prince of the {race}, born in {org} and heir to the throne.",
    "princess": "{name} is a princess of the {race}, born in {org} and heir to the throne.",
    "emperor": "{name} is an emperor of the {race}, born in {org} and ruler of vast territories.",
    "empress": "{name} is an empress of the {race}, born in {org} and ruler of vast territories.",
    "founder": "{name} is the founder of {org}, establishing the organization and shaping its destiny.",
    "general": "{name} is a general of the {race}, born in {org} and master of military strategy.",
    "commander": "{name} is a commander of the {race}, born in {org} and leader of warriors.",
    "war_chief": "{name} is a war-chief of the {race}, born in {org} and leader of their warriors.",
    "marshal": "{name} is a marshal of the {race}, born in {org} and organizer of military forces.",
    "admiral": "{name} is an admiral of the {race}, born in {org} and master of naval warfare.",
    "knight": "{name} is a knight of the {race}, born in {org} and renowned for their valor in battle.",
    "champion": "{name} is a champion of the {race}, born in {org} and victor of many battles.",
    "hero": "{name} is a legendary hero of the {race}, born in {org} and renowned for their "
    "courage and deeds.",
    "dragon_slayer": "{name} is a dragon slayer of the {race}, born in {org} and slayer of great wyrms.",
    "giant_slayer": "{name} is a giant slayer of the {race}, born in {org} and slayer of colossal foes.",
    "demon_slayer": "{name} is a demon slayer of the {race}, born in {org} and banisher of infernal beings.",
    "monster_slayer": "{name} is a monster slayer of the {race}, born in {org} and hunter of terrible beasts.",
    "savior": "{name} is a savior of the {race}, born in {org} and rescuer in dire circumstances.",
    "protector": "{name} is a protector of the {race}, born in {org} and defender of the innocent.",
    "guardian": "{name} is a guardian of the {race}, born in {org} and watcher over sacred places.",
    "wizard": "{name} is a powerful wizard of the {race}, born in {org} and master of the arcane arts.",
    "archmage": "{name} is an archmage of the {race}, born in {org} and one of the greatest "
    "magical practitioners.",
    "necromancer": "{name} is a necromancer of the {race}, practicing dark arts in {org} and "
    "master of the undead.",
    "lich": "{name} is a powerful lich of the {race}, achieving undeath in {org} and master of death magic.",
    "sorcerer": "{name} is a sorcerer of the {race}, born in {org} with innate magical power.",
    "warlock": "{name} is a warlock of the {race}, born in {org} and wielder of forbidden magic.",
    "witch": "{name} is a witch of the {race}, born in {org} and practitioner of ancient magic.",
    "enchanter": "{name} is an enchanter of the {race}, born in {org} and master of magical enhancement.",
    "alchemist": "{name} is an alchemist of the {race}, born in {org} and master of transformation.",
    "villain": "{name} is a feared villain of the {race}, born in {org} and known for their dark deeds.",
    "vampire": "{name} is an immortal vampire of the {race}, transformed in {org} and terror of the night.",
    "high_priest": "{name} is a high priest of the {race}, serving the divine in {org} with "
    "unwavering faith.",
    "oracle": "{name} is an oracle of the {race}, seeing the future from {org} and guide to destiny.",
    "prophet": "{name} is a prophet of the {race}, speaking divine words from {org} and voice of the gods.",
}

FIXED_ALIGNMENTS = {
    "knight": GOOD,
    "champion": GOOD,
    "hero": GOOD,
    "dragon_slayer": GOOD,
    "giant_slayer": GOOD,
    "demon_slayer": GOOD,
    "monster_slayer": GOOD,
    "savior": GOOD,
    "protector": GOOD,
    "guardian": GOOD,
    "high_priest": GOOD,
    "prophet": GOOD,
    "wizard": NEUTRAL,
    "archmage": NEUTRAL,
    "enchanter": NEUTRAL,
    "alchemist": NEUTRAL,
    "oracle": NEUTRAL,
    "necromancer": EVIL,
    "lich": EVIL,
    "warlock": EVIL,
    "villain": EVIL,
    "vampire": EVIL,
}

# type -> (threshold, alignment above it, alignment otherwise)
ROLLED_ALIGNMENTS = {
    "king": (0.5, GOOD, NEUTRAL),
    "queen": (0.5, GOOD, NEUTRAL),
    "prince": (0.5, GOOD, NEUTRAL),
    "princess": (0.5, GOOD, NEUTRAL),
    "founder": (0.6, GOOD, NEUTRAL),
    "commander": (0.6, GOOD, NEUTRAL),
    "war_chief": (0.5, NEUTRAL, EVIL),
    "marshal": (0.6, GOOD, NEUTRAL),
    "admiral": (0.6, GOOD, NEUTRAL),
    "sorcerer": (0.5, NEUTRAL, EVIL),
    "witch": (0.5, NEUTRAL, EVIL),
}

# good above 0.7, otherwise a second roll: neutral above 0.3, else evil
AMBITIOUS_TYPES = frozenset({"emperor", "empress", "general"})

POWERS = {
    "hero": ["Heroic Strike", "Inspiring Presence", "Combat Expertise"],
    "knight": ["Heroic Strike", "Inspiring Presence", "Combat Expertise"],
    "champion": ["Heroic Strike", "Inspiring Presence", "Combat Expertise"],
    "villain": ["Dark Strike", "Intimidating Presence", "Combat Mastery"],
    "wizard": ["Arcane Magic", "Spell Mastery", "Mana Control"],
    "sorcerer": ["Arcane Magic", "Spell Mastery", "Mana Control"],
    "archmage": ["Arcane Magic", "Spell Mastery", "Mana Control", "Greater Spellcasting", "Metamagic"],
    "necromancer": ["Necromancy", "Undead Control", "Death Magic"],
    "lich": ["Necromancy", "Undead Control", "Death Magic", "Immortality", "Soul Binding"],
    "vampire": ["Vampiric Touch", "Transformation", "Regeneration", "Immortality"],
    "dragon_slayer": ["Slayer's Strike", "Monster Knowledge", "Combat Mastery", "Fearless"],
    "giant_slayer": ["Slayer's Strike", "Monster Knowledge", "Combat Mastery", "Fearless"],
    "demon_slayer": ["Slayer's Strike", "Monster Knowledge", "Combat Mastery", "Fearless"],
    "monster_slayer": ["Slayer's Strike", "Monster Knowledge", "Combat Mastery", "Fearless"],
    "savior": ["Protective Aura", "Healing Touch", "Inspiring Presence"],
    "protector": ["Protective Aura", "Healing Touch", "Inspiring Presence"],
    "guardian": ["Protective Aura", "Healing Touch", "Inspiring Presence"],
    "general": ["Tactical Genius", "Leadership", "Combat Expertise"],
    "commander": ["Tactical Genius", "Leadership", "Combat Expertise"],
    "marshal": ["Tactical Genius", "Leadership", "Combat Expertise"],
    "admiral": ["Tactical Genius", "Leadership", "Combat Expertise"],
    "king": ["Royal Authority", "Leadership", "Diplomacy"],
    "queen": ["Royal Authority", "Leadership", "Diplomacy"],
    "emperor": ["Royal Authority", "Leadership", "Diplomacy"],
    "empress": ["Royal Authority", "Leadership", "Diplomacy"],
    "prince": ["Royal Authority", "Leadership", "Diplomacy"],
    "princess": ["Royal Authority", "Leadership", "Diplomacy"],
    "founder": ["Visionary Leadership", "Organization", "Influence"],
    "high_priest": ["Divine Magic", "Healing", "Divine Favor"],
    "prophet": ["Divine Magic", "Healing", "Divine Favor"],
    "oracle": ["Foresight", "Divination", "Prophecy"],
    "warlock": ["Forbidden Magic", "Pact Power", "Dark Spells"],
    "witch": ["Ancient Magic", "Herbalism", "Curses"],
    "enchanter": ["Enchantment", "Item Enhancement", "Magical Crafting"],
    "alchemist": ["Alchemy", "Potion Making", "Transmutation"],
}

MAX_LAST_NAME_RETRIES = 100


def personal_names(race_name: str):
    """First and last name pools for a race display name."""
    return RACE_PERSONAL_NAMES.get(race_name, RACE_PERSONAL_NAMES["Human"])


class StandoutGenerator:
    """Generates the fixed plan of remarkable individuals."""

    async def generate(self, context: GenerationContext) -> List[StandoutMortal]:
        if not context.mortal_races:
            raise GenerationOrderError("Mortal races", "standout mortals")

        if not context.organizations:
            logger.warning(
                "No organizations found, standout mortals will use geography for birthplaces"
            )

        logger.info("Generating standout mortals", seed=context.seed)

        standouts: List[StandoutMortal] = []
        used_names: Set[str] = set()
        rng = context.rng

        for standout_type, count, base_year in STANDOUT_PLAN:
            for i in range(count):
                index = len(standouts)
                race = rng.choice(context.mortal_races)
                organization, location_id = self._select_birthplace(context, race)

                name = self._generate_name(standout_type, race, organization, rng, used_names)

                notable_year = base_year - i * 30
                birth_year = notable_year - (30 + rng.randrange(40))
                alignment = self._determine_alignment(standout_type, rng)
                standout_id = f"standout-{standout_type}-{index}"

                standouts.append(
                    StandoutMortal(
                        id=standout_id,
                        standout_type=standout_type,
                        name=name,
                        description=DESCRIPTIONS.get(
                            standout_type,
                            "{name} is a notable " + standout_type + " of the {race}, born in {org}.",
                        ).format(
                            name=name,
                            race=race.name,
                            org=organization.name if organization else "their homeland",
                        ),
                        parent_id=race.id,
                        created_at=birth_year,
                        discovered_at=context.discovered_at,
                        race=race.id,
                        organization=organization.id if organization else None,
                        location=location_id,
                        powers=list(POWERS.get(standout_type, ["Combat Expertise", "Leadership"])),
                        age=-birth_year,
                        alignment=alignment,
                        metadata={"seed": context.seed, "index": index, "notable_year": notable_year},
                    )
                )

                if standout_type == "necromancer" and location_id:
                    context.world_events.append(
                        WorldEvent(
                            type="built_tower",
                            entity_id=standout_id,
                            location_id=location_id,
                            description=(
                                f"{name} built a tower for study and experimentation. The tower's "
                                "construction is magical in nature and radiates a feeling of "
                                "corruption and dread in great distances around it."
                            ),
                            year=notable_year,
                            metadata={
                                "purpose": "necromantic research",
                                "standout_type": standout_type,
                            },
                        )
                    )

        evil = sum(1 for s in standouts if s.is_boss)
        logger.info(f"Generated {len(standouts)} standout mortals", evil=evil)
        return standouts

    def _select_birthplace(
        self, context: GenerationContext, race: MortalRace
    ) -> Tuple[Optional[Organization], Optional[str]]:
        """Race-matching organization first, then any organization, then any geography."""
        rng = context.rng
        if context.organizations:
            own = [o for o in context.organizations if o.race == race.id]
            organization = rng.choice(own or context.organizations)
            return organization, organization.location

        if context.geography:
            return None, rng.choice(context.geography).id
        return None, None

    def _generate_name(
        self,
        standout_type: str,
        race: MortalRace,
        organization: Optional[Organization],
        rng: AleaPRNG,
        used_names: Set[str],
    ) -> str:
        """Title First Last of Organization, unique across the stage."""
        pools = personal_names(race.name)
        first = rng.choice(pools["first"])
        last = rng.choice(pools["last"])
        title = TITLES.get(standout_type, "The Notable")
        suffix = f" of {organization.name}" if organization else ""

        name = f"{title} {first} {last}{suffix}"
        attempts = 0
        while name in used_names and attempts < MAX_LAST_NAME_RETRIES:
            name = f"{title} {first} {rng.choice(pools['last'])}{suffix}"
            attempts += 1

        return claim_name(name, rng, used_names)

    def _determine_alignment(self, standout_type: str, rng: AleaPRNG) -> Alignment:
        if standout_type in FIXED_ALIGNMENTS:
            return FIXED_ALIGNMENTS[standout_type]

        if standout_type in ROLLED_ALIGNMENTS:
            threshold, above, otherwise = ROLLED_ALIGNMENTS[standout_type]
            return above if rng.random() > threshold else otherwise

        if standout_type in AMBITIOUS_TYPES:
            if rng.random() > 0.7:
                return GOOD
            return NEUTRAL if rng.random() > 0.3 else EVIL

        return NEUTRAL
