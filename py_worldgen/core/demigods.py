"""
Level 4: demi-gods.

Six archetypes, each carrying its own trait payload. Evil demi-gods become
boss candidates for dungeons.
"""

from __future__ import annotations

from typing import List, Set

import structlog

from ..config.name_templates import DEMIGOD_NAMES
from .alea_prng import AleaPRNG
from .context import GenerationContext
from .descriptions import demigod_description
from .exceptions import GenerationOrderError
from .models import (
    Alignment,
    AncientCreatureTraits,
    AscendedMortalTraits,
    DemiGod,
    DemiGodTraits,
    DemiGodType,
    DivineExperimentTraits,
    FallenDivineTraits,
    HalfGodTraits,
    PrimordialSpawnTraits,
)
from .name_generator import select_name

logger = structlog.get_logger()

WING_FEATURES = ("bat_wings", "bird_wings", "insect_wings")


class DemiGodGenerator:
    """Generates demi-gods of every archetype."""

    BASE_COUNTS = {
        DemiGodType.HALF_GOD: 2,
        DemiGodType.ANCIENT_CREATURE: 3,
        DemiGodType.DIVINE_EXPERIMENT: 2,
        DemiGodType.FALLEN_DIVINE: 1,
        DemiGodType.ASCENDED_MORTAL: 1,
        DemiGodType.PRIMORDIAL_SPAWN: 1,
    }

    # Race variants collapse onto the half-god race they descend from
    HALF_GOD_RACE_MAP = {
        "drow": "elf",
        "wood_elf": "elf",
        "high_elf": "elf",
        "deep_gnome": "gnome",
        "rock_gnome": "gnome",
        "forest_gnome": "gnome",
        "orc_variant": "orc",
        "tabaxi": "fey",
        "triton": "genasi",
        "goliath": "giant",
        "bugbear": "goblin",
        "hobgoblin": "goblin",
    }
    HALF_GOD_RACES = (
        "human", "elf", "dwarf", "orc", "goblin", "halfling", "gnome", "dragon", "fey", "giant",
        "tiefling", "aasimar", "genasi", "kobold", "lizardfolk", "yuan_ti", "kenku",
        "undead", "construct", "elemental",
    )
    RANDOM_HALF_GOD_RACES = (
        "human", "elf", "dwarf", "orc", "dragon", "fey", "giant",
        "tiefling", "aasimar", "genasi", "kobold", "lizardfolk",
    )

    CREATURES = (
        "hydra", "kraken", "phoenix", "colossus", "leviathan",
        "behemoth", "basilisk", "chimera", "griffin", "roc",
        "sphinx", "wyvern", "manticore", "cerberus", "pegasus",
        "unicorn", "dragon_turtle", "tarrasque",
    )

    FEATURES = (
        "scales", "fur", "feathers", "claws", "fangs",
        "horns", "tentacles", "tail", "mane", "shell", "venom",
        "multiple_heads", "multiple_limbs", "gills", "trunk",
        "hooves", "paws", "beak", "antlers", "wings",
        "scorpion_stinger", "web_spinner", "compound_eyes",
        "carapace", "antenna", "finger_like_mandibles",
        "bat_wings", "bird_wings", "insect_wings",
        "bony_protrusions", "patches_of_hair", "skin_boils",
        "crawling_with_maggots",
        "searing_hot_to_touch", "emits_noxious_fumes",
        "breathes_thick_smokescreen", "dims_light_around_it",
        "rusts_metal_with_spit",
    )

    FALLEN_TYPES = (
        "fallen_angel", "risen_demon", "lost_celestial",
        "corrupted_seraph", "exiled_archon", "tainted_deva",
        "dark_angel", "infernal_being",
    )

    SPAWN_TYPES = (
        "chaos_born", "order_manifest", "time_child",
        "space_fragment", "light_shard", "dark_essence",
    )

    AGE_RANGES = {
        DemiGodType.HALF_GOD: (100, 5000),
        DemiGodType.ANCIENT_CREATURE: (1000000, 10000000),
        DemiGodType.DIVINE_EXPERIMENT: (500000, 5000000),
        DemiGodType.FALLEN_DIVINE: (10000, 100000),
        DemiGodType.ASCENDED_MORTAL: (100, 10000),
        DemiGodType.PRIMORDIAL_SPAWN: (5000000, 50000000),
    }

    # feature -> powers it grants, in the order powers are listed
    FEATURE_POWERS = (
        (("wings",) + WING_FEATURES, ("Flight",)),
        (("venom", "scorpion_stinger"), ("Venomous Attack",)),
        (("multiple_heads",), ("Multi-Sight", "Multiple Attacks")),
        (("gills",), ("Aquatic Adaptation",)),
        (("scales", "carapace", "shell"), ("Natural Armor",)),
        (("claws", "finger_like_mandibles"), ("Razor Claws",)),
        (("web_spinner",), ("Web Spinning",)),
        (("compound_eyes",), ("360-Degree Vision",)),
        (("antenna",), ("Enhanced Senses",)),
        (("searing_hot_to_touch",), ("Searing Touch",)),
        (("emits_noxious_fumes",), ("Toxic Fumes",)),
        (("breathes_thick_smokescreen",), ("Smokescreen",)),
        (("dims_light_around_it",), ("Darkness Aura",)),
        (("rusts_metal_with_spit",), ("Corrosive Spit",)),
    )

    CREATURE_POWERS = {
        "phoenix": ["Immortal Rebirth", "Flame Mastery"],
        "hydra": ["Regeneration", "Multiple Attacks"],
        "kraken": ["Tentacle Mastery", "Deep Sea Control"],
        "basilisk": ["Petrifying Gaze", "Venomous Bite"],
    }

    async def generate(self, context: GenerationContext) -> List[DemiGod]:
        """
        Generate demi-gods.

        Each cosmic creator parents at most one divine experiment until every
        creator has been used once.

        Args:
            context: Generation context with primordials, creators or concepts

        Returns:
            List of demi-gods grouped by archetype
        """
        if not (context.primordials or context.cosmic_creators or context.conceptual_beings):
            raise GenerationOrderError(
                "Primordials, cosmic creators, or conceptual beings", "demi-gods"
            )

        logger.info("Generating demi-gods", seed=context.seed)

        demigods: List[DemiGod] = []
        used_names: Set[str] = set()
        used_experiment_creators: Set[str] = set()

        for type_index, demigod_type in enumerate(DemiGodType):
            count = self.BASE_COUNTS[demigod_type] + context.rng.randrange(2)
            for _ in range(count):
                index = len(demigods)
                name = select_name(DEMIGOD_NAMES[demigod_type.value], context.rng, used_names)
                origin = self._select_origin(context, demigod_type, used_experiment_creators)
                traits = self._generate_traits(context, demigod_type, origin)
                alignment = self._determine_alignment(traits, context.rng)
                low, high = self.AGE_RANGES[demigod_type]
                age = low + context.rng.randrange(high - low)

                demigods.append(
                    DemiGod(
                        id=f"demigod-{demigod_type.value}-{index}",
                        demigod_type=demigod_type,
                        name=name,
                        description=demigod_description(name, traits),
                        parent_id=origin,
                        created_at=-age,
                        discovered_at=context.discovered_at,
                        traits=traits,
                        origin=origin,
                        age=age,
                        powers=self._generate_powers(traits),
                        alignment=alignment,
                        metadata={"seed": context.seed, "index": index, "type_index": type_index},
                    )
                )

        evil = sum(1 for d in demigods if d.is_boss)
        logger.info(f"Generated {len(demigods)} demi-gods", evil=evil)
        return demigods

    def _select_origin(
        self,
        context: GenerationContext,
        demigod_type: DemiGodType,
        used_experiment_creators: Set[str],
    ) -> str:
        rng = context.rng

        if demigod_type in (DemiGodType.HALF_GOD, DemiGodType.ASCENDED_MORTAL):
            if context.conceptual_beings:
                return rng.choice(context.conceptual_beings).id

        if demigod_type == DemiGodType.DIVINE_EXPERIMENT:
            available = [c for c in context.cosmic_creators if c.id not in used_experiment_creators]
            if available:
                creator_id = rng.choice(available).id
                used_experiment_creators.add(creator_id)
                return creator_id
            if context.conceptual_beings:
                return rng.choice(context.conceptual_beings).id

        if demigod_type == DemiGodType.PRIMORDIAL_SPAWN and context.primordials:
            return rng.choice(context.primordials).id

        if context.cosmic_creators:
            return rng.choice(context.cosmic_creators).id
        if context.primordials:
            return rng.choice(context.primordials).id
        return rng.choice(context.conceptual_beings).id

    def _generate_traits(
        self, context: GenerationContext, demigod_type: DemiGodType, origin: str
    ) -> DemiGodTraits:
        rng = context.rng

        if demigod_type == DemiGodType.HALF_GOD:
            concept = next((c for c in context.conceptual_beings if c.id == origin), None)
            if concept is not None and concept.worshiped_by:
                race = context.find_race(concept.worshiped_by[0])
                if race is not None:
                    race_type = self.HALF_GOD_RACE_MAP.get(race.race_type, race.race_type)
                    if race_type not in self.HALF_GOD_RACES:
                        race_type = "human"
                    return HalfGodTraits(race=race_type)
            return HalfGodTraits(race=rng.choice(self.RANDOM_HALF_GOD_RACES))

        if demigod_type == DemiGodType.ANCIENT_CREATURE:
            return AncientCreatureTraits(creature=rng.choice(self.CREATURES))

        if demigod_type == DemiGodType.DIVINE_EXPERIMENT:
            return DivineExperimentTraits(features=self._select_features(rng))

        if demigod_type == DemiGodType.FALLEN_DIVINE:
            return FallenDivineTraits(fallen_type=rng.choice(self.FALLEN_TYPES))

        if demigod_type == DemiGodType.PRIMORDIAL_SPAWN:
            return PrimordialSpawnTraits(spawn_type=rng.choice(self.SPAWN_TYPES))

        return AscendedMortalTraits()

    def _select_features(self, rng: AleaPRNG) -> List[str]:
        """3-6 distinct features; generic wings and the specific wing kinds exclude each other."""
        count = 3 + rng.randrange(4)
        available = list(self.FEATURES)
        selected = []

        while available and len(selected) < count:
            feature = available.pop(rng.randrange(len(available)))
            selected.append(feature)
            if feature == "wings" or feature in WING_FEATURES:
                available = [f for f in available if f != "wings" and f not in WING_FEATURES]

        return selected

    def _generate_powers(self, traits: DemiGodTraits) -> List[str]:
        if isinstance(traits, HalfGodTraits):
            powers = ["Divine Magic", "Mortal Empathy", "Immortal Longevity"]
            if traits.race == "dragon":
                powers.append("Dragon Breath")
            if traits.race == "fey":
                powers.append("Fey Glamour")
            return powers

        if isinstance(traits, AncientCreatureTraits):
            return list(self.CREATURE_POWERS.get(traits.creature, ["Ancient Strength", "Primal Power"]))

        if isinstance(traits, DivineExperimentTraits):
            powers = []
            for features, granted in self.FEATURE_POWERS:
                if any(f in traits.features for f in features):
                    powers.extend(p for p in granted if p not in powers)
            powers.extend(["Divine Resilience", "Hybrid Form"])
            return powers

        if isinstance(traits, FallenDivineTraits):
            return ["Dark Light Manipulation", "Immortal Resilience", "Fallen Grace"]

        if isinstance(traits, PrimordialSpawnTraits):
            return ["Reality Distortion", "Primordial Power", "Formless Shape"]

        return ["Divine Authority", "Mortal Empathy", "Heroic Legacy"]

    def _determine_alignment(self, traits: DemiGodTraits, rng: AleaPRNG) -> Alignment:
        if isinstance(traits, FallenDivineTraits):
            return Alignment.EVIL

        if isinstance(traits, AncientCreatureTraits):
            if traits.creature in ("phoenix", "unicorn"):
                return Alignment.GOOD
            if traits.creature in ("tarrasque", "manticore"):
                return Alignment.EVIL
            return Alignment.NEUTRAL

        if isinstance(traits, DivineExperimentTraits):
            return Alignment.EVIL if rng.random() > 0.7 else Alignment.NEUTRAL

        roll = rng.random()
        if roll < 0.33:
            return Alignment.GOOD
        if roll < 0.66:
            return Alignment.NEUTRAL
        return Alignment.EVIL
