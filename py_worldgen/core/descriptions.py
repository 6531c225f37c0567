"""
Description templates for the upper world levels.

Lower levels (organizations, standout mortals, dungeons, lineages) keep their
description tables next to the generator that uses them.
"""

from typing import Optional, Sequence

from .models import (
    AncientCreatureTraits,
    DemiGodTraits,
    DivineExperimentTraits,
    FallenDivineTraits,
    HalfGodTraits,
    PrimordialSpawnTraits,
)

PRIMORDIAL_DESCRIPTIONS = {
    "space": "{name} is the fundamental force of space itself, the emptiness between all things, "
    "the nothingness and absence that contains existence.",
    "time": "{name} is the eternal flow of time, the progression of moments from past to future, "
    "the infinite and endless.",
    "light": "{name} is the radiance that illuminates all, the source of vision and clarity.",
    "dark": "{name} is the shadow that conceals, the absence of light and the unknown.",
    "order": "{name} is the structure and pattern that brings stability to chaos.",
    "chaos": "{name} is the entropy and disorder that breaks down all structure.",
}

COSMIC_DESCRIPTIONS = {
    "rock": "{name} shaped the mountains and stones of the world, forging the very foundation of the land.",
    "wind": "{name} breathed life into the skies, creating the winds and storms that move across the world.",
    "water": "{name} filled the oceans and rivers, bringing the flow of life to all corners of the world.",
    "life": "{name} seeded the world with living things, bringing forth all mortal races and creatures.",
    "fire": "{name} kindled the flames of creation, bringing warmth and light to the world.",
    "earth": "{name} molded the soil and ground, creating the fertile earth that sustains life.",
    "ice": "{name} shaped the frozen lands, creating glaciers and tundras in the coldest regions.",
    "magic": "{name} wove magic throughout the world, infusing the very fabric of reality "
    "with mystical power and arcane energy.",
}

CREATURE_PHRASES = {
    "hydra": "a many-headed serpent",
    "kraken": "a colossal sea monster",
    "phoenix": "an immortal fire bird",
    "colossus": "a giant stone guardian",
    "leviathan": "a massive sea serpent",
    "behemoth": "a titanic land beast",
    "basilisk": "a deadly serpent king",
    "chimera": "a fire-breathing hybrid",
    "griffin": "a noble eagle-lion hybrid",
    "roc": "a gigantic bird of prey",
    "sphinx": "a wise riddle-keeper",
    "wyvern": "a two-legged dragon",
    "manticore": "a man-eating beast",
    "cerberus": "a three-headed hound",
    "pegasus": "a winged horse",
    "unicorn": "a pure horned steed",
    "dragon_turtle": "a massive armored sea dragon",
    "tarrasque": "an unstoppable world-ender",
}

FALLEN_PHRASES = {
    "fallen_angel": "a once-celestial angel",
    "risen_demon": "a demon who ascended from darkness",
    "lost_celestial": "a celestial being who lost their way",
    "corrupted_seraph": "a corrupted seraph of light",
    "exiled_archon": "an exiled archon of law",
    "tainted_deva": "a tainted deva of goodness",
    "dark_angel": "a dark angel of shadow",
    "infernal_being": "an infernal being of fire",
}

SPAWN_PHRASES = {
    "chaos_born": "born from pure chaos",
    "order_manifest": "a manifestation of order",
    "time_child": "a child of time",
    "space_fragment": "a fragment of space",
    "light_shard": "a shard of light",
    "dark_essence": "an essence of darkness",
}

FEATURE_PHRASES = {
    "wings": "soaring wings",
    "scales": "reptilian scales",
    "fur": "thick fur",
    "feathers": "colorful feathers",
    "claws": "razor-sharp claws",
    "fangs": "venomous fangs",
    "horns": "mighty horns",
    "tentacles": "writhing tentacles",
    "tail": "a powerful tail",
    "mane": "a flowing mane",
    "shell": "a protective shell",
    "venom": "deadly venom",
    "multiple_heads": "multiple heads",
    "multiple_limbs": "extra limbs",
    "gills": "aquatic gills",
    "trunk": "a prehensile trunk",
    "hooves": "heavy hooves",
    "paws": "dexterous paws",
    "beak": "a sharp beak",
    "antlers": "majestic antlers",
    "scorpion_stinger": "a scorpion-like stinger",
    "web_spinner": "web-spinning glands",
    "compound_eyes": "compound insect eyes",
    "carapace": "a chitinous carapace",
    "antenna": "sensitive antennae",
    "finger_like_mandibles": "finger-like mandibles",
    "bat_wings": "leathery bat wings",
    "bird_wings": "feathered bird wings",
    "insect_wings": "translucent insect wings",
    "bony_protrusions": "bony protrusions",
    "patches_of_hair": "patches of matted hair",
    "skin_boils": "festering skin boils",
    "crawling_with_maggots": "maggots crawling across its body",
    "searing_hot_to_touch": "searing hot to the touch",
    "emits_noxious_fumes": "emits noxious fumes",
    "breathes_thick_smokescreen": "breathes a thick smokescreen",
    "dims_light_around_it": "dims light around it",
    "rusts_metal_with_spit": "rusts metal with its spit",
}


def primordial_description(primordial_type: str, name: str) -> str:
    template = PRIMORDIAL_DESCRIPTIONS.get(
        primordial_type, "{name} is a primordial force of the universe."
    )
    return template.format(name=name)


def cosmic_description(element: str, name: str) -> str:
    template = COSMIC_DESCRIPTIONS.get(element, "{name} is a cosmic creator of " + element + ".")
    return template.format(name=name)


def geography_description(geography_type: str, name: str) -> str:
    kind = geography_type.replace("_", " ")
    return f"{name} is a {kind}, shaped by the cosmic forces that created the world."


def join_phrases(phrases: Sequence[str]) -> str:
    """a, b, and c"""
    if len(phrases) <= 1:
        return "".join(phrases)
    if len(phrases) == 2:
        return f"{phrases[0]} and {phrases[1]}"
    return ", ".join(phrases[:-1]) + f", and {phrases[-1]}"


def divine_experiment_description(name: str, features: Sequence[str]) -> str:
    """
    Describe a divine experiment from its feature set.

    One to three features get hand-written sentences; larger sets share one
    list sentence with a serial comma, however many features there are.
    """
    if not features:
        return (
            f"{name} is a divine experiment, a creature forged by the gods "
            "combining features from multiple beings."
        )

    phrases = [FEATURE_PHRASES.get(f, f.replace("_", " ")) for f in features]
    if len(phrases) == 1:
        return (
            f"{name} is a divine experiment, a creature with {phrases[0]}, "
            "forged by the gods as a test of creation."
        )
    if len(phrases) == 2:
        return (
            f"{name} is a divine experiment, a hybrid creature combining "
            f"{join_phrases(phrases)}, created by the gods in their experiments."
        )
    if len(phrases) == 3:
        return (
            f"{name} is a divine experiment, a complex chimera with "
            f"{join_phrases(phrases)}, forged by divine will."
        )
    return (
        f"{name} is a divine experiment, a nightmarish fusion of multiple creatures, "
        f"bearing {join_phrases(phrases)}, created as a testament to divine power."
    )


def demigod_description(name: str, traits: Optional[DemiGodTraits]) -> str:
    """Description keyed on the demi-god's trait payload."""
    if isinstance(traits, HalfGodTraits):
        race = traits.race.replace("_", " ")
        return (
            f"{name} is a half-divine being, born of divine essence and {race} blood, "
            "bridging the mortal and divine realms."
        )
    if isinstance(traits, AncientCreatureTraits):
        phrase = CREATURE_PHRASES.get(traits.creature, f"an ancient {traits.creature}")
        return f"{name} is {phrase}, one of the first creatures born at the dawn of creation."
    if isinstance(traits, DivineExperimentTraits):
        return divine_experiment_description(name, traits.features)
    if isinstance(traits, FallenDivineTraits):
        phrase = FALLEN_PHRASES.get(traits.fallen_type, f"a {traits.fallen_type}")
        return (
            f"{name} is {phrase}, cast out from the divine realm "
            "and now dwelling in the mortal world."
        )
    if isinstance(traits, PrimordialSpawnTraits):
        phrase = SPAWN_PHRASES.get(traits.spawn_type, f"born from {traits.spawn_type}")
        return (
            f"{name} is {phrase}, a direct offspring of the primordial forces "
            "that shaped existence."
        )
    if traits is not None and traits.kind == "ascended_mortal":
        return (
            f"{name} is a mortal who achieved divinity through great deeds, sacrifice, "
            "or divine favor, transcending the limits of mortality."
        )
    return f"{name} is a demi-god, a being of divine power and mortal connection."
