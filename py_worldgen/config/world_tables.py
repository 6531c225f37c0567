"""
Affinity tables that bias parent selection toward thematic consistency.

These are built once at import and never mutated. Stage generators read them
instead of hard-coding their own copies.
"""

from types import MappingProxyType

PRIMORDIAL_TYPES = ("space", "time", "light", "dark", "order", "chaos")

COSMIC_ELEMENTS = ("rock", "wind", "water", "life", "fire", "earth", "ice", "magic")

# Elements that pick a random primordial parent instead of the round-robin one.
FREE_PARENT_ELEMENTS = frozenset({"ice", "magic"})

# Planned feature count per geography kind, in generation order.
GEOGRAPHY_PLAN = (
    ("continent", 3),
    ("ocean", 2),
    ("mountain_range", 5),
    ("river", 8),
    ("forest", 6),
    ("desert", 2),
    ("underground_system", 3),
    ("swamp", 3),
    ("tundra", 2),
    ("canyon", 4),
    ("archipelago", 2),
    ("fjord", 2),
    ("steppe", 3),
    ("jungle", 4),
    ("badlands", 2),
    ("glacier", 2),
    ("marsh", 3),
    ("plateau", 3),
    ("coast", 6),
    ("bay", 4),
    ("peninsula", 3),
)

# Preferred creator elements per geography kind, strongest first.
GEOGRAPHY_ELEMENT_AFFINITY = MappingProxyType({
    "ocean": ("water",),
    "river": ("water",),
    "swamp": ("water",),
    "marsh": ("water",),
    "fjord": ("water",),
    "bay": ("water",),
    "coast": ("water",),
    "peninsula": ("water",),
    "volcano": ("fire",),
    "desert": ("fire",),
    "badlands": ("fire",),
    "glacier": ("ice",),
    "tundra": ("ice",),
    "forest": ("life",),
    "jungle": ("life",),
    "plains": ("life",),
    "steppe": ("life",),
    "mountain_range": ("rock", "earth"),
    "canyon": ("rock", "earth"),
    "plateau": ("rock", "earth"),
    "underground_system": ("rock", "earth"),
    "continent": ("earth", "rock"),
    "island": ("earth", "water"),
    "archipelago": ("water", "earth"),
})

GEOGRAPHY_MAGNITUDE = MappingProxyType({
    "continent": "vast",
    "ocean": "vast",
    "mountain_range": "large",
    "underground_system": "large",
    "forest": "large",
    "desert": "large",
    "tundra": "large",
    "canyon": "large",
    "steppe": "large",
    "jungle": "large",
    "glacier": "large",
    "plateau": "large",
    "island": "small",
    "volcano": "small",
    "bay": "small",
})

# Races each cosmic element brings forth by default.
CREATOR_RACES = MappingProxyType({
    "rock": ("dwarf", "gnome"),
    "wind": ("aarakocra", "dragon"),
    "water": ("merfolk",),
    "life": ("human",),
    "fire": ("orc", "goblin", "kobold"),
    "earth": ("elf", "halfling"),
})

# Secondary race -> element affinity for races outside CREATOR_RACES.
RACE_ELEMENT_AFFINITY = MappingProxyType({
    "human": ("life",),
    "dwarf": ("rock", "earth"),
    "elf": ("life",),
    "halfling": ("life", "earth"),
    "gnome": ("earth", "magic"),
    "dragon": ("fire", "earth"),
    "construct": ("earth",),
    "elemental": ("fire", "water", "earth", "wind"),
    "fey": ("life", "magic"),
    "giant": ("earth", "rock"),
    "tiefling": ("fire",),
    "genasi": ("fire", "water", "earth", "wind"),
    "kobold": ("earth",),
    "lizardfolk": ("water", "life"),
    "kenku": ("wind",),
    "triton": ("water",),
    "goliath": ("earth", "rock"),
    "drow": ("magic",),
    "wood_elf": ("life",),
    "high_elf": ("magic",),
    "deep_gnome": ("earth",),
    "rock_gnome": ("earth", "rock"),
    "forest_gnome": ("life",),
})

# lifespan (min, max), traits, preferred homeland kinds
RACE_CHARACTERISTICS = MappingProxyType({
    "human": ((60, 100), ("Adaptable", "Ambitious", "Resourceful"), ("continent", "plains", "coast")),
    "dwarf": ((200, 350), ("Hardy", "Skilled Craftsmen", "Tunnel-sighted"), ("mountain_range", "underground_system")),
    "elf": ((500, 750), ("Long-lived", "Graceful", "Magically Attuned"), ("forest",)),
    "orc": ((40, 60), ("Strong", "Aggressive", "Tribal"), ("desert", "badlands")),
    "goblin": ((20, 40), ("Quick", "Cunning", "Resourceful"), ("swamp", "underground_system")),
    "halfling": ((80, 120), ("Lucky", "Stealthy", "Content"), ("plains",)),
    "gnome": ((300, 500), ("Inventive", "Curious", "Magical"), ("forest",)),
    "dragon": ((2000, 5000), ("Powerful", "Ancient", "Hoarding"), ("mountain_range",)),
    "undead": ((0, 0), ("Undying", "Dark", "Unholy"), ()),
    "construct": ((0, 0), ("Artificial", "Durable", "Obedient"), ()),
    "elemental": ((1000, 3000), ("Elemental", "Powerful", "Primordial"), ("volcano", "ocean", "mountain_range")),
    "fey": ((500, 1000), ("Magical", "Trickster", "Nature-bound"), ("forest",)),
    "giant": ((400, 600), ("Massive", "Strong", "Ancient"), ("mountain_range",)),
    "tiefling": ((80, 120), ("Fiend-touched", "Charismatic", "Resilient"), ()),
    "aasimar": ((100, 150), ("Celestial-touched", "Radiant", "Divine"), ()),
    "genasi": ((90, 130), ("Elemental-touched", "Adaptable", "Magical"), ()),
    "kobold": ((50, 80), ("Small", "Crafty", "Tunnel-dwelling"), ("underground_system",)),
    "lizardfolk": ((60, 90), ("Reptilian", "Aquatic", "Primitive"), ("swamp", "jungle")),
    "yuan_ti": ((100, 150), ("Serpentine", "Cunning", "Magical"), ("jungle",)),
    "kenku": ((50, 80), ("Avian", "Mimics", "Thieves"), ()),
    "tabaxi": ((70, 100), ("Feline", "Curious", "Nimble"), ("jungle", "forest")),
    "triton": ((150, 200), ("Aquatic", "Noble", "Warrior"), ("ocean", "coast")),
    "goliath": ((70, 100), ("Large", "Strong", "Mountain-dwellers"), ("mountain_range", "plateau")),
    "bugbear": ((60, 90), ("Large", "Stealthy", "Aggressive"), ("forest",)),
    "hobgoblin": ((60, 90), ("Military", "Disciplined", "Organized"), ()),
    "orc_variant": ((40, 60), ("Strong", "Tribal", "Warlike"), ("desert", "badlands")),
    "drow": ((500, 750), ("Dark", "Spider-worshiping", "Elite"), ("underground_system",)),
    "wood_elf": ((500, 750), ("Forest-dwelling", "Wild", "Natural"), ("forest",)),
    "high_elf": ((500, 750), ("Noble", "Magical", "Refined"), ()),
    "deep_gnome": ((300, 500), ("Underground", "Stone-work", "Cunning"), ("underground_system",)),
    "rock_gnome": ((300, 500), ("Inventive", "Mechanical", "Curious"), ()),
    "forest_gnome": ((300, 500), ("Nature-bond", "Illusionist", "Small"), ("forest",)),
    "aarakocra": ((30, 50), ("Avian", "Sky-born", "Flying"), ("mountain_range", "plateau")),
    "merfolk": ((80, 150), ("Aquatic", "Amphibious", "Ocean-dwelling"), ("ocean", "coast")),
})

RACE_CONCEPT_PREFERENCES = MappingProxyType({
    "human": ("war", "justice", "love", "wealth", "trade", "courage", "honor", "fertility", "harvest"),
    "dwarf": ("craft", "forge", "stone", "metal", "mining", "smithing", "wealth", "honor", "order"),
    "elf": ("nature", "forest", "wisdom", "magic", "art", "music", "beauty", "life", "growth"),
    "orc": ("war", "battle", "blood", "strength", "rage", "fury", "chaos", "hunting", "beasts"),
    "goblin": ("trickery", "cunning", "secrets", "stealth", "greed", "chaos", "darkness", "mischief"),
    "halfling": ("comfort", "home", "community", "stories", "feast", "joy", "peace", "love", "harvest"),
    "gnome": ("invention", "curiosity", "tinkering", "wonder", "knowledge", "craft", "art", "magic", "wisdom"),
    "kobold": ("survival", "traps", "caves", "hoarding", "servitude", "cunning", "secrets", "darkness", "fear"),
    "dragon": ("power", "treasure", "dominance", "ancient", "magic", "wisdom", "strength", "hoarding", "beasts"),
    "aarakocra": ("sky", "wind", "freedom", "travel", "heights", "nature", "peace", "wisdom", "joy"),
    "merfolk": ("sea", "water", "depths", "currents", "mysteries", "beauty", "nature", "life", "healing"),
})

DEFAULT_CONCEPT_PREFERENCES = ("wisdom", "strength", "courage")

RACE_ORGANIZATION_KINDS = MappingProxyType({
    "human": ("kingdom", "city", "town", "guild", "empire"),
    "dwarf": ("kingdom", "city", "guild", "clan", "mountainhome", "hold", "forge"),
    "elf": ("realm", "city", "tribe", "circle", "canopy", "grove"),
    "orc": ("horde", "tribe", "stronghold", "band"),
    "goblin": ("tribe", "nest", "band", "clan"),
    "halfling": ("town", "warren", "tribe"),
    "gnome": ("town", "enclave", "city"),
    "dragon": ("lair", "court"),
    "undead": ("crypt", "sanctuary"),
    "fey": ("court", "circle"),
    "giant": ("stronghold", "tribe"),
    "kobold": ("nest", "den", "tribe"),
    "aarakocra": ("flock", "tribe", "colony"),
    "merfolk": ("school", "pod", "port"),
})

DEFAULT_ORGANIZATION_KINDS = ("kingdom", "city", "tribe")

ORGANIZATION_DENSITY = MappingProxyType({"sparse": 0.5, "normal": 1.0, "dense": 1.5})
