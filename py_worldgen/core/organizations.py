"""Level 6: organizations founded by mortal races."""

from __future__ import annotations

import math
from typing import List, Sequence, Set

import structlog

from ..config.world_tables import (
    DEFAULT_ORGANIZATION_KINDS,
    ORGANIZATION_DENSITY,
    RACE_ORGANIZATION_KINDS,
)
from .alea_prng import AleaPRNG
from .context import GenerationContext
from .exceptions import GenerationOrderError
from .models import Organization, WorldEvent
from .name_generator import generate_organization_name

logger = structlog.get_logger()

ORGANIZATION_BASE_YEAR = -2500


class OrganizationGenerator:
    """Generates race-appropriate organizations, scaled by density."""

    PURPOSES = {
        "empire": "Rule vast territories and maintain imperial power",
        "kingdom": "Govern a realm and protect its people",
        "horde": "Conquer and pillage",
        "realm": "Maintain elven traditions and protect the land",
        "city": "Serve as a center of commerce and culture",
        "town": "Provide a safe haven for travelers and traders",
        "tribe": "Protect tribal lands and maintain traditions",
        "guild": "Train and organize professionals",
        "band": "Adventure and seek fortune",
        "clan": "Maintain family honor and lineage",
        "circle": "Practice and study magic",
        "company": "Trade goods and services",
        "mountainhome": "Mine and forge in the depths",
        "nest": "Scavenge and survive",
        "canopy": "Live in harmony with the forest",
        "warren": "Live peacefully in comfortable burrows",
        "stronghold": "Defend orc territories",
        "enclave": "Preserve knowledge and secrets",
        "colony": "Establish new settlements",
        "sanctuary": "Provide refuge and safety",
        "hold": "Defend dwarven territory",
        "grove": "Protect nature and druidic traditions",
        "den": "Hunt and survive",
        "lair": "Hoard treasure and dominate",
        "court": "Rule with fey magic and whimsy",
        "coven": "Study dark magic",
        "coterie": "Rule over the night",
        "conclave": "Serve the divine",
        "academy": "Teach and learn",
        "colosseum": "Entertain through combat",
        "bazaar": "Trade exotic goods",
        "port": "Facilitate maritime trade",
        "fortress": "Defend strategic locations",
        "temple": "Worship and serve the gods",
        "library": "Preserve and study knowledge",
        "forge": "Create masterworks",
        "tower": "Study arcane mysteries",
        "crypt": "Guard the dead",
        "hive": "Work in perfect unity",
        "pack": "Hunt together",
        "pride": "Rule with majesty",
        "flock": "Soar and migrate",
        "school": "Swim and hunt in the deep",
        "pod": "Travel the currents",
        "murder": "Gather in the shadows",
        "swarm": "Overwhelm through numbers",
    }

    async def generate(
        self, context: GenerationContext, density: str = "normal"
    ) -> List[Organization]:
        """
        Generate organizations for every mortal race.

        Args:
            context: Generation context with mortal races and geography
            density: sparse, normal or dense

        Returns:
            List of organizations; one founded_organization event is appended
            to the context per organization
        """
        if not context.mortal_races:
            raise GenerationOrderError("Mortal races", "organizations")
        if not context.geography:
            raise GenerationOrderError("Geography", "organizations")

        multiplier = ORGANIZATION_DENSITY[density]
        logger.info("Generating organizations", seed=context.seed, density=density)

        organizations: List[Organization] = []
        used_names: Set[str] = set()

        for race_index, race in enumerate(context.mortal_races):
            kinds = RACE_ORGANIZATION_KINDS.get(race.race_type.lower(), DEFAULT_ORGANIZATION_KINDS)
            count = math.ceil((2 + context.rng.randrange(3)) * multiplier)
            selected = self._select_kinds(kinds, count, context.rng)

            for kind_index, kind in enumerate(selected):
                index = len(organizations)
                name = generate_organization_name(kind, race.name, context.rng, used_names)

                location = context.find_geography(race.homeland)
                if location is None:
                    location = context.geography[context.rng.randrange(len(context.geography))]

                founded = ORGANIZATION_BASE_YEAR - race_index * 100 - (100 + kind_index * 50)

                organizations.append(
                    Organization(
                        id=f"org-{kind}-{index}",
                        magnitude=kind,
                        name=name,
                        description=(
                            f"{name} is a {kind} of the {race.name}, established in {location.name}."
                        ),
                        parent_id=location.id,
                        created_at=founded,
                        discovered_at=context.discovered_at,
                        race=race.id,
                        location=location.id,
                        members=context.rng.randint(100, 999),
                        purpose=self.PURPOSES.get(kind, "Serve its members"),
                        founded=founded,
                        metadata={
                            "seed": context.seed,
                            "index": index,
                            "organization_type": kind,
                            "race": race.name,
                        },
                    )
                )
                context.world_events.append(
                    WorldEvent(
                        type="founded_organization",
                        entity_id=f"org-{kind}-{index}",
                        location_id=location.id,
                        description=f"The {race.name} founded {name} in {location.name}.",
                        year=founded,
                    )
                )

        logger.info(f"Generated {len(organizations)} organizations", density=density)
        return organizations

    def _select_kinds(self, kinds: Sequence[str], count: int, rng: AleaPRNG) -> List[str]:
        """Draw up to count distinct kinds; a race never founds two of a kind."""
        pool = list(kinds)
        selected = []
        while pool and len(selected) < count:
            selected.append(pool.pop(rng.randrange(len(pool))))
        return selected
