"""
Level 2.5: geography, the physical features of the world.

Each feature is parented by a cosmic creator picked through the element
affinity table. Magic creators never shape land or water.
"""

from __future__ import annotations

from typing import List, Sequence

import structlog

from ..config.name_templates import GEOGRAPHY_NAMES
from ..config.world_tables import (
    GEOGRAPHY_ELEMENT_AFFINITY,
    GEOGRAPHY_MAGNITUDE,
    GEOGRAPHY_PLAN,
)
from .alea_prng import AleaPRNG
from .context import GenerationContext
from .descriptions import geography_description
from .exceptions import GenerationOrderError
from .models import CosmicCreator, Geography, Location
from .name_generator import select_name

logger = structlog.get_logger()

GEOGRAPHY_CREATED_AT = -4000
MAP_SIZE = 1000


class GeographyGenerator:
    """Generates the fixed geography plan."""

    async def generate(self, context: GenerationContext) -> List[Geography]:
        if not context.cosmic_creators:
            raise GenerationOrderError("Cosmic creators", "geography")

        shapers = [c for c in context.cosmic_creators if c.element != "magic"]
        if not shapers:
            raise GenerationOrderError("Non-magic cosmic creators", "geography")

        logger.info("Generating geography", seed=context.seed)

        geography = []
        used_names = set()
        index = 0
        for geography_type, count in GEOGRAPHY_PLAN:
            for _ in range(count):
                creator_id = self._select_creator(geography_type, shapers, context.rng, index)
                name = select_name(GEOGRAPHY_NAMES[geography_type], context.rng, used_names)

                geography.append(
                    Geography(
                        id=f"geo-{geography_type}-{index}",
                        geography_type=geography_type,
                        name=name,
                        description=geography_description(geography_type, name),
                        parent_id=creator_id,
                        created_at=GEOGRAPHY_CREATED_AT + index,
                        discovered_at=context.discovered_at,
                        created_by=creator_id,
                        magnitude=GEOGRAPHY_MAGNITUDE.get(geography_type, "medium"),
                        location=Location(
                            x=context.rng.randrange(MAP_SIZE),
                            y=context.rng.randrange(MAP_SIZE),
                        ),
                        metadata={
                            "seed": context.seed,
                            "index": index,
                            "geography_type": geography_type,
                        },
                    )
                )
                index += 1

        logger.info(f"Generated {len(geography)} geography features")
        return geography

    def _select_creator(
        self,
        geography_type: str,
        shapers: Sequence[CosmicCreator],
        rng: AleaPRNG,
        index: int,
    ) -> str:
        """
        Pick the creator of a feature.

        Preferred elements are tried strongest first; several creators of the
        same element are chosen between at random. Without any preferred
        creator the pick is round-robin by feature index.
        """
        for element in GEOGRAPHY_ELEMENT_AFFINITY.get(geography_type, ("earth",)):
            preferred = [c for c in shapers if c.element == element]
            if len(preferred) == 1:
                return preferred[0].id
            if preferred:
                return preferred[rng.randrange(len(preferred))].id

        return shapers[index % len(shapers)].id
