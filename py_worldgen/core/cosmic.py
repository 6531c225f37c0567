"""Level 2: cosmic creators, the elemental beings that shaped the world."""

from __future__ import annotations

from typing import List

import structlog

from ..config.name_templates import COSMIC_NAMES
from ..config.world_tables import COSMIC_ELEMENTS, FREE_PARENT_ELEMENTS
from .context import GenerationContext
from .descriptions import cosmic_description
from .exceptions import GenerationOrderError
from .models import CosmicCreator
from .name_generator import select_name

logger = structlog.get_logger()

COSMIC_CREATED_AT = -5000


class CosmicGenerator:
    """Generates one cosmic creator per element, each parented by a primordial."""

    async def generate(self, context: GenerationContext) -> List[CosmicCreator]:
        if not context.primordials:
            raise GenerationOrderError("Primordials", "cosmic creators")

        elements = list(COSMIC_ELEMENTS)
        logger.info("Generating cosmic creators", seed=context.seed, elements=len(elements))

        creators = []
        for index, element in enumerate(elements):
            if element in FREE_PARENT_ELEMENTS:
                parent = context.primordials[context.rng.randrange(len(context.primordials))]
            else:
                parent = context.primordials[index % len(context.primordials)]

            name = select_name(COSMIC_NAMES[element], context.rng)

            creators.append(
                CosmicCreator(
                    id=f"cosmic-{element}-{index}",
                    element=element,
                    name=name,
                    description=cosmic_description(element, name),
                    parent_id=parent.id,
                    created_at=COSMIC_CREATED_AT,
                    discovered_at=context.discovered_at,
                    created_by=parent.id,
                    metadata={"seed": context.seed, "index": index, "element": element},
                )
            )

        return creators
