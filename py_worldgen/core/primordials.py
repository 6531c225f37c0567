"""
Level 1: primordial beings, the fundamental forces of the universe.

Primordials are the roots of the parentage tree and have no parent.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog

from ..config.name_templates import PRIMORDIAL_NAMES
from ..config.world_tables import PRIMORDIAL_TYPES
from .context import GenerationContext
from .descriptions import primordial_description
from .models import PrimordialBeing
from .name_generator import select_name

logger = structlog.get_logger()

PRIMORDIAL_CREATED_AT = -10000


class PrimordialGenerator:
    """Generates one primordial being per fundamental force."""

    DOMAINS = {
        "space": "The emptiness and expanse between all things, the nothingness and absence",
        "time": "The flow and progression of moments, the infinite and endless",
        "light": "Illumination, vision, and clarity",
        "dark": "Shadow, concealment, and the unknown",
        "order": "Structure, pattern, and stability",
        "chaos": "Entropy, disorder, and change",
    }

    INFLUENCES = {
        "space": ["distance", "location", "separation", "containment", "emptiness", "absence", "nothing"],
        "time": ["past", "present", "future", "duration", "infinity", "endlessness", "permanence",
                 "timelessness"],
        "light": ["vision", "clarity", "truth", "warmth"],
        "dark": ["secrets", "mystery", "fear", "rest"],
        "order": ["law", "structure", "predictability", "stability"],
        "chaos": ["change", "randomness", "creativity", "destruction"],
    }

    async def generate(
        self,
        context: GenerationContext,
        custom_types: Optional[Sequence[str]] = None,
    ) -> List[PrimordialBeing]:
        """
        Generate primordial beings.

        Args:
            context: Generation context
            custom_types: Forces to generate instead of the six defaults

        Returns:
            List of primordial beings, in type order
        """
        types = list(custom_types) if custom_types else list(PRIMORDIAL_TYPES)
        logger.info("Generating primordials", seed=context.seed, types=len(types))

        primordials = []
        for index, primordial_type in enumerate(types):
            templates = PRIMORDIAL_NAMES.get(
                primordial_type, (f"The {primordial_type.replace('_', ' ').title()}",)
            )
            # Primordial names are not unique-tracked
            name = select_name(templates, context.rng)

            primordials.append(
                PrimordialBeing(
                    id=f"primordial-{primordial_type}-{index}",
                    primordial_type=primordial_type,
                    name=name,
                    description=primordial_description(primordial_type, name),
                    parent_id=None,
                    created_at=PRIMORDIAL_CREATED_AT,
                    discovered_at=context.discovered_at,
                    domain=self.DOMAINS.get(primordial_type, "Unknown domain"),
                    influence=list(self.INFLUENCES.get(primordial_type, [])),
                    metadata={"seed": context.seed, "index": index},
                )
            )

        return primordials
