"""Level 3: conceptual beings, gods given form by a race's worship."""

from __future__ import annotations

from typing import List, Sequence, Set

import structlog

from ..config.name_templates import CONCEPTUAL_NAMES
from ..config.world_tables import DEFAULT_CONCEPT_PREFERENCES, RACE_CONCEPT_PREFERENCES
from .alea_prng import AleaPRNG
from .context import GenerationContext
from .exceptions import GenerationOrderError
from .models import ConceptualBeing
from .name_generator import select_name

logger = structlog.get_logger()

GLOBAL_CONCEPTS = tuple(CONCEPTUAL_NAMES.keys())
NAME_PREFIXES = ("Lady", "Lord", "The")


def normalize_concept_name(name: str) -> str:
    """Drop a redundant article after a title: "Lady The Metal" -> "Lady Metal"."""
    parts = name.split(" ")
    if len(parts) >= 2 and parts[0] in NAME_PREFIXES and parts[1] == "The":
        del parts[1]
    return " ".join(parts)


class ConceptualGenerator:
    """Generates a small pantheon for every mortal race."""

    async def generate(self, context: GenerationContext) -> List[ConceptualBeing]:
        if not context.mortal_races:
            raise GenerationOrderError("Mortal races", "conceptual beings")

        logger.info("Generating conceptual beings", seed=context.seed)

        beings = []
        used_names: Set[str] = set()
        index = 0
        for race in context.mortal_races:
            preferred = RACE_CONCEPT_PREFERENCES.get(race.race_type, DEFAULT_CONCEPT_PREFERENCES)
            count = 2 + context.rng.randrange(3)
            concepts = self._select_concepts(preferred, count, context.rng)

            for concept_index, concept in enumerate(concepts):
                templates = CONCEPTUAL_NAMES.get(concept, (f"The {concept.capitalize()}",))
                candidates = list(dict.fromkeys(normalize_concept_name(t) for t in templates))
                name = select_name(candidates, context.rng, used_names)

                beings.append(
                    ConceptualBeing(
                        id=f"conceptual-{race.race_type}-{concept}-{index}",
                        conceptual_type=concept,
                        name=name,
                        description=(
                            f"{name} is a god of {concept}, born from the worship and beliefs "
                            f"of the {race.name}. As the {race.name} began to believe in "
                            f"{concept}, their collective faith gave form to this conceptual being."
                        ),
                        parent_id=race.id,
                        created_at=race.created_at + 50 + concept_index * 30,
                        discovered_at=context.discovered_at,
                        domain=concept,
                        worshiped_by=[race.id],
                        metadata={"seed": context.seed, "index": index},
                    )
                )
                index += 1

        logger.info(f"Generated {len(beings)} conceptual beings")
        return beings

    def _select_concepts(
        self, preferred: Sequence[str], count: int, rng: AleaPRNG
    ) -> List[str]:
        """Draw count distinct concepts, preferred pool first, then the global pool."""
        selected: List[str] = []
        pool = list(preferred)
        while pool and len(selected) < count:
            selected.append(pool.pop(rng.randrange(len(pool))))

        pool = [c for c in GLOBAL_CONCEPTS if c not in selected]
        while pool and len(selected) < count:
            selected.append(pool.pop(rng.randrange(len(pool))))
        return selected
