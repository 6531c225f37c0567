"""
Level 5: mortal races.

Runs before conceptual beings, since concepts are born from mortal worship.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

import structlog

from ..config.world_tables import (
    CREATOR_RACES,
    RACE_CHARACTERISTICS,
    RACE_ELEMENT_AFFINITY,
)
from .context import GenerationContext
from .exceptions import GenerationOrderError
from .models import CosmicCreator, DemiGod, Geography, Lifespan, MortalRace
from .name_generator import format_race_name

logger = structlog.get_logger()

RACE_BASE_YEAR = -3000
RACE_YEAR_SPACING = 100


class MortalRaceGenerator:
    """Generates mortal races and ties each to a creator and a homeland."""

    CREATION_METHODS = [
        "were given life by {creator}",
        "were born from the essence of {creator}",
        "emerged as {creator} breathed life into the world",
        "were created when {creator} shaped the first mortals",
    ]

    async def generate(
        self,
        context: GenerationContext,
        custom_races: Optional[Sequence[str]] = None,
    ) -> List[MortalRace]:
        """
        Generate mortal races.

        Args:
            context: Generation context with cosmic creators or demi-gods
            custom_races: Race types to generate instead of the default set

        Returns:
            List of mortal races
        """
        if not context.cosmic_creators and not context.demigods:
            raise GenerationOrderError("Cosmic creators or demi-gods", "mortal races")

        race_types = self._race_types(context, custom_races)
        logger.info("Generating mortal races", seed=context.seed, races=len(race_types))

        races = []
        for index, race_type in enumerate(race_types):
            creator = self._select_creator(race_type, context, index)
            lifespan, traits, homeland_types = RACE_CHARACTERISTICS.get(
                race_type, RACE_CHARACTERISTICS["human"]
            )
            homeland = self._select_homeland(homeland_types, context.geography, index)

            race_name = format_race_name(race_type)
            method = self.CREATION_METHODS[context.rng.randrange(len(self.CREATION_METHODS))]
            homeland_name = homeland.name if homeland else "Unknown Lands"

            races.append(
                MortalRace(
                    id=f"race-{race_type}-{index}",
                    race_type=race_type,
                    name=race_name,
                    description=(
                        f"The {race_name} {method.format(creator=creator.name)} and settled in "
                        f"{homeland_name}, establishing the first mortal civilizations."
                    ),
                    parent_id=creator.id,
                    created_at=RACE_BASE_YEAR - index * RACE_YEAR_SPACING,
                    discovered_at=context.discovered_at,
                    created_by=creator.id,
                    homeland=homeland.id if homeland else None,
                    characteristics=list(traits),
                    lifespan=Lifespan(min=lifespan[0], max=lifespan[1]),
                    population=context.rng.randint(1000, 9999),
                    metadata={"seed": context.seed, "index": index},
                )
            )

        return races

    def _race_types(
        self, context: GenerationContext, custom_races: Optional[Sequence[str]]
    ) -> List[str]:
        if custom_races:
            return list(dict.fromkeys(custom_races))

        race_types = []
        for creator in context.cosmic_creators:
            for race_type in CREATOR_RACES.get(creator.element.value, ()):
                if race_type not in race_types:
                    race_types.append(race_type)

        if not race_types and not context.cosmic_creators:
            # Demi-god worlds fall back to the whole creator table
            for races in CREATOR_RACES.values():
                race_types.extend(r for r in races if r not in race_types)
        return race_types

    def _select_creator(
        self, race_type: str, context: GenerationContext, index: int
    ) -> Union[CosmicCreator, DemiGod]:
        """
        Resolve the creator of a race.

        The primary creator table wins, then the secondary affinity table
        restricted to elements that exist, then round-robin over creators
        (or demi-gods when there are no creators).
        """
        creators = context.cosmic_creators

        for element, races in CREATOR_RACES.items():
            if race_type in races:
                match = next((c for c in creators if c.element == element), None)
                if match is not None:
                    return match

        for element in RACE_ELEMENT_AFFINITY.get(race_type, ()):
            match = next((c for c in creators if c.element == element), None)
            if match is not None:
                return match

        if creators:
            return creators[index % len(creators)]
        return context.demigods[index % len(context.demigods)]

    def _select_homeland(
        self, homeland_types: Sequence[str], geography: Sequence[Geography], index: int
    ) -> Optional[Geography]:
        for geo in geography:
            if geo.geography_type.value in homeland_types:
                return geo
        if geography:
            return geography[index % len(geography)]
        return None
