"""
World generation orchestrator.

Runs the stage generators in dependency order over one shared context and
assembles the result into an immutable GeneratedWorld snapshot.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

import structlog

from .context import GenerationContext
from .conceptual import ConceptualGenerator
from .cosmic import CosmicGenerator
from .demigods import DemiGodGenerator
from .dungeons import DungeonGenerator
from .exceptions import WorldGenerationError
from .geography import GeographyGenerator
from .lineages import LineageGenerator
from .models import (
    EXECUTION_ORDER,
    Geography,
    GeneratedWorld,
    GenerationLevel,
    Organization,
    PrimordialBeing,
    WorldGenerationConfig,
)
from .mortals import MortalRaceGenerator
from .organizations import OrganizationGenerator
from .primordials import PrimordialGenerator
from .standouts import StandoutGenerator

logger = structlog.get_logger()

L = GenerationLevel

# Levels a level reads from. Mortal races need geography for homelands.
LEVEL_DEPENDENCIES: Dict[GenerationLevel, Tuple[GenerationLevel, ...]] = {
    L.PRIMORDIAL: (),
    L.COSMIC: (L.PRIMORDIAL,),
    L.GEOGRAPHY: (L.COSMIC,),
    L.MORTAL: (L.COSMIC, L.GEOGRAPHY),
    L.CONCEPTUAL: (L.MORTAL,),
    L.DEMIGOD: (L.PRIMORDIAL, L.COSMIC, L.CONCEPTUAL),
    L.ORGANIZATION: (L.MORTAL, L.GEOGRAPHY),
    L.STANDOUT: (L.MORTAL, L.ORGANIZATION),
    L.DUNGEON: (L.GEOGRAPHY, L.DEMIGOD, L.ORGANIZATION, L.STANDOUT),
    L.LINEAGE: (L.MORTAL, L.STANDOUT),
}

DEPTH_LEVELS: Dict[str, Tuple[GenerationLevel, ...]] = {
    "full": EXECUTION_ORDER,
    "partial": EXECUTION_ORDER[: EXECUTION_ORDER.index(L.STANDOUT) + 1],
    "minimal": (L.PRIMORDIAL, L.COSMIC, L.GEOGRAPHY),
}

RULING_TYPES = frozenset({"king", "queen", "emperor", "empress", "founder", "war_chief"})


def level_closure(targets: Iterable[GenerationLevel]) -> List[GenerationLevel]:
    """
    Smallest set of levels that must run to produce the targets.

    Returns:
        The levels in execution order
    """
    needed = set()
    pending = list(targets)
    while pending:
        level = GenerationLevel(pending.pop())
        if level in needed:
            continue
        needed.add(level)
        pending.extend(LEVEL_DEPENDENCIES[level])
    return [level for level in EXECUTION_ORDER if level in needed]


class WorldGenerator:
    """Coordinates the stage generators for one seed."""

    def __init__(self):
        self.primordial_generator = PrimordialGenerator()
        self.cosmic_generator = CosmicGenerator()
        self.geography_generator = GeographyGenerator()
        self.mortal_generator = MortalRaceGenerator()
        self.conceptual_generator = ConceptualGenerator()
        self.demigod_generator = DemiGodGenerator()
        self.organization_generator = OrganizationGenerator()
        self.standout_generator = StandoutGenerator()
        self.dungeon_generator = DungeonGenerator()
        self.lineage_generator = LineageGenerator()

    def resolve_levels(self, config: WorldGenerationConfig) -> List[GenerationLevel]:
        """Requested levels in execution order; depth decides when none are given."""
        requested: FrozenSet[GenerationLevel]
        if config.include_levels is not None:
            requested = frozenset(config.include_levels)
        else:
            requested = frozenset(DEPTH_LEVELS[config.depth])
        return [level for level in EXECUTION_ORDER if level in requested]

    async def run_stages(self, config: WorldGenerationConfig) -> GenerationContext:
        """
        Run every requested stage over a fresh context.

        Args:
            config: Generation request

        Returns:
            The populated context

        Raises:
            WorldGenerationError: a stage precondition failed or a name pool ran dry
        """
        levels = self.resolve_levels(config)
        context = GenerationContext.from_seed(config.seed)

        logger.info(
            "Starting world generation",
            seed=config.seed,
            levels=[level.value for level in levels],
        )

        try:
            for level in levels:
                await self._run_level(level, context, config)
        except WorldGenerationError as e:
            logger.error("World generation failed", seed=config.seed, error=str(e))
            raise

        logger.info("World generation complete", seed=config.seed, rng_calls=context.rng.call_count)
        return context

    async def _run_level(
        self, level: GenerationLevel, context: GenerationContext, config: WorldGenerationConfig
    ) -> None:
        logger.info(f"Level {level.value}: generating {level.name.lower()}")

        if level == L.PRIMORDIAL:
            context.primordials = await self.primordial_generator.generate(
                context, config.custom_primordials
            )
        elif level == L.COSMIC:
            context.cosmic_creators = await self.cosmic_generator.generate(context)
        elif level == L.GEOGRAPHY:
            context.geography = await self.geography_generator.generate(context)
        elif level == L.MORTAL:
            context.mortal_races = await self.mortal_generator.generate(
                context, config.custom_races
            )
        elif level == L.CONCEPTUAL:
            context.conceptual_beings = await self.conceptual_generator.generate(context)
        elif level == L.DEMIGOD:
            context.demigods = await self.demigod_generator.generate(context)
        elif level == L.ORGANIZATION:
            context.organizations = await self.organization_generator.generate(
                context, config.organization_density
            )
        elif level == L.STANDOUT:
            context.standout_mortals = await self.standout_generator.generate(context)
        elif level == L.DUNGEON:
            context.dungeons = await self.dungeon_generator.generate(context)
        elif level == L.LINEAGE:
            members, lineages = await self.lineage_generator.generate(context)
            context.family_members = members
            context.family_lineages = lineages

    async def generate_world(self, config: WorldGenerationConfig) -> GeneratedWorld:
        """Generate a complete world snapshot for the config."""
        context = await self.run_stages(config)
        world = self.assemble(context)
        logger.info("World assembled", seed=config.seed, **world.summary())
        return world

    def assemble(self, context: GenerationContext) -> GeneratedWorld:
        """
        Build the snapshot, filling back-references that later stages establish.

        Cosmic creators receive the ids of the geography and races they
        parented; organizations receive their first ruling standout mortal as
        leader. Context entities are copied, never mutated.
        """
        creations: Dict[str, List[str]] = {}
        for entity in [*context.geography, *context.mortal_races]:
            if entity.parent_id:
                creations.setdefault(entity.parent_id, []).append(entity.id)

        creators = [
            c.model_copy(update={"creations": creations.get(c.id, [])})
            for c in context.cosmic_creators
        ]

        leaders: Dict[str, str] = {}
        for mortal in context.standout_mortals:
            if mortal.organization and mortal.standout_type in RULING_TYPES:
                leaders.setdefault(mortal.organization, mortal.id)

        organizations = [
            o.model_copy(update={"leader": leaders[o.id]}) if o.id in leaders else o
            for o in context.organizations
        ]

        return GeneratedWorld(
            seed=context.seed,
            primordials=context.primordials,
            cosmic_creators=creators,
            geography=context.geography,
            conceptual_beings=context.conceptual_beings,
            demigods=context.demigods,
            mortal_races=context.mortal_races,
            organizations=organizations,
            standout_mortals=context.standout_mortals,
            dungeons=context.dungeons,
            family_members=context.family_members,
            family_lineages=context.family_lineages,
            world_events=context.world_events,
        )

    async def _run_closure(self, seed: str, target: GenerationLevel) -> GenerationContext:
        config = WorldGenerationConfig(seed=seed, include_levels=level_closure([target]))
        return await self.run_stages(config)

    async def get_primordial_beings(self, seed: str) -> List[PrimordialBeing]:
        """Primordial beings of the world for seed."""
        context = await self._run_closure(seed, L.PRIMORDIAL)
        return context.primordials

    async def get_geography(self, seed: str, geography_type: Optional[str] = None) -> List[Geography]:
        """Geography of the world for seed, optionally of a single kind."""
        context = await self._run_closure(seed, L.GEOGRAPHY)
        if geography_type:
            return [g for g in context.geography if g.geography_type == geography_type]
        return context.geography

    async def get_organizations(
        self, seed: str, magnitude: Optional[str] = None
    ) -> List[Organization]:
        """Organizations of the world for seed, optionally of a single magnitude."""
        context = await self._run_closure(seed, L.ORGANIZATION)
        if magnitude:
            return [o for o in context.organizations if o.magnitude == magnitude]
        return context.organizations
