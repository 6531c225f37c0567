"""Tests for the primordial, cosmic and geography stages."""

import pytest

from py_worldgen.config.name_templates import COSMIC_NAMES
from py_worldgen.config.world_tables import (
    COSMIC_ELEMENTS,
    GEOGRAPHY_ELEMENT_AFFINITY,
    GEOGRAPHY_PLAN,
    PRIMORDIAL_TYPES,
)
from py_worldgen.core.cosmic import CosmicGenerator
from py_worldgen.core.exceptions import GenerationOrderError
from py_worldgen.core.geography import GeographyGenerator
from py_worldgen.core.primordials import PrimordialGenerator


class TestPrimordials:
    """Test level 1."""

    @pytest.mark.asyncio
    async def test_default_types(self, empty_context):
        """One primordial per default type, in order."""
        primordials = await PrimordialGenerator().generate(empty_context)

        assert [p.primordial_type for p in primordials] == list(PRIMORDIAL_TYPES)
        assert [p.id for p in primordials] == [
            f"primordial-{t}-{i}" for i, t in enumerate(PRIMORDIAL_TYPES)
        ]

    @pytest.mark.asyncio
    async def test_roots_of_the_world(self, empty_context):
        """Primordials have no parent and predate everything else."""
        primordials = await PrimordialGenerator().generate(empty_context)

        for p in primordials:
            assert p.parent_id is None
            assert p.created_at < 0
            assert p.name
            assert p.domain

    @pytest.mark.asyncio
    async def test_custom_types(self, empty_context):
        """Custom types replace the defaults and get a generic name."""
        primordials = await PrimordialGenerator().generate(empty_context, ["void", "storm_wind"])

        assert [p.id for p in primordials] == ["primordial-void-0", "primordial-storm_wind-1"]
        assert primordials[1].name == "The Storm Wind"


class TestCosmicCreators:
    """Test level 2."""

    @pytest.mark.asyncio
    async def test_requires_primordials(self, empty_context):
        """Cosmic creators cannot exist without primordials."""
        with pytest.raises(GenerationOrderError, match="Primordials must be generated before"):
            await CosmicGenerator().generate(empty_context)

    @pytest.mark.asyncio
    async def test_one_per_element(self, run_levels):
        """Eight creators, one per element, each parented by a primordial."""
        context = await run_levels(levels=[1, 2])
        primordial_ids = {p.id for p in context.primordials}

        assert len(context.primordials) == 6
        assert [c.element for c in context.cosmic_creators] == list(COSMIC_ELEMENTS)
        for creator in context.cosmic_creators:
            assert creator.parent_id in primordial_ids
            assert creator.created_by == creator.parent_id
            assert creator.created_at > context.primordials[0].created_at

    @pytest.mark.asyncio
    async def test_round_robin_parents(self, run_levels):
        """Elements other than ice and magic take primordials round-robin."""
        context = await run_levels(levels=[1, 2])

        for index, creator in enumerate(context.cosmic_creators):
            if creator.element not in ("ice", "magic"):
                assert creator.parent_id == context.primordials[index % 6].id

    @pytest.mark.asyncio
    async def test_elements_fixed_to_named_set(self, run_levels):
        """Only elements with a name pool are generated, whatever the primordials."""
        context = await run_levels(levels=[1], custom_primordials=["void"])

        creators = await CosmicGenerator().generate(context)

        assert set(COSMIC_ELEMENTS) <= set(COSMIC_NAMES)
        assert [c.element for c in creators] == list(COSMIC_ELEMENTS)
        for creator in creators:
            assert creator.name in COSMIC_NAMES[creator.element]


class TestGeography:
    """Test level 2.5."""

    @pytest.mark.asyncio
    async def test_requires_creators(self, run_levels):
        """Geography cannot exist without cosmic creators."""
        context = await run_levels(levels=[1])

        with pytest.raises(GenerationOrderError):
            await GeographyGenerator().generate(context)

    @pytest.mark.asyncio
    async def test_plan_followed(self, run_levels):
        """Every kind appears exactly as often as planned."""
        context = await run_levels(levels=[1, 2, 2.5])

        assert len(context.geography) == sum(count for _, count in GEOGRAPHY_PLAN)
        for kind, count in GEOGRAPHY_PLAN:
            assert sum(1 for g in context.geography if g.geography_type == kind) == count

    @pytest.mark.asyncio
    async def test_unique_names(self, run_levels):
        """No two features share a name."""
        context = await run_levels(levels=[1, 2, 2.5])
        names = [g.name for g in context.geography]

        assert len(names) == len(set(names))

    @pytest.mark.asyncio
    async def test_creator_affinity(self, run_levels):
        """Features follow their preferred element, and magic never shapes land."""
        context = await run_levels(levels=[1, 2, 2.5])
        element_of = {c.id: c.element for c in context.cosmic_creators}

        for feature in context.geography:
            element = element_of[feature.parent_id]
            assert element != "magic"
            preferred = GEOGRAPHY_ELEMENT_AFFINITY.get(feature.geography_type.value)
            if preferred:
                assert element == preferred[0]

    @pytest.mark.asyncio
    async def test_locations_on_map(self, run_levels):
        """Every feature sits on the 1000 x 1000 map."""
        context = await run_levels(levels=[1, 2, 2.5])

        for feature in context.geography:
            assert 0 <= feature.location.x < 1000
            assert 0 <= feature.location.y < 1000
