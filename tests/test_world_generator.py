"""End-to-end tests for the world generation orchestrator."""

import pytest

from py_worldgen.core.exceptions import GenerationOrderError
from py_worldgen.core.models import EXECUTION_ORDER, GenerationLevel, WorldGenerationConfig
from py_worldgen.core.world_generator import RULING_TYPES, WorldGenerator, level_closure

TIMESTAMPS = {"discovered_at", "generated_at"}


def without_timestamps(value):
    """Drop wall-clock fields so two runs can be compared."""
    if isinstance(value, dict):
        return {k: without_timestamps(v) for k, v in value.items() if k not in TIMESTAMPS}
    if isinstance(value, list):
        return [without_timestamps(v) for v in value]
    return value


def snapshot(world):
    return without_timestamps(world.model_dump(mode="json"))


class TestLevels:
    """Test level resolution."""

    def test_depth_defaults(self, generator):
        """depth chooses the level set when none is given."""
        full = generator.resolve_levels(WorldGenerationConfig(seed="s"))
        partial = generator.resolve_levels(WorldGenerationConfig(seed="s", depth="partial"))
        minimal = generator.resolve_levels(WorldGenerationConfig(seed="s", depth="minimal"))

        assert full == list(EXECUTION_ORDER)
        assert partial[-1] == GenerationLevel.STANDOUT
        assert GenerationLevel.DUNGEON not in partial
        assert minimal == [1, 2, 2.5]

    def test_execution_order(self, generator):
        """Mortals run before concepts and dungeons before lineages whatever the request order."""
        config = WorldGenerationConfig(seed="s", include_levels=[7, 7.5, 3, 5, 1, 2])

        assert generator.resolve_levels(config) == [1, 2, 5, 3, 7.5, 7]

    def test_level_closure(self):
        """Projections only run what their level needs."""
        assert level_closure([GenerationLevel.PRIMORDIAL]) == [1]
        assert level_closure([GenerationLevel.GEOGRAPHY]) == [1, 2, 2.5]
        assert level_closure([GenerationLevel.ORGANIZATION]) == [1, 2, 2.5, 5, 6]


class TestWorldGenerator:
    """Test complete runs."""

    @pytest.mark.asyncio
    async def test_determinism(self, generator):
        """The same seed reproduces the same world."""
        config = WorldGenerationConfig(seed="determinism")

        first = await generator.generate_world(config)
        second = await WorldGenerator().generate_world(config)

        assert snapshot(first) == snapshot(second)

    @pytest.mark.asyncio
    async def test_different_seeds(self, generator):
        """Different seeds produce different worlds."""
        a = await generator.generate_world(WorldGenerationConfig(seed="a", depth="minimal"))
        b = await generator.generate_world(WorldGenerationConfig(seed="b", depth="minimal"))

        assert [g.name for g in a.geography] != [g.name for g in b.geography]

    @pytest.mark.asyncio
    async def test_example_levels_one_and_two(self, generator):
        """Levels 1 and 2 give six primordials and eight creators."""
        world = await generator.generate_world(
            WorldGenerationConfig(seed="test-seed-1", include_levels=[1, 2])
        )
        primordial_ids = {p.id for p in world.primordials}

        assert len(world.primordials) == 6
        assert len(world.cosmic_creators) == 8
        assert all(c.parent_id in primordial_ids for c in world.cosmic_creators)
        assert world.geography == []

    @pytest.mark.asyncio
    async def test_density_monotonic(self, generator):
        """A dense world has more organizations than a sparse one."""
        sparse = await generator.generate_world(
            WorldGenerationConfig(seed="test-seed-1", organization_density="sparse")
        )
        dense = await generator.generate_world(
            WorldGenerationConfig(seed="test-seed-1", organization_density="dense")
        )

        assert len(dense.organizations) > len(sparse.organizations)

    @pytest.mark.asyncio
    async def test_missing_dependency(self, generator):
        """Requesting a level without its dependencies fails loudly."""
        with pytest.raises(GenerationOrderError):
            await generator.generate_world(WorldGenerationConfig(seed="s", include_levels=[3]))

    @pytest.mark.asyncio
    async def test_custom_primordials(self, generator):
        """Custom primordials flow through to the creators."""
        world = await generator.generate_world(
            WorldGenerationConfig(seed="s", include_levels=[1, 2], custom_primordials=["void"])
        )

        assert [p.id for p in world.primordials] == ["primordial-void-0"]
        assert {c.parent_id for c in world.cosmic_creators} == {"primordial-void-0"}


class TestWorldProperties:
    """Invariants of a complete default world."""

    def test_every_collection_filled(self, full_world):
        """A full run fills every collection."""
        assert all(count > 0 for count in full_world.summary().values())

    def test_no_forward_references(self, full_world):
        """Parents always come from earlier stages."""
        stages = [
            full_world.primordials,
            full_world.cosmic_creators,
            full_world.geography,
            full_world.mortal_races,
            full_world.conceptual_beings,
            full_world.demigods,
            full_world.organizations,
            full_world.standout_mortals,
            full_world.dungeons,
            full_world.family_lineages,
            full_world.family_members,
        ]
        seen = set()
        for stage in stages:
            for entity in stage:
                if entity.parent_id is not None:
                    assert entity.parent_id in seen, entity.id
            seen |= {entity.id for entity in stage}

    def test_unique_ids(self, full_world):
        """Every entity id is unique across the world."""
        ids = [
            entity.id
            for stage in (
                full_world.primordials,
                full_world.cosmic_creators,
                full_world.geography,
                full_world.mortal_races,
                full_world.conceptual_beings,
                full_world.demigods,
                full_world.organizations,
                full_world.standout_mortals,
                full_world.dungeons,
                full_world.family_lineages,
                full_world.family_members,
            )
            for entity in stage
        ]

        assert len(ids) == len(set(ids))

    def test_name_uniqueness(self, full_world):
        """Concepts per race, organizations and boss identities are unique."""
        org_names = [o.name for o in full_world.organizations]
        assert len(org_names) == len(set(org_names))

        for race in full_world.mortal_races:
            names = [c.name for c in full_world.conceptual_beings if c.parent_id == race.id]
            assert len(names) == len(set(names))

        boss_ids = [
            boss.boss_id
            for dungeon in full_world.dungeons
            for boss in [dungeon.final_boss, *dungeon.mid_bosses]
        ]
        assert len(boss_ids) == len(set(boss_ids))

    def test_boss_alignment_coupling(self, full_world):
        """is_boss is exactly alignment == evil."""
        for entity in [*full_world.demigods, *full_world.standout_mortals]:
            assert entity.is_boss == (entity.alignment == "evil")

    def test_dungeon_coverage(self, full_world):
        """Every dungeon has a depth in range, a final boss and every mid-boss slot."""
        for dungeon in full_world.dungeons:
            assert 50 <= dungeon.depth <= 100
            assert dungeon.final_boss is not None
            assert [b.level for b in dungeon.mid_bosses] == list(range(25, dungeon.depth, 25))

    def test_creations_filled(self, full_world):
        """Creators list what they parented."""
        for creator in full_world.cosmic_creators:
            expected = [
                e.id
                for e in [*full_world.geography, *full_world.mortal_races]
                if e.parent_id == creator.id
            ]
            assert creator.creations == expected

    def test_leaders_filled(self, full_world):
        """Organizations are led by a ruling standout born in them."""
        standouts = {s.id: s for s in full_world.standout_mortals}
        led = [o for o in full_world.organizations if o.leader]

        assert led
        for org in led:
            leader = standouts[org.leader]
            assert leader.organization == org.id
            assert leader.standout_type in RULING_TYPES

    def test_world_events(self, full_world):
        """Founding and tower events are collected."""
        kinds = {e.type for e in full_world.world_events}

        assert {"founded_organization", "built_tower"} <= kinds


class TestProjections:
    """Test the single-collection helpers."""

    @pytest.mark.asyncio
    async def test_primordials(self, generator, full_world):
        """Primordials match the full world's."""
        primordials = await generator.get_primordial_beings(full_world.seed)

        assert [p.name for p in primordials] == [p.name for p in full_world.primordials]

    @pytest.mark.asyncio
    async def test_geography_filter(self, generator, full_world):
        """Geography matches the full world's and filters by kind."""
        geography = await generator.get_geography(full_world.seed)
        forests = await generator.get_geography(full_world.seed, "forest")

        assert [g.name for g in geography] == [g.name for g in full_world.geography]
        assert forests
        assert all(g.geography_type == "forest" for g in forests)

    @pytest.mark.asyncio
    async def test_organizations_filter(self, generator):
        """Organizations filter by magnitude."""
        organizations = await generator.get_organizations("test-seed-1")
        kingdoms = await generator.get_organizations("test-seed-1", "kingdom")

        assert organizations
        assert all(k.magnitude == "kingdom" for k in kingdoms)
        assert [k.name for k in kingdoms] == [
            o.name for o in organizations if o.magnitude == "kingdom"
        ]
