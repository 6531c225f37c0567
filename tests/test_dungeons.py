"""Tests for dungeon generation and boss assignment."""

import pytest

from py_worldgen.core.alea_prng import AleaPRNG
from py_worldgen.core.dungeons import (
    BOSS_NAME_PREFIXES,
    DUNGEON_CREATOR_TYPES,
    DungeonGenerator,
    mid_boss_levels,
    procgen_boss,
)
from py_worldgen.core.exceptions import NoGeographyError
from py_worldgen.core.models import Alignment, BossKind, CreatorKind, DungeonKind

DUNGEON_LEVELS = [1, 2, 2.5, 5, 3, 4, 6, 6.5, 7.5]


def all_bosses(dungeon):
    return [dungeon.final_boss] + list(dungeon.mid_bosses)


class TestProcgenBoss:
    """Test synthesized bosses."""

    def test_reproducible(self):
        """The same dungeon seed and slot always yield the same boss."""
        a = procgen_boss("seed-dungeon-org-kingdom-0", "final", 75, "Orc")
        b = procgen_boss("seed-dungeon-org-kingdom-0", "final", 75, "Orc")

        assert a == b
        assert a.boss_id == "procgen-boss-seed-dungeon-org-kingdom-0-boss-final-75"

    def test_slots_differ(self):
        """Different slots of one dungeon are different bosses."""
        final = procgen_boss("seed-dungeon-x", "final", 50)
        mid = procgen_boss("seed-dungeon-x", "mid", 25)

        assert final.boss_id != mid.boss_id

    def test_race_theme(self):
        """A known creator race themes the boss."""
        boss = procgen_boss("seed-dungeon-y", "mid", 25, "Orc")

        assert boss.boss_type == BossKind.PROCGEN
        assert boss.boss_race == "Orc"
        assert boss.boss_alignment == Alignment.EVIL
        assert boss.boss_name.split(" ")[0] in BOSS_NAME_PREFIXES
        assert "Orc " in boss.boss_name

    def test_unknown_race_theme(self):
        """An unlisted race still themes the boss with a generic title."""
        boss = procgen_boss("seed-dungeon-z", "final", 60, "Merfolk")

        assert boss.boss_race == "Merfolk"
        assert any(boss.boss_name.endswith(f"Merfolk {t}") for t in ("Leader", "Lord", "King"))

    def test_no_race(self):
        """Without a race the fallback boss list is used."""
        boss = procgen_boss("seed-dungeon-w", "final", 60)

        if "Orc" in boss.boss_name:
            assert boss.boss_race == "Orc"
        else:
            assert boss.boss_race is None


class TestMidBossLevels:
    """Test mid-boss slot placement."""

    def test_levels(self):
        """Every multiple of 25 strictly below the depth."""
        assert mid_boss_levels(50) == [25]
        assert mid_boss_levels(51) == [25, 50]
        assert mid_boss_levels(75) == [25, 50]
        assert mid_boss_levels(100) == [25, 50, 75]


class TestDungeonGenerator:
    """Test both generation phases."""

    @pytest.mark.asyncio
    async def test_nothing_to_build(self, run_levels):
        """Without organizations or standouts there are no dungeons."""
        context = await run_levels(levels=[1, 2, 2.5, 5])

        assert await DungeonGenerator().generate(context) == []

    @pytest.mark.asyncio
    async def test_requires_geography(self, run_levels):
        """Dungeons need somewhere to be."""
        context = await run_levels(levels=[1, 2, 2.5, 5, 6])
        context.geography = []

        with pytest.raises(NoGeographyError):
            await DungeonGenerator().generate(context)

    @pytest.mark.asyncio
    async def test_depth_and_coverage(self, run_levels):
        """Every dungeon has a final boss at its depth and every mid-boss slot filled."""
        context = await run_levels(levels=DUNGEON_LEVELS)

        assert context.dungeons
        for dungeon in context.dungeons:
            assert 50 <= dungeon.depth <= 100
            assert dungeon.final_boss is not None
            assert dungeon.final_boss.level == dungeon.depth
            assert [b.level for b in dungeon.mid_bosses] == mid_boss_levels(dungeon.depth)

    @pytest.mark.asyncio
    async def test_mortal_builders(self, run_levels):
        """Every dungeon-building standout builds one dungeon and guards it."""
        context = await run_levels(levels=DUNGEON_LEVELS)
        builders = [
            s for s in context.standout_mortals if s.standout_type in DUNGEON_CREATOR_TYPES
        ]
        mortal_dungeons = {
            d.creator_id: d
            for d in context.dungeons
            if d.created_by == CreatorKind.STANDOUT_MORTAL
        }

        assert set(mortal_dungeons) == {b.id for b in builders}
        for builder in builders:
            dungeon = mortal_dungeons[builder.id]
            assert dungeon.id == f"dungeon-mortal-{builder.id}"
            assert dungeon.final_boss.boss_id == builder.id
            assert dungeon.final_boss.boss_type == BossKind.STANDOUT_MORTAL
            if builder.standout_type in ("necromancer", "lich", "wizard", "archmage"):
                assert dungeon.dungeon_type == DungeonKind.TOWER

    @pytest.mark.asyncio
    async def test_boss_exclusivity(self, run_levels):
        """No demi-god or standout guards two slots anywhere."""
        context = await run_levels(levels=DUNGEON_LEVELS)
        boss_ids = [b.boss_id for d in context.dungeons for b in all_bosses(d)]

        assert len(boss_ids) == len(set(boss_ids))

    @pytest.mark.asyncio
    async def test_entity_bosses_are_evil(self, run_levels):
        """Bosses drawn from existing entities are evil ones, except builders of their own dungeon."""
        context = await run_levels(levels=DUNGEON_LEVELS)
        evil = {d.id for d in context.demigods if d.is_boss}
        evil |= {s.id for s in context.standout_mortals if s.is_boss}

        for dungeon in context.dungeons:
            for boss in all_bosses(dungeon):
                if boss.boss_type == BossKind.PROCGEN or boss.boss_id == dungeon.creator_id:
                    continue
                assert boss.boss_id in evil

    @pytest.mark.asyncio
    async def test_seeds_and_parents(self, run_levels):
        """Dungeon seeds derive from the world seed and the creator."""
        context = await run_levels(levels=DUNGEON_LEVELS)
        geography_ids = {g.id for g in context.geography}

        for dungeon in context.dungeons:
            assert dungeon.seed == f"{context.seed}-dungeon-{dungeon.creator_id}"
            assert dungeon.parent_id == dungeon.creator_id
            assert dungeon.location in geography_ids
            assert dungeon.created_at == dungeon.age < 0

    @pytest.mark.asyncio
    async def test_unique_names(self, run_levels):
        """Dungeon names are unique."""
        context = await run_levels(levels=DUNGEON_LEVELS)
        names = [d.name for d in context.dungeons]

        assert len(names) == len(set(names))


class EveryOrganizationBuilds(DungeonGenerator):
    """Generator whose organizations always pass the build gate."""

    def _organization_builds_dungeon(self, org, rng):
        return True


class TestBossPriority:
    """Test the final boss fallback order."""

    @pytest.mark.asyncio
    async def test_procgen_without_candidates(self, run_levels):
        """With no demi-gods or standouts every final boss is synthesized."""
        context = await run_levels(levels=[1, 2, 2.5, 5, 6])

        dungeons = await EveryOrganizationBuilds().generate(context)

        assert len(dungeons) == len(context.organizations)
        for dungeon in dungeons:
            assert dungeon.created_by == CreatorKind.ORGANIZATION
            assert dungeon.final_boss.boss_type == BossKind.PROCGEN
            assert all(b.boss_type == BossKind.PROCGEN for b in dungeon.mid_bosses)

    @pytest.mark.asyncio
    async def test_demigods_before_procgen(self, run_levels):
        """Evil demi-gods fill final slots until they run out, then bosses are synthesized."""
        context = await run_levels(levels=[1, 2, 2.5, 5, 3, 4, 6])
        context.demigods = [
            d.model_copy(update={"alignment": Alignment.EVIL}) for d in context.demigods
        ]
        demigod_ids = {d.id for d in context.demigods}

        dungeons = await EveryOrganizationBuilds().generate(context)
        finals = [d.final_boss for d in dungeons]
        filled = min(len(demigod_ids), len(dungeons))

        assert filled > 0
        assert all(b.boss_type == BossKind.DEMIGOD for b in finals[:filled])
        assert {b.boss_id for b in finals[:filled]} <= demigod_ids
        assert all(b.boss_type == BossKind.PROCGEN for b in finals[filled:])


class TestOrganizationGate:
    """Test how likely an organization is to build a dungeon."""

    DRAWS = 20000

    def build_rate(self, org):
        generator = DungeonGenerator()
        rng = AleaPRNG("organization-gate")
        built = sum(generator._organization_builds_dungeon(org, rng) for _ in range(self.DRAWS))
        return built / self.DRAWS

    @pytest.mark.asyncio
    async def test_gate_rates(self, run_levels):
        """Ordinary 10%, dungeon-prone kinds 30%, delving purposes 70%."""
        context = await run_levels(levels=[1, 2, 2.5, 5, 6])
        org = context.organizations[0]

        ordinary = org.model_copy(update={"magnitude": "guild", "purpose": "trade"})
        likely = org.model_copy(update={"magnitude": "kingdom", "purpose": "governance"})
        delving = org.model_copy(update={"magnitude": "guild", "purpose": "mining operations"})

        assert self.build_rate(ordinary) == pytest.approx(0.1, abs=0.02)
        assert self.build_rate(likely) == pytest.approx(0.3, abs=0.02)
        assert self.build_rate(delving) == pytest.approx(0.7, abs=0.02)
