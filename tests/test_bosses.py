"""Tests for the boss and grid entity registration helpers."""

import pytest

from py_worldgen.core.bosses import (
    GRID_MEMBERSHIP_RANGES,
    BossData,
    GridLeaderData,
    GridOrganizationData,
    register_boss_entity,
    register_grid_leader,
    register_grid_organization,
    slugify,
)
from py_worldgen.core.exceptions import GenerationOrderError
from py_worldgen.core.models import Alignment


def boss_data(**overrides):
    data = dict(
        name="Vexar the Undying",
        type="Lich",
        level=75,
        dungeon_id="dungeon-org-org-kingdom-0",
        dungeon_name="Forgotten Depths",
        powers=["Necromancy", "Phylactery"],
        description="A lich ruling the lower halls.",
        history="Seized the depths after the founders perished.",
        is_main_boss=True,
        dungeon_age=500,
    )
    data.update(overrides)
    return BossData(**data)


class TestRegisterBossEntity:
    """Test promotion of dungeon bosses."""

    @pytest.mark.asyncio
    async def test_main_boss(self, run_levels):
        """Main bosses are evil dungeon_boss standouts of power 80-99."""
        context = await run_levels(levels=[1, 2, 2.5, 5])

        boss = register_boss_entity(context, boss_data())

        assert boss.id == "boss-dungeon-org-org-kingdom-0-main-75"
        assert boss.standout_type == "dungeon_boss"
        assert boss.alignment == Alignment.EVIL
        assert boss.is_boss
        assert 80 <= boss.level <= 99
        assert -500 + 50 <= boss.created_at < -500 + 150
        assert boss.metadata["history"] == "Seized the depths after the founders perished."

    @pytest.mark.asyncio
    async def test_mid_boss(self, run_levels):
        """Mid-bosses have power 50-79."""
        context = await run_levels(levels=[1, 2, 2.5, 5])

        boss = register_boss_entity(context, boss_data(is_main_boss=False, level=25))

        assert boss.id == "boss-dungeon-org-org-kingdom-0-mid-25"
        assert 50 <= boss.level <= 79

    @pytest.mark.asyncio
    async def test_race_resolution(self, run_levels):
        """The boss race follows the boss kind, else the first race."""
        context = await run_levels(levels=[1, 2, 2.5, 5])
        races = {r.race_type: r.id for r in context.mortal_races}

        orc = register_boss_entity(context, boss_data(type="Orc Warlord"))
        dragon = register_boss_entity(context, boss_data(type="Ancient Dragon"))
        lich = register_boss_entity(context, boss_data(type="Lich"))

        assert orc.race == races["orc"]
        assert dragon.race == races["dragon"]
        assert lich.race == context.mortal_races[0].id

    @pytest.mark.asyncio
    async def test_not_stored(self, run_levels):
        """Registration leaves the context untouched."""
        context = await run_levels(levels=[1, 2, 2.5, 5])

        register_boss_entity(context, boss_data())

        assert context.standout_mortals == []

    @pytest.mark.asyncio
    async def test_requires_races(self, run_levels):
        """A boss always descends from a race, so registration needs one."""
        context = await run_levels(levels=[1, 2, 2.5])

        with pytest.raises(GenerationOrderError, match="Mortal races must be generated before"):
            register_boss_entity(context, boss_data())

    @pytest.mark.asyncio
    async def test_parent_is_race(self, run_levels):
        """The boss is parented by the race it belongs to."""
        context = await run_levels(levels=[1, 2, 2.5, 5])
        race_ids = {r.id for r in context.mortal_races}

        boss = register_boss_entity(context, boss_data())

        assert boss.parent_id in race_ids
        assert boss.race == boss.parent_id


class TestGridEntities:
    """Test promotion of grid-placed organizations and leaders."""

    @pytest.mark.asyncio
    async def test_grid_organization(self, run_levels):
        """Grid organizations get a positional id, a purpose and a membership in range."""
        context = await run_levels(levels=[1, 2, 2.5, 5])
        race = context.mortal_races[0]
        location = context.geography[0]

        org = register_grid_organization(
            context,
            GridOrganizationData(
                name="The Iron Guild",
                type="guild",
                race_id=race.id,
                race_name=race.name,
                location_id=location.id,
                location_name=location.name,
                grid_x=12,
                grid_y=7,
                age=300,
            ),
        )

        low, high = GRID_MEMBERSHIP_RANGES["guild"]
        assert org.id == "org-grid-12-7-the-iron-guild"
        assert org.purpose == "professional association"
        assert low <= org.members < high
        assert org.founded == org.created_at == -300
        assert org.leader is None
        assert context.organizations == []

    @pytest.mark.asyncio
    async def test_grid_leader(self, run_levels):
        """Leaders get a level from their type's range and matching powers."""
        context = await run_levels(levels=[1, 2, 2.5, 5])
        race = context.mortal_races[0]
        location = context.geography[0]

        def leader(leader_type, name):
            return register_grid_leader(
                context,
                GridLeaderData(
                    name=name,
                    organization_id="org-grid-12-7-the-iron-guild",
                    organization_name="The Iron Guild",
                    race_id=race.id,
                    race_name=race.name,
                    location_id=location.id,
                    location_name=location.name,
                    leader_type=leader_type,
                    grid_x=12,
                    grid_y=7,
                    birth_year=-60,
                    rise_to_power_year=-20,
                ),
            )

        king = leader("king", "Aldric Stormwind")
        necromancer = leader("necromancer", "Morwen Blackwood")
        guildmaster = leader("guildmaster", "Tobin Goldleaf")

        assert king.id == "leader-org-grid-12-7-the-iron-guild-aldric-stormwind"
        assert 10 <= king.level <= 15
        assert king.alignment in (Alignment.GOOD, Alignment.NEUTRAL)
        assert king.powers == ["Leadership", "Political Authority"]
        assert necromancer.alignment == Alignment.EVIL
        assert necromancer.is_boss
        assert guildmaster.alignment == Alignment.NEUTRAL
        assert guildmaster.age == 60

    def test_slugify(self):
        """Whitespace runs collapse to single hyphens."""
        assert slugify("The  Iron Guild") == "the-iron-guild"
