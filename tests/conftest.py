"""Shared fixtures for the world generation tests."""

import asyncio

import pytest

from py_worldgen.core.context import GenerationContext
from py_worldgen.core.models import WorldGenerationConfig
from py_worldgen.core.world_generator import WorldGenerator

TEST_SEED = "test-seed-1"


@pytest.fixture
def generator():
    return WorldGenerator()


@pytest.fixture
def run_levels():
    """Async helper running the given levels for a seed and returning the context."""

    async def _run(seed=TEST_SEED, levels=None, **options):
        config = WorldGenerationConfig(seed=seed, include_levels=levels, **options)
        return await WorldGenerator().run_stages(config)

    return _run


@pytest.fixture
def empty_context():
    return GenerationContext.from_seed(TEST_SEED)


@pytest.fixture(scope="session")
def full_world():
    """One complete default world shared by the read-only world tests."""
    return asyncio.run(WorldGenerator().generate_world(WorldGenerationConfig(seed=TEST_SEED)))

