"""Tests for the name selection system."""

import re

import pytest

from py_worldgen.config.name_templates import (
    COMPOUND_SUFFIXES,
    DESCRIPTIVE_SUFFIXES,
    ORGANIZATION_NAME_SUFFIXES,
    ORGANIZATION_NAMES,
)
from py_worldgen.core.alea_prng import AleaPRNG
from py_worldgen.core.exceptions import (
    EmptyTemplatePoolError,
    NamePoolExhaustedError,
    WorldGenerationError,
)
from py_worldgen.core.name_generator import (
    claim_name,
    format_race_name,
    organization_name_candidates,
    select_name,
    simple_hash,
)


class TestSelectName:
    """Test template selection with and without a uniqueness scope."""

    def test_plain_pick(self):
        """Without a scope the pick comes straight from the templates."""
        prng = AleaPRNG("plain")
        templates = ["Alpha", "Beta", "Gamma"]

        for _ in range(20):
            assert select_name(templates, prng) in templates

    def test_deterministic(self):
        """The same seed selects the same names."""
        templates = ["Alpha", "Beta", "Gamma", "Delta"]
        used1, used2 = set(), set()
        prng1, prng2 = AleaPRNG(42), AleaPRNG(42)

        names1 = [select_name(templates, prng1, used1) for _ in range(10)]
        names2 = [select_name(templates, prng2, used2) for _ in range(10)]

        assert names1 == names2

    def test_unique_within_scope(self):
        """Names drawn with a shared scope never repeat and are recorded."""
        prng = AleaPRNG("unique")
        used = set()
        names = [select_name(["Alpha", "Beta"], prng, used) for _ in range(30)]

        assert len(names) == len(set(names))
        assert used == set(names)

    def test_exhausted_templates_get_epithets(self):
        """Once every template is used, an epithet variant is returned."""
        prng = AleaPRNG("epithet")
        used = {"Alpha"}

        name = select_name(["Alpha"], prng, used)

        assert name.startswith("Alpha ")
        assert name[len("Alpha "):] in DESCRIPTIVE_SUFFIXES

    def test_compound_epithets_after_descriptive(self):
        """Compound epithets are used once every descriptive epithet is taken."""
        prng = AleaPRNG("compound")
        used = {"Alpha"} | {f"Alpha {s}" for s in DESCRIPTIVE_SUFFIXES}

        name = select_name(["Alpha"], prng, used)

        assert any(name.endswith(c) for c in COMPOUND_SUFFIXES)

    def test_never_numeric(self):
        """Fallback names never contain digits."""
        prng = AleaPRNG("digits")
        used = set()
        for _ in range(60):
            name = select_name(["Alpha", "Beta"], prng, used)
            assert not re.search(r"\d", name)

    def test_exhaustion_raises(self):
        """Raise once every base, epithet and compound combination is taken."""
        prng = AleaPRNG("exhausted")
        used = {"Alpha"}
        used |= {f"Alpha {s}" for s in DESCRIPTIVE_SUFFIXES}
        used |= {f"Alpha {s} {c}" for s in DESCRIPTIVE_SUFFIXES for c in COMPOUND_SUFFIXES}

        with pytest.raises(NamePoolExhaustedError):
            select_name(["Alpha"], prng, used)

    def test_single_template_capacity(self):
        """A one-template pool yields every combination before failing."""
        prng = AleaPRNG("capacity")
        used = set()
        capacity = 1 + len(DESCRIPTIVE_SUFFIXES) * (1 + len(COMPOUND_SUFFIXES))

        for _ in range(capacity):
            select_name(["Alpha"], prng, used)

        assert len(used) == capacity
        with pytest.raises(NamePoolExhaustedError):
            select_name(["Alpha"], prng, used)

    def test_empty_pool(self):
        """An empty pool is rejected before any draw."""
        prng = AleaPRNG("empty")

        with pytest.raises(EmptyTemplatePoolError) as exc_info:
            select_name([], prng)

        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, WorldGenerationError)
        assert prng.call_count == 0


class TestClaimName:
    """Test reservation of composed names."""

    def test_free_name_kept(self):
        """A free name is returned unchanged and reserved."""
        used = set()

        assert claim_name("Dark Tower", AleaPRNG("claim"), used) == "Dark Tower"
        assert "Dark Tower" in used

    def test_taken_name_varied(self):
        """A taken name falls back to an epithet variant."""
        used = {"Dark Tower"}

        name = claim_name("Dark Tower", AleaPRNG("claim"), used)

        assert name != "Dark Tower"
        assert name.startswith("Dark Tower ")
        assert name in used


class TestHelpers:
    """Test hashing and formatting helpers."""

    def test_simple_hash_values(self):
        """h * 31 + c over the characters."""
        assert simple_hash("") == 0
        assert simple_hash("a") == 97
        assert simple_hash("ab") == 97 * 31 + 98

    def test_simple_hash_non_negative(self):
        """Long strings overflow 32 bits but stay non-negative."""
        for text in ("seed-dungeon-org-kingdom-3-boss-final-75", "x" * 200):
            assert simple_hash(text) >= 0
            assert simple_hash(text) == simple_hash(text)

    def test_format_race_name(self):
        """Race types become display names."""
        assert format_race_name("human") == "Human"
        assert format_race_name("wood_elf") == "Wood elf"


class TestOrganizationNames:
    """Test organization name candidates."""

    def test_prefix_templates_completed(self):
        """Prefix templates are completed with every suffix."""
        candidates = organization_name_candidates("kingdom", "Human")

        assert "The Kingdom of Ironhold" in candidates
        assert len(candidates) == len(ORGANIZATION_NAMES["kingdom"]) * len(
            ORGANIZATION_NAME_SUFFIXES["kingdom"]
        )

    def test_complete_templates(self):
        """Complete templates are used as they are."""
        candidates = organization_name_candidates("empire", "Human")

        assert candidates == list(ORGANIZATION_NAMES["empire"])

    def test_suffix_only_kinds(self):
        """Kinds without templates use their suffixes."""
        candidates = organization_name_candidates("mountainhome", "Dwarf")

        assert "The Mountainhome of Ironforge" in candidates

    def test_unknown_kind(self):
        """Unknown kinds still get a name."""
        assert organization_name_candidates("moot", "Halfling") == ["The Moot of the Halfling"]

    def test_candidates_never_numeric(self):
        """No candidate of any kind contains a digit."""
        kinds = set(ORGANIZATION_NAMES) | set(ORGANIZATION_NAME_SUFFIXES)
        for kind in kinds:
            for name in organization_name_candidates(kind, "Human"):
                assert not re.search(r"\d", name), name
