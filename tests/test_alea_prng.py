"""Tests for the seeded Alea PRNG."""

import pytest

from py_worldgen.core.alea_prng import AleaPRNG


class TestAleaPRNG:
    """Test the PRNG stream and its helpers."""

    def test_same_seed_same_stream(self):
        """Two generators with the same seed produce identical streams."""
        a = AleaPRNG("world-1")
        b = AleaPRNG("world-1")

        assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]

    def test_different_seeds_diverge(self):
        """Different seeds produce different streams."""
        a = AleaPRNG("world-1")
        b = AleaPRNG("world-2")

        assert [a.random() for _ in range(10)] != [b.random() for _ in range(10)]

    def test_random_range(self):
        """Every draw lies in [0, 1)."""
        prng = AleaPRNG("range")
        for _ in range(1000):
            value = prng.random()
            assert 0 <= value < 1

    def test_next_is_alias(self):
        """next() advances the same stream as random()."""
        a = AleaPRNG("alias")
        b = AleaPRNG("alias")

        assert a.next() == b.random()

    def test_call_count(self):
        """Every draw is counted, including those made by helpers."""
        prng = AleaPRNG("count")
        prng.random()
        prng.randrange(10)
        prng.choice(["a", "b"])

        assert prng.call_count == 3

    def test_randint_inclusive(self):
        """randint covers both ends of its range."""
        prng = AleaPRNG("randint")
        values = {prng.randint(1, 3) for _ in range(500)}

        assert values == {1, 2, 3}

    def test_randrange_bounds(self):
        """randrange stays within [0, n)."""
        prng = AleaPRNG("randrange")
        values = {prng.randrange(5) for _ in range(500)}

        assert values == {0, 1, 2, 3, 4}

    def test_choice_empty(self):
        """Choosing from an empty sequence raises IndexError."""
        with pytest.raises(IndexError):
            AleaPRNG("empty").choice([])
