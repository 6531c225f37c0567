"""
Seeded Alea PRNG driving every random choice in a generation run.

Based on Johannes Baagøe's Alea algorithm. Two generators built from the
same seed and driven by calls in the same order yield identical streams,
which is what makes a world reproducible from its seed string.
"""


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class AleaPRNG:
    """
    Alea PRNG keyed by a seed string (or any value with a string form).

    Only internal state advances on each draw; there are no error conditions
    apart from choosing from an empty sequence.
    """

    def __init__(self, seed):
        """Initialize with seed string or number."""
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash_n = 0xEFC8249D

        def mash(data):
            nonlocal mash_n
            data = str(data)
            for char in data:
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * 0x100000000  # 2^32
            return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 -= mash(arg)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(arg)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(arg)
            if self.s2 < 0:
                self.s2 += 1

    def random(self):
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def next(self):
        """Alias of random() for callers that treat the PRNG as a stream."""
        return self.random()

    def randrange(self, n):
        """Return an integer index in [0, n)."""
        return int(self.random() * n)

    def randint(self, low, high):
        """Return an integer in [low, high], both ends inclusive."""
        return low + int(self.random() * (high - low + 1))

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]
