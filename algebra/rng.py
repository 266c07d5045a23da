"""Process-wide random source for the number-theory kernel.

Use set_seed(n) at test start for reproducibility.
Default (no seed) draws from the secrets module.
"""

import random as _random
import secrets


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses secrets."""

    def __init__(self, seed=None):
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None  # Use OS-level randomness

    def randbelow(self, n: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(n)
        return secrets.randbelow(n)


# Global instance
_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = cryptographic randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)
