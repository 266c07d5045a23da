import pytest

from algebra import rng


@pytest.fixture
def seed():
    """Seed the global RNG for one test; cryptographic randomness after."""
    yield rng.set_seed
    rng.set_seed(None)
