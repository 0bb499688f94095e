import itertools

import pytest

from bgw import SeededRandomness, setup


class FixedRandomness:
    """Scalar source replaying a fixed list of scalars, for known trapdoors."""

    def __init__(self, *scalars):
        self._scalars = itertools.cycle(scalars)

    def __call__(self, order):
        return next(self._scalars)


@pytest.fixture(scope="module")
def channel_10():
    """Channel of 10 participants, the size used by the worked example."""
    return setup(10, rng=SeededRandomness(2005))
