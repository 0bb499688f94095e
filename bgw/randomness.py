"""Sources of random scalars for setup and encryption.

A scalar source is any callable taking the group order (a `Bn`) and returning
an integer or `Bn` in `[1, order)`. `sample_scalar` is the only place the
algorithms draw from such a source.
"""

import random
import threading

from petrelic.bn import Bn
from petrelic.multiplicative.pairing import G1

from bgw.errors import RandomnessFailure


class SystemRandomness:
    """Draw scalars from relic's cryptographically secure generator.

    This is the default source. relic keeps one generator state for the whole
    process and cffi releases the GIL around the draw, so every instance
    shares one lock.
    """

    _lock = threading.Lock()

    def __call__(self, order):
        with self._lock:
            return order.random()


class SeededRandomness:
    """Reproducible scalar source for tests and benchmarks.

    Not suitable for production keys: anyone knowing `seed` recovers every
    trapdoor drawn from it. Draws are serialised so one instance can be shared
    across threads without two callers observing the same scalar.

    Parameters
    ----------
    seed : int
        seed for the underlying `random.Random`
    """

    def __init__(self, seed):
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def __call__(self, order):
        with self._lock:
            return self._random.randrange(1, int(order))


def sample_scalar(rng=None):
    """Sample one non-zero scalar modulo the group order.

    Parameters
    ----------
    rng : callable, optional
        scalar source (defaults to `SystemRandomness()`)

    Returns
    -------
    Bn
        scalar in `[1, order)`

    Raises
    ------
    RandomnessFailure
        if the source raises, or returns something that is not a non-zero
        scalar
    """
    if rng is None:
        rng = SystemRandomness()
    order = G1.order()
    try:
        scalar = rng(order)
    except Exception as e:
        raise RandomnessFailure("scalar source failed: {}".format(e)) from e

    if isinstance(scalar, bool) or not isinstance(scalar, (int, Bn)):
        raise RandomnessFailure(
            "scalar source returned {!r}, expected an integer".format(type(scalar).__name__))
    if isinstance(scalar, int):
        scalar = Bn.from_decimal(str(scalar))
    scalar = scalar % order
    if scalar == Bn(0):
        raise RandomnessFailure("scalar source returned zero")
    return scalar
