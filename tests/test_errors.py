"""
Tests for the scalar sources and error reporting
================================================
"""

import logging

import pytest
from petrelic.bn import Bn
from petrelic.multiplicative.pairing import G1

from bgw import (
    BackendFailure, BroadcastEncryptionError, InvalidParameter, RandomnessFailure,
    SeededRandomness, SystemRandomness, encrypt, setup,
)
from bgw.algos import _check_not_neutral, normalise_recipients
from bgw.randomness import sample_scalar
from conftest import FixedRandomness


def _broken_source(order):
    raise OSError("entropy pool unavailable")


def test_error_hierarchy():
    assert issubclass(InvalidParameter, ValueError)
    for cls in (InvalidParameter, RandomnessFailure, BackendFailure):
        assert issubclass(cls, BroadcastEncryptionError)


def test_setup_randomness_failure():
    with pytest.raises(RandomnessFailure) as excinfo:
        setup(3, rng=_broken_source)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_encrypt_randomness_failure(channel_10):
    channel, _ = channel_10
    with pytest.raises(RandomnessFailure):
        encrypt(channel, {1, 2}, rng=_broken_source)


@pytest.mark.parametrize("scalar", [0, G1.order(), "12", 1.5, None])
def test_unusable_scalars(scalar):
    with pytest.raises(RandomnessFailure):
        sample_scalar(FixedRandomness(scalar))


def test_scalar_reduced_mod_order():
    order = G1.order()
    assert sample_scalar(FixedRandomness(order + Bn(5))) == Bn(5)
    assert sample_scalar(FixedRandomness(5)) == Bn(5)


def test_system_randomness_in_range():
    order = G1.order()
    for _ in range(10):
        scalar = sample_scalar(SystemRandomness())
        assert Bn(0) < scalar < order
    assert sample_scalar() != sample_scalar()


def test_seeded_randomness_reproducible():
    order = G1.order()
    a, b = SeededRandomness(9), SeededRandomness(9)
    assert [a(order) for _ in range(5)] == [b(order) for _ in range(5)]
    assert SeededRandomness(9)(order) != SeededRandomness(10)(order)


def test_neutral_element_is_backend_failure():
    neutral = G1.neutral_element()
    with pytest.raises(BackendFailure):
        _check_not_neutral(neutral, "test point")
    generator = G1.generator()
    assert _check_not_neutral(generator, "generator") is generator


def test_normalise_recipients():
    assert normalise_recipients([5, 1, 5, 3], 10) == (1, 3, 5)
    assert normalise_recipients(iter([2]), 2) == (2,)
    with pytest.raises(InvalidParameter):
        normalise_recipients([3], 2)


def test_no_secrets_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="bgw"):
        channel, recipients = setup(2, rng=SeededRandomness(4))
        ct0, ct1, key = encrypt(channel, {1, 2})
        recipients[0].decrypt({1, 2}, channel, ct0, ct1)

    messages = [record.getMessage() for record in caplog.records]
    assert any("setup" in m for m in messages)
    assert any("encrypt" in m for m in messages)
    assert any("decrypt" in m for m in messages)
    for secret in (key, recipients[0].private_key):
        assert all(str(secret) not in m for m in messages)


def test_system_randomness_shares_one_lock():
    assert SystemRandomness()._lock is SystemRandomness()._lock
