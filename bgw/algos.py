#!/usr/bin/env python3

"""Implementation of the broadcast encryption algorithms (Setup, Encrypt, Decrypt).
"""

import logging

from petrelic.multiplicative.pairing import G1, G2

from bgw.objects import BroadcastChannel, KeyPair, PrivateKey, PublicKey, Recipient
from bgw.randomness import sample_scalar
from bgw.errors import BackendFailure, InvalidParameter

logger = logging.getLogger(__name__)


def _check_not_neutral(element, label):
    if element.is_neutral_element():
        raise BackendFailure("{} is the neutral element".format(label))
    return element


def normalise_recipients(recipients, n):
    """Turn an iterable of identifiers into a sorted tuple of distinct ids.

    Parameters
    ----------
    recipients : iterable of int
        identifiers of the recipient set `S`
    n : int
        number of participants of the channel

    Returns
    -------
    tuple of int
        the distinct identifiers, in increasing order

    Raises
    ------
    InvalidParameter
        if the set is empty or holds anything but integers in `[1, n]`
    """
    if recipients is None:
        raise InvalidParameter("recipient set must not be None")
    ids = set()
    for i in recipients:
        if isinstance(i, bool) or not isinstance(i, int):
            raise InvalidParameter("recipient identifier {!r} is not an integer".format(i))
        if not 1 <= i <= n:
            raise InvalidParameter("recipient identifier {} is outside [1, {}]".format(i, n))
        ids.add(i)
    if not ids:
        raise InvalidParameter("recipient set must not be empty")
    return tuple(sorted(ids))


def setup(n, rng=None):
    """Generate the public parameters and the key pairs of `n` recipients over BLS12-381.

    Parameters
    ----------
    n : int
        number of participants (at least 1)
    rng : callable, optional
        scalar source (see `bgw.randomness`); defaults to the system CSPRNG

    Returns
    -------
    channel : BroadcastChannel
        public parameters
    recipients : list of Recipient
        `recipients[i-1]` holds the key pair of identifier `i`

    Raises
    ------
    InvalidParameter
        if `n` is not an integer of at least 1
    RandomnessFailure
        if `rng` cannot supply `alpha` or `gamma`
    BackendFailure
        if petrelic returns a neutral element for a generator or key

    Notes
    -----
    `alpha` and `gamma` never leave this function. The alpha-power sequence is
    computed up to `2n`, but `P[n+1]` is dropped: it is the value the security
    of the scheme rests on.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidParameter("number of participants must be an integer >= 1, got {!r}".format(n))
    logger.debug("setup: generating parameters for %d participants", n)

    g1 = _check_not_neutral(G1.generator(), "generator of G1")
    g2 = _check_not_neutral(G2.generator(), "generator of G2")

    alpha = sample_scalar(rng)

    # P[0..2n] and Q[0..n], each power obtained from the previous one
    p_values = [g1]
    for i in range(2 * n):
        p_values.append(p_values[i] ** alpha)
    q_values = [g2]
    for i in range(n):
        q_values.append(q_values[i] ** alpha)

    gamma = sample_scalar(rng)
    v = _check_not_neutral(g1 ** gamma, "V")

    participants = []
    for i in range(1, n + 1):
        secret_key = _check_not_neutral(p_values[i] ** gamma, "private key {}".format(i))
        key_pair = KeyPair(PublicKey(q_values[i]), PrivateKey(secret_key))
        participants.append(Recipient(i, key_pair))

    channel = BroadcastChannel(
        n, g1, g2,
        p_parameters_g1=p_values[1:n + 1] + [v],
        p_parameters_g1_upper=p_values[n + 2:],
        q_parameters_g2=q_values[:2],
    )
    return channel, participants


def encrypt(channel, recipients, rng=None):
    """Encapsulate a fresh session key for a set of recipients.

    Parameters
    ----------
    channel : BroadcastChannel
        public parameters
    recipients : iterable of int
        identifiers in `[1, channel.n]`; duplicates count once
    rng : callable, optional
        scalar source for the one-time `k`

    Returns
    -------
    ct0 : element of G1
        `(V * prod_{i in S} P[n+1-i])**k`
    ct1 : element of G2
        `g2**k`
    key : element of GT
        session key `e(P[n], g2**{alpha k})`
    """
    ids = normalise_recipients(recipients, channel.n)
    logger.debug("encrypt: header for %d of %d participants", len(ids), channel.n)
    n = channel.n
    q0, q1 = channel.q_parameters_g2

    k = sample_scalar(rng)

    key = _check_not_neutral(channel.p(n).pair(q1 ** k), "session key")
    ct1 = q0 ** k

    ct0 = channel.v
    for i in ids:
        # n+1-i stays in [1, n], never reaching the withheld index
        ct0 = ct0 * channel.p(n + 1 - i)
    ct0 = ct0 ** k

    return ct0, ct1, key


def decrypt(recipient, recipients, channel, ct0, ct1):
    """Recover the session key of a header as `recipient`.

    Parameters
    ----------
    recipient : Recipient
        the decrypting recipient, issued under `channel`
    recipients : iterable of int
        the recipient set the header was encrypted to
    channel : BroadcastChannel
        public parameters
    ct0 : element of G1
        first header element
    ct1 : element of G2
        second header element

    Returns
    -------
    element of GT
        the session key when `recipient.identifier` is in `recipients`;
        otherwise an unrelated element (no error is raised)
    """
    ids = normalise_recipients(recipients, channel.n)
    n = channel.n
    identifier = recipient.identifier
    if not 1 <= identifier <= n:
        raise InvalidParameter("recipient {} was not issued for a channel of {} participants".format(identifier, n))
    logger.debug("decrypt: recipient %d, header for %d participants", identifier, len(ids))

    numerator = ct0.pair(recipient.public_key)

    # cancels every term of e(ct0, Q[i]) except the one carrying P[n+1]
    accumulator = recipient.private_key
    for j in ids:
        if j == identifier:
            continue
        accumulator = accumulator * channel.p(n + 1 - j + identifier)

    denominator = accumulator.pair(ct1)
    return numerator * denominator.inverse()
