#!/usr/bin/env python3

"""Objects to represent the broadcast channel (public parameters), recipients and their keys.

All objects are immutable once built and carry no trapdoor: `alpha`, `gamma`
and the per-header `k` exist only as locals of `bgw.algos`.

The algorithms live in `bgw.algos` (`setup`, `encrypt`, `decrypt`), which is
the primary API. `BroadcastChannel.setup`, `BroadcastChannel.encrypt` and
`Recipient.decrypt` are thin wrappers around those functions; `bgw.algos`
imports this module, so the wrappers import it when called.
"""

from petrelic.multiplicative.pairing import G1Element, G2Element

from bgw.errors import InvalidParameter


class _Frozen:
    """Reject attribute assignment once `__init__` has run."""

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def _init(self, **fields):
        for name, value in fields.items():
            object.__setattr__(self, name, value)


class PublicKey(_Frozen):
    """Recipient public key.

    Attributes
    ----------
    point_q : element of G2
        `g2**{alpha**i}` for recipient `i`
    """

    __slots__ = ('point_q',)

    def __init__(self, point_q):
        self._init(point_q=point_q)

    def __eq__(self, other):
        return isinstance(other, PublicKey) and self.point_q == other.point_q

    def __hash__(self):
        return hash(G2Element.to_binary(self.point_q))


class PrivateKey(_Frozen):
    """Recipient private key.

    Attributes
    ----------
    key : element of G1
        `g1**{gamma * alpha**i}` for recipient `i`
    """

    __slots__ = ('key',)

    def __init__(self, key):
        self._init(key=key)

    def __repr__(self):
        return "PrivateKey(<hidden>)"


class KeyPair(_Frozen):
    """Key pair issued to one recipient at setup."""

    __slots__ = ('public_key', 'private_key')

    def __init__(self, public_key, private_key):
        self._init(public_key=public_key, private_key=private_key)


class Recipient(_Frozen):
    """A registered recipient of the broadcast channel.

    Parameters
    ----------
    identifier : int
        recipient index, between 1 and `n` inclusive
    key_pair : KeyPair
        keys issued at setup
    """

    __slots__ = ('identifier', 'key_pair')

    def __init__(self, identifier, key_pair):
        self._init(identifier=identifier, key_pair=key_pair)

    @property
    def public_key(self):
        return self.key_pair.public_key.point_q

    @property
    def private_key(self):
        return self.key_pair.private_key.key

    def decrypt(self, recipients, channel, ct0, ct1):
        """Recover the session key from a header; see `bgw.algos.decrypt`."""
        from bgw import algos
        return algos.decrypt(self, recipients, channel, ct0, ct1)

    def __repr__(self):
        return "Recipient(identifier={})".format(self.identifier)


class BroadcastChannel(_Frozen):
    """Public parameters of a broadcast channel over BLS12-381 (asymmetric pairing).

    Dependencies
    ------------
    * petrelic

    Attributes
    ----------
    n : int
        number of participants
    g1 : element of G1
        generator of G1
    g2 : element of G2
        generator of G2
    p_parameters_g1 : tuple of elements of G1
        `P[i] = g1**{alpha**i}` for i from 1 to `n` inclusive, followed by
        `V = g1**gamma`; `n`+1 entries
    p_parameters_g1_upper : tuple of elements of G1
        `P[i]` for i from `n`+2 to 2`n` inclusive; `n`-1 entries.
        `P[n+1]` is never published.
    q_parameters_g2 : tuple of elements of G2
        `(g2, g2**alpha)`
    """

    __slots__ = ('n', 'g1', 'g2', 'p_parameters_g1', 'p_parameters_g1_upper', 'q_parameters_g2')

    def __init__(self, n, g1, g2, p_parameters_g1, p_parameters_g1_upper, q_parameters_g2):
        p_parameters_g1 = tuple(p_parameters_g1)
        p_parameters_g1_upper = tuple(p_parameters_g1_upper)
        q_parameters_g2 = tuple(q_parameters_g2)
        if len(p_parameters_g1) != n + 1:
            raise InvalidParameter("expected {} points in p_parameters_g1, got {}".format(n + 1, len(p_parameters_g1)))
        if len(p_parameters_g1_upper) != n - 1:
            raise InvalidParameter("expected {} points in p_parameters_g1_upper, got {}".format(
                n - 1, len(p_parameters_g1_upper)))
        if len(q_parameters_g2) != 2:
            raise InvalidParameter("expected 2 points in q_parameters_g2, got {}".format(len(q_parameters_g2)))
        self._init(n=n, g1=g1, g2=g2,
                   p_parameters_g1=p_parameters_g1,
                   p_parameters_g1_upper=p_parameters_g1_upper,
                   q_parameters_g2=q_parameters_g2)

    @classmethod
    def setup(cls, n, rng=None):
        """Create a channel for `n` participants; see `bgw.algos.setup`."""
        from bgw import algos
        return algos.setup(n, rng=rng)

    def encrypt(self, recipients, rng=None):
        """Encapsulate a session key for `recipients`; see `bgw.algos.encrypt`."""
        from bgw import algos
        return algos.encrypt(self, recipients, rng=rng)

    @property
    def v(self):
        """`V = g1**gamma`, the last entry of `p_parameters_g1`."""
        return self.p_parameters_g1[-1]

    def p(self, i):
        """Published alpha power `P[i] = g1**{alpha**i}`.

        Parameters
        ----------
        i : int
            index in `[1, n]` or `[n+2, 2n]`

        Raises
        ------
        IndexError
            for the withheld index `n`+1 or any index outside `[1, 2n]`
        """
        if i == self.n + 1:
            raise IndexError("P[{}] is withheld and never published".format(i))
        if 1 <= i <= self.n:
            return self.p_parameters_g1[i - 1]
        if self.n + 2 <= i <= 2 * self.n:
            return self.p_parameters_g1_upper[i - self.n - 2]
        raise IndexError("P[{}] is outside the published range [1, {}]".format(i, 2 * self.n))

    def get_size(self):
        """Calculate the size (in bytes) of the public parameters."""
        size = 0
        for point in (self.g1,) + self.p_parameters_g1 + self.p_parameters_g1_upper:
            size = size + len(G1Element.to_binary(point))
        for point in (self.g2,) + self.q_parameters_g2:
            size = size + len(G2Element.to_binary(point))
        return size

    def __repr__(self):
        return "BroadcastChannel(n={})".format(self.n)
