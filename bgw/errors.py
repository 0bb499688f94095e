"""Exceptions raised by the broadcast encryption algorithms.
"""


class BroadcastEncryptionError(Exception):
    """Base class for every error raised by `bgw`."""


class InvalidParameter(BroadcastEncryptionError, ValueError):
    """A caller-supplied parameter is out of range.

    Raised for a participant count below 1, and for an empty recipient set or
    one holding an identifier outside `[1, n]`.
    """


class RandomnessFailure(BroadcastEncryptionError):
    """The scalar source could not supply a usable scalar.

    Retrying with a working source is left to the caller: a fresh sample
    produces a new channel (or a new header), not the same one.
    """


class BackendFailure(BroadcastEncryptionError):
    """The group backend returned a degenerate element for well-formed input.

    Anything computed by the failing call must be discarded.
    """
