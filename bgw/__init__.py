"""Pairing-based broadcast encryption with constant-size headers, based on
[BGW05].

Notes
-----
We follow the notation of the paper where we can: `P[i] = g1**{alpha**i}`,
`Q[i] = g2**{alpha**i}`, `V = g1**gamma`. The group law is written
multiplicatively, as in petrelic: the paper's `gamma * P[i]` is
`P[i] ** gamma` here. Recipient identifiers run from 1 to `n`.

`P[n+1]` is never published. The remaining powers up to `P[2n]` are, since
decryption needs `P[n+1-j+i]` for every other member `j` of the recipient set.

References
----------
[BGW05] D. Boneh, C. Gentry, B. Waters. Collusion Resistant Broadcast
Encryption with Short Ciphertexts and Private Keys. CRYPTO 2005. Cryptology
ePrint Archive paper [2005/018](https://eprint.iacr.org/2005/018).

Examples
--------
Set up a channel for 10 recipients:

>>> from bgw import setup
>>> channel, recipients = setup(10)

Encapsulate a session key for recipients 1, 3 and 5:

>>> ct0, ct1, key = channel.encrypt({1, 3, 5})

Recipient 3 recovers it, recipient 2 does not:

>>> recipients[2].decrypt({1, 3, 5}, channel, ct0, ct1) == key
True
>>> recipients[1].decrypt({1, 3, 5}, channel, ct0, ct1) == key
False
"""

from bgw.errors import BackendFailure, BroadcastEncryptionError, InvalidParameter, RandomnessFailure
from bgw.objects import BroadcastChannel, KeyPair, PrivateKey, PublicKey, Recipient
from bgw.randomness import SeededRandomness, SystemRandomness
from bgw.algos import decrypt, encrypt, setup

__all__ = [
    'setup', 'encrypt', 'decrypt',
    'BroadcastChannel', 'Recipient', 'KeyPair', 'PublicKey', 'PrivateKey',
    'SystemRandomness', 'SeededRandomness',
    'BroadcastEncryptionError', 'InvalidParameter', 'RandomnessFailure', 'BackendFailure',
]
