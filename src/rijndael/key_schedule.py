"""
Rijndael key expansion for 128, 192 and 256-bit keys.

The expanded key is a list of 4-byte words. Its first Nk words are the
cipher key itself; every later word w[i] is w[i-Nk] XOR a transform of
w[i-1]:

  i % Nk == 0           -> SubWord(RotWord(w[i-1])) ^ Rcon(i / Nk)
  Nk > 6, i % Nk == 4   -> SubWord(w[i-1])
  otherwise             -> w[i-1]

Consecutive groups of four words form the round keys.
"""

from __future__ import annotations

import logging

from .errors import InvalidKeyLength
from .tables import SBOX, RCON

logger = logging.getLogger(__name__)

# Key length in bytes -> number of rounds
ROUNDS_BY_KEY_LENGTH = {16: 10, 24: 12, 32: 14}

Word = list[int]


def rounds_for_key(key: bytes) -> int:
    """
    Number of cipher rounds for a key.

    Raises:
        InvalidKeyLength: If the key is not 16, 24 or 32 bytes
    """
    try:
        return ROUNDS_BY_KEY_LENGTH[len(key)]
    except KeyError:
        raise InvalidKeyLength(len(key)) from None


def rot_word(word: Word) -> Word:
    """Rotate a 4-byte word left by one byte."""
    return word[1:] + word[:1]


def sub_word(word: Word) -> Word:
    """Apply the S-box to each byte of a word."""
    return [SBOX[b] for b in word]


def rcon(n: int) -> Word:
    """Round constant word for key-schedule repetition n (1-based)."""
    return [RCON[n - 1], 0, 0, 0]


def _xor_words(a: Word, b: Word) -> Word:
    return [x ^ y for x, y in zip(a, b)]


def expand_key_words(key: bytes) -> list[Word]:
    """
    Expand a cipher key into 4*(Nr+1) words.

    Args:
        key: 16, 24 or 32-byte cipher key

    Returns:
        List of 4-byte words

    Raises:
        InvalidKeyLength: If the key length is unsupported
    """
    num_rounds = rounds_for_key(key)
    nk = len(key) // 4
    nw = 4 * (num_rounds + 1)

    w = [list(key[i:i + 4]) for i in range(0, len(key), 4)]
    for i in range(nk, nw):
        temp = w[i - 1]
        if i % nk == 0:
            temp = _xor_words(sub_word(rot_word(temp)), rcon(i // nk))
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)
        w.append(_xor_words(w[i - nk], temp))

    logger.debug(
        "Expanded %d-bit key into %d words (%d rounds)",
        len(key) * 8, len(w), num_rounds,
    )
    return w


def expand_key(key: bytes) -> list[bytes]:
    """
    Expand a cipher key into its round keys.

    Args:
        key: 16, 24 or 32-byte cipher key

    Returns:
        Nr+1 round keys of 16 bytes each (11, 13 or 15 keys)
    """
    w = expand_key_words(key)
    round_keys = []
    for round_num in range(len(w) // 4):
        rk = []
        for col in range(4):
            rk.extend(w[round_num * 4 + col])
        round_keys.append(bytes(rk))
    return round_keys
