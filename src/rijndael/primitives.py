"""
Rijndael round transformations and their inverses.

Every function takes a 4x4 state (see ``rijndael.utils``) and returns a
new state. Arguments are never modified in place.
"""

from __future__ import annotations

from .tables import SBOX, INV_SBOX, MIX_MATRIX, INV_MIX_MATRIX, gf_mul
from .utils import State


def sub_bytes(state: State) -> State:
    """Apply the S-box to each byte."""
    return [[SBOX[b] for b in row] for row in state]


def inv_sub_bytes(state: State) -> State:
    """Apply the inverse S-box to each byte."""
    return [[INV_SBOX[b] for b in row] for row in state]


def _rotate_left(row: list[int], n: int) -> list[int]:
    n %= len(row)
    return row[n:] + row[:n]


def _rotate_right(row: list[int], n: int) -> list[int]:
    return _rotate_left(row, -n)


def shift_rows(state: State) -> State:
    """
    Rotate row r left by r positions.

      [s00 s01 s02 s03]      [s00 s01 s02 s03]
      [s10 s11 s12 s13]  ->  [s11 s12 s13 s10]
      [s20 s21 s22 s23]      [s22 s23 s20 s21]
      [s30 s31 s32 s33]      [s33 s30 s31 s32]
    """
    return [_rotate_left(row, r) for r, row in enumerate(state)]


def inv_shift_rows(state: State) -> State:
    """Rotate row r right by r positions."""
    return [_rotate_right(row, r) for r, row in enumerate(state)]


def _multiply_columns(
    state: State,
    matrix: tuple[tuple[int, ...], ...],
) -> State:
    """
    Multiply every state column by a 4x4 matrix over GF(2^8).

    The result is built into a fresh state, so every output cell reads
    the untouched input column.
    """
    result = [[0] * 4 for _ in range(4)]
    for col in range(4):
        column = [state[row][col] for row in range(4)]
        for row in range(4):
            cell = 0
            for k in range(4):
                cell ^= gf_mul(matrix[row][k], column[k])
            result[row][col] = cell
    return result


def mix_columns(state: State) -> State:
    """Mix each column with the {02,03,01,01} circulant matrix."""
    return _multiply_columns(state, MIX_MATRIX)


def inv_mix_columns(state: State) -> State:
    """Mix each column with the {0e,0b,0d,09} circulant matrix."""
    return _multiply_columns(state, INV_MIX_MATRIX)


def add_round_key(state: State, round_key: bytes) -> State:
    """
    XOR the state with a 16-byte round key.

    The round key is laid out like a block: byte ``4*col + row`` lands on
    ``state[row][col]``, so key word ``col`` covers state column ``col``.

    Args:
        state: 4x4 state
        round_key: 16-byte round key

    Returns:
        New 4x4 state
    """
    if len(round_key) != 16:
        raise ValueError(f"Round key must be 16 bytes, got {len(round_key)}")
    return [
        [state[row][col] ^ round_key[4 * col + row] for col in range(4)]
        for row in range(4)
    ]
