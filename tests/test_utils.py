"""Tests for state/byte conversion helpers."""

import pytest

from rijndael.utils import (
    bytes_to_state,
    state_to_bytes,
    split_blocks,
    hex_to_bytes,
)


class TestStateConversion:
    """Column-major state layout."""

    def test_column_major(self) -> None:
        state = bytes_to_state(bytes(range(16)))
        assert state == [
            [0, 4, 8, 12],
            [1, 5, 9, 13],
            [2, 6, 10, 14],
            [3, 7, 11, 15],
        ]

    def test_round_trip(self) -> None:
        data = bytes(range(100, 116))
        assert state_to_bytes(bytes_to_state(data)) == data

    def test_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="Expected 16 bytes"):
            bytes_to_state(bytes(15))


class TestHelpers:
    """Block splitting and hex helpers."""

    def test_split_blocks(self) -> None:
        blocks = split_blocks(bytes(range(48)))
        assert blocks == [bytes(range(0, 16)), bytes(range(16, 32)), bytes(range(32, 48))]

    def test_split_blocks_unaligned(self) -> None:
        with pytest.raises(ValueError, match="not a multiple"):
            split_blocks(bytes(17))

    def test_hex_ignores_whitespace(self) -> None:
        assert hex_to_bytes("00 01\n02") == b"\x00\x01\x02"
