"""Tests for key expansion against FIPS-197 Appendix A and C."""

import pytest

from rijndael.errors import InvalidKeyLength
from rijndael.key_schedule import (
    expand_key,
    expand_key_words,
    rcon,
    rot_word,
    rounds_for_key,
    sub_word,
)
from rijndael.utils import hex_to_bytes


# FIPS-197 Appendix C.1 round keys (k_sch) for key 000102...0f
C1_KEY = "000102030405060708090a0b0c0d0e0f"
C1_ROUND_KEYS = [
    "000102030405060708090a0b0c0d0e0f",
    "d6aa74fdd2af72fadaa678f1d6ab76fe",
    "b692cf0b643dbdf1be9bc5006830b3fe",
    "b6ff744ed2c2c9bf6c590cbf0469bf41",
    "47f7f7bc95353e03f96c32bcfd058dfd",
    "3caaa3e8a99f9deb50f3af57adf622aa",
    "5e390f7df7a69296a7553dc10aa31f6b",
    "14f9701ae35fe28c440adf4d4ea9c026",
    "47438735a41c65b9e016baf4aebf7ad2",
    "549932d1f08557681093ed9cbe2c974e",
    "13111d7fe3944a17f307a78b4d2b30c5",
]


def word_hex(word: list[int]) -> str:
    return bytes(word).hex()


class TestWordHelpers:
    """Tests for RotWord, SubWord and Rcon."""

    def test_rot_word(self) -> None:
        assert rot_word([0x09, 0xcf, 0x4f, 0x3c]) == [0xcf, 0x4f, 0x3c, 0x09]

    def test_sub_word(self) -> None:
        assert sub_word([0xcf, 0x4f, 0x3c, 0x09]) == [0x8a, 0x84, 0xeb, 0x01]

    def test_rcon(self) -> None:
        assert rcon(1) == [0x01, 0, 0, 0]
        assert rcon(9) == [0x1b, 0, 0, 0]
        assert rcon(10) == [0x36, 0, 0, 0]

    def test_helpers_return_new_words(self) -> None:
        word = [1, 2, 3, 4]
        rot_word(word)
        sub_word(word)
        assert word == [1, 2, 3, 4]


class TestRoundsForKey:
    """Tests for key length validation."""

    @pytest.mark.parametrize("length,rounds", [(16, 10), (24, 12), (32, 14)])
    def test_valid_lengths(self, length: int, rounds: int) -> None:
        assert rounds_for_key(bytes(length)) == rounds

    @pytest.mark.parametrize("length", [0, 1, 15, 17, 20, 31, 33, 64])
    def test_invalid_lengths(self, length: int) -> None:
        with pytest.raises(InvalidKeyLength, match=f"got {length}"):
            rounds_for_key(bytes(length))

    def test_expand_key_rejects_bad_length(self) -> None:
        with pytest.raises(InvalidKeyLength):
            expand_key(bytes(20))


class TestAes128Schedule:
    """AES-128 key expansion."""

    def test_appendix_c1_round_keys(self) -> None:
        round_keys = expand_key(hex_to_bytes(C1_KEY))
        assert [rk.hex() for rk in round_keys] == C1_ROUND_KEYS

    def test_appendix_a1_words(self) -> None:
        w = expand_key_words(hex_to_bytes("2b7e151628aed2a6abf7158809cf4f3c"))
        assert len(w) == 44
        assert word_hex(w[0]) == "2b7e1516"
        assert word_hex(w[4]) == "a0fafe17"
        assert word_hex(w[5]) == "88542cb1"
        assert word_hex(w[6]) == "23a33939"
        assert word_hex(w[7]) == "2a6c7605"
        assert word_hex(w[40]) == "d014f9a8"
        assert word_hex(w[41]) == "c9ee2589"
        assert word_hex(w[42]) == "e13f0cc8"
        assert word_hex(w[43]) == "b6630ca6"

    def test_first_round_key_is_cipher_key(self) -> None:
        key = bytes(range(100, 116))
        assert expand_key(key)[0] == key


class TestLargerKeys:
    """AES-192 and AES-256 key expansion."""

    def test_appendix_a2_words(self) -> None:
        w = expand_key_words(
            hex_to_bytes("8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7b")
        )
        assert len(w) == 52
        assert word_hex(w[5]) == "522c6b7b"
        assert word_hex(w[6]) == "fe0c91f7"
        assert word_hex(w[51]) == "01002202"

    def test_appendix_a3_words(self) -> None:
        w = expand_key_words(hex_to_bytes(
            "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
        ))
        assert len(w) == 60
        assert word_hex(w[8]) == "9ba35411"
        assert word_hex(w[59]) == "706c631e"

    @pytest.mark.parametrize("length,count", [(16, 11), (24, 13), (32, 15)])
    def test_round_key_count(self, length: int, count: int) -> None:
        round_keys = expand_key(bytes(length))
        assert len(round_keys) == count
        assert all(len(rk) == 16 for rk in round_keys)

    def test_key_words_copied_verbatim(self) -> None:
        key = bytes(range(32))
        w = expand_key_words(key)
        assert bytes(sum(w[:8], [])) == key

    def test_schedules_are_independent(self) -> None:
        """Expanding twice gives equal but unshared word lists."""
        key = bytes(24)
        first = expand_key_words(key)
        second = expand_key_words(key)
        assert first == second
        first[10][0] ^= 0xff
        assert first != second
