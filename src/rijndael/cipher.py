"""
Rijndael/AES block orchestrator.

Input is padded, split into 16-byte blocks and every block is run through
the round pipeline independently (electronic codebook, no chaining).

Encryption schedule (Nr = 10/12/14):
- Round 0:        AddRoundKey
- Rounds 1..Nr-1: SubBytes, ShiftRows, MixColumns, AddRoundKey
- Round Nr:       SubBytes, ShiftRows, AddRoundKey (no MixColumns)

Decryption schedule:
- Round Nr:       AddRoundKey
- Rounds Nr-1..1: InvShiftRows, InvSubBytes, AddRoundKey, InvMixColumns
- Round 0:        InvShiftRows, InvSubBytes, AddRoundKey
"""

from __future__ import annotations

import logging

from .config import CipherConfig
from .errors import InvalidInputLength
from .key_schedule import expand_key, rounds_for_key
from .padding import pad, unpad
from .primitives import (
    sub_bytes,
    inv_sub_bytes,
    shift_rows,
    inv_shift_rows,
    mix_columns,
    inv_mix_columns,
    add_round_key,
)
from .trace import TraceRecorder
from .utils import BLOCK_SIZE, State, bytes_to_state, state_to_bytes, split_blocks

logger = logging.getLogger(__name__)

# Operations that only depend on the state
_STATE_OPS = {
    "SubBytes": sub_bytes,
    "InvSubBytes": inv_sub_bytes,
    "ShiftRows": shift_rows,
    "InvShiftRows": inv_shift_rows,
    "MixColumns": mix_columns,
    "InvMixColumns": inv_mix_columns,
}

Schedule = list[tuple[int, list[str]]]


def encryption_schedule(num_rounds: int) -> Schedule:
    """(round, operations) steps of the forward cipher."""
    schedule = [(0, ["AddRoundKey"])]
    for round_num in range(1, num_rounds):
        schedule.append(
            (round_num, ["SubBytes", "ShiftRows", "MixColumns", "AddRoundKey"])
        )
    schedule.append((num_rounds, ["SubBytes", "ShiftRows", "AddRoundKey"]))
    return schedule


def decryption_schedule(num_rounds: int) -> Schedule:
    """(round, operations) steps of the inverse cipher."""
    schedule = [(num_rounds, ["AddRoundKey"])]
    for round_num in range(num_rounds - 1, 0, -1):
        schedule.append(
            (round_num, ["InvShiftRows", "InvSubBytes", "AddRoundKey", "InvMixColumns"])
        )
    schedule.append((0, ["InvShiftRows", "InvSubBytes", "AddRoundKey"]))
    return schedule


def _run_schedule(
    block: bytes,
    round_keys: list[bytes],
    schedule: Schedule,
    tracer: TraceRecorder | None = None,
    block_index: int = 0,
) -> bytes:
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be {BLOCK_SIZE} bytes, got {len(block)}")

    state: State = bytes_to_state(block)
    if tracer:
        tracer.record(block=block_index, round=schedule[0][0],
                      operation="input", state=state)

    for round_num, operations in schedule:
        for op in operations:
            if op == "AddRoundKey":
                state = add_round_key(state, round_keys[round_num])
            elif op in _STATE_OPS:
                state = _STATE_OPS[op](state)
            else:
                raise ValueError(f"Unknown operation: {op}")

            if tracer:
                tracer.record(block=block_index, round=round_num,
                              operation=op, state=state)

    return state_to_bytes(state)


def encrypt_block(block: bytes, round_keys: list[bytes]) -> bytes:
    """
    Encrypt a single 16-byte block with pre-expanded round keys.

    Args:
        block: 16-byte plaintext block
        round_keys: Nr+1 round keys from expand_key()

    Returns:
        16-byte ciphertext block
    """
    return _run_schedule(block, round_keys, encryption_schedule(len(round_keys) - 1))


def decrypt_block(block: bytes, round_keys: list[bytes]) -> bytes:
    """
    Decrypt a single 16-byte block with pre-expanded round keys.
    """
    return _run_schedule(block, round_keys, decryption_schedule(len(round_keys) - 1))


class RijndaelCipher:
    """
    AES cipher bound to one key.

    The key is expanded once at construction. Messages are padded and
    processed block by block with the strategy named in the config.
    """

    def __init__(
        self,
        key: bytes,
        config: CipherConfig | None = None,
        tracer: TraceRecorder | None = None,
    ):
        """
        Initialize the cipher.

        Args:
            key: 16, 24 or 32-byte cipher key
            config: Orchestration settings (default: serial)
            tracer: Optional trace recorder for per-operation states

        Raises:
            InvalidKeyLength: If the key length is unsupported
            ValueError: If a tracer is combined with a parallel strategy
        """
        self.config = config or CipherConfig()
        if tracer is not None and self.config.parallel:
            raise ValueError("Tracing requires the serial strategy")

        self._rounds = rounds_for_key(key)
        self._round_keys = expand_key(bytes(key))
        self._strategy = self.config.create_strategy()
        self.tracer = tracer

        self._encrypt_schedule = encryption_schedule(self._rounds)
        self._decrypt_schedule = decryption_schedule(self._rounds)

    @property
    def rounds(self) -> int:
        """Number of cipher rounds (10, 12 or 14)."""
        return self._rounds

    @property
    def round_keys(self) -> list[bytes]:
        """Copy of the expanded round keys."""
        return list(self._round_keys)

    def encrypt_block(self, block: bytes, block_index: int = 0) -> bytes:
        """Encrypt one 16-byte block."""
        return _run_schedule(block, self._round_keys, self._encrypt_schedule,
                             self.tracer, block_index)

    def decrypt_block(self, block: bytes, block_index: int = 0) -> bytes:
        """Decrypt one 16-byte block."""
        return _run_schedule(block, self._round_keys, self._decrypt_schedule,
                             self.tracer, block_index)

    def _map(self, fn, blocks: list[bytes]) -> list[bytes]:
        if self.tracer:
            return [fn(block, i) for i, block in enumerate(blocks)]
        return self._strategy.map_blocks(fn, blocks)

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Pad and encrypt a message of any length.

        Returns:
            Ciphertext, 1..16 bytes longer than the plaintext
        """
        blocks = split_blocks(pad(plaintext, self.config.block_size),
                              self.config.block_size)
        logger.debug("Encrypting %d block(s) with %r", len(blocks), self._strategy)
        return b"".join(self._map(self.encrypt_block, blocks))

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt every block of a ciphertext and strip the padding.

        Raises:
            InvalidInputLength: If the ciphertext is empty or not block-aligned
            InvalidPadding: If the decrypted padding is malformed
        """
        block_size = self.config.block_size
        if len(ciphertext) == 0 or len(ciphertext) % block_size != 0:
            raise InvalidInputLength(len(ciphertext), block_size)

        blocks = split_blocks(ciphertext, block_size)
        logger.debug("Decrypting %d block(s) with %r", len(blocks), self._strategy)
        padded = b"".join(self._map(self.decrypt_block, blocks))
        return unpad(padded, block_size)

    def __repr__(self) -> str:
        key_bits = 32 * (self._rounds - 6)
        return (f"{self.__class__.__name__}(key_bits={key_bits}, "
                f"rounds={self._rounds}, strategy={self.config.strategy!r})")


def encrypt(plaintext: bytes, key: bytes, config: CipherConfig | None = None) -> bytes:
    """
    Encrypt a message under a key (ECB, PKCS#7 padding).

    Raises:
        InvalidKeyLength: If the key is not 16, 24 or 32 bytes
    """
    return RijndaelCipher(key, config).encrypt(plaintext)


def decrypt(ciphertext: bytes, key: bytes, config: CipherConfig | None = None) -> bytes:
    """
    Decrypt a message produced by encrypt().

    Raises:
        InvalidKeyLength: If the key is not 16, 24 or 32 bytes
        InvalidInputLength: If the ciphertext is not a whole number of blocks
        InvalidPadding: If the padding check fails
    """
    return RijndaelCipher(key, config).decrypt(ciphertext)
