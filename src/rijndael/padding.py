"""
Block padding (PKCS#7 layout).

n = block_size - len(data) % block_size bytes, each equal to n, are
appended. n is never 0: already-aligned input gains a full block.
"""

from __future__ import annotations

from .errors import InvalidPadding
from .utils import BLOCK_SIZE


def pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Pad data to a multiple of block_size.

    Args:
        data: Arbitrary-length input
        block_size: Block length in bytes (1-255)

    Returns:
        Padded bytes, 1..block_size bytes longer than data
    """
    if not 1 <= block_size <= 255:
        raise ValueError(f"block_size must be 1..255, got {block_size}")
    pad_len = block_size - len(data) % block_size
    return bytes(data) + bytes([pad_len]) * pad_len


def unpad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Strip padding added by pad().

    Raises:
        InvalidPadding: If data is empty, not block-aligned, or does not
            end in n copies of n with 1 <= n <= block_size
    """
    if not 1 <= block_size <= 255:
        raise ValueError(f"block_size must be 1..255, got {block_size}")
    if not data or len(data) % block_size != 0:
        raise InvalidPadding(
            f"Padded data must be a non-empty multiple of {block_size} bytes, "
            f"got {len(data)}"
        )
    pad_len = data[-1]
    if not 1 <= pad_len <= block_size:
        raise InvalidPadding(f"Invalid padding length byte 0x{pad_len:02x}")
    if any(b != pad_len for b in data[-pad_len:]):
        raise InvalidPadding(f"Padding bytes do not all equal 0x{pad_len:02x}")
    return bytes(data[:-pad_len])
