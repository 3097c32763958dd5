"""Exceptions raised by the cipher core.

All of them subclass ``ValueError``: each one reports input the caller
must correct before retrying. Nothing is repaired or truncated silently.
"""


class RijndaelError(ValueError):
    """Base class for cipher input errors."""


class InvalidKeyLength(RijndaelError):
    """Key is not 16, 24 or 32 bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Key must be 16, 24 or 32 bytes, got {length}")


class InvalidInputLength(RijndaelError):
    """Ciphertext is not a whole number of blocks."""

    def __init__(self, length: int, block_size: int = 16):
        self.length = length
        self.block_size = block_size
        super().__init__(
            f"Ciphertext length must be a non-zero multiple of {block_size} "
            f"bytes, got {length}"
        )


class InvalidPadding(RijndaelError):
    """Trailing padding bytes do not form a valid pad."""
