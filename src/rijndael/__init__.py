"""Rijndael/AES block cipher core (FIPS-197, 128/192/256-bit keys)."""

__version__ = "0.1.0"

from .errors import RijndaelError, InvalidKeyLength, InvalidInputLength, InvalidPadding
from .config import CipherConfig
from .key_schedule import expand_key
from .padding import pad, unpad
from .cipher import RijndaelCipher, encrypt, decrypt, encrypt_block, decrypt_block
from .golden import golden_encrypt

__all__ = [
    "RijndaelError",
    "InvalidKeyLength",
    "InvalidInputLength",
    "InvalidPadding",
    "CipherConfig",
    "expand_key",
    "pad",
    "unpad",
    "RijndaelCipher",
    "encrypt",
    "decrypt",
    "encrypt_block",
    "decrypt_block",
    "golden_encrypt",
]
