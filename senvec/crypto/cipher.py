"""
Symmetric encryption of opaque byte blobs.

AES-GCM with a fresh random 96-bit nonce per call. The nonce is stored in
front of the ciphertext and GCM appends a 128-bit tag, so the blob layout is
``nonce || ciphertext || tag``. Decryption authenticates before returning
anything; a wrong key, truncation or a flipped bit all raise
``DecryptionFailedError``.
"""

import logging
import os
from dataclasses import dataclass, field

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import DecryptionFailedError, InvalidKeySizeError

logger = logging.getLogger(__name__)

NONCE_SIZE = 12
TAG_SIZE = 16
DEFAULT_KEY_BITS = 128
SUPPORTED_KEY_BITS = (128, 192, 256)
# Binds ciphertexts to this blob format
ASSOCIATED_DATA = b"senvec.vector.v1"


@dataclass(frozen=True)
class CipherKey:
    """Raw AES key material owned by the caller."""

    material: bytes = field(repr=False)

    def __post_init__(self):
        if not isinstance(self.material, (bytes, bytearray)):
            raise TypeError("Key material must be bytes")
        if len(self.material) * 8 not in SUPPORTED_KEY_BITS:
            raise InvalidKeySizeError(len(self.material) * 8)
        object.__setattr__(self, 'material', bytes(self.material))

    @property
    def bits(self) -> int:
        return len(self.material) * 8

    @classmethod
    def from_bytes(cls, raw: bytes) -> "CipherKey":
        return cls(raw)

    def __repr__(self) -> str:
        return f"CipherKey(bits={self.bits}, material=<redacted>)"


def generate_key(bits: int = DEFAULT_KEY_BITS) -> CipherKey:
    """
    Generate a random AES key.

    Args:
        bits: Key length, one of 128, 192 or 256

    Returns:
        New CipherKey drawn from the OS CSPRNG
    """
    if isinstance(bits, bool) or bits not in SUPPORTED_KEY_BITS:
        raise InvalidKeySizeError(bits)
    return CipherKey(AESGCM.generate_key(bit_length=bits))


def encrypt(data: bytes, key: CipherKey) -> bytes:
    """Encrypt ``data`` under ``key``; output differs on every call."""
    nonce = os.urandom(NONCE_SIZE)
    sealed = AESGCM(key.material).encrypt(nonce, bytes(data), ASSOCIATED_DATA)
    return nonce + sealed


def decrypt(blob: bytes, key: CipherKey) -> bytes:
    """
    Authenticate and decrypt a blob produced by ``encrypt``.

    Raises:
        DecryptionFailedError: Blob too short, wrong key, or tampered data
    """
    blob = bytes(blob)
    if len(blob) < NONCE_SIZE + TAG_SIZE:
        raise DecryptionFailedError(
            f"Ciphertext too short: {len(blob)} bytes",
            {'length': len(blob), 'minimum': NONCE_SIZE + TAG_SIZE}
        )

    nonce, sealed = blob[:NONCE_SIZE], blob[NONCE_SIZE:]
    try:
        return AESGCM(key.material).decrypt(nonce, sealed, ASSOCIATED_DATA)
    except InvalidTag as e:
        logger.warning("Ciphertext failed authentication (%d bytes)", len(blob))
        raise DecryptionFailedError(
            "Ciphertext failed authentication: wrong key or corrupted data",
            {'length': len(blob)}
        ) from e


class SymmetricCipher:
    """Object facade over the module functions."""

    key_bits = DEFAULT_KEY_BITS

    def __init__(self, key_bits: int = DEFAULT_KEY_BITS):
        if isinstance(key_bits, bool) or key_bits not in SUPPORTED_KEY_BITS:
            raise InvalidKeySizeError(key_bits)
        self.key_bits = key_bits

    @classmethod
    def from_config(cls, config) -> "SymmetricCipher":
        """Build a cipher whose generated keys use ``config.key_bits``."""
        return cls(key_bits=config.key_bits)

    def generate_key(self) -> CipherKey:
        return generate_key(self.key_bits)

    def encrypt(self, data: bytes, key: CipherKey) -> bytes:
        return encrypt(data, key)

    def decrypt(self, blob: bytes, key: CipherKey) -> bytes:
        return decrypt(blob, key)
