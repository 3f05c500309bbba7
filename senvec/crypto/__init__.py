"""Symmetric encryption and encrypted vector files."""

from .cipher import CipherKey, SymmetricCipher, decrypt, encrypt, generate_key
from .store import EncryptedVectorStore

__all__ = [
    'CipherKey',
    'SymmetricCipher',
    'EncryptedVectorStore',
    'generate_key',
    'encrypt',
    'decrypt',
]
