"""
Encrypted vector persistence.

A saved file is ``encrypt(VectorCodec.encode(v))``. Writes go to a temporary
file in the destination directory which is fsynced and then renamed over the
destination, so a failed save never leaves a half-written file behind.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np

from ..codec.vector_codec import VectorCodec
from .cipher import CipherKey, decrypt, encrypt

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class EncryptedVectorStore:
    """Save and load single vectors as encrypted files."""

    def __init__(self, codec: Optional[VectorCodec] = None):
        """
        Initialize store.

        Args:
            codec: Codec used for serialization. Defaults to a codec that
                rejects non-finite values on load.
        """
        self.codec = codec or VectorCodec()

    def save(self, vector: Any, key: CipherKey, destination: PathLike) -> Path:
        """
        Encrypt ``vector`` and write it atomically to ``destination``.

        Args:
            vector: Vector to persist
            key: Caller-owned cipher key
            destination: Target file path; its directory must exist

        Returns:
            Path of the written file

        Raises:
            OSError: If the file cannot be written
        """
        destination = Path(destination)
        blob = encrypt(self.codec.encode(vector), key)

        tmp = tempfile.NamedTemporaryFile(
            dir=destination.parent,
            prefix=f".{destination.name}.",
            suffix=".tmp",
            delete=False
        )
        try:
            with tmp:
                tmp.write(blob)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp.name, destination)
        except BaseException:
            try:
                os.unlink(tmp.name)
            except FileNotFoundError:
                pass
            raise

        logger.debug("Saved encrypted vector to %s (%d bytes)", destination, len(blob))
        return destination

    def load(self, source: PathLike, key: CipherKey) -> np.ndarray:
        """
        Read, decrypt and decode the vector stored at ``source``.

        Raises:
            OSError: If the file cannot be read
            DecryptionFailedError: Wrong key or tampered file
            MalformedPayloadError, CorruptPayloadError: Bad plaintext
        """
        source = Path(source)
        with open(source, "rb") as f:
            blob = f.read()
        vector = self.codec.decode(decrypt(blob, key))
        logger.debug("Loaded encrypted vector from %s (dimension %d)", source, vector.shape[0])
        return vector
