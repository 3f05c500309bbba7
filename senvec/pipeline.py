"""
End-to-end sentence comparison.

Averages each sentence into a vector, stores both vectors encrypted, reloads
them, and reports cosine similarity alongside the LSH hashes and their
Hamming distance.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from .config import SenvecConfig
from .codec.vector_codec import VectorCodec
from .crypto.cipher import CipherKey
from .crypto.store import EncryptedVectorStore
from .lsh.hamming import hamming_distance, hash_similarity
from .lsh.hasher import LSHHasher
from .similarity import EmbeddingProvider, cosine_similarity, sentence_vector

logger = logging.getLogger(__name__)

Sentence = Union[str, Iterable[str]]


@dataclass
class SimilarityReport:
    """Result of comparing two sentences."""

    cosine: float
    hash_a: str
    hash_b: str
    hamming: int
    hash_similarity: float
    paths: Tuple[Path, Path] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cosine": self.cosine,
            "hash_a": self.hash_a,
            "hash_b": self.hash_b,
            "hamming": self.hamming,
            "hash_similarity": self.hash_similarity,
            "paths": [str(p) for p in self.paths],
        }


def compare_sentences(
    sentence_a: Sentence,
    sentence_b: Sentence,
    provider: EmbeddingProvider,
    key: CipherKey,
    workdir: Union[str, Path],
    config: Optional[SenvecConfig] = None,
) -> Optional[SimilarityReport]:
    """
    Compare two sentences through encrypted storage and LSH.

    Args:
        sentence_a: First sentence (text or tokens)
        sentence_b: Second sentence (text or tokens)
        provider: Embedding lookup
        key: Key used to encrypt the stored vectors
        workdir: Existing directory receiving ``vec1.bin`` and ``vec2.bin``
        config: Hash width, seed and codec policy; defaults if omitted

    Returns:
        SimilarityReport, or None when either sentence has no known token
    """
    config = config or SenvecConfig()
    workdir = Path(workdir)

    vec_a = sentence_vector(sentence_a, provider)
    vec_b = sentence_vector(sentence_b, provider)
    if vec_a is None or vec_b is None:
        logger.warning("At least one sentence has no tokens with an embedding")
        return None

    store = EncryptedVectorStore(VectorCodec(allow_non_finite=config.allow_non_finite))
    path_a = store.save(vec_a, key, workdir / "vec1.bin")
    path_b = store.save(vec_b, key, workdir / "vec2.bin")
    vec_a = store.load(path_a, key)
    vec_b = store.load(path_b, key)

    hasher = LSHHasher(config.hash_bits, vec_a.shape[0], config.seed)
    hash_a = hasher.compute_hash(vec_a)
    hash_b = hasher.compute_hash(vec_b)

    report = SimilarityReport(
        cosine=cosine_similarity(vec_a, vec_b),
        hash_a=hash_a,
        hash_b=hash_b,
        hamming=hamming_distance(hash_a, hash_b),
        hash_similarity=hash_similarity(hash_a, hash_b),
        paths=(path_a, path_b),
    )
    logger.info(
        "Cosine similarity %.4f, Hamming distance %d/%d",
        report.cosine, report.hamming, config.hash_bits
    )
    return report
