"""
Sentence vectors from word embeddings.

A sentence vector is the mean of the embeddings of its recognized tokens.
The embedding model itself is supplied by the caller through the
``EmbeddingProvider`` protocol; loading or training models is not handled
here.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, Union, runtime_checkable

import numpy as np

from .errors import DimensionMismatchError, InvalidDimensionError
from .vectors import VECTOR_DTYPE, as_vector

logger = logging.getLogger(__name__)


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Lookup of fixed-dimension word vectors."""

    dimension: int

    def has_embedding(self, token: str) -> bool:
        ...

    def embedding_of(self, token: str) -> Any:
        ...


class InMemoryEmbeddingProvider:
    """Dictionary-backed provider, handy for small vocabularies and tests."""

    def __init__(self, embeddings: Mapping[str, Any]):
        """
        Args:
            embeddings: Token -> vector mapping; all vectors must share one dimension
        """
        self._embeddings: Dict[str, np.ndarray] = {}
        dimension: Optional[int] = None
        for token, values in embeddings.items():
            vec = as_vector(values, dimension)
            dimension = vec.shape[0]
            self._embeddings[token] = vec
        if dimension is None:
            raise InvalidDimensionError(0, {'reason': 'empty vocabulary'})
        self.dimension = dimension

    def has_embedding(self, token: str) -> bool:
        return token in self._embeddings

    def embedding_of(self, token: str) -> np.ndarray:
        return self._embeddings[token]

    def __len__(self) -> int:
        return len(self._embeddings)

    def __contains__(self, token: object) -> bool:
        return token in self._embeddings


def sentence_vector(
    sentence: Union[str, Iterable[str]],
    provider: EmbeddingProvider
) -> Optional[np.ndarray]:
    """
    Average the embeddings of the recognized tokens of ``sentence``.

    Args:
        sentence: Text split on whitespace, or an iterable of tokens
        provider: Embedding lookup

    Returns:
        Mean vector, or None when no token has an embedding
    """
    tokens = sentence.split() if isinstance(sentence, str) else list(sentence)

    total: Optional[np.ndarray] = None
    recognized = 0
    for token in tokens:
        if not provider.has_embedding(token):
            continue
        vec = as_vector(provider.embedding_of(token), provider.dimension)
        if total is None:
            # Working copy; provider vectors are never written to
            total = np.array(vec, dtype=VECTOR_DTYPE, copy=True)
        else:
            total += vec
        recognized += 1

    if total is None:
        logger.debug("No recognized tokens among %d", len(tokens))
        return None

    total /= recognized
    total.setflags(write=False)
    logger.debug("Averaged %d of %d tokens", recognized, len(tokens))
    return total


def cosine_similarity(a: Any, b: Any) -> float:
    """
    Cosine similarity of two vectors.

    Returns 0.0 if either vector has zero norm.

    Raises:
        DimensionMismatchError: If the vectors differ in length
    """
    va = as_vector(a)
    vb = as_vector(b)
    if va.shape[0] != vb.shape[0]:
        raise DimensionMismatchError(va.shape[0], vb.shape[0])

    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    return float(np.dot(va, vb) / (norm_a * norm_b))
