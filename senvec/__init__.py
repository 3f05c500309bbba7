"""senvec - Sentence vectors with encrypted storage and LSH comparison."""

__version__ = "0.1.0"

from .codec import VectorCodec
from .crypto import CipherKey, EncryptedVectorStore, SymmetricCipher, generate_key
from .lsh import LSHHasher, generate_hyperplanes, hamming_distance
from .similarity import InMemoryEmbeddingProvider, cosine_similarity, sentence_vector
from .pipeline import SimilarityReport, compare_sentences
from .config import SenvecConfig

__all__ = [
    "VectorCodec",
    "CipherKey",
    "EncryptedVectorStore",
    "SymmetricCipher",
    "generate_key",
    "LSHHasher",
    "generate_hyperplanes",
    "hamming_distance",
    "InMemoryEmbeddingProvider",
    "cosine_similarity",
    "sentence_vector",
    "SimilarityReport",
    "compare_sentences",
    "SenvecConfig",
    "__version__",
]
