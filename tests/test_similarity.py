"""Tests for sentence averaging and cosine similarity."""

import numpy as np
import pytest

from senvec.errors import DimensionMismatchError, InvalidDimensionError
from senvec.similarity import (
    EmbeddingProvider,
    InMemoryEmbeddingProvider,
    cosine_similarity,
    sentence_vector,
)


@pytest.fixture
def provider():
    return InMemoryEmbeddingProvider({
        "I": [1.0, 0.0, 0.0],
        "love": [0.0, 2.0, 0.0],
        "programming": [0.0, 0.0, 4.0],
        "code": np.array([1.0, 1.0, 1.0], dtype=np.float32),
    })


class TestInMemoryEmbeddingProvider:

    def test_lookup(self, provider):
        assert provider.dimension == 3
        assert len(provider) == 4
        assert provider.has_embedding("love")
        assert not provider.has_embedding("hate")
        assert "code" in provider
        assert isinstance(provider, EmbeddingProvider)

    def test_mixed_dimensions_rejected(self):
        with pytest.raises(DimensionMismatchError):
            InMemoryEmbeddingProvider({"a": [1.0, 2.0], "b": [1.0]})

    def test_empty_vocabulary_rejected(self):
        with pytest.raises(InvalidDimensionError):
            InMemoryEmbeddingProvider({})

    def test_copies_input(self):
        source = np.array([1.0, 2.0])
        provider = InMemoryEmbeddingProvider({"a": source})
        source[0] = 99.0

        assert provider.embedding_of("a")[0] == 1.0


class TestSentenceVector:

    def test_average_of_known_tokens(self, provider):
        vec = sentence_vector("I love programming", provider)

        assert np.allclose(vec, [1.0 / 3, 2.0 / 3, 4.0 / 3])

    def test_unknown_tokens_skipped(self, provider):
        vec = sentence_vector("I really love", provider)

        assert np.allclose(vec, [0.5, 1.0, 0.0])

    def test_token_iterable(self, provider):
        vec = sentence_vector(iter(["code", "code"]), provider)

        assert np.array_equal(vec, [1.0, 1.0, 1.0])

    def test_no_known_tokens_returns_none(self, provider):
        assert sentence_vector("nothing here matches", provider) is None
        assert sentence_vector("", provider) is None

    def test_provider_vectors_not_mutated(self, provider):
        before = provider.embedding_of("I").copy()

        sentence_vector("I love I", provider)

        assert np.array_equal(provider.embedding_of("I"), before)

    def test_result_is_read_only(self, provider):
        vec = sentence_vector("love", provider)

        with pytest.raises(ValueError):
            vec[0] = 1.0


class TestCosineSimilarity:

    def test_known_values(self):
        assert cosine_similarity([1.0, 0.0], [1.0, 0.0]) == pytest.approx(1.0)
        assert cosine_similarity([1.0, 0.0], [0.0, 3.0]) == pytest.approx(0.0)
        assert cosine_similarity([1.0, 1.0], [-2.0, -2.0]) == pytest.approx(-1.0)

    def test_zero_norm(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])
