"""
Tests for hyperplane generation and LSH hashing.
"""

import threading

import numpy as np
import pytest

from senvec.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    InvalidHashWidthError,
    InvalidSeedError,
)
from senvec.lsh import LSHHasher, generate_hyperplanes, hamming_distance


class TestGenerateHyperplanes:
    """Test seeded hyperplane generation."""

    def test_shape_and_dtype(self):
        """Test that the matrix has one row per bit."""
        planes = generate_hyperplanes(42, 8, 4)

        assert planes.shape == (8, 4)
        assert planes.dtype == np.float64

    def test_same_seed_same_planes(self):
        """Test that generation is a pure function of its arguments."""
        a = generate_hyperplanes(42, 16, 10)
        b = generate_hyperplanes(42, 16, 10)

        assert np.array_equal(a, b)

    def test_different_seed_different_planes(self):
        """Test that the seed changes the planes."""
        a = generate_hyperplanes(1, 16, 10)
        b = generate_hyperplanes(2, 16, 10)

        assert not np.array_equal(a, b)

    def test_negative_seed_accepted(self):
        """Test that signed 64-bit seeds work and stay distinct."""
        a = generate_hyperplanes(-1, 4, 4)
        b = generate_hyperplanes(1, 4, 4)

        assert a.shape == (4, 4)
        assert not np.array_equal(a, b)

    def test_int64_bounds_accepted(self):
        """Test the extreme signed 64-bit seeds, including numpy integers."""
        low = generate_hyperplanes(-(2 ** 63), 4, 4)
        high = generate_hyperplanes(2 ** 63 - 1, 4, 4)

        assert not np.array_equal(low, high)
        assert np.array_equal(generate_hyperplanes(np.int64(7), 4, 4), generate_hyperplanes(7, 4, 4))

    @pytest.mark.parametrize("seed", [2 ** 64, 2 ** 63, -(2 ** 63) - 1, 1.5, 42.0, "42", True, None])
    def test_invalid_seed(self, seed):
        """Test that out-of-range or non-integer seeds are rejected rather than folded."""
        with pytest.raises(InvalidSeedError):
            generate_hyperplanes(seed, 4, 4)

    def test_out_of_range_seed_does_not_alias_zero(self):
        """Test that 2**64 cannot silently reuse seed 0's hyperplanes."""
        generate_hyperplanes(0, 4, 4)

        with pytest.raises(InvalidSeedError):
            generate_hyperplanes(2 ** 64, 4, 4)

    def test_invalid_seed_in_hasher(self):
        with pytest.raises(InvalidSeedError):
            LSHHasher(8, 4, seed=2 ** 70)

    def test_does_not_touch_global_rng(self):
        """Test that the legacy global numpy RNG is left alone."""
        np.random.seed(123)
        expected = np.random.random()

        np.random.seed(123)
        generate_hyperplanes(42, 8, 8)
        assert np.random.random() == expected

    def test_planes_are_read_only(self):
        """Test that the returned matrix cannot be mutated."""
        planes = generate_hyperplanes(42, 2, 2)

        with pytest.raises(ValueError):
            planes[0, 0] = 1.0

    def test_roughly_standard_normal(self):
        """Test that draws have mean ~0 and variance ~1."""
        planes = generate_hyperplanes(7, 200, 200)

        assert abs(planes.mean()) < 0.05
        assert abs(planes.var() - 1.0) < 0.05

    @pytest.mark.parametrize("dimension", [0, -3, 2.5, True])
    def test_invalid_dimension(self, dimension):
        """Test that non-positive or non-integer dimensions fail."""
        with pytest.raises(InvalidDimensionError):
            generate_hyperplanes(42, 8, dimension)

    @pytest.mark.parametrize("count", [0, -1, 1.5])
    def test_invalid_hash_width(self, count):
        """Test that non-positive or non-integer widths fail."""
        with pytest.raises(InvalidHashWidthError):
            generate_hyperplanes(42, count, 4)


class TestLSHHasher:
    """Test sign-based hashing."""

    def test_reference_vector_is_stable(self):
        """Test seed=42, D=4, B=8 hashing is repeatable on one instance."""
        hasher = LSHHasher(num_bits=8, dimension=4, seed=42)
        vector = [1.0, 0.0, -1.0, 0.5]

        first = hasher.compute_hash(vector)
        for _ in range(10):
            assert hasher.compute_hash(vector) == first

        assert len(first) == 8
        assert set(first) <= {"0", "1"}

    def test_independent_instances_agree(self):
        """Test that two hashers built from the same parameters agree."""
        rng = np.random.default_rng(0)
        vectors = rng.standard_normal((20, 12))

        h1 = LSHHasher(32, 12, seed=99)
        h2 = LSHHasher(32, 12, seed=99)

        assert h1.compute_hashes(vectors) == h2.compute_hashes(vectors)

    def test_bits_follow_dot_product_sign(self):
        """Test each bit against an explicit dot product."""
        hasher = LSHHasher(16, 5, seed=3)
        vector = np.array([0.3, -1.2, 2.0, 0.0, 0.7])

        code = hasher.compute_hash(vector)

        for bit, plane in zip(code, hasher.hyperplanes):
            assert bit == ("1" if np.dot(plane, vector) >= 0 else "0")

    def test_zero_vector_hashes_to_all_ones(self):
        """Test that a zero dot product maps to '1'."""
        hasher = LSHHasher(12, 6, seed=5)

        assert hasher.compute_hash(np.zeros(6)) == "1" * 12

    def test_negated_vector_flips_bits(self):
        """Test that the opposite vector lands on the opposite side of every plane."""
        hasher = LSHHasher(64, 10, seed=11)
        vector = np.random.default_rng(1).standard_normal(10)

        code = hasher.compute_hash(vector)
        flipped = hasher.compute_hash(-vector)

        assert hamming_distance(code, flipped) == 64

    def test_scaling_does_not_change_hash(self):
        """Test that only the direction matters."""
        hasher = LSHHasher(32, 8, seed=2)
        vector = np.random.default_rng(2).standard_normal(8)

        assert hasher.compute_hash(vector) == hasher.compute_hash(vector * 17.5)

    def test_similar_vectors_are_close(self):
        """Test that a small perturbation changes few bits."""
        rng = np.random.default_rng(4)
        hasher = LSHHasher(128, 50, seed=4)
        base = rng.standard_normal(50)
        near = base + 0.01 * rng.standard_normal(50)
        far = rng.standard_normal(50)

        d_near = hamming_distance(hasher.compute_hash(base), hasher.compute_hash(near))
        d_far = hamming_distance(hasher.compute_hash(base), hasher.compute_hash(far))

        assert d_near < d_far

    def test_dimension_mismatch(self):
        """Test that a wrong-length vector is rejected."""
        hasher = LSHHasher(8, 4, seed=42)

        with pytest.raises(DimensionMismatchError) as exc_info:
            hasher.compute_hash([1.0, 2.0, 3.0])

        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_empty_vector_is_dimension_mismatch(self):
        """Test that an empty vector reports the mismatch."""
        hasher = LSHHasher(8, 4, seed=42)

        with pytest.raises(DimensionMismatchError):
            hasher.compute_hash([])

    def test_input_not_mutated(self):
        """Test that the caller's array is left untouched."""
        hasher = LSHHasher(8, 3, seed=1)
        vector = np.array([1.0, 2.0, 3.0])
        before = vector.copy()

        hasher.compute_hash(vector)

        assert np.array_equal(vector, before)
        assert vector.flags.writeable

    def test_properties(self):
        """Test exposed configuration."""
        hasher = LSHHasher(32, 300, seed=42)

        assert hasher.num_bits == 32
        assert hasher.dimension == 300
        assert hasher.seed == 42
        assert hasher.hyperplanes.shape == (32, 300)
        assert "num_bits=32" in repr(hasher)

    def test_concurrent_readers(self):
        """Test that concurrent hashing gives the same answers."""
        hasher = LSHHasher(64, 16, seed=8)
        vectors = np.random.default_rng(8).standard_normal((50, 16))
        expected = hasher.compute_hashes(vectors)
        results = []

        def worker():
            results.append(hasher.compute_hashes(vectors))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r == expected for r in results)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
