"""Vector serialization."""

from .vector_codec import VectorCodec, encoded_size

__all__ = ['VectorCodec', 'encoded_size']
