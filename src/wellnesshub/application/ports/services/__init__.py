"""Service ports."""

from .embedding_service import EmbeddingService

__all__ = ["EmbeddingService"]
