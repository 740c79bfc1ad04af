"""
Embedding service interface used for blog post similarity search.
"""

from abc import ABC, abstractmethod
from typing import List


class EmbeddingService(ABC):
    """Abstract service that turns text into a vector."""

    @abstractmethod
    async def embed(self, text: str) -> List[float]:
        """
        Generate an embedding for a piece of text.

        Args:
            text: Text to embed

        Returns:
            Embedding vector
        """
        pass
