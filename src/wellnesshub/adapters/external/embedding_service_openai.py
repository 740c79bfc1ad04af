"""
OpenAI implementation of the EmbeddingService port.
"""

import logging
from typing import List, Optional

from openai import AsyncOpenAI, OpenAIError

from wellnesshub.application.ports.services.embedding_service import EmbeddingService
from wellnesshub.core.config import EmbeddingSettings, get_settings
from wellnesshub.core.exceptions import ConfigurationError, EmbeddingServiceError
from wellnesshub.observability.tracing import set_span_status, trace_operation

logger = logging.getLogger(__name__)

MAX_INPUT_CHARS = 8000


class OpenAIEmbeddingService(EmbeddingService):
    """Embeds text with the OpenAI embeddings endpoint."""

    def __init__(self, settings: Optional[EmbeddingSettings] = None, client: Optional[AsyncOpenAI] = None):
        self._settings = settings or get_settings().embedding
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._settings.api_key:
                raise ConfigurationError("EMBEDDING_API_KEY is not configured")
            self._client = AsyncOpenAI(api_key=self._settings.api_key, base_url=self._settings.base_url)
        return self._client

    async def embed(self, text: str) -> List[float]:
        text = (text or "").replace("\n", " ").strip()[:MAX_INPUT_CHARS]
        if not text:
            raise EmbeddingServiceError("Cannot embed empty text")

        with trace_operation("embedding.create", {"model": self._settings.model, "chars": len(text)}) as span:
            try:
                response = await self.client.embeddings.create(model=self._settings.model, input=text)
            except OpenAIError as e:
                logger.error(f"Embedding request failed: {e}")
                set_span_status(span, False, str(e))
                raise EmbeddingServiceError(str(e)) from e

            set_span_status(span, True)
            return list(response.data[0].embedding)
