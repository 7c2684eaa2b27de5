"""
Language model client configuration.

This module provides:
- A lazily created, process-wide GenAI SDK client
- TextModel, the text-in/text-out interface the pipelines depend on
- GeminiTextModel, its Gemini implementation
"""
import asyncio
import logging
from typing import Optional, Protocol

from google import genai

from prepwise.core.config import settings
from prepwise.core.exceptions import ConfigurationError
from prepwise.core.logger import log_async_execution_time

logger = logging.getLogger(__name__)

_genai_client: Optional[genai.Client] = None


def get_genai_client() -> genai.Client:
    """
    Get the GenAI SDK client, creating it on first use.

    Concurrent first calls may each build a client; the last one wins and
    the others are simply dropped.
    """
    global _genai_client
    if _genai_client is None:
        if not settings.GEMINI_API_KEY:
            raise ConfigurationError("Missing Gemini env var. Check GEMINI_API_KEY.")
        try:
            _genai_client = genai.Client(api_key=settings.GEMINI_API_KEY)
        except Exception as e:
            logger.error(f"Failed to initialize GenAI client: {e}")
            raise
        logger.info("GenAI client initialized")
    return _genai_client


class TextModel(Protocol):
    """Anything the pipelines can prompt for a single text reply."""

    async def generate(self, prompt: str) -> str: ...


class GeminiTextModel:
    """Single-shot, non-streaming text generation against a Gemini model."""

    def __init__(self, client: Optional[genai.Client] = None, model: Optional[str] = None):
        self._client = client
        self.model = model or settings.GEMINI_MODEL

    @property
    def client(self) -> genai.Client:
        return self._client or get_genai_client()

    @log_async_execution_time
    async def generate(self, prompt: str) -> str:
        """Send ``prompt`` and return the response text ("" when the model returns none)."""
        # The SDK call is blocking; run it off the event loop
        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.model,
            contents=prompt,
        )
        response_text = response.text if response.text else ""

        if logger.isEnabledFor(logging.DEBUG):
            preview = response_text[:200].replace('\n', ' ')
            logger.debug(f"Gemini response ({len(response_text)} chars): {preview}...")

        return response_text
