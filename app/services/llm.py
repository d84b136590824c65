"""LLM service wrapper for the Google Gemini API."""

import asyncio
import logging
import time

import httpx
from google import genai
from google.genai import errors as genai_errors

from app.config import settings
from app.core.errors import AIResponse, Failure, ProviderError, Success

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Google Gemini"


class LLMService:
    """Async Gemini client wrapper for text generation."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
    ):
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.model = model or settings.gemini_model
        self.timeout = settings.provider_timeout_seconds if timeout is None else timeout
        self.client: genai.Client | None = None

    @property
    def is_configured(self) -> bool:
        """Whether a provider credential is present (not whether it is valid)."""
        return bool(self.api_key)

    def initialize(self) -> None:
        """Initialize the Gemini client."""
        if self.api_key:
            self.client = genai.Client(api_key=self.api_key)
        else:
            logger.warning("No Gemini API key configured")

    async def generate(self, prompt: str) -> AIResponse:
        """
        Generate text for a prompt using the LLM.

        Args:
            prompt: Prompt text sent unmodified to the model

        Returns:
            Success with the generated text, or Failure carrying a ProviderError.
            Provider errors are never raised.
        """
        if self.client is None:
            return self._fail("Gemini client not initialized. Check GEMINI_API_KEY.")

        start = time.perf_counter()
        try:
            call = self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
            if self.timeout:
                response = await asyncio.wait_for(call, timeout=self.timeout)
            else:
                response = await call
            text = response.text
        except asyncio.TimeoutError:
            return self._fail(f"Gemini request timed out after {self.timeout:g} seconds")
        except genai_errors.APIError as e:
            return self._fail(str(e))
        except httpx.HTTPError as e:
            return self._fail(str(e) or type(e).__name__)
        except Exception as e:
            logger.exception(f"Unexpected Gemini error: {e}")
            return self._fail(str(e) or type(e).__name__)

        latency_ms = (time.perf_counter() - start) * 1000
        if not text:
            return self._fail("Gemini returned an empty response")

        logger.info(f"Gemini response received | latency_ms={latency_ms:.2f} | length={len(text)}")
        return Success(text=text)

    async def close(self) -> None:
        """Close the SDK's async HTTP session."""
        if self.client:
            await self.client.aio.aclose()
            self.client = None

    @staticmethod
    def _fail(message: str) -> Failure:
        logger.error(f"Gemini error: {message}")
        return Failure(error=ProviderError(message))
