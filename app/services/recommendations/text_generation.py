"""
External text generation client.

Wraps the OpenAI chat completions API behind a small ``TextGenerator``
interface so the recommendation service (and its tests) never depend on the
provider directly. The client is a process-wide singleton initialised once
at startup from configuration.
"""

import logging
import os
from typing import Optional, Protocol

import httpx
from openai import AsyncOpenAI, OpenAIError

from app.core.config import Config
from app.core.exceptions import TextGenerationUnavailable

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a sustainability assistant helping people lower their carbon footprint."


class TextGenerator(Protocol):
    """Anything that turns a prompt into text, or raises TextGenerationUnavailable."""

    async def generate(self, prompt: str) -> str:
        ...


class OpenAITextGenerator:
    """
    TextGenerator backed by OpenAI chat completions.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        max_tokens: int = 400,
        temperature: float = 0.7,
        timeout_seconds: float = 20,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.client = AsyncOpenAI(api_key=api_key, timeout=timeout_seconds, max_retries=0)

    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Raises:
            TextGenerationUnavailable: If the API call fails or returns no text
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except (OpenAIError, httpx.HTTPError) as e:
            raise TextGenerationUnavailable("Text generation request failed", e) from e

        if not response.choices:
            raise TextGenerationUnavailable("Text generation returned no choices")

        text = (response.choices[0].message.content or "").strip()
        if not text:
            raise TextGenerationUnavailable("Text generation returned empty content")
        return text

    async def close(self) -> None:
        await self.client.close()


class TextGenerationClient:
    """
    Process-wide holder of the configured TextGenerator.

    ``get()`` returns None when no credential is configured, which selects
    the rule-based tier.
    """

    _generator: Optional[TextGenerator] = None

    @classmethod
    def init(cls, config: Config) -> None:
        """
        Create the generator from the [text_generation] config section.

        The API key is read from the environment variable named by ``api_key_env``.
        """
        settings = config.section("text_generation")
        if not settings.get("enabled", False):
            logger.info("External text generation disabled by configuration")
            cls._generator = None
            return

        api_key = os.getenv(settings.get("api_key_env", "OPENAI_API_KEY"))
        if not api_key:
            logger.info("No text generation credential found; using rule-based recommendations")
            cls._generator = None
            return

        cls._generator = OpenAITextGenerator(
            api_key=api_key,
            model=settings.get("model", "gpt-4o-mini"),
            max_tokens=int(settings.get("max_tokens", 400)),
            temperature=float(settings.get("temperature", 0.7)),
            timeout_seconds=float(settings.get("timeout_seconds", 20)),
        )
        logger.info(f"External text generation enabled with model {cls._generator.model}")

    @classmethod
    def get(cls) -> Optional[TextGenerator]:
        return cls._generator

    @classmethod
    async def close(cls) -> None:
        if isinstance(cls._generator, OpenAITextGenerator):
            await cls._generator.close()
        cls._generator = None
