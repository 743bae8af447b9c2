"""Unified LLM client: OpenAI first, Anthropic as fallback."""

import logging

import anthropic
from openai import AsyncOpenAI

from travelapp.config import settings
from travelapp.errors import GenerationError

logger = logging.getLogger(__name__)


class LLMClient:
    """Async text completion over whichever providers have an API key."""

    def __init__(self):
        self._openai = None
        self._anthropic = None

        if settings.openai_api_key:
            self._openai = AsyncOpenAI(api_key=settings.openai_api_key)
        if settings.anthropic_api_key:
            self._anthropic = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)

    async def complete(
        self,
        system: str,
        user: str,
        *,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ) -> str:
        """Return the text of the first provider that answers.

        Raises:
            GenerationError if no provider is configured, every provider
            fails, or a provider returns no choices.
        """
        errors = []
        messages = [{"role": "user", "content": user}]

        if self._openai:
            try:
                response = await self._openai.chat.completions.create(
                    model=settings.openai_model,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    messages=[{"role": "system", "content": system}] + messages,
                )
                if not response.choices:
                    raise GenerationError("OpenAI returned no choices")
                return (response.choices[0].message.content or "").strip()
            except Exception as e:
                errors.append(f"OpenAI: {e}")
                logger.warning(f"OpenAI failed, trying Anthropic: {e}")

        if self._anthropic:
            try:
                response = await self._anthropic.messages.create(
                    model=settings.anthropic_model,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    system=system,
                    messages=messages,
                )
                if not response.content:
                    raise GenerationError("Anthropic returned no content")
                return response.content[0].text.strip()
            except Exception as e:
                errors.append(f"Anthropic: {e}")
                logger.warning(f"Anthropic also failed: {e}")

        if not errors:
            errors.append("no LLM provider configured")
        raise GenerationError(error="; ".join(errors))


# Singleton
llm_client = LLMClient()
