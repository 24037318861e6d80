# File: onboard/services/llm.py

"""
Text-completion client.

The rest of the app only needs complete(prompt, max_tokens) -> str and
treats ServiceUnavailableError as "use your fallback".
"""

import logging
from typing import Optional, Protocol

import openai
from openai import OpenAI

from onboard.core.config import Settings

logger = logging.getLogger(__name__)


class ServiceUnavailableError(Exception):
    """The completion service could not be reached or refused the request."""


class CompletionClient(Protocol):
    def complete(self, prompt: str, max_tokens: int) -> str: ...


class OpenAICompletionClient:
    """
    Single-turn chat completion against the OpenAI API.

    Without an API key every call raises ServiceUnavailableError, so the
    app still works (on fallbacks) in development.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = "gpt-3.5-turbo",
        timeout: float = 30.0,
    ):
        self.model = model
        self._client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0) if api_key else None
        if self._client is None:
            logger.warning("OPENAI_API_KEY is missing. Path classification will use fallbacks.")

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAICompletionClient":
        return cls(
            settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.openai_timeout_seconds,
        )

    def complete(self, prompt: str, max_tokens: int) -> str:
        if self._client is None:
            raise ServiceUnavailableError("OPENAI_API_KEY not configured")

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.OpenAIError as exc:
            raise ServiceUnavailableError(f"{type(exc).__name__} on model {self.model}") from exc

        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()
