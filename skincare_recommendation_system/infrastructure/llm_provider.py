"""
LLM Provider: Abstraction layer for the text-generation backends.
Supports Mistral and OpenAI; credentials are injected, never looked up here.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from mistralai import Mistral
from openai import OpenAI

from skincare_recommendation_system.config import RecommenderConfig

logger = logging.getLogger("LLMProvider")


class LLMProviderError(RuntimeError):
    """The backend call failed or returned nothing usable."""


@dataclass
class LLMResponse:
    """Standardized LLM response."""
    content: str
    model: str
    provider: str
    tokens_used: int = 0
    latency_ms: float = 0.0


class BaseLLMProvider(ABC):
    """Abstract base for LLM providers."""

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        timeout_seconds: float = 30.0,
    ):
        if not api_key:
            raise ValueError(f"{type(self).__name__} requires an API key")
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout_seconds = timeout_seconds
        self._client = None

    @abstractmethod
    def _complete(self, messages: list) -> LLMResponse:
        """Send chat messages to the backend."""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @property
    def default_model(self) -> str:
        return self._model

    def generate(self, prompt: str, system: Optional[str] = None) -> LLMResponse:
        """
        Generate text completion.

        Raises:
            LLMProviderError: backend error or empty completion
        """
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        start_time = time.time()
        try:
            response = self._complete(messages)
        except Exception as e:
            raise LLMProviderError(f"{self.provider_name} generation failed: {e}") from e

        response.latency_ms = (time.time() - start_time) * 1000
        if not response.content or not response.content.strip():
            raise LLMProviderError(f"{self.provider_name} returned an empty completion")

        logger.debug(
            f"{self.provider_name} generated {len(response.content)} chars "
            f"in {response.latency_ms:.0f}ms"
        )
        return response


class MistralProvider(BaseLLMProvider):
    """Mistral AI provider."""

    def _get_client(self) -> Mistral:
        if self._client is None:
            self._client = Mistral(
                api_key=self._api_key,
                timeout_ms=int(self._timeout_seconds * 1000),
            )
        return self._client

    def _complete(self, messages: list) -> LLMResponse:
        response = self._get_client().chat.complete(
            model=self._model,
            messages=messages,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self._model,
            provider=self.provider_name,
            tokens_used=response.usage.total_tokens if response.usage else 0,
        )

    @property
    def provider_name(self) -> str:
        return "Mistral"


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT provider."""

    def _get_client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self._api_key, timeout=self._timeout_seconds)
        return self._client

    def _complete(self, messages: list) -> LLMResponse:
        response = self._get_client().chat.completions.create(
            model=self._model,
            messages=messages,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self._model,
            provider=self.provider_name,
            tokens_used=response.usage.total_tokens if response.usage else 0,
        )

    @property
    def provider_name(self) -> str:
        return "OpenAI"


def create_provider(config: RecommenderConfig) -> Optional[BaseLLMProvider]:
    """First configured provider (Mistral, then OpenAI), or None."""
    common = {
        "temperature": config.temperature,
        "max_tokens": config.max_tokens,
        "timeout_seconds": config.timeout_seconds,
    }
    if config.mistral_api_key:
        return MistralProvider(config.mistral_api_key, config.mistral_model, **common)
    if config.openai_api_key:
        return OpenAIProvider(config.openai_api_key, config.openai_model, **common)
    return None
