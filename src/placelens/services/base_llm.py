import logging
from abc import ABC, abstractmethod
from typing import Optional

from placelens.config import settings
from placelens.models.domain import LLMProvider

logger = logging.getLogger(__name__)

ENV_API_KEYS = {
    LLMProvider.OPENAI: lambda: settings.openai_api_key,
}


class BaseLLMService(ABC):
    provider: LLMProvider
    default_model: str
    api_base: str

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        self._api_key = api_key
        self.model_name = model_name or self.default_model

    def _get_api_key(self) -> str:
        if self._api_key:
            return self._api_key

        env_key_getter = ENV_API_KEYS.get(self.provider)
        if env_key_getter:
            env_key = env_key_getter()
            if env_key:
                return env_key

        raise ValueError(f"No {self.provider.value} API key configured")

    def _build_messages(self, prompt: str, system_prompt: Optional[str] = None) -> list[dict]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

    @abstractmethod
    async def query(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        model_name: Optional[str] = None,
    ) -> tuple[str, int, int, float]:
        """Return (answer, tokens_in, tokens_out, latency_seconds)."""
