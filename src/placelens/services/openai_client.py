import logging
import time
from typing import Optional

from openai import AsyncOpenAI

from placelens.config import settings
from placelens.models.domain import LLMProvider
from placelens.services.base_llm import BaseLLMService

logger = logging.getLogger(__name__)


class OpenAIClientService(BaseLLMService):
    """LLM service using the official OpenAI client for OpenAI-compatible APIs."""

    provider = LLMProvider.OPENAI
    default_model = "gpt-4o-mini"

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        super().__init__(api_key, model_name or settings.openai_model)
        self.api_base = settings.openai_api_base
        self.timeout = settings.llm_timeout
        self.max_retries = settings.llm_max_retries

    def _create_client(self) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=self._get_api_key(),
            base_url=self.api_base,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )

    async def query(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        model_name: Optional[str] = None,
    ) -> tuple[str, int, int, float]:
        """Query the LLM using OpenAI client."""
        model = model_name or self.model_name
        messages = self._build_messages(prompt, system_prompt)

        start_time = time.time()
        async with self._create_client() as client:
            try:
                response = await client.chat.completions.create(
                    model=model,
                    messages=messages,
                    temperature=temperature,
                )
            except Exception as e:
                logger.error(f"{self.provider.value} OpenAI client error: {e}")
                raise
        latency = time.time() - start_time

        answer = response.choices[0].message.content or ""
        usage = response.usage
        tokens_in = usage.prompt_tokens if usage else 0
        tokens_out = usage.completion_tokens if usage else 0

        logger.debug(f"{self.provider.value} {model} answered in {latency:.2f}s ({tokens_in}/{tokens_out} tokens)")
        return answer, tokens_in, tokens_out, latency
