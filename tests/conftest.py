"""Shared test fixtures."""

import sys
from pathlib import Path
from typing import Optional

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from placelens.models.domain import LLMProvider
from placelens.services.base_llm import BaseLLMService


class FakeLLM(BaseLLMService):
    """LLM stand-in that returns a canned answer and records every call."""

    provider = LLMProvider.OPENAI
    default_model = "fake-model"

    def __init__(self, response: str = "[]", error: Optional[Exception] = None):
        super().__init__(api_key="test-key")
        self.response = response
        self.error = error
        self.calls = []

    async def query(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        model_name: Optional[str] = None,
    ) -> tuple[str, int, int, float]:
        self.calls.append(
            {
                "prompt": prompt,
                "system_prompt": system_prompt,
                "temperature": temperature,
                "model_name": model_name,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response, len(prompt) // 4, len(self.response) // 4, 0.01


@pytest.fixture
def make_llm():
    return FakeLLM
