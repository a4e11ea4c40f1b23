"""Shared API dependencies."""

import logging

import httpx
import openai
from fastapi import HTTPException

from placelens.services.base_llm import BaseLLMService
from placelens.services.openai_client import OpenAIClientService

logger = logging.getLogger(__name__)

UPSTREAM_ERRORS = (openai.OpenAIError, httpx.HTTPError)


def get_llm_service() -> BaseLLMService:
    return OpenAIClientService()


def upstream_http_error(error: Exception) -> HTTPException:
    """Map a collaborator failure to the HTTP error returned to the caller."""
    if isinstance(error, ValueError):
        return HTTPException(status_code=503, detail=str(error))
    logger.error(f"Upstream call failed: {error!r}")
    return HTTPException(status_code=502, detail=f"Upstream service error: {error}")
