from .base_llm import BaseLLMService
from .link_summary import LinkSummary, LinkSummaryError, summarize_link
from .location_extraction import extract_primary_location
from .openai_client import OpenAIClientService

__all__ = [
    "BaseLLMService",
    "extract_primary_location",
    "LinkSummary",
    "LinkSummaryError",
    "OpenAIClientService",
    "summarize_link",
]
