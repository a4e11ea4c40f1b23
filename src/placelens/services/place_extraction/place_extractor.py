"""
Place extraction with the LLM.

This module assembles the extraction instructions from a signal bundle and the
OCR candidate hints, performs the single model call, and parses the structured
response. Malformed responses and call timeouts fail soft to an empty list;
every other call failure propagates to the caller.
"""

import asyncio
import logging

import httpx
import openai

from placelens.config import settings
from placelens.prompts import load_prompt
from placelens.services.base_llm import BaseLLMService
from placelens.services.place_extraction.models import (
    CandidateSet,
    RawExtraction,
    SignalBundle,
)
from placelens.services.place_extraction.response_parser import (
    PlaceResponseError,
    parse_place_items,
)

logger = logging.getLogger(__name__)

_TIMEOUT_ERRORS = (openai.APITimeoutError, httpx.TimeoutException, asyncio.TimeoutError)


def build_extraction_prompt(bundle: SignalBundle, candidates: CandidateSet) -> str:
    return load_prompt(
        "place_extraction",
        labels=list(bundle.labels),
        ocr_texts=list(bundle.ocr_texts),
        venue_names=candidates.venue_names,
        addresses=candidates.address_texts,
        transcript=bundle.transcript,
        caption=bundle.caption,
    )


def build_extraction_system_prompt() -> str:
    return load_prompt("place_extraction_system")


async def extract_raw_places(
    bundle: SignalBundle,
    candidates: CandidateSet,
    llm: BaseLLMService,
) -> RawExtraction:
    """Run the model call for one bundle and return its parsed place list."""
    prompt = build_extraction_prompt(bundle, candidates)
    system_prompt = build_extraction_system_prompt()

    try:
        response, tokens_in, tokens_out, latency = await llm.query(
            prompt,
            system_prompt=system_prompt,
            temperature=settings.place_extraction_temperature,
        )
    except _TIMEOUT_ERRORS as e:
        logger.error(f"[PlaceExtraction] Model call timed out: {e!r}")
        return RawExtraction(items=[], raw_payload=None, error=f"timeout: {e!r}")

    logger.info(
        f"[PlaceExtraction] Model answered in {latency:.2f}s "
        f"(tokens in={tokens_in}, out={tokens_out})"
    )

    try:
        items = parse_place_items(response)
    except PlaceResponseError as e:
        logger.error(f"[PlaceExtraction] Failed to parse model response: {e}; raw payload: {response!r}")
        return RawExtraction(items=[], raw_payload=response, error=str(e))

    logger.info(f"[PlaceExtraction] Raw from model: {[item.title for item in items]}")
    return RawExtraction(items=items, raw_payload=response)
