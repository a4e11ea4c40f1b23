"""
Main orchestration for the place extraction pipeline.

This module wires the stages together for one signal bundle:
1. Candidate generation from OCR text
2. One model call for place synthesis
3. Reconciliation of the model output against the candidates
"""

import logging
from typing import Optional

from placelens.services.base_llm import BaseLLMService
from placelens.services.place_extraction.candidate_generator import generate_candidates
from placelens.services.place_extraction.models import (
    ExtractionDebugInfo,
    ExtractionResult,
    SignalBundle,
)
from placelens.services.place_extraction.place_extractor import extract_raw_places
from placelens.services.place_extraction.reconciliation import reconcile_places

logger = logging.getLogger(__name__)


async def extract_places(bundle: SignalBundle, llm: BaseLLMService) -> ExtractionResult:
    """
    Main entry point for place extraction.

    Returns an empty place list when the model response is malformed or the
    call times out; other model call failures propagate.
    """
    candidates = generate_candidates(bundle.ocr_texts)
    raw = await extract_raw_places(bundle, candidates, llm)

    if raw.failed:
        places = []
    else:
        places = reconcile_places(raw.items, candidates)

    debug_info = ExtractionDebugInfo(
        venue_candidates=candidates.venue_names,
        address_candidates=candidates.address_texts,
        raw_payload=raw.raw_payload,
        parse_error=raw.error,
        raw_titles=[item.title for item in raw.items],
        final_titles=[place.title for place in places],
        reconciled=not raw.failed and bool(candidates.venues),
    )

    logger.info(
        f"[PlaceExtraction] Final: {len(raw.items)} raw -> {len(places)} places "
        f"({len(candidates.venues)} venue, {len(candidates.addresses)} address candidates)"
    )
    return ExtractionResult(places=places, debug_info=debug_info)


async def extract_places_from_signals(
    llm: BaseLLMService,
    labels: Optional[list] = None,
    ocr_texts: Optional[list] = None,
    transcript_segments: Optional[list] = None,
    caption: Optional[str] = None,
) -> ExtractionResult:
    """Convenience wrapper taking the raw video analysis fields."""
    bundle = SignalBundle.from_segments(labels, ocr_texts, transcript_segments, caption)
    return await extract_places(bundle, llm)
