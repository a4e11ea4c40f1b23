"""
Place extraction from short-form video signals.

This module turns OCR text, a speech transcript, a caption and visual labels
into a deduplicated list of distinct real-world places, combining rule-based
OCR candidate generation, one LLM call, and deterministic reconciliation.
"""

from placelens.services.place_extraction.models import (
    Candidate,
    CandidateKind,
    CandidateSet,
    ExtractionDebugInfo,
    ExtractionResult,
    PlaceCategory,
    PlaceItem,
    RawExtraction,
    SignalBundle,
)
from placelens.services.place_extraction.orchestrator import (
    extract_places,
    extract_places_from_signals,
)
from placelens.services.place_extraction.candidate_generator import generate_candidates
from placelens.services.place_extraction.classification import (
    is_likely_address,
    is_likely_place_name,
)
from placelens.services.place_extraction.text_utils import (
    clean_venue_candidate,
    make_key,
    normalize_whitespace,
    strip_code_fences,
    strip_list_prefix,
    strip_trailing_punctuation,
)
from placelens.services.place_extraction.place_extractor import (
    build_extraction_prompt,
    build_extraction_system_prompt,
    extract_raw_places,
)
from placelens.services.place_extraction.response_parser import (
    PlaceResponseError,
    parse_category,
    parse_place_items,
)
from placelens.services.place_extraction.reconciliation import reconcile_places
from placelens.services.place_extraction.config import GENERIC_PLACE_TERMS

__all__ = [
    # Data models
    "Candidate",
    "CandidateKind",
    "CandidateSet",
    "ExtractionDebugInfo",
    "ExtractionResult",
    "PlaceCategory",
    "PlaceItem",
    "RawExtraction",
    "SignalBundle",

    # Main API functions
    "extract_places",
    "extract_places_from_signals",
    "generate_candidates",
    "extract_raw_places",
    "reconcile_places",

    # Classification functions
    "is_likely_place_name",
    "is_likely_address",

    # Text utilities
    "normalize_whitespace",
    "strip_list_prefix",
    "strip_trailing_punctuation",
    "make_key",
    "clean_venue_candidate",
    "strip_code_fences",

    # Prompting and parsing
    "build_extraction_prompt",
    "build_extraction_system_prompt",
    "parse_place_items",
    "parse_category",
    "PlaceResponseError",

    # Configuration
    "GENERIC_PLACE_TERMS",
]
