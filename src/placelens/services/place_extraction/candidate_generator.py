"""
Candidate generation from OCR text.

This module turns the raw, unfiltered OCR fragments of a video into two
deduplicated, ordered hint sets: venue names and street addresses.
"""

import logging
from typing import Dict, Iterable, List

from placelens.services.place_extraction.classification import (
    is_likely_address,
    is_likely_place_name,
)
from placelens.services.place_extraction.models import (
    Candidate,
    CandidateKind,
    CandidateSet,
)
from placelens.services.place_extraction.text_utils import clean_venue_candidate, make_key

logger = logging.getLogger(__name__)


def generate_candidates(ocr_texts: Iterable[str]) -> CandidateSet:
    """Generate venue and address candidates from OCR fragments."""
    fragments = [t for t in (ocr_texts or []) if t]
    venues = _venue_candidates(fragments)
    addresses = _address_candidates(fragments)

    logger.debug(
        f"[Candidates] {len(fragments)} OCR fragments -> "
        f"venues={[c.cleaned for c in venues]}, addresses={[c.cleaned for c in addresses]}"
    )
    return CandidateSet(venues=venues, addresses=addresses)


def _venue_candidates(fragments: List[str]) -> List[Candidate]:
    seen: Dict[str, Candidate] = {}
    for raw in fragments:
        if is_likely_address(raw) or not is_likely_place_name(raw):
            continue
        cleaned = clean_venue_candidate(raw)
        key = make_key(cleaned)
        if not key or key in seen:
            continue
        seen[key] = Candidate(raw=raw, cleaned=cleaned, key=key, kind=CandidateKind.VENUE)
    return list(seen.values())


def _address_candidates(fragments: List[str]) -> List[Candidate]:
    addresses: List[Candidate] = []
    seen_texts = set()
    for raw in fragments:
        if not is_likely_address(raw):
            continue
        text = raw.strip()
        if text in seen_texts:
            continue
        seen_texts.add(text)
        addresses.append(
            Candidate(raw=raw, cleaned=text, key=make_key(text), kind=CandidateKind.ADDRESS)
        )
    return addresses
