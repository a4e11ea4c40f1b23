"""
Candidate classification for OCR fragments.

Decides whether a raw on-screen text fragment is a plausible venue name, a
plausible street address, or noise (UI chrome, slogans, trip-title headers).
"""

import re

from placelens.services.place_extraction.config import (
    MIN_PLACE_NAME_LENGTH,
    SHOUTING_MIN_LETTERS,
    SHOUTING_MIN_WORDS,
    SHOUTING_UPPER_RATIO,
    TRIP_DURATION_KEY_MARKERS,
    TRIP_DURATION_KEY_PREFIX,
    UI_CHROME_KEYS,
)
from placelens.services.place_extraction.text_utils import (
    clean_venue_candidate,
    make_key,
    normalize_whitespace,
)

_ADDRESS_RE = re.compile(r"^\d+\s[A-Z]")
_DIGITS_ONLY_RE = re.compile(r"^[\d\s]+$")


def is_likely_place_name(raw: str) -> bool:
    """Check whether an OCR fragment could name a real place."""
    if not raw or not raw.strip():
        return False

    if _DIGITS_ONLY_RE.match(raw.strip()):
        return False

    cleaned = clean_venue_candidate(raw)
    if len(cleaned) < MIN_PLACE_NAME_LENGTH:
        return False

    if _is_shouting(cleaned):
        return False

    if _is_trip_duration_header(cleaned):
        return False

    if make_key(cleaned) in UI_CHROME_KEYS:
        return False

    return True


def is_likely_address(raw: str) -> bool:
    """Match street addresses such as "25 W 28TH ST"."""
    if not raw:
        return False
    return bool(_ADDRESS_RE.match(raw.strip()))


def _is_shouting(text: str) -> bool:
    letters = [ch for ch in text if ch.isalpha()]
    if len(letters) < SHOUTING_MIN_LETTERS:
        return False
    upper_ratio = sum(1 for ch in letters if ch.isupper()) / len(letters)
    return upper_ratio > SHOUTING_UPPER_RATIO and len(text.split()) >= SHOUTING_MIN_WORDS


def _is_trip_duration_header(text: str) -> bool:
    key = make_key(text)
    if key.startswith(TRIP_DURATION_KEY_PREFIX):
        return True
    # "&" does not survive make_key, so markers are also checked on the lowered text
    lowered = normalize_whitespace(text.lower())
    return any(marker in key or marker in lowered for marker in TRIP_DURATION_KEY_MARKERS)
