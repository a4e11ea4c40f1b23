"""
Text normalization utilities.

This module contains the pure string functions shared by every stage of the
place extraction pipeline: whitespace collapsing, list-prefix and trailing
punctuation stripping, and the normalized key used for all deduplication.
"""

import re

_WHITESPACE_RE = re.compile(r"\s+")
_LIST_MARKER_RE = re.compile(r"^\[?\d{1,3}\]?\s*[.:)\-]\s*")
_BRACKETED_NUMBER_RE = re.compile(r"^\[\d{1,3}\]\s*")
_BARE_NUMBER_RE = re.compile(r"^\d{1,3}(?!\d)\s*")
_TRAILING_PUNCT_RE = re.compile(r"[\s,.;:!?\-]+$")
_NON_KEY_CHARS_RE = re.compile(r"[^a-z0-9]")
_CODE_FENCE_RE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_list_prefix(text: str) -> str:
    """Remove one leading list marker such as "15.", "[3]", "2)" or a bare "14"."""
    if not text:
        return ""
    for pattern in (_LIST_MARKER_RE, _BRACKETED_NUMBER_RE, _BARE_NUMBER_RE):
        stripped, count = pattern.subn("", text, count=1)
        if count:
            return stripped
    return text


def strip_trailing_punctuation(text: str) -> str:
    if not text:
        return ""
    return _TRAILING_PUNCT_RE.sub("", text)


def make_key(text: str) -> str:
    """
    Build the normalized dedup key for a string.

    Two strings refer to the same place iff their keys are equal.
    """
    if not text:
        return ""
    lowered = text.lower().replace("’", "'")
    return normalize_whitespace(_NON_KEY_CHARS_RE.sub(" ", lowered))


def clean_venue_candidate(text: str) -> str:
    cleaned = normalize_whitespace(text)
    cleaned = strip_list_prefix(cleaned)
    cleaned = strip_trailing_punctuation(cleaned)
    return normalize_whitespace(cleaned)


def strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers around a model response."""
    if not text:
        return ""
    return _CODE_FENCE_RE.sub("", text).strip()
