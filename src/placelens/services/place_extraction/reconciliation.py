"""
Reconciliation of model output against OCR candidates.

The model is told to list every distinct place exactly once, but that contract
is enforced here rather than trusted:

1. Titles are cleaned of echoed list numbering.
2. Items whose title fails the same noise filter used on OCR are dropped.
3. Items sharing a normalized title key are merged, keeping the richer
   (longer) description; ties keep the first seen.
4. OCR venue candidates the model dropped are injected as generic items.
5. With exactly one venue candidate, generic "view"/"experience" fragments
   around it collapse into the single venue item.
6. With no venue candidates and exactly one address, the list collapses to the
   single item that references that address.

Reconciliation never mutates its input items. For a fixed candidate set it is
idempotent, except for titles that still start with digits after cleaning and
match no venue candidate: each pass strips one more list marker, so
"1. 7-Eleven" becomes "7-Eleven" and then "Eleven".
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Set

from placelens.services.place_extraction.classification import is_likely_place_name
from placelens.services.place_extraction.config import (
    ADDRESS_SENTENCE_TEMPLATE,
    GENERIC_PLACE_TERMS,
    INJECTED_DESCRIPTION_TEMPLATE,
)
from placelens.services.place_extraction.models import (
    Candidate,
    CandidateSet,
    PlaceCategory,
    PlaceItem,
)
from placelens.services.place_extraction.text_utils import (
    clean_venue_candidate,
    make_key,
    normalize_whitespace,
    strip_trailing_punctuation,
)

logger = logging.getLogger(__name__)


def reconcile_places(items: Sequence[PlaceItem], candidates: CandidateSet) -> List[PlaceItem]:
    """Merge, dedupe and repair the model's place list against OCR candidates."""
    if not candidates.venues:
        collapsed = _collapse_to_single_address(items, candidates.addresses)
        if collapsed is not None:
            logger.info(f"[Reconciliation] Collapsed {len(items)} items to address item '{collapsed[0].title}'")
            return collapsed
        return list(items)

    cleaned = _clean_titles(items, {venue.key for venue in candidates.venues})
    filtered = [item for item in cleaned if is_likely_place_name(item.title)]
    dropped = [item.title for item in cleaned if not is_likely_place_name(item.title)]
    if dropped:
        logger.info(f"[Reconciliation] Dropped noise titles: {dropped}")

    deduped = _dedupe_by_key(filtered)
    reconciled = _inject_missing_venues(deduped, candidates.venues)

    if len(candidates.venues) == 1:
        collapsed = _collapse_to_single_venue(reconciled, candidates.venues[0], candidates.addresses)
        if collapsed is not None:
            logger.info(f"[Reconciliation] Collapsed {len(reconciled)} items to venue '{collapsed[0].title}'")
            return collapsed

    return reconciled


def _clean_titles(items: Sequence[PlaceItem], venue_keys: Set[str]) -> List[PlaceItem]:
    return [replace(item, title=_clean_title(item.title, venue_keys)) for item in items]


def _clean_title(title: str, venue_keys: Set[str]) -> str:
    # A title already equal to a venue candidate keeps its leading digits
    if make_key(title) in venue_keys:
        return normalize_whitespace(strip_trailing_punctuation(title))
    return clean_venue_candidate(title)


def _dedupe_by_key(items: Sequence[PlaceItem]) -> List[PlaceItem]:
    groups: Dict[str, PlaceItem] = {}
    for item in items:
        key = make_key(item.title)
        existing = groups.get(key)
        if existing is None or len(item.description) > len(existing.description):
            groups[key] = item
    return list(groups.values())


def _inject_missing_venues(items: List[PlaceItem], venues: Sequence[Candidate]) -> List[PlaceItem]:
    present = {make_key(item.title) for item in items}
    result = list(items)
    for venue in venues:
        if venue.key in present:
            continue
        logger.info(f"[Reconciliation] Injecting venue missing from model output: '{venue.cleaned}'")
        result.append(
            PlaceItem(
                title=venue.cleaned,
                description=INJECTED_DESCRIPTION_TEMPLATE.format(title=venue.cleaned),
                category=PlaceCategory.OTHER,
            )
        )
        present.add(venue.key)
    return result


def _collapse_to_single_venue(
    items: List[PlaceItem],
    venue: Candidate,
    addresses: Sequence[Candidate],
) -> Optional[List[PlaceItem]]:
    if len(items) <= 1:
        return None

    dominant = next((item for item in items if _key_contains(make_key(item.title), venue.key)), None)
    if dominant is None:
        return None

    others = [item for item in items if item is not dominant]
    if not all(_is_generic_title(item.title) for item in others):
        return None

    if len(addresses) == 1:
        dominant = _with_address(dominant, addresses[0].cleaned)
    return [dominant]


def _collapse_to_single_address(
    items: Sequence[PlaceItem],
    addresses: Sequence[Candidate],
) -> Optional[List[PlaceItem]]:
    if len(addresses) != 1 or len(items) <= 1:
        return None

    address = addresses[0].cleaned.lower()
    matching = [
        item for item in items
        if address in item.title.lower() or address in item.description.lower()
    ]
    if len(matching) != 1:
        return None
    return [matching[0]]


def _key_contains(key: str, candidate_key: str) -> bool:
    """Token-aligned containment, so "pier 39" does not match "pier 390"."""
    return f" {candidate_key} " in f" {key} "


def _is_generic_title(title: str) -> bool:
    lowered = title.lower()
    return any(term.lower() in lowered for term in GENERIC_PLACE_TERMS)


def _with_address(item: PlaceItem, address: str) -> PlaceItem:
    if address.lower() in item.description.lower():
        return item
    sentence = ADDRESS_SENTENCE_TEMPLATE.format(address=address)
    description = f"{item.description} {sentence}".strip()
    return replace(item, description=description)
