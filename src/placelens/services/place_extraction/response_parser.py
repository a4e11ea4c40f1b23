"""
Parsing and validation of the model's place list.

The model is asked for a bare JSON array of {title, description, category}
objects. Anything that does not decode to a JSON array is malformed; inside a
well-formed array, individual elements that do not fit the Place Item shape are
dropped rather than passed through.
"""

import json
import logging
from typing import Any, List, Optional

from placelens.services.place_extraction.models import PlaceCategory, PlaceItem
from placelens.services.place_extraction.text_utils import normalize_whitespace, strip_code_fences

logger = logging.getLogger(__name__)

_CATEGORY_ALIASES = {
    "accomodation": PlaceCategory.ACCOMMODATION,
}


class PlaceResponseError(ValueError):
    """Raised when a model response is not a JSON array of objects."""


def parse_place_items(response: str) -> List[PlaceItem]:
    """Parse a model response into Place Items, raising PlaceResponseError if malformed."""
    content = strip_code_fences(response or "")
    if not content:
        raise PlaceResponseError("Empty model response")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise PlaceResponseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise PlaceResponseError(f"Expected a JSON array, got {type(data).__name__}")

    items = []
    for index, element in enumerate(data):
        item = _to_place_item(element)
        if item is None:
            logger.warning(f"[PlaceExtraction] Dropping malformed element {index}: {element!r}")
            continue
        items.append(item)
    return items


def parse_category(value: Any) -> Optional[PlaceCategory]:
    """Match a category name case-insensitively against the closed set."""
    if not isinstance(value, str):
        return None
    name = value.strip().lower()
    for category in PlaceCategory:
        if category.value.lower() == name:
            return category
    return _CATEGORY_ALIASES.get(name)


def _to_place_item(element: Any) -> Optional[PlaceItem]:
    if not isinstance(element, dict):
        return None

    title = element.get("title")
    if not isinstance(title, str) or not normalize_whitespace(title):
        return None

    category = parse_category(element.get("category"))
    if category is None:
        return None

    description = element.get("description")
    if not isinstance(description, str):
        description = ""

    return PlaceItem(
        title=normalize_whitespace(title),
        description=normalize_whitespace(description),
        category=category,
    )
