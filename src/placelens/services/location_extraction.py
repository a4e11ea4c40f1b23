import logging
from typing import List, Sequence

from placelens.config import settings
from placelens.prompts import load_prompt
from placelens.services.base_llm import BaseLLMService
from placelens.services.place_extraction.models import PlaceCategory, PlaceItem
from placelens.services.place_extraction.text_utils import normalize_whitespace, strip_code_fences

logger = logging.getLogger(__name__)

# Titles that are category words rather than places
FALLBACK_EXCLUDED_TITLES = frozenset(
    {c.value for c in PlaceCategory}
    | {"Cafe", "Travel", "Food", "Product", "Lifestyle", "Lodging", "Sightseeing",
       "Experience", "Logistics", "Shopping"}
)


async def extract_primary_location(places: Sequence[PlaceItem], llm: BaseLLMService) -> List[str]:
    """
    Identify the primary location the places are in.

    Returns a single-element list such as ["Legazpi, Philippines"], or an empty
    list when no location is found. If the model call fails, falls back to the
    place titles that look like proper names.
    """
    content = normalize_whitespace(
        " ".join(f"{place.title} {place.description}" for place in places)
    )
    if not content:
        return []

    prompt = load_prompt("primary_location", content=content)

    try:
        response, _, _, _ = await llm.query(prompt, temperature=settings.location_temperature)
    except Exception as e:
        logger.error(f"[Location] Error extracting primary location: {e}")
        return _fallback_locations(places)

    location = strip_code_fences(response).replace('"', "").strip()
    if not location or location.lower() == "null":
        return []
    return [location]


def _fallback_locations(places: Sequence[PlaceItem]) -> List[str]:
    titles = []
    for place in places:
        title = place.title.strip()
        if len(title) <= 2 or not title[0].isupper():
            continue
        if title in FALLBACK_EXCLUDED_TITLES:
            continue
        titles.append(title)
    return list(dict.fromkeys(titles))
