"""API router for place extraction."""

from fastapi import APIRouter, Depends

from placelens.api.dependencies import UPSTREAM_ERRORS, get_llm_service, upstream_http_error
from placelens.models.schemas import (
    ExtractPlacesResponse,
    LocationRequest,
    LocationResponse,
    SignalBundleRequest,
)
from placelens.services.base_llm import BaseLLMService
from placelens.services.location_extraction import extract_primary_location
from placelens.services.place_extraction import PlaceItem, SignalBundle, extract_places, parse_category

router = APIRouter()


@router.post("/extract", response_model=ExtractPlacesResponse)
async def extract(
    request: SignalBundleRequest,
    llm: BaseLLMService = Depends(get_llm_service),
) -> dict:
    """
    Extract the distinct places described by one video's analysis signals.

    Args:
        request: Labels, OCR texts, transcript segments and caption
        llm: LLM service used for place synthesis

    Returns:
        Deduplicated place list; empty when the model response was unusable

    Raises:
        HTTPException: 502 if the model call fails, 503 if no API key is configured
    """
    bundle = SignalBundle.from_segments(
        labels=request.labels,
        ocr_texts=request.ocr_texts,
        transcript_segments=request.transcript_segments,
        caption=request.caption,
    )
    try:
        result = await extract_places(bundle, llm)
    except (ValueError, *UPSTREAM_ERRORS) as e:
        raise upstream_http_error(e) from e

    return {"success": True, "data": result.to_dicts()}


@router.post("/locations", response_model=LocationResponse)
async def locations(
    request: LocationRequest,
    llm: BaseLLMService = Depends(get_llm_service),
) -> dict:
    """Derive the primary "City, Country" location of extracted places."""
    places = [
        PlaceItem(title=p.title, description=p.description, category=parse_category(p.category))
        for p in request.places
    ]
    found = await extract_primary_location(places, llm)
    return {"success": True, "locations": found}
