from placelens.models.domain import LLMProvider
from placelens.models.schemas import (
    ExtractPlacesResponse,
    LinkSummaryRequest,
    LinkSummaryResponse,
    LocationRequest,
    LocationResponse,
    PlaceItemSchema,
    SignalBundleRequest,
)

__all__ = [
    "LLMProvider",
    "SignalBundleRequest",
    "PlaceItemSchema",
    "ExtractPlacesResponse",
    "LocationRequest",
    "LocationResponse",
    "LinkSummaryRequest",
    "LinkSummaryResponse",
]
