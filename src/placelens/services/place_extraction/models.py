"""
Data models for place extraction.

This module contains the core data structures used throughout the place
extraction pipeline: the signal bundle consumed from the video analysis step,
OCR candidates, the place items handed back to callers, and debug information.
"""

import enum
from dataclasses import dataclass, field
from typing import Iterable, List, Optional


class PlaceCategory(str, enum.Enum):
    RESTAURANT = "Restaurant"
    ACTIVITY = "Activity"
    LANDMARK = "Landmark"
    SHOP = "Shop"
    ACCOMMODATION = "Accommodation"
    OTHER = "Other"


class CandidateKind(str, enum.Enum):
    VENUE = "venue"
    ADDRESS = "address"


@dataclass(frozen=True)
class SignalBundle:
    """Visual labels, OCR text, transcript and caption for one extraction."""
    labels: tuple = ()
    ocr_texts: tuple = ()
    transcript: str = ""
    caption: Optional[str] = None

    @classmethod
    def from_segments(
        cls,
        labels: Optional[Iterable[str]] = None,
        ocr_texts: Optional[Iterable[str]] = None,
        transcript_segments: Optional[Iterable[str]] = None,
        caption: Optional[str] = None,
    ) -> "SignalBundle":
        """Build a bundle from the analysis output, treating missing fields as empty."""
        segments = [s for s in (transcript_segments or []) if s]
        return cls(
            labels=tuple(label for label in (labels or []) if label),
            ocr_texts=tuple(t for t in (ocr_texts or []) if t),
            transcript=" ".join(segments),
            caption=caption or None,
        )


@dataclass(frozen=True)
class Candidate:
    """A venue name or address derived from OCR text."""
    raw: str
    cleaned: str
    key: str
    kind: CandidateKind


@dataclass
class CandidateSet:
    venues: List[Candidate] = field(default_factory=list)
    addresses: List[Candidate] = field(default_factory=list)

    @property
    def venue_names(self) -> List[str]:
        return [c.cleaned for c in self.venues]

    @property
    def address_texts(self) -> List[str]:
        return [c.cleaned for c in self.addresses]

    def is_empty(self) -> bool:
        return not self.venues and not self.addresses


@dataclass
class PlaceItem:
    """One distinct real-world place."""
    title: str
    description: str
    category: PlaceCategory = PlaceCategory.OTHER

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
        }


@dataclass
class RawExtraction:
    """Model output before reconciliation."""
    items: List[PlaceItem]
    raw_payload: Optional[str] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class ExtractionDebugInfo:
    """Debug information for the place extraction pipeline."""
    venue_candidates: List[str]
    address_candidates: List[str]
    raw_payload: Optional[str]
    parse_error: Optional[str]
    raw_titles: List[str]
    final_titles: List[str]
    reconciled: bool = False


@dataclass
class ExtractionResult:
    """Final result of place extraction."""
    places: List[PlaceItem]
    debug_info: Optional[ExtractionDebugInfo] = None

    def to_dicts(self) -> List[dict]:
        return [p.to_dict() for p in self.places]
