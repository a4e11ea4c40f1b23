from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

PlaceCategoryName = Literal["Restaurant", "Activity", "Landmark", "Shop", "Accommodation", "Other"]


class SignalBundleRequest(BaseModel):
    """Output of the video analysis step; any missing list is treated as empty."""

    model_config = ConfigDict(populate_by_name=True)

    labels: List[str] = Field(default_factory=list)
    ocr_texts: List[str] = Field(default_factory=list, alias="ocrTexts")
    transcript_segments: List[str] = Field(default_factory=list, alias="transcriptSegments")
    caption: Optional[str] = None

    @field_validator("labels", "ocr_texts", "transcript_segments", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        if value is None:
            return []
        return value


class PlaceItemSchema(BaseModel):
    title: str = Field(..., min_length=1)
    description: str
    category: PlaceCategoryName


class ExtractPlacesResponse(BaseModel):
    success: bool = True
    data: List[PlaceItemSchema]


class LocationRequest(BaseModel):
    places: List[PlaceItemSchema]


class LocationResponse(BaseModel):
    success: bool = True
    locations: List[str]


class LinkSummaryRequest(BaseModel):
    url: str = Field(..., min_length=1)


class ActivitySchema(BaseModel):
    title: str
    description: str
    category: str


class LinkSummaryData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source_url: str = Field(..., alias="sourceUrl")
    summary: str
    key_points: List[str] = Field(default_factory=list, alias="keyPoints")
    suggested_activities: List[ActivitySchema] = Field(default_factory=list, alias="suggestedActivities")


class LinkSummaryResponse(BaseModel):
    success: bool = True
    data: LinkSummaryData
