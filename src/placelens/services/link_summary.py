"""
Article link summarization.

Fetches a web article, reduces its HTML to readable text, and asks the model
for a short travel summary with key points and suggested activities.
"""

import enum
import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

import httpx

from placelens.config import settings
from placelens.prompts import load_prompt
from placelens.services.base_llm import BaseLLMService
from placelens.services.place_extraction.text_utils import normalize_whitespace, strip_code_fences

logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

_SCRIPT_RE = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")


class ActivityCategory(str, enum.Enum):
    FOOD = "Food"
    LODGING = "Lodging"
    SIGHTSEEING = "Sightseeing"
    EXPERIENCE = "Experience"
    LOGISTICS = "Logistics"
    SHOPPING = "Shopping"
    OTHER = "Other"


class LinkSummaryError(Exception):
    """Raised when the model's summary cannot be parsed."""


@dataclass
class SuggestedActivity:
    title: str
    description: str
    category: ActivityCategory = ActivityCategory.OTHER

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description, "category": self.category.value}


@dataclass
class LinkSummary:
    source_url: str
    summary: str = ""
    key_points: List[str] = field(default_factory=list)
    suggested_activities: List[SuggestedActivity] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sourceUrl": self.source_url,
            "summary": self.summary,
            "keyPoints": list(self.key_points),
            "suggestedActivities": [a.to_dict() for a in self.suggested_activities],
        }


def html_to_text(html: str) -> str:
    """Drop scripts and styles, strip tags, and collapse whitespace."""
    if not html:
        return ""
    without_scripts = _STYLE_RE.sub(" ", _SCRIPT_RE.sub(" ", html))
    return normalize_whitespace(_TAG_RE.sub(" ", without_scripts))


async def fetch_page_text(url: str, http_client: Optional[httpx.AsyncClient] = None) -> str:
    if http_client is not None:
        response = await http_client.get(url, headers=BROWSER_HEADERS)
    else:
        async with httpx.AsyncClient(timeout=settings.link_fetch_timeout, follow_redirects=True) as client:
            response = await client.get(url, headers=BROWSER_HEADERS)
    response.raise_for_status()
    return html_to_text(response.text)[: settings.link_max_chars]


async def summarize_link(
    url: str,
    llm: BaseLLMService,
    http_client: Optional[httpx.AsyncClient] = None,
) -> LinkSummary:
    if not url:
        raise ValueError("URL is required")

    try:
        page_text = await fetch_page_text(url, http_client)
    except httpx.HTTPError as e:
        logger.error(f"[LinkSummary] Failed to fetch {url}: {e}")
        raise

    prompt = load_prompt("link_summary", url=url, page_text=page_text)
    response, _, _, _ = await llm.query(prompt, temperature=settings.link_summary_temperature)

    try:
        return parse_link_summary(response, url)
    except LinkSummaryError:
        logger.error(f"[LinkSummary] Failed to parse summary; raw payload: {response!r}")
        raise


def parse_link_summary(response: str, url: str) -> LinkSummary:
    try:
        data = json.loads(strip_code_fences(response or ""))
    except json.JSONDecodeError as e:
        raise LinkSummaryError(f"Failed to parse AI response: {e}") from e

    if not isinstance(data, dict):
        raise LinkSummaryError("Failed to parse AI response: expected a JSON object")

    source_url = data.get("sourceUrl")
    summary = data.get("summary")
    key_points = data.get("keyPoints")
    activities = data.get("suggestedActivities")

    return LinkSummary(
        source_url=source_url if isinstance(source_url, str) and source_url.strip() else url,
        summary=summary if isinstance(summary, str) else "",
        key_points=[str(p) for p in key_points] if isinstance(key_points, list) else [],
        suggested_activities=_parse_activities(activities) if isinstance(activities, list) else [],
    )


def _parse_activities(elements: List[Any]) -> List[SuggestedActivity]:
    activities = []
    for element in elements:
        if not isinstance(element, dict):
            continue
        title = element.get("title")
        if not isinstance(title, str) or not title.strip():
            continue
        description = element.get("description")
        activities.append(
            SuggestedActivity(
                title=normalize_whitespace(title),
                description=description if isinstance(description, str) else "",
                category=_parse_activity_category(element.get("category")),
            )
        )
    return activities


def _parse_activity_category(value: Any) -> ActivityCategory:
    if isinstance(value, str):
        name = value.strip().lower()
        for category in ActivityCategory:
            if category.value.lower() == name:
                return category
    return ActivityCategory.OTHER
