"""API router for article link summaries."""

from fastapi import APIRouter, Depends, HTTPException

from placelens.api.dependencies import UPSTREAM_ERRORS, get_llm_service, upstream_http_error
from placelens.models.schemas import LinkSummaryRequest, LinkSummaryResponse
from placelens.services.base_llm import BaseLLMService
from placelens.services.link_summary import LinkSummaryError, summarize_link

router = APIRouter()


@router.post("/summarize", response_model=LinkSummaryResponse)
async def summarize(
    request: LinkSummaryRequest,
    llm: BaseLLMService = Depends(get_llm_service),
) -> dict:
    try:
        summary = await summarize_link(request.url, llm)
    except LinkSummaryError as e:
        raise HTTPException(status_code=502, detail="Failed to summarize link content") from e
    except (ValueError, *UPSTREAM_ERRORS) as e:
        raise upstream_http_error(e) from e

    return {"success": True, "data": summary.to_dict()}
