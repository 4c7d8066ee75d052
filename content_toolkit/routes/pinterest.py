"""POST /pinterest/keywords and POST /pinterest/pins (standalone pin builder)."""
from fastapi import APIRouter, Depends

from content_toolkit.models.schemas import (
    AllPinterestContent,
    PinterestKeywords,
    PinterestKeywordsRequest,
    PinterestPinsRequest,
)
from content_toolkit.routes.errors import get_gemini, run_stage
from content_toolkit.services import social_service
from content_toolkit.services.gemini_service import GeminiService

router = APIRouter(prefix="/pinterest", tags=["pinterest"])


@router.post("/keywords", response_model=PinterestKeywords)
async def pinterest_keywords(body: PinterestKeywordsRequest, gemini: GeminiService = Depends(get_gemini)):
    keywords = await run_stage(
        social_service.generate_pinterest_keywords(gemini, body.main_keyword, body.keyword_style)
    )
    return PinterestKeywords(keywords=keywords)


@router.post("/pins", response_model=AllPinterestContent)
async def pinterest_pins(body: PinterestPinsRequest, gemini: GeminiService = Depends(get_gemini)):
    """Ten pins; ``inspiration_image`` (base64 + mime type) is sent to the model inline."""
    return await run_stage(
        social_service.generate_pinterest_pins(gemini, body.main_keyword, body.related_keywords, body.inspiration_image)
    )
