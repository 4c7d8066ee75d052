"""POST /assets/*: image metadata, single images, Pinterest content, YouTube and Reels scripts."""
from fastapi import APIRouter, Depends

from content_toolkit.models.schemas import (
    AllImageDetails,
    AllPinterestContent,
    ImageMetadataRequest,
    ImageRequest,
    ImageResponse,
    PinterestContentRequest,
    ReelsScriptRequest,
    TextResponse,
    YouTubeScriptRequest,
)
from content_toolkit.routes.errors import get_gemini, run_stage
from content_toolkit.services import media_service, social_service
from content_toolkit.services.gemini_service import GeminiService

router = APIRouter(prefix="/assets", tags=["assets"])


@router.post("/images", response_model=AllImageDetails)
async def image_metadata(body: ImageMetadataRequest, gemini: GeminiService = Depends(get_gemini)):
    """Prompts and SEO metadata for the featured, ingredients and step images."""
    return await run_stage(
        media_service.generate_image_prompts_and_metadata(gemini, body.keyword, body.ingredients, body.instructions)
    )


@router.post("/image", response_model=ImageResponse)
async def image(body: ImageRequest, gemini: GeminiService = Depends(get_gemini)):
    data_url = await run_stage(media_service.generate_image(gemini, body.prompt, body.aspect_ratio))
    return ImageResponse(data_url=data_url)


@router.post("/pinterest", response_model=AllPinterestContent)
async def pinterest_content(body: PinterestContentRequest, gemini: GeminiService = Depends(get_gemini)):
    return await run_stage(
        social_service.generate_pinterest_content(gemini, body.keyword, body.related_keywords, body.article_title)
    )


@router.post("/youtube", response_model=TextResponse)
async def youtube_script(body: YouTubeScriptRequest, gemini: GeminiService = Depends(get_gemini)):
    text = await run_stage(social_service.generate_youtube_script(gemini, body.article_title, body.article_content))
    return TextResponse(text=text)


@router.post("/reels", response_model=TextResponse)
async def reels_script(body: ReelsScriptRequest, gemini: GeminiService = Depends(get_gemini)):
    text = await run_stage(
        social_service.generate_reels_script(gemini, body.article_title, body.ingredients, body.instructions)
    )
    return TextResponse(text=text)
