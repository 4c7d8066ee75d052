"""POST /articles, /articles/compare, /articles/regenerate and /articles/revise."""
from fastapi import APIRouter, Depends

from content_toolkit.models.schemas import (
    ArticleComponents,
    ArticleResponse,
    CompareRequest,
    RegenerateRequest,
    ReviseRequest,
    TextResponse,
    new_history_entry,
)
from content_toolkit.routes.errors import billing_help_url, get_gemini, run_stage
from content_toolkit.services import article_service
from content_toolkit.services.gemini_service import GeminiService
from content_toolkit.workflow.orchestrator import PipelineOrchestrator, WorkflowResult

router = APIRouter(prefix="/articles", tags=["articles"])


def _article_response(result: WorkflowResult, components: ArticleComponents) -> ArticleResponse:
    content = result.get("content")
    article = result.get("article")
    history_entry = None
    if result.ok and article is not None and not article.is_empty:
        history_entry = new_history_entry(content, components, title=article.title)
    return ArticleResponse(
        stage=result.stage.value,
        content=content,
        article=article,
        comparison=result.get("comparison"),
        history_entry=history_entry,
        error=result.error,
        is_billing_error=result.is_billing_error,
        billing_help_url=billing_help_url(result.is_billing_error),
    )


@router.post("", response_model=ArticleResponse)
async def generate_article(components: ArticleComponents, gemini: GeminiService = Depends(get_gemini)):
    """Generate and parse the full article. ``history_entry`` is the record the client should persist."""
    result = await PipelineOrchestrator(gemini).generate_article(components)
    return _article_response(result, components)


@router.post("/compare", response_model=TextResponse)
async def compare_article(body: CompareRequest, gemini: GeminiService = Depends(get_gemini)):
    text = await run_stage(
        article_service.compare_article_with_competitors(gemini, body.article_body, body.competitor_analysis)
    )
    return TextResponse(text=text)


@router.post("/regenerate", response_model=ArticleResponse)
async def regenerate_article(body: RegenerateRequest, gemini: GeminiService = Depends(get_gemini)):
    """Rewrite from user feedback (history viewer action)."""
    result = await PipelineOrchestrator(gemini).regenerate_article(
        body.components,
        body.original_article,
        body.feedback,
    )
    return _article_response(result, body.components)


@router.post("/revise", response_model=ArticleResponse)
async def revise_article(body: ReviseRequest, gemini: GeminiService = Depends(get_gemini)):
    """Compare with competitors, then regenerate using that critique as feedback."""
    result = await PipelineOrchestrator(gemini).revise_article(body.components, body.original_article)
    return _article_response(result, body.components)
