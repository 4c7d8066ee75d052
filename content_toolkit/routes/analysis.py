"""POST /analysis and POST /components."""
from fastapi import APIRouter, Depends

from content_toolkit.models.schemas import (
    AnalysisRequest,
    AnalysisResponse,
    ComponentsRequest,
    ComponentsResponse,
)
from content_toolkit.routes.errors import billing_help_url, get_gemini
from content_toolkit.services.gemini_service import GeminiService
from content_toolkit.workflow.orchestrator import PipelineOrchestrator

router = APIRouter(tags=["analysis"])

_COMPONENT_KEYS = ("related_keywords", "internal_links", "external_links", "faqs")


@router.post("/analysis", response_model=AnalysisResponse)
async def run_analysis(body: AnalysisRequest, gemini: GeminiService = Depends(get_gemini)):
    """Analysis -> strategy -> recipe sections. Whatever finished before a failure is returned too."""
    result = await PipelineOrchestrator(gemini).run_analysis(
        body.keyword,
        body.competitor_content,
        body.region,
        body.language,
    )
    return AnalysisResponse(
        stage=result.stage.value,
        analysis=result.get("analysis"),
        strategy=result.get("strategy"),
        recipe_sections=result.get("recipe_sections"),
        error=result.error,
        is_billing_error=result.is_billing_error,
        billing_help_url=billing_help_url(result.is_billing_error),
    )


@router.post("/components", response_model=ComponentsResponse)
async def build_components(body: ComponentsRequest, gemini: GeminiService = Depends(get_gemini)):
    """Keywords, internal links, verified external links and FAQs, assembled into ArticleComponents."""
    result = await PipelineOrchestrator(gemini).build_components(
        body.keyword,
        body.competitor_analysis,
        body.region,
        body.language,
        recipe_sections=body.recipe_sections,
        category=body.category,
    )
    return ComponentsResponse(
        stage=result.stage.value,
        components=result.get("components"),
        partial={k: result.values[k] for k in _COMPONENT_KEYS if k in result.values},
        error=result.error,
        is_billing_error=result.is_billing_error,
        billing_help_url=billing_help_url(result.is_billing_error),
    )
