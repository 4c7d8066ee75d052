"""Comparison Agent: critique the current article against the competitor analysis."""
import content_toolkit.services.article_service as article_svc
from content_toolkit.services.article_parser import parse_article
from content_toolkit.workflow.state import WorkflowState


async def comparison_agent(state: WorkflowState) -> dict:
    """Compare the parsed article body (or the raw text when it has no delimiters)."""
    original = state.get("original_article") or ""
    body = parse_article(original).main_article_body or original
    comparison = await article_svc.compare_article_with_competitors(
        state["gemini"],
        body,
        state["components"].competitor_analysis,
    )
    return {"comparison": comparison}
