"""Parser Agent: typed view of the latest article payload."""
from content_toolkit.services.article_parser import parse_article
from content_toolkit.utils.logging import get_logger
from content_toolkit.workflow.state import WorkflowState

logger = get_logger(__name__)


def parse_article_agent(state: WorkflowState) -> dict:
    article = parse_article(state.get("content"))
    if article.is_empty:
        # Parsing succeeded but the article markers were missing; callers decide what to do
        logger.warning("article_body_empty", content_chars=len(state.get("content") or ""))
    return {"article": article}
