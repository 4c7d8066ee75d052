"""Article Generation Agents: first draft and feedback-driven rewrite of the full article payload."""
import content_toolkit.services.article_service as article_svc
from content_toolkit.workflow.state import WorkflowState


async def article_generator_agent(state: WorkflowState) -> dict:
    """Generate the delimited article payload from the components snapshot."""
    content = await article_svc.generate_full_article(state["gemini"], state["components"])
    return {"content": content}


async def regeneration_agent(state: WorkflowState) -> dict:
    """
    Rewrite the original article as a whole new payload.
    Explicit feedback wins; otherwise the comparison produced earlier in the run is used.
    """
    feedback = state.get("feedback") or state.get("comparison") or ""
    content = await article_svc.regenerate_article(
        state["gemini"],
        state["components"],
        state["original_article"],
        feedback,
    )
    return {"content": content}
