"""Competitor Analysis Agent: markdown analysis of the pasted competitor articles."""
import content_toolkit.services.analysis_service as analysis_svc
from content_toolkit.workflow.state import WorkflowState


async def analysis_agent(state: WorkflowState) -> dict:
    """Analyze competitor content for the keyword, region and language in state."""
    analysis = await analysis_svc.generate_competitor_analysis(
        state["gemini"],
        state.get("keyword") or "",
        state.get("region") or "United States",
        state.get("language") or "English",
        state.get("competitor_content") or "",
    )
    return {"analysis": analysis}
