"""Strategy Agent: outranking content strategy built on the finished analysis."""
import content_toolkit.services.analysis_service as analysis_svc
from content_toolkit.workflow.state import WorkflowState


async def strategy_agent(state: WorkflowState) -> dict:
    """Embed the analysis produced by the previous node; never runs without one."""
    strategy = await analysis_svc.generate_outranking_strategy(state["gemini"], state["analysis"])
    return {"strategy": strategy}
