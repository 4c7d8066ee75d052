"""Recipe Sections Agent: ingredients, instructions, nutrition and category from the analysis."""
import content_toolkit.services.analysis_service as analysis_svc
from content_toolkit.workflow.state import WorkflowState


async def recipe_sections_agent(state: WorkflowState) -> dict:
    sections = await analysis_svc.generate_recipe_sections(
        state["gemini"],
        state["analysis"],
        state.get("region") or "United States",
        state.get("language") or "English",
    )
    return {"recipe_sections": sections}
