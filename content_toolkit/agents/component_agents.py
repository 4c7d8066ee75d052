"""Component agents: keywords, links and FAQs for the article, then the assembled snapshot."""
import content_toolkit.services.components_service as components_svc
from content_toolkit.models.schemas import ArticleComponents
from content_toolkit.workflow.state import WorkflowState


async def related_keywords_agent(state: WorkflowState) -> dict:
    keywords = await components_svc.generate_related_keywords(state["gemini"], state["analysis"])
    return {"related_keywords": keywords}


async def internal_links_agent(state: WorkflowState) -> dict:
    links = await components_svc.generate_internal_links(state["gemini"], state.get("keyword") or "")
    return {"internal_links": links}


async def external_links_agent(state: WorkflowState) -> dict:
    """Suggested health/nutrition links, keeping only the verified ones when any pass."""
    links = await components_svc.generate_external_links(
        state["gemini"],
        state.get("keyword") or "",
        state["analysis"],
        state.get("region") or "United States",
        state.get("language") or "English",
    )
    return {"external_links": links}


async def faqs_agent(state: WorkflowState) -> dict:
    faqs = await components_svc.generate_faqs(
        state["gemini"],
        state["analysis"],
        state.get("language") or "English",
    )
    return {"faqs": faqs}


def assemble_components_agent(state: WorkflowState) -> dict:
    """Pure step: freeze everything gathered so far into ArticleComponents."""
    sections = state.get("recipe_sections")
    components = ArticleComponents(
        target_keyword=state.get("keyword") or "",
        related_keywords=state.get("related_keywords") or "",
        internal_links=state.get("internal_links") or "",
        external_links=state.get("external_links") or "",
        ingredients="\n".join(sections.ingredients) if sections else "",
        instructions="\n".join(sections.instructions) if sections else "",
        nutrition=sections.nutrition_facts if sections else "",
        faqs=state.get("faqs") or "",
        competitor_analysis=state.get("analysis") or "",
        category=state.get("category") or (sections.category if sections else ""),
    )
    return {"components": components}
