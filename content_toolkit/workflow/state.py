"""LangGraph state schema and named stages for the content workflows."""
from enum import Enum
from typing import Any, TypedDict

from content_toolkit.models.schemas import ArticleComponents, ParsedArticle, RecipeSections


class WorkflowStage(str, Enum):
    INITIAL = "initial"
    ANALYZING = "analyzing"
    STRATEGIZING = "strategizing"
    EXTRACTING_SECTIONS = "extracting_sections"
    RESULTS = "results"
    BUILDING_COMPONENTS = "building_components"
    COMPONENTS_READY = "components_ready"
    GENERATING_ARTICLE = "generating_article"
    COMPARING = "comparing"
    REGENERATING = "regenerating"
    PARSED = "parsed"
    ERROR = "error"


class WorkflowState(TypedDict, total=False):
    """State passed between nodes. All keys optional for partial updates."""

    # Injected by the orchestrator (never returned to callers)
    gemini: Any  # GeminiService

    # User inputs
    keyword: str
    region: str
    language: str
    competitor_content: str
    category: str

    # Analysis workflow
    analysis: str
    strategy: str
    recipe_sections: RecipeSections

    # Components workflow
    related_keywords: str
    internal_links: str
    external_links: str
    faqs: str
    components: ArticleComponents

    # Article / revision workflows
    original_article: str
    feedback: str
    comparison: str
    content: str
    article: ParsedArticle
