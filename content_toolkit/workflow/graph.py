"""Compiled LangGraphs for the content workflows. Every graph is a strict chain: one AI request in flight at a time.
Node names must differ from state keys.

- analysis:   analyze -> strategize -> extract_sections -> END
- components: suggest_keywords -> suggest_internal_links -> verify_external_links -> write_faqs -> assemble_components -> END
- article:    generate_article -> parse_article -> END
- revision:   compare -> regenerate -> parse_article -> END
- regenerate: regenerate -> parse_article -> END
"""
from dataclasses import dataclass
from typing import Any, Callable

from langgraph.graph import END, START, StateGraph

from content_toolkit.agents.analysis_agent import analysis_agent
from content_toolkit.agents.article_generator import article_generator_agent, regeneration_agent
from content_toolkit.agents.comparison_agent import comparison_agent
from content_toolkit.agents.component_agents import (
    assemble_components_agent,
    external_links_agent,
    faqs_agent,
    internal_links_agent,
    related_keywords_agent,
)
from content_toolkit.agents.parser_agent import parse_article_agent
from content_toolkit.agents.recipe_sections_agent import recipe_sections_agent
from content_toolkit.agents.strategy_agent import strategy_agent
from content_toolkit.workflow.state import WorkflowStage, WorkflowState


@dataclass(frozen=True)
class Step:
    node: str
    action: Callable[[WorkflowState], Any]
    stage: WorkflowStage
    message: str


@dataclass(frozen=True)
class WorkflowSpec:
    name: str
    steps: tuple[Step, ...]
    final_stage: WorkflowStage
    pause_between_steps: bool = False


ANALYSIS_WORKFLOW = WorkflowSpec(
    name="analysis",
    steps=(
        Step("analyze", analysis_agent, WorkflowStage.ANALYZING, "Analyzing competitor content..."),
        Step("strategize", strategy_agent, WorkflowStage.STRATEGIZING, "Generating outranking strategy..."),
        Step("extract_sections", recipe_sections_agent, WorkflowStage.EXTRACTING_SECTIONS, "Extracting recipe sections..."),
    ),
    final_stage=WorkflowStage.RESULTS,
    pause_between_steps=True,
)

COMPONENTS_WORKFLOW = WorkflowSpec(
    name="components",
    steps=(
        Step("suggest_keywords", related_keywords_agent, WorkflowStage.BUILDING_COMPONENTS, "Generating related keywords..."),
        Step("suggest_internal_links", internal_links_agent, WorkflowStage.BUILDING_COMPONENTS, "Suggesting internal links..."),
        Step("verify_external_links", external_links_agent, WorkflowStage.BUILDING_COMPONENTS, "Finding and verifying external links..."),
        Step("write_faqs", faqs_agent, WorkflowStage.BUILDING_COMPONENTS, "Writing FAQs..."),
        Step("assemble_components", assemble_components_agent, WorkflowStage.BUILDING_COMPONENTS, "Assembling article components..."),
    ),
    final_stage=WorkflowStage.COMPONENTS_READY,
)

ARTICLE_WORKFLOW = WorkflowSpec(
    name="article",
    steps=(
        Step("generate_article", article_generator_agent, WorkflowStage.GENERATING_ARTICLE, "Writing the full article..."),
        Step("parse_article", parse_article_agent, WorkflowStage.GENERATING_ARTICLE, "Formatting the article..."),
    ),
    final_stage=WorkflowStage.PARSED,
)

REVISION_WORKFLOW = WorkflowSpec(
    name="revision",
    steps=(
        Step("compare", comparison_agent, WorkflowStage.COMPARING, "Comparing with competitors..."),
        Step("regenerate", regeneration_agent, WorkflowStage.REGENERATING, "Regenerating the article..."),
        Step("parse_article", parse_article_agent, WorkflowStage.REGENERATING, "Formatting the article..."),
    ),
    final_stage=WorkflowStage.PARSED,
)

REGENERATION_WORKFLOW = WorkflowSpec(
    name="regenerate",
    steps=(
        Step("regenerate", regeneration_agent, WorkflowStage.REGENERATING, "Regenerating the article..."),
        Step("parse_article", parse_article_agent, WorkflowStage.REGENERATING, "Formatting the article..."),
    ),
    final_stage=WorkflowStage.PARSED,
)

WORKFLOWS = {
    spec.name: spec
    for spec in (ANALYSIS_WORKFLOW, COMPONENTS_WORKFLOW, ARTICLE_WORKFLOW, REVISION_WORKFLOW, REGENERATION_WORKFLOW)
}


def create_workflow_graph(spec: WorkflowSpec):
    """Build and compile a linear graph running ``spec.steps`` in order."""
    builder = StateGraph(WorkflowState)
    previous = START
    for step in spec.steps:
        builder.add_node(step.node, step.action)
        builder.add_edge(previous, step.node)
        previous = step.node
    builder.add_edge(previous, END)
    return builder.compile()
