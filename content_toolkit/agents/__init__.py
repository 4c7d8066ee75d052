"""LangGraph agents in the content workflows."""
from content_toolkit.agents.analysis_agent import analysis_agent
from content_toolkit.agents.strategy_agent import strategy_agent
from content_toolkit.agents.recipe_sections_agent import recipe_sections_agent
from content_toolkit.agents.component_agents import (
    assemble_components_agent,
    external_links_agent,
    faqs_agent,
    internal_links_agent,
    related_keywords_agent,
)
from content_toolkit.agents.article_generator import article_generator_agent, regeneration_agent
from content_toolkit.agents.comparison_agent import comparison_agent
from content_toolkit.agents.parser_agent import parse_article_agent

__all__ = [
    "analysis_agent",
    "strategy_agent",
    "recipe_sections_agent",
    "related_keywords_agent",
    "internal_links_agent",
    "external_links_agent",
    "faqs_agent",
    "assemble_components_agent",
    "article_generator_agent",
    "regeneration_agent",
    "comparison_agent",
    "parse_article_agent",
]
