"""Analysis stages: competitor analysis, outranking strategy, recipe-section extraction."""
from content_toolkit.models.catalogs import categories_for
from content_toolkit.models.schemas import RecipeSections
from content_toolkit.services.errors import FormatError
from content_toolkit.services.gemini_service import GeminiService
from content_toolkit.utils.helpers import decode_model_json
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)

RECIPE_SECTIONS_STAGE = "recipe sections"


async def generate_competitor_analysis(
    gemini: GeminiService,
    keyword: str,
    region: str,
    language: str,
    competitor_content: str,
) -> str:
    """Markdown analysis of the competitor articles for ``keyword``."""
    prompt = f"""
Role: Expert SEO Content Analyst
Task: Analyze the provided competitor content for the keyword "{keyword}" with a target audience in {region} who speak {language}.

Competitor Content (separated by '---'):
---
{competitor_content}
---

Provide a detailed analysis covering the following points in markdown format:
- **Common Themes & Topics:** Identify the core topics, sub-topics, and recurring themes across all articles.
- **Content Structure & Format:** Analyze the typical article structure (e.g., listicle, how-to guide), use of headings, lists, and multimedia.
- **Key Entities & Concepts:** List the most important people, places, and concepts mentioned.
- **User Intent:** Determine the primary user intent (informational, commercial, transactional) the content is satisfying.
- **Sentiment & Tone:** Describe the overall tone and sentiment (e.g., formal, casual, expert, enthusiastic).
- **Content Gaps:** Identify any obvious topics or questions that are NOT being answered by the competitors.
"""
    return await gemini.generate_text(prompt)


async def generate_outranking_strategy(gemini: GeminiService, analysis: str) -> str:
    """Markdown content strategy built on a finished competitor analysis."""
    prompt = f"""
Role: Master SEO Strategist
Task: Based on the following competitor analysis, create a comprehensive content strategy to outrank them.

Competitor Analysis:
---
{analysis}
---

Your strategy must be actionable and detailed, presented in markdown. Focus on:
- **Unique Angle:** Propose a unique angle or hook to make our content stand out.
- **Content Brief/Outline:** Create a detailed H2/H3 outline for the new article.
- **E-E-A-T Improvements:** Suggest specific ways to improve Expertise, Experience, Authoritativeness, and Trustworthiness (e.g., expert quotes, original data, author bios).
- **Multimedia Strategy:** Recommend types of images, videos, or infographics to include.
- **Content Gap Fulfillment:** Explicitly state how the new content will fill the identified gaps.
"""
    return await gemini.generate_text(prompt)


def recipe_sections_schema(categories: list[str]) -> dict:
    return {
        "type": "OBJECT",
        "properties": {
            "ingredients": {"type": "ARRAY", "items": {"type": "STRING"}},
            "instructions": {"type": "ARRAY", "items": {"type": "STRING"}},
            "nutritionFacts": {"type": "STRING"},
            "category": {"type": "STRING", "enum": categories},
        },
        "required": ["ingredients", "instructions", "nutritionFacts", "category"],
    }


async def generate_recipe_sections(
    gemini: GeminiService,
    analysis: str,
    region: str = "United States",
    language: str = "English",
) -> RecipeSections:
    """
    Ingredients, instructions, nutrition and category synthesized from the analysis.
    The category must belong to the list for ``region``/``language``; anything else is a FormatError.
    """
    categories = categories_for(region, language)
    prompt = f"""
Based on the provided competitor analysis for a recipe, synthesize the following sections into a structured JSON object:
1. A combined and comprehensive list of all ingredients mentioned.
2. A clear, step-by-step set of instructions, synthesized from the common steps.
3. A typical nutrition facts block based on the ingredients.
4. The single most appropriate category for this recipe from the allowed list.

Competitor Analysis:
---
{analysis}
---
"""
    raw = await gemini.generate_json(prompt, recipe_sections_schema(categories))
    sections = decode_model_json(raw, RecipeSections, RECIPE_SECTIONS_STAGE)
    if sections.category not in categories:
        logger.error(
            "recipe_category_rejected",
            category=sections.category,
            region=region,
            language=language,
            raw_text=raw,
        )
        raise FormatError(RECIPE_SECTIONS_STAGE)
    return sections
