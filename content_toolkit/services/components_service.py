"""Article-component stages: related keywords, FAQs, internal and verified external links."""
from typing import Awaitable, Callable

from content_toolkit.config import settings
from content_toolkit.models.catalogs import example_health_link, health_sites_for
from content_toolkit.services import link_verifier
from content_toolkit.services.gemini_service import GeminiService
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)

Verifier = Callable[[str], Awaitable[bool]]


async def generate_related_keywords(gemini: GeminiService, analysis: str) -> str:
    prompt = (
        "Based on the competitor analysis provided, generate a list of 15-20 highly relevant related keywords "
        f"and LSI terms. Output them as a simple, multi-line string. \n\nAnalysis:\n{analysis}"
    )
    return await gemini.generate_text(prompt)


async def generate_faqs(gemini: GeminiService, analysis: str, language: str = "English") -> str:
    prompt = (
        'Based on the competitor analysis, generate 4 relevant "Frequently Asked Questions" (FAQs) that would be '
        "valuable to include in our article. Format them as a multi-line string with each question on a new line. "
        f"The FAQs must be written in {language}. \n\nAnalysis:\n{analysis}"
    )
    return await gemini.generate_text(prompt)


async def generate_internal_links(gemini: GeminiService, keyword: str) -> str:
    prompt = (
        f'For a main article about "{keyword}", suggest 5-7 plausible internal link ideas. For each, provide the '
        'anchor text and a hypothetical blog post title it could link to. Format as "Anchor Text: Blog Post Title".'
    )
    return await gemini.generate_text(prompt)


async def select_verified_lines(
    text: str,
    verifier: Verifier,
    limit: int,
) -> list[str]:
    """
    Scan non-blank lines in order and keep those whose first URL passes ``verifier``.
    Stops as soon as ``limit`` lines are verified; probes run one at a time.
    """
    verified: list[str] = []
    for line in text.split("\n"):
        if len(verified) >= limit:
            break
        if not line.strip():
            continue
        url = link_verifier.extract_first_url(line)
        if url and await verifier(url):
            verified.append(line)
    return verified


async def generate_external_links(
    gemini: GeminiService,
    keyword: str,
    analysis: str,
    region: str = "United States",
    language: str = "English",
    verifier: Verifier | None = None,
) -> str:
    """
    Ask for 8-10 authoritative health/nutrition links, then keep the first verified ones.
    Falls back to the unverified model text when nothing passes the probe.
    """
    site_list = "\n- ".join(health_sites_for(region, language))
    prompt = f"""
Role: Expert SEO Analyst and Nutrition Researcher
Task: Based on the keyword "{keyword}" and the provided competitor analysis, select 8-10 of the MOST RELEVANT articles from the list below to use as authoritative external links.

**CRITICAL REQUIREMENT:**
- The links MUST focus on **health, nutrition, and medical facts** (e.g., benefits of an ingredient, nutritional values, safety).
- Do NOT link to other recipe sites or cooking blogs.
- Target Audience: {region} ({language}).
- Anchor text must be in {language}.

Competitor Analysis (for context):
---
{analysis}
---

List of Authoritative Websites to choose from:
- {site_list}

Instructions:
1.  Identify key nutritional topics, health claims, or specific ingredients from the analysis that would benefit from an authoritative external citation.
2.  For each topic, suggest a plausible, specific link from ONE of the websites listed above. It should be a realistic path (e.g., {example_health_link(region, language)}).
3.  Provide a natural anchor text for each link in {language}.
4.  Format the output as a multi-line string, with each suggestion on a new line: "Anchor Text: Full URL"
"""
    text = await gemini.generate_text(prompt)
    verified = await select_verified_lines(
        text,
        verifier or link_verifier.verify_url,
        settings.max_verified_links,
    )
    if not verified:
        logger.warning("external_links_unverified", keyword=keyword)
        return text
    logger.info("external_links_verified", keyword=keyword, count=len(verified))
    return "\n".join(verified)
