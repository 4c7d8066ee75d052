"""Parse the delimited article payload returned by the full-article stages.

The model wraps each part of its answer in ``[NAME_START]...[NAME_END]`` markers.
Missing sections degrade to empty values; the parser never raises.
"""
import re

from content_toolkit.models.schemas import ParsedArticle

ARTICLE = "ARTICLE"
TITLE_TAGS = "TITLE_TAGS"
META_DESCRIPTIONS = "META_DESCRIPTIONS"
RECIPE_RECAP = "RECIPE_RECAP"
CATEGORY = "CATEGORY"
RECIPE_JSON = "RECIPE_JSON"

_TITLE_LINE = re.compile(r"^#\s+(.*)")
_ORDINAL = re.compile(r"^\d+\.\s*")


def extract_section(raw: str, name: str) -> str:
    """Trimmed text between ``[name_START]`` and the next ``[name_END]``, or ''."""
    match = re.search(rf"\[{name}_START\]([\s\S]*?)\[{name}_END\]", raw)
    return match.group(1).strip() if match else ""


def split_numbered_lines(block: str) -> list[str]:
    lines = (_ORDINAL.sub("", line).strip() for line in block.split("\n"))
    return [line for line in lines if line]


def split_title(article: str) -> tuple[str, str]:
    """Split a leading ``# Title`` line off the article region."""
    match = _TITLE_LINE.match(article)
    if not match or not match.group(1):
        return "", article
    return match.group(1).strip(), article[match.end():].strip()


def parse_article(raw: str | None) -> ParsedArticle:
    raw = raw or ""
    title, body = split_title(extract_section(raw, ARTICLE))
    return ParsedArticle(
        title=title,
        main_article_body=body,
        title_tags=split_numbered_lines(extract_section(raw, TITLE_TAGS)),
        meta_descriptions=split_numbered_lines(extract_section(raw, META_DESCRIPTIONS)),
        recipe_recap=extract_section(raw, RECIPE_RECAP),
        category=extract_section(raw, CATEGORY),
        recipe_json=extract_section(raw, RECIPE_JSON),
    )
