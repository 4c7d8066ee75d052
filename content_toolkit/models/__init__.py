"""Pydantic models."""
from content_toolkit.models.schemas import (
    AllImageDetails,
    AllPinterestContent,
    ArticleComponents,
    ImageDetails,
    InspirationImage,
    ParsedArticle,
    PinterestPinDetails,
    RecipeSections,
    SavedArticle,
    new_history_entry,
)

__all__ = [
    "AllImageDetails",
    "AllPinterestContent",
    "ArticleComponents",
    "ImageDetails",
    "InspirationImage",
    "ParsedArticle",
    "PinterestPinDetails",
    "RecipeSections",
    "SavedArticle",
    "new_history_entry",
]
