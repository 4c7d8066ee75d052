"""Pydantic schemas for stage outputs, workflow inputs and the HTTP API."""
import binascii
import time
import uuid
from base64 import b64decode
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WireModel(BaseModel):
    """Accepts both the camelCase names the model emits and snake_case names."""

    model_config = ConfigDict(populate_by_name=True)


# ----- Analysis stage outputs -----
class RecipeSections(WireModel):
    """Output of the recipe-section stage. ``category`` is checked against the regional list by the stage."""

    ingredients: list[str]
    instructions: list[str]
    nutrition_facts: str = Field(alias="nutritionFacts")
    category: str


# ----- Full-article input contract -----
class ArticleComponents(WireModel):
    """Snapshot of everything the full-article stage needs. Owned by the caller."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    target_keyword: str = Field(alias="targetKeyword")
    related_keywords: str = Field(default="", alias="relatedKeywords")
    internal_links: str = Field(default="", alias="internalLinks")
    external_links: str = Field(default="", alias="externalLinks")
    ingredients: str = ""
    instructions: str = ""
    nutrition: str = ""
    faqs: str = ""
    competitor_analysis: str = Field(default="", alias="competitorAnalysis")
    category: str = ""


class ParsedArticle(BaseModel):
    """Typed view of one raw article payload. Empty fields mean the section was missing."""

    title: str = ""
    main_article_body: str = ""
    title_tags: list[str] = Field(default_factory=list)
    meta_descriptions: list[str] = Field(default_factory=list)
    recipe_recap: str = ""
    category: str = ""
    recipe_json: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.main_article_body

    def markdown(self) -> str:
        """Article as a markdown document (title heading + body)."""
        return f"# {self.title}\n\n{self.main_article_body}" if self.title else self.main_article_body


# ----- Image assets -----
class ImageDetails(WireModel):
    prompt: str
    title: str
    alt_text: str = Field(alias="altText")
    caption: str
    description: str


class AllImageDetails(WireModel):
    featured_image: ImageDetails = Field(alias="featuredImage")
    ingredients_image: ImageDetails = Field(alias="ingredientsImage")
    step_images: list[ImageDetails] = Field(alias="stepImages")


# ----- Pinterest assets -----
class PinterestPinDetails(WireModel):
    headline: str
    description: str
    alt_text: str = Field(alias="altText")
    image_guidance: str = Field(alias="imageGuidance")


class AllPinterestContent(WireModel):
    pins: list[PinterestPinDetails]


class PinterestKeywords(WireModel):
    keywords: list[str]


class InspirationImage(WireModel):
    """Base64 image sent alongside the Pinterest pins prompt for style guidance."""

    base64: str
    mime_type: str = Field(alias="mimeType")

    @field_validator("base64")
    @classmethod
    def check_base64(cls, v: str) -> str:
        try:
            b64decode(v, validate=True)
        except binascii.Error as e:
            raise ValueError("inspiration image is not valid base64") from e
        return v


# ----- History payload (persisted by the client, never by the toolkit) -----
class SavedArticle(WireModel):
    id: str
    timestamp: int
    title: str
    keyword: str
    content: str
    components: ArticleComponents
    images: AllImageDetails | None = None
    pinterest: AllPinterestContent | None = None
    youtube: str | None = None
    reels_script: str | None = Field(default=None, alias="reelsScript")


def new_history_entry(content: str, components: ArticleComponents, title: str = "", **assets: Any) -> SavedArticle:
    """Build a history record with a fresh id and a millisecond timestamp."""
    now_ms = int(time.time() * 1000)
    return SavedArticle(
        id=uuid.uuid4().hex,
        timestamp=now_ms,
        title=title or components.target_keyword,
        keyword=components.target_keyword,
        content=content,
        components=components,
        **assets,
    )


# ----- API Request/Response -----
class AnalysisRequest(BaseModel):
    """Request body for POST /analysis."""

    keyword: str = Field(description="Target keyword the competitors rank for")
    competitor_content: str = Field(description="Competitor articles separated by '---'")
    region: str = Field(default="United States")
    language: str = Field(default="English")


class AnalysisResponse(BaseModel):
    stage: str
    analysis: str | None = None
    strategy: str | None = None
    recipe_sections: RecipeSections | None = None
    error: str | None = None
    is_billing_error: bool = False
    billing_help_url: str | None = None


class ComponentsRequest(BaseModel):
    """Request body for POST /components."""

    keyword: str
    competitor_analysis: str
    region: str = "United States"
    language: str = "English"
    recipe_sections: RecipeSections | None = None
    category: str = ""


class ComponentsResponse(BaseModel):
    stage: str
    components: ArticleComponents | None = None
    partial: dict[str, str] = Field(default_factory=dict)
    error: str | None = None
    is_billing_error: bool = False
    billing_help_url: str | None = None


class ArticleResponse(BaseModel):
    """Full article payload plus its parsed view and the record to persist."""

    stage: str
    content: str | None = None
    article: ParsedArticle | None = None
    comparison: str | None = None
    history_entry: SavedArticle | None = None
    error: str | None = None
    is_billing_error: bool = False
    billing_help_url: str | None = None


class CompareRequest(BaseModel):
    article_body: str
    competitor_analysis: str


class RegenerateRequest(BaseModel):
    components: ArticleComponents
    original_article: str
    feedback: str


class ReviseRequest(BaseModel):
    """Compare the article with competitors, then regenerate from that critique."""

    components: ArticleComponents
    original_article: str


class TextResponse(BaseModel):
    text: str


class ImageMetadataRequest(BaseModel):
    keyword: str
    ingredients: str
    instructions: str


class ImageRequest(BaseModel):
    prompt: str
    aspect_ratio: Literal["1:1", "16:9", "9:16", "4:3", "3:4"] = "16:9"


class ImageResponse(BaseModel):
    data_url: str


class PinterestContentRequest(BaseModel):
    keyword: str
    related_keywords: str
    article_title: str


class PinterestKeywordsRequest(BaseModel):
    main_keyword: str
    keyword_style: str = "General & Related"


class PinterestPinsRequest(BaseModel):
    main_keyword: str
    related_keywords: str
    inspiration_image: InspirationImage | None = None


class YouTubeScriptRequest(BaseModel):
    article_title: str
    article_content: str


class ReelsScriptRequest(BaseModel):
    article_title: str
    ingredients: str
    instructions: str
