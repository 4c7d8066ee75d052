"""Full-article stages: first draft, critique against competitors, and feedback-driven rewrite.

Both generation stages ask for the same delimited output so one parser handles either payload.
"""
from content_toolkit.models.catalogs import DEFAULT_CATEGORY
from content_toolkit.models.schemas import ArticleComponents
from content_toolkit.services.gemini_service import GeminiService

ARTICLE_MAX_TOKENS = 8192

_RECAP_RULE = (
    "As a culinary content creator, your task is to craft a detailed and visually appealing recap that follows "
    "a professional and user-friendly structure. It must include the following key elements: a short description "
    "of the recipe (30 words), Recipe Details (Prep Time, Cook Time, Total Time, Servings, Calories), and "
    "Categorization of the recipe (Course, Cuisine, Diet, Method, Keyword, Skill Level)."
)
_TITLE_TAG_RULE = "Each title must be between 40-57 characters, ideally under 50."
_META_RULE = (
    "Each meta description must be 140-150 characters, include the primary keyword, have a clear call to action, "
    "and be engaging without keyword stuffing."
)


def _link_instructions(components: ArticleComponents, intro_rule: str) -> str:
    return f"""- Internal Link Opportunities: You MUST naturally weave the following internal links into the article's text using markdown format (`[Anchor Text](URL)`). If specific URLs are not provided, use `#` or a placeholder path based on the title. Do NOT simply list the links at the end. **IMPORTANT: {intro_rule} Distribute them naturally throughout the MIDDLE sections of the article body.** The internal links to integrate are:
{components.internal_links}
- External Link Opportunities: You MUST naturally weave the following external links into the article's text using markdown format (`[anchor text](URL)`). Use the provided anchor text for the hyperlink. Do NOT simply list the links. For example, if an entry is "health benefits of olive oil: https://example.com", you should create a sentence like "...numerous studies have highlighted the [health benefits of olive oil](https://example.com) for heart health." **IMPORTANT: Do NOT place links in the Introduction. Distribute them naturally throughout the MIDDLE sections of the article body.** The links to integrate are:
{components.external_links}"""


def _recipe_details(components: ArticleComponents) -> str:
    return f"""- Ingredients:
{components.ingredients}
- Instructions:
{components.instructions}
- Nutrition Info:
{components.nutrition}"""


def build_article_prompt(components: ArticleComponents) -> str:
    category = components.category or DEFAULT_CATEGORY
    return f"""
Role: World-class SEO Content Writer and Chef, with a proven track record of creating articles that rank #1 on Google.
Task: Write a complete, high-quality, and engaging recipe article using ALL of the provided components. The primary goal is to create content that is superior to all known competitors, ensuring it will rank at the very top of search results. The article must be well-structured, easy to read, and optimized for the target keyword. The final article must be professional, highly engaging, and concise, **strictly not exceeding 2000 words**.

**IMPORTANT INSTRUCTIONS:**
1.  The final output MUST be a single block of text.
2.  Enclose the main article content between `[ARTICLE_START]` and `[ARTICLE_END]`. The very first line of the article content should be the main title, starting with '#'.
3.  Enclose 3-5 SEO title tag suggestions between `[TITLE_TAGS_START]` and `[TITLE_TAGS_END]`. {_TITLE_TAG_RULE}
4.  Enclose 3-5 meta description suggestions between `[META_DESCRIPTIONS_START]` and `[META_DESCRIPTIONS_END]`. {_META_RULE}
5.  Enclose a detailed recipe recap for a recipe card between `[RECIPE_RECAP_START]` and `[RECIPE_RECAP_END]`. {_RECAP_RULE}
6.  Use the provided blog category: "{category}". Enclose it between `[CATEGORY_START]` and `[CATEGORY_END]`.
7.  Enclose a valid JSON object formatted for a recipe card plugin (like WPRM) between `[RECIPE_JSON_START]` and `[RECIPE_JSON_END]`. This JSON MUST strictly follow the Schema.org/Recipe standard. It must include: name (the article H1 title), description (a short summary), keywords (a comma-separated string from the related keywords), recipeYield, prepTime (in ISO 8601 duration format, e.g., 'PT15M'), cookTime (ISO 8601), totalTime (ISO 8601), recipeIngredient (as an array of strings from the components), recipeInstructions (as an array of objects, each with '@type': 'HowToStep' and 'text', from the components), nutrition (as an object with '@type': 'NutritionInformation' and a 'calories' property e.g. "250 calories"), recipeCategory (e.g., '{category}'), and recipeCuisine (e.g., 'Italian'). The data for this JSON should be derived from the article components and the recipe recap you generate.
8.  **Consistency Mandate**: The lists of ingredients and instructions you generate MUST be used identically in the main article body, the recipe recap, and the recipe JSON. There should be absolutely no variation between these sections.
9.  **Nutrition Placement**: Do NOT include a separate '## Nutrition' section or list within the main article body text (between `[ARTICLE_START]` and `[ARTICLE_END]`). The nutrition information should ONLY be presented professionally within the `[RECIPE_RECAP]` block and the `[RECIPE_JSON]` object.

--- ARTICLE COMPONENTS ---
- Target Keyword: {components.target_keyword}
- Related Keywords to include naturally: {components.related_keywords}
{_link_instructions(components, "Do NOT place links in the Introduction (first 2-3 paragraphs).")}
- FAQs to answer in the article: {components.faqs}

--- RECIPE DETAILS ---
{_recipe_details(components)}

Now, write the complete article and associated assets following all instructions.
"""


def build_regeneration_prompt(components: ArticleComponents, original_article: str, feedback: str) -> str:
    category = components.category or DEFAULT_CATEGORY
    return f"""
Role: World-Class SEO Content Editor and Strategist
Task: Your goal is to create a superior, revised version of the 'Original Article' that is **guaranteed to outperform all competitors and achieve the highest possible ranking on Google**. You MUST incorporate all the 'Improvement Feedback' provided. This feedback is a critical analysis of the original article's strengths and weaknesses compared to competitors. Your revision must correct all weaknesses, amplify the strengths, and implement all suggested improvements to ensure the new version is definitively better and will outrank competitors.

Use the full original 'Article Components' and 'Recipe Details' for context, but prioritize the 'Improvement Feedback' for your changes. The revised article must be professional, highly engaging, concise, **strictly not exceeding 2000 words**, and maintain the required output format.

**CRITICAL INSTRUCTIONS (MAINTAIN THIS FORMAT):**
1.  The final output MUST be a single block of text.
2.  Enclose the revised article content between `[ARTICLE_START]` and `[ARTICLE_END]`. The title (#) must be the first line.
3.  Enclose 3-5 revised SEO title tag suggestions between `[TITLE_TAGS_START]` and `[TITLE_TAGS_END]`. {_TITLE_TAG_RULE}
4.  Enclose 3-5 revised meta description suggestions between `[META_DESCRIPTIONS_START]` and `[META_DESCRIPTIONS_END]`. {_META_RULE}
5.  Enclose a detailed, revised recipe recap between `[RECIPE_RECAP_START]` and `[RECIPE_RECAP_END]`. {_RECAP_RULE}
6.  Use the provided blog category: "{category}". Enclose it between `[CATEGORY_START]` and `[CATEGORY_END]`.
7.  Enclose a valid, revised JSON object formatted for a recipe card plugin between `[RECIPE_JSON_START]` and `[RECIPE_JSON_END]`, following the same Schema.org/Recipe structure and requirements as the initial generation.
8.  **Consistency Mandate**: The lists of ingredients and instructions you generate for the revised article MUST be used identically in the main article body, the recipe recap, and the recipe JSON. There should be absolutely no variation between these sections.
9.  **Nutrition Placement**: Do NOT include a separate '## Nutrition' section or list within the main article body text. The nutrition information should ONLY be presented professionally within the `[RECIPE_RECAP]` block and the `[RECIPE_JSON]` object.

--- IMPROVEMENT FEEDBACK (Incorporate these changes) ---
{feedback}

--- ORIGINAL ARTICLE (To be revised) ---
{original_article}

--- ARTICLE COMPONENTS (for context) ---
- Target Keyword: {components.target_keyword}
- Related Keywords to include naturally: {components.related_keywords}
{_link_instructions(components, "Do NOT place links in the Introduction.")}
- FAQs to answer in the article: {components.faqs}

--- RECIPE Details (for context) ---
{_recipe_details(components)}

Now, produce the complete, rewritten, and superior article and its assets, strictly following all instructions and incorporating all feedback.
"""


async def generate_full_article(gemini: GeminiService, components: ArticleComponents) -> str:
    """Raw delimited article payload; run it through ``parse_article`` before use."""
    return await gemini.generate_text(
        build_article_prompt(components),
        temperature=0.7,
        max_output_tokens=ARTICLE_MAX_TOKENS,
    )


async def regenerate_article(
    gemini: GeminiService,
    components: ArticleComponents,
    original_article: str,
    feedback: str,
) -> str:
    """Whole new payload written from the original article plus feedback. Nothing is patched in place."""
    return await gemini.generate_text(
        build_regeneration_prompt(components, original_article, feedback),
        temperature=0.8,
        max_output_tokens=ARTICLE_MAX_TOKENS,
    )


async def compare_article_with_competitors(
    gemini: GeminiService,
    generated_article: str,
    competitor_analysis: str,
) -> str:
    prompt = f"""
Role: Critical SEO Analyst
Task: Compare the 'Generated Article' against the 'Competitor Analysis'. Provide a concise, critical review in markdown format.

Identify:
- **Strengths:** Where does our article excel compared to the competition? (e.g., better instructions, more comprehensive, better E-E-A-T).
- **Weaknesses:** Where does our article fall short? (e.g., missed topics, less engaging tone).
- **Actionable Improvements:** Suggest 3-5 specific, actionable changes to make our article definitively the best.

--- GENERATED ARTICLE ---
{generated_article}

--- COMPETITOR ANALYSIS ---
{competitor_analysis}
"""
    return await gemini.generate_text(prompt)
