"""Social asset stages: Pinterest pins and keywords, YouTube and Reels scripts."""
from content_toolkit.models.schemas import AllPinterestContent, InspirationImage, PinterestKeywords
from content_toolkit.services.errors import FormatError
from content_toolkit.services.gemini_service import GeminiService, inline_image_part
from content_toolkit.utils.helpers import decode_model_json
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)

PINTEREST_CONTENT_STAGE = "Pinterest content"
PINTEREST_KEYWORDS_STAGE = "Pinterest keywords"
PINTEREST_PINS_STAGE = "Pinterest pins"

PINTEREST_PINS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "pins": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "headline": {"type": "STRING"},
                    "description": {"type": "STRING"},
                    "altText": {"type": "STRING"},
                    "imageGuidance": {"type": "STRING"},
                },
                "required": ["headline", "description", "altText", "imageGuidance"],
            },
        },
    },
    "required": ["pins"],
}

PINTEREST_KEYWORDS_SCHEMA = {
    "type": "OBJECT",
    "properties": {"keywords": {"type": "ARRAY", "items": {"type": "STRING"}}},
    "required": ["keywords"],
}


async def generate_pinterest_content(
    gemini: GeminiService,
    target_keyword: str,
    related_keywords: str,
    article_title: str,
) -> AllPinterestContent:
    """Ten pins for a finished article."""
    prompt = f"""
Role: World-class SEO strategist and Pinterest marketing expert, specializing in food and recipe content.
Task: Based on the provided recipe details, generate a complete set of assets for 10 unique Pinterest pins designed to maximize reach, clicks, and saves.

Recipe Context:
- Main Keyword: {target_keyword}
- Related Keywords: {related_keywords}
- Article Title: {article_title}

CRITICAL INSTRUCTIONS:
1.  Generate assets for exactly 10 unique pins.
2.  For EACH of the 10 pins, provide:
    - headline: A compelling, SEO-friendly headline (under 100 characters). It must be intriguing and use keywords naturally.
    - description: A keyword-rich description (around 300 characters). Optimize it for Pinterest search, include 3-5 relevant and trending hashtags, and end with a clear call to action.
    - altText: A descriptive and engaging alt text for accessibility and SEO.
    - imageGuidance: Unique and specific guidance for creating a realistic and professional Pinterest image for this specific pin. The image MUST be a vertical collage of two enlarged images of the recipe from different poses and angles. In the center of the main image, there MUST be a professional-looking card in a clear, distinctive color, with the recipe's main keyword in a large, attractive font, and a three-word description of the recipe below it in a small, attractive font. The guidance for each pin should suggest different photo compositions, angles, colors, and text to make each pin unique.

Provide the output as a single JSON object containing a "pins" array.
"""
    raw = await gemini.generate_json(prompt, PINTEREST_PINS_SCHEMA)
    return decode_model_json(raw, AllPinterestContent, PINTEREST_CONTENT_STAGE)


async def generate_pinterest_keywords(gemini: GeminiService, main_keyword: str, keyword_style: str) -> list[str]:
    prompt = f"""
Role: Expert SEO and Pinterest Trends Analyst
Task: Analyze the main keyword "{main_keyword}" and generate 10 related keywords for Pinterest titles, tailored to the "{keyword_style}" style.

Keyword Style Guide:
- General & Related: A mix of broad and specific terms.
- Long-tail Questions: Phrase keywords as user search queries (e.g., "how to make...").
- Trending & Viral: Focus on current popular keywords and angles related to the main keyword.
- Niche-Specific: Highly targeted for sub-audiences.

Based on the main keyword and the selected style, provide exactly 10 keywords.
Output a JSON object with a single key "keywords" which is an array of 10 strings.
"""
    raw = await gemini.generate_json(prompt, PINTEREST_KEYWORDS_SCHEMA)
    return decode_model_json(raw, PinterestKeywords, PINTEREST_KEYWORDS_STAGE).keywords


async def generate_pinterest_pins(
    gemini: GeminiService,
    main_keyword: str,
    related_keywords: str,
    inspiration_image: InspirationImage | None = None,
) -> AllPinterestContent:
    """Ten pins from keywords alone; an inspiration image is sent inline when given."""
    inspiration_line = "- An inspiration image has been provided for visual style guidance." if inspiration_image else ""
    prompt = f"""
Role: World-class SEO strategist and Pinterest marketing expert, specializing in food and recipe content.
Task: Based on the provided recipe details, generate a complete set of assets for 10 unique Pinterest pins designed to maximize reach, clicks, and saves.

Recipe Context:
- Main Keyword: {main_keyword}
- Related Keywords to use for headlines and descriptions: {related_keywords}
{inspiration_line}

CRITICAL INSTRUCTIONS:
1.  Generate assets for exactly 10 unique pins.
2.  For EACH of the 10 pins, provide:
    a.  **imageGuidance**: A highly detailed, professional, and descriptive prompt for an AI image generator to create a realistic and compelling Pinterest pin. The prompt must be optimized for generating a photorealistic, high-quality image. The image MUST be a vertical collage of two enlarged images of the recipe from different poses and angles. In the center of the main image, there must be a professional-looking card in a clear, distinctive color that complements the food. This card must display the recipe's main keyword ("{main_keyword}") in a large, attractive font (e.g., modern serif, elegant script), and a three-word description of the recipe below it in a smaller, clean font (e.g., sans-serif). For each of the 10 pins, you must provide unique and specific guidance, varying the following elements:
        - **Photography Style**: e.g., bright and airy, dark and moody, rustic, minimalist.
        - **Lighting**: e.g., soft natural daylight from a side window, warm golden hour light, dramatic backlighting.
        - **Composition**: e.g., rule of thirds, overhead flat lay, 45-degree angle shot, extreme close-up showing texture.
        - **Props & Styling**: e.g., include fresh ingredients, linen napkins, vintage cutlery, wooden boards, etc.
        - **Card Details**: e.g., card color, font styles, and the three-word description.
        - **Technical Details**: e.g., photorealistic, DSLR photo, f/1.8 aperture, high detail.
    b.  **headline**: A compelling, SEO-friendly headline (under 100 characters). It must be intriguing, easy to click, motivate action, and naturally use the provided keywords.
    c.  **description**: A keyword-rich description (approximately 300 characters). Optimize it for Pinterest search, include 3-5 relevant and trending hashtags, and end with a clear call to action.
    d.  **altText**: A descriptive and engaging alt text for accessibility and SEO, describing the visual content of the pin.

Provide the output as a single JSON object containing a "pins" array, where each element is an object with "imageGuidance", "headline", "description", and "altText".
"""
    parts = None
    if inspiration_image:
        parts = [inline_image_part(inspiration_image.base64, inspiration_image.mime_type)]
    raw = await gemini.generate_json(prompt, PINTEREST_PINS_SCHEMA, parts=parts)
    content = decode_model_json(raw, AllPinterestContent, PINTEREST_PINS_STAGE)
    if not content.pins:
        logger.error("pinterest_pins_empty", raw_text=raw)
        raise FormatError(PINTEREST_PINS_STAGE)
    return content


async def generate_youtube_script(gemini: GeminiService, article_title: str, article_content: str) -> str:
    prompt = f"""
Role: Expert Video Director and Scriptwriter for culinary content.
Task: Create a professionally detailed 5-scene video script based on the provided recipe article.

Article Title: "{article_title}"
--- ARTICLE CONTENT ---
{article_content}
--- END ARTICLE CONTENT ---

**CRITICAL INSTRUCTIONS:**
1.  **Structure:** The script must consist of **EXACTLY 5 SCENES**.
2.  **Recipe Logic:** Map the recipe's creation process logically into these 5 scenes (e.g., Intro, Prep, Cook, Plate, Outro).
3.  **Visual Detail:** The "Video Guide" for each scene must be **professionally detailed**. Include specific camera angles (e.g., Top-down, 45-degree, Extreme Close-up), lighting notes, and precise descriptions of the action (e.g., "Slow-motion drizzle of glaze," "Crisp sound of chopping").
4.  **Formatting:** Use the following format for each scene:
    ### Scene X: [Descriptive Title]
    **Visual Guide:** [Detailed camera instructions and action description]
    **Audio/Narration:** [The script to be spoken]
    **Duration:** [Approximate duration]
5.  **Tone:** Enthusiastic, clear, and appetizing.

Now, write the complete 5-scene script.
"""
    return await gemini.generate_text(prompt, temperature=0.7, max_output_tokens=4096)


async def generate_reels_script(gemini: GeminiService, article_title: str, ingredients: str, instructions: str) -> str:
    prompt = f"""
Role: Expert Social Media Content Creator specializing in food.
Task: Create a viral, high-energy 90-second (1.5 minute) vertical video script (for Instagram Reels, TikTok, YouTube Shorts) for the recipe: "{article_title}".

Recipe Context:
Ingredients: {ingredients}
Instructions: {instructions}

**Script Requirements:**
1. **Format:** Vertical Video (9:16).
2. **Total Duration:** Strictly 90 seconds (1:30).
3. **Pacing:** Fast, rhythmic, and visually stimulating (ASMR style elements).
4. **Structure:**
   - **0:00-0:05 Hook:** A "thumb-stopping" visual of the finished dish + a hook line.
   - **0:05-0:15 Intro:** Quick ingredients overview.
   - **0:15-1:15 The Process:** The step-by-step cooking process condensed into visual highlights. Focus on action verbs (Sizzle, Pour, Chop, Mix).
   - **1:15-1:30 Plating & Taste:** Final garnish, the "money shot" (cheese pull, steam, bite), and a call to action.
5. **Output Format:**
   Please use the following Markdown format:

   ### Title: [Catchy Social Title]

   | Time | Visual Scene | Audio / Text Overlay |
   | :--- | :--- | :--- |
   | 0:00 | [Description] | [Audio/Text] |
   ...
"""
    return await gemini.generate_text(prompt, temperature=0.8, max_output_tokens=4096)
