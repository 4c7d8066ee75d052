"""Image stages: prompts + SEO metadata for every article image, and the image itself."""
from content_toolkit.models.schemas import AllImageDetails
from content_toolkit.services.gemini_service import AspectRatio, GeminiService
from content_toolkit.utils.helpers import decode_model_json

IMAGE_DETAILS_STAGE = "image details"

_IMAGE_DETAILS_ITEM = {
    "type": "OBJECT",
    "properties": {
        "prompt": {"type": "STRING"},
        "title": {"type": "STRING"},
        "altText": {"type": "STRING"},
        "caption": {"type": "STRING"},
        "description": {"type": "STRING"},
    },
    "required": ["prompt", "title", "altText", "caption", "description"],
}

IMAGE_DETAILS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "featuredImage": _IMAGE_DETAILS_ITEM,
        "ingredientsImage": _IMAGE_DETAILS_ITEM,
        "stepImages": {"type": "ARRAY", "items": _IMAGE_DETAILS_ITEM},
    },
    "required": ["featuredImage", "ingredientsImage", "stepImages"],
}


async def generate_image_prompts_and_metadata(
    gemini: GeminiService,
    target_keyword: str,
    ingredients: str,
    instructions: str,
) -> AllImageDetails:
    """Featured (16:9), ingredients (3:4) and one 3:4 image per key step."""
    prompt = f"""
Role: Master Art Director & SEO Specialist for a professional food blog.
Task: For a recipe about "{target_keyword}", create all necessary image prompts and SEO metadata. Generate highly professional, precise, distinctive, and descriptive prompts designed to produce realistic, high-quality, and appealing images that would attract visitors. The style should be bright, appetizing, and professionally styled for a modern food blog.

Provide a JSON object with the following structure:
- featuredImage: An object for the main hero image (16:9 aspect ratio, high-resolution).
- ingredientsImage: An object for a flat-lay or thoughtfully arranged shot of the ingredients (3:4 aspect ratio, clean, inviting).
- stepImages: An array of objects, one for each key step in the recipe instructions (3:4 aspect ratio, clear, action-oriented visuals).

Each object must contain:
- prompt: A highly detailed, descriptive prompt for an image generation AI. Include specific details on lighting (e.g., natural daylight), composition (e.g., rule of thirds, leading lines), camera angle (e.g., overhead, close-up), depth of field (e.g., shallow), and overall aesthetic/style (e.g., rustic, minimalist, vibrant). Emphasize realism and appetizing presentation.
- title: A descriptive, SEO-friendly title for the image file (e.g., "Perfectly Baked Chocolate Chip Cookies Featured Image").
- altText: A concise, descriptive alt text for accessibility and SEO, describing the visual content accurately (e.g., "Close-up of golden brown chocolate chip cookies on a cooling rack").
- caption: An engaging caption for the blog post that complements the image (e.g., "The ultimate homemade chocolate chip cookies, fresh from the oven!").
- description: A longer, keyword-rich description for Pinterest or image sharing sites, highlighting key features and appeal.

--- RECIPE CONTEXT ---
Main Recipe: {target_keyword}
Ingredients: {ingredients}
Key Instructions to Visualize (focus on distinct actions or appealing outcomes for each step): {instructions}
"""
    raw = await gemini.generate_json(prompt, IMAGE_DETAILS_SCHEMA)
    return decode_model_json(raw, AllImageDetails, IMAGE_DETAILS_STAGE)


async def generate_image(gemini: GeminiService, prompt: str, aspect_ratio: AspectRatio) -> str:
    """JPEG data URL for ``prompt``."""
    return await gemini.generate_image(prompt, aspect_ratio)
