import asyncio
import json

import pytest

from content_toolkit.services import analysis_service
from content_toolkit.services.errors import FormatError
from tests.conftest import FakeGemini


def sections_json(category):
    return json.dumps(
        {
            "ingredients": ["3 ripe bananas", "2 cups flour"],
            "instructions": ["Mash bananas", "Bake 60 minutes"],
            "nutritionFacts": "Calories: 250",
            "category": category,
        }
    )


def test_recipe_sections_accepts_listed_category():
    gemini = FakeGemini(sections_json("Breakfast"))
    sections = asyncio.run(analysis_service.generate_recipe_sections(gemini, "analysis"))
    assert sections.category == "Breakfast"
    assert sections.nutrition_facts == "Calories: 250"
    assert gemini.calls[0].schema["properties"]["category"]["enum"] == ["Breakfast", "Lunch", "Dinner", "Snacks", "Salad"]


def test_recipe_sections_rejects_category_outside_list():
    gemini = FakeGemini(sections_json("Brunch"))
    with pytest.raises(FormatError) as exc:
        asyncio.run(analysis_service.generate_recipe_sections(gemini, "analysis"))
    assert exc.value.stage == "recipe sections"


def test_french_context_uses_french_categories():
    gemini = FakeGemini(sections_json("Batch Cooking"))
    sections = asyncio.run(analysis_service.generate_recipe_sections(gemini, "analyse", "France", "French"))
    assert sections.category == "Batch Cooking"

    gemini = FakeGemini(sections_json("Dinner"))
    with pytest.raises(FormatError):
        asyncio.run(analysis_service.generate_recipe_sections(gemini, "analyse", "France", "French"))


def test_invalid_json_is_format_error():
    gemini = FakeGemini("Sure! Here are the sections: ingredients...")
    with pytest.raises(FormatError) as exc:
        asyncio.run(analysis_service.generate_recipe_sections(gemini, "analysis"))
    assert str(exc.value) == "Error generating recipe sections: Invalid JSON format received."


def test_fenced_json_is_accepted():
    gemini = FakeGemini(f"```json\n{sections_json('Dinner')}\n```")
    assert asyncio.run(analysis_service.generate_recipe_sections(gemini, "analysis")).category == "Dinner"


def test_strategy_prompt_embeds_analysis():
    gemini = FakeGemini("## Strategy")
    assert asyncio.run(analysis_service.generate_outranking_strategy(gemini, "COMPETITOR-ANALYSIS-TEXT")) == "## Strategy"
    assert "COMPETITOR-ANALYSIS-TEXT" in gemini.calls[0].prompt
