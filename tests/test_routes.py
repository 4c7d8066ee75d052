import json

import pytest
from fastapi.testclient import TestClient

from content_toolkit.main import app
from content_toolkit.models.schemas import RecipeSections
from content_toolkit.routes.errors import get_gemini
from content_toolkit.services import analysis_service, article_service
from content_toolkit.services.errors import BillingRequiredError
from tests.conftest import FakeGemini


@pytest.fixture
def gemini():
    fake = FakeGemini()
    app.dependency_overrides[get_gemini] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client(gemini):
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_analysis_route(client, monkeypatch):
    async def analysis(*args):
        return "analysis"

    async def strategy(*args):
        return "strategy"

    async def sections(*args):
        return RecipeSections(ingredients=["a"], instructions=["b"], nutrition_facts="n", category="Dinner")

    monkeypatch.setattr(analysis_service, "generate_competitor_analysis", analysis)
    monkeypatch.setattr(analysis_service, "generate_outranking_strategy", strategy)
    monkeypatch.setattr(analysis_service, "generate_recipe_sections", sections)
    monkeypatch.setattr("content_toolkit.config.settings.stage_pause_ms", 0)

    resp = client.post("/analysis", json={"keyword": "stew", "competitor_content": "text"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["stage"] == "results"
    assert data["strategy"] == "strategy"
    assert data["recipe_sections"]["category"] == "Dinner"
    assert data["error"] is None


def test_analysis_route_reports_billing(client, monkeypatch):
    async def billing(*args):
        raise BillingRequiredError()

    monkeypatch.setattr(analysis_service, "generate_competitor_analysis", billing)
    data = client.post("/analysis", json={"keyword": "stew", "competitor_content": "text"}).json()
    assert data["stage"] == "error"
    assert data["is_billing_error"] is True
    assert data["billing_help_url"] == "https://ai.google.dev/gemini-api/docs/billing"
    assert data["analysis"] is None


def test_article_route_returns_history_entry(client, monkeypatch):
    async def full_article(gemini, components):
        return "[ARTICLE_START]\n# Stew\n\nBody\n[ARTICLE_END]"

    monkeypatch.setattr(article_service, "generate_full_article", full_article)
    resp = client.post("/articles", json={"targetKeyword": "stew", "category": "Dinner"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["stage"] == "parsed"
    assert data["article"]["title"] == "Stew"
    assert data["history_entry"]["title"] == "Stew"
    assert data["history_entry"]["components"]["targetKeyword"] == "stew"


def test_image_billing_is_402(client, gemini):
    gemini.responses.append(BillingRequiredError())
    resp = client.post("/assets/image", json={"prompt": "stew", "aspect_ratio": "1:1"})
    assert resp.status_code == 402
    detail = resp.json()["detail"]
    assert detail["is_billing_error"] is True
    assert detail["billing_help_url"].startswith("https://ai.google.dev/")


def test_image_rejects_unknown_ratio(client):
    assert client.post("/assets/image", json={"prompt": "stew", "aspect_ratio": "2:1"}).status_code == 422


def test_bad_model_json_is_502(client, gemini):
    gemini.responses.append("not json")
    resp = client.post("/assets/images", json={"keyword": "stew", "ingredients": "beef", "instructions": "simmer"})
    assert resp.status_code == 502
    assert resp.json()["detail"]["stage"] == "image details"


def test_pinterest_keywords(client, gemini):
    gemini.responses.append(json.dumps({"keywords": ["easy stew", "beef stew"]}))
    resp = client.post("/pinterest/keywords", json={"main_keyword": "stew"})
    assert resp.status_code == 200
    assert resp.json() == {"keywords": ["easy stew", "beef stew"]}
    assert "General & Related" in gemini.calls[0].prompt


def test_youtube_script(client, gemini):
    gemini.responses.append("### Scene 1")
    resp = client.post("/assets/youtube", json={"article_title": "Stew", "article_content": "Body"})
    assert resp.json() == {"text": "### Scene 1"}


def test_pins_reject_invalid_inspiration_image(client, gemini):
    resp = client.post(
        "/pinterest/pins",
        json={
            "main_keyword": "stew",
            "related_keywords": "beef stew",
            "inspiration_image": {"base64": "not base64!!", "mimeType": "image/png"},
        },
    )
    assert resp.status_code == 422
    assert gemini.calls == []
