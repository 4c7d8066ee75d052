import asyncio

from content_toolkit.services import components_service
from tests.conftest import FakeGemini

LIVE = {1, 2, 4, 5, 7, 9}


def link_lines(count=10):
    return "\n".join(f"Anchor {i}: https://www.healthline.com/nutrition/topic-{i}" for i in range(count))


class ScriptedVerifier:
    def __init__(self, live):
        self.live = live
        self.probed = []

    async def __call__(self, url):
        self.probed.append(url)
        return int(url.rsplit("-", 1)[1]) in self.live


def test_keeps_first_four_verified_links_in_order():
    verifier = ScriptedVerifier(LIVE)
    gemini = FakeGemini(link_lines())
    result = asyncio.run(
        components_service.generate_external_links(gemini, "oatmeal", "analysis", verifier=verifier)
    )
    assert result.split("\n") == [
        "Anchor 1: https://www.healthline.com/nutrition/topic-1",
        "Anchor 2: https://www.healthline.com/nutrition/topic-2",
        "Anchor 4: https://www.healthline.com/nutrition/topic-4",
        "Anchor 5: https://www.healthline.com/nutrition/topic-5",
    ]
    # probing stops once the cap is reached
    assert len(verifier.probed) == 6


def test_lines_without_url_are_skipped():
    verifier = ScriptedVerifier({0})
    text = "Intro line without link\n\nAnchor 0: https://www.healthline.com/nutrition/topic-0"
    gemini = FakeGemini(text)
    result = asyncio.run(components_service.generate_external_links(gemini, "oatmeal", "analysis", verifier=verifier))
    assert result == "Anchor 0: https://www.healthline.com/nutrition/topic-0"
    assert len(verifier.probed) == 1


def test_nothing_verified_falls_back_to_raw_text():
    raw = link_lines(3)
    gemini = FakeGemini(raw)
    result = asyncio.run(
        components_service.generate_external_links(gemini, "oatmeal", "analysis", verifier=ScriptedVerifier(set()))
    )
    assert result == raw


def test_external_link_prompt_uses_french_sites():
    gemini = FakeGemini("")
    asyncio.run(
        components_service.generate_external_links(
            gemini, "ratatouille", "analysis", "France", "French", verifier=ScriptedVerifier(set())
        )
    )
    assert "mangerbouger.fr" in gemini.calls[0].prompt
    assert "healthline.com" not in gemini.calls[0].prompt


def test_faqs_prompt_carries_language():
    gemini = FakeGemini("Q1\nQ2")
    assert asyncio.run(components_service.generate_faqs(gemini, "analysis", "French")) == "Q1\nQ2"
    assert "written in French" in gemini.calls[0].prompt
