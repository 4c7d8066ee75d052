from types import SimpleNamespace

import pytest

from content_toolkit.services.errors import QUOTA_FAILURE_TYPE


class FakeGemini:
    """Stand-in for GeminiService: replays scripted responses and records every prompt."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def _next(self, kind, prompt, **kwargs):
        self.calls.append(SimpleNamespace(kind=kind, prompt=prompt, **kwargs))
        if not self.responses:
            raise AssertionError(f"unexpected {kind} call")
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def generate_text(self, prompt, *, temperature=None, max_output_tokens=None):
        return self._next("text", prompt, temperature=temperature, max_output_tokens=max_output_tokens)

    async def generate_json(self, prompt, schema, *, parts=None):
        return self._next("json", prompt, schema=schema, parts=parts)

    async def generate_image(self, prompt, aspect_ratio):
        return self._next("image", prompt, aspect_ratio=aspect_ratio)


class UpstreamFailure(Exception):
    """Mimics google.genai.errors.APIError: the decoded response body sits on ``details``."""

    def __init__(self, details):
        super().__init__(str(details))
        self.details = details


def zero_quota_payload():
    return {
        "error": {
            "code": 429,
            "status": "RESOURCE_EXHAUSTED",
            "message": (
                "Quota exceeded for metric: generativelanguage.googleapis.com/"
                "generate_content_free_tier_requests, limit: 0"
            ),
            "details": [
                {
                    "@type": QUOTA_FAILURE_TYPE,
                    "violations": [
                        {"quotaMetric": "generativelanguage.googleapis.com/generate_content_free_tier_requests"}
                    ],
                }
            ],
        }
    }


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def billing_failure():
    return UpstreamFailure(zero_quota_payload())
