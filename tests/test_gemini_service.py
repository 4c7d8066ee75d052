import asyncio
from types import SimpleNamespace

import pytest

from content_toolkit.services.credentials import CredentialProvider
from content_toolkit.services.errors import BillingRequiredError, ConfigurationError, GenerationFailedError
from content_toolkit.services.gemini_service import GeminiService


class FakeModels:
    def __init__(self, *results):
        self.results = list(results)
        self.content_calls = []
        self.image_calls = []

    def _pop(self):
        item = self.results.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def generate_content(self, *, model, contents, config=None):
        self.content_calls.append(SimpleNamespace(model=model, contents=contents, config=config))
        return self._pop()

    async def generate_images(self, *, model, prompt, config=None):
        self.image_calls.append(SimpleNamespace(model=model, prompt=prompt, config=config))
        return self._pop()


class Sleeps:
    def __init__(self):
        self.sleeps = []

    async def __call__(self, seconds):
        self.sleeps.append(seconds)


def service(models, api_key="test-key", **kwargs):
    created = []

    def factory(key):
        created.append(key)
        return SimpleNamespace(aio=SimpleNamespace(models=models))

    svc = GeminiService(
        CredentialProvider(api_key=api_key, key_endpoint_url=""),
        text_model="text-model",
        vision_model="vision-model",
        image_model="image-model",
        retries=3,
        delay_ms=2000,
        client_factory=factory,
        sleep=kwargs.pop("sleep", Sleeps()),
        **kwargs,
    )
    return svc, created


def test_generate_text_returns_response_text():
    models = FakeModels(SimpleNamespace(text="Hello"))
    svc, created = service(models)
    assert asyncio.run(svc.generate_text("Say hello", temperature=0.7, max_output_tokens=100)) == "Hello"
    assert created == ["test-key"]
    assert models.content_calls[0].model == "text-model"
    assert models.content_calls[0].contents == "Say hello"
    assert models.content_calls[0].config.temperature == 0.7


def test_client_is_reused_across_stages():
    models = FakeModels(SimpleNamespace(text="a"), SimpleNamespace(text="b"))
    svc, created = service(models)

    async def run():
        return await svc.generate_text("one"), await svc.generate_text("two")

    assert asyncio.run(run()) == ("a", "b")
    assert created == ["test-key"]


def test_missing_key_fails_before_any_request():
    models = FakeModels()
    sleeps = Sleeps()
    svc, created = service(models, api_key="", sleep=sleeps)
    with pytest.raises(ConfigurationError):
        asyncio.run(svc.generate_text("anything"))
    assert created == []
    assert models.content_calls == []
    assert sleeps.sleeps == []


def test_transient_failures_are_retried():
    models = FakeModels(RuntimeError("503"), SimpleNamespace(text="ok"))
    sleeps = Sleeps()
    svc, _ = service(models, sleep=sleeps)
    assert asyncio.run(svc.generate_text("retry me")) == "ok"
    assert len(models.content_calls) == 2
    assert sleeps.sleeps == [2.0]


def test_billing_failure_is_not_retried(billing_failure):
    models = FakeModels(billing_failure, SimpleNamespace(text="never"))
    svc, _ = service(models)
    with pytest.raises(BillingRequiredError):
        asyncio.run(svc.generate_text("quota"))
    assert len(models.content_calls) == 1


def test_generate_json_uses_vision_model_with_parts():
    models = FakeModels(SimpleNamespace(text='{"keywords": []}'))
    svc, _ = service(models)
    schema = {"type": "OBJECT", "properties": {"keywords": {"type": "ARRAY", "items": {"type": "STRING"}}}}
    raw = asyncio.run(svc.generate_json("pins", schema, parts=["image-part"]))
    assert raw == '{"keywords": []}'
    call = models.content_calls[0]
    assert call.model == "vision-model"
    assert call.contents[-1] == "image-part"
    assert call.config.response_mime_type == "application/json"


def test_generate_image_returns_data_url():
    image = SimpleNamespace(image=SimpleNamespace(image_bytes=b"abc"))
    models = FakeModels(SimpleNamespace(generated_images=[image]))
    svc, _ = service(models)
    assert asyncio.run(svc.generate_image("a pie", "16:9")) == "data:image/jpeg;base64,YWJj"
    assert models.image_calls[0].model == "image-model"


def test_generate_image_without_bytes_fails():
    models = FakeModels(SimpleNamespace(generated_images=[]))
    svc, _ = service(models)
    with pytest.raises(GenerationFailedError):
        asyncio.run(svc.generate_image("a pie", "1:1"))


def test_generate_image_rejects_unknown_ratio():
    svc, _ = service(FakeModels())
    with pytest.raises(ValueError):
        asyncio.run(svc.generate_image("a pie", "2:1"))
