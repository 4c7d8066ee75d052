"""Gemini API transport: text, schema-constrained JSON and image generation, all behind the retry wrapper."""
import asyncio
import base64
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Literal, Optional

from content_toolkit.config import settings
from content_toolkit.services.credentials import CredentialProvider
from content_toolkit.services.errors import (
    BillingRequiredError,
    ConfigurationError,
    ContentToolkitError,
    GenerationFailedError,
)
from content_toolkit.services.retry import retry_request
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)

AspectRatio = Literal["1:1", "16:9", "9:16", "4:3", "3:4"]
ASPECT_RATIOS: tuple[str, ...] = ("1:1", "16:9", "9:16", "4:3", "3:4")


@dataclass(frozen=True)
class StageRequest:
    """One model call: prompt, target model and the expected response shape."""

    prompt: str
    model: str
    response_format: Literal["text", "json"] = "text"
    schema: Optional[dict[str, Any]] = None


def _default_client_factory(api_key: str) -> Any:
    from google import genai

    return genai.Client(api_key=api_key)


class GeminiService:
    """
    Holds the credential and model configuration for one workflow run.
    Build one per workflow invocation (or inject one); the genai client is created
    on the first request and reused by every later stage of the same run.
    """

    def __init__(
        self,
        credentials: CredentialProvider | None = None,
        *,
        text_model: str | None = None,
        vision_model: str | None = None,
        image_model: str | None = None,
        retries: int | None = None,
        delay_ms: int | None = None,
        client_factory: Callable[[str], Any] = _default_client_factory,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.credentials = credentials or CredentialProvider()
        self.text_model = text_model or settings.gemini_text_model
        self.vision_model = vision_model or settings.gemini_vision_model
        self.image_model = image_model or settings.gemini_image_model
        self.retries = retries if retries is not None else settings.retry_attempts
        self.delay_ms = delay_ms if delay_ms is not None else settings.retry_base_delay_ms
        self._client_factory = client_factory
        self._sleep = sleep
        self._client: Any = None

    async def _get_client(self) -> Any:
        """Return the genai client; raises ConfigurationError before any retry when no key exists."""
        if self._client is None:
            api_key = await self.credentials.get_api_key()
            self._client = self._client_factory(api_key)
        return self._client

    async def _send(self, request: StageRequest, call: Callable[[Any], Awaitable[Any]]) -> Any:
        logger.debug(
            "gemini_request",
            model=request.model,
            response_format=request.response_format,
            prompt_chars=len(request.prompt),
        )
        client = await self._get_client()
        return await retry_request(
            lambda: call(client),
            retries=self.retries,
            delay_ms=self.delay_ms,
            sleep=self._sleep,
        )

    async def generate_text(
        self,
        prompt: str,
        *,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        """Free-text request. Returns the response text unmodified (empty string if none)."""
        from google.genai import types

        request = StageRequest(prompt=prompt, model=self.text_model)
        config = None
        if temperature is not None or max_output_tokens is not None:
            config = types.GenerateContentConfig(temperature=temperature, max_output_tokens=max_output_tokens)

        async def call(client: Any) -> Any:
            return await client.aio.models.generate_content(model=request.model, contents=prompt, config=config)

        response = await self._send(request, call)
        return response.text or ""

    async def generate_json(
        self,
        prompt: str,
        schema: dict[str, Any],
        *,
        parts: list[Any] | None = None,
    ) -> str:
        """
        Schema-constrained request. Returns raw JSON text; decoding belongs to the stage.
        ``parts`` are extra content parts (e.g. inline image bytes) sent after the prompt.
        """
        from google.genai import types

        model = self.vision_model if parts else self.text_model
        request = StageRequest(prompt=prompt, model=model, response_format="json", schema=schema)
        contents: Any = [types.Part.from_text(text=prompt), *parts] if parts else prompt
        config = types.GenerateContentConfig(response_mime_type="application/json", response_schema=schema)

        async def call(client: Any) -> Any:
            return await client.aio.models.generate_content(model=request.model, contents=contents, config=config)

        response = await self._send(request, call)
        return response.text or ""

    async def generate_image(self, prompt: str, aspect_ratio: AspectRatio) -> str:
        """Generate one JPEG and return it as a data URL."""
        from google.genai import types

        if aspect_ratio not in ASPECT_RATIOS:
            raise ValueError(f"Unsupported aspect ratio: {aspect_ratio}")
        request = StageRequest(prompt=prompt, model=self.image_model)
        config = types.GenerateImagesConfig(
            number_of_images=1,
            aspect_ratio=aspect_ratio,
            output_mime_type="image/jpeg",
        )

        async def call(client: Any) -> Any:
            return await client.aio.models.generate_images(model=request.model, prompt=prompt, config=config)

        try:
            response = await self._send(request, call)
            generated = getattr(response, "generated_images", None) or []
            image = getattr(generated[0], "image", None) if generated else None
            raw = getattr(image, "image_bytes", None) if image is not None else None
            if not raw:
                raise GenerationFailedError("No image data returned from API")
        except (BillingRequiredError, ConfigurationError):
            raise
        except ContentToolkitError as e:
            logger.error("image_generation_failed", model=request.model, error=str(e))
            raise GenerationFailedError(f"Image generation failed: {e}") from e
        encoded = base64.b64encode(raw).decode("ascii") if isinstance(raw, bytes) else str(raw)
        return f"data:image/jpeg;base64,{encoded}"


def inline_image_part(base64_data: str, mime_type: str) -> Any:
    """Build an inline-bytes content part from a base64 payload."""
    from google.genai import types

    return types.Part.from_bytes(data=base64.b64decode(base64_data), mime_type=mime_type)
