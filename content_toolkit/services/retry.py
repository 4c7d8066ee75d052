"""Retry wrapper around a single model request, with billing reclassification."""
import asyncio
from typing import Any, Awaitable, Callable, TypeVar

from content_toolkit.services.errors import (
    BillingRequiredError,
    ConfigurationError,
    ErrorKind,
    GenerationFailedError,
    classify_raw_error,
    decode_upstream_error,
)
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def backoff_delay_ms(attempt: int, delay_ms: int) -> int:
    """Wait after failed attempt ``attempt`` (0-indexed)."""
    return delay_ms * (2 ** attempt)


async def retry_request(
    operation: Callable[[], Awaitable[T]],
    retries: int = 3,
    delay_ms: int = 2000,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> T:
    """
    Run ``operation`` up to ``retries`` times with exponential backoff.
    Zero-quota failures raise BillingRequiredError on the spot; anything else
    becomes GenerationFailedError once the attempts run out.
    """
    last_error: BaseException | None = None
    for attempt in range(retries):
        try:
            return await operation()
        except ConfigurationError:
            raise
        except Exception as e:
            last_error = e
            logger.warning(
                "gemini_request_failed",
                attempt=attempt + 1,
                retries=retries,
                error=str(e),
            )
            if classify_raw_error(e) is ErrorKind.BILLING_REQUIRED:
                raise BillingRequiredError() from e
            if attempt < retries - 1:
                await sleep(backoff_delay_ms(attempt, delay_ms) / 1000)

    message = decode_upstream_error(last_error).message if last_error is not None else "no attempts were made"
    raise GenerationFailedError(
        f"Failed to call the Gemini API after {retries} attempts. Please try again. Last error: {message}",
        attempts=retries,
    ) from last_error
