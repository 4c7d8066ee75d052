"""Render stage errors for the client: billing, format, generic and configuration failures stay distinct."""
from fastapi import HTTPException

from content_toolkit.config import settings
from content_toolkit.services.errors import (
    BillingRequiredError,
    ConfigurationError,
    ContentToolkitError,
    FormatError,
)
from content_toolkit.services.gemini_service import GeminiService
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)


def get_gemini() -> GeminiService:
    """Dependency: a fresh service (and credential lookup) per request."""
    return GeminiService()


def billing_help_url(is_billing_error: bool) -> str | None:
    return settings.billing_help_url if is_billing_error else None


def to_http_exception(err: ContentToolkitError) -> HTTPException:
    if isinstance(err, BillingRequiredError):
        return HTTPException(
            status_code=402,
            detail={
                "message": err.message,
                "is_billing_error": True,
                "billing_help_url": settings.billing_help_url,
            },
        )
    if isinstance(err, FormatError):
        return HTTPException(status_code=502, detail={"message": err.message, "stage": err.stage})
    if isinstance(err, ConfigurationError):
        return HTTPException(status_code=500, detail={"message": err.message, "configuration_error": True})
    return HTTPException(status_code=502, detail={"message": str(err)})


async def run_stage(coro):
    """Await one stage call and translate toolkit errors into HTTP errors."""
    try:
        return await coro
    except ContentToolkitError as e:
        logger.warning("stage_request_failed", error=str(e), kind=type(e).__name__)
        raise to_http_exception(e) from e
