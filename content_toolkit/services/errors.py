"""Error kinds raised by stage functions, and the decoder for upstream API failures.

Every stage either returns a typed value or raises one of:

- ``BillingRequiredError``: the key has a zero free-tier quota; retrying cannot help.
- ``FormatError``: a JSON-constrained response failed to decode or validate.
- ``GenerationFailedError``: any other request failure, after the retry cap.
- ``ConfigurationError``: no credential is available at all.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

QUOTA_FAILURE_TYPE = "type.googleapis.com/google.rpc.QuotaFailure"
FREE_TIER_METRICS = ("_free_tier_requests", "_free_tier_input_token_count")
ZERO_LIMIT_MARKERS = ("limit: 0", "Quota exceeded for metric")

BILLING_REQUIRED_MESSAGE = (
    "Your free tier quota for this operation is 0. "
    "Please select an API key linked to a billed account."
)


class ContentToolkitError(Exception):
    """Base class for errors surfaced to the HTTP boundary."""


class BillingRequiredError(ContentToolkitError):
    is_billing_error = True

    def __init__(self, message: str = BILLING_REQUIRED_MESSAGE):
        super().__init__(message)
        self.message = message


class GenerationFailedError(ContentToolkitError):
    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.message = message
        self.attempts = attempts


class FormatError(ContentToolkitError):
    """Model output for ``stage`` could not be decoded. Raw text is logged, never attached."""

    def __init__(self, stage: str):
        self.stage = stage
        self.message = f"Error generating {stage}: Invalid JSON format received."
        super().__init__(self.message)


class ConfigurationError(ContentToolkitError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ErrorKind(str, Enum):
    BILLING_REQUIRED = "billing_required"
    TRANSIENT = "transient"


@dataclass(frozen=True)
class UpstreamError:
    """Normalized view of a failed model request."""

    message: str
    status: str | None = None
    code: int | None = None
    details: list[dict[str, Any]] = field(default_factory=list)


def _from_mapping(payload: Mapping[str, Any], fallback_message: str = "") -> UpstreamError:
    # API errors are usually wrapped as {"error": {...}}
    inner = payload.get("error")
    if isinstance(inner, Mapping):
        payload = inner
    details = payload.get("details")
    code = payload.get("code")
    return UpstreamError(
        message=str(payload.get("message") or fallback_message),
        status=payload.get("status"),
        code=code if isinstance(code, int) else None,
        details=[d for d in details if isinstance(d, Mapping)] if isinstance(details, list) else [],
    )


def decode_upstream_error(raw: Any) -> UpstreamError:
    """Decode one of the known failure shapes into an ``UpstreamError``.

    Accepted shapes: a mapping with a nested ``error`` mapping, a flat mapping
    with ``status``/``message``/``details``, an exception whose ``details``
    attribute holds either mapping (``google.genai.errors.APIError``), or any
    other exception, which keeps only its message.
    """
    if isinstance(raw, Mapping):
        return _from_mapping(raw)
    if isinstance(raw, BaseException):
        details = getattr(raw, "details", None)
        if isinstance(details, Mapping):
            decoded = _from_mapping(details, fallback_message=str(raw))
            if decoded.status is None and getattr(raw, "status", None):
                decoded = UpstreamError(
                    message=getattr(raw, "message", None) or decoded.message,
                    status=raw.status,
                    code=decoded.code,
                    details=decoded.details,
                )
            return decoded
        return UpstreamError(message=str(raw) or type(raw).__name__)
    return UpstreamError(message=str(raw))


def _is_free_tier_violation(violation: Any) -> bool:
    metric = violation.get("quotaMetric") if isinstance(violation, Mapping) else None
    return isinstance(metric, str) and any(m in metric for m in FREE_TIER_METRICS)


def is_zero_quota(error: UpstreamError) -> bool:
    if error.status != "RESOURCE_EXHAUSTED":
        return False
    if not any(marker in error.message for marker in ZERO_LIMIT_MARKERS):
        return False
    for detail in error.details:
        if detail.get("@type") != QUOTA_FAILURE_TYPE:
            continue
        violations = detail.get("violations")
        if isinstance(violations, list) and any(_is_free_tier_violation(v) for v in violations):
            return True
    return False


def classify_raw_error(raw: Any) -> ErrorKind:
    """Pure classification of a raw upstream failure."""
    if is_zero_quota(decode_upstream_error(raw)):
        return ErrorKind.BILLING_REQUIRED
    return ErrorKind.TRANSIENT
