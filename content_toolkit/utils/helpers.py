"""Shared helpers."""
import json
import re
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from content_toolkit.services.errors import FormatError
from content_toolkit.utils.logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

_CODE_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def strip_code_fence(text: str) -> str:
    """Return the contents of a markdown code block if the text is wrapped in one."""
    text = (text or "").strip()
    if "```" in text:
        match = _CODE_FENCE.search(text)
        if match:
            return match.group(1).strip()
    return text


def decode_model_json(raw: str, model: type[M], stage: str) -> M:
    """Parse and validate model output. Logs the raw text and raises FormatError on any failure."""
    try:
        data = json.loads(strip_code_fence(raw))
        return model.model_validate(data)
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.error("model_output_invalid", stage=stage, error=str(e), raw_text=raw)
        raise FormatError(stage) from e
