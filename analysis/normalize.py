"""
Turn a raw completion into an AnalysisResult.

Models sometimes wrap their JSON in a fenced block (```json ... ```) even
when told not to, so fences are removed before parsing. Missing list fields
and notes take their defaults; wrong types are rejected.
"""

import json
import logging
import re

from pydantic import ValidationError

from exceptions import MalformedResponseError
from schemas import AnalysisResult

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", text or "").strip()


def parse_analysis(text: str) -> AnalysisResult:
    cleaned = strip_code_fences(text)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Completion is not valid JSON: {e}")
        raise MalformedResponseError(f"Model response was not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedResponseError(
            f"Model response must be a JSON object, got {type(parsed).__name__}"
        )

    try:
        result = AnalysisResult.model_validate(parsed)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        logger.warning(f"Completion failed validation on: {fields}")
        raise MalformedResponseError(f"Model response has invalid fields: {fields}") from e

    if not 0 <= result.matchScore <= 100:
        # passed through as-is; callers see the model's own number
        logger.warning(f"matchScore {result.matchScore} is outside 0-100")
    return result
