from typing import Any
import json
import logging
import re

from prepwise.core.exceptions import ExtractionError

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r'^```json\s*', re.IGNORECASE)
_TRAILING_FENCE = re.compile(r'```$')

INVALID_JSON_MESSAGE = "Model did not return valid JSON"


def clean_llm_json_output(raw_text: str) -> str:
    """Strip a leading ```json fence and a trailing ``` fence from model output."""
    text = raw_text.strip()
    text = _LEADING_FENCE.sub('', text, count=1)
    text = _TRAILING_FENCE.sub('', text, count=1)
    return text.strip()


def extract_json(raw_text: str) -> Any:
    """
    Parse the JSON value a model was asked to return.

    Only the common code-fence wrapping is tolerated; there is no other
    repair. Raises ExtractionError carrying the untouched ``raw_text``.
    """
    cleaned = clean_llm_json_output(raw_text or "")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON from model ({e}): {(raw_text or '')[:500]}")
        raise ExtractionError(INVALID_JSON_MESSAGE, raw=raw_text) from e


def extract_json_array(raw_text: str) -> list:
    """Like extract_json, but the value must be a JSON array."""
    value = extract_json(raw_text)
    if not isinstance(value, list):
        logger.error(f"Model returned {type(value).__name__} instead of an array")
        raise ExtractionError(INVALID_JSON_MESSAGE, raw=raw_text)
    return value


def extract_json_object(raw_text: str) -> dict:
    """Like extract_json, but the value must be a JSON object."""
    value = extract_json(raw_text)
    if not isinstance(value, dict):
        logger.error(f"Model returned {type(value).__name__} instead of an object")
        raise ExtractionError(INVALID_JSON_MESSAGE, raw=raw_text)
    return value
