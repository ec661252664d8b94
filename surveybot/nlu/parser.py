import json
import logging
from typing import Any, Dict, Mapping, Optional

from surveybot.nlu.schemas import FieldRecord
from surveybot.nlu.validators import validate_extracted_data

logger = logging.getLogger(__name__)


def _message_content(response: Mapping[str, Any]) -> Optional[str]:
    """Return choices[0].message.content, or None if any level is missing."""
    choices = response.get("choices") if isinstance(response, Mapping) else None
    if not choices:
        return None

    first = choices[0]
    if not isinstance(first, Mapping):
        return None

    message = first.get("message")
    if not isinstance(message, Mapping):
        return None

    content = message.get("content")
    return content if isinstance(content, str) else None


def extract_json_block(text: str) -> Optional[str]:
    """
    Take everything from the first '{' to the last '}'.

    The model sometimes wraps the object in prose, so the reply is scanned
    rather than parsed whole. Braces inside string values are not special.
    """
    if not text:
        return None

    start = text.find("{")
    end = text.rfind("}")

    if start == -1 or end == -1 or start > end:
        return None

    return text[start : end + 1]


def _safe_json_parse(block: str) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(block)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse JSON from LLM output: %s (%s)", block, e)
        return None

    if not isinstance(data, dict):
        logger.warning("LLM output is not a JSON object: %s", block)
        return None

    return data


def parse_ai_response(response: Mapping[str, Any]) -> Optional[FieldRecord]:
    content = _message_content(response)
    if content is None:
        logger.info("Completion response has no message content")
        return None

    block = extract_json_block(content)
    if block is None:
        logger.warning("No JSON object found in LLM output: %s", content)
        return None

    data = _safe_json_parse(block)
    if data is None:
        return None

    record = validate_extracted_data(data)
    if record is None:
        logger.warning("LLM output is missing required fields: %s", data)
    return record
