"""
Extraction of recommendation records from free-form model output.
"""

import json
import logging
import re

import pydantic

from .exceptions import FormatError
from .models import Recommendation

logger = logging.getLogger("tera-raid-advisor")

# Greedy: from the first "[" to the last "]", across newlines
_ARRAY_PATTERN = re.compile(r"\[.*\]", re.DOTALL)


def extract_json_array(raw_text: str) -> str:
    """Return the first bracket-delimited substring of ``raw_text``.

    Raises:
        FormatError: If the text holds no ``[...]`` span
    """
    match = _ARRAY_PATTERN.search(raw_text or "")
    if not match:
        raise FormatError("No JSON array found in model response", raw_text=raw_text or "")
    return match.group(0)


def parse_recommendations(raw_text: str) -> list[Recommendation]:
    """Parse the model's reply into recommendations, keeping their order.

    Any number of entries is accepted, and so is any number of moves or plan
    steps per entry. Each entry must still carry all five fields with the
    right shapes.

    Args:
        raw_text: Complete text returned by the model

    Returns:
        Recommendations in the order the model emitted them

    Raises:
        FormatError: If no array can be extracted or it does not parse
    """
    snippet = extract_json_array(raw_text)

    try:
        data = json.loads(snippet)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse model response as JSON: {e}")
        raise FormatError(f"Invalid JSON in model response: {e}", raw_text=raw_text) from e

    try:
        return [Recommendation.model_validate(item) for item in data]
    except pydantic.ValidationError as e:
        logger.error(f"Model response has an unexpected structure: {e}")
        raise FormatError(f"Unexpected recommendation structure: {e}", raw_text=raw_text) from e
