"""
Turn a vision-model completion into a ``ParsedProfile``.
"""
import json
import re
from typing import Any, Optional

from pydantic import ValidationError

from ...exceptions import ExtractionParseFailure
from ...models import ParsedProfile

_FENCED_JSON = re.compile(r"```(?:json)?\s*\n?([\s\S]*?)\n?```")


def _load_json(text: str) -> Optional[Any]:
    # Raw JSON first, then a fenced code block, then the outermost braces.
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = _FENCED_JSON.search(text)
    if match:
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError:
            pass

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        try:
            return json.loads(text[start : end + 1])
        except json.JSONDecodeError:
            pass
    return None


def parse_profile_completion(text: Optional[str]) -> ParsedProfile:
    """
    Parse the model's answer for one screenshot.

    Args:
        text: Raw completion text

    Returns:
        ParsedProfile: Fields the model reported

    Raises:
        ExtractionParseFailure: If the text holds no JSON object or the object
            does not match the requested schema
    """
    if not text or not text.strip():
        raise ExtractionParseFailure("Empty completion")

    data = _load_json(text.strip())
    if not isinstance(data, dict):
        raise ExtractionParseFailure("Completion is not a JSON object")

    try:
        return ParsedProfile.model_validate(data)
    except ValidationError as e:
        raise ExtractionParseFailure(f"Completion does not match the profile schema: {e}") from e
