"""
Response Parser - pulls the routine JSON object out of free-form LLM text.
"""

import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from skincare_recommendation_system.models import RoutineRecommendation, RoutineStep

logger = logging.getLogger("ResponseParser")


class RecommendationParseError(ValueError):
    """LLM output could not be turned into a RoutineRecommendation."""


def extract_json_object(text: str) -> Optional[str]:
    """
    Return the first top-level brace-balanced span in text.

    Braces inside JSON string literals are ignored. Returns None when no
    balanced object is found.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]

    return None


def _fill_missing_steps(data: Dict[str, Any]) -> Dict[str, Any]:
    routine = data.get("routine")
    if isinstance(routine, dict):
        for step in RoutineStep:
            routine.setdefault(step.value, None)
    return data


def parse_recommendation(text: Optional[str]) -> RoutineRecommendation:
    """
    Parse LLM text into a validated RoutineRecommendation.

    Raises:
        RecommendationParseError: empty text, no JSON object, invalid JSON
            or a payload that does not match the routine shape
    """
    if not text or not text.strip():
        raise RecommendationParseError("Empty LLM response")

    fragment = extract_json_object(text)
    if fragment is None:
        raise RecommendationParseError(f"No JSON object found in response: {text[:100]}...")

    try:
        data = json.loads(fragment)
    except json.JSONDecodeError as e:
        raise RecommendationParseError(f"Invalid JSON in response: {e}") from e

    if not isinstance(data, dict) or "routine" not in data or "summary" not in data:
        raise RecommendationParseError("Response JSON is missing 'routine' or 'summary'")

    try:
        return RoutineRecommendation.model_validate(_fill_missing_steps(data))
    except ValidationError as e:
        raise RecommendationParseError(f"Response JSON has the wrong shape: {e}") from e
