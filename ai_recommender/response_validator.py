"""
Response Validator

Turns the free text returned by the generative service into typed
Recommendation objects. The reply is treated as untrusted: it must yield a
JSON array whose every item passes ``RecommendationSchema`` or the whole
reply is rejected with ``ParseError``.

Extraction order:
1. A fenced ```json ... ``` block holding an array
2. The span from the first "[" to the last "]" in the text (tolerates prose
   before and after the array)

The validated list keeps the service's order; it is never re-sorted.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, List

from pydantic import ValidationError

from internship_core import Recommendation

from .errors import ParseError
from .schemas import RecommendationSchema


_FENCED_ARRAY = re.compile(r"```(?:json)?\s*(\[.*?\])\s*```", re.DOTALL)


@dataclass(frozen=True)
class UntrustedPayload:
    """Raw completion text as received from a provider, not yet validated."""
    text: str
    provider: str = ""
    attempts: int = 1                   # requests made, retries included


def _candidate_spans(text: str) -> List[str]:
    spans = [m.group(1) for m in _FENCED_ARRAY.finditer(text)]
    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end > start:
        spans.append(text[start:end + 1])
    return spans


def extract_json_array(text: str) -> List[Any]:
    """Recover the first decodable JSON array embedded in ``text``.

    Raises:
        ParseError: If no bracketed span exists or none decodes to a list
    """
    if not text:
        raise ParseError("Empty response text")

    spans = _candidate_spans(text)
    if not spans:
        raise ParseError("No JSON array found in response")

    last_error = None
    for span in spans:
        try:
            data = json.loads(span)
        except json.JSONDecodeError as e:
            last_error = e
            continue
        if isinstance(data, list):
            return data
        last_error = f"expected a JSON array, got {type(data).__name__}"

    raise ParseError(f"Invalid JSON array in response: {last_error}")


def validate_items(items: List[Any]) -> List[Recommendation]:
    """Check every item against the schema and convert to Recommendation."""
    recommendations = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ParseError(f"Item {i} is not an object: {type(item).__name__}")
        try:
            recommendations.append(RecommendationSchema.model_validate(item).to_recommendation())
        except ValidationError as e:
            raise ParseError(f"Item {i} failed validation: {e.error_count()} error(s); {e}") from e
    return recommendations


def parse_recommendations(text: str) -> List[Recommendation]:
    """Extract and validate a recommendation list from completion text.

    Raises:
        ParseError: If no well-formed, schema-valid array can be recovered
    """
    return validate_items(extract_json_array(text))


def validate_payload(payload: UntrustedPayload) -> List[Recommendation]:
    """Gate an untrusted provider reply into the typed domain model."""
    return parse_recommendations(payload.text)
