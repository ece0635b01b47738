"""
Lenient parsing of classifier output.

Models wrap their answer in prose or markdown fences often enough that the
answer is never parsed as-is: the span from the first "[" to the last "]" is
cut out and only that span is decoded. Entries are then coerced one by one so
a single bad entry does not sink the batch.
"""

import json
import math
import re
from collections.abc import Iterable

from loguru import logger

from crosslist.exceptions import ClassificationParseError
from crosslist.models import Category, ClassificationResult

_ARRAY_SPAN = re.compile(r"\[.*\]", re.DOTALL)


def extract_json_array(text: str | None) -> list:
    """Decode the bracketed span of a response.

    Raises:
        ClassificationParseError: no span, invalid JSON, or not an array
    """
    match = _ARRAY_SPAN.search(text or "")
    if not match:
        raise ClassificationParseError("No JSON array found in classification response")

    try:
        payload = json.loads(match.group())
    except (ValueError, RecursionError) as e:
        raise ClassificationParseError(f"Invalid JSON in classification response: {e}") from e

    if not isinstance(payload, list):
        raise ClassificationParseError("Classification payload is not an array")
    return payload


def _coerce_confidence(value: object) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip().rstrip("%")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(number):
        return 0
    return int(round(max(0.0, min(100.0, number))))


def coerce_results(entries: Iterable[object]) -> list[ClassificationResult]:
    """Turn decoded entries into results, dropping the ones without a name."""
    results: list[ClassificationResult] = []
    dropped = 0
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            dropped += 1
            continue
        results.append(
            ClassificationResult(
                name=entry["name"],
                category=Category.coerce(entry.get("gender")),
                confidence=_coerce_confidence(entry.get("confidence")),
            )
        )
    if dropped:
        logger.debug(f"Dropped {dropped} unusable classification entries")
    return results


def parse_classification_response(text: str | None) -> list[ClassificationResult]:
    return coerce_results(extract_json_array(text))


def index_by_name(results: Iterable[ClassificationResult]) -> dict[str, ClassificationResult]:
    """Results keyed by exact name; a later duplicate replaces an earlier one."""
    indexed: dict[str, ClassificationResult] = {}
    for result in results:
        indexed[result.name] = result
    return indexed
