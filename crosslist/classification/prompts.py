"""Instruction text sent to LLM-backed classifiers."""

from collections.abc import Sequence

SYSTEM_PROMPT = (
    "You are an expert at identifying gender from given names. "
    "Return only valid JSON."
)

CLASSIFY_PROMPT_TEMPLATE = """Analyze the list of names below and determine the gender of each one.
Return ONLY a JSON array of objects in the format: {{"name": "name", "gender": "male" or "female" or "unknown", "confidence": 0-100}}

Rules:
- "male" for masculine names
- "female" for feminine names
- "unknown" for ambiguous names, unidentifiable nicknames, or strings that are not names
- confidence: 0-100 (how confident you are)
- Copy each name exactly as written into the "name" field

Names to analyze:
{names}

Return ONLY the JSON array, with no extra explanation."""


def build_prompt(names: Sequence[str]) -> str:
    return CLASSIFY_PROMPT_TEMPLATE.format(names="\n".join(names))
