from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class ParsedJson:
    data: Dict[str, Any]
    extracted: bool = False


@dataclass(frozen=True)
class ExtractionFailure:
    reason: str


JsonParseResult = Union[ParsedJson, ExtractionFailure]


def strip_code_fences(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```"):
        stripped = stripped[3:]
        if stripped.startswith("json"):
            stripped = stripped[len("json"):]
        stripped = stripped.rstrip()
        if stripped.endswith("```"):
            stripped = stripped[:-3]
    return stripped.strip()


def extract_json_segment(text: str) -> Optional[str]:
    """Return the first balanced ``{...}`` substring of ``text``.

    Braces inside JSON string literals are ignored so that values such as
    ``"advice": "use {this}"`` do not end the object early.
    """
    start = text.find("{")
    if start == -1:
        return None
    depth = 0
    in_string = False
    escaped = False
    for idx in range(start, len(text)):
        ch = text[idx]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start: idx + 1]
    return None


def parse_json_object(text: Optional[str]) -> JsonParseResult:
    """Strict parse first, then fall back to the first embedded object."""
    if not text or not text.strip():
        return ExtractionFailure("empty response")

    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        strict_error = str(exc)
    else:
        if isinstance(data, dict):
            return ParsedJson(data)
        strict_error = f"expected a JSON object, got {type(data).__name__}"

    segment = extract_json_segment(cleaned)
    if segment is None:
        return ExtractionFailure(f"no JSON object found ({strict_error})")
    try:
        data = json.loads(segment)
    except json.JSONDecodeError as exc:
        return ExtractionFailure(f"embedded object is not valid JSON: {exc}")
    return ParsedJson(data, extracted=True)
