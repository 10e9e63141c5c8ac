"\"\"\"Extraction and strict decoding of the model's match payload.\"\"\""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from ..errors import ParseError
from ..schemas import MatchCandidate, MatchEntry, MatchPayload


def extract_json_span(text: str) -> str | None:
    """Return the first balanced ``{...}`` span in ``text``.

    Scanning starts at the first ``{``. Braces inside JSON string literals are
    ignored. Returns ``None`` when there is no ``{`` or it never closes.
    """

    start = text.find("{")
    if start < 0:
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


def decode_matches(span: str) -> list[MatchCandidate]:
    """Decode a JSON object span into match candidates without any repair."""

    try:
        data = json.loads(span)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Match payload is not valid JSON: {exc.msg}") from exc
    except (ValueError, RecursionError) as exc:
        # oversized integer literals or pathological nesting
        raise ParseError("Match payload is not valid JSON") from exc
    try:
        payload = MatchPayload.model_validate(data)
    except ValidationError as exc:
        raise ParseError("Match payload does not contain a 'matches' list") from exc
    return [_to_candidate(entry) for entry in payload.matches]


def _to_candidate(entry: Any) -> MatchCandidate:
    if not isinstance(entry, dict):
        return MatchCandidate(job_id=None, match_score=None)
    parsed = MatchEntry.model_validate(entry)
    return MatchCandidate(job_id=parsed.job_id, match_score=parsed.match_score)


def parse_matches(text: str) -> list[MatchCandidate]:
    span = extract_json_span(text)
    if span is None:
        raise ParseError("No JSON object found in generated text")
    return decode_matches(span)


def extract_generated_text(body: Any) -> str:
    """Pull ``generated_text`` out of an inference response body."""

    if not isinstance(body, list) or not body:
        raise ParseError("Inference response is not a non-empty list")
    first = body[0]
    if not isinstance(first, dict) or not isinstance(first.get("generated_text"), str):
        raise ParseError("Inference response lacks a 'generated_text' string")
    return first["generated_text"]
