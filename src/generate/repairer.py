# Strict parse first, then trailing-comma removal, then a heuristic repair pass
# (json_repair) and a second parse.

from __future__ import annotations
import json
from typing import Any, List

from json_repair import repair_json

from src.log import get_logger
from .errors import PayloadUnparseable
from .types import ExtractedPayload, RepairedPayload

logger = get_logger(__name__)


def strip_trailing_commas(candidate: str) -> str:
    """Drop commas that directly precede '}' or ']'; string contents are left untouched."""
    out: List[str] = []
    in_string = False
    escaped = False
    n = len(candidate)
    for i, ch in enumerate(candidate):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            out.append(ch)
            continue
        if ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < n and candidate[j] in " \t\r\n":
                j += 1
            if j < n and candidate[j] in "}]":
                continue
        out.append(ch)
    return "".join(out)


def repair_text(candidate: str) -> str:
    """
    Best-effort fix of near-valid JSON: single quotes, unquoted keys,
    unescaped inner quotes, missing brackets.
    Returns an empty string when nothing JSON-like can be recovered.
    """
    return repair_json(candidate, ensure_ascii=False)


def _strict_loads(candidate: str) -> Any:
    return json.loads(candidate)


def parse_payload(payload: ExtractedPayload, raw_text: str) -> RepairedPayload:
    candidate = payload.candidate
    try:
        return RepairedPayload(value=_strict_loads(candidate), repaired=False)
    except (ValueError, RecursionError) as e:
        logger.info("strict JSON parse failed (%s), trying repair", e)

    # string escapes (\/, surrogate pairs) must decode exactly as json.loads does
    try:
        return RepairedPayload(value=_strict_loads(strip_trailing_commas(candidate)), repaired=True)
    except (ValueError, RecursionError):
        pass

    try:
        repaired = repair_text(candidate)
    except Exception as e:  # any failure inside the repair heuristics means nothing was recovered
        logger.warning("unparseable model response:\n%s", raw_text)
        raise PayloadUnparseable(raw_text, reason=f"repair failed: {e}") from e

    try:
        value = _strict_loads(repaired) if repaired.strip() else None
    except (ValueError, RecursionError) as e:
        logger.warning("unparseable model response:\n%s", raw_text)
        raise PayloadUnparseable(raw_text, reason=str(e)) from e

    # repair turns prose into "" or null; that is not a recovered payload
    if value is None or value == "":
        logger.warning("unparseable model response:\n%s", raw_text)
        raise PayloadUnparseable(raw_text, reason="no JSON value found")

    return RepairedPayload(value=value, repaired=True)
