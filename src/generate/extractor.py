# Locate the JSON payload inside free-form model text.
# Order: first ```json fence, then the first balanced {...}/[...] span,
# then the whole trimmed text. Never raises.

from __future__ import annotations
import re
from typing import Optional

from .types import ExtractedPayload

# closing fence must start a line; newlines inside JSON strings are escaped,
# so a ``` that appears inside a string value never closes the block
_JSON_FENCE = re.compile(r"```[ \t]*json[ \t]*\r?\n(.*?)\r?\n[ \t]*```", re.DOTALL | re.IGNORECASE)
# single-line form: ```json {"a": 1}```
_JSON_FENCE_INLINE = re.compile(r"```[ \t]*json[ \t]+([^\r\n]*?)```", re.IGNORECASE)

_OPENERS = "{["
_CLOSERS = "}]"


def find_fenced_json(text: str) -> Optional[str]:
    """Interior of the first fence tagged as JSON, or None."""
    m = _JSON_FENCE.search(text) or _JSON_FENCE_INLINE.search(text)
    if not m:
        return None
    return m.group(1).strip()


def find_bracket_span(text: str) -> Optional[str]:
    """
    Span from the first '{' or '[' to its matching closer.
    Brackets inside string literals are ignored. If the span never closes,
    it runs to the last closing bracket in the text, or to the end.
    """
    starts = [i for i in (text.find("{"), text.find("[")) if i >= 0]
    if not starts:
        return None
    start = min(starts)

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
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
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    end = max(text.rfind("}"), text.rfind("]"))
    if end > start:
        return text[start:end + 1]
    return text[start:]


def extract_payload(text: str) -> ExtractedPayload:
    text = text or ""
    fenced = find_fenced_json(text)
    if fenced is not None:
        return ExtractedPayload(candidate=fenced, was_fenced=True)

    span = find_bracket_span(text)
    if span is not None:
        return ExtractedPayload(candidate=span, was_fenced=False)

    return ExtractedPayload(candidate=text.strip(), was_fenced=False)
