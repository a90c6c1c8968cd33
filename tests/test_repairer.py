# ===============================================
# tests/test_repairer.py
# Strict parse, then heuristic repair
# ===============================================
import json

import pytest

from src.generate.errors import PayloadUnparseable
from src.generate.repairer import parse_payload, repair_text, strip_trailing_commas
from src.generate.types import ExtractedPayload


def _parse(candidate: str, raw: str = None):
    return parse_payload(ExtractedPayload(candidate=candidate), raw if raw is not None else candidate)


def test_valid_json_is_not_repaired():
    out = _parse('{"semester": 1, "courses": []}')
    assert out.repaired is False
    assert out.value == {"semester": 1, "courses": []}


@pytest.mark.parametrize(
    "with_comma, without_comma",
    [
        ('{"a": 1,}', '{"a": 1}'),
        ('[1, 2, 3,]', '[1, 2, 3]'),
        ('{"a": [1, 2,], "b": "x"}', '{"a": [1, 2], "b": "x"}'),
        ('{"semester":1,"courses":[],"certifications":[],"projects":[],"researchPapers":[],}',
         '{"semester":1,"courses":[],"certifications":[],"projects":[],"researchPapers":[]}'),
        ('[{"title": "A"}, {"title": "B"},]', '[{"title": "A"}, {"title": "B"}]'),
        ('{"a": "a\\/b",}', '{"a": "a\\/b"}'),
        ('{"a": "\\u00e9\\ud83d\\ude00",}', '{"a": "\\u00e9\\ud83d\\ude00"}'),
        ('{"link": "https:\\/\\/example.com\\/x", "tags": ["a,]", "b"],}', '{"link": "https://example.com/x", "tags": ["a,]", "b"]}'),
    ],
)
def test_single_trailing_comma_is_tolerated(with_comma, without_comma):
    out = _parse(with_comma)
    assert out.repaired is True
    assert out.value == json.loads(without_comma)


def test_single_quoted_keys_and_values():
    assert _parse("{'title': 'Calculus I', 'link': '#'}").value == {"title": "Calculus I", "link": "#"}


def test_missing_closing_brackets():
    assert _parse('{"folders": ["src", "tests"').value == {"folders": ["src", "tests"]}


def test_non_ascii_text_survives_repair():
    assert _parse('{"title": "Análisis I",}').value == {"title": "Análisis I"}


def test_prose_is_unparseable_and_keeps_raw_text():
    raw = "I cannot help with that."
    with pytest.raises(PayloadUnparseable) as exc:
        _parse(raw, raw)
    assert exc.value.raw_text == raw


def test_empty_candidate_is_unparseable():
    with pytest.raises(PayloadUnparseable):
        _parse("", "")


def test_repair_text_is_pure_string_transform():
    fixed = repair_text('{"a": 1,}')
    assert isinstance(fixed, str)
    assert json.loads(fixed) == {"a": 1}
    assert repair_text('{"a": 1,}') == fixed


def test_escaped_slash_and_surrogate_pair_decode_after_comma_fix():
    assert _parse('{"link": "https:\\/\\/x.org\\/a",}').value == {"link": "https://x.org/a"}
    assert _parse('{"a": "\\u00e9\\ud83d\\ude00",}').value == {"a": "é😀"}


def test_strip_trailing_commas_leaves_strings_alone():
    assert strip_trailing_commas('{"a": ", }", "b": [1, 2 ,\n ],\n}') == '{"a": ", }", "b": [1, 2 \n ]\n}'
    assert strip_trailing_commas('{"q": "say \\",]\\"",}') == '{"q": "say \\",]\\""}'
