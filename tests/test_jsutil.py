import json

import pytest

from stealthprint.jsutil import escape_js_string, stable_hash


@pytest.mark.parametrize(
    "text",
    [
        "plain",
        'say "hi"',
        "back\\slash",
        "line1\nline2",
        "carriage\rreturn",
        "tab\there",
        'mixed \\ " \n \r \t end',
    ],
)
def test_escaped_string_decodes_back(text):
    escaped = escape_js_string(text)
    assert json.loads('"' + escaped + '"') == text


def test_escaped_string_has_no_raw_control_characters():
    escaped = escape_js_string('a\nb\rc\td"e')
    assert "\n" not in escaped
    assert "\r" not in escaped
    assert "\t" not in escaped


def test_single_quotes_untouched_by_default():
    assert escape_js_string("it's") == "it's"


def test_single_quotes_escaped_when_requested():
    escaped = escape_js_string("it's", single_quotes=True)
    assert "\\'" in escaped
    assert escaped.replace("\\'", "'") == "it's"


def test_backslash_escaped_before_quote():
    escaped = escape_js_string('\\"')
    assert json.loads('"' + escaped + '"') == '\\"'


def test_stable_hash_is_deterministic():
    first = stable_hash("test-session-123")
    repeated = [stable_hash("test-session-123") for _ in range(3)]
    assert repeated == [first, first, first]
    assert 0 <= first < 2**64


def test_stable_hash_fits_in_64_bits():
    for text in ["", "seed-1", "seed-2", "x" * 1000]:
        value = stable_hash(text)
        assert 0 <= value < 2**64


def test_stable_hash_distinguishes_inputs():
    values = {stable_hash(text) for text in ["seed-1", "seed-2", "seed-3", ""]}
    assert len(values) == 4