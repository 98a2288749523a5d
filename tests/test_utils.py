import pytest

from lomake.utils import is_string_literal, strip_quotes, trim


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  hello  ", "hello"),
        ("\thello\t", "hello"),
        ("   ", ""),
        ("", ""),
        ("a b", "a b"),
    ],
)
def test_trim_spaces_and_tabs(raw, expected):
    assert trim(raw) == expected


def test_trim_keeps_other_whitespace():
    assert trim(" x\n") == "x\n"


def test_trim_is_idempotent():
    once = trim(" \t value \t ")
    assert trim(once) == once


@pytest.mark.parametrize(
    "value, expected",
    [
        ('"abc"', True),
        ('""', True),
        ('"', False),
        ("abc", False),
        ('"abc', False),
        ('abc"', False),
    ],
)
def test_is_string_literal(value, expected):
    assert is_string_literal(value) is expected


def test_strip_quotes_removes_one_pair():
    assert strip_quotes('""x""') == '"x"'


def test_strip_quotes_leaves_unquoted_text():
    assert strip_quotes("plain") == "plain"
    assert strip_quotes('"') == '"'


def test_strip_quotes_empty_literal():
    assert strip_quotes('""') == ""