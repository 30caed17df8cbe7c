import pytest

from strkit.text import to_lower, to_upper, trim


def test_to_upper_ascii():
    assert to_upper("hello, World 42") == "HELLO, WORLD 42"


def test_to_lower_ascii():
    assert to_lower("HeLLo, World 42") == "hello, world 42"


@pytest.mark.parametrize("text", ["", "abc", "ABC", "MiXeD 123 !?", "éÉß"])
def test_case_invariants(text):
    assert to_lower(to_upper(text)) == to_lower(text)
    assert to_upper(to_lower(text)) == to_upper(text)
    assert len(to_upper(text)) == len(text)


def test_non_ascii_untouched():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_trim_both_ends():
    assert trim("  hi there  ", " ") == "hi there"
    assert trim("xyhixy", "xy") == "hi"


def test_trim_everything():
    assert trim("xxxx", "x") == ""
    assert trim("", "x") == ""


def test_trim_empty_set_keeps_text():
    assert trim("  abc  ", "") == "  abc  "


def test_trim_keeps_inner_characters():
    assert trim("*a*b*", "*") == "a*b"


def test_trim_rejects_missing_chars():
    with pytest.raises(TypeError):
        trim("abc", None)