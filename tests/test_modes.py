import re

import pytest

from rxrenamer.modes import (
    AsciiReplace,
    FromFileMode,
    RecursiveMode,
    RegexReplace,
    SimpleMode,
)


def test_limit_one_replaces_first_match_only():
    assert RegexReplace("a", "b", 1).replace("aaa") == "baa"


def test_limit_zero_replaces_all():
    result = RegexReplace("a", "b", 0).replace("aaa")
    assert "a" not in result
    assert result.count("b") == 3


def test_limit_two():
    result = RegexReplace("a", "b", 2).replace("aaaa")
    assert result.count("b") == 2
    assert result.count("a") == 2
    assert result.startswith("bb")


def test_numbered_group_reference():
    assert RegexReplace(r"(\w+)-(\w+)", "$2-$1").replace("foo-bar") == "bar-foo"


def test_braced_named_group_reference():
    rule = RegexReplace(r"(?P<stem>\w+)\.txt", "${stem}.md")
    assert rule.replace("notes.txt") == "notes.md"


def test_double_dollar_is_literal_dollar():
    result = RegexReplace("a", "$$").replace("cat")
    assert result.count("$") == 1
    assert "a" not in result


def test_missing_group_expands_to_empty():
    result = RegexReplace("a", "$9").replace("cat")
    assert "a" not in result
    assert len(result) == 2


def test_no_match_leaves_name():
    assert RegexReplace("zzz", "y").replace("file.txt") == "file.txt"


def test_string_expression_is_compiled():
    rule = RegexReplace("x+", "y")
    assert isinstance(rule.expression, re.Pattern)
    assert rule.expression.pattern == "x+"


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        RegexReplace("a", "b", -1)


def test_invalid_expression_raises():
    with pytest.raises(re.error):
        RegexReplace("(", "b")


def test_ascii_keeps_ascii_names():
    assert AsciiReplace().replace("plain_name.txt") == "plain_name.txt"


def test_ascii_transliterates():
    result = AsciiReplace().replace("résumé.pdf")
    assert result.isascii()
    assert result.endswith(".pdf")


def test_run_mode_defaults():
    mode = RecursiveMode(["dir"])
    assert mode.paths == ["dir"]
    assert mode.max_depth is None
    assert mode.hidden is False
    assert FromFileMode("dump.json").undo is False
    assert SimpleMode(["a"]) == SimpleMode(["a"])