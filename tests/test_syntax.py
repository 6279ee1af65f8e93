"""Tests for syntax hint lookup."""

import pytest

from syntax import DEFAULT_SYNTAX_HINT, label_extension, syntax_hint_for


@pytest.mark.parametrize(
    "name,expected",
    [
        ("notes.md", "markdown"),
        ("App.TSX", "javascript"),
        ("data.json", "json"),
        ("main.rs", "rust"),
        ("site.htm", "html"),
        ("theme.scss", "css"),
        ("script.py", "python"),
        ("readme.txt", "text"),
    ],
)
def test_known_extensions(name, expected):
    assert syntax_hint_for(name) == expected


def test_unknown_extension_uses_default():
    assert syntax_hint_for("archive.tar.zst") == DEFAULT_SYNTAX_HINT


def test_name_without_dot_uses_default():
    assert syntax_hint_for("Makefile") == DEFAULT_SYNTAX_HINT


def test_extension_is_last_suffix():
    assert label_extension("a.b.JSON") == "json"
