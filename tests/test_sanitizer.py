"""
Unit tests for input screening.

Verifies:
1. Blank and drawing-only lines are dropped, line numbers kept.
2. Forbidden characters and comment lines reject the whole input.
3. The optional structural signature check.
"""

import pytest

from treezip.errors import EmptyInput, InvalidCharacter, InvalidStructure
from treezip.sanitizer import validate_text


# -----------------------------------------------------------------------------
# Accepted input
# -----------------------------------------------------------------------------
def test_blank_lines_are_dropped_and_numbers_kept():
    assert validate_text("src/\n\n  app.js\n   \n") == [(1, "src/"), (3, "  app.js")]


def test_trailing_whitespace_removed_indent_kept():
    assert validate_text("    main.py   ") == [(1, "    main.py")]


def test_drawing_only_spacer_rows_dropped():
    text = "src/\n│\n└── app.py\n|"
    assert validate_text(text) == [(1, "src/"), (3, "└── app.py")]


def test_byte_order_mark_ignored():
    assert validate_text("\ufeffapp.js") == [(1, "app.js")]


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " \t\n  \n"])
def test_blank_input_is_empty_input(text):
    with pytest.raises(EmptyInput):
        validate_text(text)


# -----------------------------------------------------------------------------
# Rejections
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "line",
    ["#comment", "main.py # entry", "user@host", "hello!", "a&b", "app 😀.js", "🚀 rocket", "✅ done"],
)
def test_forbidden_characters_rejected(line):
    with pytest.raises(InvalidCharacter):
        validate_text(f"src/\n  {line}")


@pytest.mark.parametrize("line", ["// note", "/* block */", "* item", "   // indented note"])
def test_comment_lines_rejected(line):
    with pytest.raises(InvalidCharacter):
        validate_text(line)


def test_rejection_reports_line_number():
    with pytest.raises(InvalidCharacter) as exc_info:
        validate_text("src/\n\n  ok.py\n  bad&name.py")

    assert exc_info.value.line == 4
    assert exc_info.value.to_dict()["error"] == "InvalidCharacter"


def test_no_partial_stripping():
    # one bad line anywhere fails the whole input
    with pytest.raises(InvalidCharacter):
        validate_text("a.py\nb.py\nc.py\n# trailing")


# -----------------------------------------------------------------------------
# Structural signature
# -----------------------------------------------------------------------------
def test_structure_check_off_by_default():
    assert validate_text("app.js") == [(1, "app.js")]


@pytest.mark.parametrize("text", ["app.js", "readme\nnotes", "├── readme"])
def test_structure_check_rejects_non_tree_text(text):
    with pytest.raises(InvalidStructure):
        validate_text(text, strict_structure=True)


@pytest.mark.parametrize("text", ["src/\n  app.js", "project\n├── main.py", "project\n|-- main.py\n`-- README.md"])
def test_structure_check_accepts_tree_text(text):
    assert validate_text(text, strict_structure=True)
