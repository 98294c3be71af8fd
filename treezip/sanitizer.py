# treezip/sanitizer.py
"""Input screening that runs before any structural parsing.

Rejects the whole text as soon as a line carries a forbidden character or
starts like a comment. Nothing is stripped silently: the user gets an error
pointing at the line and fixes the input.
"""
import logging
import re
from typing import List, Tuple

from .errors import EmptyInput, InvalidCharacter, InvalidStructure

logger = logging.getLogger(__name__)

# box-drawing glyphs used by `tree` and friends
TREE_GLYPHS = "│├└─┬┴┼┤┌┐┘╎┃┣┗━║╠╚═"
# ASCII stand-ins (`tree --charset=ascii`)
ASCII_GLYPHS = "|+`-"

COMMENT_MARKERS = ("#", "//", "/*", "*")

# comment/punctuation markers and emoji/pictograph ranges
INVALID_CHARS_RE = re.compile(
    "[#@!&"
    "\U0001F300-\U0001FAFF"  # pictographs, emoticons, transport, supplemental
    "\U0001F1E6-\U0001F1FF"  # regional indicators (flags)
    "\u2600-\u27BF"          # misc symbols, dingbats
    "\uFE0F"                 # emoji presentation selector
    "]"
)

# lines made only of tree graphics, like the "│" spacer rows `tree` prints
DRAWING_ONLY_RE = re.compile(r"^[\s" + re.escape(TREE_GLYPHS + ASCII_GLYPHS) + r"]+$")

# box glyphs, path separators, or ASCII connectors like "|-- " and "`-- "
SEPARATOR_RE = re.compile(
    r"[" + re.escape(TREE_GLYPHS) + r"/\\]|^[\s|]*[|`+]-+\s",
    re.MULTILINE,
)
PATH_TOKEN_RE = re.compile(r"[^\s/\\]+\.[A-Za-z0-9]+(?:\s|$)|[^\s/\\]+/")


def starts_with_comment(text: str) -> bool:
    return text.startswith(COMMENT_MARKERS)


def check_structure(text: str) -> None:
    """Reject text that carries no tree glyph or separator, or no path-like token."""
    if not SEPARATOR_RE.search(text) or not PATH_TOKEN_RE.search(text):
        raise InvalidStructure()


def validate_text(text: str, strict_structure: bool = False) -> List[Tuple[int, str]]:
    """
    Return the non-blank lines of ``text`` as ``(line_number, line)`` pairs.

    Line numbers are 1-based and refer to the raw input, so blank lines still
    count. Trailing whitespace is removed; leading indentation is kept intact
    for the depth resolver.
    """
    text = (text or "").lstrip("\ufeff")
    if not text.strip():
        raise EmptyInput()

    accepted = []
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip()
        stripped = line.strip()
        if not stripped:
            continue

        match = INVALID_CHARS_RE.search(line)
        if match:
            logger.info("Rejected line %d: forbidden character %r", number, match.group(0))
            raise InvalidCharacter(line=number)
        if starts_with_comment(stripped):
            logger.info("Rejected line %d: comment", number)
            raise InvalidCharacter(line=number)

        if DRAWING_ONLY_RE.match(line):
            continue

        accepted.append((number, line))

    if strict_structure:
        check_structure(text)

    return accepted
