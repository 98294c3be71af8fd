# treezip/parser.py
import logging
import re
from typing import Iterable, List, Optional, Tuple

from .config import Settings, load_settings
from .errors import EmptyTree, InvalidLine, StructuralDepthError
from .models import TreeNode
from .sanitizer import ASCII_GLYPHS, TREE_GLYPHS, starts_with_comment, validate_text

logger = logging.getLogger(__name__)

# prefix (graphics + whitespace) and the rest of the name; ASCII connectors
# only count as prefix when whitespace follows them, so "+page.svelte" survives
LINE_RE = re.compile(
    r"^(?P<prefix>(?:[\s" + re.escape(TREE_GLYPHS) + r"]|[" + re.escape(ASCII_GLYPHS) + r"]+(?=\s))*)"
    r"(?P<name>.*)$"
)
# "one or more alphanumerics after a final period"
FILE_RE = re.compile(r"\.[A-Za-z0-9]+$")

TAB_WIDTH = 4


def parse_line(line: str, number: Optional[int] = None) -> Tuple[str, bool]:
    """
    Split one accepted line into ``(name, is_file)``.

    The tree prefix is only removed from the start of the line. Classification
    looks at the name as written, so ``config.d/`` stays a folder while
    ``.github`` is (wrongly, but consistently) taken for a file.
    """
    m = LINE_RE.match(line)
    name = m.group("name").strip() if m else line.strip()

    if not name or starts_with_comment(name):
        raise InvalidLine(line=number)

    is_file = bool(FILE_RE.search(name))
    name = name.rstrip("/")
    if not name:
        raise InvalidLine(line=number)

    # the archive must never hold entries outside its root
    if name.startswith(("/", "\\")) or any(p in (".", "..") for p in re.split(r"[/\\]", name)):
        raise InvalidLine("Absolute paths and '.'/'..' references are not allowed", line=number)

    return name, is_file


def indent_columns(line: str) -> int:
    """Column where the name starts: length of the whitespace/glyph prefix."""
    m = LINE_RE.match(line)
    prefix = m.group("prefix") if m else ""
    return len(prefix.replace("\t", " " * TAB_WIDTH))


def infer_indent_unit(columns: Iterable[int]) -> int:
    """Smallest non-zero indentation in the input, or 1 if nothing is indented."""
    indented = [c for c in columns if c > 0]
    return min(indented) if indented else 1


def resolve_depth(line: str, unit: int) -> int:
    if unit < 1:
        raise ValueError(f"indent unit must be >= 1, got {unit}")
    return indent_columns(line) // unit


class TreeBuilder:
    """
    Accumulates ``(depth, name, is_file)`` triples into a tree.

    ``stack[d]`` holds the latest node inserted at depth ``d``; it is the open
    parent for the next line at depth ``d + 1``. Deeper slots are dropped on
    every insertion so they can never be reused by a later line.
    """

    def __init__(self):
        self.root = TreeNode(name="")
        self.stack: List[TreeNode] = []

    def add(self, depth: int, name: str, is_file: bool, line: Optional[int] = None) -> TreeNode:
        node = TreeNode(name=name, is_file=is_file, line=line)

        if depth == 0:
            self.root.add(node)
        else:
            if depth - 1 >= len(self.stack):
                raise StructuralDepthError(
                    f"'{name}' is at depth {depth} but nothing is open at depth {depth - 1}",
                    line=line,
                )
            parent = self.stack[depth - 1]
            if parent.is_file:
                raise StructuralDepthError(
                    f"'{name}' is nested under file '{parent.name}'",
                    line=line,
                )
            parent.add(node)

        del self.stack[depth:]
        self.stack.append(node)
        return node

    def finish(self) -> TreeNode:
        if not self.root.children:
            raise EmptyTree()
        self.stack = []
        return self.root


def build_tree(entries: Iterable[Tuple[int, str, bool]]) -> TreeNode:
    builder = TreeBuilder()
    for depth, name, is_file in entries:
        builder.add(depth, name, is_file)
    return builder.finish()


def parse_tree(text: str, settings: Optional[Settings] = None) -> TreeNode:
    """
    Parse tree text into a TreeNode root.

    All or nothing: the first problem raises a TreeParseError and no partial
    tree is returned.
    """
    settings = settings or load_settings()
    lines = validate_text(text, strict_structure=settings.strict_structure)

    # `tree` prints the current directory as a lone "." first line; its
    # entries then hang one level below it
    offset = 0
    if lines and lines[0][1].strip() == ".":
        lines = lines[1:]
        offset = 1

    unit = settings.indent_width or infer_indent_unit(indent_columns(ln) for _, ln in lines)

    builder = TreeBuilder()
    for number, line in lines:
        name, is_file = parse_line(line, number)
        depth = resolve_depth(line, unit) - offset
        if depth < 0:
            raise StructuralDepthError(f"'{name}' sits beside the '.' root line", line=number)
        builder.add(depth, name, is_file, line=number)
    root = builder.finish()

    logger.debug(
        "Parsed %d lines (indent unit %d): %d files, %d folders",
        len(lines), unit, root.count_files(), root.count_dirs(),
    )
    return root


# quick local check
if __name__ == "__main__":
    sample = """page_builder/
├── app/
│   ├── main.py
│   ├── templates/
│   │   ├── base.html
│   │   └── editor.html
│   └── static/
│       └── css/
│           └── style.css
│
├── requirements.txt
└── run.sh
"""
    for node in parse_tree(sample, Settings()).iter_nodes():
        print(node.line, node.name, "file" if node.is_file else "dir")
