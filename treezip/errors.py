# treezip/errors.py
from typing import Optional


class TreeParseError(ValueError):
    """Base error for everything that can go wrong while reading tree text.

    Every subclass carries a stable ``kind`` used by the HTTP layer and an
    optional 1-based line number pointing at the offending input line.
    """

    kind = "TreeParseError"
    default_message = "Invalid tree"

    def __init__(self, message: Optional[str] = None, line: Optional[int] = None):
        self.message = message or self.default_message
        self.line = line
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message, "line": self.line}


class EmptyInput(TreeParseError):
    kind = "EmptyInput"
    default_message = "Please enter a tree first"


class InvalidCharacter(TreeParseError):
    kind = "InvalidCharacter"
    default_message = "Symbols, comments and emoji are not allowed in the tree"


class InvalidStructure(TreeParseError):
    kind = "InvalidStructure"
    default_message = "Text does not look like a directory tree"


class InvalidLine(TreeParseError):
    kind = "InvalidLine"
    default_message = "Line does not contain a valid file or folder name"


class StructuralDepthError(TreeParseError):
    kind = "StructuralDepthError"
    default_message = "Tree structure is broken"


class EmptyTree(TreeParseError):
    kind = "EmptyTree"
    default_message = "Tree is empty or invalid"


__all__ = [
    "TreeParseError",
    "EmptyInput",
    "InvalidCharacter",
    "InvalidStructure",
    "InvalidLine",
    "StructuralDepthError",
    "EmptyTree",
]
