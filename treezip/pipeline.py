# treezip/pipeline.py
"""
Parse -> preview -> materialize, with the intermediate state as a value.

The web layer keeps the latest ``ScaffoldState`` and swaps it wholesale after
each parse; nothing in here mutates shared state.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .archive import build_archive
from .config import Settings, load_settings
from .errors import TreeParseError
from .models import TreeNode
from .parser import parse_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaffoldState:
    text: str = ""
    tree: Optional[TreeNode] = None
    error: Optional[TreeParseError] = None

    @property
    def ok(self) -> bool:
        return self.tree is not None and self.error is None

    def preview(self) -> dict:
        if self.error is not None:
            return self.error.to_dict()
        if self.tree is None:
            return {"tree": None}
        return {
            "tree": [child.to_dict() for child in self.tree.children],
            "files": self.tree.count_files(),
            "folders": self.tree.count_dirs(),
        }


def parse(text: str, settings: Optional[Settings] = None) -> ScaffoldState:
    """Parse ``text`` into a new state; parse errors are captured, not raised."""
    try:
        tree = parse_tree(text, settings)
    except TreeParseError as exc:
        logger.info("Tree rejected: %s (%s)", exc, exc.kind)
        return ScaffoldState(text=text, error=exc)
    return ScaffoldState(text=text, tree=tree)


def materialize(state: ScaffoldState, settings: Optional[Settings] = None) -> bytes:
    """Zip the tree held by ``state``; re-raises the parse error if there is none."""
    if state.error is not None:
        raise state.error
    if state.tree is None:
        raise ValueError("nothing has been parsed yet")
    settings = settings or load_settings()
    return build_archive(state.tree, settings.placeholder)
