# treezip/archive.py
import io
import logging
import zipfile
from typing import Dict, Iterator, Optional, Tuple

from .config import DEFAULT_PLACEHOLDER
from .models import TreeNode

logger = logging.getLogger(__name__)

# fixed timestamp so the same tree always produces the same bytes
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
DIR_MODE = 0o40755
FILE_MODE = 0o100644


def iter_entries(node: TreeNode, path: str = "") -> Iterator[Tuple[str, bool]]:
    """
    Yield ``(path, is_dir)`` for every node below ``node``, depth first.

    Directory paths carry the trailing ``/`` zip uses for folder entries.
    """
    for child in node.children:
        current = f"{path}/{child.name}" if path else child.name
        if child.is_file:
            yield current, False
        else:
            yield current + "/", True
            yield from iter_entries(child, current)


def collect_entries(root: TreeNode, placeholder: str = DEFAULT_PLACEHOLDER) -> Dict[str, Optional[str]]:
    """
    Map archive path -> content (None for folders).

    Colliding paths are not renamed: a later entry overwrites an earlier one
    and keeps its position.
    """
    entries: Dict[str, Optional[str]] = {}
    for path, is_dir in iter_entries(root):
        entries[path] = None if is_dir else placeholder
    return entries


def _zip_info(path: str, is_dir: bool) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(path, date_time=ZIP_EPOCH)
    if is_dir:
        info.compress_type = zipfile.ZIP_STORED
        info.external_attr = (DIR_MODE << 16) | 0x10  # MS-DOS directory flag
    else:
        info.compress_type = zipfile.ZIP_DEFLATED
        info.external_attr = FILE_MODE << 16
    return info


def build_archive(root: TreeNode, placeholder: str = DEFAULT_PLACEHOLDER) -> bytes:
    """Materialize the tree under ``root`` as deflated zip bytes."""
    entries = collect_entries(root, placeholder)

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for path, content in entries.items():
            if content is None:
                zf.writestr(_zip_info(path, True), b"")
            else:
                zf.writestr(_zip_info(path, False), content.encode("utf-8"))

    data = buffer.getvalue()
    logger.info("Built archive: %d entries, %d bytes", len(entries), len(data))
    return data
