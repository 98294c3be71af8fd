# treezip/__init__.py
"""Turn indented tree text into a zip of placeholder files."""

__version__ = "0.1.0"
