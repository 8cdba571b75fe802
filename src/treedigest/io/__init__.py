"""Filesystem collaborators: the tree walker and the file reader."""

from .reader import read_file
from .walker import walk

__all__ = ["read_file", "walk"]
