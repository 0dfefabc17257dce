"""Filesystem adapters."""

from .base import FileStat, FileSystem
from .local import LocalFileSystem

__all__ = ["FileStat", "FileSystem", "LocalFileSystem"]
