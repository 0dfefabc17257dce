"""Document codec interfaces."""

from .base import DocumentCodec
from .pymupdf import PyMuPDFCodec

__all__ = ["DocumentCodec", "PyMuPDFCodec"]
