"""PyMuPDF implementation of the document codec."""

import fitz  # PyMuPDF

from .base import DocumentCodec


class PyMuPDFCodec(DocumentCodec):
    """Document codec backed by PyMuPDF."""

    def __init__(self, garbage: int = 3, deflate: bool = True):
        """Initialize codec.

        Args:
            garbage: PyMuPDF garbage collection level used when saving
            deflate: Whether to compress streams when saving
        """
        self.garbage = garbage
        self.deflate = deflate

    def load(self, data: bytes) -> fitz.Document:
        doc = fitz.open(stream=data, filetype="pdf")
        if not doc.is_pdf:
            doc.close()
            raise ValueError("Data is not a PDF document")
        if doc.page_count == 0:
            doc.close()
            raise ValueError("PDF has no pages")
        return doc

    def page_count(self, doc: fitz.Document) -> int:
        return len(doc)

    def create_empty(self) -> fitz.Document:
        return fitz.open()

    def copy_page(self, source: fitz.Document, target: fitz.Document, index: int) -> None:
        target.insert_pdf(source, from_page=index, to_page=index)

    def serialize(self, doc: fitz.Document) -> bytes:
        return doc.tobytes(garbage=self.garbage, deflate=self.deflate)

    def close(self, doc: fitz.Document) -> None:
        doc.close()
