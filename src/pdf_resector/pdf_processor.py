"""PDF loading and page-range extraction."""

import logging
from typing import Any, Callable, Optional

from .codecs import DocumentCodec, PyMuPDFCodec
from .errors import LoadError, PageRangeError, SizeExceededError, StorageIOError
from .path_sanitizer import normalize_source_path
from .safety import DEFAULT_MAX_PDF_SIZE
from .schemas import ProcessingProgress
from .storage import FileSystem

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProcessingProgress], None]


class PDFProcessor:
    """Loads source PDFs from the sandbox and copies page ranges out of them."""

    def __init__(
        self,
        fs: FileSystem,
        codec: Optional[DocumentCodec] = None,
        max_pdf_size: int = DEFAULT_MAX_PDF_SIZE,
    ):
        """Initialize PDF processor.

        Args:
            fs: Filesystem adapter rooted at the sandbox
            codec: Document codec (defaults to PyMuPDF)
            max_pdf_size: Source documents above this many bytes are rejected
        """
        self.fs = fs
        self.codec = codec or PyMuPDFCodec()
        self.max_pdf_size = max_pdf_size
        self.progress_callback: Optional[ProgressCallback] = None

    def set_progress_callback(self, callback: Optional[ProgressCallback]) -> None:
        self.progress_callback = callback

    def update_progress(self, current: int, total: int, status: str) -> None:
        if self.progress_callback:
            self.progress_callback(ProcessingProgress(current=current, total=total, status=status))

    def load(self, path: str) -> Any:
        """Load a source PDF from the sandbox.

        Args:
            path: Sandbox-relative path to the PDF

        Returns:
            Codec document handle

        Raises:
            PathTraversalError: If the path escapes the sandbox
            SizeExceededError: If the file is larger than max_pdf_size
            StorageIOError: If the file cannot be read
            LoadError: If the bytes are not a readable PDF
        """
        self.update_progress(0, 100, "Loading PDF file...")
        source = normalize_source_path(path)

        try:
            size = self.fs.stat(source).size
        except OSError as e:
            raise StorageIOError(f"Failed to load PDF {source}: {e}") from e

        if size > self.max_pdf_size:
            raise SizeExceededError(
                f"File size ({round(size / 1024 / 1024)}MB) exceeds maximum allowed "
                f"size ({round(self.max_pdf_size / 1024 / 1024)}MB)",
                size=size,
                limit=self.max_pdf_size,
            )

        try:
            data = self.fs.read_binary(source)
        except OSError as e:
            raise StorageIOError(f"Failed to load PDF {source}: {e}") from e

        try:
            doc = self.codec.load(data)
        except Exception as e:
            raise LoadError(f"Failed to load PDF {source}: {e}") from e

        logger.debug("Loaded %s (%d bytes, %d pages)", source, size, self.codec.page_count(doc))
        self.update_progress(100, 100, "PDF loaded successfully")
        return doc

    def page_count(self, doc: Any) -> int:
        """Get the total number of pages in a loaded document."""
        return self.codec.page_count(doc)

    def check_range(self, doc: Any, start_page: int, end_page: int) -> None:
        """Check a 1-indexed inclusive page range against a document.

        Raises:
            PageRangeError: Naming the bound that failed
        """
        total = self.page_count(doc)
        if start_page < 1:
            raise PageRangeError(f"Start page must be >= 1, got {start_page}", bound="start")
        if end_page > total:
            raise PageRangeError(
                f"End page {end_page} exceeds total pages {total}", bound="end"
            )
        if start_page > end_page:
            raise PageRangeError(
                f"Start page {start_page} > end page {end_page}", bound="order"
            )

    def extract_range(self, doc: Any, start_page: int, end_page: int) -> Any:
        """Copy pages into a new document.

        Args:
            doc: Source document handle (not modified)
            start_page: First page (1-indexed, inclusive)
            end_page: Last page (1-indexed, inclusive)

        Returns:
            New document handle with the pages in original order

        Raises:
            PageRangeError: If the range is invalid for the document
        """
        self.check_range(doc, start_page, end_page)

        page_indexes = list(range(start_page - 1, end_page))
        self.update_progress(0, len(page_indexes), "Extracting pages...")

        new_doc = self.codec.create_empty()
        try:
            for processed, page_index in enumerate(page_indexes, 1):
                self.codec.copy_page(doc, new_doc, page_index)
                self.update_progress(processed, len(page_indexes), f"Copying page {page_index + 1}...")
        except Exception:
            self.codec.close(new_doc)
            raise

        return new_doc
