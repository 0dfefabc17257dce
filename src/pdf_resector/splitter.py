"""Split orchestration: load, extract, prepare the output path and persist."""

import logging
from pathlib import Path
from typing import Optional

from .codecs import DocumentCodec, PyMuPDFCodec
from .config import Settings
from .errors import PageRangeError, PathTraversalError
from .path_sanitizer import contains_traversal, sanitize_filename, validate
from .pdf_processor import PDFProcessor, ProgressCallback
from .persister import DocumentPersister
from .safety import DEFAULT_MAX_PDF_SIZE, SafetyGate
from .schemas import PersistenceResult
from .storage import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


def build_output_path(source_path: str, output_directory: str, output_filename: str) -> str:
    """Combine the requested directory and filename into a candidate path.

    A blank directory means the folder containing the source PDF. A ``.pdf``
    extension is appended when missing.

    Args:
        source_path: Sandbox-relative path of the source PDF
        output_directory: Requested output directory (may be blank)
        output_filename: Requested output filename

    Returns:
        Candidate sandbox-relative output path (not yet validated)
    """
    if not output_filename.lower().endswith(".pdf"):
        output_filename = f"{output_filename}.pdf"

    if output_directory.strip():
        folder = output_directory.strip().strip("/")
    else:
        folder = source_path.strip("/").rpartition("/")[0]

    return f"{folder}/{output_filename}" if folder else output_filename


class PDFSplitter:
    """Extracts a page range from a sandboxed PDF into a new PDF."""

    def __init__(
        self,
        fs: FileSystem,
        codec: Optional[DocumentCodec] = None,
        max_pdf_size: int = DEFAULT_MAX_PDF_SIZE,
        temp_suffix: str = ".temp",
    ):
        """Initialize splitter.

        Args:
            fs: Filesystem adapter rooted at the sandbox
            codec: Document codec (defaults to PyMuPDF)
            max_pdf_size: Byte ceiling for source documents
            temp_suffix: Suffix of the temp file written before the final file
        """
        self.fs = fs
        self.codec = codec or PyMuPDFCodec()
        self.processor = PDFProcessor(fs, self.codec, max_pdf_size=max_pdf_size)
        self.safety = SafetyGate(fs)
        self.persister = DocumentPersister(fs, self.codec, temp_suffix=temp_suffix)

    @classmethod
    def from_settings(cls, settings: Settings, root: Optional[Path] = None) -> "PDFSplitter":
        """Create a splitter from application settings.

        Args:
            settings: Application settings
            root: Sandbox root override (defaults to settings.sandbox_root)
        """
        fs = LocalFileSystem(root or settings.sandbox_root)
        return cls(
            fs,
            max_pdf_size=settings.max_pdf_size,
            temp_suffix=settings.temp_suffix,
        )

    def set_progress_callback(self, callback: Optional[ProgressCallback]) -> None:
        self.processor.set_progress_callback(callback)

    def page_count(self, source_path: str) -> int:
        """Load a source PDF and return its page count."""
        doc = self.processor.load(source_path)
        try:
            return self.processor.page_count(doc)
        finally:
            self.codec.close(doc)

    def check_output_conflict(self, candidate_final_path: str) -> bool:
        """Check whether a file already exists at an output path.

        The path is validated, including containment under the sandbox root,
        but no directories are created.

        Raises:
            PathTraversalError: If the path is not a valid sandbox path
        """
        return self.fs.exists(validate(candidate_final_path, root=self.fs.root).path)

    def output_path_for(self, source_path: str, output_directory: str, output_filename: str) -> str:
        """Build the candidate output path for a split request.

        Applies the textual traversal guard to the raw path, then sanitizes
        the filename. Nothing is created.

        Raises:
            PathTraversalError: If the raw path contains traversal sequences
        """
        candidate = build_output_path(source_path, output_directory, output_filename.strip())
        logger.debug("Constructed output path: %s", candidate)
        if contains_traversal(candidate):
            raise PathTraversalError(
                "Output path must be within the sandbox", candidate=candidate
            )

        folder, _, filename = candidate.rpartition("/")
        filename = sanitize_filename(filename)
        return f"{folder}/{filename}" if folder else filename

    def split_document(
        self,
        source_path: str,
        start_page: int,
        end_page: int,
        output_directory: str,
        output_filename: str,
        overwrite: Optional[bool] = False,
    ) -> PersistenceResult:
        """Extract ``[start_page, end_page]`` from a source PDF into a new file.

        Args:
            source_path: Sandbox-relative path of the source PDF
            start_page: First page (1-indexed, inclusive)
            end_page: Last page (1-indexed, inclusive)
            output_directory: Output directory; blank for the source's folder
            output_filename: Output filename; ``.pdf`` is appended if missing
            overwrite: Decision for the conflict gate when the output exists

        Returns:
            Result with the final sandbox-relative path

        Raises:
            ValueError: If the filename is blank
            PathTraversalError: If the output path contains traversal sequences
            PageRangeError: If the page range is invalid
            SizeExceededError: If the source is over the size ceiling
            LoadError: If the source cannot be decoded
            SafetyError: If the output path cannot be prepared
            ConflictError: If the output exists and overwrite is not True
            SerializationError, StorageIOError, VerificationError: On persist failures
        """
        if not output_filename.strip():
            raise ValueError("Please enter an output filename")
        if start_page < 1:
            raise PageRangeError(f"Start page must be >= 1, got {start_page}", bound="start")
        if start_page > end_page:
            raise PageRangeError(f"Start page {start_page} > end page {end_page}", bound="order")

        candidate = self.output_path_for(source_path, output_directory, output_filename)

        doc = self.processor.load(source_path)
        try:
            new_doc = self.processor.extract_range(doc, start_page, end_page)
        finally:
            self.codec.close(doc)

        try:
            final_path = self.safety.prepare(candidate)
            self.safety.resolve_conflict(final_path, overwrite)
            self.processor.update_progress(0, 100, "Saving PDF...")
            result = self.persister.persist(new_doc, final_path)
            self.processor.update_progress(100, 100, "PDF saved successfully")
        finally:
            self.codec.close(new_doc)

        logger.info(
            "Extracted pages %d-%d from %s to %s", start_page, end_page, source_path, result.path
        )
        return result
