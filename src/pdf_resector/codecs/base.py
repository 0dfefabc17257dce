"""Base interface for document codecs."""

from abc import ABC, abstractmethod
from typing import Any


class DocumentCodec(ABC):
    """Opaque capability for loading, copying and serializing documents.

    Document handles are whatever the implementation returns; callers never
    look inside them.
    """

    @abstractmethod
    def load(self, data: bytes) -> Any:
        """Decode a document from bytes.

        Args:
            data: Raw file content

        Returns:
            Document handle
        """
        pass

    @abstractmethod
    def page_count(self, doc: Any) -> int:
        """Number of pages in a document handle."""
        pass

    @abstractmethod
    def create_empty(self) -> Any:
        """Create a new document with no pages."""
        pass

    @abstractmethod
    def copy_page(self, source: Any, target: Any, index: int) -> None:
        """Copy page ``index`` (0-indexed) of ``source`` onto the end of ``target``.

        The source document is left unchanged.
        """
        pass

    @abstractmethod
    def serialize(self, doc: Any) -> bytes:
        """Encode a document handle to bytes."""
        pass

    def close(self, doc: Any) -> None:
        """Release resources held by a document handle."""
        pass
