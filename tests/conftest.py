from pathlib import Path

import fitz  # PyMuPDF
import pytest

from pdf_resector.codecs import PyMuPDFCodec
from pdf_resector.storage import LocalFileSystem


def write_pdf(path: Path, pages: int) -> Path:
    """Write a PDF whose page N carries the text "Page N"."""
    doc = fitz.open()
    for page_num in range(1, pages + 1):
        page = doc.new_page()
        page.insert_text((72, 72), f"Page {page_num}")
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(path))
    doc.close()
    return path


class FlakyFileSystem(LocalFileSystem):
    """LocalFileSystem that can fail or hide chosen paths."""

    def __init__(self, root: Path):
        super().__init__(root)
        self.failures: dict[tuple[str, str], list] = {}
        self.hidden: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    def fail(
        self, op: str, path: str, error: Exception, partial: bool = False, times: int = 1
    ) -> None:
        """Make the next ``times`` calls of ``op`` on ``path`` raise ``error``.

        With ``partial`` a write stores half of the data before raising.
        """
        self.failures[(op, path)] = [error, partial, times]

    def _check(self, op: str, path: str, data: bytes = b"") -> None:
        self.calls.append((op, path))
        failure = self.failures.get((op, path))
        if failure:
            error, partial, remaining = failure
            if remaining <= 1:
                del self.failures[(op, path)]
            else:
                failure[2] = remaining - 1
            if partial and op == "write_binary":
                super().write_binary(path, data[: len(data) // 2])
            raise error

    def read_binary(self, path):
        self._check("read_binary", path)
        return super().read_binary(path)

    def write_binary(self, path, data):
        self._check("write_binary", path, data)
        super().write_binary(path, data)

    def exists(self, path):
        self._check("exists", path)
        if path in self.hidden:
            return False
        return super().exists(path)

    def remove(self, path):
        self._check("remove", path)
        super().remove(path)

    def mkdir(self, path):
        self._check("mkdir", path)
        super().mkdir(path)

    def stat(self, path):
        self._check("stat", path)
        return super().stat(path)


class RecordingCodec(PyMuPDFCodec):
    """Codec that remembers the last serialized bytes."""

    def __init__(self):
        super().__init__()
        self.serialized: list[bytes] = []

    def serialize(self, doc):
        data = super().serialize(doc)
        self.serialized.append(data)
        return data


@pytest.fixture
def sandbox(tmp_path) -> Path:
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def fs(sandbox) -> LocalFileSystem:
    return LocalFileSystem(sandbox)


@pytest.fixture
def flaky_fs(sandbox) -> FlakyFileSystem:
    return FlakyFileSystem(sandbox)


@pytest.fixture
def codec() -> RecordingCodec:
    return RecordingCodec()


@pytest.fixture
def book(sandbox) -> str:
    """A 10-page source PDF at docs/book.pdf inside the sandbox."""
    write_pdf(sandbox / "docs" / "book.pdf", pages=10)
    return "docs/book.pdf"


@pytest.fixture
def small_doc(codec):
    """A two-page in-memory document."""
    doc = codec.create_empty()
    for page_num in (1, 2):
        doc.new_page().insert_text((72, 72), f"Page {page_num}")
    yield doc
    doc.close()


@pytest.fixture
def make_pdf(sandbox):
    """Factory writing a PDF with ``pages`` pages at a sandbox-relative path."""
    def _make(path: str, pages: int) -> str:
        write_pdf(sandbox / path, pages)
        return path
    return _make
