import fitz  # PyMuPDF
import pytest
from typer.testing import CliRunner

from pdf_resector.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for var in ("SANDBOX_ROOT", "DEFAULT_OUTPUT_FOLDER", "MAX_PDF_SIZE", "TEMP_SUFFIX", "LOG_LEVEL"):
        monkeypatch.delenv(f"PDF_RESECTOR_{var}", raising=False)


def test_split_to_default_folder(sandbox, book):
    result = runner.invoke(app, ["split", book, "3", "5", "--name", "part", "--root", str(sandbox)])

    assert result.exit_code == 0, result.output
    assert "Successfully created split-pdfs/part.pdf" in result.output
    with fitz.open(sandbox / "split-pdfs" / "part.pdf") as doc:
        assert len(doc) == 3


def test_split_next_to_source(sandbox, book):
    result = runner.invoke(
        app, ["split", book, "1", "1", "-n", "first", "-o", "", "-r", str(sandbox)]
    )
    assert result.exit_code == 0, result.output
    assert (sandbox / "docs" / "first.pdf").exists()


def test_split_default_folder_from_environment(sandbox, book, monkeypatch):
    monkeypatch.setenv("PDF_RESECTOR_DEFAULT_OUTPUT_FOLDER", "exports")
    result = runner.invoke(app, ["split", book, "1", "1", "-n", "first", "-r", str(sandbox)])
    assert result.exit_code == 0, result.output
    assert (sandbox / "exports" / "first.pdf").exists()


def test_split_rejects_traversal(sandbox, book):
    result = runner.invoke(
        app, ["split", book, "1", "1", "-n", "passwd", "-o", "../../etc", "-r", str(sandbox)]
    )
    assert result.exit_code == 1
    assert "Output path must be within the sandbox" in result.output


def test_split_bad_range(sandbox, book):
    result = runner.invoke(app, ["split", book, "4", "20", "-n", "x", "-r", str(sandbox)])
    assert result.exit_code == 1
    assert "exceeds total pages" in result.output
    assert not (sandbox / "split-pdfs").exists()


def test_split_conflict_cancelled(sandbox, book):
    existing = sandbox / "split-pdfs" / "part.pdf"
    existing.parent.mkdir()
    existing.write_bytes(b"previous")

    result = runner.invoke(
        app, ["split", book, "1", "1", "-n", "part", "-r", str(sandbox)], input="n\n"
    )

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert "Cancelled" in result.output
    assert existing.read_bytes() == b"previous"


def test_split_conflict_confirmed(sandbox, book):
    existing = sandbox / "split-pdfs" / "part.pdf"
    existing.parent.mkdir()
    existing.write_bytes(b"previous")

    result = runner.invoke(
        app, ["split", book, "1", "1", "-n", "part", "-r", str(sandbox)], input="y\n"
    )

    assert result.exit_code == 0, result.output
    assert "Replaced existing file" in result.output
    assert existing.read_bytes() != b"previous"


def test_split_yes_skips_prompt(sandbox, book):
    existing = sandbox / "split-pdfs" / "part.pdf"
    existing.parent.mkdir()
    existing.write_bytes(b"previous")

    result = runner.invoke(app, ["split", book, "1", "1", "-n", "part", "-y", "-r", str(sandbox)])

    assert result.exit_code == 0, result.output
    assert existing.read_bytes() != b"previous"


def test_info(sandbox, book):
    result = runner.invoke(app, ["info", book, "-r", str(sandbox)])
    assert result.exit_code == 0, result.output
    assert "10 pages" in result.output


def test_info_source_name_with_colon(sandbox, make_pdf):
    source = make_pdf("notes/Meeting 10:30.pdf", 3)
    result = runner.invoke(app, ["info", source, "-r", str(sandbox)])
    assert result.exit_code == 0, result.output
    assert "3 pages" in result.output


def test_info_missing_file(sandbox):
    result = runner.invoke(app, ["info", "nope.pdf", "-r", str(sandbox)])
    assert result.exit_code == 1
    assert "Error loading PDF" in result.output


def test_check(sandbox, book):
    assert "already exists" in runner.invoke(app, ["check", book, "-r", str(sandbox)]).output
    assert "is free" in runner.invoke(app, ["check", "new.pdf", "-r", str(sandbox)]).output

    result = runner.invoke(app, ["check", "../x.pdf", "-r", str(sandbox)])
    assert result.exit_code == 1
    assert "Invalid path" in result.output


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "pdf-resector v0.1.0" in result.output
