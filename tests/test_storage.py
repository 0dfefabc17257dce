import pytest

from pdf_resector.errors import PathTraversalError
from pdf_resector.storage import LocalFileSystem


def test_root_is_created(tmp_path):
    fs = LocalFileSystem(tmp_path / "new" / "root")
    assert fs.root.is_dir()


def test_binary_round_trip(fs, sandbox):
    fs.write_binary("a.bin", b"\x00\x01data")
    assert fs.read_binary("a.bin") == b"\x00\x01data"
    assert fs.stat("a.bin").size == 6
    assert (sandbox / "a.bin").exists()


def test_exists_and_remove(fs):
    fs.write_binary("a.bin", b"x")
    assert fs.exists("a.bin")
    fs.remove("a.bin")
    assert not fs.exists("a.bin")


def test_mkdir_existing_raises_file_exists(fs):
    fs.mkdir("d")
    assert fs.is_dir("d")
    with pytest.raises(FileExistsError):
        fs.mkdir("d")


def test_missing_file_raises_os_error(fs):
    with pytest.raises(FileNotFoundError):
        fs.read_binary("missing.pdf")


@pytest.mark.parametrize("path", ["../escape.bin", "a/../../escape.bin"])
def test_paths_cannot_leave_root(fs, path):
    with pytest.raises(PathTraversalError):
        fs.write_binary(path, b"x")
    assert not (fs.root.parent / "escape.bin").exists()


def test_leading_slash_is_relative_to_root(fs, sandbox):
    fs.write_binary("/a.bin", b"x")
    assert (sandbox / "a.bin").exists()
