from pathlib import Path

import pytest

from mountfs.services.local_fs import LocalFileSystem


def test_local_fs_uses_literal_paths(tmp_path: Path):
    fs = LocalFileSystem()
    target = str(tmp_path / "x" / "y")
    fs.ensure_directory_exists(target)
    fs.write_all_text(target + "/z.txt", "z")

    assert fs.read_all_text(target + "/z.txt") == "z"
    assert fs.list(target) == [str(Path(target) / "z.txt")]
    assert fs.list_directories(str(tmp_path / "x")) == [target]
    assert fs.get_absolute_path(target) == target
    assert fs.get_file_info(target + "/z.txt").full_name == str(Path(target) / "z.txt")


def test_local_fs_errors_surface_unchanged(tmp_path: Path):
    fs = LocalFileSystem()
    with pytest.raises(FileNotFoundError):
        fs.delete(str(tmp_path / "missing.txt"))
    with pytest.raises(FileNotFoundError):
        fs.copy(str(tmp_path / "missing.txt"), str(tmp_path / "dst.txt"))
