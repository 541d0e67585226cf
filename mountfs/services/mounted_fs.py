# mountfs/services/mounted_fs.py
from __future__ import annotations
import dataclasses
from typing import BinaryIO, Callable, Iterable, List, Optional

from mountfs.services.file_info import FileInfo
from mountfs.services.local_fs import FileSystem, LocalFileSystem
from mountfs.services.sandbox import PathSandbox
from mountfs.services.write_strategy import WriteStrategy


class MountedFileSystem:
    """
    File system whose paths are logical: each one is translated by the
    PathSandbox before the raw file system sees it. Without a mount point
    this behaves exactly like the raw file system.
    """

    def __init__(self, sandbox: PathSandbox, raw: Optional[FileSystem] = None):
        self.sandbox = sandbox
        self.raw = raw or LocalFileSystem()

    def _m(self, path: str) -> str:
        return self.sandbox.translate(path)

    # ---------- Read ----------

    def read(self, path: str) -> BinaryIO:
        return self.raw.read(self._m(path))

    def read_shared(self, path: str) -> BinaryIO:
        return self.raw.read_shared(self._m(path))

    def read_all_text(self, path: str) -> str:
        return self.raw.read_all_text(self._m(path))

    # ---------- Write ----------

    def write(self, path: str) -> BinaryIO:
        return self.raw.write(self._m(path))

    def write_all_text(self, path: str, content: str) -> None:
        self.raw.write_all_text(self._m(path), content)

    def write_all_lines(self, path: str, lines: Iterable[str]) -> None:
        self.raw.write_all_lines(self._m(path), lines)

    def write_with(self, path: str, content: BinaryIO, strategy: Optional[WriteStrategy] = None) -> None:
        self.raw.write_with(self._m(path), content, strategy)

    async def write_stream_async(self, stream: BinaryIO, path: str) -> None:
        await self.raw.write_stream_async(stream, self._m(path))

    # ---------- Queries ----------

    def exists(self, path: str) -> bool:
        return self.raw.exists(self._m(path))

    def exists_directory(self, path: str) -> bool:
        return self.raw.exists_directory(self._m(path))

    def get_file_info(self, path: str) -> FileInfo:
        return dataclasses.replace(self.raw.get_file_info(self._m(path)), full_name=path)

    def get_absolute_path(self, path: str) -> str:
        return self._m(path)

    def list(self, path: str, pattern: Optional[str] = None) -> List[str]:
        if pattern:
            pattern = self.sandbox.check_pattern(pattern)
        return self._list_contents(path, lambda d: self.raw.list(d, pattern))

    def list_directories(self, path: str) -> List[str]:
        return self._list_contents(path, self.raw.list_directories)

    def _list_contents(self, path: str, lister: Callable[[str], List[str]]) -> List[str]:
        entries = [e for e in lister(self._m(path)) if self.sandbox.contains(e)]
        return self.sandbox.to_logical(path, entries)

    # ---------- Mutations ----------

    def create_directory(self, path: str) -> None:
        self.raw.create_directory(self._m(path))

    def ensure_directory_exists(self, path: str) -> None:
        if not self.exists_directory(path):
            self.create_directory(path)

    def move(self, path: str, destination: str, overwrite: bool = True) -> None:
        self.raw.move(self._m(path), self._m(destination), overwrite)

    def copy(self, path: str, destination: str, overwrite: bool = True) -> None:
        self.raw.copy(self._m(path), self._m(destination), overwrite)

    def delete(self, path: str) -> None:
        self.raw.delete(self._m(path))

    def delete_directory(self, path: str, recursive: bool = False) -> None:
        self.raw.delete_directory(self._m(path), recursive)

    # ---------- Scope ----------

    def close(self) -> None:
        self.sandbox.teardown()

    def __enter__(self) -> "MountedFileSystem":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
