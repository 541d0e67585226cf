# mountfs/services/local_fs.py
from __future__ import annotations
import asyncio
import os
import shutil
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Protocol

from mountfs.services.file_info import FileInfo
from mountfs.services.write_strategy import DefaultWriteStrategy, WriteStrategy


class FileSystem(Protocol):
    """
    Operation set shared by the local (pass-through) and mounted file systems.
    """

    def read(self, path: str) -> BinaryIO: ...
    def read_shared(self, path: str) -> BinaryIO: ...
    def read_all_text(self, path: str) -> str: ...
    def write(self, path: str) -> BinaryIO: ...
    def write_all_text(self, path: str, content: str) -> None: ...
    def write_all_lines(self, path: str, lines: Iterable[str]) -> None: ...
    def write_with(self, path: str, content: BinaryIO, strategy: Optional[WriteStrategy] = None) -> None: ...
    async def write_stream_async(self, stream: BinaryIO, path: str) -> None: ...
    def exists(self, path: str) -> bool: ...
    def exists_directory(self, path: str) -> bool: ...
    def create_directory(self, path: str) -> None: ...
    def ensure_directory_exists(self, path: str) -> None: ...
    def move(self, path: str, destination: str, overwrite: bool = True) -> None: ...
    def copy(self, path: str, destination: str, overwrite: bool = True) -> None: ...
    def delete(self, path: str) -> None: ...
    def delete_directory(self, path: str, recursive: bool = False) -> None: ...
    def list(self, path: str, pattern: Optional[str] = None) -> List[str]: ...
    def list_directories(self, path: str) -> List[str]: ...
    def get_file_info(self, path: str) -> FileInfo: ...
    def get_absolute_path(self, path: str) -> str: ...


class LocalFileSystem:
    """
    Host file system operating on literal paths. No translation, no checks.
    Errors (FileNotFoundError, PermissionError, ...) surface unchanged.
    """

    # ---------- Read ----------

    def read(self, path: str) -> BinaryIO:
        return open(path, "rb")

    def read_shared(self, path: str) -> BinaryIO:
        # no share-mode locking on POSIX
        return open(path, "rb")

    def read_all_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    # ---------- Write ----------

    def write(self, path: str) -> BinaryIO:
        return open(path, "wb")

    def write_all_text(self, path: str, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")

    def write_all_lines(self, path: str, lines: Iterable[str]) -> None:
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")

    def write_with(self, path: str, content: BinaryIO, strategy: Optional[WriteStrategy] = None) -> None:
        (strategy or DefaultWriteStrategy()).write(path, content)

    async def write_stream_async(self, stream: BinaryIO, path: str) -> None:
        await asyncio.to_thread(DefaultWriteStrategy().write, path, stream)

    # ---------- Queries ----------

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def exists_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def get_file_info(self, path: str) -> FileInfo:
        return FileInfo.from_path(path)

    def get_absolute_path(self, path: str) -> str:
        return os.path.abspath(path)

    def list(self, path: str, pattern: Optional[str] = None) -> List[str]:
        base = Path(path)
        candidates = base.glob(pattern) if pattern else base.iterdir()
        return sorted(str(p) for p in candidates if p.is_file())

    def list_directories(self, path: str) -> List[str]:
        base = Path(path)
        return sorted(str(p) for p in base.iterdir() if p.is_dir())

    # ---------- Mutations ----------

    def create_directory(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def ensure_directory_exists(self, path: str) -> None:
        if not self.exists_directory(path):
            self.create_directory(path)

    def move(self, path: str, destination: str, overwrite: bool = True) -> None:
        if os.path.isdir(destination):
            raise IsADirectoryError(destination)
        if os.path.isfile(destination):
            if not overwrite:
                raise FileExistsError(destination)
            os.remove(destination)
        shutil.move(path, destination)

    def copy(self, path: str, destination: str, overwrite: bool = True) -> None:
        if not overwrite and os.path.exists(destination):
            raise FileExistsError(destination)
        shutil.copy2(path, destination)

    def delete(self, path: str) -> None:
        os.remove(path)

    def delete_directory(self, path: str, recursive: bool = False) -> None:
        if recursive:
            shutil.rmtree(path)
        else:
            os.rmdir(path)
