# mountfs/services/write_strategy.py
import shutil
from typing import BinaryIO, Protocol


class WriteStrategy(Protocol):
    def write(self, path: str, content: BinaryIO) -> None: ...


class DefaultWriteStrategy:
    """Copy the stream into the file at `path`, replacing what was there."""

    def write(self, path: str, content: BinaryIO) -> None:
        with open(path, "wb") as f:
            shutil.copyfileobj(content, f)
