# mountfs/services/sandbox.py
from __future__ import annotations
import logging
import os
import re
import threading
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Union

from mountfs.errors import PathTraversalError
from mountfs.services.local_fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

DRIVE_RE = re.compile(r"^[A-Za-z]:")
UNC_PREFIXES = ("//", "\\\\")


class TeardownPolicy(str, Enum):
    NONE = "none"
    DELETE_ROOT = "delete_root"


class PathSandbox:
    """
    Translate logical paths into physical paths under a mount root.

    - No mount point: pass-through, logical == physical.
    - With a mount point: every translated path stays inside the root
      (".." segments, rooted, UNC and drive-letter inputs included),
      otherwise PathTraversalError.
    - The root is created lazily on first use, exactly once across threads.
    - teardown() applies the TeardownPolicy when the owning scope ends.
    """

    def __init__(
        self,
        mount_point: Union[str, Path, None] = None,
        teardown_policy: TeardownPolicy = TeardownPolicy.NONE,
        raw: Optional[FileSystem] = None,
    ):
        self._mount_point = str(mount_point) if mount_point else ""
        self._teardown_policy = TeardownPolicy(teardown_policy)
        self._raw = raw or LocalFileSystem()
        self._mount_lock = threading.Lock()
        self._mounted = False

    @property
    def mount_point(self) -> str:
        return self._mount_point

    @property
    def teardown_policy(self) -> TeardownPolicy:
        return self._teardown_policy

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    # ---------- Public API ----------

    def translate(self, logical_path: str) -> str:
        if not self._mount_point:
            return logical_path

        self.ensure_mounted()

        relative = logical_path.replace("\\", "/").lstrip("/")
        if DRIVE_RE.match(relative):
            # "C:/x" would otherwise join as a second root
            relative = relative.replace(":", "_")

        root = self._resolved_root()
        candidate = (Path(self._mount_point) / relative).resolve()

        if not candidate.is_relative_to(root):
            logger.warning("path traversal rejected path=%r mount=%s", logical_path, root)
            raise PathTraversalError(logical_path, self._mount_point)
        return str(candidate)

    def check_pattern(self, pattern: str) -> str:
        """
        Reject listing patterns that could match outside the listed directory:
        rooted or UNC patterns, drive markers and ".." segments.
        """
        if not self._mount_point:
            return pattern

        normalized = pattern.replace("\\", "/")
        segments = normalized.split("/")
        if normalized.startswith("/") or DRIVE_RE.match(normalized) or ".." in segments:
            logger.warning("listing pattern rejected pattern=%r mount=%s", pattern, self._mount_point)
            raise PathTraversalError(pattern, self._mount_point)
        return normalized

    def contains(self, physical_path: str) -> bool:
        if not self._mount_point:
            return True
        return Path(physical_path).resolve().is_relative_to(self._resolved_root())

    def ensure_mounted(self) -> None:
        if self._mounted or not self._mount_point:
            return

        with self._mount_lock:
            if self._mounted:
                return
            if not self._raw.exists_directory(self._mount_point):
                self._raw.create_directory(self._mount_point)
                logger.info("mount root created at %s", self._mount_point)
            self._mounted = True

    def teardown(self) -> None:
        if not self._mount_point or not self._raw.exists_directory(self._mount_point):
            return

        if self._teardown_policy is TeardownPolicy.DELETE_ROOT:
            self._raw.delete_directory(self._mount_point, recursive=True)
            self._mounted = False
            logger.info("mount root deleted at %s", self._mount_point)

    def reverse_prefix(self, directory_path: str) -> str:
        if not self._mount_point:
            return ""
        return os.sep if directory_path.startswith(UNC_PREFIXES) else ""

    def to_logical(self, directory_path: str, physical_entries: Iterable[str]) -> List[str]:
        """
        Turn physical listing results back into logical paths.

        Every entry starts with the resolved root because the listed directory
        itself passed translate(), so a fixed offset is enough.
        """
        if not self._mount_point:
            return list(physical_entries)

        prefix = self.reverse_prefix(directory_path)
        root = str(self._resolved_root())
        offset = len(root) if root.endswith(os.sep) else len(root) + 1
        return [f"{prefix}{entry[offset:]}" for entry in physical_entries]

    # ---------- Scope ----------

    def __enter__(self) -> "PathSandbox":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()

    # ---------- Internals ----------

    def _resolved_root(self) -> Path:
        return Path(self._mount_point).resolve()
