# mountfs/services/file_info.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def _utc(ts: float) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc)


@dataclass(frozen=True)
class FileInfo:
    """
    Point-in-time metadata for one file.

    `full_name` is whatever path the caller should see: the physical path for
    the local file system, the logical path when read through a mount.
    Timestamps are UTC and None when the file does not exist.
    """
    name: str
    full_name: str
    length: int
    exists: bool
    creation_time_utc: Optional[datetime] = None
    last_access_time_utc: Optional[datetime] = None
    last_write_time_utc: Optional[datetime] = None

    @classmethod
    def from_path(cls, path: str, display_path: Optional[str] = None) -> "FileInfo":
        p = Path(path)
        full_name = display_path if display_path is not None else str(p.absolute())
        try:
            st = p.stat()
        except FileNotFoundError:
            return cls(name=p.name, full_name=full_name, length=0, exists=False)

        if not p.is_file():
            return cls(name=p.name, full_name=full_name, length=0, exists=False)

        # st_birthtime only exists on some platforms; st_ctime is the fallback
        created = getattr(st, "st_birthtime", st.st_ctime)
        return cls(
            name=p.name,
            full_name=full_name,
            length=st.st_size,
            exists=True,
            creation_time_utc=_utc(created),
            last_access_time_utc=_utc(st.st_atime),
            last_write_time_utc=_utc(st.st_mtime),
        )

    def to_dict(self) -> Dict[str, Any]:
        def iso(dt: Optional[datetime]) -> Optional[str]:
            return dt.isoformat(timespec="milliseconds") if dt else None

        return {
            "name": self.name,
            "full_name": self.full_name,
            "length": self.length,
            "exists": self.exists,
            "creation_time_utc": iso(self.creation_time_utc),
            "last_access_time_utc": iso(self.last_access_time_utc),
            "last_write_time_utc": iso(self.last_write_time_utc),
        }
