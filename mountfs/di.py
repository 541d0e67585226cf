# mountfs/di.py
from dataclasses import dataclass
from typing import Optional

from mountfs.config import Settings
from mountfs.services.local_fs import LocalFileSystem
from mountfs.services.mounted_fs import MountedFileSystem
from mountfs.services.sandbox import PathSandbox


@dataclass
class Container:
    settings: Settings
    sandbox: PathSandbox
    fs_service: MountedFileSystem

    def close(self) -> None:
        self.fs_service.close()


def build_container(settings: Optional[Settings] = None) -> Container:
    s = settings or Settings()
    raw = LocalFileSystem()
    sandbox = PathSandbox(s.MOUNT_POINT, s.TEARDOWN_POLICY, raw=raw)
    fs = MountedFileSystem(sandbox, raw=raw)
    return Container(s, sandbox, fs)
