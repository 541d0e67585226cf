# mountfs/errors.py


class MountFsError(Exception):
    """Base class for errors raised by the mount layer itself."""


class PathTraversalError(MountFsError, ValueError):
    """
    A logical path resolved outside the mount root.
    """

    def __init__(self, path: str, mount_point: str):
        super().__init__(f"Path traversal not supported: {path!r} escapes {mount_point!r}")
        self.path = path
        self.mount_point = mount_point
