# mountfs_server/tools/files.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from fastmcp import FastMCP

from mountfs.services.mounted_fs import MountedFileSystem


class FsPathIn(BaseModel):
    path: str = Field(..., description="Logical path (translated under the mount root)")


class FsWriteIn(BaseModel):
    path: str = Field(..., description="Logical path (translated under the mount root)")
    content: str = Field(..., description="UTF-8 text content to write")


class FsListIn(BaseModel):
    path: str = Field("", description="Logical directory path; empty lists the mount root")
    pattern: Optional[str] = Field(None, description="Optional glob pattern, e.g. '*.txt'")


class FsTransferIn(BaseModel):
    path: str = Field(..., description="Logical source path")
    destination: str = Field(..., description="Logical destination path")
    overwrite: bool = Field(True, description="Replace an existing destination file")


class FsDeleteDirIn(BaseModel):
    path: str = Field(..., description="Logical directory path")
    recursive: bool = Field(False, description="Delete contents as well")


def register_file_tools(mcp: FastMCP, fs_service: MountedFileSystem):
    """
    Very thin tool adapters:
    - validate/deserialize inputs (Pydantic)
    - call the mounted file system (translation + containment)
    - return the result
    """

    @mcp.tool(name="fs_read", description="Read a text file")
    def fs_read(input: FsPathIn) -> str:
        return fs_service.read_all_text(input.path)

    @mcp.tool(name="fs_write", description="Write a text file")
    def fs_write(input: FsWriteIn) -> str:
        fs_service.write_all_text(input.path, input.content)
        return "OK"

    @mcp.tool(name="fs_list", description="List files in a directory")
    def fs_list(input: FsListIn) -> List[str]:
        return fs_service.list(input.path, input.pattern)

    @mcp.tool(name="fs_list_directories", description="List sub-directories of a directory")
    def fs_list_directories(input: FsListIn) -> List[str]:
        return fs_service.list_directories(input.path)

    @mcp.tool(name="fs_create_directory", description="Create a directory and missing parents")
    def fs_create_directory(input: FsPathIn) -> str:
        fs_service.create_directory(input.path)
        return "OK"

    @mcp.tool(name="fs_delete", description="Delete a file")
    def fs_delete(input: FsPathIn) -> str:
        fs_service.delete(input.path)
        return "OK"

    @mcp.tool(name="fs_delete_directory", description="Delete a directory")
    def fs_delete_directory(input: FsDeleteDirIn) -> str:
        fs_service.delete_directory(input.path, input.recursive)
        return "OK"

    @mcp.tool(name="fs_copy", description="Copy a file")
    def fs_copy(input: FsTransferIn) -> str:
        fs_service.copy(input.path, input.destination, input.overwrite)
        return "OK"

    @mcp.tool(name="fs_move", description="Move a file")
    def fs_move(input: FsTransferIn) -> str:
        fs_service.move(input.path, input.destination, input.overwrite)
        return "OK"

    @mcp.tool(name="fs_exists", description="Whether a file exists")
    def fs_exists(input: FsPathIn) -> bool:
        return fs_service.exists(input.path)

    @mcp.tool(name="fs_exists_directory", description="Whether a directory exists")
    def fs_exists_directory(input: FsPathIn) -> bool:
        return fs_service.exists_directory(input.path)

    @mcp.tool(name="fs_info", description="File metadata (size, timestamps)")
    def fs_info(input: FsPathIn) -> Dict[str, Any]:
        return fs_service.get_file_info(input.path).to_dict()
