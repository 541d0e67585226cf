# mountfs_server/registry.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Type, Optional, List
from pydantic import BaseModel

from mountfs.di import Container, build_container
from mountfs.logging import log_tool_call

# Import only the Pydantic input models from the tool module.
from mountfs_server.tools.files import (
    FsDeleteDirIn,
    FsListIn,
    FsPathIn,
    FsTransferIn,
    FsWriteIn,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[BaseModel], Any]


class ToolHandlers:
    """
    Named handlers for each tool (no lambdas).
    Keeps all cross-cutting logic and observability in one place.
    """
    def __init__(self, container: Optional[Container] = None):
        self.container = container or build_container()

    @property
    def fs(self):
        return self.container.fs_service

    # ---- Read / write
    def fs_read(self, args: FsPathIn) -> str:
        return self.fs.read_all_text(args.path)

    def fs_write(self, args: FsWriteIn) -> str:
        self.fs.write_all_text(args.path, args.content)
        return "OK"

    # ---- Listing
    def fs_list(self, args: FsListIn) -> List[str]:
        return self.fs.list(args.path, args.pattern)

    def fs_list_directories(self, args: FsListIn) -> List[str]:
        return self.fs.list_directories(args.path)

    # ---- Mutations
    def fs_create_directory(self, args: FsPathIn) -> str:
        self.fs.create_directory(args.path)
        return "OK"

    def fs_delete(self, args: FsPathIn) -> str:
        self.fs.delete(args.path)
        return "OK"

    def fs_delete_directory(self, args: FsDeleteDirIn) -> str:
        self.fs.delete_directory(args.path, args.recursive)
        return "OK"

    def fs_copy(self, args: FsTransferIn) -> str:
        self.fs.copy(args.path, args.destination, args.overwrite)
        return "OK"

    def fs_move(self, args: FsTransferIn) -> str:
        self.fs.move(args.path, args.destination, args.overwrite)
        return "OK"

    # ---- Queries
    def fs_exists(self, args: FsPathIn) -> bool:
        return self.fs.exists(args.path)

    def fs_exists_directory(self, args: FsPathIn) -> bool:
        return self.fs.exists_directory(args.path)

    def fs_info(self, args: FsPathIn) -> dict:
        return self.fs.get_file_info(args.path).to_dict()


def _schema_from_model(model: Type[BaseModel]) -> Dict[str, Any]:
    return model.model_json_schema()


def build_tool_registry(container: Optional[Container] = None) -> Dict[str, ToolSpec]:
    """
    Build a registry once at startup using DI.
    Transport layers (stdio/HTTP) read from this registry to expose tools.
    """
    handlers = ToolHandlers(container)

    entries = [
        ("fs_read", "Read a text file", FsPathIn, handlers.fs_read),
        ("fs_write", "Write a text file", FsWriteIn, handlers.fs_write),
        ("fs_list", "List files in a directory", FsListIn, handlers.fs_list),
        ("fs_list_directories", "List sub-directories of a directory", FsListIn,
         handlers.fs_list_directories),
        ("fs_create_directory", "Create a directory and missing parents", FsPathIn,
         handlers.fs_create_directory),
        ("fs_delete", "Delete a file", FsPathIn, handlers.fs_delete),
        ("fs_delete_directory", "Delete a directory", FsDeleteDirIn, handlers.fs_delete_directory),
        ("fs_copy", "Copy a file", FsTransferIn, handlers.fs_copy),
        ("fs_move", "Move a file", FsTransferIn, handlers.fs_move),
        ("fs_exists", "Whether a file exists", FsPathIn, handlers.fs_exists),
        ("fs_exists_directory", "Whether a directory exists", FsPathIn,
         handlers.fs_exists_directory),
        ("fs_info", "File metadata (size, timestamps)", FsPathIn, handlers.fs_info),
    ]
    return {
        name: ToolSpec(name=name, description=desc, input_model=model, handler=handler)
        for name, desc, model, handler in entries
    }


def list_tools_payload(registry: Dict[str, ToolSpec]) -> Dict[str, Any]:
    """
    Produce the MCP `tools/list` payload body.
    """
    tools = []
    for spec in registry.values():
        tools.append({
            "name": spec.name,
            "description": spec.description,
            "inputSchema": _schema_from_model(spec.input_model),
        })
    return {"tools": tools}


def dispatch_tool_call(registry: Dict[str, ToolSpec], name: str, arguments: Dict[str, Any]) -> Any:
    """
    Validate args with the tool's Pydantic model, then invoke the named handler.
    """
    if name not in registry:
        raise KeyError(f"Tool not found: {name}")
    spec = registry[name]
    args_obj = spec.input_model(**arguments)
    log_tool_call(logger, name, arguments)
    return spec.handler(args_obj)
