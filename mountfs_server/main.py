# mountfs_server/main.py
from fastmcp import FastMCP
from mountfs.di import Container, build_container
from mountfs.logging import configure_logging
from mountfs_server.tools.files import register_file_tools


def create_app(container: Container) -> FastMCP:
    """
    Create the FastMCP host and register tools.
    Keep the server (protocol) separate from the file-system logic.
    """
    mcp = FastMCP("MountedFS", version="0.1.0")

    # Register tools (thin adapters)
    register_file_tools(mcp, container.fs_service)
    return mcp


if __name__ == "__main__":
    container = build_container()
    configure_logging(container.settings.LOG_LEVEL)
    app = create_app(container)
    try:
        # stdio transport: client (agent/IDE) launches this process and speaks JSON-RPC on stdin/stdout
        app.run(transport="stdio")
    finally:
        container.close()
