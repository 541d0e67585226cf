# mountfs_server/http_app.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from mountfs.config import Settings
from mountfs.di import build_container
from mountfs.errors import PathTraversalError

from mountfs_server.registry import build_tool_registry, list_tools_payload, dispatch_tool_call


PROTOCOL_VERSION = "2025-03-26"  # aligns with current MCP draft dates


def _jsonrpc_error(id_: Any, code: int, message: str, data: Any | None = None) -> JSONResponse:
    body: Dict[str, Any] = {"jsonrpc": "2.0", "id": id_, "error": {"code": code, "message": message}}
    if data is not None:
        body["error"]["data"] = data
    return JSONResponse(body)


def _jsonrpc_result(id_: Any, result: Any) -> JSONResponse:
    return JSONResponse({"jsonrpc": "2.0", "id": id_, "result": result})


def create_http_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    container = build_container(settings)
    registry = build_tool_registry(container)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # teardown only after the server stops serving requests
        container.close()

    app = FastAPI(title="Mounted FS MCP Server", version="0.1.0", lifespan=lifespan)
    app.state.container = container

    # ---------- Security: Origin validation & Bearer token ----------

    def _origin_allowed(req: Request) -> bool:
        origin = req.headers.get("origin")
        if not origin:
            return settings.MCP_HTTP_ALLOW_NO_ORIGIN
        allowed = {o.strip().lower() for o in settings.MCP_HTTP_ALLOWED_ORIGINS.split(",") if o.strip()}
        return origin.lower() in allowed

    def _require_auth(req: Request):
        auth = req.headers.get("authorization", "")
        if not auth.startswith("Bearer "):
            raise HTTPException(status_code=401, detail="Missing Bearer token")
        token = auth.split(" ", 1)[1]
        if token != settings.MCP_HTTP_BEARER_TOKEN:
            raise HTTPException(status_code=401, detail="Invalid Bearer token")

    @app.middleware("http")
    async def origin_validation_mw(request: Request, call_next):
        # Origin validation prevents DNS rebinding; a disallowed origin gets 403
        if not _origin_allowed(request):
            return JSONResponse({"error": {"code": 403, "message": "Forbidden origin"}}, status_code=403)
        return await call_next(request)

    # ---------- MCP JSON-RPC endpoint (Streamable HTTP) ----------

    @app.post(settings.MCP_HTTP_PATH)
    async def mcp_endpoint(request: Request):
        _require_auth(request)

        try:
            payload = await request.json()
        except ValueError:
            return _jsonrpc_error(None, -32700, "Parse error")

        id_ = payload.get("id")
        method = payload.get("method")
        params = payload.get("params", {})

        if method == "initialize":
            return _jsonrpc_result(id_, {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {"tools": {"listChanged": True}},
                "serverInfo": {"name": "mountfs-mcp-http", "version": "0.1.0"},
            })

        if method == "tools/list":
            return _jsonrpc_result(id_, list_tools_payload(registry))

        if method == "tools/call":
            name = params.get("name")
            args = params.get("arguments", {})
            try:
                result = dispatch_tool_call(registry, name, args)
            except KeyError as ke:
                return _jsonrpc_error(id_, -32601, str(ke))
            except PathTraversalError as te:
                return _jsonrpc_error(id_, -32602, "Path traversal rejected", str(te))
            except Exception as e:
                return _jsonrpc_error(id_, -32603, "Internal error", str(e))

            content_block = (
                {"type": "json", "json": result}
                if isinstance(result, (dict, list))
                else {"type": "text", "text": str(result)}
            )
            return _jsonrpc_result(id_, {"content": [content_block], "isError": False})

        return _jsonrpc_error(id_, -32601, f"Method not found: {method}")

    return app


app = create_http_app()


if __name__ == "__main__":
    import uvicorn
    from mountfs.logging import configure_logging

    configure_logging(app.state.container.settings.LOG_LEVEL)
    uvicorn.run(
        "mountfs_server.http_app:app",
        host=app.state.container.settings.MCP_HTTP_HOST,
        port=app.state.container.settings.MCP_HTTP_PORT,
        reload=False,
    )
