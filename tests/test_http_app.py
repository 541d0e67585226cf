from pathlib import Path

from fastapi.testclient import TestClient

from mountfs.config import Settings
from mountfs.services.sandbox import TeardownPolicy
from mountfs_server.http_app import create_http_app

TOKEN = "test-token"
AUTH = {"Authorization": f"Bearer {TOKEN}"}


def _app(root: Path, policy: TeardownPolicy = TeardownPolicy.NONE):
    settings = Settings(
        MOUNT_POINT=str(root),
        TEARDOWN_POLICY=policy,
        MCP_HTTP_BEARER_TOKEN=TOKEN,
    )
    return create_http_app(settings)


def _call(client: TestClient, name: str, arguments: dict, id_: int = 1) -> dict:
    body = {"jsonrpc": "2.0", "id": id_, "method": "tools/call",
            "params": {"name": name, "arguments": arguments}}
    return client.post("/mcp", json=body, headers=AUTH).json()


def test_tools_list_and_file_round_trip(tmp_path: Path):
    client = TestClient(_app(tmp_path / "mnt"))

    init = client.post("/mcp", json={"jsonrpc": "2.0", "id": 0, "method": "initialize"}, headers=AUTH)
    assert init.json()["result"]["serverInfo"]["name"] == "mountfs-mcp-http"

    listed = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"}, headers=AUTH)
    names = {t["name"] for t in listed.json()["result"]["tools"]}
    assert {"fs_read", "fs_write", "fs_list", "fs_info"} <= names

    assert _call(client, "fs_write", {"path": "/docs/a.txt", "content": "hello"})["error"]["code"] == -32603
    _call(client, "fs_create_directory", {"path": "docs"})
    res = _call(client, "fs_write", {"path": "/docs/a.txt", "content": "hello"})
    assert res["result"]["content"][0]["text"] == "OK"
    assert (tmp_path / "mnt" / "docs" / "a.txt").read_text() == "hello"

    res = _call(client, "fs_read", {"path": "docs/a.txt"})
    assert res["result"]["content"][0]["text"] == "hello"

    res = _call(client, "fs_list", {"path": "docs"})
    assert res["result"]["content"][0]["json"] == ["docs/a.txt"]

    res = _call(client, "fs_info", {"path": "docs/a.txt"})
    assert res["result"]["content"][0]["json"]["full_name"] == "docs/a.txt"


def test_traversal_maps_to_invalid_params(tmp_path: Path):
    client = TestClient(_app(tmp_path / "mnt"))
    res = _call(client, "fs_read", {"path": "../../etc/passwd"})
    assert res["error"]["code"] == -32602
    assert "traversal" in res["error"]["data"].lower()


def test_unknown_tool_and_method(tmp_path: Path):
    client = TestClient(_app(tmp_path / "mnt"))
    assert _call(client, "nope", {})["error"]["code"] == -32601
    res = client.post("/mcp", json={"jsonrpc": "2.0", "id": 3, "method": "bogus"}, headers=AUTH)
    assert res.json()["error"]["code"] == -32601


def test_auth_and_origin_checks(tmp_path: Path):
    client = TestClient(_app(tmp_path / "mnt"))
    body = {"jsonrpc": "2.0", "id": 1, "method": "tools/list"}

    assert client.post("/mcp", json=body).status_code == 401
    assert client.post("/mcp", json=body, headers={"Authorization": "Bearer wrong"}).status_code == 401
    forbidden = client.post("/mcp", json=body, headers={**AUTH, "Origin": "http://evil.example"})
    assert forbidden.status_code == 403


def test_shutdown_applies_teardown_policy(tmp_path: Path):
    root = tmp_path / "mnt"
    with TestClient(_app(root, TeardownPolicy.DELETE_ROOT)) as client:
        _call(client, "fs_write", {"path": "a.txt", "content": "a"})
        assert (root / "a.txt").exists()
    assert not root.exists()


def test_escaping_list_pattern_maps_to_invalid_params(tmp_path: Path):
    (tmp_path / "secret.txt").write_text("s")
    client = TestClient(_app(tmp_path / "mnt"))
    for pattern in ("../*", "/etc/*"):
        res = _call(client, "fs_list", {"path": "", "pattern": pattern})
        assert res["error"]["code"] == -32602
