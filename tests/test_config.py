from mountfs.config import Settings
from mountfs.di import build_container
from mountfs.logging import redact_args
from mountfs.services.sandbox import TeardownPolicy


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MOUNT_POINT", str(tmp_path / "mnt"))
    monkeypatch.setenv("TEARDOWN_POLICY", "delete_root")
    s = Settings()
    assert s.MOUNT_POINT == str(tmp_path / "mnt")
    assert s.TEARDOWN_POLICY is TeardownPolicy.DELETE_ROOT

    c = build_container(s)
    assert c.sandbox.mount_point == str(tmp_path / "mnt")
    c.fs_service.write_all_text("a.txt", "a")
    c.close()
    assert not (tmp_path / "mnt").exists()


def test_empty_mount_point_is_pass_through(tmp_path):
    c = build_container(Settings(MOUNT_POINT=""))
    p = str(tmp_path / "plain.txt")
    c.fs_service.write_all_text(p, "plain")
    assert c.sandbox.translate(p) == p
    assert (tmp_path / "plain.txt").read_text() == "plain"


def test_redact_args_hides_payloads():
    out = redact_args({"path": "a.txt", "content": "secret body"})
    assert out == {"path": "a.txt", "content": "<11 chars>"}
