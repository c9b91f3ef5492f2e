"""Tests for Config environment overrides and path selection."""

from pathlib import Path

from pixeltrack.config import Config


def test_defaults(monkeypatch):
    for var in ("PIXELTRACK_DATA_DIR", "PIXELTRACK_DB_PATH", "PIXELTRACK_HOST", "PIXELTRACK_PORT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(Config, "VOLUME_DIR", Path("/nonexistent-volume"))

    cfg = Config()
    assert cfg.HOST == "0.0.0.0"
    assert cfg.PORT == 8080
    assert cfg.DB_PATH == Config.BASE_DIR / "data" / "analytics.db"


def test_volume_dir_preferred(monkeypatch, tmp_path):
    monkeypatch.delenv("PIXELTRACK_DATA_DIR", raising=False)
    monkeypatch.delenv("PIXELTRACK_DB_PATH", raising=False)
    monkeypatch.setattr(Config, "VOLUME_DIR", tmp_path)

    assert Config().DB_PATH == tmp_path / "analytics.db"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PIXELTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PIXELTRACK_PORT", "9090")
    monkeypatch.setenv("PIXELTRACK_HOST", "127.0.0.1")

    cfg = Config()
    assert cfg.DB_PATH == tmp_path / "analytics.db"
    assert cfg.PORT == 9090
    assert cfg.HOST == "127.0.0.1"


def test_db_path_override(monkeypatch, tmp_path):
    monkeypatch.setenv("PIXELTRACK_DB_PATH", str(tmp_path / "custom.db"))
    assert Config().DB_PATH == tmp_path / "custom.db"


def test_ensure_dirs(monkeypatch, tmp_path):
    monkeypatch.setenv("PIXELTRACK_DB_PATH", str(tmp_path / "a" / "b.db"))
    monkeypatch.setenv("PIXELTRACK_LOGS_DIR", str(tmp_path / "logs"))
    cfg = Config()
    cfg.ensure_dirs()
    assert (tmp_path / "a").is_dir()
    assert (tmp_path / "logs").is_dir()
