"""Tests for Settings parsing."""

import pytest
from pydantic import ValidationError

from filegate.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("FILEGATE_HOST", raising=False)
    monkeypatch.delenv("FILEGATE_PORT", raising=False)
    s = Settings()
    assert s.host == "localhost"
    assert s.port == 8080
    assert s.probe_bytes == 512
    assert s.cors_origins == ["*"]


def test_env_prefix(monkeypatch, tmp_path):
    monkeypatch.setenv("FILEGATE_ROOT_DIR", str(tmp_path))
    monkeypatch.setenv("FILEGATE_PORT", "9090")
    s = Settings()
    assert s.root_dir == str(tmp_path)
    assert s.port == 9090


def test_cors_origins_comma_separated():
    s = Settings(cors_origins="http://a.local, http://b.local")
    assert s.cors_origins == ["http://a.local", "http://b.local"]


def test_root_path_is_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "share").mkdir()
    s = Settings(root_dir="share")
    assert s.root_path == (tmp_path / "share").resolve()


def test_root_path_requires_root():
    with pytest.raises(ValueError):
        Settings(root_dir=None).root_path


def test_negative_probe_rejected():
    with pytest.raises(ValidationError):
        Settings(probe_bytes=-1)
