"""Unit tests for the settings of the UI and the notes service."""

from __future__ import annotations

from pathlib import Path

import pytest

from notes_server.config import Settings as ServerSettings
from notes_ui.config import Settings


class TestUISettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("NOTES_API_URL", "REQUEST_TIMEOUT", "CONFIRM_DELETE", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.notes_api_url == "http://localhost:3001"
        assert s.request_timeout == 10.0
        assert s.confirm_delete is True
        assert s.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOTES_API_URL", "http://notes.internal:8080/")
        monkeypatch.setenv("CONFIRM_DELETE", "false")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = Settings(_env_file=None)
        assert s.notes_api_url == "http://notes.internal:8080"
        assert s.confirm_delete is False
        assert s.log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValueError):
            Settings(_env_file=None)


class TestServerSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NOTES_SERVER_PORT", raising=False)
        s = ServerSettings(_env_file=None)
        assert s.port == 3001

    def test_prefixed_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("NOTES_SERVER_PORT", "4000")
        monkeypatch.setenv("NOTES_SERVER_STORAGE_PATH", str(tmp_path / "n.json"))
        s = ServerSettings(_env_file=None)
        assert s.port == 4000
        assert s.storage_path == tmp_path / "n.json"
