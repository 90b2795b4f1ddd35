"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from opmltree.config import Settings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Without env vars the defaults apply."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OPMLTREE_ENV_FILE", raising=False)
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.json_indent == 2
    assert settings.encoding == "utf-8"


def test_env_vars_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed environment variables are read."""

    monkeypatch.setenv("OPMLTREE_JSON_INDENT", "0")
    monkeypatch.setenv("OPMLTREE_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.json_indent == 0
    assert settings.log_level == "DEBUG"


def test_env_file_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """OPMLTREE_ENV_FILE points at a dotenv file."""

    env_file = tmp_path / "custom.env"
    env_file.write_text("OPMLTREE_JSON_INDENT=4\n", encoding="utf-8")
    monkeypatch.setenv("OPMLTREE_ENV_FILE", str(env_file))
    assert load_settings().json_indent == 4
