from __future__ import annotations

import pytest

from buffer_engine.config import EngineConfig, load_config


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENCODING", "NEWLINE", "TAB"):
        monkeypatch.delenv(f"BUFFER_ENGINE_{name}", raising=False)

    config = load_config()

    assert config == EngineConfig()
    assert config.newline == "\n"
    assert config.encoding == "utf-8"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUFFER_ENGINE_ENCODING", "latin-1")
    monkeypatch.setenv("BUFFER_ENGINE_NEWLINE", "CRLF")
    monkeypatch.setenv("BUFFER_ENGINE_TAB", "->")

    config = load_config()

    assert config.encoding == "latin-1"
    assert config.newline == "\r\n"
    assert config.tab_replacement == "->"


def test_unknown_newline_style_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUFFER_ENGINE_NEWLINE", "mac")

    with pytest.raises(ValueError):
        load_config()


def test_config_validates_newline() -> None:
    with pytest.raises(ValueError):
        EngineConfig(newline=";")


def test_unknown_encoding_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUFFER_ENGINE_ENCODING", "no-such-codec")

    with pytest.raises(ValueError):
        load_config()
