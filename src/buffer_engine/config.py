"""Environment-driven configuration for buffer_engine."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "BUFFER_ENGINE_"

NEWLINES = {
    "lf": "\n",
    "crlf": "\r\n",
}


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Settings shared by documents: text encoding and line terminators."""

    encoding: str = "utf-8"
    newline: str = "\n"
    tab_replacement: str = " "

    def __post_init__(self) -> None:
        if self.newline not in NEWLINES.values():
            raise ValueError(f"Unsupported line terminator {self.newline!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{self.encoding}'.") from exc


def _resolve_newline(raw: Optional[str]) -> str:
    if raw is None:
        return "\n"
    key = raw.strip().lower()
    try:
        return NEWLINES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown newline style '{raw}'.") from exc


def load_config() -> EngineConfig:
    """Build an ``EngineConfig`` from ``BUFFER_ENGINE_*`` variables."""

    return EngineConfig(
        encoding=env("ENCODING") or "utf-8",
        newline=_resolve_newline(env("NEWLINE")),
        tab_replacement=env("TAB", " ") or " ",
    )


__all__ = ["ENV_PREFIX", "EngineConfig", "env", "env_flag", "load_config"]
