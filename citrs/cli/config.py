from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

_DEFAULT_HISTORY = "~/.citrs_history"


def _int_env(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got '{raw}'") from None


def _level_env(environ: Mapping[str, str], key: str, default: str) -> int:
    raw = (environ.get(key) or default).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"{key} is not a logging level: '{raw}'")
    return level


@dataclass
class ShellConfig:
    log_level: int = logging.WARNING
    history_file: Optional[Path] = None
    history_length: int = 1000
    # None = keep the populate() default (first mode); "none" = no mode
    start_mode: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        env = os.environ if environ is None else environ

        history = env.get("CITRS_HISTORY_FILE", _DEFAULT_HISTORY).strip()
        return cls(
            log_level=_level_env(env, "CITRS_LOG_LEVEL", "WARNING"),
            history_file=Path(history).expanduser() if history else None,
            history_length=_int_env(env, "CITRS_HISTORY_LENGTH", 1000),
            start_mode=env.get("CITRS_START_MODE", "").strip() or None,
        )
