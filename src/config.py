"""Runtime settings read from TODO_* environment variables.

Parsing never raises: malformed values fall back to the defaults.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_TITLE = "Sensational Todo List!"
DEFAULT_WIDTH = 700
DEFAULT_HEIGHT = 500


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _int_env(value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _level_env(value: Optional[str], default: int = logging.INFO) -> int:
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    title: str = DEFAULT_TITLE
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    animations: bool = True
    particles: bool = True
    log_level: int = logging.INFO
    log_dir: Optional[Path] = None

    @property
    def geometry(self) -> str:
        return f"{self.width}x{self.height}"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    log_dir = env.get("TODO_LOG_DIR")
    animations = _truthy_env(env.get("TODO_ANIMATIONS"), True)
    return Settings(
        title=(env.get("TODO_TITLE") or DEFAULT_TITLE).strip() or DEFAULT_TITLE,
        width=_int_env(env.get("TODO_WIDTH"), DEFAULT_WIDTH),
        height=_int_env(env.get("TODO_HEIGHT"), DEFAULT_HEIGHT),
        animations=animations,
        # particles are animations too
        particles=animations and _truthy_env(env.get("TODO_PARTICLES"), True),
        log_level=_level_env(env.get("TODO_LOG_LEVEL")),
        log_dir=Path(log_dir).expanduser() if log_dir and log_dir.strip() else None,
    )
