# infra/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from infra.path import default_log_dir


@dataclass(frozen=True)
class EngineSettings:
    log_level: int
    log_dir: Path
    console_logging: bool
    strict_reconciliation: bool


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_log_level(name: str, default: int = logging.INFO) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level in {name}: {raw!r}")
    return level


def load_settings() -> EngineSettings:
    raw_dir = (os.getenv("PCE_LOG_DIR") or "").strip()
    return EngineSettings(
        log_level=_env_log_level("PCE_LOG_LEVEL"),
        log_dir=Path(raw_dir) if raw_dir else default_log_dir(),
        console_logging=_env_flag("PCE_LOG_CONSOLE", default=True),
        strict_reconciliation=_env_flag("PCE_STRICT_RECONCILE", default=False),
    )


__all__ = ["EngineSettings", "load_settings"]
