from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "pert-cpm-engine"
UNKNOWN_VERSION = "unknown"


def get_app_version() -> str:
    """
    Version reported in logs: PCE_APP_VERSION wins, then the installed
    distribution's metadata. A source checkout that was never installed
    reports "unknown".
    """
    env_override = (os.getenv("PCE_APP_VERSION") or "").strip()
    if env_override:
        return env_override
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION


__all__ = ["DISTRIBUTION_NAME", "get_app_version"]
