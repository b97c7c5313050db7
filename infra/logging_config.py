# infra/logging_config.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.operational_support import TraceIdLogFilter
from infra.settings import EngineSettings, load_settings
from infra.version import get_app_version


def setup_logging(settings: EngineSettings | None = None) -> Path:
    """
    Configure application logging.
    Logs go to the per-user data directory unless PCE_LOG_DIR overrides it.
    Returns the log file path.
    """
    settings = settings or load_settings()
    log_dir: Path = settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "engine.log"

    logger = logging.getLogger()
    logger.setLevel(settings.log_level)

    # Close and drop existing handlers so re-running setup does not stack them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # File handler (rotating)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1_000_000,  # 1 MB per file
        backupCount=5,
        encoding="utf-8",
    )
    trace_filter = TraceIdLogFilter()
    file_handler.addFilter(trace_filter)
    file_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] trace=%(trace_id)s %(name)s - %(message)s"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    if settings.console_logging:
        console = logging.StreamHandler()
        console.addFilter(trace_filter)
        console.setFormatter(logging.Formatter("%(levelname)s [trace=%(trace_id)s]: %(message)s"))
        logger.addHandler(console)

    logger.info("Logging initialized (v%s). Log file at %s", get_app_version(), log_file)
    return log_file
