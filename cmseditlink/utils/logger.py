import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Set once configure_logging() has run with defaults
_CONFIGURED = False
_FILE_HANDLER: RotatingFileHandler | None = None

ROOT_LOGGER_NAME = "cmseditlink"
DEFAULT_LEVEL = logging.WARNING

# Library logging: records go nowhere until the host configures handlers
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _level_from_env() -> int:
    """Return the level named by CMSEDITLINK_LOG_LEVEL, or WARNING if unset or unknown."""
    name = os.environ.get("CMSEDITLINK_LOG_LEVEL")
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        logging.getLogger(ROOT_LOGGER_NAME).warning(
            "Ignoring unknown CMSEDITLINK_LOG_LEVEL %r, using %s", name, logging.getLevelName(DEFAULT_LEVEL)
        )
        return DEFAULT_LEVEL
    return level


def configure_logging(level: int | str | None = None, log_file: Path | None = None) -> None:
    """Configure package logging.

    The package logger keeps a ``NullHandler`` so that hosts decide where records
    go. A rotating log file is attached only when ``log_file`` is given; a later
    call with another ``log_file`` replaces it.

    Calling without arguments is a no-op after the first call. Explicit arguments
    are always applied.

    Args:
        level: Logging level. If None, read from CMSEDITLINK_LOG_LEVEL (default WARNING).
        log_file: Optional path to a log file.
    """
    global _CONFIGURED, _FILE_HANDLER
    if _CONFIGURED and level is None and log_file is None:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_level_from_env() if level is None else level)
    if not any(isinstance(h, logging.NullHandler) for h in root_logger.handlers):
        root_logger.addHandler(logging.NullHandler())

    if log_file is not None:
        if _FILE_HANDLER is not None:
            root_logger.removeHandler(_FILE_HANDLER)
            _FILE_HANDLER.close()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        _FILE_HANDLER = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        _FILE_HANDLER.setFormatter(formatter)
        root_logger.addHandler(_FILE_HANDLER)

    _CONFIGURED = True
