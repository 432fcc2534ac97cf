"""
Centralized logging configuration.

Provides a single setup_logging function that configures logging with:
- Console output on stdout
- Optional file output to logs/{service_name}.log
- Fresh log file on each start unless LOG_APPEND is set
- User-friendly mode for operator-facing scripts
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional

from management_metadata.config import env_bool, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING if user_friendly else logging.DEBUG)
    return console_handler


def _configure_file_handler(service_name: Optional[str], log_dir: Path) -> Optional[logging.Handler]:
    if not service_name:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{service_name}.log"
    file_mode = "a" if env_bool("LOG_APPEND") else "w"

    file_handler = logging.handlers.WatchedFileHandler(log_path, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as exc:
            _MODULE_LOGGER.debug("Handler close failed: %s", exc)
        logger.removeHandler(handler)


def setup_logging(service_name: Optional[str] = None, user_friendly: bool = False, *, log_dir: Optional[Path] = None) -> None:
    """Configure the root logger once per process.

    Calling again replaces the previously installed handlers.
    """
    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(user_friendly))

        if log_dir is None:
            log_dir = Path(env_str("LOG_DIRECTORY", or_value="logs")).expanduser()
        file_handler = _configure_file_handler(service_name, log_dir)
        if file_handler is not None:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(logging.DEBUG)
        _MODULE_LOGGER.debug("Logging configured for %s", service_name or "<anonymous>")


__all__ = ["setup_logging"]
