# src/bundle_launcher/core/logging_setup.py
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_LEVEL_STRINGS = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'WARN': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
    'NOTSET': logging.NOTSET,
}

FORMATTERS = {
    # Console formatter - timestamp and severity on every line
    'standard': logging.Formatter('%(asctime)s - %(levelname)s - %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S'),

    # File formatter - includes logger name for later diagnosis
    'verbose': logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                 datefmt='%Y-%m-%d %H:%M:%S'),
}

# Marker set on handlers installed here so a re-run only replaces its own
_HANDLER_MARKER = '_bundle_launcher_handler'


class _MaxLevelFilter(logging.Filter):
    """Passes only records strictly below the given level."""

    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


def resolve_log_level(config_loader=None, cmd_log_level: Optional[str] = None) -> int:
    """
    Picks the effective log level.

    Command-line value wins, then ``logging.level`` from the config, then INFO.
    Unknown names fall back to INFO.
    """
    if cmd_log_level:
        level_str = cmd_log_level
    elif config_loader is not None:
        level_str = config_loader.get('logging.level', 'INFO')
    else:
        level_str = 'INFO'
    return LOG_LEVEL_STRINGS.get(str(level_str).strip().upper(), logging.INFO)


def setup_logging(config_loader=None, cmd_log_level: Optional[str] = None,
                  log_file: Optional[str] = None) -> int:
    """
    Configures the root logger for the launcher.

    Errors go to stderr, everything else to stdout. A rotating file handler
    is added only when a log file is requested on the command line or in the
    config under ``logging.file``.

    Args:
        config_loader: Optional SimpleConfigLoader instance
        cmd_log_level: Optional command-line log level override
        log_file: Optional command-line log file override

    Returns:
        The effective log level
    """
    log_level = resolve_log_level(config_loader, cmd_log_level)
    if log_file is None and config_loader is not None:
        log_file = config_loader.get('logging.file')

    # Open the file first; if that fails the existing console handlers stay in place
    file_handler = None
    if log_file:
        # Max 10MB per file, keep 3 backup files
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(FORMATTERS['verbose'])

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(log_level)
    stdout_handler.addFilter(_MaxLevelFilter(logging.ERROR))
    stdout_handler.setFormatter(FORMATTERS['standard'])

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(max(log_level, logging.ERROR))
    stderr_handler.setFormatter(FORMATTERS['standard'])

    handlers = [stdout_handler, stderr_handler]
    if file_handler is not None:
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _HANDLER_MARKER, True)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        f"Logging configured: level={logging.getLevelName(log_level)}, file={log_file or 'none'}"
    )
    return log_level
