"""Root logger configuration."""

import logging
from typing import Any, Dict, Optional

from .structured_logger import get_logger
from .handlers import ConsoleHandler, FileHandler


def _reset_root(level: int) -> logging.Logger:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    return root_logger


def setup_logging(config,
                  log_file: Optional[str] = None,
                  console: Optional[bool] = None,
                  log_level: Optional[str] = None):
    """Replace the root logger's handlers according to the ``logging`` section.

    Arguments override the matching config values.

    Args:
        config: Config instance (anything with a dot-notation ``get``)
        log_file: Log file path; relative paths land under ``paths.logs_dir``
        console: Whether to log to stderr
        log_level: Minimum level for the root logger and the console
    """
    log_level = str(log_level or config.get('logging.level', 'INFO')).upper()
    if console is None:
        console = config.get('logging.console', True)
    if log_file is None:
        log_file = config.get('logging.log_file')

    level = getattr(logging, log_level, logging.INFO)
    root_logger = _reset_root(level)

    if console:
        root_logger.addHandler(ConsoleHandler(level=level))
    if log_file:
        root_logger.addHandler(FileHandler.from_config(config, log_file))

    get_logger(__name__).info(
        "Logging initialized",
        extra={
            'context': {
                'log_level': log_level,
                'console': bool(console),
                'log_file': str(log_file) if log_file else None,
            }
        }
    )


def setup_simple_logging(log_level: str = 'INFO'):
    """Console-only logging for scripts and debugging sessions."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    _reset_root(level).addHandler(ConsoleHandler(level=level))


def get_log_stats() -> Dict[str, Any]:
    """Describe the handlers attached to the root logger."""
    stats: Dict[str, Any] = {}

    for handler in logging.getLogger().handlers:
        if isinstance(handler, FileHandler):
            stats['file'] = {
                'filename': handler.baseFilename,
                'max_bytes': handler.maxBytes,
                'backup_count': handler.backupCount,
            }
        elif isinstance(handler, ConsoleHandler):
            stats['console'] = {'level': logging.getLevelName(handler.level)}

    return stats
