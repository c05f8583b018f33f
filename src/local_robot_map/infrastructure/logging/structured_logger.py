"""Structured logger carrying robot and operation context."""

import logging
import sys
import time
import traceback
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Which robot's map is being worked on, and by which operation
robot_context: ContextVar[Optional[str]] = ContextVar('robot_id', default=None)
operation_context: ContextVar[Optional[str]] = ContextVar('operation', default=None)


def _format_traceback(exc_info) -> Optional[str]:
    if isinstance(exc_info, BaseException):
        exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
    elif not isinstance(exc_info, tuple):
        exc_info = sys.exc_info()
    if exc_info[0] is None:
        return None
    return ''.join(traceback.format_exception(*exc_info))


class StructuredLogger(logging.Logger):
    """Logger whose records carry ``context``, ``performance`` and ``traceback``.

    ``context`` merges, in increasing priority: the active robot and
    operation, fields registered with :meth:`add_context`, and the
    ``context`` entry of the ``extra`` argument.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._context_fields: Dict[str, Any] = {}
        self._timers: Dict[str, float] = {}

    def _current_context(self) -> Dict[str, Any]:
        context = {
            'robot_id': robot_context.get(),
            'operation': operation_context.get(),
            'logger_name': self.name,
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }
        context.update(self._context_fields)
        return {key: value for key, value in context.items() if value is not None}

    def _log(self, level, msg, args, exc_info=None, extra=None, stack_info=False, **kwargs):
        fields = dict(extra) if isinstance(extra, dict) else {}

        context = self._current_context()
        context.update(fields.pop('context', None) or {})

        tb = fields.pop('traceback', None)
        if tb is None and exc_info:
            tb = _format_traceback(exc_info)

        fields['context'] = context
        fields['performance'] = fields.pop('performance', None)
        fields['traceback'] = tb

        # The traceback travels as text; keep the record itself free of exc_info
        super()._log(level, msg, args, exc_info=None, extra=fields,
                     stack_info=stack_info, **kwargs)

    def add_context(self, **fields):
        """Attach fields to every later record of this logger.

        Example:
            logger.add_context(map_name='warehouse')
        """
        self._context_fields.update(fields)

    def remove_context(self, *keys):
        for key in keys:
            self._context_fields.pop(key, None)

    def clear_context(self):
        self._context_fields.clear()

    def start_operation(self, operation: str):
        self._timers[operation] = time.perf_counter()
        self.debug(f"Started operation: {operation}")

    def end_operation(self, operation: str, **metrics):
        """Log the time since :meth:`start_operation` for ``operation``."""
        started = self._timers.pop(operation, None)
        if started is None:
            self.warning(f"No start time for operation: {operation}")
            return
        self.log_performance(operation, time.perf_counter() - started, **metrics)

    def log_performance(self, operation: str, duration: float, **metrics):
        """Log how long an operation took.

        When ``cells_processed`` is given, a ``cells_per_second`` rate is
        derived from it.
        """
        performance = {
            'operation': operation,
            'duration_seconds': round(duration, 6),
            **metrics
        }
        if 'cells_processed' in metrics and duration > 0:
            performance['cells_per_second'] = round(metrics['cells_processed'] / duration, 2)

        self.info(
            f"Performance: {operation} completed in {duration:.3f}s",
            extra={'performance': performance}
        )

    def log_error_with_context(self, error: Exception, operation: Optional[str] = None, **context):
        """Log ``error`` at error level with its traceback and extra fields."""
        error_context = {
            'error_type': type(error).__name__,
            'error_module': type(error).__module__,
            **context
        }
        if operation:
            error_context['operation'] = operation

        self.error(f"{type(error).__name__}: {error}", exc_info=error,
                   extra={'context': error_context})


_loggers: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Get the structured logger called ``name``, creating it on first use.

    Raises:
        TypeError: If a plain logger was already registered under ``name``
    """
    if name in _loggers:
        return _loggers[name]

    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(StructuredLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    if not isinstance(logger, StructuredLogger):
        raise TypeError(
            f"Logger '{name}' already exists as {type(logger).__name__}; "
            f"request structured loggers under a dedicated name"
        )

    _loggers[name] = logger
    return logger


@contextmanager
def robot_scope(robot_id: str):
    """Tag every record logged inside the block with ``robot_id``.

    Example:
        with robot_scope('scout-1'):
            local_map = LocalMap.new_strict(grid, position, others)
    """
    token = robot_context.set(robot_id)
    try:
        yield
    finally:
        robot_context.reset(token)
