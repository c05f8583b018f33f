"""Console formatter with robot and operation tags."""

import logging
from typing import Any, Dict, Iterable, Optional


class HumanFormatter(logging.Formatter):
    """Render a record as a single readable line.

    Layout: ``time level logger [robot:.. op:..] message key=value ...``.
    Only the context keys named in ``detail_keys`` are shown; timings and
    tracebacks follow on extra lines.
    """

    LEVEL_STYLES = {
        logging.DEBUG: '\033[36m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[1;31m',
    }
    DIM = '\033[2m'
    RESET = '\033[0m'

    DEFAULT_DETAIL_KEYS = ('width', 'height', 'policy', 'cells', 'error_type')

    def __init__(self,
                 use_colors: bool = True,
                 show_context: bool = True,
                 detail_keys: Optional[Iterable[str]] = None):
        super().__init__(datefmt='%H:%M:%S')
        self.use_colors = use_colors
        self.show_context = show_context
        self.detail_keys = tuple(detail_keys) if detail_keys is not None else self.DEFAULT_DETAIL_KEYS

    def format(self, record: logging.LogRecord) -> str:
        context: Dict[str, Any] = getattr(record, 'context', None) or {}

        line = [
            self._dim(self.formatTime(record, self.datefmt)),
            self._level(record),
            self._dim(self._short_name(record.name)),
        ]
        if self.show_context:
            tags = self._tags(context)
            if tags:
                line.append(tags)
        line.append(record.getMessage())
        line.extend(f"{key}={context[key]}" for key in self.detail_keys if key in context)

        output = ' '.join(line)

        timing = self._timing(getattr(record, 'performance', None))
        if timing:
            output += '\n  ' + self._dim(f"timing: {timing}")

        tb = getattr(record, 'traceback', None)
        if tb is None and record.exc_info:
            tb = self.formatException(record.exc_info)
        if tb:
            output += '\n' + tb.rstrip()

        return output

    def _dim(self, text: str) -> str:
        return f"{self.DIM}{text}{self.RESET}" if self.use_colors else text

    def _level(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:<8}"
        style = self.LEVEL_STYLES.get(record.levelno) if self.use_colors else None
        return f"{style}{level}{self.RESET}" if style else level

    @staticmethod
    def _short_name(name: str) -> str:
        """Drop the package prefix and the operations suffix."""
        parts = name.split('.')
        if parts[0] == 'local_robot_map':
            parts = parts[1:]
        if len(parts) > 1 and parts[-1] == 'operations':
            parts = parts[:-1]
        return '.'.join(parts[-2:]) or name

    @staticmethod
    def _tags(context: Dict[str, Any]) -> str:
        tags = []
        if context.get('robot_id'):
            tags.append(f"robot:{context['robot_id']}")
        if context.get('operation'):
            tags.append(f"op:{context['operation']}")
        return f"[{' '.join(tags)}]" if tags else ''

    @staticmethod
    def _timing(performance: Optional[Dict[str, Any]]) -> str:
        if not performance or 'duration_seconds' not in performance:
            return ''
        timing = f"{performance['duration_seconds']:.3f}s"
        if 'cells_per_second' in performance:
            timing += f", {performance['cells_per_second']:.0f} cells/s"
        return timing
