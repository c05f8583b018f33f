"""JSON lines formatter for log files."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    ``robot_id`` and ``operation`` are lifted out of the context to the top
    level, so a log file can be filtered per robot with a plain ``jq`` query.
    """

    LIFTED_KEYS = ('robot_id', 'operation')
    # Already present as top-level fields
    DROPPED_KEYS = ('logger_name', 'timestamp')

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'time': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'source': f"{record.module}:{record.funcName}:{record.lineno}",
        }

        context = dict(getattr(record, 'context', None) or {})
        for key in self.LIFTED_KEYS:
            if key in context:
                entry[key] = context.pop(key)
        for key in self.DROPPED_KEYS:
            context.pop(key, None)
        if context:
            entry['context'] = context

        performance = getattr(record, 'performance', None)
        if performance:
            entry['performance'] = performance

        tb = getattr(record, 'traceback', None)
        if tb is None and record.exc_info:
            tb = self.formatException(record.exc_info)
        if tb:
            entry['traceback'] = tb

        return json.dumps(entry, separators=(',', ':'), default=str)
