"""Rotating log files."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from ..formatters import JsonFormatter


class FileHandler(RotatingFileHandler):
    """Rotating handler writing JSON lines, or plain text with ``use_json=False``.

    The parent directory is created on construction; the file itself is only
    opened once the first record arrives.
    """

    PLAIN_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'

    def __init__(self,
                 filename: Union[str, Path],
                 max_bytes: int = 10 * 1024 * 1024,
                 backup_count: int = 5,
                 use_json: bool = True,
                 encoding: str = 'utf-8'):
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)

        super().__init__(
            str(path),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding=encoding,
            delay=True,
        )

        self.setFormatter(JsonFormatter() if use_json else logging.Formatter(self.PLAIN_FORMAT))
        self.setLevel(logging.DEBUG)

    @classmethod
    def from_config(cls, config, filename: Optional[Union[str, Path]] = None) -> 'FileHandler':
        """Build a handler from the ``logging`` section.

        Relative file names are placed under ``paths.logs_dir``.
        """
        path = Path(filename or config.get('logging.log_file'))
        if not path.is_absolute():
            path = Path(config.get('paths.logs_dir', 'logs')) / path

        return cls(
            path,
            max_bytes=config.get('logging.max_file_size', 10 * 1024 * 1024),
            backup_count=config.get('logging.backup_count', 5),
            use_json=config.get('logging.use_json', True),
        )
