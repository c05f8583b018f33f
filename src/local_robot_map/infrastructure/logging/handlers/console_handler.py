"""Console output for interactive runs."""

import logging
import os
import sys
from typing import Optional

from ..formatters import HumanFormatter


def colors_supported(stream) -> bool:
    """ANSI colors on terminals, honoring ``FORCE_COLOR``, ``NO_COLOR`` and ``TERM=dumb``."""
    if os.environ.get('FORCE_COLOR'):
        return True
    if os.environ.get('NO_COLOR') or os.environ.get('TERM') == 'dumb':
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


class ConsoleHandler(logging.StreamHandler):
    """Write human-formatted records to a stream, stderr by default."""

    def __init__(self,
                 stream=None,
                 use_colors: Optional[bool] = None,
                 show_context: bool = True,
                 level: int = logging.INFO):
        super().__init__(stream if stream is not None else sys.stderr)

        if use_colors is None:
            use_colors = colors_supported(self.stream)

        self.setFormatter(HumanFormatter(use_colors=use_colors, show_context=show_context))
        self.setLevel(level)
