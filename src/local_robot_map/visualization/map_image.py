"""Render cell maps as images.

Pixel ``(x, y)`` of the image shows cell ``(row=y, col=x)``, so row 0 ends up
on the first image line.
"""

from pathlib import Path
from typing import Optional, Union
import logging

import numpy as np
from PIL import Image

from ..abstractions.types import CellLabel, LUMA_COLORS, RGB_COLORS
from ..config import config

logger = logging.getLogger(__name__)

MODES = ('L', 'RGB')

# Lookup tables indexed by label value
_LUMA_TABLE = np.array([LUMA_COLORS[label] for label in CellLabel], dtype=np.uint8)
_RGB_TABLE = np.array([RGB_COLORS[label] for label in CellLabel], dtype=np.uint8)


def labels_to_luma(cells) -> np.ndarray:
    """Map a label matrix to a ``(rows, cols)`` uint8 grayscale array."""
    return _LUMA_TABLE[np.asarray(cells, dtype=np.intp)]


def labels_to_rgb(cells) -> np.ndarray:
    """Map a label matrix to a ``(rows, cols, 3)`` uint8 RGB array."""
    return _RGB_TABLE[np.asarray(cells, dtype=np.intp)]


def to_image(cell_map, mode: Optional[str] = None) -> Image.Image:
    """
    Render a cell map.

    Args:
        cell_map: Anything exposing a ``cells`` label matrix
        mode: 'L' (grayscale) or 'RGB'; ``visualization.mode`` if omitted
    """
    mode = (mode or config.get('visualization.mode', 'RGB')).upper()
    if mode not in MODES:
        raise ValueError(f"Unsupported image mode: {mode}. Available: {list(MODES)}")

    if mode == 'L':
        pixels = labels_to_luma(cell_map.cells)
    else:
        pixels = labels_to_rgb(cell_map.cells)

    return Image.fromarray(np.ascontiguousarray(pixels))


def save_image(cell_map, path: Union[str, Path], mode: Optional[str] = None) -> Path:
    """Render ``cell_map`` and write it to ``path``; the format follows the suffix."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    image = to_image(cell_map, mode)
    image.save(path)

    logger.info(f"Saved {image.mode} map image {image.size[0]}x{image.size[1]} to {path}")
    return path
