# src/local_robot_map/config/defaults.py
"""Default configuration values"""

from pathlib import Path

# Project path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
LOGS_DIR = PROJECT_ROOT / 'logs'

PATHS = {
    'project_root': str(PROJECT_ROOT),
    'logs_dir': str(LOGS_DIR),
    'output_dir': str(PROJECT_ROOT / 'outputs'),
}

# Cell map defaults
GRIDS = {
    'default_resolution': 1.0,  # cells per meter
    'label_dtype': 'int8',
}

# Polygon rasterization
RASTERIZATION = {
    # Cells are sampled at their center; a center lying exactly on the
    # polygon outline counts as inside when this is set.
    'include_boundary': True,
}

# Robot placement on local maps
LOCAL_MAP = {
    'placement_policy': 'strict',  # strict, tolerant, expanding
    'expansion_fill_label': 'Unexplored',  # label of cells added when a map grows
    'max_expansion_cells': 10_000_000,  # upper bound on a grown map's cell count
}

LOGGING = {
    'level': 'INFO',
    'console': True,
    'log_file': None,  # None disables file logging
    'max_file_size': 10 * 1024 * 1024,  # 10MB
    'backup_count': 5,
    'use_json': True,
}

VISUALIZATION = {
    'mode': 'RGB',  # RGB or L (grayscale)
}

# Named operation areas, as [minx, miny, maxx, maxy] in meters
REGIONS = {
    'custom': {},
}
