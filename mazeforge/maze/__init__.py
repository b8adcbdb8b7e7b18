"""Public maze generation interface."""

from .catalog import LEVEL_DEFS, build_catalog, get_level_config, level_configs  # noqa: F401
from .config import LevelConfig, LevelConfigError  # noqa: F401
from .grid import CELL_SIZE, START, render_ascii  # noqa: F401
from .level import LevelOutput, Rect, StartPoint  # noqa: F401
from .paths import PathIntegrityError  # noqa: F401
from .pipeline import LevelBuilder, build_level  # noqa: F401
from .rng import SequenceGenerator  # noqa: F401
from .sculptors import PROFILE_NAMES, Profile  # noqa: F401

__all__ = [
    "CELL_SIZE",
    "START",
    "LEVEL_DEFS",
    "PROFILE_NAMES",
    "LevelBuilder",
    "LevelConfig",
    "LevelConfigError",
    "LevelOutput",
    "PathIntegrityError",
    "Profile",
    "Rect",
    "SequenceGenerator",
    "StartPoint",
    "build_catalog",
    "build_level",
    "get_level_config",
    "level_configs",
    "render_ascii",
]
