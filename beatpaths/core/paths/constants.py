"""
Path Categories and Layout Constants.

Single source of truth for the fixed pieces of the directory layout: the
closed set of path categories, the literal segment names used for the data
and logs defaults, and the permission bits applied when the data directory is
created.

Module Attributes:
    LOGGER_NAME: Global logger identity used by all modules.
    DATA_DIR_NAME: Segment joined to the home path when no data path is given.
    LOGS_DIR_NAME: Segment joined to the home path when no logs path is given.
    DATA_DIR_MODE: Permission bits for the created data directory (0755).
"""

from __future__ import annotations

from enum import Enum
from typing import Final

# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "beatpaths"

# Default sub-directories of the home path
DATA_DIR_NAME: Final[str] = "data"
LOGS_DIR_NAME: Final[str] = "logs"

# rwxr-xr-x
DATA_DIR_MODE: Final[int] = 0o755


class PathCategory(str, Enum):
    """
    Closed set of directory roles a relative path can be resolved against.

    Members compare equal to their string values, so ``"config"`` and
    ``PathCategory.CONFIG`` select the same directory.
    """

    HOME = "home"
    CONFIG = "config"
    DATA = "data"
    LOGS = "logs"

    def __str__(self) -> str:
        return self.value
