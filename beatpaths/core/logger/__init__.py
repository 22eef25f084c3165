"""
Logging Package.

- Logger: Stream and rotating-file logging initialization.
- LogStyle: Unified logging style constants.
"""

from .logger import Logger
from .styles import LogStyle

__all__ = [
    "Logger",
    "LogStyle",
]
