"""
Configuration Schemas.

Pydantic models describing the directory settings accepted from config files
and command-line flags.
"""

from .path_config import PATH_SECTION, PathConfig, extract_path_section
from .types import LogLevel, PathString

__all__ = [
    "PATH_SECTION",
    "PathConfig",
    "extract_path_section",
    "LogLevel",
    "PathString",
]
