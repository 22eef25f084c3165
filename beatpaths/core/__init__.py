"""
Core Utilities Package

Exposes the directory resolver, the path configuration schema, logging and
the StartupOrchestrator that ties them together at agent startup.
"""

# Configuration
from .config import PATH_SECTION, LogLevel, PathConfig, extract_path_section

# Input/Output Utilities
from .io import load_config_from_yaml

# Logging
from .logger import Logger, LogStyle

# Startup Orchestration
from .orchestrator import StartupOrchestrator

# Constants & Paths
from .paths import (
    DATA_DIR_MODE,
    DATA_DIR_NAME,
    LOGGER_NAME,
    LOGS_DIR_NAME,
    PathCategory,
    PathResolver,
    PathSource,
)

__all__ = [
    # Configuration
    "PATH_SECTION",
    "LogLevel",
    "PathConfig",
    "extract_path_section",
    # I/O
    "load_config_from_yaml",
    # Logging
    "Logger",
    "LogStyle",
    # Orchestration
    "StartupOrchestrator",
    # Paths
    "DATA_DIR_MODE",
    "DATA_DIR_NAME",
    "LOGGER_NAME",
    "LOGS_DIR_NAME",
    "PathCategory",
    "PathResolver",
    "PathSource",
]
