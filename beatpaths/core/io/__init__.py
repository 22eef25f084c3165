"""
Input/Output Utilities.

This module manages reading configuration files from the filesystem.
"""

from .serialization import load_config_from_yaml

__all__ = [
    "load_config_from_yaml",
]
