"""
Configuration File Loading.

Reads beat configuration files (YAML) into plain Python structures. Schema
interpretation is left to the config models.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ...exceptions import ConfigError
from ..paths import LOGGER_NAME


def load_config_from_yaml(yaml_path: Path) -> Any:
    """
    Loads a raw configuration document from a YAML file.

    Args:
        yaml_path (Path): Path to the source YAML file.

    Returns:
        Any: The loaded document (None for an empty file).

    Raises:
        FileNotFoundError: If the specified path does not exist.
        ConfigError: If the file is not valid UTF-8 YAML.
    """
    logger = logging.getLogger(LOGGER_NAME)

    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Could not parse {yaml_path}: {e}")
            raise ConfigError(f"Invalid YAML in {yaml_path}: {e}") from e
        except UnicodeDecodeError as e:
            logger.error(f"Could not decode {yaml_path}: {e}")
            raise ConfigError(f"{yaml_path} is not valid UTF-8: {e}") from e

    logger.debug(f"Configuration loaded from → {yaml_path.name}")
    return data
