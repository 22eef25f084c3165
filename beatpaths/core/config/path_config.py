"""
Path Configuration Manifest.

Declarative record for the four configurable directories. The same shape is
used for the base configuration (the ``path`` section of a beat config file)
and for the override configuration built from command-line flags.

Both YAML layouts used by beat config files are accepted::

    path:
      home: /opt/beat
      data: /var/lib/beat

    path.home: /opt/beat
    path.data: /var/lib/beat

Attributes:
    home: Home path, empty when not specified.
    config: Configuration path, empty when not specified.
    data: Data path, empty when not specified.
    logs: Logs path, empty when not specified.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ...exceptions import ConfigError
from ..io import load_config_from_yaml
from .types import PathString

# Key of the path section in a beat configuration file
PATH_SECTION = "path"


# PATH CONFIGURATION
class PathConfig(BaseModel):
    """
    Immutable set of optional directory values.

    Empty strings mean "not specified" and leave the field to the next
    precedence level. Unknown keys are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    home: PathString = Field(default="", description="Home path")
    config: PathString = Field(default="", description="Configuration path")
    data: PathString = Field(default="", description="Data path")
    logs: PathString = Field(default="", description="Logs path")

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """
        Handle empty YAML section by returning default dict.

        When YAML contains 'path:' with no values, Pydantic receives None.

        Args:
            data: Raw input data from YAML or dict.

        Returns:
            Empty dict if data is None, otherwise the original data.
        """
        if data is None:
            return {}
        return data

    @property
    def is_empty(self) -> bool:
        """True when no field is specified."""
        return not any((self.home, self.config, self.data, self.logs))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "PathConfig":
        """
        Load the path section of a beat configuration file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            PathConfig with the values found in the file. An empty file or a
            file without a path section yields an all-empty record.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigError: If the path section is malformed.
        """
        raw = load_config_from_yaml(yaml_path)
        section = extract_path_section(raw, source=yaml_path)
        try:
            return cls.model_validate(section)
        except ValidationError as e:
            raise ConfigError(f"Invalid path section in {yaml_path}: {e}") from e


def extract_path_section(raw: Any, source: Path | str = "<config>") -> dict[str, Any]:
    """
    Collect path settings from a loaded configuration document.

    Merges the nested ``path:`` mapping with dotted ``path.<name>`` top-level
    keys. Dotted keys win when both forms set the same field.

    Args:
        raw: Document returned by the YAML loader (None for an empty file).
        source: Origin of the document, used in error messages.

    Returns:
        Flat dict of path field names to raw values.

    Raises:
        ConfigError: If the document or its path section is not a mapping.
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration in {source} must be a mapping, got {type(raw).__name__}")

    nested = raw.get(PATH_SECTION)
    if nested is None:
        nested = {}
    elif not isinstance(nested, dict):
        raise ConfigError(
            f"'{PATH_SECTION}' section in {source} must be a mapping, got {type(nested).__name__}"
        )

    prefix = f"{PATH_SECTION}."
    dotted = {
        key[len(prefix) :]: value
        for key, value in raw.items()
        if isinstance(key, str) and key.startswith(prefix)
    }
    return {**nested, **dotted}
