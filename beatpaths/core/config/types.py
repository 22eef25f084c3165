"""
Semantic type Definitions & Validation Primitives.

Annotated types shared by the configuration models. Path fields stay plain
strings (an empty string means "not specified"), so the coercion here only
normalizes the shapes a YAML loader or a CLI parser hands over.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator


# VALIDATORS
def _coerce_path_string(v: Any) -> Any:
    """
    Normalize an optional path value to a string.

    ``None`` (an empty YAML value or an unset CLI flag) becomes ``""`` and
    Path objects become their string form. Anything else is left for the
    ``str`` field validation.
    """
    if v is None:
        return ""
    if isinstance(v, Path):
        return str(v)
    return v


# FILESYSTEM
PathString = Annotated[str, BeforeValidator(_coerce_path_string)]

# SYSTEM & METADATA
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
