"""
beatpaths Command-Line Interface.

Provides the ``beatpaths`` entry point with two commands:

- ``beatpaths show``: print the resolved home, config, data and logs paths
- ``beatpaths resolve``: resolve a relative path against one category

Both accept the beat-style path flags, which take precedence over the
``path`` section of the configuration file.

Usage:
    beatpaths show -c beat.yml
    beatpaths show --path.home /opt/beat --path.data /var/lib/beat
    beatpaths resolve config beat.yml --path.config /etc/beat
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from .core import Logger, PathCategory, PathConfig, StartupOrchestrator
from .exceptions import ConfigError, PathError

app = typer.Typer(
    name="beatpaths",
    add_completion=False,
    no_args_is_help=True,
)


# ── Shared options ──────────────────────────────────────────────────────────

ConfigFileOption = Annotated[
    Path | None,
    typer.Option(
        "--config-file",
        "-c",
        help="Configuration file holding the path section. "
        "A relative name is looked up in --path.config when given.",
    ),
]
HomeOption = Annotated[str, typer.Option("--path.home", help="Home path")]
ConfigOption = Annotated[str, typer.Option("--path.config", help="Configuration path")]
DataOption = Annotated[str, typer.Option("--path.data", help="Data path")]
LogsOption = Annotated[str, typer.Option("--path.logs", help="Logs path")]


class LogLevelName(str, Enum):
    """Accepted values of ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


LogLevelOption = Annotated[
    LogLevelName,
    typer.Option(
        "--log-level",
        case_sensitive=False,
        help="Console log verbosity. Log records go to stderr.",
    ),
]


# ── App callback ────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from importlib.metadata import version as pkg_version

        typer.echo(f"beatpaths {pkg_version('beatpaths')}")
        raise typer.Exit()


@app.callback()
def main(
    _: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """beatpaths: canonical directories for beat-style agents."""
    ...  # pragma: no cover


# ── Commands ────────────────────────────────────────────────────────────────


@app.command()
def show(
    config_file: ConfigFileOption = None,
    home: HomeOption = "",
    config: ConfigOption = "",
    data: DataOption = "",
    logs: LogsOption = "",
    log_level: LogLevelOption = LogLevelName.WARNING,
) -> None:
    """Initialize the paths and print a one-line summary."""
    overrides = PathConfig(home=home, config=config, data=data, logs=logs)
    resolver = _initialize(config_file, overrides, log_level)
    typer.echo(resolver.describe())


@app.command()
def resolve(
    category: Annotated[PathCategory, typer.Argument(help="Directory to resolve against.")],
    path: Annotated[str, typer.Argument(help="Relative path to resolve.")],
    config_file: ConfigFileOption = None,
    home: HomeOption = "",
    config: ConfigOption = "",
    data: DataOption = "",
    logs: LogsOption = "",
    log_level: LogLevelOption = LogLevelName.WARNING,
) -> None:
    """Initialize the paths and print PATH resolved against CATEGORY."""
    overrides = PathConfig(home=home, config=config, data=data, logs=logs)
    resolver = _initialize(config_file, overrides, log_level)
    typer.echo(resolver.resolve(category, path))


# ── Private helpers ─────────────────────────────────────────────────────────


def _locate_config_file(config_file: Path, overrides: PathConfig) -> Path:
    """
    Find the configuration file before the paths are known.

    Args:
        config_file: Value of ``--config-file``.
        overrides: Path flags from the command line.

    Returns:
        ``config_file`` joined onto ``--path.config`` when it is relative and
        the flag is set, otherwise ``config_file`` unchanged.
    """
    if config_file.is_absolute() or not overrides.config:
        return config_file
    return Path(overrides.config) / config_file


def _stderr_log_initializer(**kwargs):
    """Logger.setup with the console handler on stderr, keeping stdout for command output."""
    return Logger.setup(stream=sys.stderr, **kwargs)


def _initialize(config_file: Path | None, overrides: PathConfig, log_level: LogLevelName):
    """
    Run startup initialization, turning failures into exit code 1.

    Raises:
        typer.Exit: If the config file is missing, unreadable or malformed,
            or the paths could not be initialized.
    """
    supplied = PathConfig()
    if config_file is not None:
        located = _locate_config_file(config_file, overrides)
        if not located.exists():
            typer.echo(f"Error: configuration file not found: {located}", err=True)
            raise typer.Exit(code=1)
        try:
            supplied = PathConfig.from_yaml(located)
        except (ConfigError, OSError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    try:
        with StartupOrchestrator(
            supplied,
            overrides,
            log_initializer=_stderr_log_initializer,
            log_level=log_level.value,
        ) as orch:
            return orch.resolver
    except PathError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
