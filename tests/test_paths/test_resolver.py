"""
Test Suite for PathResolver.

Tests precedence of override, base and default values, data directory
provisioning, error reporting and resolution of relative paths.
"""

from __future__ import annotations

import os
import sys
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from beatpaths.core.config import PathConfig
from beatpaths.core.paths import DATA_DIR_MODE, PathCategory, PathResolver
from beatpaths.exceptions import DataDirCreateError, HomeUnresolvableError, PathError

ALL_CATEGORIES = list(PathCategory)


@pytest.fixture
def executable(tmp_path, monkeypatch):
    """Pretend the running executable lives in <tmp_path>/bin."""
    exe = tmp_path / "bin" / "beat"
    monkeypatch.setattr(sys, "argv", [str(exe)])
    return exe


@pytest.fixture
def resolver(tmp_path):
    """Resolver initialized with every directory under tmp_path."""
    r = PathResolver()
    r.init_paths(
        PathConfig(
            home=str(tmp_path / "home"),
            config=str(tmp_path / "etc"),
            data=str(tmp_path / "var"),
            logs=str(tmp_path / "log"),
        )
    )
    return r


# RESOLVER: INITIAL STATE
@pytest.mark.unit
def test_new_resolver_is_uninitialized():
    """Test a fresh resolver has empty fields and reports uninitialized."""
    r = PathResolver()

    assert (r.home, r.config, r.data, r.logs) == ("", "", "", "")
    assert r.is_initialized is False


@pytest.mark.unit
def test_independent_instances(tmp_path):
    """Test two resolvers configured differently do not share state."""
    first = PathResolver()
    second = PathResolver()

    first.init_paths(PathConfig(home=str(tmp_path / "a")))
    second.init_paths(PathConfig(home=str(tmp_path / "b")))

    assert first.home == str(tmp_path / "a")
    assert second.home == str(tmp_path / "b")


# INIT: DEFAULTS
@pytest.mark.unit
def test_defaults_derive_from_executable_dir(executable):
    """Test empty base and no overrides derive everything from the executable dir."""
    r = PathResolver()
    r.init_paths(PathConfig())

    expected_home = str(executable.parent)
    assert r.home == expected_home
    assert r.config == expected_home
    assert r.data == os.path.join(expected_home, "data")
    assert r.logs == os.path.join(expected_home, "logs")
    for value in (r.home, r.config, r.data, r.logs):
        assert os.path.isabs(value)
    assert r.is_initialized is True


@pytest.mark.unit
def test_defaults_follow_supplied_home(tmp_path):
    """Test config, data and logs default relative to a supplied home."""
    home = str(tmp_path / "beat")
    r = PathResolver()
    r.init_paths(PathConfig(home=home))

    assert r.home == home
    assert r.config == home
    assert r.data == os.path.join(home, "data")
    assert r.logs == os.path.join(home, "logs")


@pytest.mark.unit
def test_defaults_follow_overridden_home(tmp_path):
    """Test defaults are computed from the home override, not the base home."""
    base_home = str(tmp_path / "base")
    cli_home = str(tmp_path / "cli")

    r = PathResolver()
    r.init_paths(PathConfig(home=base_home), PathConfig(home=cli_home))

    assert r.home == cli_home
    assert r.config == cli_home
    assert r.data == os.path.join(cli_home, "data")
    assert r.logs == os.path.join(cli_home, "logs")


@pytest.mark.unit
def test_base_home_with_data_override():
    """Test base home '/opt/app' combined with a data override."""
    r = PathResolver()

    with patch("beatpaths.core.paths.resolver.os.makedirs") as makedirs:
        r.init_paths(PathConfig(home="/opt/app"), PathConfig(data="/var/lib/app"))

    assert r.home == "/opt/app"
    assert r.config == "/opt/app"
    assert r.data == "/var/lib/app"
    assert r.logs == os.path.join("/opt/app", "logs")
    makedirs.assert_called_once_with("/var/lib/app", mode=0o755, exist_ok=True)


@pytest.mark.unit
def test_relative_values_are_made_absolute(tmp_path, monkeypatch):
    """Test relative configured paths are anchored at the working directory."""
    monkeypatch.chdir(tmp_path)

    r = PathResolver()
    r.init_paths(PathConfig(home="agent", data="state"))

    assert r.home == os.path.join(os.getcwd(), "agent")
    assert r.data == os.path.join(os.getcwd(), "state")
    assert r.logs == os.path.join(r.home, "logs")


# INIT: PRECEDENCE
@pytest.mark.unit
@pytest.mark.parametrize("field", ["home", "config", "data", "logs"])
def test_override_wins_per_field(tmp_path, field):
    """Test each override replaces only its own field."""
    base = {name: str(tmp_path / "base" / name) for name in ("home", "config", "data", "logs")}
    override_value = str(tmp_path / "override" / field)

    r = PathResolver()
    r.init_paths(PathConfig(**base), PathConfig(**{field: override_value}))

    for name in ("home", "config", "data", "logs"):
        expected = override_value if name == field else base[name]
        assert getattr(r, name) == expected


@pytest.mark.unit
def test_empty_override_keeps_base(tmp_path):
    """Test empty override strings mean 'not specified'."""
    base = PathConfig(home=str(tmp_path / "h"), data=str(tmp_path / "d"))

    r = PathResolver()
    r.init_paths(base, PathConfig(home="", data=""))

    assert r.home == str(tmp_path / "h")
    assert r.data == str(tmp_path / "d")


@pytest.mark.unit
def test_init_accepts_any_path_source(tmp_path):
    """Test init_paths() works with plain objects exposing the four attributes."""
    supplied = SimpleNamespace(home=str(tmp_path), config="", data="", logs="")
    overrides = SimpleNamespace(home="", config="", data="", logs=str(tmp_path / "out"))

    r = PathResolver()
    r.init_paths(supplied, overrides)

    assert r.home == str(tmp_path)
    assert r.logs == str(tmp_path / "out")


# INIT: REINITIALIZATION
@pytest.mark.unit
def test_second_init_recomputes_everything(tmp_path):
    """Test calling init_paths() twice leaves no stale values behind."""
    r = PathResolver()
    r.init_paths(
        PathConfig(
            home=str(tmp_path / "one"),
            config=str(tmp_path / "one_cfg"),
            data=str(tmp_path / "one_data"),
            logs=str(tmp_path / "one_logs"),
        )
    )

    second_home = str(tmp_path / "two")
    r.init_paths(PathConfig(home=second_home))

    assert r.home == second_home
    assert r.config == second_home
    assert r.data == os.path.join(second_home, "data")
    assert r.logs == os.path.join(second_home, "logs")


# INIT: DATA DIRECTORY
@pytest.mark.integration
def test_data_directory_created_with_parents(tmp_path):
    """Test init_paths() creates the data directory and missing parents."""
    data = tmp_path / "deep" / "nested" / "data"

    r = PathResolver()
    r.init_paths(PathConfig(home=str(tmp_path), data=str(data)))

    assert data.is_dir()


@pytest.mark.integration
def test_existing_data_directory_is_not_an_error(tmp_path):
    """Test an already existing data directory is accepted."""
    data = tmp_path / "data"
    data.mkdir()
    (data / "registry").write_text("{}")

    r = PathResolver()
    r.init_paths(PathConfig(home=str(tmp_path)))

    assert r.is_initialized is True
    assert (data / "registry").read_text() == "{}"


@pytest.mark.integration
@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_data_directory_mode(tmp_path):
    """Test the data directory is created with 0755 (minus umask)."""
    umask = os.umask(0)
    os.umask(umask)

    r = PathResolver()
    r.init_paths(PathConfig(home=str(tmp_path), data=str(tmp_path / "fresh")))

    mode = os.stat(r.data).st_mode & 0o777
    assert mode == DATA_DIR_MODE & ~umask


@pytest.mark.integration
def test_only_data_directory_is_created(tmp_path):
    """Test init_paths() does not create the config or logs directories."""
    r = PathResolver()
    r.init_paths(PathConfig(home=str(tmp_path), config=str(tmp_path / "etc")))

    assert os.path.isdir(r.data)
    assert not os.path.exists(r.logs)
    assert not os.path.exists(r.config)


# INIT: ERRORS
@pytest.mark.integration
def test_data_path_is_a_file(tmp_path):
    """Test a regular file at the data path raises DataDirCreateError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    r = PathResolver()
    with pytest.raises(DataDirCreateError, match="Failed to create data path") as exc_info:
        r.init_paths(PathConfig(home=str(tmp_path), data=str(blocker)))

    assert exc_info.value.path == str(blocker)
    assert isinstance(exc_info.value.cause, OSError)
    assert r.is_initialized is False
    # computed values are kept for diagnostics
    assert r.data == str(blocker)


@pytest.mark.integration
def test_data_path_below_a_file(tmp_path):
    """Test a file in the middle of the data path raises DataDirCreateError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    r = PathResolver()
    with pytest.raises(DataDirCreateError):
        r.init_paths(PathConfig(home=str(tmp_path), data=str(blocker / "data")))


@pytest.mark.unit
def test_data_dir_error_is_a_path_error(tmp_path):
    """Test DataDirCreateError is catchable as PathError."""
    r = PathResolver()

    with patch(
        "beatpaths.core.paths.resolver.os.makedirs",
        side_effect=PermissionError("permission denied"),
    ):
        with pytest.raises(PathError, match="permission denied"):
            r.init_paths(PathConfig(home=str(tmp_path)))


@pytest.mark.unit
def test_failed_reinit_marks_resolver_unusable(tmp_path):
    """Test a failing second init_paths() clears the initialized state."""
    r = PathResolver()
    r.init_paths(PathConfig(home=str(tmp_path)))
    assert r.is_initialized is True

    with patch("beatpaths.core.paths.resolver.os.makedirs", side_effect=OSError("disk error")):
        with pytest.raises(DataDirCreateError):
            r.init_paths(PathConfig(home=str(tmp_path / "other")))

    assert r.is_initialized is False


@pytest.mark.unit
def test_home_unresolvable(monkeypatch):
    """Test a failing working-directory lookup raises HomeUnresolvableError."""
    monkeypatch.setattr(sys, "argv", ["beat"])

    def broken_getcwd():
        raise FileNotFoundError("working directory was removed")

    monkeypatch.setattr(os, "getcwd", broken_getcwd)

    r = PathResolver()
    with pytest.raises(HomeUnresolvableError, match="could not be obtained") as exc_info:
        r.init_paths(PathConfig())

    assert exc_info.value.executable == "beat"
    assert r.is_initialized is False
    assert r.home == ""


# RESOLVE
@pytest.mark.unit
@pytest.mark.parametrize("category", ALL_CATEGORIES)
def test_resolve_absolute_path_unchanged(resolver, category):
    """Test absolute paths are returned as-is for every category."""
    absolute = os.path.join(os.sep, "etc", "beat", "beat.yml")

    assert resolver.resolve(category, absolute) == absolute


@pytest.mark.unit
def test_resolve_absolute_path_on_uninitialized_resolver():
    """Test absolute paths pass through even before initialization."""
    absolute = os.path.join(os.sep, "srv", "file")

    assert PathResolver().resolve(PathCategory.DATA, absolute) == absolute


@pytest.mark.unit
@pytest.mark.parametrize(
    "category, field",
    [
        (PathCategory.HOME, "home"),
        (PathCategory.CONFIG, "config"),
        (PathCategory.DATA, "data"),
        (PathCategory.LOGS, "logs"),
    ],
)
def test_resolve_relative_path(resolver, category, field):
    """Test relative paths are joined onto the category's directory."""
    assert resolver.resolve(category, "sub/file") == os.path.join(getattr(resolver, field), "sub/file")


@pytest.mark.unit
def test_resolve_config_file(resolver):
    """Test the config file lookup resolves against the config directory."""
    assert resolver.resolve(PathCategory.CONFIG, "beat.yml") == os.path.join(
        resolver.config, "beat.yml"
    )


@pytest.mark.unit
def test_resolve_accepts_category_strings(resolver):
    """Test plain string values select the same directory as the enum members."""
    assert resolver.resolve("data", "registry") == resolver.resolve(PathCategory.DATA, "registry")


@pytest.mark.unit
@pytest.mark.parametrize("bad_category", ["metrics", "", None, 3])
def test_resolve_unknown_category_aborts(resolver, bad_category):
    """Test unknown categories raise instead of falling back to a default."""
    with pytest.raises(AssertionError, match="Unknown path category"):
        resolver.resolve(bad_category, "file")


@pytest.mark.unit
def test_resolve_has_no_side_effects(resolver):
    """Test resolve() neither mutates the resolver nor touches the filesystem."""
    before = repr(resolver)

    resolved = resolver.resolve(PathCategory.LOGS, "agent.log")

    assert repr(resolver) == before
    assert not os.path.exists(resolved)


# DESCRIBE
@pytest.mark.unit
def test_describe_format_and_order():
    """Test describe() lists Home, Config, Data and Logs in that order."""
    r = PathResolver()
    r.home, r.config, r.data, r.logs = "/h", "/c", "/d", "/l"

    assert r.describe() == "Home path: [/h] Config path: [/c] Data path: [/d] Logs path: [/l]"
    assert str(r) == r.describe()


@pytest.mark.unit
def test_describe_uninitialized():
    """Test describe() works on an uninitialized resolver."""
    assert PathResolver().describe() == "Home path: [] Config path: [] Data path: [] Logs path: []"


# SNAPSHOT
@pytest.mark.unit
def test_as_config_round_trips_into_new_resolver(resolver, tmp_path):
    """Test as_config() feeds another resolver to the same directories."""
    clone = PathResolver()
    clone.init_paths(resolver.as_config())

    assert clone.describe() == resolver.describe()
