"""
Project-level defaults for the mdfixtures CLI.

A project that renders the same fixture over and over (say, a 500-section long
document replayed at 4x) can record that choice once instead of repeating
flags. Settings live in `.mdfixtures.toml`, `mdfixtures.toml`, or the
`[tool.mdfixtures]` table of `pyproject.toml`, in the nearest directory at or
above the working directory.

Settings are checked when the file is loaded, so a bad fixture name or
section count is reported against the config file rather than surfacing later
as a confusing CLI error. Explicit CLI flags always win over the file.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar

from mdfixtures.registry import FIXTURES, LONG_DOCUMENT_NAME

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

CONFIG_FILENAMES = (".mdfixtures.toml", "mdfixtures.toml")
PYPROJECT_TABLE = "mdfixtures"


@dataclass
class MdfixturesConfig:
    """
    Validated settings from a config file. `None` means the file did not set it.
    """

    fixture: str | None = None
    sections: int | None = None
    speed: float | None = None


class ConfigError(ValueError):
    """A config file exists but holds a setting mdfixtures cannot use."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def _known_fixture_names() -> list[str]:
    return [*FIXTURES, LONG_DOCUMENT_NAME]


def _check_fixture(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"fixture must be a string, got {type(value).__name__}")
    if value not in _known_fixture_names():
        valid = ", ".join(_known_fixture_names())
        raise ValueError(f"unknown fixture {value!r} (expected one of: {valid})")
    return value


def _check_sections(value: Any) -> int:
    # TOML booleans arrive as Python bools, which are ints
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"sections must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"sections must be non-negative, got {value}")
    return value


def _check_speed(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"speed must be a number, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"speed must be positive, got {value}")
    return float(value)


_CHECKS = {
    "fixture": _check_fixture,
    "sections": _check_sections,
    "speed": _check_speed,
}


def _tool_table(path: Path) -> dict[str, Any] | None:
    """The `[tool.mdfixtures]` table of a pyproject.toml, if it has one."""
    try:
        data = tomllib.loads(path.read_text())
    except (tomllib.TOMLDecodeError, OSError):
        return None
    table = data.get("tool", {}).get(PYPROJECT_TABLE)
    return table if isinstance(table, dict) else None


def find_config_file(start_dir: Path) -> Path | None:
    """
    Nearest config file at or above `start_dir`. Within one directory, dedicated
    files win over `pyproject.toml`, which only counts with a `[tool.mdfixtures]`
    table.
    """
    for directory in (start_dir.resolve(), *start_dir.resolve().parents):
        for filename in CONFIG_FILENAMES:
            if (directory / filename).is_file():
                return directory / filename
        pyproject = directory / "pyproject.toml"
        if pyproject.is_file() and _tool_table(pyproject) is not None:
            return pyproject
    return None


def load_config(config_path: Path) -> MdfixturesConfig:
    """
    Read and validate a config file.

    Keys may be written at top level or inside any table (`[output]`,
    `[streaming]`). Unknown keys are reported on stderr and skipped. Raises
    `ConfigError` for malformed TOML or for a setting with the wrong type or an
    out-of-range value.
    """
    if config_path.name == "pyproject.toml":
        data = _tool_table(config_path) or {}
    else:
        try:
            data = tomllib.loads(config_path.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(config_path, f"invalid TOML: {e}") from e

    settings: dict[str, Any] = {}
    for key, value in _flatten(data):
        check = _CHECKS.get(key)
        if check is None:
            print(f"Warning: {config_path}: unrecognized config key: {key}", file=sys.stderr)
            continue
        try:
            settings[key] = check(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(config_path, str(e)) from e

    return MdfixturesConfig(**settings)


def _flatten(data: dict[str, Any]) -> list[tuple[str, Any]]:
    items: list[tuple[str, Any]] = []
    for key, value in data.items():
        if isinstance(value, dict):
            items.extend(_flatten(value))
        else:
            items.append((key, value))
    return items


_T = TypeVar("_T")


def apply_config(cli_opts: _T, config: MdfixturesConfig, explicit_flags: set[str]) -> _T:
    """
    Fill in options the user did not pass on the command line from `config`.
    """
    for cfg_field in fields(config):
        value = getattr(config, cfg_field.name)
        if value is not None and cfg_field.name not in explicit_flags:
            setattr(cli_opts, cfg_field.name, value)
    return cli_opts
