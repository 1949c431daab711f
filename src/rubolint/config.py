# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings consumed by the RuboCop runner and their layered loading."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PROJECT_CONFIG_FILENAME: Final[str] = ".rubolint.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "rubolint"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class RubocopSettings(BaseModel):
    """User settings for running RuboCop.

    Keys may be written in snake_case or in the camelCase spelling used by
    editor settings (``executePath``, ``configFilePath``, ``onSave``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    execute_path: str = ""
    config_file_path: str = ""
    on_save: bool = True


def _read_toml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _pyproject_fragment(path: Path) -> dict[str, Any]:
    tool_section = _read_toml(path).get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return dict(section)


def _canonical_keys(fragment: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite camelCase aliases to field names so later layers override earlier ones."""

    by_alias = {to_camel(name): name for name in RubocopSettings.model_fields}
    return {by_alias.get(key, key): value for key, value in fragment.items()}


def load_settings(
    project_root: Path | None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> RubocopSettings:
    """Return settings merged from defaults, project files and ``overrides``.

    Precedence, lowest first: built-in defaults, ``[tool.rubolint]`` in
    ``pyproject.toml``, ``.rubolint.toml``, then ``overrides``. ``None``
    values in ``overrides`` are ignored.

    Args:
        project_root: Directory searched for configuration files, or ``None``.
        overrides: Explicit values, typically from command-line options.

    Returns:
        RubocopSettings: Resolved settings.

    Raises:
        ConfigError: If a configuration file is malformed or holds invalid values.
    """

    merged: dict[str, Any] = {}
    if project_root is not None:
        merged.update(_canonical_keys(_pyproject_fragment(project_root / PYPROJECT_FILENAME)))
        merged.update(_canonical_keys(_read_toml(project_root / PROJECT_CONFIG_FILENAME)))
    if overrides:
        merged.update(_canonical_keys({key: value for key, value in overrides.items() if value is not None}))
    try:
        return RubocopSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid rubolint settings: {exc}") from exc


__all__ = [
    "PROJECT_CONFIG_FILENAME",
    "ConfigError",
    "RubocopSettings",
    "load_settings",
]
