# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build RuboCop command lines and locate the RuboCop executable."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

FORMAT_FLAG: Final[str] = "--format"
FORMAT_JSON: Final[str] = "json"
FORCE_EXCLUSION_FLAG: Final[str] = "--force-exclusion"
CONFIG_FLAG: Final[str] = "--config"
PATH_ENV_KEY: Final[str] = "PATH"

_POSIX_BINARY: Final[str] = "rubocop"
_WINDOWS_BINARY: Final[str] = "rubocop.bat"


@dataclass(frozen=True, slots=True)
class ConfigFlag:
    """Explicit configuration file passed to RuboCop."""

    path: str
    flag_name: str = CONFIG_FLAG

    def as_args(self) -> tuple[str, str]:
        return (self.flag_name, self.path)


@dataclass(frozen=True, slots=True)
class Invocation:
    """Immutable description of a single RuboCop run."""

    target_path: str
    config_flag: ConfigFlag | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)
    format_flag: str = FORMAT_JSON
    force_exclusion: bool = True

    @property
    def args(self) -> list[str]:
        """Return the argument list passed after the executable."""

        args = [self.target_path, FORMAT_FLAG, self.format_flag]
        if self.force_exclusion:
            args.append(FORCE_EXCLUSION_FLAG)
        if self.config_flag is not None:
            args.extend(self.config_flag.as_args())
        return args


def build_invocation(
    target_path: str | Path,
    config_path: str,
    *,
    exists: Callable[[str], bool] = os.path.exists,
) -> Invocation:
    """Return the invocation for ``target_path`` honouring ``config_path``.

    An empty ``config_path`` means RuboCop discovers its own configuration. A
    non-empty path is only forwarded when it exists; otherwise the run
    proceeds without it and a warning is recorded on the invocation.

    Args:
        target_path: File RuboCop should inspect.
        config_path: Explicit configuration file, or ``""`` for none.
        exists: Filesystem probe used to check ``config_path``.

    Returns:
        Invocation: Invocation carrying the argument list and any warnings.
    """

    target = str(target_path)
    if config_path == "":
        return Invocation(target_path=target)
    if exists(config_path):
        return Invocation(target_path=target, config_flag=ConfigFlag(path=config_path))
    return Invocation(
        target_path=target,
        warnings=(f"{config_path} file does not exist. Ignoring...",),
    )


def executable_name(platform: str | None = None) -> str:
    """Return the platform specific RuboCop binary name."""

    current = sys.platform if platform is None else platform
    return _WINDOWS_BINARY if current == "win32" else _POSIX_BINARY


def autodetect_execute_path(
    env: Mapping[str, str] | None = None,
    *,
    platform: str | None = None,
    exists: Callable[[str], bool] = os.path.exists,
) -> str:
    """Scan ``PATH`` for the RuboCop binary.

    Args:
        env: Environment mapping; defaults to :data:`os.environ`.
        platform: Platform override used to pick the binary name.
        exists: Filesystem probe used for each candidate.

    Returns:
        str: Directory containing the binary with a trailing separator, or an
        empty string when nothing matches.
    """

    environ = os.environ if env is None else env
    paths = environ.get(PATH_ENV_KEY)
    if not paths:
        return ""
    binary = executable_name(platform)
    for entry in paths.split(os.pathsep):
        # An empty entry would probe the working directory.
        if not entry:
            continue
        if exists(os.path.join(entry, binary)):
            return entry + os.sep
    return ""


def resolve_executable(execute_path: str, *, platform: str | None = None) -> str:
    """Return ``execute_path`` joined with the binary name.

    The configured path is a directory prefix, so it is concatenated verbatim.
    """

    return execute_path + executable_name(platform)


__all__ = [
    "CONFIG_FLAG",
    "FORCE_EXCLUSION_FLAG",
    "FORMAT_FLAG",
    "FORMAT_JSON",
    "ConfigFlag",
    "Invocation",
    "autodetect_execute_path",
    "build_invocation",
    "executable_name",
    "resolve_executable",
]
