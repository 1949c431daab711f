# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell-free wrapper used to launch RuboCop."""

from __future__ import annotations

import shutil

# Bandit: the executable comes from user configuration or a PATH scan and is
# always passed as an argument list without ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options.

    Output is always decoded as text; undecodable bytes are replaced so that
    offense messages quoting arbitrary source never abort a run.
    """

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    capture_output: bool = True
    encoding: str = "utf-8"
    errors: str = "replace"
    discard_stdin: bool = True


CommandRunner: TypeAlias = Callable[..., CompletedProcess[str]]


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Resolve the executable of ``args``.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If a bare executable name is not found on ``PATH``.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute() or head_path.parent != Path():
        return [head, *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Execute ``args`` and return the completed process.

    Non-zero exit statuses are returned rather than raised, since RuboCop uses
    them to report offenses. No timeout is applied.

    Args:
        args: Command and argument sequence to execute.
        options: Execution options; defaults capture decoded text output.

    Returns:
        CompletedProcess: Subprocess execution metadata.

    Raises:
        OSError: When the executable cannot be found or started.
    """

    normalized = _normalize_args(args)
    resolved_options = options or CommandOptions()
    return subprocess.run(  # nosec B603 - argument list, no shell
        normalized,
        cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
        env=dict(resolved_options.env) if resolved_options.env is not None else None,
        check=False,
        capture_output=resolved_options.capture_output,
        encoding=resolved_options.encoding,
        errors=resolved_options.errors,
        stdin=subprocess.DEVNULL if resolved_options.discard_stdin else None,
    )


__all__ = ["CommandOptions", "CommandRunner", "run_command"]
