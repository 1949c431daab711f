# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify how a RuboCop process finished before its output is parsed."""

from __future__ import annotations

import errno
from dataclasses import dataclass
from typing import Final, TypeAlias

NOT_FOUND_CODE: Final[str] = "ENOENT"
NOT_PERMITTED_CODE: Final[str] = "EACCES"
COMMAND_NOT_FOUND_STATUS: Final[int] = 127

_NOT_EXECUTABLE_CODES: Final[frozenset[str]] = frozenset({NOT_FOUND_CODE, NOT_PERMITTED_CODE})


@dataclass(frozen=True, slots=True)
class ProcessSignal:
    """Completion signal of a RuboCop process.

    ``code`` is an OS error name when the process could not be started, the
    exit status when it ran, and ``None`` when nothing went wrong.
    """

    code: str | int | None = None
    path: str = ""

    @classmethod
    def from_os_error(cls, exc: OSError, path: str) -> ProcessSignal:
        """Describe a launch failure raised while starting ``path``."""

        name = errno.errorcode.get(exc.errno) if exc.errno is not None else None
        if name is None:
            if isinstance(exc, FileNotFoundError):
                name = NOT_FOUND_CODE
            elif isinstance(exc, PermissionError):
                name = NOT_PERMITTED_CODE
            else:
                name = type(exc).__name__
        return cls(code=name, path=path)

    @classmethod
    def from_returncode(cls, returncode: int, path: str) -> ProcessSignal:
        """Describe a process that ran and exited with ``returncode``."""

        return cls(code=returncode if returncode != 0 else None, path=path)


@dataclass(frozen=True, slots=True)
class Blocked:
    """The run is unusable; ``reason`` is shown to the user."""

    reason: str


@dataclass(frozen=True, slots=True)
class Proceed:
    """The run produced output worth parsing."""


Outcome: TypeAlias = Blocked | Proceed


def classify(signal: ProcessSignal | None, stderr: str) -> Outcome:
    """Decide whether the output of a run may be parsed.

    RuboCop exits non-zero whenever it reports offenses, so only launch
    failures and the shell's "command not found" status block parsing.

    Args:
        signal: Completion signal, or ``None`` for a clean exit.
        stderr: Captured standard error of the process.

    Returns:
        Outcome: :class:`Blocked` with a user-facing reason, or :class:`Proceed`.
    """

    if signal is None:
        return Proceed()
    if signal.code in _NOT_EXECUTABLE_CODES:
        return Blocked(f"{signal.path} is not executable")
    if signal.code == COMMAND_NOT_FOUND_STATUS:
        return Blocked(stderr)
    return Proceed()


__all__ = [
    "COMMAND_NOT_FOUND_STATUS",
    "Blocked",
    "Outcome",
    "ProcessSignal",
    "Proceed",
    "classify",
]
