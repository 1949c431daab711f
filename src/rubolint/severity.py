# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class OffenseSeverity(str, Enum):
    """Severity vocabulary emitted by RuboCop's JSON formatter."""

    REFACTOR = "refactor"
    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class DiagnosticSeverity(str, Enum):
    """Severity levels understood by editor diagnostics panels."""

    HINT = "hint"
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


_OFFENSE_TO_DIAGNOSTIC: Final[dict[str, DiagnosticSeverity]] = {
    OffenseSeverity.REFACTOR.value: DiagnosticSeverity.HINT,
    OffenseSeverity.CONVENTION.value: DiagnosticSeverity.INFORMATION,
    OffenseSeverity.WARNING.value: DiagnosticSeverity.WARNING,
    OffenseSeverity.ERROR.value: DiagnosticSeverity.ERROR,
    OffenseSeverity.FATAL.value: DiagnosticSeverity.ERROR,
}


def translate(sev: str) -> DiagnosticSeverity:
    """Map a RuboCop severity label onto a :class:`DiagnosticSeverity`.

    Unrecognised labels resolve to the most severe level so that unexpected
    tool output is never hidden.

    Args:
        sev: Severity label reported for an offense.

    Returns:
        DiagnosticSeverity: Diagnostic severity for ``sev``.
    """

    return _OFFENSE_TO_DIAGNOSTIC.get(sev, DiagnosticSeverity.ERROR)


__all__ = ["DiagnosticSeverity", "OffenseSeverity", "translate"]
