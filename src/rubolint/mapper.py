# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert a decoded RuboCop report into grouped diagnostics."""

from __future__ import annotations

from pathlib import Path

from .models import Diagnostic, DiagnosticEntry, DiagnosticRange, FileReport, Offense, OffenseLocation, RawReport
from .severity import translate


def offense_range(location: OffenseLocation) -> DiagnosticRange:
    """Return the 0-based, column half-open range covered by ``location``."""

    line = location.line - 1
    start_col = location.column - 1
    return DiagnosticRange(
        start_line=line,
        start_col=start_col,
        end_line=line,
        end_col=start_col + location.length,
    )


def compose_message(offense: Offense) -> str:
    """Return the offense message suffixed with its severity and cop name."""

    return f"{offense.message} ({offense.severity}:{offense.cop_name})"


def map_offense(offense: Offense, file: Path) -> Diagnostic:
    return Diagnostic(
        file=file,
        range=offense_range(offense.location),
        severity=translate(offense.severity),
        message=compose_message(offense),
        code=offense.cop_name,
    )


def map_file_report(file_report: FileReport, project_root: Path) -> DiagnosticEntry:
    # Path.__truediv__ keeps absolute report paths untouched.
    file = project_root / file_report.path
    return DiagnosticEntry(
        file=file,
        diagnostics=tuple(map_offense(offense, file) for offense in file_report.offenses),
    )


def map_report(report: RawReport, project_root: str | Path) -> list[DiagnosticEntry]:
    """Map every offense of ``report`` to a diagnostic grouped by file.

    File order and offense order are kept exactly as reported, and files
    without offenses still produce an (empty) entry.

    Args:
        report: Decoded RuboCop report.
        project_root: Directory the report's relative paths are anchored to.

    Returns:
        list[DiagnosticEntry]: One entry per reported file.
    """

    root = Path(project_root)
    return [map_file_report(file_report, root) for file_report in report.files]


__all__ = ["compose_message", "map_file_report", "map_offense", "map_report", "offense_range"]
