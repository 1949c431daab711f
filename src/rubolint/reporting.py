# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render grouped diagnostics for terminals and editor integrations."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Final

from rich.console import Console
from rich.text import Text

from .models import Diagnostic, DiagnosticEntry
from .severity import DiagnosticSeverity

LOCATION_SEPARATOR: Final[str] = ":"


def severity_color(sev: DiagnosticSeverity) -> str:
    """Return the rich colour name associated with a severity level."""

    return {
        DiagnosticSeverity.ERROR: "red",
        DiagnosticSeverity.WARNING: "yellow",
        DiagnosticSeverity.INFORMATION: "blue",
        DiagnosticSeverity.HINT: "cyan",
    }.get(sev, "red")


def format_location(diagnostic: Diagnostic) -> str:
    """Return ``path:line:col`` using 1-based positions for display."""

    rng = diagnostic.range
    return LOCATION_SEPARATOR.join((str(diagnostic.file), str(rng.start_line + 1), str(rng.start_col + 1)))


def format_diagnostic_line(diagnostic: Diagnostic, location_width: int, *, color: bool) -> Text:
    location = format_location(diagnostic).ljust(location_width)
    severity_text = Text(diagnostic.severity.value.ljust(len(DiagnosticSeverity.INFORMATION.value)))
    if color:
        severity_text.stylize(severity_color(diagnostic.severity))
    line = Text("  ")
    line.append(location)
    line.append(" ")
    line.append_text(severity_text)
    line.append(" ")
    line.append(diagnostic.message)
    return line


def render_text(entries: Sequence[DiagnosticEntry], console: Console, *, color: bool) -> None:
    """Print one line per diagnostic, keeping the report's file and offense order."""

    diagnostics = [diagnostic for entry in entries for diagnostic in entry.diagnostics]
    if not diagnostics:
        return
    location_width = max(len(format_location(diagnostic)) for diagnostic in diagnostics)
    for diagnostic in diagnostics:
        console.print(format_diagnostic_line(diagnostic, location_width, color=color))


def entries_to_json(entries: Sequence[DiagnosticEntry]) -> str:
    """Serialise ``entries`` as a JSON array keyed by file URI."""

    payload = [
        {
            "uri": entry.uri,
            "file": str(entry.file),
            "diagnostics": [
                diagnostic.model_dump(mode="json", include={"range", "severity", "message", "source", "code"})
                for diagnostic in entry.diagnostics
            ],
        }
        for entry in entries
    ]
    return json.dumps(payload, indent=2)


__all__ = ["entries_to_json", "format_diagnostic_line", "format_location", "render_text", "severity_color"]
