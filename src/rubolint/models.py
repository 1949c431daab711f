# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models for RuboCop reports and the diagnostics derived from them."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from .severity import DiagnosticSeverity


class OffenseLocation(BaseModel):
    """1-based position of an offense as reported by RuboCop."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    length: NonNegativeInt = 0


class Offense(BaseModel):
    """Single rule violation reported for a file."""

    model_config = ConfigDict(frozen=True)

    # Kept as a plain string: unknown labels still need to reach the translator.
    severity: str
    message: str
    cop_name: str
    location: OffenseLocation


class FileReport(BaseModel):
    """Offenses reported for one file, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    path: str
    offenses: tuple[Offense, ...] = Field(default_factory=tuple)


class RawReport(BaseModel):
    """Decoded RuboCop JSON document."""

    model_config = ConfigDict(frozen=True)

    files: tuple[FileReport, ...]


class DiagnosticRange(BaseModel):
    """0-based range, half-open on columns."""

    model_config = ConfigDict(frozen=True)

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the range covers no characters."""
        return self.start_line == self.end_line and self.start_col == self.end_col


class Diagnostic(BaseModel):
    """Normalised diagnostic consumable by an editor problems panel."""

    model_config = ConfigDict(frozen=True)

    file: Path
    range: DiagnosticRange
    severity: DiagnosticSeverity
    message: str
    source: str = "rubocop"
    code: str | None = None


class DiagnosticEntry(BaseModel):
    """Diagnostics grouped under the absolute path of the file they belong to."""

    model_config = ConfigDict(frozen=True)

    file: Path
    diagnostics: tuple[Diagnostic, ...] = Field(default_factory=tuple)

    @property
    def uri(self) -> str:
        """Return the ``file://`` URI of the grouped file."""
        return self.file.as_uri()


__all__ = [
    "Diagnostic",
    "DiagnosticEntry",
    "DiagnosticRange",
    "FileReport",
    "Offense",
    "OffenseLocation",
    "RawReport",
]
