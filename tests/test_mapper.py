# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for mapping RuboCop offenses to diagnostics."""

from __future__ import annotations

from pathlib import Path

from rubolint.mapper import map_report, offense_range
from rubolint.models import OffenseLocation, RawReport
from rubolint.report import parse_report
from rubolint.severity import DiagnosticSeverity

END_TO_END_STDOUT = (
    '{"files":[{"path":"a.rb","offenses":[{"severity":"warning","message":"Line too long.",'
    '"cop_name":"Metrics/LineLength","location":{"line":10,"column":1,"length":5}}]}]}'
)


def _offense(message: str, severity: str = "convention", line: int = 1, column: int = 1, length: int = 1) -> dict:
    return {
        "severity": severity,
        "message": message,
        "cop_name": "Style/Test",
        "location": {"line": line, "column": column, "length": length},
    }


def test_end_to_end_mapping() -> None:
    entries = map_report(parse_report(END_TO_END_STDOUT, ""), Path("/proj"))

    assert len(entries) == 1
    entry = entries[0]
    assert entry.file == Path("/proj/a.rb")
    assert len(entry.diagnostics) == 1
    diagnostic = entry.diagnostics[0]
    rng = diagnostic.range
    assert (rng.start_line, rng.start_col, rng.end_line, rng.end_col) == (9, 0, 9, 5)
    assert diagnostic.severity is DiagnosticSeverity.WARNING
    assert diagnostic.message == "Line too long. (warning:Metrics/LineLength)"
    assert diagnostic.code == "Metrics/LineLength"
    assert diagnostic.file == Path("/proj/a.rb")


def test_range_derivation() -> None:
    rng = offense_range(OffenseLocation(line=5, column=3, length=4))

    assert (rng.start_line, rng.start_col, rng.end_line, rng.end_col) == (4, 2, 4, 6)
    assert not rng.is_empty


def test_zero_length_offense_yields_empty_range() -> None:
    rng = offense_range(OffenseLocation(line=2, column=7, length=0))

    assert rng.start_col == rng.end_col == 6
    assert rng.is_empty


def test_grouping_and_order_are_preserved() -> None:
    report = RawReport.model_validate(
        {
            "files": [
                {"path": "z.rb", "offenses": [_offense("third", line=9), _offense("first", line=1)]},
                {"path": "empty.rb", "offenses": []},
                {"path": "a.rb", "offenses": [_offense("dup"), _offense("dup")]},
            ],
        },
    )

    entries = map_report(report, "/proj")

    assert [entry.file for entry in entries] == [Path("/proj/z.rb"), Path("/proj/empty.rb"), Path("/proj/a.rb")]
    assert [d.message for d in entries[0].diagnostics] == ["third (convention:Style/Test)", "first (convention:Style/Test)"]
    assert entries[1].diagnostics == ()
    assert len(entries[2].diagnostics) == 2
    total_offenses = sum(len(file.offenses) for file in report.files)
    assert sum(len(entry.diagnostics) for entry in entries) == total_offenses


def test_unknown_severity_is_kept_in_message_and_mapped_to_error() -> None:
    report = RawReport.model_validate({"files": [{"path": "a.rb", "offenses": [_offense("odd", severity="info")]}]})

    diagnostic = map_report(report, "/proj")[0].diagnostics[0]

    assert diagnostic.severity is DiagnosticSeverity.ERROR
    assert diagnostic.message == "odd (info:Style/Test)"


def test_absolute_report_paths_are_kept(tmp_path: Path) -> None:
    target = tmp_path / "lib" / "a.rb"
    report = RawReport.model_validate({"files": [{"path": str(target), "offenses": []}]})

    entry = map_report(report, "/elsewhere")[0]

    assert entry.file == target
    assert entry.uri == target.as_uri()
