# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run RuboCop and turn its JSON report into editor diagnostics."""

from __future__ import annotations

from .config import ConfigError, RubocopSettings, load_settings
from .invocation import Invocation, build_invocation
from .mapper import map_report
from .models import Diagnostic, DiagnosticEntry, DiagnosticRange, RawReport
from .outcome import Blocked, ProcessSignal, Proceed, classify
from .report import ReportUnavailableError, parse_report
from .runner import RubocopRunner, RunResult, RunStatus
from .severity import DiagnosticSeverity, translate
from .store import DiagnosticStore, InMemoryDiagnosticStore

__all__ = [
    "Blocked",
    "ConfigError",
    "Diagnostic",
    "DiagnosticEntry",
    "DiagnosticRange",
    "DiagnosticSeverity",
    "DiagnosticStore",
    "InMemoryDiagnosticStore",
    "Invocation",
    "ProcessSignal",
    "Proceed",
    "RawReport",
    "ReportUnavailableError",
    "RubocopRunner",
    "RubocopSettings",
    "RunResult",
    "RunStatus",
    "build_invocation",
    "classify",
    "load_settings",
    "map_report",
    "parse_report",
    "translate",
]
