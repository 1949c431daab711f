# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic store abstraction shared between runs."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from .models import Diagnostic, DiagnosticEntry


@runtime_checkable
class DiagnosticStore(Protocol):
    """Host-owned collection receiving the diagnostics of each run."""

    def clear(self) -> None:
        """Remove every installed diagnostic."""

        raise NotImplementedError

    def set(self, entries: Sequence[DiagnosticEntry]) -> None:
        """Install ``entries``, replacing diagnostics for the same files."""

        raise NotImplementedError


class InMemoryDiagnosticStore(DiagnosticStore):
    """Thread-safe store keeping diagnostics keyed by absolute file path."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[Path, tuple[Diagnostic, ...]] = {}

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def set(self, entries: Sequence[DiagnosticEntry]) -> None:
        with self._lock:
            for entry in entries:
                self._entries[entry.file] = entry.diagnostics

    def get(self, file: Path) -> tuple[Diagnostic, ...]:
        """Return diagnostics installed for ``file`` (empty when unknown)."""

        with self._lock:
            return self._entries.get(file, ())

    def entries(self) -> list[DiagnosticEntry]:
        """Return a snapshot of the installed entries in insertion order."""

        with self._lock:
            return [DiagnosticEntry(file=file, diagnostics=diags) for file, diags in self._entries.items()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["DiagnosticStore", "InMemoryDiagnosticStore"]
