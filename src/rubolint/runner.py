# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run RuboCop for a document and install the resulting diagnostics."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

from .config import ConfigError, RubocopSettings
from .invocation import autodetect_execute_path, build_invocation, resolve_executable
from .logging import ConsoleNotifier, Notifier
from .mapper import map_report
from .models import DiagnosticEntry
from .outcome import Blocked, ProcessSignal, classify
from .process import CommandOptions, CommandRunner, run_command
from .report import ReportUnavailableError, parse_report
from .store import DiagnosticStore

LOGGER = logging.getLogger(__name__)

EMPTY_EXECUTE_PATH_MESSAGE: Final[str] = "execute path is empty! please check executePath config"

RUBY_SUFFIXES: Final[frozenset[str]] = frozenset(
    {".rb", ".rake", ".gemspec", ".ru", ".podspec", ".jbuilder", ".thor"},
)
RUBY_FILENAMES: Final[frozenset[str]] = frozenset(
    {"Gemfile", "Rakefile", "Guardfile", "Podfile", "Vagrantfile", "Capfile", "Brewfile"},
)

SettingsLoader = Callable[[], RubocopSettings]


class RunStatus(str, Enum):
    """Terminal state of a single run."""

    SKIPPED = "skipped"
    MISCONFIGURED = "misconfigured"
    BLOCKED = "blocked"
    REPORT_UNAVAILABLE = "report-unavailable"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class RunResult:
    """Summary of a run returned to the caller."""

    status: RunStatus
    entries: tuple[DiagnosticEntry, ...] = field(default_factory=tuple)
    message: str | None = None

    @property
    def diagnostic_count(self) -> int:
        return sum(len(entry.diagnostics) for entry in self.entries)


def is_ruby_document(path: Path) -> bool:
    """Return ``True`` when ``path`` looks like a Ruby source file."""

    return path.suffix in RUBY_SUFFIXES or path.name in RUBY_FILENAMES


class RubocopRunner:
    """Drive RuboCop for single documents and feed a diagnostic store."""

    def __init__(
        self,
        store: DiagnosticStore,
        *,
        settings_loader: SettingsLoader = RubocopSettings,
        notifier: Notifier | None = None,
        project_root: Path | None = None,
        run: CommandRunner = run_command,
        autodetect: Callable[[], str] = autodetect_execute_path,
    ) -> None:
        """Initialise the runner.

        Args:
            store: Host-owned store cleared and repopulated by every parsed run.
            settings_loader: Callable returning fresh settings for each run.
            notifier: Receiver for user-visible warnings.
            project_root: Workspace root; the target's directory is used when unset.
            run: Process runner, replaceable in tests.
            autodetect: Fallback used when no execute path is configured.
        """

        self._store = store
        self._settings_loader = settings_loader
        self._notifier = notifier or ConsoleNotifier()
        self._project_root = project_root.resolve() if project_root is not None else None
        self._run = run
        self._autodetect = autodetect
        self._lock = threading.Lock()

    @property
    def is_on_save(self) -> bool:
        """Return whether saving a document should trigger a run."""
        settings = self._load_settings()
        return settings is not None and settings.on_save

    def on_save(self, target: Path) -> RunResult:
        """Run RuboCop for a saved document when run-on-save is enabled."""

        settings = self._load_settings()
        if settings is None:
            return RunResult(status=RunStatus.MISCONFIGURED)
        if not settings.on_save:
            LOGGER.debug("on-save runs disabled; ignoring %s", target)
            return RunResult(status=RunStatus.SKIPPED)
        return self.execute(target)

    def execute(self, target: Path) -> RunResult:
        """Run RuboCop for ``target`` and install its diagnostics.

        Every failure is reported through the notifier and reflected in the
        returned status; nothing is raised to the caller.

        Args:
            target: Document to lint.

        Returns:
            RunResult: Status and the entries installed in the store.
        """

        if not is_ruby_document(target):
            LOGGER.debug("skipping non-Ruby document %s", target)
            return RunResult(status=RunStatus.SKIPPED)
        target = target.resolve()

        settings = self._load_settings()
        if settings is None:
            return RunResult(status=RunStatus.MISCONFIGURED)
        execute_path = settings.execute_path or self._autodetect()
        if not execute_path:
            return self._warn(RunStatus.MISCONFIGURED, EMPTY_EXECUTE_PATH_MESSAGE)

        cwd = self._project_root if self._project_root is not None else target.parent
        executable = resolve_executable(execute_path)
        invocation = build_invocation(target, settings.config_file_path)
        for message in invocation.warnings:
            self._notifier.warn(message)

        LOGGER.debug("running %s %s in %s", executable, " ".join(invocation.args), cwd)
        stdout, stderr = "", ""
        try:
            completed = self._run([executable, *invocation.args], options=CommandOptions(cwd=cwd))
        except OSError as exc:
            LOGGER.debug("failed to launch %s: %s", executable, exc)
            signal = ProcessSignal.from_os_error(exc, executable)
        else:
            stdout, stderr = completed.stdout or "", completed.stderr or ""
            signal = ProcessSignal.from_returncode(completed.returncode, executable)

        outcome = classify(signal, stderr)
        if isinstance(outcome, Blocked):
            return self._warn(RunStatus.BLOCKED, outcome.reason)
        return self._install(stdout, stderr, cwd)

    def _load_settings(self) -> RubocopSettings | None:
        try:
            return self._settings_loader()
        except ConfigError as exc:
            self._notifier.warn(str(exc))
            return None

    def _install(self, stdout: str, stderr: str, project_root: Path) -> RunResult:
        with self._lock:
            self._store.clear()
            try:
                report = parse_report(stdout, stderr)
            except ReportUnavailableError as exc:
                LOGGER.debug("report unavailable (%s)", exc.kind.value)
                return self._warn(RunStatus.REPORT_UNAVAILABLE, exc.message)
            entries = map_report(report, project_root)
            self._store.set(entries)
        return RunResult(status=RunStatus.COMPLETED, entries=tuple(entries))

    def _warn(self, status: RunStatus, message: str) -> RunResult:
        self._notifier.warn(message)
        return RunResult(status=status, message=message)


__all__ = [
    "EMPTY_EXECUTE_PATH_MESSAGE",
    "RubocopRunner",
    "RunResult",
    "RunStatus",
    "is_ruby_document",
]
