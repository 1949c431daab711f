# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for classifying RuboCop process outcomes."""

from __future__ import annotations

import errno

from rubolint.outcome import Blocked, ProcessSignal, Proceed, classify


def test_missing_executable_is_blocked_with_path() -> None:
    signal = ProcessSignal(code="ENOENT", path="/opt/ruby/bin/rubocop")

    outcome = classify(signal, "")

    assert outcome == Blocked("/opt/ruby/bin/rubocop is not executable")


def test_command_not_found_status_surfaces_stderr() -> None:
    outcome = classify(ProcessSignal(code=127, path="rubocop"), "bundler: command not found: rubocop\n")

    assert outcome == Blocked("bundler: command not found: rubocop\n")


def test_offense_exit_status_proceeds() -> None:
    assert classify(ProcessSignal(code=1, path="rubocop"), "") == Proceed()
    assert classify(ProcessSignal(code=2, path="rubocop"), "internal error") == Proceed()


def test_clean_exit_proceeds() -> None:
    assert classify(None, "") == Proceed()
    assert classify(ProcessSignal(path="rubocop"), "") == Proceed()


def test_signal_from_os_errors() -> None:
    with_errno = ProcessSignal.from_os_error(OSError(errno.ENOENT, "No such file"), "/bin/rubocop")
    without_errno = ProcessSignal.from_os_error(FileNotFoundError("not on PATH"), "rubocop")
    denied = ProcessSignal.from_os_error(PermissionError(errno.EACCES, "Permission denied"), "/bin/rubocop")

    assert with_errno == ProcessSignal(code="ENOENT", path="/bin/rubocop")
    assert without_errno.code == "ENOENT"
    assert classify(denied, "") == Blocked("/bin/rubocop is not executable")


def test_signal_from_returncode() -> None:
    assert ProcessSignal.from_returncode(0, "rubocop").code is None
    assert ProcessSignal.from_returncode(127, "rubocop").code == 127
