# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the rubolint command line interface."""

from __future__ import annotations

import json
import stat
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rubolint.cli import EXIT_CLEAN, EXIT_DIAGNOSTICS, EXIT_FAILURE, app

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="fake rubocop is a POSIX shell script")

REPORT = {
    "files": [
        {
            "path": "a.rb",
            "offenses": [
                {
                    "severity": "warning",
                    "message": "Line too long.",
                    "cop_name": "Metrics/LineLength",
                    "location": {"line": 10, "column": 1, "length": 5},
                },
            ],
        },
    ],
}


def _fake_rubocop(bin_dir: Path, *, stdout: str, exit_code: int = 1) -> Path:
    bin_dir.mkdir(parents=True, exist_ok=True)
    (bin_dir / "report.json").write_text(stdout, encoding="utf-8")
    script = bin_dir / "rubocop"
    script.write_text(
        f'#!/bin/sh\necho "$@" > "{bin_dir}/args.txt"\ncat "{bin_dir}/report.json"\nexit {exit_code}\n',
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return bin_dir


def _project(tmp_path: Path) -> Path:
    root = tmp_path / "proj"
    root.mkdir()
    (root / "a.rb").write_text("puts 'hello'\n", encoding="utf-8")
    return root


def test_lint_prints_diagnostics(tmp_path: Path) -> None:
    root = _project(tmp_path)
    bin_dir = _fake_rubocop(tmp_path / "bin", stdout=json.dumps(REPORT))

    result = CliRunner().invoke(
        app,
        ["lint", str(root / "a.rb"), "--root", str(root), "--execute-path", f"{bin_dir}/", "--no-emoji", "--no-color"],
    )

    assert result.exit_code == EXIT_DIAGNOSTICS
    assert "a.rb:10:1" in result.output
    assert "Line too long. (warning:Metrics/LineLength)" in result.output
    args = (bin_dir / "args.txt").read_text(encoding="utf-8").split()
    assert args[1:] == ["--format", "json", "--force-exclusion"]


def test_lint_json_output(tmp_path: Path) -> None:
    root = _project(tmp_path)
    bin_dir = _fake_rubocop(tmp_path / "bin", stdout=json.dumps(REPORT))

    result = CliRunner().invoke(
        app,
        ["lint", str(root / "a.rb"), "--root", str(root), "--execute-path", f"{bin_dir}/", "--output", "json"],
    )

    assert result.exit_code == EXIT_DIAGNOSTICS
    payload = json.loads(result.stdout)
    assert payload[0]["file"] == str(root / "a.rb")
    diagnostic = payload[0]["diagnostics"][0]
    assert diagnostic["range"] == {"start_line": 9, "start_col": 0, "end_line": 9, "end_col": 5}
    assert diagnostic["severity"] == "warning"


def test_lint_clean_file(tmp_path: Path) -> None:
    root = _project(tmp_path)
    bin_dir = _fake_rubocop(tmp_path / "bin", stdout='{"files": [{"path": "a.rb", "offenses": []}]}', exit_code=0)

    result = CliRunner().invoke(
        app,
        ["lint", str(root / "a.rb"), "--execute-path", f"{bin_dir}/", "--no-emoji", "--no-color"],
    )

    assert result.exit_code == EXIT_CLEAN
    assert "No offenses found" in result.output


def test_lint_passes_existing_config(tmp_path: Path) -> None:
    root = _project(tmp_path)
    config = root / ".rubocop.yml"
    config.write_text("AllCops: {}\n", encoding="utf-8")
    bin_dir = _fake_rubocop(tmp_path / "bin", stdout='{"files": []}', exit_code=0)

    result = CliRunner().invoke(
        app,
        ["lint", str(root / "a.rb"), "--execute-path", f"{bin_dir}/", "--config", str(config), "--no-emoji"],
    )

    assert result.exit_code == EXIT_CLEAN
    args = (bin_dir / "args.txt").read_text(encoding="utf-8").split()
    assert args[-2:] == ["--config", str(config)]


def test_lint_missing_executable_fails(tmp_path: Path) -> None:
    root = _project(tmp_path)
    missing = tmp_path / "nowhere"

    result = CliRunner().invoke(
        app,
        ["lint", str(root / "a.rb"), "--execute-path", f"{missing}/", "--no-emoji", "--no-color"],
    )

    assert result.exit_code == EXIT_FAILURE
    assert "is not executable" in result.output


def test_lint_non_json_output_fails(tmp_path: Path) -> None:
    root = _project(tmp_path)
    bin_dir = _fake_rubocop(tmp_path / "bin", stdout="oops\nnot json", exit_code=2)

    result = CliRunner().invoke(
        app,
        ["lint", str(root / "a.rb"), "--execute-path", f"{bin_dir}/", "--no-emoji", "--no-color"],
    )

    assert result.exit_code == EXIT_FAILURE
    assert "not valid JSON" in result.output


def test_on_save_disabled_by_project_config(tmp_path: Path) -> None:
    root = _project(tmp_path)
    (root / ".rubolint.toml").write_text("onSave = false\n", encoding="utf-8")
    bin_dir = _fake_rubocop(tmp_path / "bin", stdout=json.dumps(REPORT))

    result = CliRunner().invoke(app, ["on-save", str(root / "a.rb"), "--execute-path", f"{bin_dir}/"])

    assert result.exit_code == EXIT_CLEAN
    assert not (bin_dir / "args.txt").exists()


def test_invalid_project_config_fails(tmp_path: Path) -> None:
    root = _project(tmp_path)
    (root / ".rubolint.toml").write_text("unknown = 1\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["lint", str(root / "a.rb"), "--no-emoji", "--no-color"])

    assert result.exit_code == EXIT_FAILURE
    assert "Invalid rubolint settings" in result.output
