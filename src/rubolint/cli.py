# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point for running RuboCop on single files."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Annotated, Final

import typer

from .config import ConfigError, RubocopSettings, load_settings
from .logging import ConsoleNotifier, fail, get_console, ok
from .reporting import entries_to_json, render_text
from .runner import RubocopRunner, RunResult, RunStatus
from .store import InMemoryDiagnosticStore

EXIT_CLEAN: Final[int] = 0
EXIT_DIAGNOSTICS: Final[int] = 1
EXIT_FAILURE: Final[int] = 2

_FAILED_STATUSES: Final[frozenset[RunStatus]] = frozenset(
    {RunStatus.MISCONFIGURED, RunStatus.BLOCKED, RunStatus.REPORT_UNAVAILABLE},
)


class OutputFormat(str, Enum):
    """Supported renderings of the diagnostic set."""

    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="rubolint",
    help="Run RuboCop on a Ruby file and report editor-style diagnostics.",
    no_args_is_help=True,
    add_completion=False,
)

FileArgument = Annotated[
    Path,
    typer.Argument(help="Ruby file to lint.", exists=True, dir_okay=False, resolve_path=True),
]
RootOption = Annotated[
    Path | None,
    typer.Option("--root", help="Project root (defaults to the file's directory).", file_okay=False, resolve_path=True),
]
ExecutePathOption = Annotated[
    str | None,
    typer.Option("--execute-path", help="Directory prefix of the rubocop executable (empty: search PATH)."),
]
ConfigOption = Annotated[
    str | None,
    typer.Option("--config", help="Explicit RuboCop configuration file."),
]
OutputOption = Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format.")]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in messages.")]
ColorOption = Annotated[bool, typer.Option("--color/--no-color", help="Toggle ANSI colour output.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr.")]


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("rubolint")
    if not verbose or getattr(package_logger, "_rubolint_verbose_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    setattr(package_logger, "_rubolint_verbose_configured", True)


def _settings_loader(
    root: Path | None,
    execute_path: str | None,
    config: str | None,
) -> Callable[[], RubocopSettings]:
    overrides = {"execute_path": execute_path, "config_file_path": config}

    def load() -> RubocopSettings:
        return load_settings(root, overrides=overrides)

    return load


def _finish(result: RunResult, *, output: OutputFormat, emoji: bool, color: bool) -> None:
    if result.status in _FAILED_STATUSES:
        raise typer.Exit(code=EXIT_FAILURE)
    if result.status is RunStatus.SKIPPED:
        raise typer.Exit(code=EXIT_CLEAN)
    if output is OutputFormat.JSON:
        typer.echo(entries_to_json(result.entries))
    else:
        render_text(result.entries, get_console(color=color, emoji=emoji), color=color)
        if not result.diagnostic_count:
            ok("No offenses found", use_emoji=emoji, use_color=color)
    raise typer.Exit(code=EXIT_DIAGNOSTICS if result.diagnostic_count else EXIT_CLEAN)


def _build_runner(
    file: Path,
    root: Path | None,
    execute_path: str | None,
    config: str | None,
    *,
    emoji: bool,
    color: bool,
) -> RubocopRunner:
    settings_root = root if root is not None else file.parent
    loader = _settings_loader(settings_root, execute_path, config)
    try:
        loader()
    except ConfigError as exc:
        fail(str(exc), use_emoji=emoji, use_color=color)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    return RubocopRunner(
        InMemoryDiagnosticStore(),
        settings_loader=loader,
        notifier=ConsoleNotifier(use_emoji=emoji, use_color=color),
        project_root=root,
    )


@app.command("lint")
def lint_command(
    file: FileArgument,
    root: RootOption = None,
    execute_path: ExecutePathOption = None,
    config: ConfigOption = None,
    output: OutputOption = OutputFormat.TEXT,
    emoji: EmojiOption = True,
    color: ColorOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Lint FILE with RuboCop and print its diagnostics."""

    _configure_logging(verbose)
    runner = _build_runner(file, root, execute_path, config, emoji=emoji, color=color)
    _finish(runner.execute(file), output=output, emoji=emoji, color=color)


@app.command("on-save")
def on_save_command(
    file: FileArgument,
    root: RootOption = None,
    execute_path: ExecutePathOption = None,
    config: ConfigOption = None,
    output: OutputOption = OutputFormat.TEXT,
    emoji: EmojiOption = True,
    color: ColorOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Editor save hook: lint FILE only when run-on-save is enabled."""

    _configure_logging(verbose)
    runner = _build_runner(file, root, execute_path, config, emoji=emoji, color=color)
    _finish(runner.on_save(file), output=output, emoji=emoji, color=color)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
