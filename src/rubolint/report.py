# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Strict decoding of RuboCop's JSON report."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from enum import Enum
from typing import Final

from pydantic import ValidationError

from .models import RawReport

MAX_EXCERPT_LENGTH: Final[int] = 200
_EXCERPT_ELLIPSIS: Final[str] = "..."
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"[\s\x00-\x1f\x7f]+")
_EMPTY_STDERR_MESSAGE: Final[str] = "rubocop produced no report and wrote nothing to stderr"


class ReportFailure(str, Enum):
    """Reason a report could not be used."""

    INVALID_JSON = "invalid-json"
    EMPTY_REPORT = "empty-report"
    SCHEMA_MISMATCH = "schema-mismatch"


class ReportUnavailableError(ValueError):
    """Raised when RuboCop's stdout cannot be turned into a report."""

    def __init__(self, message: str, *, kind: ReportFailure, excerpt: str = "") -> None:
        """Initialise the error.

        Args:
            message: User-facing description of the failure.
            kind: Failure category.
            excerpt: Sanitised single-line excerpt of the offending output.
        """

        super().__init__(message)
        self.message = message
        self.kind = kind
        self.excerpt = excerpt


def sanitize_excerpt(text: str, *, limit: int = MAX_EXCERPT_LENGTH) -> str:
    """Collapse whitespace and control characters into a short single line."""

    collapsed = _WHITESPACE_RE.sub(" ", text).strip()
    if len(collapsed) <= limit:
        return collapsed
    return collapsed[:limit] + _EXCERPT_ELLIPSIS


def parse_report(stdout: str, stderr: str) -> RawReport:
    """Decode ``stdout`` into a :class:`RawReport`.

    Args:
        stdout: Captured standard output of RuboCop.
        stderr: Captured standard error, surfaced when stdout holds no report.

    Returns:
        RawReport: Decoded report.

    Raises:
        ReportUnavailableError: When stdout is not JSON, holds no report, or
            does not match the report schema.
    """

    if not stdout.strip():
        raise _empty_report(stderr)
    try:
        payload = json.loads(stdout)
    except json.JSONDecodeError as exc:
        excerpt = sanitize_excerpt(stdout)
        raise ReportUnavailableError(
            f'rubocop output is not valid JSON: "{excerpt}"',
            kind=ReportFailure.INVALID_JSON,
            excerpt=excerpt,
        ) from exc
    if not isinstance(payload, Mapping):
        raise _empty_report(stderr)
    try:
        return RawReport.model_validate(payload)
    except ValidationError as exc:
        excerpt = sanitize_excerpt(stdout)
        raise ReportUnavailableError(
            f'rubocop output does not match the JSON report format: "{excerpt}"',
            kind=ReportFailure.SCHEMA_MISMATCH,
            excerpt=excerpt,
        ) from exc


def _empty_report(stderr: str) -> ReportUnavailableError:
    message = stderr if stderr.strip() else _EMPTY_STDERR_MESSAGE
    return ReportUnavailableError(message, kind=ReportFailure.EMPTY_REPORT)


__all__ = [
    "MAX_EXCERPT_LENGTH",
    "ReportFailure",
    "ReportUnavailableError",
    "parse_report",
    "sanitize_excerpt",
]
