"""Validation CLI command.

Loads a parsed match, runs the validator and prints a text or JSON report.

Usage:
    python -m volley_validation.cli validate match.json
    python -m volley_validation.cli validate match.json --level 3 --json
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from volley_validation.config import get_settings
from volley_validation.schemas import MatchLoadError, load_match_file
from volley_validation.validation import (
    MatchValidator,
    ValidationConfigError,
    ValidationReport,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def generate_report(report: ValidationReport) -> str:
    """Generate a text validation report.

    Args:
        report: Validation report

    Returns:
        Report text
    """
    lines = []
    lines.append("=" * 80)
    lines.append("SCOUTING LOG VALIDATION REPORT")
    lines.append("=" * 80)
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append(f"Match: {report.match_id or '(unnamed)'}")
    lines.append(f"Validation level: {report.level}")
    lines.append("")

    lines.append("SUMMARY")
    lines.append("-" * 40)
    lines.append(f"Total Issues: {report.total}")
    lines.append(f"Major: {report.major}")
    lines.append(f"Default: {report.default}")
    lines.append(f"Minor: {report.minor}")
    lines.append("")

    if report.issues:
        lines.append("ISSUES")
        lines.append("-" * 40)
        for issue in report.issues:
            line_no = (
                issue.source_line_number
                if issue.source_line_number is not None
                else "?"
            )
            lines.append(f"Line {line_no} [{issue.severity_label}]: {issue.message}")
            if issue.source_line_text:
                lines.append(f"  > {issue.source_line_text}")
        lines.append("")
    else:
        lines.append("No issues found.")
        lines.append("")

    return "\n".join(lines)


def report_to_dict(report: ValidationReport) -> dict[str, Any]:
    """Convert a report into a JSON-serialisable dict."""
    return {
        "match_id": report.match_id,
        "level": report.level,
        "total": report.total,
        "major": report.major,
        "default": report.default,
        "minor": report.minor,
        "issues": [issue.to_dict() for issue in report.issues],
    }


def run_validate(
    match_file: str,
    level: int | None = None,
    sequential: bool = False,
    as_json: bool = False,
    output: str | None = None,
) -> int:
    """Run validation command.

    Args:
        match_file: Path to a parsed match JSON document
        level: Validation level (settings default if None)
        sequential: Disable the thread pool
        as_json: Emit JSON instead of text
        output: File to write the report to (stdout if None)

    Returns:
        Exit code (0 no issues, 1 issues reported, 2 error)
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuration error: {e}")
        return EXIT_ERROR

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        validator = MatchValidator(
            level=settings.level if level is None else level,
            parallel=settings.parallel and not sequential,
            max_workers=settings.max_workers,
        )
    except ValidationConfigError as e:
        print(f"Configuration error: {e}")
        return EXIT_ERROR

    try:
        match = load_match_file(Path(match_file))
    except MatchLoadError as e:
        logger.error("%s", e)
        print(str(e))
        return EXIT_ERROR

    report = validator.summarize(match)

    if as_json:
        text = json.dumps(report_to_dict(report), indent=2)
    else:
        text = generate_report(report)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text)
        print(f"Report saved to: {output_path}")
    else:
        print(text)

    return EXIT_OK if report.passed else EXIT_ISSUES
