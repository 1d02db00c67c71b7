"""CLI entry point for volley_validation.

Usage:
    python -m volley_validation.cli validate match.json
    python -m volley_validation.cli validate match.json --level 3
    python -m volley_validation.cli validate match.json --json --output report.json
"""

from __future__ import annotations

import argparse
import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="volley-validate",
        description="Volleyball scouting log validation tools",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a parsed match for inconsistencies",
    )
    validate_parser.add_argument(
        "match_file",
        type=str,
        help="Parsed match JSON document",
    )
    validate_parser.add_argument(
        "--level",
        type=int,
        default=None,
        help="Validation level 0-3 (default: VOLLEY_VALIDATION_LEVEL or 2)",
    )
    validate_parser.add_argument(
        "--sequential",
        action="store_true",
        help="Run checks one after another instead of on a thread pool",
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Emit the report as JSON",
    )
    validate_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the report to this file instead of stdout",
    )

    args = parser.parse_args(argv)

    if args.command == "validate":
        from volley_validation.cli.validate import run_validate

        return run_validate(
            match_file=args.match_file,
            level=args.level,
            sequential=args.sequential,
            as_json=args.as_json,
            output=args.output,
        )
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
