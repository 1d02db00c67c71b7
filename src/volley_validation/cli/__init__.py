"""Volley validation CLI module.

Provides command-line tools for validating parsed scouting logs.

Usage:
    python -m volley_validation.cli validate match.json
    python -m volley_validation.cli validate match.json --level 3
    python -m volley_validation.cli validate match.json --json --output report.json
"""
