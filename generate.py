#!/usr/bin/env python3
"""
School Report Generator

Builds a school with random classes, students and grades, then prints the
school average, the best class and a summary of every class.

Usage:
    1. Optionally create config.json to override ranges, names or the seed
    2. Run: python generate.py
"""

import json
from pathlib import Path

from schoolstats import (
    build_random_school,
    grades_frame,
    merge_config,
    render_report,
    validate_config,
    validate_grades,
)


def load_config(config_path: str = "config.json") -> dict:
    """Load configuration from JSON file."""
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(config_path: str = "config.json"):
    """Main entry point."""
    # Load configuration, defaults when the file is missing
    user_config = {}
    path = Path(config_path)
    if path.exists():
        user_config = load_config(path)
    config = merge_config(user_config)

    issues = validate_config(config)
    errors = [issue for issue in issues if issue["type"] == "error"]
    for issue in issues:
        if issue["type"] == "warning":
            print(f"⚠️  {issue['message']}")
    if errors:
        for issue in errors:
            print(f"❌ Error: {issue['message']}")
        print(f"   Please fix {config_path} and run again.")
        return

    school = build_random_school(config)

    for issue in validate_grades(grades_frame(school)):
        print(f"⚠️  {issue['message']} (rows {issue['rows']})")

    print(render_report(school), end="")


if __name__ == "__main__":
    main()
