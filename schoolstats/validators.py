"""Validation utilities for generation settings and generated grades."""

from string import Formatter
from typing import Any
import pandas as pd

from .config_schema import GRADE_DOMAIN, RANGE_KEYS
from .models import SUBJECTS

RANGE_LABELS = {
    "classes": "Class count",
    "students_per_class": "Students per class",
    "age": "Age",
    "scale": "Grade scale",
}

# format key -> (label, the only field it may use)
NAME_FORMATS = {
    "class_name_format": ("Class name format", "number"),
    "student_name_format": ("Student name format", "id"),
}


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_name_format(template: Any, label: str, field_name: str) -> str | None:
    """
    Check a name template uses exactly one named field.

    Returns:
        An error message, or None when the template formats cleanly.
    """
    if not isinstance(template, str):
        return f"{label} must be a string"

    try:
        names = {name for _, name, _, _ in Formatter().parse(template) if name is not None}
    except ValueError as exc:
        return f"{label} is malformed: {exc}"

    if names != {field_name}:
        found = ", ".join(sorted(repr(n) for n in names)) or "none"
        return f"{label} must use only {{{field_name}}} (found {found})"

    # Format specs can still fail, e.g. "{number:q}" or "{number:{x}}"
    try:
        template.format(**{field_name: 1})
    except (KeyError, IndexError, ValueError, AttributeError) as exc:
        return f"{label} cannot be formatted: {exc}"

    return None


def validate_config(config: dict[str, Any]) -> list[dict[str, str]]:
    """
    Validate configuration and return list of issues.

    Returns:
        List of dicts with 'type' (error/warning) and 'message'.
    """
    issues = []

    for key in RANGE_KEYS:
        bounds = config.get(key, {})
        range_min = bounds.get("min", 0)
        range_max = bounds.get("max", 0)
        label = RANGE_LABELS[key]

        if not (is_int(range_min) and is_int(range_max)):
            issues.append({
                "type": "error",
                "message": f"{label} range ({range_min!r}-{range_max!r}) must use whole numbers"
            })
            continue

        if range_min > range_max:
            issues.append({
                "type": "error",
                "message": f"{label} range ({range_min}-{range_max}) has min above max"
            })

        # Counts and ages cannot go below zero
        if key != "scale" and range_min < 0:
            issues.append({
                "type": "error",
                "message": f"{label} minimum {range_min} is negative"
            })

        if key == "scale" and (range_min < GRADE_DOMAIN["min"] or range_max > GRADE_DOMAIN["max"]):
            issues.append({
                "type": "warning",
                "message": (
                    f"{label} ({range_min}-{range_max}) goes outside "
                    f"{GRADE_DOMAIN['min']}-{GRADE_DOMAIN['max']}"
                )
            })

    for key, (label, field_name) in NAME_FORMATS.items():
        message = check_name_format(config.get(key, ""), label, field_name)
        if message:
            issues.append({"type": "error", "message": message})

    seed = config.get("seed")
    if seed is not None and not (is_int(seed) or isinstance(seed, str)):
        issues.append({
            "type": "error",
            "message": f"Seed {seed!r} must be a whole number, a string or null"
        })

    if not str(config.get("school_name", "")).strip():
        issues.append({
            "type": "warning",
            "message": "School name is empty"
        })

    return issues


def validate_grades(
    grades_df: pd.DataFrame,
    bounds: dict[str, int] = GRADE_DOMAIN
) -> list[dict[str, Any]]:
    """
    Check subject scores in a grades frame against a grade range.

    Scores are checked one subject column at a time. A column yields one
    issue for out-of-range scores and one for values that are not numbers.

    Returns:
        List of dicts with 'column', 'rows', 'values', and 'message'.
    """
    issues = []

    low = bounds["min"]
    high = bounds["max"]

    for col in SUBJECTS:
        if col not in grades_df.columns:
            continue

        raw = grades_df[col]
        present = raw.notna() & (raw != "")
        numbers = pd.to_numeric(raw.where(present), errors="coerce")

        invalid = present & numbers.isna()
        outside = numbers.notna() & ((numbers < low) | (numbers > high))

        if outside.any():
            rows = outside[outside].index.tolist()
            issues.append({
                "column": col,
                "rows": rows,
                "values": raw[outside].tolist(),
                "message": f"{len(rows)} {col} grade(s) outside {low}-{high}"
            })

        if invalid.any():
            rows = invalid[invalid].index.tolist()
            values = raw[invalid].tolist()
            issues.append({
                "column": col,
                "rows": rows,
                "values": values,
                "message": f"Invalid {col} value(s): {', '.join(map(str, values))}"
            })

    return issues
