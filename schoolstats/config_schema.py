"""Configuration schema and defaults for random school generation."""

from typing import Any
import copy

RANGE_KEYS = ("classes", "students_per_class", "age", "scale")

# Every grade should land here whatever scale the generator draws from
GRADE_DOMAIN = {"min": 0, "max": 100}

DEFAULT_CONFIG: dict[str, Any] = {
    "school_name": "Школа №666",
    "classes": {
        "min": 2,
        "max": 12
    },
    "students_per_class": {
        "min": 2,
        "max": 49
    },
    "age": {
        "min": 6,
        "max": 18
    },
    "scale": {
        "min": 1,
        "max": 99
    },
    "class_name_format": "{number}a",
    "student_name_format": "Student {id}",
    "seed": None
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def merge_config(user_config: dict[str, Any]) -> dict[str, Any]:
    """
    Merge user configuration with defaults.

    Range values are updated key by key, other values override defaults.
    Missing keys use default values, unknown keys are dropped.
    """
    result = get_default_config()

    for key in RANGE_KEYS:
        if key in user_config:
            result[key].update(user_config[key])

    for key in ("school_name", "class_name_format", "student_name_format", "seed"):
        if key in user_config:
            result[key] = user_config[key]

    return result
