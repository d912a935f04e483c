"""Core module for school grade averages and sample reports."""

from .config_schema import DEFAULT_CONFIG, get_default_config, merge_config
from .models import Grades, Student, SchoolClass, School
from .generator import build_random_school
from .report import render_report, grades_frame
from .validators import validate_config, validate_grades

__all__ = [
    "DEFAULT_CONFIG",
    "get_default_config",
    "merge_config",
    "Grades",
    "Student",
    "SchoolClass",
    "School",
    "build_random_school",
    "render_report",
    "grades_frame",
    "validate_config",
    "validate_grades",
]
