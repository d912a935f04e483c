"""Random sample data for a school."""

from typing import Any
import random

from .config_schema import merge_config
from .models import Grades, SchoolClass, School, Student


def draw(rng: random.Random, bounds: dict[str, int]) -> int:
    """Draw an integer from an inclusive {"min", "max"} range."""
    return rng.randint(bounds["min"], bounds["max"])


def build_random_student(
    rng: random.Random,
    student_id: int,
    config: dict[str, Any]
) -> Student:
    scale = config["scale"]
    return Student(
        student_id,
        config["student_name_format"].format(id=student_id),
        draw(rng, config["age"]),
        Grades.generate_random(rng.randint, scale["min"], scale["max"])
    )


def build_random_school(
    config: dict[str, Any] | None = None,
    rng: random.Random | None = None
) -> School:
    """
    Build a school filled with random classes and students.

    Student ids run from 0 across the whole school and `school.students`
    is bumped once per student added.

    Args:
        config: Overrides merged over the default configuration.
        rng: Random source. Defaults to random.Random seeded with
            config["seed"].

    Returns:
        The generated School.
    """
    config = merge_config(config or {})
    if rng is None:
        rng = random.Random(config["seed"])

    school = School(config["school_name"])

    class_count = draw(rng, config["classes"])
    for number in range(1, class_count + 1):
        school_class = SchoolClass(config["class_name_format"].format(number=number))

        for _ in range(draw(rng, config["students_per_class"])):
            student = build_random_student(rng, school.students, config)
            school_class.add_student(student)
            school.students += 1

        school.add_class(school_class)

    return school
