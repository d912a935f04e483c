import random

import pytest

from schoolstats import build_random_school, get_default_config
from schoolstats.generator import build_random_student, draw


@pytest.mark.parametrize("seed", range(5))
def test_default_ranges(seed):
    school = build_random_school(rng=random.Random(seed))

    assert school.name == "Школа №666"
    assert 2 <= len(school.classes) <= 12
    for school_class in school.classes:
        assert 2 <= len(school_class.students) <= 49
        for student in school_class.students:
            assert 6 <= student.age <= 18
            assert all(1 <= score <= 99 for score in student.grades.scores())


def test_class_names_are_numbered():
    school = build_random_school({"classes": {"min": 3, "max": 3}}, random.Random(1))
    assert [c.name for c in school.classes] == ["1a", "2a", "3a"]


def test_ids_are_sequential_across_school():
    school = build_random_school(rng=random.Random(7))
    ids = [s.id for c in school.classes for s in c.students]

    assert ids == list(range(len(ids)))
    assert school.students == len(ids)


def test_student_names_use_format():
    config = {
        "classes": {"min": 1, "max": 1},
        "students_per_class": {"min": 2, "max": 2},
        "student_name_format": "Pupil #{id}",
    }
    school = build_random_school(config, random.Random(3))
    assert [s.name for s in school.classes[0].students] == ["Pupil #0", "Pupil #1"]


def test_seed_reproduces_school():
    config = {"seed": 42}
    assert build_random_school(config) == build_random_school(config)


def test_fixed_ranges():
    config = {
        "school_name": "Fixed",
        "classes": {"min": 2, "max": 2},
        "students_per_class": {"min": 1, "max": 1},
        "age": {"min": 10, "max": 10},
        "scale": {"min": 50, "max": 50},
    }
    school = build_random_school(config, random.Random(0))

    assert school.name == "Fixed"
    assert school.students == 2
    assert school.average_grades() == 50.0
    assert school.best_class().name == "1a"
    assert all(c.students[0].age == 10 for c in school.classes)


def test_zero_classes():
    school = build_random_school({"classes": {"min": 0, "max": 0}}, random.Random(0))
    assert school.classes == []
    assert school.students == 0
    assert school.best_class().name == ""


def test_draw_is_inclusive():
    rng = random.Random(0)
    seen = {draw(rng, {"min": 1, "max": 3}) for _ in range(200)}
    assert seen == {1, 2, 3}


def test_build_random_student():
    config = get_default_config()
    student = build_random_student(random.Random(0), 12, config)

    assert student.id == 12
    assert student.name == "Student 12"
    assert 6 <= student.age <= 18
