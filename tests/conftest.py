import pytest

from schoolstats import Grades, SchoolClass, Student

# (scores, truncated average)
HIGH = ((90, 85, 88, 92, 78, 87, 91, 95, 89), 88.0)
LOW = ((80, 75, 78, 82, 68, 77, 81, 85, 79), 78.0)
TOP = ((95, 92, 91, 96, 88, 93, 97, 98, 94), 93.0)
MID = ((85, 80, 82, 88, 75, 81, 84, 87, 79), 82.0)


@pytest.fixture
def high_grades():
    return Grades(*HIGH[0])


@pytest.fixture
def low_grades():
    return Grades(*LOW[0])


@pytest.fixture
def make_student():
    def _make(student_id, scores, age=15):
        return Student(student_id, f"Student {student_id}", age, Grades(*scores))
    return _make


@pytest.fixture
def two_classes(make_student):
    """Class 1 averages 83.0, Class 2 averages 87.5."""
    class1 = SchoolClass("Class 1", [make_student(1, HIGH[0]), make_student(2, LOW[0])])
    class2 = SchoolClass("Class 2", [make_student(3, TOP[0]), make_student(4, MID[0])])
    return class1, class2
