"""School hierarchy: grades, students, classes and the school itself."""

from dataclasses import dataclass, field
from typing import Callable, Iterable
import copy
import random

SUBJECTS = (
    "math",
    "literature",
    "science",
    "history",
    "physical_education",
    "arts",
    "music",
    "computer_science",
    "foreign_language",
)

GRADE_MIN = 1
GRADE_MAX = 99


def truncated_mean(scores: Iterable[int]) -> float:
    """Integer mean truncated toward zero, returned as a float."""
    values = list(scores)
    total = sum(values)
    quotient = abs(total) // len(values)
    return float(quotient if total >= 0 else -quotient)


@dataclass(frozen=True, order=True)
class Grades:
    """Scores for the nine subjects plus their truncated average.

    Scores are stored as given; nothing checks that they fall inside
    the grading scale.
    """
    math: int
    literature: int
    science: int
    history: int
    physical_education: int
    arts: int
    music: int
    computer_science: int
    foreign_language: int
    average: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "average", truncated_mean(self.scores()))

    def scores(self) -> tuple[int, ...]:
        """Return the nine subject scores in subject order."""
        return tuple(getattr(self, subject) for subject in SUBJECTS)

    @classmethod
    def generate_random(
        cls,
        randint: Callable[[int, int], int] | None = None,
        low: int = GRADE_MIN,
        high: int = GRADE_MAX
    ) -> "Grades":
        """
        Build grades from nine independent draws in [low, high].

        Args:
            randint: Random source called as randint(low, high), inclusive
                on both ends. Defaults to random.randint.
        """
        randint = randint or random.randint
        return cls(*(randint(low, high) for _ in SUBJECTS))


@dataclass
class Student:
    id: int
    name: str
    age: int
    grades: Grades


@dataclass
class SchoolClass:
    """A named, ordered group of students."""
    name: str
    students: list[Student] = field(default_factory=list)

    def __post_init__(self):
        self.students = copy.deepcopy(list(self.students))

    def average(self) -> float:
        """Mean of the students' grade averages, 0.0 for an empty class."""
        if not self.students:
            return 0.0
        total = 0.0
        for student in self.students:
            total += student.grades.average
        return total / len(self.students)

    def add_student(self, student: Student) -> None:
        self.students.append(copy.deepcopy(student))

    def summary(self) -> str:
        """Render name, average and head count as a multi-line block."""
        return (
            f"Class {self.name}:\n"
            f"    Average: {self.average()}\n"
            f"    Count: {len(self.students)}\n"
        )

    def __str__(self) -> str:
        return self.summary()


@dataclass
class School:
    """
    A named, ordered collection of classes.

    `students` is a counter kept by whoever fills the school. It starts at 0
    even when classes are passed in and is never recounted from the classes.
    """
    name: str
    students: int = field(default=0, init=False)
    classes: list[SchoolClass] = field(default_factory=list)

    def __post_init__(self):
        self.classes = copy.deepcopy(list(self.classes))

    def average_grades(self) -> float:
        """
        Unweighted mean of the class averages.

        Every class counts once regardless of its size. Returns 0.0 when
        the school has no classes.
        """
        if not self.classes:
            return 0.0
        total = 0.0
        for school_class in self.classes:
            total += school_class.average()
        return total / len(self.classes)

    def add_class(self, school_class: SchoolClass) -> None:
        self.classes.append(copy.deepcopy(school_class))

    def best_class(self) -> SchoolClass:
        """
        Return the class with the highest average.

        Only a strictly greater average replaces the current pick, so the
        earliest class wins a tie. The scan starts from an empty class named
        "", which is what comes back when no class averages above 0.0.
        """
        best = SchoolClass("")
        best_average = best.average()
        for school_class in self.classes:
            class_average = school_class.average()
            if class_average > best_average:
                best = school_class
                best_average = class_average
        return copy.deepcopy(best)
