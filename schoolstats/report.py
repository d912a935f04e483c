"""Console report and tabular views of a school."""

import pandas as pd

from .models import SUBJECTS, School

FRAME_COLUMNS = ["class", "id", "name", "age", *SUBJECTS, "average"]


def render_report(school: School) -> str:
    """
    Render the school report.

    School name and average come first, then the best class, then every
    class in order, each block followed by a blank line.
    """
    lines = [
        f"School: {school.name}\n",
        f"Average: {school.average_grades()}\n",
        school.best_class().summary(),
        "\n",
    ]
    for school_class in school.classes:
        lines.append(school_class.summary())
        lines.append("\n")
    return "".join(lines)


def grades_frame(school: School) -> pd.DataFrame:
    """Build a DataFrame with one row per student, in school order."""
    rows = []
    for school_class in school.classes:
        for student in school_class.students:
            row = {
                "class": school_class.name,
                "id": student.id,
                "name": student.name,
                "age": student.age,
            }
            row.update(zip(SUBJECTS, student.grades.scores()))
            row["average"] = student.grades.average
            rows.append(row)

    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
