"""
Student Records.

The student roster is generated entirely from four template students:
row ``i`` copies template ``i % 4`` with a shifted student number and a
running suffix on the name.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from roster_pipeline.datasets.builder import pad_records
from roster_pipeline.domain.entities import RecordStatus, StudentRecord

DEFAULT_COUNT = 25

# id, name, email, class, status, flag
TEMPLATE_STUDENTS: Tuple[Tuple[str, str, Optional[str], str, RecordStatus, str], ...] = (
    ("23834732", "Budiyono Siregar", "budi@gmail.com", "VII-A", RecordStatus.ACTIVE, "yellow"),
    ("83746152", "Bambang Pamungkas", "bambang@gmail.com", "IX-A", RecordStatus.ACTIVE, "red"),
    ("10298910", "Harry Styles", None, "VIII-B", RecordStatus.NON_ACTIVE, "green"),
    ("67281920", "Freddy Mercury", "freddy@gmail.com", "IX-A", RecordStatus.ACTIVE, "green"),
)

CLASS_OPTIONS = ("VII-A", "VIII-B", "IX-A")
FLAG_OPTIONS = ("green", "yellow", "red")


def seed_students() -> List[StudentRecord]:
    """The template students as records."""
    return [
        StudentRecord(
            id=student_id,
            name=name,
            email=email,
            current_class=current_class,
            status=status,
            flag=flag,
        )
        for student_id, name, email, current_class, status, flag in TEMPLATE_STUDENTS
    ]


def make_student(index: int) -> StudentRecord:
    """Generated student number ``index``."""
    template_id, name, email, _, _, _ = TEMPLATE_STUDENTS[index % len(TEMPLATE_STUDENTS)]
    return StudentRecord(
        id=f"{int(template_id) + index * 13:08d}",
        name=f"{name} {index + 1}",
        email=None if index % 5 == 2 else email,
        current_class=CLASS_OPTIONS[index % len(CLASS_OPTIONS)],
        status=RecordStatus.NON_ACTIVE if index % 7 == 3 else RecordStatus.ACTIVE,
        flag=FLAG_OPTIONS[index % len(FLAG_OPTIONS)],
    )


def build_students(count: int = DEFAULT_COUNT) -> List[StudentRecord]:
    """``count`` generated students."""
    return pad_records([], count, make_student)
