"""
Class Records.

Four hand-written classes (two of them not yet staffed, with unknown
capacity) followed by generated classes VII..XII, sections A..F.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from roster_pipeline.datasets.builder import pad_records
from roster_pipeline.domain.entities import ClassRecord, RecordStatus

DEFAULT_COUNT = 25

SEED_CLASSES: Tuple[Tuple[str, str, Optional[int], int, int, RecordStatus], ...] = (
    ("XI-A", "Dafa Aulia", 40, 34, 6, RecordStatus.ACTIVE),
    ("XI-B", "Ryan Kusuma", 40, 30, 6, RecordStatus.ACTIVE),
    ("X-A", "Heriyanto", None, 0, 0, RecordStatus.NON_ACTIVE),
    ("X-B", "Ryan Kusuma", None, 0, 0, RecordStatus.NON_ACTIVE),
)

HOMEROOM_POOL = (
    "Dafa Aulia",
    "Ryan Kusuma",
    "Heriyanto",
    "Siti Rahma",
    "Adi Nugraha",
    "Laras Wibowo",
    "Nurul Hakim",
    "Slamet Widodo",
    "Intan Permata",
    "Bima Pratama",
)

LEVELS = ("VII", "VIII", "IX", "X", "XI", "XII")
SECTION_CODES = ("A", "B", "C", "D", "E", "F")


def seed_classes() -> List[ClassRecord]:
    """The hand-written classes only."""
    return [
        ClassRecord(
            name=name,
            homeroom_teacher=teacher,
            capacity=capacity,
            total_students=students,
            total_subjects=subjects,
            status=status,
        )
        for name, teacher, capacity, students, subjects, status in SEED_CLASSES
    ]


def class_name(index: int) -> str:
    """Level runs fastest, then section; a numeric suffix after F."""
    level = LEVELS[index % len(LEVELS)]
    round_ = index // len(LEVELS)
    section = SECTION_CODES[round_ % len(SECTION_CODES)]
    repeat = round_ // len(SECTION_CODES)
    return f"{level}-{section}" if repeat == 0 else f"{level}-{section}{repeat + 1}"


def make_class(index: int) -> ClassRecord:
    """Generated filler class number ``index``."""
    # every sixth class (offset 3) has no students enrolled yet
    unstaffed = index % 6 == 3
    return ClassRecord(
        name=class_name(index),
        homeroom_teacher=HOMEROOM_POOL[index % len(HOMEROOM_POOL)],
        capacity=None if unstaffed else 32 + (index * 3) % 10,
        total_students=0 if unstaffed else 22 + (index * 5) % 15,
        total_subjects=5 + index % 3,
        status=(
            RecordStatus.NON_ACTIVE
            if index % 5 == 0 or unstaffed
            else RecordStatus.ACTIVE
        ),
    )


def build_classes(count: int = DEFAULT_COUNT) -> List[ClassRecord]:
    """Seed classes padded with generated ones up to ``count``."""
    return pad_records(seed_classes(), count, make_class)
