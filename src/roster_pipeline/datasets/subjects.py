"""
Subject Records.

Four hand-written subjects followed by generated ones cycling through
ten subject families and grades 1-6 (MTH01, SCI02, PHY03, ...).
"""

from __future__ import annotations

from typing import List, Tuple

from roster_pipeline.datasets.builder import pad_records
from roster_pipeline.domain.entities import RecordStatus, SubjectRecord

DEFAULT_COUNT = 25

SEED_SUBJECTS: Tuple[Tuple[str, str, str, RecordStatus], ...] = (
    ("BIO001", "Biologi 01", "Biologi Grade 1", RecordStatus.ACTIVE),
    ("BIO002", "Biologi 02", "Biologi Grade 2", RecordStatus.ACTIVE),
    ("ENG001", "English 01", "English Grade 1", RecordStatus.NON_ACTIVE),
    ("ENG002", "English 02", "English Grade 2", RecordStatus.NON_ACTIVE),
)

SUBJECT_FAMILIES: Tuple[Tuple[str, str, str], ...] = (
    ("MTH", "Matematika", "Mathematics"),
    ("SCI", "Science", "Integrated Science"),
    ("PHY", "Physics", "Physics"),
    ("CHM", "Chemistry", "Chemistry"),
    ("GEO", "Geography", "Geography"),
    ("HIS", "History", "World History"),
    ("ART", "Art", "Fine Arts"),
    ("MUS", "Music", "Music Theory"),
    ("PE", "Physical Education", "Sports"),
    ("CIT", "Civics", "Citizenship"),
)

GRADES = 6

# Distinct (family, grade) pairs before codes would repeat
_CYCLE = 30


def seed_subjects() -> List[SubjectRecord]:
    """The hand-written subjects only."""
    return [
        SubjectRecord(code=code, name=name, description=description, status=status)
        for code, name, description, status in SEED_SUBJECTS
    ]


def make_subject(index: int) -> SubjectRecord:
    """Generated filler subject number ``index``."""
    prefix, name, description = SUBJECT_FAMILIES[index % len(SUBJECT_FAMILIES)]
    grade = index % GRADES + 1
    padded = f"{grade:02d}"
    cohort = index // _CYCLE
    code = f"{prefix}{padded}" if cohort == 0 else f"{prefix}{cohort + 1}{padded}"
    return SubjectRecord(
        code=code,
        name=f"{name} {padded}",
        description=f"{description} Grade {grade}",
        status=RecordStatus.NON_ACTIVE if index % 4 == 0 else RecordStatus.ACTIVE,
    )


def build_subjects(count: int = DEFAULT_COUNT) -> List[SubjectRecord]:
    """Seed subjects padded with generated ones up to ``count``."""
    return pad_records(seed_subjects(), count, make_subject)
