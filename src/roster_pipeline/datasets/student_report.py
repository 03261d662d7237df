"""
Student Report Records.

Assessment categories and report formats of the student report card.
Both pages list a handful of hand-written rows; generated rows extend
them with further categories and with the reports of earlier school
years.
"""

from __future__ import annotations

from typing import List, Tuple

from roster_pipeline.datasets.builder import pad_records
from roster_pipeline.domain.entities import (
    AssessmentCategoryRecord,
    RecordStatus,
    ReportFormatRecord,
)

DEFAULT_CATEGORY_COUNT = 5
DEFAULT_FORMAT_COUNT = 2

QUANTITATIVE = "Quantitative (Number)"
QUALITATIVE = "Qualitative (Text)"
SUBJECT = "Subject"
PERSONAL = "Personal Assessment"

# id, name, type, related to
SEED_CATEGORIES: Tuple[Tuple[str, str, str, str], ...] = (
    ("uts", "UTS", QUANTITATIVE, SUBJECT),
    ("uas", "UAS", QUANTITATIVE, SUBJECT),
    ("tasks", "Average Daily Tasks", QUANTITATIVE, SUBJECT),
    ("honesty", "Honesty", QUALITATIVE, PERSONAL),
    ("attitude", "Attitude", QUALITATIVE, PERSONAL),
)

QUANTITATIVE_POOL = ("Daily Quiz", "Practicum", "Project", "Remedial")
QUALITATIVE_POOL = ("Discipline", "Responsibility", "Cooperation", "Creativity")

# id, title, created at
SEED_FORMATS: Tuple[Tuple[str, str, str], ...] = (
    ("even-2024", "Even Semester Report 2024/2025", "15 Jun 2025 - 15:32"),
    ("odd-2024", "Odd Semester Report 2024/2025", "14 Jun 2025 - 15:32"),
)


def seed_assessment_categories() -> List[AssessmentCategoryRecord]:
    """The hand-written categories only."""
    return [
        AssessmentCategoryRecord(
            id=category_id,
            name=name,
            assessment_type=assessment_type,
            related_to=related_to,
        )
        for category_id, name, assessment_type, related_to in SEED_CATEGORIES
    ]


def make_assessment_category(index: int) -> AssessmentCategoryRecord:
    """Even indexes are graded subject work, odd ones personal traits."""
    quantitative = index % 2 == 0
    pool = QUANTITATIVE_POOL if quantitative else QUALITATIVE_POOL
    position = index // 2
    round_ = position // len(pool)
    name = pool[position % len(pool)]
    if round_:
        name = f"{name} {round_ + 1}"
    return AssessmentCategoryRecord(
        id=name.lower().replace(" ", "-"),
        name=name,
        assessment_type=QUANTITATIVE if quantitative else QUALITATIVE,
        related_to=SUBJECT if quantitative else PERSONAL,
        status=RecordStatus.NON_ACTIVE if index % 5 == 4 else RecordStatus.ACTIVE,
    )


def build_assessment_categories(count: int = DEFAULT_CATEGORY_COUNT) -> List[AssessmentCategoryRecord]:
    """Seed categories padded with generated ones up to ``count``."""
    return pad_records(seed_assessment_categories(), count, make_assessment_category)


def seed_report_formats() -> List[ReportFormatRecord]:
    """The hand-written report formats only."""
    return [
        ReportFormatRecord(id=format_id, title=title, created_at=created_at)
        for format_id, title, created_at in SEED_FORMATS
    ]


def make_report_format(index: int) -> ReportFormatRecord:
    """
    Report format of an earlier semester, newest first.

    Even semester reports are created in June at the end of the school
    year, odd semester reports in December.
    """
    start_year = 2023 - index // 2
    even = index % 2 == 0
    semester = "Even" if even else "Odd"
    created_at = (
        f"15 Jun {start_year + 1} - 15:32" if even else f"14 Dec {start_year} - 15:32"
    )
    return ReportFormatRecord(
        id=f"{semester.lower()}-{start_year}",
        title=f"{semester} Semester Report {start_year}/{start_year + 1}",
        created_at=created_at,
        # reports older than two school years are archived
        status=RecordStatus.NON_ACTIVE if index >= 4 else RecordStatus.ACTIVE,
    )


def build_report_formats(count: int = DEFAULT_FORMAT_COUNT) -> List[ReportFormatRecord]:
    """Seed report formats padded with earlier semesters up to ``count``."""
    return pad_records(seed_report_formats(), count, make_report_format)
