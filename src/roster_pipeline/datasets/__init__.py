"""
Datasets Package - Mock Record Factories.

Each list page of the dashboard shows a small hand-written seed list
padded with generated rows up to a target size (25 by default, 26 for
payments, 5 assessment categories and 2 report formats).

Factories are plain functions taking the target count. Nothing is cached
at module level: callers build a record set once per view and pass it
down explicitly.
"""

from roster_pipeline.datasets.admins import build_admins, build_roles, seed_admins, seed_roles
from roster_pipeline.datasets.builder import pad_records
from roster_pipeline.datasets.classes import build_classes, seed_classes
from roster_pipeline.datasets.payments import build_payments, seed_payments
from roster_pipeline.datasets.student_report import (
    build_assessment_categories,
    build_report_formats,
    seed_assessment_categories,
    seed_report_formats,
)
from roster_pipeline.datasets.students import build_students, seed_students
from roster_pipeline.datasets.subjects import build_subjects, seed_subjects
from roster_pipeline.datasets.teachers import (
    build_teachers,
    format_teacher_phone,
    seed_teachers,
)

__all__ = [
    "build_admins",
    "build_assessment_categories",
    "build_classes",
    "build_payments",
    "build_report_formats",
    "build_roles",
    "build_students",
    "build_subjects",
    "build_teachers",
    "format_teacher_phone",
    "pad_records",
    "seed_admins",
    "seed_assessment_categories",
    "seed_classes",
    "seed_payments",
    "seed_report_formats",
    "seed_roles",
    "seed_students",
    "seed_subjects",
    "seed_teachers",
]
