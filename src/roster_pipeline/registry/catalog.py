"""
Built-in List Views.

One ListView per dashboard list page. Column order is the table order
and the CSV column order; the searchable and sortable flags reproduce
what each page allows.
"""

from __future__ import annotations

import logging
from typing import List

from roster_pipeline.columns.descriptors import Column, ColumnKind
from roster_pipeline.datasets import (
    build_admins,
    build_assessment_categories,
    build_classes,
    build_payments,
    build_report_formats,
    build_roles,
    build_students,
    build_subjects,
    build_teachers,
    seed_admins,
    seed_assessment_categories,
    seed_classes,
    seed_payments,
    seed_report_formats,
    seed_roles,
    seed_students,
    seed_subjects,
    seed_teachers,
)
from roster_pipeline.datasets.payments import CURRENT_PERIOD, PAYMENT_CLASSES, PERIOD_OPTIONS
from roster_pipeline.datasets.students import CLASS_OPTIONS, FLAG_OPTIONS
from roster_pipeline.domain.value_objects import ALL_STATUSES
from roster_pipeline.registry.view_registry import ListView, ViewRegistry

logger = logging.getLogger(__name__)

NUMERIC = ColumnKind.NUMERIC
NATURAL = ColumnKind.STRING_NATURAL
EXACT = ColumnKind.STRING_EXACT


def _teacher_number(record) -> int:
    return int(record.id)


SUBJECTS_VIEW = ListView(
    name="subjects",
    entity="subject",
    title="Subjects",
    columns=(
        Column("code", "Subject Code", kind=NATURAL),
        Column("name", "Subject Name"),
        Column("description", "Description"),
        Column("status", "Status", searchable=False, sortable=False),
    ),
    default_sort_key="code",
    record_factory=build_subjects,
    seed_factory=seed_subjects,
    description="Subjects offered per grade",
)

CLASSES_VIEW = ListView(
    name="classes",
    entity="class",
    title="Classes",
    columns=(
        Column("name", "Class Name", kind=NATURAL),
        Column("homeroom_teacher", "Homeroom Teacher", kind=NATURAL),
        Column("capacity", "Class Capacity", kind=NUMERIC, nullable=True),
        Column("total_students", "Total Students", kind=NUMERIC),
        Column("total_subjects", "Total Subjects", kind=NUMERIC),
        Column("status", "Status", kind=NATURAL),
    ),
    default_sort_key="name",
    record_factory=build_classes,
    seed_factory=seed_classes,
    description="Homeroom classes with capacity and enrolment",
)

TEACHERS_VIEW = ListView(
    name="teachers",
    entity="teacher",
    title="Teachers",
    columns=(
        Column("id", "Teacher ID", accessor=_teacher_number, kind=NUMERIC),
        Column("full_name", "Full Name"),
        Column("email", "Email"),
        Column("subjects", "Subject Specialization"),
        Column("homeroom_class", "Homeroom Class", nullable=True),
        Column("status", "Status"),
    ),
    default_sort_key="id",
    record_factory=build_teachers,
    seed_factory=seed_teachers,
    description="Teaching staff and their subjects",
)

ADMINS_VIEW = ListView(
    name="admins",
    entity="admin",
    title="Admin List",
    columns=(
        Column("name", "Name", kind=NATURAL),
        Column("email", "Email", kind=NATURAL),
        Column("role", "Role", kind=NATURAL, searchable=False),
        Column("features", "Accessible Features", kind=NUMERIC, searchable=False),
        Column("status", "Status", kind=NATURAL, searchable=False),
    ),
    default_sort_key="name",
    record_factory=build_admins,
    seed_factory=seed_admins,
    description="Dashboard administrator accounts",
)

ROLES_VIEW = ListView(
    name="roles",
    entity="role",
    title="Role Management",
    columns=(
        Column("name", "Role Name", kind=NATURAL),
        Column("features", "Accessible Features", kind=NUMERIC, searchable=False),
        Column("status", "Status", searchable=False, sortable=False),
    ),
    default_sort_key="name",
    record_factory=build_roles,
    seed_factory=seed_roles,
    description="Administrator roles",
)

STUDENTS_VIEW = ListView(
    name="students",
    entity="student",
    title="Students",
    columns=(
        Column("id", "Student ID", kind=NATURAL),
        Column("name", "Student Name"),
        Column("email", "Student Email", nullable=True, export_empty="- -"),
        Column("current_class", "Current Class", kind=NATURAL),
        Column("status", "Status"),
        Column("flag", "Flag", searchable=False),
    ),
    default_sort_key="id",
    record_factory=build_students,
    seed_factory=seed_students,
    categorical_filters={
        "current_class": (ALL_STATUSES,) + CLASS_OPTIONS,
        "flag": (ALL_STATUSES,) + FLAG_OPTIONS,
    },
    description="Enrolled students with class and flag",
)

PAYMENTS_VIEW = ListView(
    name="payments",
    entity="payment",
    title="Student Tuition Payments",
    columns=(
        Column("name", "Student Name", kind=NATURAL),
        Column("student_class", "Class", kind=NATURAL),
        Column("amount", "Amount", kind=NUMERIC, searchable=False),
        Column("status", "Status", kind=NATURAL, searchable=False),
        Column("due", "Due Date", kind=NATURAL, searchable=False),
        Column(
            "paid_at",
            "Payment Date",
            kind=NATURAL,
            nullable=True,
            searchable=False,
            export_empty="-/-",
        ),
        Column("period", "Period", searchable=False, sortable=False, exportable=False),
    ),
    default_sort_key="name",
    record_factory=build_payments,
    seed_factory=seed_payments,
    status_options=(ALL_STATUSES, "Paid", "Unpaid"),
    categorical_filters={
        "period": (ALL_STATUSES,) + PERIOD_OPTIONS,
        "student_class": (ALL_STATUSES,) + PAYMENT_CLASSES,
    },
    default_filters={"period": CURRENT_PERIOD},
    description="Monthly tuition payments per student",
)

ASSESSMENT_CATEGORIES_VIEW = ListView(
    name="assessment_categories",
    entity="assessment-category",
    title="Assessment Category List",
    columns=(
        Column("name", "Category Name", sortable=False),
        Column("assessment_type", "Type", sortable=False),
        Column("related_to", "Related To", sortable=False),
        Column("status", "Status", searchable=False, sortable=False),
    ),
    default_sort_key=None,
    record_factory=build_assessment_categories,
    seed_factory=seed_assessment_categories,
    default_page_size=5,
    description="Report card assessment categories",
)

REPORT_FORMATS_VIEW = ListView(
    name="report_formats",
    entity="report-format",
    title="Report Format List",
    columns=(
        Column("title", "Report Title", sortable=False),
        Column("created_at", "Created At", searchable=False, sortable=False),
        Column("status", "Status", searchable=False, sortable=False),
    ),
    default_sort_key=None,
    record_factory=build_report_formats,
    seed_factory=seed_report_formats,
    description="Report card templates per semester",
)


def builtin_views() -> List[ListView]:
    """The built-in views in menu order."""
    return [
        SUBJECTS_VIEW,
        CLASSES_VIEW,
        TEACHERS_VIEW,
        ADMINS_VIEW,
        ROLES_VIEW,
        STUDENTS_VIEW,
        PAYMENTS_VIEW,
        ASSESSMENT_CATEGORIES_VIEW,
        REPORT_FORMATS_VIEW,
    ]


def default_registry() -> ViewRegistry:
    """Fresh registry holding every built-in view."""
    registry = ViewRegistry(builtin_views())
    logger.debug(f"Default registry ready: {registry.names}")
    return registry
