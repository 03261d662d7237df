"""
Domain Layer - Records and Pipeline Results.

This package contains the core domain model of the roster pipeline.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Record: Base row with a stable identifier
    - SubjectRecord, ClassRecord, TeacherRecord, AdminRecord,
      RoleRecord, StudentRecord, PaymentRecord, AssessmentCategoryRecord,
      ReportFormatRecord: rows of the dashboard's list pages
    - ListViewResult: Visible rows plus pagination metadata

Value Objects:
    - SortDirection: asc / desc
    - PageSlice: One page of a sorted sequence

Design Principles:
    - Immutable (frozen models); records never change after creation
    - No infrastructure dependencies
"""

from roster_pipeline.domain.entities import (
    AdminRecord,
    AssessmentCategoryRecord,
    ClassRecord,
    ListViewResult,
    PaymentRecord,
    PaymentStatus,
    Record,
    RecordStatus,
    ReportFormatRecord,
    RoleRecord,
    StageResult,
    StudentRecord,
    SubjectRecord,
    TeacherRecord,
)
from roster_pipeline.domain.value_objects import ALL_STATUSES, PageSlice, SortDirection

__all__ = [
    "ALL_STATUSES",
    "AdminRecord",
    "AssessmentCategoryRecord",
    "ClassRecord",
    "ListViewResult",
    "PageSlice",
    "PaymentRecord",
    "PaymentStatus",
    "Record",
    "RecordStatus",
    "ReportFormatRecord",
    "RoleRecord",
    "SortDirection",
    "StageResult",
    "StudentRecord",
    "SubjectRecord",
    "TeacherRecord",
]
