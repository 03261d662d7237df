"""
Core Domain Entities.

This module defines the records shown by the dashboard's list pages and
the results produced by running a list view through the pipeline.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class RecordStatus(str, Enum):
    """Lifecycle status shared by every list page."""

    ACTIVE = "Active"
    NON_ACTIVE = "Non Active"


class Record(BaseModel):
    """
    Base class for a row in a list page.

    Subclasses name their identifying field via ``id_field``. Identity
    (equality and hashing) follows that field only.
    """

    id_field: ClassVar[str] = "id"

    model_config = {"frozen": True, "use_enum_values": True, "validate_default": True}

    @property
    def record_id(self) -> str:
        """Stable identifier, unique within a record set."""
        return str(getattr(self, self.id_field))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.record_id))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return type(self) is type(other) and self.record_id == other.record_id


class SubjectRecord(Record):
    """A subject taught at the school."""

    id_field: ClassVar[str] = "code"

    code: str = Field(..., description="Subject code, e.g. BIO002")
    name: str
    description: str = ""
    status: RecordStatus = RecordStatus.ACTIVE


class ClassRecord(Record):
    """A homeroom class."""

    id_field: ClassVar[str] = "name"

    name: str = Field(..., description="Class name, e.g. XI-A")
    homeroom_teacher: str
    capacity: Optional[int] = Field(default=None, ge=0)
    total_students: int = Field(default=0, ge=0)
    total_subjects: int = Field(default=0, ge=0)
    status: RecordStatus = RecordStatus.ACTIVE


class TeacherRecord(Record):
    """A teacher with the subjects they teach."""

    id: str = Field(..., description="Six digit teacher number")
    full_name: str
    email: str
    subjects: List[str] = Field(default_factory=list)
    homeroom_class: Optional[str] = None
    status: RecordStatus = RecordStatus.ACTIVE
    phone_prefix: Optional[str] = None
    phone_number: Optional[str] = None


class AdminRecord(Record):
    """A dashboard administrator account."""

    id: str
    name: str
    email: str
    role: str
    features: int = Field(default=0, ge=0, description="Accessible features")
    status: RecordStatus = RecordStatus.ACTIVE


class RoleRecord(Record):
    """An administrator role."""

    id_field: ClassVar[str] = "name"

    name: str
    features: int = Field(default=0, ge=0)
    status: RecordStatus = RecordStatus.ACTIVE


class StudentRecord(Record):
    """An enrolled student."""

    id: str = Field(..., description="Student number")
    name: str
    email: Optional[str] = None
    current_class: str
    status: RecordStatus = RecordStatus.ACTIVE
    flag: Literal["green", "yellow", "red"] = "green"


class PaymentStatus(str, Enum):
    """Tuition payment status."""

    PAID = "Paid"
    UNPAID = "Unpaid"


class PaymentRecord(Record):
    """A monthly tuition payment of one student."""

    id: str
    name: str = Field(..., description="Student name")
    student_class: str
    amount: int = Field(..., ge=0, description="Amount in IDR")
    status: PaymentStatus = PaymentStatus.UNPAID
    due: date
    paid_at: Optional[date] = None

    @property
    def period(self) -> str:
        """Billing period of the due date, e.g. ``2025-08``."""
        return f"{self.due.year:04d}-{self.due.month:02d}"


class AssessmentCategoryRecord(Record):
    """A category of the student report card (UTS, Honesty, ...)."""

    id: str
    name: str
    assessment_type: str = Field(..., description="Quantitative or qualitative")
    related_to: str
    status: RecordStatus = RecordStatus.ACTIVE


class ReportFormatRecord(Record):
    """A report card template."""

    id: str
    title: str
    created_at: str = Field(..., description="Display timestamp, e.g. 15 Jun 2025 - 15:32")
    status: RecordStatus = RecordStatus.ACTIVE


class StageResult(BaseModel):
    """Result of a single pipeline stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float

    @property
    def reduction_ratio(self) -> float:
        """Calculate reduction ratio (0.0 = no reduction, 1.0 = all removed)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)


class ListViewResult(BaseModel):
    """Visible rows of a list view plus pagination metadata."""

    visible_records: List[Any] = Field(default_factory=list)
    filtered_records: List[Any] = Field(
        default_factory=list,
        description="All records after filter/search/sort, across pages",
    )
    total_count: int = 0
    page_count: int = 1
    effective_page: int = 1
    audit_trail: List[StageResult] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when nothing matched; rendered as a "no results" row."""
        return self.total_count == 0
