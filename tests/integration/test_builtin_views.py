"""
Integration Tests for the Built-in List Pages.

Tests cover:
    - Search scope: status text only matches where status is searchable
    - Natural ordering of subject codes
    - Pagination over the default 25-row datasets
    - Null handling on nullable columns of real views
    - Payments, assessment categories and report formats pages
    - Natural ordering of class teachers and statuses
"""

from __future__ import annotations

import pytest

from roster_pipeline.adapters.csv_exporter import CsvExporter
from roster_pipeline.columns import ColumnKind
from roster_pipeline.domain.entities import ClassRecord, SubjectRecord
from roster_pipeline.domain.value_objects import SortDirection
from roster_pipeline.pipeline.record_set import RecordSet
from roster_pipeline.pipeline.view_state import ViewState

pytestmark = pytest.mark.integration

ALL_VIEWS = ["subjects", "classes", "teachers", "admins", "roles", "students"]
REPORT_VIEWS = ["payments", "assessment_categories", "report_formats"]


class TestSearchScope:
    """Status text is only found on pages that search the status column."""

    @pytest.mark.parametrize(
        "view_name, matches",
        [
            ("classes", True),
            ("teachers", True),
            ("students", True),
            ("subjects", False),
            ("admins", False),
            ("roles", False),
        ],
    )
    def test_non_active_query(self, make_pipeline, mock_provider, view_name: str, matches: bool) -> None:
        """
        SCENARIO: Search "non active" on every page
        EXPECTED: Only non active rows where status is searchable, nothing elsewhere
        """
        pipeline = make_pipeline(view_name)
        state = ViewState(query="non active", page_size=25)

        result = pipeline.run(mock_provider.get_records(view_name), state)

        assert (result.total_count > 0) is matches
        assert all(r.status == "Non Active" for r in result.filtered_records)


class TestNaturalOrder:
    """Subject codes compare digit runs by value."""

    def test_subject_codes(self, make_pipeline) -> None:
        """
        SCENARIO: Subjects BIO010, ART001, BIO002 sorted by code
        EXPECTED: ART001, BIO002, BIO010 ascending and reversed descending
        """
        pipeline = make_pipeline("subjects")
        records = RecordSet(
            [
                SubjectRecord(code="BIO010", name="Biologi 10"),
                SubjectRecord(code="ART001", name="Art 01"),
                SubjectRecord(code="BIO002", name="Biologi 02"),
            ]
        )

        ascending = pipeline.run(records, ViewState(sort_key="code"))
        descending = pipeline.run(
            records, ViewState(sort_key="code", sort_direction=SortDirection.DESC)
        )

        assert [s.code for s in ascending.visible_records] == ["ART001", "BIO002", "BIO010"]
        assert [s.code for s in descending.visible_records] == ["BIO010", "BIO002", "ART001"]

    def test_class_homeroom_teachers(self, make_pipeline) -> None:
        """
        SCENARIO: Classes whose teachers are "Guru 10", "Guru 2", "Guru 1"
        EXPECTED: Sorted by teacher as Guru 1, Guru 2, Guru 10
        """
        pipeline = make_pipeline("classes")
        records = RecordSet(
            [
                ClassRecord(name="X-A", homeroom_teacher="Guru 10", capacity=30, total_students=28, total_subjects=5),
                ClassRecord(name="X-B", homeroom_teacher="Guru 2", capacity=30, total_students=29, total_subjects=5),
                ClassRecord(name="X-C", homeroom_teacher="Guru 1", capacity=30, total_students=27, total_subjects=5),
            ]
        )

        result = pipeline.run(records, ViewState(sort_key="homeroom_teacher"))

        assert [c.homeroom_teacher for c in result.visible_records] == ["Guru 1", "Guru 2", "Guru 10"]

    def test_class_columns_collate_naturally(self, classes_view) -> None:
        assert classes_view.column("homeroom_teacher").kind == ColumnKind.STRING_NATURAL
        assert classes_view.column("status").kind == ColumnKind.STRING_NATURAL


class TestDefaultDatasetPagination:
    """Every page works with the default 25 records and 4 rows per page."""

    @pytest.mark.parametrize("view_name", ALL_VIEWS + REPORT_VIEWS)
    def test_page_beyond_end_clamps_to_last(self, make_pipeline, mock_provider, view_name: str) -> None:
        """
        SCENARIO: 25 records, page size 4, page 10 requested
        EXPECTED: 7 pages, effective page 7 with exactly one record
        """
        pipeline = make_pipeline(view_name)

        result = pipeline.run(mock_provider.get_records(view_name), ViewState(page=10, page_size=4))

        assert result.total_count == 25
        assert result.page_count == 7
        assert result.effective_page == 7
        assert len(result.visible_records) == 1

    @pytest.mark.parametrize("view_name", ALL_VIEWS)
    def test_pages_partition_filtered_records(self, make_pipeline, mock_provider, view_name: str) -> None:
        pipeline = make_pipeline(view_name)
        records = mock_provider.get_records(view_name)
        first = pipeline.run(records, ViewState(status_filter="Active"))

        collected = []
        for page in range(1, first.page_count + 1):
            collected.extend(pipeline.run(records, ViewState(status_filter="Active", page=page)).visible_records)

        assert collected == first.filtered_records


class TestNullHandling:
    """Nullable columns of the built-in views sort nulls last."""

    @pytest.mark.parametrize(
        "view_name, key",
        [
            ("classes", "capacity"),
            ("teachers", "homeroom_class"),
            ("students", "email"),
            ("payments", "paid_at"),
        ],
    )
    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    def test_nulls_last(self, make_pipeline, mock_provider, view_name: str, key: str, direction) -> None:
        pipeline = make_pipeline(view_name)
        state = ViewState(sort_key=key, sort_direction=direction, page_size=25)

        result = pipeline.run(mock_provider.get_records(view_name), state)

        values = [getattr(r, key) for r in result.filtered_records]
        first_null = values.index(None)
        assert all(v is None for v in values[first_null:])
        assert all(v is not None for v in values[:first_null])


class TestPaymentsPage:
    """Tuition payments: status, class and period filters over 25 rows."""

    def test_initial_state_selects_current_period(self, registry) -> None:
        state = ViewState.initial(registry.require("payments"))

        assert state.filters == {"period": "2025-08"}
        assert state.sort_key == "name"
        assert state.page_size == 4

    @pytest.mark.parametrize("period, expected", [("2025-08", 25), ("2025-07", 0), ("All", 25)])
    def test_period_filter(self, make_pipeline, mock_provider, period: str, expected: int) -> None:
        """
        SCENARIO: Month picker set to August 2025, July 2025 or cleared
        EXPECTED: Every generated payment falls due in August 2025
        """
        pipeline = make_pipeline("payments")
        state = ViewState().with_filter("period", period)

        result = pipeline.run(mock_provider.get_records("payments"), state)

        assert result.total_count == expected

    @pytest.mark.parametrize("status, expected", [("Paid", 9), ("Unpaid", 16)])
    def test_status_filter(self, make_pipeline, mock_provider, status: str, expected: int) -> None:
        pipeline = make_pipeline("payments")

        result = pipeline.run(mock_provider.get_records("payments"), ViewState(status_filter=status))

        assert result.total_count == expected
        assert all(p.status == status for p in result.filtered_records)

    def test_class_filter(self, make_pipeline, mock_provider) -> None:
        pipeline = make_pipeline("payments")
        state = ViewState(filters={"student_class": "IX-A"}, page_size=25)

        result = pipeline.run(mock_provider.get_records("payments"), state)

        assert result.total_count == 6
        assert {p.student_class for p in result.filtered_records} == {"IX-A"}

    def test_search_by_student_name(self, make_pipeline, mock_provider) -> None:
        pipeline = make_pipeline("payments")

        result = pipeline.run(mock_provider.get_records("payments"), ViewState(query="harry"))

        assert [p.name for p in result.filtered_records] == ["Harry Styles"]

    def test_status_text_not_searched(self, make_pipeline, mock_provider) -> None:
        pipeline = make_pipeline("payments")

        result = pipeline.run(mock_provider.get_records("payments"), ViewState(query="unpaid"))

        assert result.total_count == 0

    def test_amount_sorts_numerically(self, make_pipeline, mock_provider) -> None:
        pipeline = make_pipeline("payments")
        state = ViewState(sort_key="amount", sort_direction=SortDirection.DESC, page_size=25)

        result = pipeline.run(mock_provider.get_records("payments"), state)

        amounts = [p.amount for p in result.filtered_records]
        assert amounts == sorted(amounts, reverse=True)
        assert amounts[0] == 450000

    def test_export_marks_unpaid_rows(self, registry) -> None:
        """
        SCENARIO: Export the four hand-written payments
        EXPECTED: Period column left out, missing payment dates written as "-/-"
        """
        view = registry.require("payments")
        records = view.build_record_set(4)

        lines = CsvExporter().render(view, list(records)).split("\r\n")

        assert lines[0] == '"Student Name","Class","Amount","Status","Due Date","Payment Date"'
        assert lines[1] == '"Budiyono Siregar","VII-A","350000","Unpaid","2025-08-05","-/-"'
        assert lines[2] == '"Bambang Pamungkas","IX-A","350000","Paid","2025-08-03","2025-08-04"'


class TestStudentReportPages:
    """Assessment categories and report formats keep their input order."""

    def test_assessment_categories_page_by_five(self, make_pipeline, mock_provider, registry) -> None:
        """
        SCENARIO: Fresh assessment category page over 25 categories
        EXPECTED: Five rows per page, five pages, seed order kept
        """
        pipeline = make_pipeline("assessment_categories")
        state = ViewState.initial(registry.require("assessment_categories"))

        result = pipeline.run(mock_provider.get_records("assessment_categories"), state)

        assert state.page_size == 5
        assert result.page_count == 5
        assert [c.id for c in result.visible_records] == ["uts", "uas", "tasks", "honesty", "attitude"]

    def test_assessment_search_covers_relation(self, make_pipeline, mock_provider) -> None:
        pipeline = make_pipeline("assessment_categories")

        result = pipeline.run(mock_provider.get_records("assessment_categories"), ViewState(query="personal"))

        assert result.total_count == 12
        assert {c.related_to for c in result.filtered_records} == {"Personal Assessment"}

    def test_report_formats_search_titles_only(self, make_pipeline, mock_provider) -> None:
        """
        SCENARIO: Search report formats for "odd" and for a creation month
        EXPECTED: Titles match, creation dates are not searched
        """
        pipeline = make_pipeline("report_formats")
        records = mock_provider.get_records("report_formats")

        odd = pipeline.run(records, ViewState(query="odd", page_size=25))
        june = pipeline.run(records, ViewState(query="jun"))

        assert odd.total_count == 12
        assert all("Odd" in f.title for f in odd.filtered_records)
        assert june.total_count == 0
