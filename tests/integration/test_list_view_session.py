"""
Integration Tests for ListViewSession.

Tests cover:
    - Interactions recompute synchronously and reset the page
    - Page clamping after the result shrinks
    - Pager items and CSV export of all filtered records
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from roster_pipeline.adapters.csv_exporter import CsvExporter
from roster_pipeline.config.loader import load_config
from roster_pipeline.domain.value_objects import SortDirection
from roster_pipeline.pipeline.session import ListViewSession

pytestmark = pytest.mark.integration


@pytest.fixture
def session_for(make_pipeline, mock_provider):
    """Factory mounting a session for a built-in view."""

    def _mount(view_name: str, config=None) -> ListViewSession:
        pipeline = make_pipeline(view_name)
        return ListViewSession(
            view=pipeline.view,
            record_set=mock_provider.get_records(view_name),
            pipeline=pipeline,
            config=config,
        )

    return _mount


class TestListViewSession:
    """Integration tests for ListViewSession."""

    def test_mount_computes_first_page(self, session_for) -> None:
        session = session_for("subjects")

        assert session.state.page == 1
        assert session.result.effective_page == 1
        assert [s.code for s in session.result.visible_records] == [
            "ART01", "ART05", "BIO001", "BIO002",
        ]

    def test_search_resets_page(self, session_for) -> None:
        """
        SCENARIO: On page 3, type a query
        EXPECTED: Back on page 1 with the matching rows
        """
        session = session_for("teachers")
        session.go_to_page(3)

        result = session.search("heriyanto")

        assert session.state.page == 1
        assert [t.full_name for t in result.visible_records] == ["Heriyanto"]

    def test_page_clamped_after_filter_shrinks_result(self, session_for) -> None:
        """
        SCENARIO: On page 7, change the page directly to beyond a shrunk result
        EXPECTED: Stored page pulled back to the last page
        """
        session = session_for("teachers")
        session.go_to_page(7)
        session.filter_status("Non Active")
        last = session.result.page_count

        session.go_to_page(last + 5)

        assert session.result.effective_page == last
        assert session.state.page == last

    def test_sort_toggle(self, session_for) -> None:
        """
        SCENARIO: Click the current sort header, then another header
        EXPECTED: Direction flips, then a new key starts ascending
        """
        session = session_for("roles")

        session.sort_by("name")
        assert session.state.sort_direction == SortDirection.DESC
        names = [r.name for r in session.result.filtered_records]
        assert names[0] > names[-1]

        session.sort_by("features")
        assert session.state.sort_key == "features"
        assert session.state.sort_direction == SortDirection.ASC

    def test_student_filters(self, session_for) -> None:
        """
        SCENARIO: Narrow by class, add a flag nobody in that class has, clear it
        EXPECTED: Class rows only, then no rows, then the class rows again
        """
        session = session_for("students")

        by_class = session.filter_by("current_class", "IX-A")
        assert by_class.total_count > 0
        assert all(s.current_class == "IX-A" for s in by_class.filtered_records)

        narrowed = session.filter_by("flag", "green")
        assert narrowed.is_empty

        cleared = session.filter_by("flag", "All")
        assert session.state.filters == {"current_class": "IX-A"}
        assert cleared.total_count == by_class.total_count

    def test_page_size_change(self, session_for) -> None:
        session = session_for("classes")
        session.go_to_page(2)

        result = session.set_page_size(10)

        assert session.state.page == 1
        assert result.page_count == 3
        assert len(result.visible_records) == 10

    def test_zero_page_size_rejected(self, session_for) -> None:
        """
        SCENARIO: Set the page size to 0 on a mounted page
        EXPECTED: Validation error, previous state and result kept
        """
        session = session_for("subjects")
        before = session.result

        with pytest.raises(PydanticValidationError):
            session.set_page_size(0)

        assert session.state.page_size == 4
        assert session.result is before

    def test_pager(self, session_for) -> None:
        session = session_for("admins")

        session.go_to_page(4)

        assert session.pager() == [1, "ellipsis", 3, 4, 5, "ellipsis", 7]

    def test_config_defaults(self, session_for) -> None:
        config = load_config(Path(__file__).resolve().parents[1] / "fixtures" / "sample_config.yaml")

        session = session_for("classes", config)

        assert session.state.sort_key == "capacity"
        assert session.state.page_size == 25
        assert session.result.page_count == 1
        assert session.result.visible_records[-1].capacity is None

    def test_export_uses_all_filtered_records(self, session_for, tmp_path: Path) -> None:
        """
        SCENARIO: Filter to non active teachers, then export from page 1
        EXPECTED: CSV contains every filtered teacher, not only the visible page
        """
        session = session_for("teachers")
        result = session.filter_status("Non Active")

        path = session.export_csv(CsvExporter(), tmp_path, now=datetime(2024, 5, 1))

        lines = path.read_bytes().decode("utf-8-sig").split("\r\n")
        assert path.name == "teacher-data-2024-05-01.csv"
        assert len(lines) == 1 + result.total_count
        assert result.total_count > len(result.visible_records)

    def test_export_nothing_when_no_match(self, session_for, tmp_path: Path) -> None:
        session = session_for("teachers")
        session.search("no such teacher")

        assert session.export_csv(CsvExporter(), tmp_path) is None
