"""
CSV Exporter.

Writes the filtered records of a list view (all pages, not only the
visible one) to a spreadsheet-compatible CSV file:

    - Header row of the view's exportable column labels
    - Every cell double-quoted, embedded quotes doubled
    - Comma delimiter, CRLF line endings
    - UTF-8 with a leading byte order mark
"""

from __future__ import annotations

import csv
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Union

from roster_pipeline.config.models import ExportConfig

if TYPE_CHECKING:
    from roster_pipeline.registry.view_registry import ListView

logger = logging.getLogger(__name__)

BOM = "\ufeff"

_FILENAME_FORMATS = {
    "date": "%Y-%m-%d",
    "timestamp": "%Y%m%d_%H%M",
}


def export_filename(entity: str, now: datetime, mode: str = "date") -> str:
    """
    File name of an export, e.g. ``teacher-data-2024-05-01.csv``.

    Args:
        entity: Entity name of the view
        now: Export time
        mode: "date" (YYYY-MM-DD) or "timestamp" (YYYYMMDD_HHMM)
    """
    try:
        stamp_format = _FILENAME_FORMATS[mode]
    except KeyError:
        raise ValueError(f"Unknown filename mode: {mode}") from None
    return f"{entity}-data-{now.strftime(stamp_format)}.csv"


class CsvExporter:
    """Renders and writes list view exports."""

    def __init__(self, config: Optional[ExportConfig] = None) -> None:
        """
        Initialize exporter.

        Args:
            config: Export settings (filename mode, BOM)
        """
        self.config = config or ExportConfig()

    def rows(self, view: "ListView", records: Sequence[Any]) -> List[List[str]]:
        """Header row followed by one row per record."""
        columns = view.exportable_columns
        rows = [[column.label for column in columns]]
        for record in records:
            rows.append([column.export_text(record) for column in columns])
        return rows

    def render(self, view: "ListView", records: Sequence[Any]) -> str:
        """CSV text without the byte order mark."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\r\n")
        writer.writerows(self.rows(view, records))
        # no line break after the last row
        return buffer.getvalue()[: -len("\r\n")]

    def encode(self, view: "ListView", records: Sequence[Any]) -> bytes:
        """CSV bytes as downloaded: UTF-8, BOM-prefixed when configured."""
        text = self.render(view, records)
        if self.config.include_bom:
            text = BOM + text
        return text.encode("utf-8")

    def write(
        self,
        directory: Union[str, Path],
        view: "ListView",
        records: Sequence[Any],
        now: Optional[datetime] = None,
    ) -> Optional[Path]:
        """
        Write an export file into ``directory``.

        Returns:
            Path of the written file, or None when there is nothing to export
        """
        if not records:
            logger.info(f"Export of {view.name} skipped: no records")
            return None

        now = now or datetime.now()
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / export_filename(view.entity, now, self.config.filename_mode)
        path.write_bytes(self.encode(view, records))

        logger.info(f"Exported {len(records)} {view.entity} records to {path}")
        return path
