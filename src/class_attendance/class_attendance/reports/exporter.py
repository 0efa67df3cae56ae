from __future__ import annotations

import logging
from pathlib import Path

from ..common.datetime_utils import format_iso_date
from ..core.constants import EXPORT_FILENAME_TEMPLATE
from ..core.exceptions import ExportError
from .service import DailyReport, render_csv

logger = logging.getLogger(__name__)


class CsvExporter:
    """Writes daily reports as ``attendance_<YYYY-MM-DD>.csv`` files."""

    def __init__(self, export_dir: str | Path):
        self._export_dir = Path(export_dir)

    def path_for(self, report: DailyReport) -> Path:
        filename = EXPORT_FILENAME_TEMPLATE.format(date=format_iso_date(report.report_date))
        return self._export_dir / filename

    def write(self, report: DailyReport) -> Path:
        path = self.path_for(report)
        try:
            self._export_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(render_csv(report), encoding="utf-8")
        except OSError as exc:
            raise ExportError(f"Export failed: {exc}", cause=exc) from exc

        logger.info("Exported attendance for %s to %s", report.report_date, path)
        return path
