"""Export one day's attendance to the configured export directory.

Usage: python scripts/export_csv.py [YYYY-MM-DD]   (defaults to today)
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.common.datetime_utils import parse_iso_date, today_local
from src.class_attendance.class_attendance.container import build_container
from src.class_attendance.class_attendance.core.exceptions import ExportError


def main(argv: list[str]) -> None:
    try:
        report_date = parse_iso_date(argv[0]) if argv else today_local()
    except ValueError:
        raise SystemExit(f"Invalid date {argv[0]!r}, expected YYYY-MM-DD")

    settings = importlib.import_module(get_settings_module())

    container = build_container(db_config=dict(settings.DB_CONFIG), export_dir=settings.EXPORT_DIR)
    try:
        path = container.attendance_service.export_csv(report_date)
    except ExportError as e:
        raise SystemExit(str(e))
    finally:
        container.db.close()

    print(f"OK: Exported to: {path}")


if __name__ == "__main__":
    main(sys.argv[1:])
