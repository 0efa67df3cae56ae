"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, export_dir=settings.EXPORT_DIR)
    svc = container.attendance_service
    try:
        svc.select_date(date.today())
        if not container.students_repo.get_by_name("Alice"):
            svc.add_student("Alice")
        alice = container.students_repo.get_by_name("Alice")
        svc.mark_attendance(alice.student_id, True)
        print(svc.view()["summary"])
        print(svc.render_csv())
    finally:
        container.db.close()


if __name__ == "__main__":
    main()
