from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status label written to reports."""

    PRESENT = "Present"
    ABSENT = "Absent"


class ServiceState(str, Enum):
    LOADING = "LOADING"
    READY = "READY"
