from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the class roster.

    Plain data object, no database access.
    """

    student_id: int
    name: str
    created_at: datetime
