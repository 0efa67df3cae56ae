from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    The service layer depends on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Student]:
        """All students ordered by name ascending."""
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Student]:
        raise NotImplementedError

    def create_student(self, *, name: str, created_at: datetime) -> int:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        """Delete the student and its attendance rows in one transaction."""
        raise NotImplementedError
