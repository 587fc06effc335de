from __future__ import annotations

from typing import Optional, Protocol

from .model import NewStudent, Student


class StudentRepository(Protocol):
    """Repository interface for student accounts.

    The service layer depends on this interface, not on a concrete database.
    """

    def get_by_email(self, email: str) -> Optional[Student]:
        raise NotImplementedError

    def create_student(self, student: NewStudent, *, password_hash: str) -> None:
        raise NotImplementedError
