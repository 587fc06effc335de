from __future__ import annotations

from typing import Any, Protocol, Sequence

from .model import AdminRecordRow, LatenessRecord


class LatenessRepository(Protocol):
    def create_record(self, *, student_id: Any, reason: Any, minutes_late: Any) -> int:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[LatenessRecord]:
        """Newest first by arrival_time."""
        raise NotImplementedError

    def list_admin_view(self) -> Sequence[AdminRecordRow]:
        """All records joined with student attributes, newest first."""
        raise NotImplementedError
