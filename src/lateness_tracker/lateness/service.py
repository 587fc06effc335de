from __future__ import annotations

from typing import Any, Sequence

from ..common.app_logger import get_logger
from .model import AdminRecordRow, LatenessRecord
from .repository import LatenessRepository

logger = get_logger("lateness.service")


class LatenessService:
    """Use cases: record a lateness scan, read per-student and admin history.

    Pass-through over the repository; PersistenceError propagates to the caller.
    """

    def __init__(self, records: LatenessRepository):
        self._records = records

    def record_scan(self, *, student_id: Any, reason: Any, minutes_late: Any) -> int:
        record_id = self._records.create_record(student_id=student_id, reason=reason, minutes_late=minutes_late)
        logger.info("lateness recorded for student_id=%r (%s min)", student_id, minutes_late)
        return record_id

    def history_for_student(self, student_id: str) -> Sequence[LatenessRecord]:
        return self._records.list_for_student(student_id)

    def admin_records(self) -> Sequence[AdminRecordRow]:
        return self._records.list_admin_view()
