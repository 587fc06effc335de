from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union


def _iso(value: Union[datetime, str, None]) -> Optional[str]:
    """UTC ISO-8601 with milliseconds and a Z suffix, e.g. 2026-02-02T07:31:00.000Z.

    Naive values (what the driver returns for TIMESTAMP columns) are taken as
    local server time.
    """
    if isinstance(value, datetime):
        utc = value.astimezone(timezone.utc)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
    return value


@dataclass(frozen=True)
class LatenessRecord:
    """One tardiness event. arrival_time is assigned by the database on insert."""

    id: int
    student_id: str
    reason: Optional[str]
    minutes_late: Optional[int]
    arrival_time: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "student_id": self.student_id,
            "reason": self.reason,
            "minutes_late": self.minutes_late,
            "arrival_time": _iso(self.arrival_time),
        }


@dataclass(frozen=True)
class AdminRecordRow:
    """Read-model for the admin view: a record joined with its student."""

    student_id: str
    name: Optional[str]
    level: Optional[str]
    grade: Optional[str]
    class_group: Optional[str]
    ship: Optional[str]
    date: Optional[datetime]
    total_lateness: Optional[int]
    reason: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "level": self.level,
            "grade": self.grade,
            "class_group": self.class_group,
            "ship": self.ship,
            "date": _iso(self.date),
            "total_lateness": self.total_lateness,
            "reason": self.reason,
        }
