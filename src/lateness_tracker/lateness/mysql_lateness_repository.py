from __future__ import annotations

from typing import Any, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AdminRecordRow, LatenessRecord
from .repository import LatenessRepository


class MySQLLatenessRepository(LatenessRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_record(self, *, student_id: Any, reason: Any, minutes_late: Any) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO lateness_records(student_id, reason, minutes_late)
                VALUES(%s,%s,%s)
                """,
                (student_id, reason, minutes_late),
            )
            return int(cur.lastrowid)

    def list_for_student(self, student_id: str) -> Sequence[LatenessRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, student_id, reason, minutes_late, arrival_time
                FROM lateness_records
                WHERE student_id=%s
                ORDER BY arrival_time DESC
                """,
                (student_id,),
            )
            rows = fetchall(cur)
            return [
                LatenessRecord(
                    id=int(r["id"]),
                    student_id=r["student_id"],
                    reason=r.get("reason"),
                    minutes_late=r.get("minutes_late"),
                    arrival_time=r.get("arrival_time"),
                )
                for r in rows
            ]

    def list_admin_view(self) -> Sequence[AdminRecordRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.student_id, s.name, s.level, s.grade, s.class AS class_group, s.ship,
                       l.arrival_time AS date, l.minutes_late AS total_lateness, l.reason
                FROM lateness_records l
                JOIN students s ON l.student_id = s.student_id
                ORDER BY l.arrival_time DESC
                """
            )
            rows = fetchall(cur)
            return [
                AdminRecordRow(
                    student_id=r["student_id"],
                    name=r.get("name"),
                    level=r.get("level"),
                    grade=r.get("grade"),
                    class_group=r.get("class_group"),
                    ship=r.get("ship"),
                    date=r.get("date"),
                    total_lateness=r.get("total_lateness"),
                    reason=r.get("reason"),
                )
                for r in rows
            ]
