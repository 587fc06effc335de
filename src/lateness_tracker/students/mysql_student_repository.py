from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import NewStudent, Student
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, email, password, name, ship, level, grade, class
                FROM students
                WHERE email=%s
                LIMIT 1
                """,
                (email,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Student(
                student_id=row["student_id"],
                email=row["email"],
                password_hash=row["password"],
                name=row.get("name"),
                ship=row.get("ship"),
                level=row.get("level"),
                grade=row.get("grade"),
                class_group=row.get("class"),
            )

    def create_student(self, student: NewStudent, *, password_hash: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(student_id, email, password, name, ship, level, grade, class)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    student.student_id,
                    student.email,
                    password_hash,
                    student.name,
                    student.ship,
                    student.level,
                    student.grade,
                    student.class_group,
                ),
            )
