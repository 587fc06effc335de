from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_BCRYPT_ROUNDS, DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .lateness.mysql_lateness_repository import MySQLLatenessRepository
from .lateness.repository import LatenessRepository
from .lateness.service import LatenessService
from .security.passwords import PasswordHasher
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import AuthService


@dataclass(frozen=True)
class Container:
    """Process-scoped object graph, built once at startup."""

    students_repo: StudentRepository
    lateness_repo: LatenessRepository

    auth_service: AuthService
    lateness_service: LatenessService

    conn: Optional[DatabaseConnection] = None

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def build_container(
    *,
    db_config: dict,
    pool_size: int = DEFAULT_POOL_SIZE,
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config, pool_size=pool_size))

    students_repo = MySQLStudentRepository(conn)
    lateness_repo = MySQLLatenessRepository(conn)

    return Container(
        students_repo=students_repo,
        lateness_repo=lateness_repo,
        auth_service=AuthService(students_repo, PasswordHasher(rounds=bcrypt_rounds)),
        lateness_service=LatenessService(lateness_repo),
        conn=conn,
    )
