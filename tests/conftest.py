from __future__ import annotations

import importlib
from datetime import datetime, timedelta
from typing import Optional

import pytest

from lateness_tracker.core.exceptions import PersistenceError
from lateness_tracker.lateness.model import AdminRecordRow, LatenessRecord
from lateness_tracker.lateness.service import LatenessService
from lateness_tracker.security.passwords import PasswordHasher
from lateness_tracker.students.model import NewStudent, Student
from lateness_tracker.students.service import AuthService


class InMemoryStudents:
    def __init__(self):
        self.by_id: dict[str, Student] = {}
        self.fail_with: Optional[str] = None

    def get_by_email(self, email: str) -> Optional[Student]:
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        for s in self.by_id.values():
            if s.email == email:
                return s
        return None

    def create_student(self, student: NewStudent, *, password_hash: str) -> None:
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        if student.student_id is None or student.email is None:
            raise PersistenceError("Column cannot be null")
        if student.student_id in self.by_id:
            raise PersistenceError(f"Duplicate entry '{student.student_id}' for key 'PRIMARY'")
        if any(s.email == student.email for s in self.by_id.values()):
            raise PersistenceError(f"Duplicate entry '{student.email}' for key 'email'")
        self.by_id[student.student_id] = Student(
            student_id=student.student_id,
            email=student.email,
            password_hash=password_hash,
            name=student.name,
            ship=student.ship,
            level=student.level,
            grade=student.grade,
            class_group=student.class_group,
        )


class InMemoryLateness:
    def __init__(self, students: InMemoryStudents, *, start: datetime = datetime(2026, 2, 2, 7, 30, 0)):
        self._students = students
        self._records: list[LatenessRecord] = []
        self._clock = start
        self.fail_with: Optional[str] = None

    def create_record(self, *, student_id, reason, minutes_late) -> int:
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        if student_id not in self._students.by_id:
            raise PersistenceError("Cannot add or update a child row: a foreign key constraint fails")
        self._clock += timedelta(minutes=1)
        rec = LatenessRecord(
            id=len(self._records) + 1,
            student_id=student_id,
            reason=reason,
            minutes_late=minutes_late,
            arrival_time=self._clock,
        )
        self._records.append(rec)
        return rec.id

    def list_for_student(self, student_id: str):
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        items = [r for r in self._records if r.student_id == student_id]
        items.sort(key=lambda r: r.arrival_time, reverse=True)
        return items

    def list_admin_view(self):
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        items = sorted(self._records, key=lambda r: r.arrival_time, reverse=True)
        out = []
        for r in items:
            s = self._students.by_id[r.student_id]
            out.append(
                AdminRecordRow(
                    student_id=s.student_id,
                    name=s.name,
                    level=s.level,
                    grade=s.grade,
                    class_group=s.class_group,
                    ship=s.ship,
                    date=r.arrival_time,
                    total_lateness=r.minutes_late,
                    reason=r.reason,
                )
            )
        return out


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher()


@pytest.fixture
def students_repo() -> InMemoryStudents:
    return InMemoryStudents()


@pytest.fixture
def lateness_repo(students_repo) -> InMemoryLateness:
    return InMemoryLateness(students_repo)


@pytest.fixture
def auth_service(students_repo, hasher) -> AuthService:
    return AuthService(students_repo, hasher)


@pytest.fixture
def lateness_service(lateness_repo) -> LatenessService:
    return LatenessService(lateness_repo)


@pytest.fixture
def student_payload() -> dict:
    return {
        "student_id": "S1",
        "email": "a@x.com",
        "password": "pw123",
        "name": "A",
        "ship": "1",
        "level": "1",
        "grade": "1",
        "class_group": "1A",
    }


@pytest.fixture
def static_dir(tmp_path):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<!doctype html><div id=app></div>", encoding="utf-8")
    (dist / "assets" / "app.js").write_text("console.log('app')", encoding="utf-8")
    return dist


@pytest.fixture
def app(monkeypatch, static_dir, students_repo, lateness_repo, auth_service, lateness_service):
    from lateness_tracker.container import Container
    from lateness_tracker.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(importlib.import_module("config.testing"), "STATIC_DIR", str(static_dir))

    container = Container(
        students_repo=students_repo,
        lateness_repo=lateness_repo,
        auth_service=auth_service,
        lateness_service=lateness_service,
    )
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


class FakeCursor:
    def __init__(self, rows=None, *, error=None, lastrowid=None):
        self._rows = list(rows or [])
        self._error = error
        self.lastrowid = lastrowid
        self.executed: list[tuple] = []
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        if self._error:
            raise self._error

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, cursor: FakeCursor):
        self.cur = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, conn: FakeConn):
        self.conn = conn
        self.released = 0

    def connect(self):
        return self.conn

    def release(self, conn):
        conn.close()
        self.released += 1


@pytest.fixture
def fake_db():
    """Build a connection factory whose single cursor returns `rows`."""

    def build(rows=None, *, error=None, lastrowid=None) -> FakeConnectionFactory:
        return FakeConnectionFactory(FakeConn(FakeCursor(rows, error=error, lastrowid=lastrowid)))

    return build
