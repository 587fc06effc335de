from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..common.app_logger import get_logger
from ..core.enums import LoginFailure
from ..core.exceptions import CredentialCorruptionError, PersistenceError
from ..security.passwords import PasswordHasher
from .model import NewStudent, StudentProfile
from .repository import StudentRepository

logger = get_logger("students.service")

REGISTRATION_FAILED = "Registration failed"


@dataclass(frozen=True)
class Registered:
    student_id: str


@dataclass(frozen=True)
class LoginSucceeded:
    user: StudentProfile


@dataclass(frozen=True)
class LoginRejected:
    reason: LoginFailure

    @property
    def message(self) -> str:
        return self.reason.value


@dataclass(frozen=True)
class OperationFailed:
    """The store (or a stored digest) failed; not the caller's credentials."""

    message: str


RegistrationResult = Union[Registered, OperationFailed]
LoginResult = Union[LoginSucceeded, LoginRejected, OperationFailed]


class AuthService:
    """Use cases: register a student account, log a student in.

    Results are returned as values; nothing raised by the store or the
    hasher crosses this boundary.
    """

    def __init__(self, students: StudentRepository, hasher: PasswordHasher):
        self._students = students
        self._hasher = hasher

    def register(self, student: NewStudent) -> RegistrationResult:
        # Hash before touching the store: a plaintext password is never written.
        try:
            password_hash = self._hasher.hash(student.password)
            self._students.create_student(student, password_hash=password_hash)
        except (ValueError, PersistenceError):
            logger.exception("registration failed for student_id=%r", student.student_id)
            return OperationFailed(REGISTRATION_FAILED)

        logger.info("registered student_id=%r", student.student_id)
        return Registered(student_id=student.student_id)

    def login(self, email: str, password: str) -> LoginResult:
        try:
            student = self._students.get_by_email(email)
            if student is None:
                logger.info("login rejected: no account for %r", email)
                return LoginRejected(LoginFailure.USER_NOT_FOUND)

            if not self._hasher.verify(password, student.password_hash):
                logger.info("login rejected: wrong password for %r", email)
                return LoginRejected(LoginFailure.WRONG_PASSWORD)
        except PersistenceError as e:
            logger.exception("login lookup failed for %r", email)
            return OperationFailed(str(e))
        except CredentialCorruptionError as e:
            logger.error("corrupted password hash for student_id=%r", student.student_id)
            return OperationFailed(str(e))

        return LoginSucceeded(user=student.profile())
