from __future__ import annotations

from lateness_tracker.core.enums import LoginFailure
from lateness_tracker.students.model import NewStudent, Student
from lateness_tracker.students.service import (
    REGISTRATION_FAILED,
    LoginRejected,
    LoginSucceeded,
    OperationFailed,
    Registered,
)


def test_register_stores_digest_not_plaintext(auth_service, students_repo, hasher, student_payload):
    result = auth_service.register(NewStudent.from_payload(student_payload))

    assert result == Registered(student_id="S1")
    stored = students_repo.by_id["S1"]
    assert stored.password_hash != "pw123"
    assert hasher.verify("pw123", stored.password_hash)
    assert stored.class_group == "1A"


def test_register_duplicate_email_fails_without_second_write(auth_service, students_repo, student_payload):
    auth_service.register(NewStudent.from_payload(student_payload))

    dup = dict(student_payload, student_id="S2")
    result = auth_service.register(NewStudent.from_payload(dup))

    assert isinstance(result, OperationFailed)
    assert result.message == REGISTRATION_FAILED
    assert set(students_repo.by_id) == {"S1"}


def test_register_without_password_fails_before_persisting(auth_service, students_repo, student_payload):
    payload = dict(student_payload)
    payload.pop("password")

    result = auth_service.register(NewStudent.from_payload(payload))

    assert isinstance(result, OperationFailed)
    assert students_repo.by_id == {}


def test_register_store_down_is_operation_failed(auth_service, students_repo, student_payload):
    students_repo.fail_with = "Lost connection to MySQL server"
    result = auth_service.register(NewStudent.from_payload(student_payload))
    assert result == OperationFailed(REGISTRATION_FAILED)


def test_login_unknown_email_is_user_not_found(auth_service):
    result = auth_service.login("nobody@x.com", "pw123")

    assert isinstance(result, LoginRejected)
    assert result.reason is LoginFailure.USER_NOT_FOUND
    assert result.message == "User not found"


def test_login_wrong_password(auth_service, student_payload):
    auth_service.register(NewStudent.from_payload(student_payload))

    result = auth_service.login("a@x.com", "wrong")

    assert isinstance(result, LoginRejected)
    assert result.reason is LoginFailure.WRONG_PASSWORD
    assert result.message == "Wrong password"


def test_login_success_returns_profile_without_credential(auth_service, student_payload):
    auth_service.register(NewStudent.from_payload(student_payload))

    result = auth_service.login("a@x.com", "pw123")

    assert isinstance(result, LoginSucceeded)
    assert result.user.student_id == "S1"
    assert not hasattr(result.user, "password_hash")
    assert "password" not in result.user.to_dict()


def test_login_with_corrupted_digest_is_operation_failed(auth_service, students_repo):
    students_repo.by_id["S9"] = Student(
        student_id="S9",
        email="broken@x.com",
        password_hash="CHANGE_ME",
        name="B",
        ship=None,
        level=None,
        grade=None,
        class_group=None,
    )

    result = auth_service.login("broken@x.com", "anything")

    assert isinstance(result, OperationFailed)
    assert "corrupted" in result.message


def test_login_store_down_is_operation_failed(auth_service, students_repo):
    students_repo.fail_with = "Lost connection to MySQL server"
    result = auth_service.login("a@x.com", "pw123")
    assert result == OperationFailed("Lost connection to MySQL server")
