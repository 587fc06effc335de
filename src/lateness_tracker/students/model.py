from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class NewStudent:
    """Registration input, forwarded to the store as received."""

    student_id: Any
    email: Any
    password: Any
    name: Any = None
    ship: Any = None
    level: Any = None
    grade: Any = None
    class_group: Any = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "NewStudent":
        return cls(
            student_id=payload.get("student_id"),
            email=payload.get("email"),
            password=payload.get("password"),
            name=payload.get("name"),
            ship=payload.get("ship"),
            level=payload.get("level"),
            grade=payload.get("grade"),
            class_group=payload.get("class_group"),
        )


@dataclass(frozen=True)
class StudentProfile:
    """Public view of a student. Has no credential field."""

    student_id: str
    email: str
    name: Optional[str]
    ship: Optional[str]
    level: Optional[str]
    grade: Optional[str]
    class_group: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        # "class" is the stored column name the front end reads.
        return {
            "student_id": self.student_id,
            "email": self.email,
            "name": self.name,
            "ship": self.ship,
            "level": self.level,
            "grade": self.grade,
            "class": self.class_group,
        }


@dataclass(frozen=True)
class Student:
    """A stored student account, including its password digest.

    Only the repository and AuthService see this type.
    """

    student_id: str
    email: str
    password_hash: str
    name: Optional[str]
    ship: Optional[str]
    level: Optional[str]
    grade: Optional[str]
    class_group: Optional[str]

    def profile(self) -> StudentProfile:
        return StudentProfile(
            student_id=self.student_id,
            email=self.email,
            name=self.name,
            ship=self.ship,
            level=self.level,
            grade=self.grade,
            class_group=self.class_group,
        )
