from __future__ import annotations

from enum import Enum


class LoginFailure(str, Enum):
    """Reasons a login is rejected; the value is the message sent to the client."""

    USER_NOT_FOUND = "User not found"
    WRONG_PASSWORD = "Wrong password"
