"""Password hashing for student accounts.

Digests are standard bcrypt strings ($2b$<cost>$<salt+hash>) so they stay
interchangeable with accounts created by other bcrypt implementations
($2a$ and $2y$ digests verify as well).
"""

from __future__ import annotations

import bcrypt

from ..core.constants import BCRYPT_MAX_PASSWORD_BYTES, DEFAULT_BCRYPT_ROUNDS
from ..core.exceptions import CredentialCorruptionError


def _password_bytes(password: str) -> bytes:
    # Lone surrogates (legal in JSON strings) become U+FFFD instead of failing to encode.
    text = password.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    # bcrypt only looks at the first 72 bytes; newer bcrypt releases raise instead of truncating.
    return text.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Salted, deliberately slow hashing with a fixed work factor."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self._rounds = int(rounds)

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        if not isinstance(password, str) or not password:
            raise ValueError("password must be a non-empty string")
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("ascii")

    def verify(self, password: str, digest: str) -> bool:
        """True only if `password` matches `digest`.

        A mismatch (or a missing candidate) is False. A digest that bcrypt
        cannot parse raises CredentialCorruptionError.
        """
        if not isinstance(password, str):
            return False
        if not isinstance(digest, str) or not digest:
            raise CredentialCorruptionError("Stored password hash is missing")

        candidate = _password_bytes(password)
        try:
            return bcrypt.checkpw(candidate, digest.encode("utf-8"))
        except ValueError as e:
            raise CredentialCorruptionError("Stored password hash is corrupted") from e
