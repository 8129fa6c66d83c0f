"""Password hashing and verification."""

from loguru import logger
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError


class PasswordService:
    """Argon2 password hashing through pwdlib's recommended settings."""

    def __init__(self, hasher: PasswordHash | None = None):
        self._hasher = hasher or PasswordHash.recommended()

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``.

        A hash in an unrecognised format never matches.
        """
        try:
            return self._hasher.verify(password, password_hash)
        except UnknownHashError:
            logger.warning("Stored password hash has an unknown format")
            return False

    def verify_and_update(self, password: str, password_hash: str) -> tuple[bool, str | None]:
        """Verify and, when the hash uses outdated parameters, return a fresh one.

        Returns:
            ``(matches, new_hash)`` where ``new_hash`` is None unless a rehash is due.
        """
        try:
            return self._hasher.verify_and_update(password, password_hash)
        except UnknownHashError:
            logger.warning("Stored password hash has an unknown format")
            return False, None
