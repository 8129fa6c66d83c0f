"""Password hashing through pwdlib."""

from pwdlib import PasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher

from src.orders_api.core.services import PasswordService


class TestPasswordService:
    def test_hash_is_not_the_password(self, password_service: PasswordService):
        hashed = password_service.hash("s3cret-pass")

        assert hashed != "s3cret-pass"
        assert hashed.startswith("$argon2id$")

    def test_hashes_are_salted(self, password_service: PasswordService):
        assert password_service.hash("s3cret-pass") != password_service.hash("s3cret-pass")

    def test_verify(self, password_service: PasswordService):
        hashed = password_service.hash("s3cret-pass")

        assert password_service.verify("s3cret-pass", hashed)
        assert not password_service.verify("wrong", hashed)

    def test_unknown_hash_format_never_matches(self, password_service: PasswordService):
        """A plaintext or foreign hash in the store must not raise."""
        assert not password_service.verify("s3cret-pass", "s3cret-pass")
        assert password_service.verify_and_update("s3cret-pass", "not-a-hash") == (False, None)

    def test_current_hash_needs_no_update(self, password_service: PasswordService):
        hashed = password_service.hash("s3cret-pass")

        assert password_service.verify_and_update("s3cret-pass", hashed) == (True, None)

    def test_outdated_hash_is_upgraded(self, password_service: PasswordService):
        """Hashes made with weaker parameters verify and come back re-hashed."""
        weak = PasswordService(PasswordHash((Argon2Hasher(time_cost=1, memory_cost=8192),)))
        old_hash = weak.hash("s3cret-pass")

        matches, new_hash = password_service.verify_and_update("s3cret-pass", old_hash)

        assert matches
        assert new_hash is not None
        assert new_hash != old_hash
        assert password_service.verify("s3cret-pass", new_hash)
