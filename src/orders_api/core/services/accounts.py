"""User and customer services: the versioned protocol plus password handling."""

from typing import Any, TypeVar

from loguru import logger

from src.orders_api.core.services.password_service import PasswordService
from src.orders_api.core.services.versioning.service import VersionedEntityService
from src.orders_api.core.services.versioning.uniqueness import UniquenessRule
from src.orders_api.entities.core.user import User, UserRepository
from src.orders_api.entities.service.customer import Customer, CustomerRepository

AccountT = TypeVar("AccountT", User, Customer)


class AccountService(VersionedEntityService[AccountT]):
    """Shared behaviour for records that authenticate with a password.

    Plaintext passwords are only ever seen in commands; the store holds hashes.
    A supplied password counts as a change unless it verifies against the
    stored hash.
    """

    _repository: UserRepository | CustomerRepository

    def __init__(
        self,
        repository: UserRepository | CustomerRepository,
        password_service: PasswordService,
        rehash_on_login: bool = True,
    ):
        self._password_service = password_service
        self._rehash_on_login = rehash_on_login
        super().__init__(repository)

    def uniqueness_rules(self) -> list[UniquenessRule]:
        noun = self.label.lower()
        return [
            UniquenessRule(
                field="identification",
                lookup=self._repository.get_by_identification,
                create_message="Identification is already in use.",
                update_message=f"Identification is already in use by another {noun}.",
            ),
            UniquenessRule(
                field="email",
                lookup=self._repository.get_by_email,
                create_message="Email is already in use.",
                update_message=f"Email is already in use by another {noun}.",
            ),
        ]

    async def get_by_identification(self, identification: str) -> AccountT | None:
        return await self._repository.get_by_identification(identification)

    async def get_by_email(self, email: str) -> AccountT | None:
        return await self._repository.get_by_email(email)

    def _password_changed(self, snapshot: AccountT, password: str) -> bool:
        return not self._password_service.verify(password, snapshot.password_hash)

    def has_changes(self, snapshot: AccountT, values: dict[str, Any]) -> bool:
        """Compare the profile fields and the submitted password.

        ``modified_by`` is not among the compared fields, so resubmitting an
        unchanged profile under a different editor is still no change. A
        password that does not verify against the stored hash counts as one.
        """
        return super().has_changes(snapshot, values) or self._password_changed(
            snapshot, values["password"]
        )

    def create_row_values(self, values: dict[str, Any]) -> dict[str, Any]:
        row = dict(values)
        row["password_hash"] = self._password_service.hash(row.pop("password"))
        return row

    def update_row_values(self, snapshot: AccountT, values: dict[str, Any]) -> dict[str, Any]:
        writes = super().update_row_values(snapshot, values)
        if self._password_changed(snapshot, values["password"]):
            writes["password_hash"] = self._password_service.hash(values["password"])
        return writes

    async def authenticate(self, email: str, password: str) -> AccountT | None:
        """Return the account when the credentials match, otherwise None.

        An account whose hash was produced with outdated parameters gets a
        fresh hash through the same compare-and-write as any update; losing
        that race is harmless and ignored.
        """
        account = await self._repository.get_by_email(email)
        if account is None:
            logger.info("{} login failed: unknown email", self.label)
            return None

        matches, new_hash = self._password_service.verify_and_update(
            password, account.password_hash
        )
        if not matches:
            logger.info("{} {} login failed: wrong password", self.label, account.key)
            return None

        if new_hash and self._rehash_on_login:
            outcome = await self._repository.update_if_version_matches(
                account.key, account.row_version, {"password_hash": new_hash}
            )
            logger.info("{} {} password hash upgraded: {}", self.label, account.key, outcome)
            account = await self._repository.get(account.key) or account

        return account


class UserService(AccountService[User]):
    label = "User"
    mutable_fields = ("identification", "name", "email", "phone", "address", "role")


class CustomerService(AccountService[Customer]):
    label = "Customer"
    mutable_fields = ("identification", "name", "email", "phone", "address")
