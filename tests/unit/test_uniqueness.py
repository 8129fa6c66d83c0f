"""Uniqueness rules evaluated against an in-memory lookup table."""

from datetime import UTC, datetime

import pytest

from src.orders_api.core.services.versioning import UniquenessRule, UniquenessValidator
from src.orders_api.entities.service.category import Category


def _record(key: int, name: str) -> Category:
    return Category(key=key, creation_date=datetime.now(UTC), name=name)


def _lookup_from(records: dict[str, Category]):
    async def lookup(value):
        return records.get(value)

    return lookup


@pytest.fixture
def account_validator() -> UniquenessValidator:
    by_identification = {"111111111": _record(1, "first")}
    by_email = {"first@example.com": _record(1, "first"), "second@example.com": _record(2, "second")}
    return UniquenessValidator(
        [
            UniquenessRule(
                field="identification",
                lookup=_lookup_from(by_identification),
                create_message="Identification is already in use.",
                update_message="Identification is already in use by another user.",
            ),
            UniquenessRule(
                field="email",
                lookup=_lookup_from(by_email),
                create_message="Email is already in use.",
                update_message="Email is already in use by another user.",
            ),
        ]
    )


class TestUniquenessValidator:
    @pytest.mark.asyncio
    async def test_new_record_with_unique_values_passes(self, account_validator):
        result = await account_validator.validate_new(
            {"identification": "999999999", "email": "new@example.com"}
        )
        assert result.success
        assert result.message is None

    @pytest.mark.asyncio
    async def test_rules_are_checked_in_declared_order(self, account_validator):
        """Identification is reported even though the email also collides."""
        result = await account_validator.validate_new(
            {"identification": "111111111", "email": "second@example.com"}
        )
        assert not result.success
        assert result.message == "Identification is already in use."

    @pytest.mark.asyncio
    async def test_second_rule_reported_when_first_passes(self, account_validator):
        result = await account_validator.validate_new(
            {"identification": "999999999", "email": "second@example.com"}
        )
        assert result.message == "Email is already in use."

    @pytest.mark.asyncio
    async def test_update_may_keep_its_own_values(self, account_validator):
        result = await account_validator.validate_update(
            1, {"identification": "111111111", "email": "first@example.com"}
        )
        assert result.success

    @pytest.mark.asyncio
    async def test_update_cannot_take_another_records_value(self, account_validator):
        result = await account_validator.validate_update(
            1, {"identification": "111111111", "email": "second@example.com"}
        )
        assert not result.success
        assert result.message == "Email is already in use by another user."

    @pytest.mark.asyncio
    async def test_no_rules_always_passes(self):
        result = await UniquenessValidator([]).validate_new({"name": "anything"})
        assert result.success
