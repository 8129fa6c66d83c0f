"""The create/update/delete protocol through the entity services."""

from decimal import Decimal

import pytest

from src.orders_api.core.services.versioning import OperationStatus
from src.orders_api.entities.core.user import UserCreate, UserUpdate
from src.orders_api.entities.service.category import CategoryCreate, CategoryUpdate
from src.orders_api.entities.service.customer import CustomerCreate, CustomerUpdate
from src.orders_api.entities.service.product import ProductCreate, ProductUpdate
from src.orders_api.entities.service.supplier import SupplierCreate

IMAGE_B64 = "AAECAwQ="
OTHER_IMAGE_B64 = "BQYHCAk="


async def _create_product(category_service, supplier_service, product_service, name="Keyboard"):
    category = (await category_service.create(CategoryCreate(name="Tech"))).value
    supplier = (await supplier_service.create(SupplierCreate(name="Acme"))).value
    result = await product_service.create(
        ProductCreate(
            image=IMAGE_B64,
            name=name,
            detail="Mechanical keyboard",
            price="19.99",
            available_quantity=5,
            supplied_by=supplier.key,
            categorized_by=category.key,
        )
    )
    assert result.status is OperationStatus.OK
    return result.value


def _product_update(product, modified_by: int, **changes) -> ProductUpdate:
    fields = {
        "key": product.key,
        "image": IMAGE_B64,
        "name": product.name,
        "detail": product.detail,
        "price": product.price,
        "available_quantity": product.available_quantity,
        "supplied_by": product.supplied_by,
        "categorized_by": product.categorized_by,
        "modified_by": modified_by,
        "row_version": product.row_version,
    }
    fields.update(changes)
    return ProductUpdate(**fields)


def _user_create(**overrides) -> UserCreate:
    fields = {
        "identification": "123456789",
        "name": "Ana Perez",
        "email": "ana@example.com",
        "phone": "88887777",
        "address": "Main street 1",
        "password": "s3cret-pass",
        "role": "Admin",
    }
    fields.update(overrides)
    return UserCreate(**fields)


def _user_update(user, **changes) -> UserUpdate:
    fields = {
        "key": user.key,
        "identification": user.identification,
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
        "address": user.address,
        "password": "s3cret-pass",
        "role": user.role,
        "row_version": user.row_version,
    }
    fields.update(changes)
    return UserUpdate(**fields)


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_returns_materialized_record(self, category_service):
        result = await category_service.create(CategoryCreate(name="Tech"))

        assert result.status is OperationStatus.OK
        assert result.succeeded
        assert result.value.key == 1
        assert result.value.row_version == 0
        assert result.value.creation_date is not None

    @pytest.mark.asyncio
    async def test_duplicate_name_is_a_business_rule_violation(self, category_service):
        await category_service.create(CategoryCreate(name="Tech"))

        result = await category_service.create(CategoryCreate(name="Tech"))

        assert result.status is OperationStatus.BUSINESS_RULE_VIOLATION
        assert result.message == "Category name is already in use."
        assert len(await category_service.list_all()) == 1

    @pytest.mark.asyncio
    async def test_product_with_unknown_supplier_is_referential_violation(self, product_service):
        result = await product_service.create(
            ProductCreate(
                image=IMAGE_B64,
                name="Orphan",
                detail="No supplier",
                price="5.00",
                available_quantity=0,
                supplied_by=10,
                categorized_by=10,
            )
        )
        assert result.status is OperationStatus.REFERENTIAL_INTEGRITY_VIOLATION


class TestUpdate:
    @pytest.mark.asyncio
    async def test_category_lifecycle_scenario(self, category_service):
        created = await category_service.create(CategoryCreate(name="Tech"))
        assert (created.value.key, created.value.row_version) == (1, 0)

        duplicate = await category_service.create(CategoryCreate(name="Tech"))
        assert duplicate.message == "Category name is already in use."

        command = CategoryUpdate(key=1, name="Hardware", row_version=0)
        updated = await category_service.update(1, command)
        assert updated.status is OperationStatus.OK
        assert updated.value.row_version == 1

        replayed = await category_service.update(1, command)
        assert replayed.status is OperationStatus.CONFLICT

        deleted = await category_service.delete(1)
        assert deleted.status is OperationStatus.OK
        assert await category_service.get(1) is None

    @pytest.mark.asyncio
    async def test_stale_version_leaves_record_untouched(self, category_service):
        await category_service.create(CategoryCreate(name="Tech"))
        await category_service.update(1, CategoryUpdate(key=1, name="Hardware", row_version=0))
        before = await category_service.get(1)

        result = await category_service.update(1, CategoryUpdate(key=1, name="Software", row_version=0))

        assert result.status is OperationStatus.CONFLICT
        assert result.message == "The category was modified by another user. Please reload and try again."
        assert await category_service.get(1) == before

    @pytest.mark.asyncio
    async def test_identical_update_is_a_no_op(self, category_service):
        await category_service.create(CategoryCreate(name="Tech"))
        before = await category_service.get(1)

        result = await category_service.update(1, CategoryUpdate(key=1, name="Tech", row_version=0))
        after = await category_service.get(1)

        assert result.status is OperationStatus.UNCHANGED
        assert result.succeeded
        assert after.row_version == before.row_version == 0
        assert after.modification_date is None

    @pytest.mark.asyncio
    async def test_modified_by_alone_is_not_a_change(self, category_service, user_service):
        user = (await user_service.create(_user_create())).value
        await category_service.create(CategoryCreate(name="Tech"))

        result = await category_service.update(
            1, CategoryUpdate(key=1, name="Tech", modified_by=user.key, row_version=0)
        )

        assert result.status is OperationStatus.UNCHANGED
        assert (await category_service.get(1)).modified_by is None

    @pytest.mark.asyncio
    async def test_change_increments_version_by_one_and_stamps_date(self, category_service):
        await category_service.create(CategoryCreate(name="Tech"))

        first = await category_service.update(1, CategoryUpdate(key=1, name="Hardware", row_version=0))
        second = await category_service.update(1, CategoryUpdate(key=1, name="Software", row_version=1))

        assert first.value.row_version == 1
        assert second.value.row_version == 2
        assert first.value.modification_date is not None
        assert second.value.modification_date >= first.value.modification_date

    @pytest.mark.asyncio
    async def test_replaying_with_returned_version_succeeds(self, category_service):
        await category_service.create(CategoryCreate(name="Tech"))
        original = CategoryUpdate(key=1, name="Hardware", row_version=0)

        first = await category_service.update(1, original)
        second = await category_service.update(
            1, original.model_copy(update={"row_version": first.value.row_version})
        )
        third = await category_service.update(1, original)

        assert first.succeeded
        assert second.succeeded
        assert third.status is OperationStatus.CONFLICT

    @pytest.mark.asyncio
    async def test_key_mismatch_is_invalid(self, category_service):
        await category_service.create(CategoryCreate(name="Tech"))

        result = await category_service.update(2, CategoryUpdate(key=1, name="Hardware", row_version=0))

        assert result.status is OperationStatus.INVALID
        assert result.message == "Category key mismatch."

    @pytest.mark.asyncio
    async def test_missing_record_is_not_found(self, category_service):
        result = await category_service.update(5, CategoryUpdate(key=5, name="Ghost", row_version=0))

        assert result.status is OperationStatus.NOT_FOUND
        assert result.message == "Category with key 5 not found."

    @pytest.mark.asyncio
    async def test_taking_another_records_name_is_rejected(self, category_service):
        await category_service.create(CategoryCreate(name="Tech"))
        await category_service.create(CategoryCreate(name="Books"))

        result = await category_service.update(2, CategoryUpdate(key=2, name="Tech", row_version=0))

        assert result.status is OperationStatus.BUSINESS_RULE_VIOLATION
        assert result.message == "Category name is already in use by another category."

    @pytest.mark.asyncio
    async def test_uniqueness_is_checked_before_the_version(self, category_service):
        await category_service.create(CategoryCreate(name="Tech"))
        await category_service.create(CategoryCreate(name="Books"))

        result = await category_service.update(2, CategoryUpdate(key=2, name="Tech", row_version=9))

        assert result.status is OperationStatus.BUSINESS_RULE_VIOLATION


class TestProductUpdate:
    @pytest.mark.asyncio
    async def test_image_bytes_are_compared(
        self, category_service, supplier_service, product_service, user_service
    ):
        editor = (await user_service.create(_user_create())).value
        product = await _create_product(category_service, supplier_service, product_service)

        same = await product_service.update(product.key, _product_update(product, editor.key))
        changed = await product_service.update(
            product.key, _product_update(product, editor.key, image=OTHER_IMAGE_B64)
        )

        assert same.status is OperationStatus.UNCHANGED
        assert changed.status is OperationStatus.OK
        assert changed.value.image == b"\x05\x06\x07\x08\x09"

    @pytest.mark.asyncio
    async def test_keeping_own_name_while_changing_price(
        self, category_service, supplier_service, product_service, user_service
    ):
        editor = (await user_service.create(_user_create())).value
        product = await _create_product(category_service, supplier_service, product_service)

        result = await product_service.update(
            product.key, _product_update(product, editor.key, price=Decimal("24.50"))
        )

        assert result.status is OperationStatus.OK
        assert result.value.price == Decimal("24.50")
        assert result.value.row_version == 1


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_missing_record(self, category_service):
        result = await category_service.delete(3)
        assert result.status is OperationStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_supplier_with_products_cannot_be_deleted(
        self, category_service, supplier_service, product_service
    ):
        product = await _create_product(category_service, supplier_service, product_service)

        result = await supplier_service.delete(product.supplied_by)

        assert result.status is OperationStatus.REFERENTIAL_INTEGRITY_VIOLATION
        assert await supplier_service.get(product.supplied_by) is not None
        assert await product_service.get(product.key) is not None

    @pytest.mark.asyncio
    async def test_deleting_a_user_clears_audit_references(self, category_service, user_service):
        user = (await user_service.create(_user_create())).value
        await category_service.create(CategoryCreate(name="Tech", created_by=user.key))

        assert (await user_service.delete(user.key)).succeeded
        assert (await category_service.get(1)).created_by is None


class TestAccounts:
    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, user_service, password_service):
        user = (await user_service.create(_user_create())).value

        assert user.password_hash != "s3cret-pass"
        assert password_service.verify("s3cret-pass", user.password_hash)

    @pytest.mark.asyncio
    async def test_identification_collision_reported_first(self, user_service):
        await user_service.create(_user_create())

        result = await user_service.create(_user_create())

        assert result.status is OperationStatus.BUSINESS_RULE_VIOLATION
        assert result.message == "Identification is already in use."

    @pytest.mark.asyncio
    async def test_email_collision_on_update(self, user_service):
        await user_service.create(_user_create())
        second = (
            await user_service.create(_user_create(identification="987654321", email="bo@example.com"))
        ).value

        result = await user_service.update(second.key, _user_update(second, email="ana@example.com"))

        assert result.message == "Email is already in use by another user."

    @pytest.mark.asyncio
    async def test_same_password_is_not_a_change(self, user_service):
        user = (await user_service.create(_user_create())).value

        result = await user_service.update(user.key, _user_update(user))

        assert result.status is OperationStatus.UNCHANGED

    @pytest.mark.asyncio
    async def test_modified_by_alone_is_not_an_account_change(self, user_service):
        user = (await user_service.create(_user_create())).value

        result = await user_service.update(user.key, _user_update(user, modified_by=user.key))

        assert result.status is OperationStatus.UNCHANGED
        assert (await user_service.get(user.key)).modified_by is None

    @pytest.mark.asyncio
    async def test_email_lookup_uses_stored_form(self, user_service, customer_service):
        await user_service.create(_user_create(email="Ana@Example.COM"))

        assert (await user_service.get_by_email("Ana@example.com")).key == 1
        assert (await user_service.get_by_email("Ana@EXAMPLE.com")).key == 1
        assert await user_service.get_by_email("not-an-email") is None
        assert await customer_service.get_by_email("not-an-email") is None

    @pytest.mark.asyncio
    async def test_new_password_is_a_change_and_rehashed(self, user_service, password_service):
        user = (await user_service.create(_user_create())).value

        result = await user_service.update(user.key, _user_update(user, password="n3w-pass"))

        assert result.status is OperationStatus.OK
        assert result.value.row_version == 1
        assert password_service.verify("n3w-pass", result.value.password_hash)
        assert not password_service.verify("s3cret-pass", result.value.password_hash)

    @pytest.mark.asyncio
    async def test_authenticate(self, user_service):
        await user_service.create(_user_create())

        assert (await user_service.authenticate("ana@example.com", "s3cret-pass")).key == 1
        assert await user_service.authenticate("ana@example.com", "wrong") is None
        assert await user_service.authenticate("nobody@example.com", "s3cret-pass") is None

    @pytest.mark.asyncio
    async def test_customer_messages_name_customers(self, customer_service):
        fields = {
            "identification": "123456789",
            "name": "Luis",
            "email": "luis@example.com",
            "phone": "88887777",
            "address": "Second street 2",
            "password": "pa55word",
        }
        await customer_service.create(CustomerCreate(**fields))
        other = (
            await customer_service.create(
                CustomerCreate(**{**fields, "identification": "555555555", "email": "eva@example.com"})
            )
        ).value

        result = await customer_service.update(
            other.key,
            CustomerUpdate(
                **{**fields, "key": other.key, "row_version": 0}
            ),
        )

        assert result.message == "Identification is already in use by another customer."
