"""Product Handlers — validate → delegate → translate against a fake repository.

Invariants:
    - Malformed ids raise InvalidParameterError with zero repository calls
    - NotFound outcomes raise ProductNotFoundError, Failure raises BackendError
    - Success returns core Product values (or the fixed deletion body)
"""

import pytest

from product_api.core.errors import (
    BackendError, InvalidParameterError, ProductNotFoundError,
)
from product_api.core.product import ProductDraft
from product_api.services.product_handlers import ProductHandlers
from tests.fakes import FakeProductRepository

KEYBOARD = ProductDraft(name="keyboard", quantity=300, price=120.0)


@pytest.fixture
def repository():
    return FakeProductRepository()


@pytest.fixture
def handlers(repository):
    return ProductHandlers(repository)


async def test_create_then_get_returns_same_fields(handlers):
    created = await handlers.create_product(KEYBOARD)
    fetched = await handlers.get_product(str(created.id))
    assert fetched == created
    assert (fetched.name, fetched.quantity, fetched.price) == ("keyboard", 300, 120.0)


async def test_get_missing_raises_not_found(handlers):
    with pytest.raises(ProductNotFoundError):
        await handlers.get_product("10")


async def test_get_malformed_id_skips_repository(handlers, repository):
    with pytest.raises(InvalidParameterError):
        await handlers.get_product("testabc")
    assert repository.calls == []


async def test_list_empty_returns_empty_list(handlers):
    assert await handlers.list_products() == []


async def test_update_overwrites_fields(handlers):
    await handlers.create_product(KEYBOARD)
    updated = await handlers.update_product(
        "1", ProductDraft(name="keyboard", quantity=200, price=199.0),
    )
    assert updated.quantity == 200
    assert (await handlers.get_product("1")).quantity == 200


async def test_update_missing_raises_not_found(handlers, repository):
    with pytest.raises(ProductNotFoundError):
        await handlers.update_product("10", KEYBOARD)
    assert repository.rows == {}


async def test_delete_returns_confirmation(handlers):
    await handlers.create_product(KEYBOARD)
    assert await handlers.delete_product("1") == {"result": "Deletion successful"}
    with pytest.raises(ProductNotFoundError):
        await handlers.get_product("1")


async def test_delete_missing_raises_not_found(handlers):
    with pytest.raises(ProductNotFoundError):
        await handlers.delete_product("10")


async def test_failure_outcome_raises_backend_error():
    handlers = ProductHandlers(FakeProductRepository(fail=True))
    with pytest.raises(BackendError) as exc_info:
        await handlers.list_products()
    assert exc_info.value.operation == "fetch_all"
