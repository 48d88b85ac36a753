"""Product Routes — the five CRUD endpoints of the product resource.

Invariants:
    - {product_id} is extracted as a raw string; parsing happens in ProductHandlers
    - Routes hold no business logic: build handlers, call one method, shape response
    - Repository reaches handlers only through Depends (no module-level store handle)

Design Decisions:
    - get_product_repository as its own dependency: tests override it with a fake
      to exercise backend-failure paths without a broken database
    - Collection lives at /products, items at /product/{id} (public URL contract)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.repository_protocols import ProductRepository
from product_api.infrastructure.database import get_db
from product_api.infrastructure.product_repository import SqlProductRepository
from product_api.schemas.product import (
    DeletionResponse, ProductResponse, ProductWrite,
)
from product_api.services.product_handlers import ProductHandlers

router = APIRouter(tags=["products"])


def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    return SqlProductRepository(db)


def get_product_handlers(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductHandlers:
    return ProductHandlers(repository)


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """List every product."""
    products = await handlers.list_products()
    return [ProductResponse.model_validate(p) for p in products]


@router.get("/product/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str, handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Get one product by id."""
    product = await handlers.get_product(product_id)
    return ProductResponse.model_validate(product)


@router.post(
    "/product", response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductWrite,
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Create a product; the store assigns its id."""
    product = await handlers.create_product(body.to_draft())
    return ProductResponse.model_validate(product)


@router.put("/product/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    body: ProductWrite,
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Overwrite name, quantity and price of an existing product."""
    product = await handlers.update_product(product_id, body.to_draft())
    return ProductResponse.model_validate(product)


@router.delete("/product/{product_id}", response_model=DeletionResponse)
async def delete_product(
    product_id: str, handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Delete a product by id."""
    return await handlers.delete_product(product_id)
