"""Product Handlers — validate → delegate → translate for each product route.

Invariants:
    - Raw id segments are parsed here (parse_product_id) before any store call;
      a malformed id never reaches the repository
    - Each handler makes exactly one repository call
    - Outcomes are translated only via unwrap(): NotFound → ProductNotFoundError,
      Failure → BackendError
    - No retries; a failed store call ends the request

Design Decisions:
    - Repository injected in the constructor: tests pass a fake, the API layer
      passes SqlProductRepository built from the request session
    - Bodies arrive as ProductDraft: JSON shape checks happen in FastAPI/Pydantic
"""

from product_api.core.outcomes import unwrap
from product_api.core.product import Product, ProductDraft
from product_api.core.product_id import parse_product_id
from product_api.core.repository_protocols import ProductRepository

DELETION_RESULT = {"result": "Deletion successful"}


class ProductHandlers:
    """Handler Layer for the product resource."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def get_product(self, raw_id: str) -> Product:
        product_id = parse_product_id(raw_id)
        outcome = await self.repository.fetch_by_id(product_id)
        return unwrap(outcome, product_id)

    async def list_products(self) -> list[Product]:
        outcome = await self.repository.fetch_all()
        return unwrap(outcome)

    async def create_product(self, draft: ProductDraft) -> Product:
        outcome = await self.repository.insert(draft)
        return unwrap(outcome)

    async def update_product(self, raw_id: str, draft: ProductDraft) -> Product:
        product_id = parse_product_id(raw_id)
        outcome = await self.repository.update_by_id(product_id, draft)
        return unwrap(outcome, product_id)

    async def delete_product(self, raw_id: str) -> dict:
        product_id = parse_product_id(raw_id)
        outcome = await self.repository.delete_by_id(product_id)
        unwrap(outcome, product_id)
        return dict(DELETION_RESULT)
