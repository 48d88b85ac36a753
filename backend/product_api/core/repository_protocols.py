"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store IO accessed through the ProductRepository Protocol
    - Implementations provided by shell via dependency injection (FastAPI Depends)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; outcomes are plain values
"""

from typing import Protocol

from product_api.core.domain_types import ProductId
from product_api.core.outcomes import Outcome
from product_api.core.product import Product, ProductDraft


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by shell."""
    async def fetch_by_id(self, product_id: ProductId) -> Outcome[Product]: ...
    async def fetch_all(self) -> Outcome[list[Product]]: ...
    async def insert(self, draft: ProductDraft) -> Outcome[Product]: ...
    async def update_by_id(
        self, product_id: ProductId, draft: ProductDraft,
    ) -> Outcome[Product]: ...
    async def delete_by_id(self, product_id: ProductId) -> Outcome[ProductId]: ...
