"""Product Entity — the value shape shared by the wire format and the store.

Invariants:
    - ProductDraft carries only caller-mutable fields (no id)
    - Product always carries a store-assigned, non-zero id
    - Both are frozen: update produces a new value, never mutates in place

Design Decisions:
    - Dataclasses, not ORM rows: core never imports SQLAlchemy
    - Separate draft type makes "caller never supplies id" a type-level fact
"""

from dataclasses import dataclass

from product_api.core.domain_types import ProductId


@dataclass(frozen=True)
class ProductDraft:
    """Mutable product fields as supplied by a create/update request."""
    name: str
    quantity: int
    price: float

    def with_id(self, product_id: ProductId) -> "Product":
        return Product(
            id=product_id, name=self.name,
            quantity=self.quantity, price=self.price,
        )


@dataclass(frozen=True)
class Product:
    """A stored product."""
    id: ProductId
    name: str
    quantity: int
    price: float
