"""Product Schemas — Pydantic wire shapes for the product resource.

Invariants:
    - ProductWrite.name, quantity, price are all required; a missing field is a 400
    - ProductWrite is strict: "12", true, or 12.0 for quantity and "9.5" for price
      are rejected, never coerced; an integer price is still a number
    - NaN and Infinity are rejected for price (not JSON numbers)
    - ProductWrite ignores any caller-supplied id (extra fields dropped)
    - ProductResponse mirrors {"id", "name", "quantity", "price"}; a whole price
      serializes as an integer (120, not 120.0)

Design Decisions:
    - One write schema for create and update: both overwrite every mutable field
    - from_attributes on ProductResponse: built directly from core Product dataclasses
"""

from pydantic import BaseModel, ConfigDict, field_serializer

from product_api.core.product import ProductDraft

# Above this magnitude floats render in exponent form
_EXPONENT_THRESHOLD = 1e21


class ProductWrite(BaseModel):
    """Create/update request body."""
    model_config = ConfigDict(extra="ignore", strict=True, allow_inf_nan=False)

    name: str
    quantity: int
    price: float

    def to_draft(self) -> ProductDraft:
        return ProductDraft(
            name=self.name, quantity=self.quantity, price=self.price,
        )


class ProductResponse(BaseModel):
    """Product as returned to callers."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    quantity: int | None
    price: float | None

    @field_serializer("price")
    def serialize_price(self, price: float | None) -> int | float | None:
        if price is None or abs(price) >= _EXPONENT_THRESHOLD:
            return price
        return int(price) if float(price).is_integer() else price


class DeletionResponse(BaseModel):
    """Fixed confirmation body for a successful delete."""
    result: str = "Deletion successful"
