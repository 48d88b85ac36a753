"""Product ORM — the single backing table of the service.

Invariants:
    - id is an auto-assigned integer primary key
    - name is non-nullable text
    - quantity and price are nullable at the column level (no bounds enforced)

Design Decisions:
    - Numeric(asdecimal=False): DECIMAL column, float on the Python side so
      the value serializes as a JSON number without a custom encoder
"""

from sqlalchemy import Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from product_api.core.domain_types import ProductId
from product_api.core.product import Product as ProductValue
from product_api.db.base import Base


class Product(Base):
    """Product row."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    price: Mapped[float | None] = mapped_column(
        Numeric(asdecimal=False), nullable=True,
    )

    def to_value(self) -> ProductValue:
        return ProductValue(
            id=ProductId(self.id),
            name=self.name,
            quantity=self.quantity,
            price=self.price,
        )
