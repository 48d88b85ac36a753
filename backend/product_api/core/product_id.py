"""Product ID Parsing — validates the raw {id} path segment. Pure, no IO.

Invariants:
    - Accepts ASCII decimal digits only (no sign, no whitespace, no unicode digits)
    - Result fits the primary key column (<= MAX_PRODUCT_ID)
    - Raises InvalidParameterError on any other input; never returns None
"""

import re

from product_api.core.domain_types import MAX_PRODUCT_ID, ProductId
from product_api.core.errors import InvalidParameterError

_DIGITS = re.compile(r"[0-9]+")


def parse_product_id(raw: str, parameter: str = "id") -> ProductId:
    """Parse a raw path segment into a ProductId."""
    if not _DIGITS.fullmatch(raw):
        raise InvalidParameterError(parameter, raw)
    value = int(raw)
    if value > MAX_PRODUCT_ID:
        raise InvalidParameterError(parameter, raw)
    return ProductId(value)
