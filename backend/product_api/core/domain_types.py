"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps int — always parsed via parse_product_id at the HTTP boundary
    - Persistence operations are named by StoreOperation, never by raw strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)

# Largest value of the INTEGER primary key column
MAX_PRODUCT_ID = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class StoreOperation(str, Enum):
    """The five persistence operations — used in Failure outcomes and logs."""
    FETCH_BY_ID = "fetch_by_id"
    FETCH_ALL = "fetch_all"
    INSERT = "insert"
    UPDATE_BY_ID = "update_by_id"
    DELETE_BY_ID = "delete_by_id"
