"""Store Outcomes — tagged results returned by every persistence operation.

Invariants:
    - Every repository call returns exactly one of Found | NotFound | Failure
    - NotFound is only produced by id-scoped operations (fetch/update/delete by id)
    - Failure carries the operation name and a detail string for logs only
    - unwrap() is the single place that turns an outcome into a value or an error

Design Decisions:
    - Tagged outcome over exceptions for "no row": handlers switch on kind,
      never inspect error text
    - rows_affected kept on Found/NotFound so mutations report their count
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from product_api.core.domain_types import StoreOperation
from product_api.core.errors import BackendError, ProductNotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """Operation succeeded and produced a value."""
    value: T
    rows_affected: int = 1


@dataclass(frozen=True)
class NotFound:
    """No row matched the id."""
    rows_affected: int = 0


@dataclass(frozen=True)
class Failure:
    """The store call itself failed."""
    operation: StoreOperation
    detail: str


Outcome = Union[Found[T], NotFound, Failure]


def from_rows_affected(rows_affected: int, value: T) -> "Outcome[T]":
    """Map an id-scoped mutation count to Found (>=1) or NotFound (0)."""
    if rows_affected == 0:
        return NotFound()
    return Found(value, rows_affected=rows_affected)


def unwrap(outcome: "Outcome[T]", resource_id: int | None = None) -> T:
    """Return the Found value, or raise the error matching the outcome kind."""
    if isinstance(outcome, Found):
        return outcome.value
    if isinstance(outcome, NotFound):
        raise ProductNotFoundError(resource_id)
    if isinstance(outcome, Failure):
        raise BackendError("store call failed", outcome.operation.value)
    raise TypeError(f"Unknown outcome: {outcome!r}")
