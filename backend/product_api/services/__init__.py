"""Services — per-route handler logic between the API layer and the repository.

Invariants:
    - Handlers depend on the ProductRepository Protocol, never on SQLAlchemy
    - Handlers raise ProductApiError subclasses; they never build HTTP responses
"""
