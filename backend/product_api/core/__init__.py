"""Core — pure domain logic for the Product API.

Invariants:
    - No IO, no framework imports (FastAPI, SQLAlchemy) in this package
    - Shell code depends on core, never the reverse

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
