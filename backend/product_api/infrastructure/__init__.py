"""Infrastructure — IO adapters: database sessions, repositories, logging.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - The only layer that imports SQLAlchemy engines and drivers
"""
