"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model and request payloads
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .user import User, UserPayload, UserRepository, UserTable

__all__ = [
    "User",
    "UserPayload",
    "UserTable",
    "UserRepository",
]
