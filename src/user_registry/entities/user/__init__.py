"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity returned by the API
- UserPayload: Sparse request body for create, replace and patch
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import MUTABLE_FIELDS, User, UserFields, UserPayload
from .repository import UserRepository
from .table import UserTable

__all__ = [
    "MUTABLE_FIELDS",
    "User",
    "UserFields",
    "UserPayload",
    "UserTable",
    "UserRepository",
]
