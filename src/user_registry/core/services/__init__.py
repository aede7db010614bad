"""Core services exports."""

from .clock import Clock, FixedClock, SystemClock
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .user_service import UserService

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "DbManageService",
    "DbSessionService",
    "UserService",
]
