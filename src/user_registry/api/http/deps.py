"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.user_registry.api.http.app_data import ApplicationDependencies
from src.user_registry.core.services import Clock, UserService
from src.user_registry.entities.user import UserRepository
from src.user_registry.runtime.context import get_config


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped session committed when the handler succeeds."""
    app_deps = get_app_dependencies(request)
    with app_deps.database_service.session_scope() as session:
        yield session


def get_clock(request: Request) -> Clock:
    """Get the clock used for date-based business rules."""
    return get_app_dependencies(request).clock


def get_min_age() -> int:
    """Get the configured minimum user age in years."""
    return get_config().users.min_age


def get_user_service(
    session: Session = Depends(get_db_session),
    clock: Clock = Depends(get_clock),
    min_age: int = Depends(get_min_age),
) -> UserService:
    return UserService(UserRepository(session), min_age=min_age, clock=clock)
