"""Users API router with CRUD and birth-date search."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from src.user_registry.api.http.deps import get_user_service
from src.user_registry.api.http.schemas import MessageResponse
from src.user_registry.core.services import UserService
from src.user_registry.entities.user import User, UserPayload

router = APIRouter(prefix="/users", tags=["users"])

# Identifiers are stored as signed 64-bit integers
UserId = Annotated[
    int, Path(ge=-(2**63), le=2**63 - 1, description="User identifier")
]

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
}


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
def create_user(
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user after validating it and checking the minimum age."""
    return service.create(payload)


@router.get("", response_model=list[User])
def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    """List all users."""
    return service.list_all()


@router.get(
    "/search",
    response_model=list[User],
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
def search_users_by_birth_date(
    start: date = Query(alias="from", description="First birth date, inclusive"),
    end: date = Query(alias="to", description="Last birth date, inclusive"),
    service: UserService = Depends(get_user_service),
) -> list[User]:
    """Search users whose birth date falls within [from, to]."""
    return service.search_by_birth_date(start, end)


@router.get("/{user_id}", response_model=User, responses=_ERROR_RESPONSES)
def get_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
) -> User:
    """Get a user by ID."""
    return service.get(user_id)


@router.put("/{user_id}", response_model=User, responses=_ERROR_RESPONSES)
def replace_user(
    user_id: UserId,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace every field of a user."""
    return service.replace(user_id, payload)


@router.patch("/{user_id}", response_model=User, responses=_ERROR_RESPONSES)
def patch_user(
    user_id: UserId,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    """Update only the fields present in the request body."""
    return service.patch(user_id, payload)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
)
def delete_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete a user."""
    return MessageResponse(message=service.delete(user_id))
