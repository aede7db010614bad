"""User domain entity and request payloads."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.user_registry.entities._base import Entity

MUTABLE_FIELDS: tuple[str, ...] = (
    "email",
    "first_name",
    "last_name",
    "birth_date",
    "address",
    "phone_number",
)


class UserFields(BaseModel):
    """The mutable attributes shared by users and user payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str | None = Field(default=None, description="User's email address")
    first_name: str | None = Field(default=None, description="User's first name")
    last_name: str | None = Field(default=None, description="User's last name")
    birth_date: date | None = Field(
        default=None, description="User's birth date (YYYY-MM-DD)"
    )
    address: str | None = Field(default=None, description="User's address")
    phone_number: str | None = Field(default=None, description="User's phone number")


class UserPayload(UserFields):
    """Request body for creating, replacing or patching a user.

    Every field is optional at parse time so that missing values surface as
    validation messages rather than parse errors. The set of fields the
    client actually sent is kept in ``model_fields_set``; an ``id`` in the
    body is ignored.
    """

    def replacement_values(self) -> dict[str, Any]:
        """Values for a full replace: every mutable field, sent or not."""
        return {name: getattr(self, name) for name in MUTABLE_FIELDS}

    def patch_values(self) -> dict[str, Any]:
        """Values for a partial update: only fields sent with a non-null value.

        Explicit blank strings are kept; explicit nulls are dropped like
        omitted fields.
        """
        return {
            name: getattr(self, name)
            for name in MUTABLE_FIELDS
            if name in self.model_fields_set and getattr(self, name) is not None
        }


class User(Entity, UserFields):
    """User entity representing a person in the system."""

    def __eq__(self, other: Any) -> bool:
        """Compare users by identifier and business attributes."""
        if not isinstance(other, User):
            return False

        return self.id == other.id and all(
            getattr(self, name) == getattr(other, name) for name in MUTABLE_FIELDS
        )

    def __hash__(self) -> int:
        return hash((self.id, *(getattr(self, name) for name in MUTABLE_FIELDS)))
