"""User database table model."""

from datetime import date

from sqlmodel import Field

from src.user_registry.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "users"

    email: str
    first_name: str
    last_name: str
    birth_date: date = Field(index=True)
    address: str | None = None
    phone_number: str | None = None
