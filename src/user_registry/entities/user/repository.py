"""User repository for data access operations."""

from datetime import date

from sqlmodel import Session, select

from .entity import MUTABLE_FIELDS, User
from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(UserTable.id)
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def find_by_birth_date_between(self, start: date, end: date) -> list[User]:
        """Users born between ``start`` and ``end``, both inclusive."""
        statement = (
            select(UserTable)
            .where(UserTable.birth_date >= start)
            .where(UserTable.birth_date <= end)
            .order_by(UserTable.id)
        )
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def create(self, user: User) -> User:
        """Insert a new row; the identifier is assigned by the database."""
        row = UserTable(**user.model_dump(include=set(MUTABLE_FIELDS)))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def update(self, user: User) -> User:
        if user.id is None:
            raise ValueError("Cannot update a user without an id")
        row = self._session.get(UserTable, user.id)
        if row is None:
            raise ValueError(f"User with id {user.id} not found")

        for name in MUTABLE_FIELDS:
            setattr(row, name, getattr(user, name))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def delete(self, user_id: int) -> bool:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
