"""Users service: request orchestration over the user repository.

Update operations follow a fixed order so that error precedence is stable:
existence check, field merge, validation, age check, persistence.
"""

from datetime import date

from loguru import logger

from src.user_registry.core.exceptions import (
    IncorrectDateRangeError,
    UserNotAdultError,
    UserNotFoundError,
    UserValidationError,
)
from src.user_registry.core.services.clock import Clock
from src.user_registry.core.validation import (
    ValidationProfile,
    check_adult,
    validate,
)
from src.user_registry.entities.user import User, UserPayload, UserRepository


class UserService:
    def __init__(self, repository: UserRepository, min_age: int, clock: Clock):
        self._repository = repository
        self._min_age = min_age
        self._clock = clock

    def create(self, payload: UserPayload) -> User:
        candidate = User(**payload.replacement_values())
        self._check(candidate, ValidationProfile.FULL)
        created = self._repository.create(candidate)
        logger.info("Created user {}", created.id)
        return created

    def get(self, user_id: int) -> User:
        user = self._repository.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_all(self) -> list[User]:
        return self._repository.list_all()

    def replace(self, user_id: int, payload: UserPayload) -> User:
        """Overwrite every mutable field of an existing user."""
        existing = self.get(user_id)
        merged = existing.model_copy(update=payload.replacement_values())
        self._check(merged, ValidationProfile.FULL)
        updated = self._repository.update(merged)
        logger.info("Replaced user {}", user_id)
        return updated

    def patch(self, user_id: int, payload: UserPayload) -> User:
        """Overwrite only the fields present in ``payload``."""
        existing = self.get(user_id)
        merged = existing.model_copy(update=payload.patch_values())
        self._check(merged, ValidationProfile.PARTIAL)
        updated = self._repository.update(merged)
        logger.info("Patched user {} fields {}", user_id, sorted(payload.patch_values()))
        return updated

    def delete(self, user_id: int) -> str:
        self.get(user_id)
        self._repository.delete(user_id)
        logger.info("Deleted user {}", user_id)
        return f"User with id {user_id} successfully deleted"

    def search_by_birth_date(self, start: date, end: date) -> list[User]:
        if start > end:
            raise IncorrectDateRangeError()
        return self._repository.find_by_birth_date_between(start, end)

    def _check(self, candidate: User, profile: ValidationProfile) -> None:
        today = self._clock.today()

        errors = validate(candidate, profile, today)
        if errors:
            logger.warning("Rejected user {}: {}", candidate.id, errors)
            raise UserValidationError(errors)

        if not check_adult(candidate.birth_date, self._min_age, today):
            logger.warning("Rejected user {}: younger than {}", candidate.id, self._min_age)
            raise UserNotAdultError()
