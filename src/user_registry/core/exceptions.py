"""Errors raised by the users service.

Each error carries the HTTP status it maps to; the API layer renders them
as ``{"message": ...}`` bodies.
"""


class UserServiceError(Exception):
    """Base class for failures detected while handling a users request."""

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserValidationError(UserServiceError):
    """One or more fields violate their constraints."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class UserNotAdultError(UserServiceError):
    """The user's birth date does not satisfy the configured minimum age."""

    def __init__(self, message: str = "User is not Adult"):
        super().__init__(message)


class UserNotFoundError(UserServiceError):
    status_code = 404

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class IncorrectDateRangeError(UserServiceError):
    """Search range whose lower bound is after its upper bound."""

    def __init__(
        self, message: str = "Parameter FROM cannot be higher then parameter TO"
    ):
        super().__init__(message)
