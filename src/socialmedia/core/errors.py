"""Errors raised by the account and message rules.

Every error is recoverable; the HTTP layer decides how each one is
presented to the client.
"""

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "NotFoundError",
    "RulesError",
    "StorageError",
    "ValidationError",
]


class RulesError(Exception):
    """Base class for every error the rules layer raises."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(RulesError):
    """Input failed a field constraint (emptiness, length, format)."""


class AuthorizationError(RulesError):
    """The acting account may not perform the requested mutation."""


class AuthenticationError(RulesError):
    """Unknown username or wrong password. The two are indistinguishable."""

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(message)


class ConflictError(RulesError):
    """A uniqueness constraint would be violated."""


class NotFoundError(RulesError):
    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class StorageError(RulesError):
    """The persistence gateway failed. ``cause`` holds the original failure."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)
