"""
Custom exceptions for the application.
Centralized error handling: the service layer raises domain errors only,
the HTTP layer maps them to status codes.
"""


class EmployeeError(Exception):
    """Base class for domain-level employee errors."""

    pass


class DuplicateEmailError(EmployeeError):
    """Raised when creating an employee whose email is already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Employee already exists with email: {email}")


class EmployeeNotFoundError(EmployeeError):
    """Raised when no employee matches the email being updated or deleted."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Employee not found with email: {email}")


class ValidationError(ValueError):
    """Raised when a request payload is malformed or misses required fields."""

    pass


class ConstraintViolationError(Exception):
    """
    Storage-level uniqueness violation.
    Raised by the repository when the database rejects a write, so callers
    never depend on SQLAlchemy exception types.
    """

    def __init__(self, message: str, email: str | None = None) -> None:
        self.email = email
        super().__init__(message)
