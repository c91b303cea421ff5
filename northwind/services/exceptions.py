"""Exceptions raised by the Employees record store."""


class EmployeeServiceError(Exception):
    """Base exception for employee data-access failures."""
    pass


class InvalidArgumentError(EmployeeServiceError, ValueError):
    """Raised when the store is constructed with unusable inputs."""
    pass


class NotFoundError(EmployeeServiceError, LookupError):
    """Raised when no employee row matches the requested id."""
    pass


class OperationFailedError(EmployeeServiceError):
    """Raised when a write fails at the database or changes no row."""
    pass
