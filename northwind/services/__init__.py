"""
Data-access services for the Northwind database.
"""

from .exceptions import (
    EmployeeServiceError,
    InvalidArgumentError,
    NotFoundError,
    OperationFailedError,
)
from .employee_service import EmployeeService, EMPLOYEE_COLUMNS

__all__ = [
    "EmployeeService",
    "EMPLOYEE_COLUMNS",
    "EmployeeServiceError",
    "InvalidArgumentError",
    "NotFoundError",
    "OperationFailedError",
]
