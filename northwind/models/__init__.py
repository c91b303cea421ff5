"""
Pydantic models for the Northwind data-access layer.
"""

from .employee import Employee

__all__ = [
    "Employee",
]
