"""
Database package for the Northwind Employees data-access layer.

Connection factories, the ``Employees`` table description, and environment
driven configuration.
"""

from .config import (
    DatabaseConfigurationError,
    build_database_url,
    detect_database_type,
    engine_options,
    is_memory_database,
    mask_url,
)
from .connection import ConnectionFactory, SQLAlchemyConnectionFactory
from .schema import metadata, employees_table, create_all_tables, drop_all_tables

__all__ = [
    "DatabaseConfigurationError",
    "build_database_url",
    "detect_database_type",
    "engine_options",
    "is_memory_database",
    "mask_url",
    "ConnectionFactory",
    "SQLAlchemyConnectionFactory",
    "metadata",
    "employees_table",
    "create_all_tables",
    "drop_all_tables",
]
