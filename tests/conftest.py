"""
Shared fixtures for the Northwind Employees test suite.

Integration fixtures use an in-memory SQLite database created through the
real ``SQLAlchemyConnectionFactory``; fault-path fixtures use MagicMock
connections.
"""

import pytest
from datetime import datetime
from unittest.mock import MagicMock

from northwind.database.connection import SQLAlchemyConnectionFactory
from northwind.database.schema import create_all_tables
from northwind.models.employee import Employee
from northwind.services.employee_service import EmployeeService

MEMORY_URL = "sqlite:///:memory:"


@pytest.fixture
def factory():
    """Connection factory with its own engine cache."""
    factory = SQLAlchemyConnectionFactory()
    yield factory
    factory.dispose()


@pytest.fixture
def service(factory):
    """EmployeeService over a fresh in-memory Employees table."""
    create_all_tables(factory.get_engine(MEMORY_URL))
    return EmployeeService(factory, MEMORY_URL)


@pytest.fixture
def nancy():
    """Employee record without an assigned id."""
    return Employee(
        id=0,
        first_name="Nancy",
        last_name="Davolio",
        title="Sales Representative",
        title_of_courtesy="Ms.",
        birth_date=datetime(1948, 12, 8),
        hire_date=datetime(1992, 5, 1),
        address="507 - 20th Ave. E. Apt. 2A",
        city="Seattle",
        region="WA",
        postal_code="98122",
        country="USA",
        home_phone="(206) 555-9857",
        extension="5467",
        notes="Education includes a BA in psychology.",
        reports_to=None,
        photo_path="http://accweb/emmployees/davolio.bmp",
    )


@pytest.fixture
def mock_connection():
    """MagicMock connection usable as a context manager."""
    connection = MagicMock()
    connection.__enter__.return_value = connection
    connection.__exit__.return_value = False
    return connection


@pytest.fixture
def mock_factory(mock_connection):
    """Factory handing out ``mock_connection``."""
    factory = MagicMock()
    factory.connect.return_value = mock_connection
    return factory


@pytest.fixture
def mock_service(mock_factory):
    """EmployeeService wired to the mock factory."""
    return EmployeeService(mock_factory, "sqlite:///mock.db")
