"""
SQLAlchemy Core description of the Northwind ``Employees`` table.

The table is owned by the surrounding application; ``EmployeeService`` only
reads and writes it. ``create_all_tables`` and ``drop_all_tables`` exist for
local development and the test suite.
"""

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, Text
from sqlalchemy.engine import Engine

metadata = MetaData()

employees_table = Table(
    "Employees",
    metadata,
    Column("EmployeeID", Integer, primary_key=True, autoincrement=True),
    Column("LastName", String(20), nullable=True),
    Column("FirstName", String(10), nullable=True),
    Column("Title", String(30), nullable=True),
    Column("TitleOfCourtesy", String(25), nullable=True),
    Column("BirthDate", DateTime, nullable=True),
    Column("HireDate", DateTime, nullable=True),
    Column("Address", String(60), nullable=True),
    Column("City", String(15), nullable=True),
    Column("Region", String(15), nullable=True),
    Column("PostalCode", String(10), nullable=True),
    Column("Country", String(15), nullable=True),
    Column("HomePhone", String(24), nullable=True),
    Column("Extension", String(4), nullable=True),
    Column("Notes", Text, nullable=True),
    Column("ReportsTo", Integer, nullable=True),  # weak reference, no FK
    Column("PhotoPath", String(255), nullable=True),
)


def create_all_tables(engine: Engine) -> None:
    """Create the Employees table if it does not exist."""
    metadata.create_all(engine)


def drop_all_tables(engine: Engine) -> None:
    """Drop the Employees table."""
    metadata.drop_all(engine)
