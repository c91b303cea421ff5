"""
Employees record store.

``EmployeeService`` turns list/get/add/update/remove calls into single
parameterized statements against the ``Employees`` table. Each call opens its
own connection through the injected ``ConnectionFactory`` and releases it
before returning, so one instance can be shared between threads.

Error policy:
- reads (``list_employees``, ``get_employee``) let driver errors propagate;
  a missing id raises ``NotFoundError``
- writes translate driver errors into ``OperationFailedError`` with the
  original exception chained as ``__cause__``; an update that matches no
  row raises ``OperationFailedError`` too
"""

import logging
from typing import Any, Dict, List, Mapping, Tuple

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from ..database.config import mask_url
from ..database.connection import ConnectionFactory
from ..database.schema import employees_table
from ..models.employee import Employee
from .exceptions import InvalidArgumentError, NotFoundError, OperationFailedError

logger = logging.getLogger(__name__)

# Employee attribute -> Employees column
EMPLOYEE_COLUMNS: List[Tuple[str, str]] = [
    ("id", "EmployeeID"),
    ("first_name", "FirstName"),
    ("last_name", "LastName"),
    ("title", "Title"),
    ("title_of_courtesy", "TitleOfCourtesy"),
    ("birth_date", "BirthDate"),
    ("hire_date", "HireDate"),
    ("address", "Address"),
    ("city", "City"),
    ("region", "Region"),
    ("postal_code", "PostalCode"),
    ("country", "Country"),
    ("home_phone", "HomePhone"),
    ("extension", "Extension"),
    ("notes", "Notes"),
    ("reports_to", "ReportsTo"),
    ("photo_path", "PhotoPath"),
]

_KEY_COLUMN = "EmployeeID"


def _row_to_employee(row: Mapping[str, Any]) -> Employee:
    """Map one result row to an Employee; NULL columns become None."""
    return Employee(**{attr: row[column] for attr, column in EMPLOYEE_COLUMNS})


def _employee_to_params(employee: Employee, include_key: bool = True) -> Dict[str, Any]:
    """Bind every field under its column name; None binds as SQL NULL."""
    return {
        column: getattr(employee, attr)
        for attr, column in EMPLOYEE_COLUMNS
        if include_key or column != _KEY_COLUMN
    }


class EmployeeService:
    """Create, read, update and delete access to the Employees table."""

    def __init__(self, connection_factory: ConnectionFactory, connection_string: str):
        """
        Initialize the store. No connection is opened here.

        Args:
            connection_factory: Produces a new connection per call
            connection_string: Database URL handed to the factory

        Raises:
            InvalidArgumentError: If the factory is missing or the connection
                string is missing, not a string, empty or whitespace-only
        """
        if connection_factory is None:
            raise InvalidArgumentError("connection_factory is required")
        if not isinstance(connection_string, str) or not connection_string.strip():
            raise InvalidArgumentError("connection_string must not be empty")

        self._connection_factory = connection_factory
        self._connection_string = connection_string

    @property
    def connection_string(self) -> str:
        return self._connection_string

    def __repr__(self) -> str:
        return f"EmployeeService(connection_string='{mask_url(self._connection_string)}')"

    def _connect(self) -> Connection:
        return self._connection_factory.connect(self._connection_string)

    def list_employees(self) -> List[Employee]:
        """
        Retrieve every row of the Employees table.

        Returns:
            Employees in result-set order; an empty list for an empty table
        """
        query = select(employees_table)

        with self._connect() as conn:
            rows = conn.execute(query).mappings().all()

        logger.debug(f"Listed {len(rows)} employee(s)")
        return [_row_to_employee(row) for row in rows]

    def get_employee(self, employee_id: int) -> Employee:
        """
        Retrieve the employee with the given id.

        Args:
            employee_id: EmployeeID to look up

        Returns:
            The matching Employee

        Raises:
            NotFoundError: If no row has this id
        """
        query = select(employees_table).where(employees_table.c.EmployeeID == employee_id)

        with self._connect() as conn:
            row = conn.execute(query).mappings().first()

        if row is None:
            logger.debug(f"Employee {employee_id} not found")
            raise NotFoundError("Employee not found.")

        return _row_to_employee(row)

    def add_employee(self, employee: Employee) -> int:
        """
        Insert an employee. The id is assigned by the database and
        ``employee.id`` is ignored.

        Args:
            employee: Record holding the column values

        Returns:
            The EmployeeID assigned to the new row

        Raises:
            OperationFailedError: If the insert fails
        """
        statement = insert(employees_table)
        params = _employee_to_params(employee, include_key=False)

        try:
            with self._connect() as conn:
                result = conn.execute(statement, params)
                conn.commit()
                employee_id = result.inserted_primary_key[0]
        except SQLAlchemyError as e:
            logger.error(f"Inserting employee failed: {e}")
            raise OperationFailedError("Inserting an employee failed.") from e

        logger.info(f"Inserted employee {employee_id}")
        return employee_id

    def remove_employee(self, employee_id: int) -> None:
        """
        Delete the employee with the given id. Deleting an id that does not
        exist is not an error.

        Raises:
            OperationFailedError: If the delete fails
        """
        statement = delete(employees_table).where(employees_table.c.EmployeeID == employee_id)

        try:
            with self._connect() as conn:
                result = conn.execute(statement)
                conn.commit()
        except SQLAlchemyError as e:
            logger.error(f"Removing employee {employee_id} failed: {e}")
            raise OperationFailedError() from e

        logger.info(f"Removed employee {employee_id} ({result.rowcount} row(s))")

    def update_employee(self, employee: Employee) -> None:
        """
        Overwrite every column of the row matching ``employee.id``.

        Raises:
            OperationFailedError: If the update fails or no row has this id
        """
        statement = (
            update(employees_table)
            .where(employees_table.c.EmployeeID == employee.id)
            .values(**_employee_to_params(employee))
        )

        try:
            with self._connect() as conn:
                result = conn.execute(statement)
                conn.commit()
                rows_affected = result.rowcount
        except SQLAlchemyError as e:
            logger.error(f"Updating employee {employee.id} failed: {e}")
            raise OperationFailedError("Updating an employee failed.") from e

        if rows_affected == 0:
            logger.warning(f"Employee {employee.id} not updated: no matching row")
            raise OperationFailedError("Employees is not updated.")

        logger.info(f"Updated employee {employee.id}")
