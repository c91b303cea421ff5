"""
Northwind Employees command line.

Thin Typer front end over ``EmployeeService`` with rich output. The database
is taken from ``--database-url`` or from the environment (see
``northwind.database.config``).
"""

import logging
import os
from datetime import datetime
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .database.config import build_database_url, mask_url
from .database.connection import SQLAlchemyConnectionFactory
from .database.schema import create_all_tables
from .models.employee import Employee
from .services.employee_service import EmployeeService
from .services.exceptions import EmployeeServiceError

# Initialize typer app and rich console
app = typer.Typer(help="Manage rows of the Northwind Employees table")
console = Console()

_state = {"database_url": None, "factory": None}


def _get_service() -> EmployeeService:
    if _state["factory"] is None:
        _state["factory"] = SQLAlchemyConnectionFactory()
    database_url = _state["database_url"] or build_database_url()
    return EmployeeService(_state["factory"], database_url)


def _fail(message: str) -> None:
    console.print(f"[red]✗ {message}[/red]")
    raise typer.Exit(code=1)


def _format(value) -> str:
    if value is None:
        return "[dim]-[/dim]"
    if isinstance(value, datetime):
        return value.date().isoformat()
    return str(value)


@app.callback()
def main(
    database_url: Optional[str] = typer.Option(
        None,
        "--database-url",
        envvar="DATABASE_URL",
        help="SQLAlchemy database URL (defaults to DB_* environment variables)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging"
    ),
):
    """Northwind Employees data access."""
    level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    _state["database_url"] = database_url


@app.command("init-db")
def init_db():
    """Create the Employees table if it does not exist."""
    service = _get_service()
    engine = _state["factory"].get_engine(service.connection_string)
    create_all_tables(engine)
    console.print(f"[green]✓ Employees table ready in {mask_url(service.connection_string)}[/green]")


@app.command("list")
def list_employees():
    """Show every employee."""
    employees = _get_service().list_employees()

    if not employees:
        console.print("[yellow]No employees found[/yellow]")
        return

    table = Table(title="Employees", box=box.ROUNDED)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Title")
    table.add_column("City")
    table.add_column("Country")
    table.add_column("Reports To", justify="right")

    for employee in employees:
        table.add_row(
            str(employee.id),
            employee.full_name or _format(None),
            _format(employee.title),
            _format(employee.city),
            _format(employee.country),
            _format(employee.reports_to),
        )

    console.print(table)


@app.command("show")
def show_employee(employee_id: int = typer.Argument(..., help="EmployeeID")):
    """Show one employee."""
    try:
        employee = _get_service().get_employee(employee_id)
    except EmployeeServiceError as e:
        _fail(f"Employee {employee_id}: {e}")

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in employee.model_dump().items():
        table.add_row(name, _format(value))

    console.print(Panel(table, title=f"Employee {employee.id}", box=box.ROUNDED))


@app.command("add")
def add_employee(
    first_name: Optional[str] = typer.Option(None, "--first-name"),
    last_name: Optional[str] = typer.Option(None, "--last-name"),
    title: Optional[str] = typer.Option(None, "--title"),
    title_of_courtesy: Optional[str] = typer.Option(None, "--title-of-courtesy"),
    birth_date: Optional[datetime] = typer.Option(None, "--birth-date"),
    hire_date: Optional[datetime] = typer.Option(None, "--hire-date"),
    city: Optional[str] = typer.Option(None, "--city"),
    country: Optional[str] = typer.Option(None, "--country"),
    reports_to: Optional[int] = typer.Option(None, "--reports-to"),
):
    """Insert a new employee and print its id."""
    employee = Employee(
        id=0,
        first_name=first_name,
        last_name=last_name,
        title=title,
        title_of_courtesy=title_of_courtesy,
        birth_date=birth_date,
        hire_date=hire_date,
        city=city,
        country=country,
        reports_to=reports_to,
    )
    try:
        employee_id = _get_service().add_employee(employee)
    except EmployeeServiceError as e:
        _fail(str(e))

    console.print(f"[green]✓ Added employee {employee_id}[/green]")


@app.command("update")
def update_employee(
    employee_id: int = typer.Argument(..., help="EmployeeID"),
    first_name: Optional[str] = typer.Option(None, "--first-name"),
    last_name: Optional[str] = typer.Option(None, "--last-name"),
    title: Optional[str] = typer.Option(None, "--title"),
    city: Optional[str] = typer.Option(None, "--city"),
    country: Optional[str] = typer.Option(None, "--country"),
    reports_to: Optional[int] = typer.Option(None, "--reports-to"),
):
    """Change fields of an existing employee; omitted options keep their value."""
    service = _get_service()
    changes = {
        "first_name": first_name,
        "last_name": last_name,
        "title": title,
        "city": city,
        "country": country,
        "reports_to": reports_to,
    }
    try:
        current = service.get_employee(employee_id)
        updated = current.model_copy(update={k: v for k, v in changes.items() if v is not None})
        service.update_employee(updated)
    except EmployeeServiceError as e:
        _fail(f"Employee {employee_id}: {e}")

    console.print(f"[green]✓ Updated employee {employee_id}[/green]")


@app.command("remove")
def remove_employee(employee_id: int = typer.Argument(..., help="EmployeeID")):
    """Delete an employee. Unknown ids are ignored."""
    try:
        _get_service().remove_employee(employee_id)
    except EmployeeServiceError as e:
        _fail(f"Employee {employee_id}: {str(e) or 'remove failed'}")

    console.print(f"[green]✓ Removed employee {employee_id}[/green]")


if __name__ == "__main__":
    app()
