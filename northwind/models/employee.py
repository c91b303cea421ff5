"""
Employee Pydantic model for the Northwind data-access layer.

One instance mirrors one row of the ``Employees`` table. Every field except
``id`` is optional, and ``None`` is kept as ``None`` in both directions.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class Employee(BaseModel):
    """
    Employee record with personal, contact and reporting details.

    ``id`` is the primary key; it must be non-negative and cannot be
    reassigned once the record exists. ``reports_to`` holds the id of
    another employee without any referential check.
    """
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: int = Field(..., ge=0, frozen=True, description="EmployeeID primary key")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    title: Optional[str] = Field(None, description="Job title")
    title_of_courtesy: Optional[str] = Field(None, description="Courtesy title (e.g., 'Ms.')")
    birth_date: Optional[datetime] = None
    hire_date: Optional[datetime] = None
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    home_phone: Optional[str] = None
    extension: Optional[str] = Field(None, description="Internal phone extension")
    notes: Optional[str] = None
    reports_to: Optional[int] = Field(None, description="EmployeeID of the manager")
    photo_path: Optional[str] = None

    def with_id(self, employee_id: int) -> "Employee":
        """Return a copy of this record carrying another primary key."""
        data = self.model_dump()
        data["id"] = employee_id
        return Employee(**data)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
