"""
Pydantic schemas for payroll API request/response validation.

These schemas enforce input validation and define the API contract.
Field names are camelCase on the wire; money is sent as JSON numbers.
No business logic belongs here.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

from benefits_api.domain.payroll.entities import Relationship

T = TypeVar("T")

NAME_MAX_LEN = 100

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base schema accepting and emitting camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[T]):
    """Envelope wrapping every successful response body."""

    data: Optional[T] = None
    success: bool = True
    message: str = ""


class DependentItem(CamelModel):
    """A dependent as sent and received over the API."""

    id: int = Field(..., ge=0)
    first_name: str = Field(default="", max_length=NAME_MAX_LEN)
    last_name: str = Field(default="", max_length=NAME_MAX_LEN)
    date_of_birth: date
    relationship: Relationship = Field(
        ..., description="One of Spouse, DomesticPartner, Child, Other"
    )


class EmployeeItem(CamelModel):
    """An employee, dependents included, as returned by the API."""

    id: int
    first_name: str
    last_name: str
    salary: Money
    date_of_birth: date
    dependents: list[DependentItem]


class AddOrUpdateEmployeeRequest(CamelModel):
    """Request schema for the add-or-update endpoint.

    The record replaces any existing employee with the same ID,
    dependents included.

    Attributes:
        id: Employee identifier.
        salary: Annual salary, never negative.
        dependents: Dependents with IDs unique within this employee.
    """

    id: int = Field(..., ge=0)
    first_name: str = Field(default="", max_length=NAME_MAX_LEN)
    last_name: str = Field(default="", max_length=NAME_MAX_LEN)
    salary: Decimal = Field(..., ge=0)
    date_of_birth: date
    dependents: list[DependentItem] = Field(default_factory=list)

    @model_validator(mode="after")
    def _dependent_ids_unique(self) -> "AddOrUpdateEmployeeRequest":
        ids = [d.id for d in self.dependents]
        if len(ids) != len(set(ids)):
            raise ValueError("dependent ids must be unique within an employee")
        return self


class AddOrUpdateEmployeeItem(CamelModel):
    """Outcome of an add-or-update write."""

    employee_id: int
    created: bool


class PayCheckItem(CamelModel):
    """One pay period's gross pay, deductions and net pay."""

    employee_id: int
    gross_pay: Money
    deductions: Money
    net_pay: Money


class HealthResponse(CamelModel):
    """Service status, version and employee store readiness."""

    status: str
    version: str
    employee_count: int | None = None


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
