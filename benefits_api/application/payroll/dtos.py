"""
Data Transfer Objects for the payroll application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior beyond mapping from entities.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from benefits_api.domain.payroll.entities import Dependent, Employee, PayCheck


@dataclass(frozen=True)
class GetEmployeeQuery:
    """Input DTO for retrieving one employee.

    Attributes:
        employee_id: Identifier of the employee.
    """

    employee_id: int


@dataclass(frozen=True)
class GetPaycheckQuery:
    """Input DTO for computing an employee's paycheck.

    Attributes:
        employee_id: Identifier of the employee.
        as_of: Date used to derive dependent ages. Defaults to today.
    """

    employee_id: int
    as_of: date | None = None


@dataclass(frozen=True)
class GetDependentQuery:
    """Input DTO for retrieving one dependent.

    Attributes:
        dependent_id: Identifier of the dependent.
    """

    dependent_id: int


@dataclass(frozen=True)
class AddOrUpdateEmployeeCommand:
    """Input DTO for creating or replacing an employee record.

    Attributes:
        employee: The complete record, dependents included.
    """

    employee: Employee


@dataclass(frozen=True)
class AddOrUpdateResult:
    """Output DTO for an add-or-update write.

    Attributes:
        employee_id: Identifier of the written employee.
        created: True if the record was new, False if it replaced one.
    """

    employee_id: int
    created: bool


@dataclass(frozen=True)
class DependentResult:
    """Output DTO for a dependent."""

    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    relationship: str

    @classmethod
    def from_entity(cls, dependent: Dependent) -> "DependentResult":
        return cls(
            id=dependent.id,
            first_name=dependent.first_name,
            last_name=dependent.last_name,
            date_of_birth=dependent.date_of_birth,
            relationship=dependent.relationship.value,
        )


@dataclass(frozen=True)
class EmployeeResult:
    """Output DTO for an employee and its dependents."""

    id: int
    first_name: str
    last_name: str
    salary: Decimal
    date_of_birth: date
    dependents: list[DependentResult]

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResult":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            salary=employee.salary,
            date_of_birth=employee.date_of_birth,
            dependents=[DependentResult.from_entity(d) for d in employee.dependents],
        )


@dataclass(frozen=True)
class PayCheckResult:
    """Output DTO for a computed paycheck.

    Attributes:
        employee_id: Identifier of the employee.
        gross_pay: Salary for one pay period.
        deductions: Benefit cost for one pay period.
        net_pay: Gross pay minus deductions.
    """

    employee_id: int
    gross_pay: Decimal
    deductions: Decimal
    net_pay: Decimal

    @classmethod
    def from_entity(cls, paycheck: PayCheck) -> "PayCheckResult":
        return cls(
            employee_id=paycheck.employee_id,
            gross_pay=paycheck.gross_pay,
            deductions=paycheck.deductions,
            net_pay=paycheck.net_pay,
        )
