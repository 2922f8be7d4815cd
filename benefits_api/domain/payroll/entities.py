"""
Domain entities for the payroll bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Relationship(Enum):
    """How a dependent is related to the employee."""

    SPOUSE = "Spouse"
    DOMESTIC_PARTNER = "DomesticPartner"
    CHILD = "Child"
    OTHER = "Other"


def age_on(date_of_birth: date, as_of: Optional[date] = None) -> int:
    """Return completed years between a birth date and ``as_of``.

    Calendar-year difference, minus one when the birthday has not
    yet occurred in the ``as_of`` year. ``as_of`` defaults to today.
    """
    as_of = as_of or date.today()
    age = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


@dataclass(frozen=True)
class Dependent:
    """A person covered under an employee's benefits."""

    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    relationship: Relationship

    def age(self, as_of: Optional[date] = None) -> int:
        return age_on(self.date_of_birth, as_of)


@dataclass(frozen=True)
class Employee:
    """An employee with an annual salary and zero or more dependents.

    Records are replaced wholesale on add-or-update, dependents included.
    """

    id: int
    first_name: str
    last_name: str
    salary: Decimal
    date_of_birth: date
    dependents: tuple[Dependent, ...] = field(default_factory=tuple)

    def age(self, as_of: Optional[date] = None) -> int:
        return age_on(self.date_of_birth, as_of)


@dataclass(frozen=True)
class PayCheck:
    """Gross pay, deductions and net pay for a single pay period.

    All amounts are quantized to two decimal places.
    """

    employee_id: int
    gross_pay: Decimal
    deductions: Decimal
    net_pay: Decimal
