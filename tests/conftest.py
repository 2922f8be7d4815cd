"""
Shared test configuration.

Rate limiting is switched off before the application is imported so
the API tests can issue any number of requests.
"""

import os
from datetime import date
from decimal import Decimal

import pytest

os.environ.setdefault("BENEFITS_RATE_LIMIT_ENABLED", "false")

from benefits_api.domain.payroll.entities import Dependent, Employee, Relationship  # noqa: E402

AS_OF = date(2024, 6, 15)


@pytest.fixture
def as_of() -> date:
    """Fixed reference date for age-dependent calculations."""
    return AS_OF


@pytest.fixture
def make_employee():
    """Factory for Employee entities with sensible defaults."""

    def _make(
        employee_id: int = 1,
        salary: str = "50000",
        dependents: tuple[Dependent, ...] = (),
        date_of_birth: date = date(1984, 12, 30),
    ) -> Employee:
        return Employee(
            id=employee_id,
            first_name="LeBron",
            last_name="James",
            salary=Decimal(salary),
            date_of_birth=date_of_birth,
            dependents=dependents,
        )

    return _make


@pytest.fixture
def make_dependent():
    """Factory for Dependent entities with sensible defaults."""

    def _make(
        dependent_id: int = 1,
        relationship: Relationship = Relationship.CHILD,
        date_of_birth: date = date(2015, 3, 3),
    ) -> Dependent:
        return Dependent(
            id=dependent_id,
            first_name="Alice",
            last_name="Morant",
            date_of_birth=date_of_birth,
            relationship=relationship,
        )

    return _make
