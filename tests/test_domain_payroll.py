"""
Tests for the payroll domain layer.

Tests entities, the eligibility rule and error classes in isolation.
No external dependencies or IO required.
"""

from datetime import date

import pytest

from benefits_api.domain.payroll.eligibility import (
    PARTNER_RULE_MESSAGE,
    is_eligible,
    validate_for_write,
)
from benefits_api.domain.payroll.entities import Relationship, age_on
from benefits_api.domain.payroll.errors import (
    DataSourceUnavailableError,
    EmployeeNotFoundError,
    IneligibleDependentsError,
    PayrollDomainError,
)


class TestAge:
    """Tests for age derivation from a date of birth."""

    def test_birthday_already_passed(self) -> None:
        assert age_on(date(1984, 1, 10), date(2024, 6, 15)) == 40

    def test_birthday_not_yet_reached(self) -> None:
        """One year less when the birthday is still ahead this year."""
        assert age_on(date(1984, 12, 30), date(2024, 6, 15)) == 39

    def test_birthday_today(self) -> None:
        assert age_on(date(1974, 6, 15), date(2024, 6, 15)) == 50

    def test_leap_day_birthday(self) -> None:
        """A 29 February birthday counts from 1 March in common years."""
        assert age_on(date(2000, 2, 29), date(2023, 2, 28)) == 22
        assert age_on(date(2000, 2, 29), date(2023, 3, 1)) == 23

    def test_entity_age_uses_reference_date(self, make_dependent) -> None:
        dependent = make_dependent(date_of_birth=date(2015, 3, 3))
        assert dependent.age(date(2024, 6, 15)) == 9

    def test_defaults_to_today(self, make_employee) -> None:
        today = date.today()
        employee = make_employee(date_of_birth=date(today.year - 30, 1, 1))
        assert employee.age() == 30


class TestEligibility:
    """Tests for the one-spouse-or-domestic-partner rule."""

    def test_no_dependents_is_eligible(self, make_employee) -> None:
        assert is_eligible(make_employee()) is True

    def test_single_spouse_is_eligible(self, make_employee, make_dependent) -> None:
        employee = make_employee(dependents=(make_dependent(1, Relationship.SPOUSE),))
        assert is_eligible(employee) is True

    def test_single_domestic_partner_is_eligible(self, make_employee, make_dependent) -> None:
        employee = make_employee(
            dependents=(make_dependent(1, Relationship.DOMESTIC_PARTNER),)
        )
        assert is_eligible(employee) is True

    def test_many_children_and_others_are_eligible(self, make_employee, make_dependent) -> None:
        employee = make_employee(
            dependents=(
                make_dependent(1, Relationship.SPOUSE),
                make_dependent(2, Relationship.CHILD),
                make_dependent(3, Relationship.CHILD),
                make_dependent(4, Relationship.OTHER),
                make_dependent(5, Relationship.OTHER),
            )
        )
        assert is_eligible(employee) is True

    def test_spouse_and_domestic_partner_is_rejected(self, make_employee, make_dependent) -> None:
        employee = make_employee(
            dependents=(
                make_dependent(1, Relationship.SPOUSE),
                make_dependent(2, Relationship.CHILD),
                make_dependent(3, Relationship.DOMESTIC_PARTNER),
            )
        )
        assert is_eligible(employee) is False

    @pytest.mark.parametrize(
        "relationships, expected_ok",
        [
            ((), True),
            ((Relationship.SPOUSE, Relationship.SPOUSE), True),
            ((Relationship.DOMESTIC_PARTNER, Relationship.CHILD), True),
            ((Relationship.SPOUSE, Relationship.DOMESTIC_PARTNER), False),
            ((Relationship.DOMESTIC_PARTNER, Relationship.OTHER, Relationship.SPOUSE), False),
        ],
    )
    def test_validate_for_write(
        self, make_employee, make_dependent, relationships, expected_ok
    ) -> None:
        """validate_for_write rejects exactly when a spouse and a partner coexist."""
        dependents = tuple(make_dependent(i, r) for i, r in enumerate(relationships))
        result = validate_for_write(make_employee(dependents=dependents))
        assert result.ok is expected_ok
        assert result.reason == (None if expected_ok else PARTNER_RULE_MESSAGE)


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_employee_not_found_error_message(self) -> None:
        err = EmployeeNotFoundError(42)
        assert "42" in err.message
        assert err.employee_id == 42

    def test_ineligible_dependents_carries_reason(self) -> None:
        err = IneligibleDependentsError(7, PARTNER_RULE_MESSAGE)
        assert str(err) == PARTNER_RULE_MESSAGE
        assert err.employee_id == 7

    def test_all_errors_share_base(self) -> None:
        err = DataSourceUnavailableError("data/employees.json", "file does not exist")
        assert isinstance(err, PayrollDomainError)
        assert "file does not exist" in err.message
