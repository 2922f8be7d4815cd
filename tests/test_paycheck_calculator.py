"""
Tests for the paycheck calculator domain service.

Covers the worked scenarios, the strict thresholds for salary and
dependent age, rounding, and purity of the calculation.
"""

from dataclasses import FrozenInstanceError, replace
from datetime import date
from decimal import Decimal

import pytest

from benefits_api.domain.payroll.entities import Relationship
from benefits_api.domain.payroll.paycheck_calculator import (
    DEFAULT_POLICY,
    BenefitCostPolicy,
    PaycheckCalculator,
    compute_paycheck,
)

AS_OF = date(2024, 6, 15)


class TestWorkedScenarios:
    """Literal scenarios that pin the arithmetic order."""

    def test_salary_50000_no_dependents(self, make_employee) -> None:
        paycheck = compute_paycheck(make_employee(salary="50000"), AS_OF)
        assert paycheck.employee_id == 1
        assert paycheck.gross_pay == Decimal("1923.08")
        assert paycheck.deductions == Decimal("461.54")
        assert paycheck.net_pay == Decimal("1461.54")

    def test_salary_120000_with_senior_spouse(self, make_employee, make_dependent) -> None:
        """Net pay is rounded from its own unrounded value, not from the rounded parts."""
        spouse = make_dependent(1, Relationship.SPOUSE, date(1960, 1, 1))
        paycheck = compute_paycheck(
            make_employee(salary="120000", dependents=(spouse,)), AS_OF
        )
        assert paycheck.gross_pay == Decimal("4615.38")
        assert paycheck.deductions == Decimal("923.08")
        assert paycheck.net_pay == Decimal("3692.31")
        assert paycheck.gross_pay - paycheck.deductions == Decimal("3692.30")

    def test_salary_120000_with_young_spouse(self, make_employee, make_dependent) -> None:
        spouse = make_dependent(1, Relationship.SPOUSE, date(1990, 1, 1))
        paycheck = compute_paycheck(
            make_employee(salary="120000", dependents=(spouse,)), AS_OF
        )
        assert paycheck.gross_pay == Decimal("4615.38")
        assert paycheck.deductions == Decimal("830.77")
        assert paycheck.net_pay == Decimal("3784.62")

    def test_amounts_have_two_decimal_places(self, make_employee) -> None:
        paycheck = compute_paycheck(make_employee(salary="75420.99"), AS_OF)
        for amount in (paycheck.gross_pay, paycheck.deductions, paycheck.net_pay):
            assert amount.as_tuple().exponent == -2


class TestThresholds:
    """Boundary behavior of the strict greater-than thresholds."""

    def test_salary_at_threshold_has_no_surcharge(self, make_employee) -> None:
        paycheck = compute_paycheck(make_employee(salary="80000.00"), AS_OF)
        assert paycheck.deductions == Decimal("461.54")

    def test_salary_above_threshold_has_surcharge(self, make_employee) -> None:
        calculator = PaycheckCalculator()
        cost = calculator.annual_benefit_cost(make_employee(salary="80000.01"), AS_OF)
        assert cost == Decimal("12000") + Decimal("80000.01") * Decimal("0.02")

    def test_dependent_aged_exactly_50_has_no_surcharge(self, make_dependent) -> None:
        dependent = make_dependent(date_of_birth=date(1974, 6, 15))
        assert dependent.age(AS_OF) == 50
        assert PaycheckCalculator().dependent_annual_cost(dependent, AS_OF) == Decimal("7200")

    def test_dependent_aged_51_has_surcharge(self, make_dependent) -> None:
        dependent = make_dependent(date_of_birth=date(1973, 6, 15))
        assert dependent.age(AS_OF) == 51
        assert PaycheckCalculator().dependent_annual_cost(dependent, AS_OF) == Decimal("9600")

    def test_dependent_turns_51_tomorrow(self, make_dependent) -> None:
        dependent = make_dependent(date_of_birth=date(1973, 6, 16))
        assert PaycheckCalculator().dependent_annual_cost(dependent, AS_OF) == Decimal("7200")


class TestAnnualCost:
    """Tests for the annual benefit cost breakdown."""

    def test_no_dependents_is_base_cost(self, make_employee) -> None:
        cost = PaycheckCalculator().annual_benefit_cost(make_employee(salary="0"), AS_OF)
        assert cost == Decimal("12000")

    def test_mixed_dependents(self, make_employee, make_dependent) -> None:
        employee = make_employee(
            salary="100000",
            dependents=(
                make_dependent(1, Relationship.DOMESTIC_PARTNER, date(1965, 2, 1)),
                make_dependent(2, Relationship.CHILD, date(2010, 2, 1)),
                make_dependent(3, Relationship.OTHER, date(1950, 2, 1)),
            ),
        )
        # base 12000 + 9600 + 7200 + 9600 + 2% of 100000
        assert PaycheckCalculator().annual_benefit_cost(employee, AS_OF) == Decimal("40400")


class TestRounding:
    """Final rounding is half away from zero."""

    def test_half_cent_rounds_up(self, make_employee) -> None:
        paycheck = compute_paycheck(make_employee(salary="0.13"), AS_OF)
        assert paycheck.gross_pay == Decimal("0.01")

    def test_negative_net_pay_is_reported(self, make_employee) -> None:
        paycheck = compute_paycheck(make_employee(salary="0"), AS_OF)
        assert paycheck.gross_pay == Decimal("0.00")
        assert paycheck.net_pay == Decimal("-461.54")


class TestPolicy:
    """The cost policy is fixed per calculator instance."""

    def test_default_policy_values(self) -> None:
        assert DEFAULT_POLICY.pay_periods_per_year == 26
        assert DEFAULT_POLICY.high_salary_threshold == Decimal("80000.00")
        assert DEFAULT_POLICY.senior_dependent_age == 50

    def test_custom_policy_is_applied(self, make_employee) -> None:
        policy = replace(DEFAULT_POLICY, base_monthly_cost=Decimal("0"))
        calculator = PaycheckCalculator(policy=policy)
        paycheck = calculator.compute_paycheck(make_employee(salary="52000"), AS_OF)
        assert calculator.policy is policy
        assert paycheck.deductions == Decimal("0.00")
        assert paycheck.net_pay == Decimal("2000.00")

    def test_policy_is_frozen(self) -> None:
        policy = BenefitCostPolicy()
        with pytest.raises(FrozenInstanceError):
            policy.pay_periods_per_year = 24  # type: ignore[misc]


class TestPurity:
    """The calculation has no hidden state."""

    def test_same_input_same_output(self, make_employee, make_dependent) -> None:
        employee = make_employee(
            salary="92365.22",
            dependents=(make_dependent(1, Relationship.SPOUSE, date(1998, 3, 3)),),
        )
        calculator = PaycheckCalculator()
        assert calculator.compute_paycheck(employee, AS_OF) == calculator.compute_paycheck(
            employee, AS_OF
        )
