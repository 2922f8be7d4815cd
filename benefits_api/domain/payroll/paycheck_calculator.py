"""
Domain service: per-paycheck benefit deductions.

Pure business logic for turning an employee record into one pay
period's gross pay, deductions and net pay.
No framework imports. No IO. No side effects.

Annual benefit cost:
    - Base cost per employee per month
    - Cost per dependent per month, plus a surcharge for dependents over 50
    - A percentage of salary for employees earning over the threshold

Costs and salary are spread evenly over the pay periods. Amounts are
rounded to cents only at the end, each from its own unrounded value.
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from benefits_api.domain.payroll.entities import Dependent, Employee, PayCheck

CENT = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class BenefitCostPolicy:
    """Fixed cost policy applied by the calculator."""

    base_monthly_cost: Decimal = Decimal("1000.00")
    dependent_monthly_cost: Decimal = Decimal("600.00")
    high_salary_threshold: Decimal = Decimal("80000.00")
    high_salary_surcharge_rate: Decimal = Decimal("0.02")
    pay_periods_per_year: int = 26
    months_per_year: int = 12
    senior_dependent_age: int = 50
    senior_dependent_monthly_surcharge: Decimal = Decimal("200.00")


DEFAULT_POLICY = BenefitCostPolicy()


class PaycheckCalculator:
    """Domain service computing paychecks under a fixed cost policy.

    Stateless apart from the immutable policy, so one instance can be
    shared across concurrent requests.
    """

    def __init__(self, policy: BenefitCostPolicy = DEFAULT_POLICY) -> None:
        self._policy = policy

    @property
    def policy(self) -> BenefitCostPolicy:
        return self._policy

    def dependent_annual_cost(
        self, dependent: Dependent, as_of: Optional[date] = None
    ) -> Decimal:
        """Return the yearly cost of covering one dependent."""
        p = self._policy
        cost = p.dependent_monthly_cost * p.months_per_year
        if dependent.age(as_of) > p.senior_dependent_age:
            cost += p.senior_dependent_monthly_surcharge * p.months_per_year
        return cost

    def annual_benefit_cost(
        self, employee: Employee, as_of: Optional[date] = None
    ) -> Decimal:
        """Return the unrounded total yearly benefit cost for an employee.

        Args:
            employee: The employee, dependents populated.
            as_of: Date used to derive dependent ages. Defaults to today.

        Returns:
            Base cost + dependent costs + high-salary surcharge.
        """
        p = self._policy
        base_annual_cost = p.base_monthly_cost * p.months_per_year
        dependent_annual_cost = sum(
            (self.dependent_annual_cost(d, as_of) for d in employee.dependents),
            ZERO,
        )
        salary_surcharge = ZERO
        if employee.salary > p.high_salary_threshold:
            salary_surcharge = employee.salary * p.high_salary_surcharge_rate
        return base_annual_cost + dependent_annual_cost + salary_surcharge

    def compute_paycheck(
        self, employee: Employee, as_of: Optional[date] = None
    ) -> PayCheck:
        """Compute one pay period's gross pay, deductions and net pay.

        Args:
            employee: The employee, dependents populated.
            as_of: Date used to derive dependent ages. Defaults to today.

        Returns:
            A PayCheck with each amount rounded half away from zero to cents.
        """
        periods = self._policy.pay_periods_per_year
        gross_pay = employee.salary / periods
        deductions = self.annual_benefit_cost(employee, as_of) / periods
        # net comes from the unrounded figures, then is rounded on its own
        net_pay = gross_pay - deductions

        return PayCheck(
            employee_id=employee.id,
            gross_pay=_to_cents(gross_pay),
            deductions=_to_cents(deductions),
            net_pay=_to_cents(net_pay),
        )


def _to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


_default_calculator = PaycheckCalculator()


def compute_paycheck(employee: Employee, as_of: Optional[date] = None) -> PayCheck:
    """Compute a paycheck under the default cost policy."""
    return _default_calculator.compute_paycheck(employee, as_of)
