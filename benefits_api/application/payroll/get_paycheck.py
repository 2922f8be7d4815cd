"""
Use case: Compute the paycheck for an employee.

Input: GetPaycheckQuery (employee_id, optional as_of date)
Output: PayCheckResult
Side effects: None.
Failure cases: EmployeeNotFoundError, DataSourceUnavailableError.
"""

import logging

from benefits_api.application.payroll.dtos import GetPaycheckQuery, PayCheckResult
from benefits_api.application.payroll.lookup import find_employee
from benefits_api.domain.payroll.errors import EmployeeNotFoundError
from benefits_api.domain.payroll.paycheck_calculator import PaycheckCalculator
from benefits_api.domain.payroll.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class GetPaycheckUseCase:
    """Orchestrates paycheck calculation.

    Looks the employee up in the repository and delegates the
    arithmetic to the PaycheckCalculator domain service. The
    calculator is never invoked for an unknown employee.
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        calculator: PaycheckCalculator,
    ) -> None:
        self._employee_repo = employee_repo
        self._calculator = calculator

    def execute(self, query: GetPaycheckQuery) -> PayCheckResult:
        """Run the paycheck use case.

        Args:
            query: The employee ID and optional reference date.

        Returns:
            Gross pay, deductions and net pay for one pay period.

        Raises:
            EmployeeNotFoundError: If no employee has the requested ID.
        """
        logger.info("Computing paycheck for employee id=%d", query.employee_id)

        employee = find_employee(self._employee_repo.load_all(), query.employee_id)
        if employee is None:
            raise EmployeeNotFoundError(query.employee_id)

        paycheck = self._calculator.compute_paycheck(employee, as_of=query.as_of)
        return PayCheckResult.from_entity(paycheck)
