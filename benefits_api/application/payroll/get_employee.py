"""
Use case: Retrieve one employee by ID.

Input: GetEmployeeQuery (employee_id)
Output: EmployeeResult
Side effects: None (read-only query).
Failure cases: EmployeeNotFoundError, DataSourceUnavailableError.
"""

import logging

from benefits_api.application.payroll.dtos import EmployeeResult, GetEmployeeQuery
from benefits_api.application.payroll.lookup import find_employee
from benefits_api.domain.payroll.errors import EmployeeNotFoundError
from benefits_api.domain.payroll.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class GetEmployeeUseCase:
    """Orchestrates fetching a single employee record."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self._employee_repo = employee_repo

    def execute(self, query: GetEmployeeQuery) -> EmployeeResult:
        """Run the get employee use case.

        Raises:
            EmployeeNotFoundError: If no employee has the requested ID.
        """
        logger.info("Retrieving employee id=%d", query.employee_id)

        employee = find_employee(self._employee_repo.load_all(), query.employee_id)
        if employee is None:
            raise EmployeeNotFoundError(query.employee_id)

        return EmployeeResult.from_entity(employee)
