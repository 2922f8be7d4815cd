"""
Use case: List all employees.

Input: None
Output: list[EmployeeResult]
Side effects: None (read-only query).
Failure cases: DataSourceUnavailableError.
"""

import logging

from benefits_api.application.payroll.dtos import EmployeeResult
from benefits_api.domain.payroll.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class ListEmployeesUseCase:
    """Orchestrates listing every employee record in store order."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self._employee_repo = employee_repo

    def execute(self) -> list[EmployeeResult]:
        employees = self._employee_repo.load_all()
        logger.info("Listing %d employees", len(employees))
        return [EmployeeResult.from_entity(e) for e in employees]
