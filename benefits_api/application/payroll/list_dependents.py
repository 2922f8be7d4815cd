"""
Use case: List dependents across all employees.

Input: None
Output: list[DependentResult]
Side effects: None (read-only query).
Failure cases: DataSourceUnavailableError.
"""

import logging

from benefits_api.application.payroll.dtos import DependentResult
from benefits_api.application.payroll.lookup import all_dependents
from benefits_api.domain.payroll.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class ListDependentsUseCase:
    """Orchestrates listing every dependent of every employee."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self._employee_repo = employee_repo

    def execute(self) -> list[DependentResult]:
        dependents = all_dependents(self._employee_repo.load_all())
        logger.info("Listing %d dependents", len(dependents))
        return [DependentResult.from_entity(d) for d in dependents]
