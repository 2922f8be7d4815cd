"""
Use case: Retrieve one dependent by ID.

Input: GetDependentQuery (dependent_id)
Output: DependentResult
Side effects: None (read-only query).
Failure cases: DependentNotFoundError, DataSourceUnavailableError.
"""

import logging

from benefits_api.application.payroll.dtos import DependentResult, GetDependentQuery
from benefits_api.application.payroll.lookup import find_dependent
from benefits_api.domain.payroll.errors import DependentNotFoundError
from benefits_api.domain.payroll.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class GetDependentUseCase:
    """Orchestrates fetching a single dependent.

    Dependent IDs are only unique within one employee, so the first
    match in store order wins.
    """

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self._employee_repo = employee_repo

    def execute(self, query: GetDependentQuery) -> DependentResult:
        """Run the get dependent use case.

        Raises:
            DependentNotFoundError: If no dependent has the requested ID.
        """
        logger.info("Retrieving dependent id=%d", query.dependent_id)

        dependent = find_dependent(self._employee_repo.load_all(), query.dependent_id)
        if dependent is None:
            raise DependentNotFoundError(query.dependent_id)

        return DependentResult.from_entity(dependent)
