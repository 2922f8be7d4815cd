"""
Use case: Add a new employee or replace an existing one.

Input: AddOrUpdateEmployeeCommand (full employee record)
Output: AddOrUpdateResult
Side effects: Rewrites the whole employee store.
Failure cases: IneligibleDependentsError, DataSourceUnavailableError.
"""

import logging

from benefits_api.application.payroll.dtos import (
    AddOrUpdateEmployeeCommand,
    AddOrUpdateResult,
)
from benefits_api.domain.payroll.eligibility import validate_for_write
from benefits_api.domain.payroll.errors import IneligibleDependentsError
from benefits_api.domain.payroll.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class AddOrUpdateEmployeeUseCase:
    """Orchestrates writing a complete employee record.

    Validates the dependent eligibility rule first, then loads the
    full store, replaces or appends the record, and saves it back.
    The load-modify-save cycle is not guarded against concurrent
    writers.
    """

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self._employee_repo = employee_repo

    def execute(self, command: AddOrUpdateEmployeeCommand) -> AddOrUpdateResult:
        """Run the add-or-update use case.

        Args:
            command: The record to write. Replaces any existing record
                with the same ID, dependents included.

        Returns:
            The written employee ID and whether it was newly created.

        Raises:
            IneligibleDependentsError: If the record has both a spouse
                and a domestic partner.
        """
        employee = command.employee

        verdict = validate_for_write(employee)
        if not verdict.ok:
            logger.warning("Rejected write for employee id=%d: %s", employee.id, verdict.reason)
            raise IneligibleDependentsError(employee.id, verdict.reason)

        employees = self._employee_repo.load_all()
        index = next(
            (i for i, existing in enumerate(employees) if existing.id == employee.id),
            None,
        )
        if index is None:
            employees.append(employee)
        else:
            employees[index] = employee

        self._employee_repo.save_all(employees)

        created = index is None
        logger.info(
            "%s employee id=%d with %d dependents",
            "Added" if created else "Updated",
            employee.id,
            len(employee.dependents),
        )
        return AddOrUpdateResult(employee_id=employee.id, created=created)
