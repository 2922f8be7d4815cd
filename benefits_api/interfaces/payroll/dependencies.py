"""
Dependency injection for the payroll bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
Tests replace ``get_employee_repository`` through
``app.dependency_overrides`` to swap the data source.
"""

from fastapi import Depends

from benefits_api.application.payroll.add_or_update_employee import (
    AddOrUpdateEmployeeUseCase,
)
from benefits_api.application.payroll.get_dependent import GetDependentUseCase
from benefits_api.application.payroll.get_employee import GetEmployeeUseCase
from benefits_api.application.payroll.get_paycheck import GetPaycheckUseCase
from benefits_api.application.payroll.list_dependents import ListDependentsUseCase
from benefits_api.application.payroll.list_employees import ListEmployeesUseCase
from benefits_api.core.config import settings
from benefits_api.domain.payroll.paycheck_calculator import PaycheckCalculator
from benefits_api.domain.payroll.ports import EmployeeRepository
from benefits_api.infrastructure.payroll.json_employee_repository import (
    JsonEmployeeRepository,
)

_calculator = PaycheckCalculator()


def get_employee_repository() -> EmployeeRepository:
    """Build the JSON file repository from application settings."""
    return JsonEmployeeRepository(settings.data_path)


def get_paycheck_calculator() -> PaycheckCalculator:
    """Return the shared, stateless paycheck calculator."""
    return _calculator


def get_employee_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> GetEmployeeUseCase:
    return GetEmployeeUseCase(employee_repo=repo)


def get_list_employees_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> ListEmployeesUseCase:
    return ListEmployeesUseCase(employee_repo=repo)


def get_add_or_update_employee_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> AddOrUpdateEmployeeUseCase:
    return AddOrUpdateEmployeeUseCase(employee_repo=repo)


def get_paycheck_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
    calculator: PaycheckCalculator = Depends(get_paycheck_calculator),
) -> GetPaycheckUseCase:
    """Build GetPaycheckUseCase with its repository and calculator."""
    return GetPaycheckUseCase(employee_repo=repo, calculator=calculator)


def get_dependent_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> GetDependentUseCase:
    return GetDependentUseCase(employee_repo=repo)


def get_list_dependents_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> ListDependentsUseCase:
    return ListDependentsUseCase(employee_repo=repo)
