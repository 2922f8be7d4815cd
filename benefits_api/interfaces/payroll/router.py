"""
FastAPI routers for the payroll bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from benefits_api.application.payroll.add_or_update_employee import (
    AddOrUpdateEmployeeUseCase,
)
from benefits_api.application.payroll.dtos import (
    AddOrUpdateEmployeeCommand,
    DependentResult,
    EmployeeResult,
    GetDependentQuery,
    GetEmployeeQuery,
    GetPaycheckQuery,
)
from benefits_api.application.payroll.get_dependent import GetDependentUseCase
from benefits_api.application.payroll.get_employee import GetEmployeeUseCase
from benefits_api.application.payroll.get_paycheck import GetPaycheckUseCase
from benefits_api.application.payroll.list_dependents import ListDependentsUseCase
from benefits_api.application.payroll.list_employees import ListEmployeesUseCase
from benefits_api.domain.payroll.entities import Dependent, Employee
from benefits_api.interfaces.payroll.dependencies import (
    get_add_or_update_employee_use_case,
    get_dependent_use_case,
    get_employee_use_case,
    get_list_dependents_use_case,
    get_list_employees_use_case,
    get_paycheck_use_case,
)
from benefits_api.interfaces.payroll.schemas import (
    AddOrUpdateEmployeeItem,
    AddOrUpdateEmployeeRequest,
    ApiResponse,
    DependentItem,
    EmployeeItem,
    ErrorResponse,
    PayCheckItem,
)

employees_router = APIRouter(prefix="/employees", tags=["employees"])
dependents_router = APIRouter(prefix="/dependents", tags=["dependents"])

NOT_FOUND = {404: {"model": ErrorResponse}}
UNAVAILABLE = {503: {"model": ErrorResponse}}


def _dependent_item(result: DependentResult) -> DependentItem:
    return DependentItem(
        id=result.id,
        first_name=result.first_name,
        last_name=result.last_name,
        date_of_birth=result.date_of_birth,
        relationship=result.relationship,
    )


def _employee_item(result: EmployeeResult) -> EmployeeItem:
    return EmployeeItem(
        id=result.id,
        first_name=result.first_name,
        last_name=result.last_name,
        salary=result.salary,
        date_of_birth=result.date_of_birth,
        dependents=[_dependent_item(d) for d in result.dependents],
    )


def _to_employee(request: AddOrUpdateEmployeeRequest) -> Employee:
    return Employee(
        id=request.id,
        first_name=request.first_name,
        last_name=request.last_name,
        salary=request.salary,
        date_of_birth=request.date_of_birth,
        dependents=tuple(
            Dependent(
                id=d.id,
                first_name=d.first_name,
                last_name=d.last_name,
                date_of_birth=d.date_of_birth,
                relationship=d.relationship,
            )
            for d in request.dependents
        ),
    )


# ------------------------------------------------------------------
# Employees
# ------------------------------------------------------------------


@employees_router.get(
    "",
    response_model=ApiResponse[list[EmployeeItem]],
    responses=UNAVAILABLE,
    summary="Get all employees",
)
def list_employees(
    use_case: ListEmployeesUseCase = Depends(get_list_employees_use_case),
) -> ApiResponse[list[EmployeeItem]]:
    results = use_case.execute()
    return ApiResponse[list[EmployeeItem]](data=[_employee_item(r) for r in results])


@employees_router.get(
    "/{employee_id}",
    response_model=ApiResponse[EmployeeItem],
    responses={**NOT_FOUND, **UNAVAILABLE},
    summary="Get employee by id",
)
def get_employee(
    employee_id: int,
    use_case: GetEmployeeUseCase = Depends(get_employee_use_case),
) -> ApiResponse[EmployeeItem]:
    result = use_case.execute(GetEmployeeQuery(employee_id=employee_id))
    return ApiResponse[EmployeeItem](data=_employee_item(result))


@employees_router.get(
    "/{employee_id}/paycheck",
    response_model=ApiResponse[PayCheckItem],
    responses={**NOT_FOUND, **UNAVAILABLE},
    summary="Get employee paycheck",
    description=(
        "Gross pay, benefit deductions and net pay for one of 26 pay periods. "
        "Dependent ages are taken as of `asOf` (default: today)."
    ),
)
def get_paycheck(
    employee_id: int,
    as_of: date | None = Query(default=None, alias="asOf"),
    use_case: GetPaycheckUseCase = Depends(get_paycheck_use_case),
) -> ApiResponse[PayCheckItem]:
    """Compute the paycheck for one employee."""
    result = use_case.execute(GetPaycheckQuery(employee_id=employee_id, as_of=as_of))
    return ApiResponse[PayCheckItem](
        data=PayCheckItem(
            employee_id=result.employee_id,
            gross_pay=result.gross_pay,
            deductions=result.deductions,
            net_pay=result.net_pay,
        )
    )


@employees_router.post(
    "",
    response_model=ApiResponse[AddOrUpdateEmployeeItem],
    responses={400: {"model": ErrorResponse}, **UNAVAILABLE},
    summary="Add or update an employee",
    description="Creates the employee, or replaces the whole record if the id exists.",
)
def add_or_update_employee(
    request: AddOrUpdateEmployeeRequest,
    use_case: AddOrUpdateEmployeeUseCase = Depends(get_add_or_update_employee_use_case),
) -> ApiResponse[AddOrUpdateEmployeeItem]:
    """Write a complete employee record."""
    result = use_case.execute(AddOrUpdateEmployeeCommand(employee=_to_employee(request)))
    return ApiResponse[AddOrUpdateEmployeeItem](
        data=AddOrUpdateEmployeeItem(employee_id=result.employee_id, created=result.created),
        message="Employee added or updated successfully.",
    )


# ------------------------------------------------------------------
# Dependents
# ------------------------------------------------------------------


@dependents_router.get(
    "",
    response_model=ApiResponse[list[DependentItem]],
    responses=UNAVAILABLE,
    summary="Get all dependents",
)
def list_dependents(
    use_case: ListDependentsUseCase = Depends(get_list_dependents_use_case),
) -> ApiResponse[list[DependentItem]]:
    results = use_case.execute()
    return ApiResponse[list[DependentItem]](data=[_dependent_item(r) for r in results])


@dependents_router.get(
    "/{dependent_id}",
    response_model=ApiResponse[DependentItem],
    responses={**NOT_FOUND, **UNAVAILABLE},
    summary="Get dependent by id",
)
def get_dependent(
    dependent_id: int,
    use_case: GetDependentUseCase = Depends(get_dependent_use_case),
) -> ApiResponse[DependentItem]:
    result = use_case.execute(GetDependentQuery(dependent_id=dependent_id))
    return ApiResponse[DependentItem](data=_dependent_item(result))
