"""
Health check router.

Reports liveness plus whether the employee store can be read, so a
deployment can tell a running process from a usable one.
"""

import logging

from fastapi import APIRouter, Depends

from benefits_api.core.config import settings
from benefits_api.domain.payroll.errors import DataSourceUnavailableError
from benefits_api.domain.payroll.ports import EmployeeRepository
from benefits_api.interfaces.payroll.dependencies import get_employee_repository
from benefits_api.interfaces.payroll.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description=(
        "Always 200 while the process runs. `status` is `degraded` and "
        "`employeeCount` null when the employee store cannot be read."
    ),
)
def health_check(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> HealthResponse:
    """Report service version and employee store readiness."""
    try:
        count = len(repo.load_all())
    except DataSourceUnavailableError as exc:
        logger.warning("Health check: employee store unavailable (%s)", exc.reason)
        return HealthResponse(status="degraded", version=settings.version)
    return HealthResponse(status="ok", version=settings.version, employee_count=count)
