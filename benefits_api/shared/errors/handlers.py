"""
Centralized error handlers for FastAPI.

Maps payroll domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from benefits_api.domain.payroll.errors import (
    DataSourceUnavailableError,
    DependentNotFoundError,
    EmployeeNotFoundError,
    IneligibleDependentsError,
    PayrollDomainError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500
HTTP_503 = 503


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(IneligibleDependentsError)
    async def handle_ineligible_dependents(
        _request: Request, exc: IneligibleDependentsError
    ) -> JSONResponse:
        """Reject writes that break the one-partner rule."""
        logger.warning("Ineligible dependents for employee %d", exc.employee_id)
        return _error_response(HTTP_400, "Invalid dependents", exc.reason)

    @app.exception_handler(EmployeeNotFoundError)
    async def handle_employee_not_found(
        _request: Request, exc: EmployeeNotFoundError
    ) -> JSONResponse:
        logger.warning("Employee not found: %d", exc.employee_id)
        return _error_response(HTTP_404, "Employee not found")

    @app.exception_handler(DependentNotFoundError)
    async def handle_dependent_not_found(
        _request: Request, exc: DependentNotFoundError
    ) -> JSONResponse:
        logger.warning("Dependent not found: %d", exc.dependent_id)
        return _error_response(HTTP_404, "Dependent not found")

    @app.exception_handler(DataSourceUnavailableError)
    async def handle_data_source_unavailable(
        _request: Request, exc: DataSourceUnavailableError
    ) -> JSONResponse:
        """The employee store could not be read or written."""
        logger.error("Data source unavailable: %s", exc.reason)
        return _error_response(HTTP_503, "Employee data unavailable")

    @app.exception_handler(PayrollDomainError)
    async def handle_payroll_domain(
        _request: Request, exc: PayrollDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled payroll domain errors."""
        logger.error("Unhandled payroll domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
