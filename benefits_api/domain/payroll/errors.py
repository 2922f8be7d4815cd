"""
Domain-specific errors for the payroll bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class PayrollDomainError(Exception):
    """Base error for all payroll domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class IneligibleDependentsError(PayrollDomainError):
    """Raised when an employee write violates the dependent eligibility rule."""

    def __init__(self, employee_id: int, reason: str) -> None:
        super().__init__(reason)
        self.employee_id = employee_id
        self.reason = reason


class EmployeeNotFoundError(PayrollDomainError):
    """Raised when no employee exists with the requested ID."""

    def __init__(self, employee_id: int) -> None:
        super().__init__(f"Employee not found: {employee_id}")
        self.employee_id = employee_id


class DependentNotFoundError(PayrollDomainError):
    """Raised when no dependent exists with the requested ID."""

    def __init__(self, dependent_id: int) -> None:
        super().__init__(f"Dependent not found: {dependent_id}")
        self.dependent_id = dependent_id


class DataSourceUnavailableError(PayrollDomainError):
    """Raised when the employee store is missing, unreadable or unwritable."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Employee data source unavailable ({source}): {reason}")
        self.source = source
        self.reason = reason
