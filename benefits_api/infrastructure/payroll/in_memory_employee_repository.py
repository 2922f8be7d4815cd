"""
Adapter: In-memory employee repository.

Implements EmployeeRepository port without any IO.
Tests use it in place of the JSON file adapter, directly in use-case
tests or through ``app.dependency_overrides``, and inspect ``previous``
and ``save_count`` after writes.
"""

from typing import Iterable, Optional

from benefits_api.domain.payroll.entities import Employee
from benefits_api.domain.payroll.ports import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Keeps the employee collection in a list.

    ``previous`` holds the collection as it was before the last save,
    mirroring the file adapter's recovery point.
    """

    def __init__(self, employees: Optional[Iterable[Employee]] = None) -> None:
        self._employees: list[Employee] = list(employees or [])
        self.previous: Optional[list[Employee]] = None
        self.save_count = 0

    def load_all(self) -> list[Employee]:
        return list(self._employees)

    def save_all(self, employees: list[Employee]) -> None:
        self.previous = list(self._employees)
        self._employees = list(employees)
        self.save_count += 1
