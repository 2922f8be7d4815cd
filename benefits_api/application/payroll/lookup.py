"""
Lookup helpers shared by the payroll use cases.

Return None when nothing matches; callers decide which not-found
error to raise.
"""

from typing import Iterable, Optional

from benefits_api.domain.payroll.entities import Dependent, Employee


def find_employee(employees: Iterable[Employee], employee_id: int) -> Optional[Employee]:
    """Return the first employee with the given ID, or None."""
    return next((e for e in employees if e.id == employee_id), None)


def all_dependents(employees: Iterable[Employee]) -> list[Dependent]:
    """Flatten every employee's dependents, in store order."""
    return [d for e in employees for d in e.dependents]


def find_dependent(employees: Iterable[Employee], dependent_id: int) -> Optional[Dependent]:
    """Return the first dependent with the given ID across all employees, or None."""
    return next((d for d in all_dependents(employees) if d.id == dependent_id), None)
