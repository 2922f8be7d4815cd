"""
Port interfaces (ABCs) for the payroll bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from benefits_api.domain.payroll.entities import Employee


class EmployeeRepository(ABC):
    """Port for loading and saving the full set of employee records.

    The store is read and written as a whole collection. Callers doing
    load-modify-save are exposed to lost updates if two writers overlap;
    writes must be serialized externally when that matters.
    """

    @abstractmethod
    def load_all(self) -> list[Employee]:
        """Return every employee record in store order.

        Raises:
            DataSourceUnavailableError: If the store is missing or unreadable.
        """
        raise NotImplementedError

    @abstractmethod
    def save_all(self, employees: list[Employee]) -> None:
        """Overwrite the store with the given collection.

        Implementations keep the previous state as a recovery point
        before overwriting.

        Raises:
            DataSourceUnavailableError: If the store cannot be written.
        """
        raise NotImplementedError
