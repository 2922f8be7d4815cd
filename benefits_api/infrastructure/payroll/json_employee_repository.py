"""
Adapter: JSON file employee repository.

Implements EmployeeRepository port.
Responsible for reading and overwriting the flat JSON employee store.

The file holds a JSON array of employee records with camelCase keys:

    [{"id": 1, "firstName": "...", "lastName": "...", "salary": "75420.99",
      "dateOfBirth": "1984-12-30",
      "dependents": [{"id": 1, "firstName": "...", "lastName": "...",
                      "dateOfBirth": "1998-03-03", "relationship": "Spouse"}]}]

Salaries are written as decimal strings so they read back exactly; plain
JSON numbers are accepted on read.

Before each overwrite the current file is copied to
``<stem>_<YYYYmmddHHMMSS>.json`` as a recovery point. The new content is
written to a temporary file beside the store and swapped in with
``os.replace``, so a failed write leaves the store as it was.
"""

import logging
import os
import shutil
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from benefits_api.domain.payroll.entities import Dependent, Employee, Relationship
from benefits_api.domain.payroll.errors import DataSourceUnavailableError
from benefits_api.domain.payroll.ports import EmployeeRepository

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class _StoredRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredDependent(_StoredRecord):
    """On-disk shape of a dependent."""

    id: int
    first_name: str = ""
    last_name: str = ""
    date_of_birth: date
    relationship: Relationship

    def to_entity(self) -> Dependent:
        return Dependent(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            relationship=self.relationship,
        )

    @classmethod
    def from_entity(cls, dependent: Dependent) -> "StoredDependent":
        return cls(
            id=dependent.id,
            first_name=dependent.first_name,
            last_name=dependent.last_name,
            date_of_birth=dependent.date_of_birth,
            relationship=dependent.relationship,
        )


class StoredEmployee(_StoredRecord):
    """On-disk shape of an employee."""

    id: int
    first_name: str = ""
    last_name: str = ""
    salary: Decimal = Field(ge=0)
    date_of_birth: date
    dependents: list[StoredDependent] = Field(default_factory=list)

    def to_entity(self) -> Employee:
        return Employee(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            salary=self.salary,
            date_of_birth=self.date_of_birth,
            dependents=tuple(d.to_entity() for d in self.dependents),
        )

    @classmethod
    def from_entity(cls, employee: Employee) -> "StoredEmployee":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            salary=employee.salary,
            date_of_birth=employee.date_of_birth,
            dependents=[StoredDependent.from_entity(d) for d in employee.dependents],
        )


_store_adapter = TypeAdapter(list[StoredEmployee])


class JsonEmployeeRepository(EmployeeRepository):
    """Concrete adapter persisting employees to a single JSON file.

    Every call reads or rewrites the whole file. There is no locking:
    two overlapping load-modify-save cycles lose one of the writes.
    """

    def __init__(
        self,
        path: Path | str,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON employee store.
            clock: Source of the timestamp used to name backup files.
        """
        self._path = Path(path)
        self._clock = clock

    def load_all(self) -> list[Employee]:
        """Read and validate every employee record from the file.

        Returns:
            Employee entities in file order.

        Raises:
            DataSourceUnavailableError: If the file is missing, unreadable,
                or does not hold valid employee records.
        """
        if not self._path.exists():
            logger.error("Employee data file does not exist: %s", self._path)
            raise DataSourceUnavailableError(str(self._path), "file does not exist")

        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            logger.error("IO error reading employee data from %s: %s", self._path, exc)
            raise DataSourceUnavailableError(str(self._path), str(exc)) from exc

        try:
            records = _store_adapter.validate_json(raw)
        except ValidationError as exc:
            logger.error(
                "Invalid employee data in %s (%d errors)", self._path, exc.error_count()
            )
            raise DataSourceUnavailableError(str(self._path), "invalid employee data") from exc

        return [r.to_entity() for r in records]

    def save_all(self, employees: list[Employee]) -> None:
        """Back up the current file, then replace it with the full collection.

        Args:
            employees: Every employee record to persist.

        Raises:
            DataSourceUnavailableError: If the backup or write fails. The
                store keeps its previous content in that case.
        """
        records = [StoredEmployee.from_entity(e) for e in employees]
        payload = _store_adapter.dump_json(records, indent=2, by_alias=True)
        staging = self._path.with_name(f".{self._path.name}.tmp")

        try:
            if self._path.exists():
                backup = self.backup_path_for(self._clock())
                shutil.copy2(self._path, backup)
                logger.info("Backed up employee data to %s", backup.name)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            staging.write_bytes(payload)
            os.replace(staging, self._path)
        except OSError as exc:
            logger.error("IO error saving employees to %s: %s", self._path, exc)
            staging.unlink(missing_ok=True)
            raise DataSourceUnavailableError(str(self._path), str(exc)) from exc

        logger.info("Saved %d employees to %s", len(records), self._path)

    def backup_path_for(self, moment: datetime) -> Path:
        """Return the backup file path used for a save at ``moment``."""
        stamp = moment.strftime(BACKUP_TIMESTAMP_FORMAT)
        return self._path.with_name(f"{self._path.stem}_{stamp}.json")
