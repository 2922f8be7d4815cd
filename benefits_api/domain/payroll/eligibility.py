"""
Domain service: dependent eligibility rule.

An employee may cover at most one partner: a spouse or a domestic
partner, never both. Checked only when a record is written.
No framework imports. No IO. No side effects.
"""

from dataclasses import dataclass
from typing import Optional

from benefits_api.domain.payroll.entities import Employee, Relationship

PARTNER_RULE_MESSAGE = (
    "An employee may only have one spouse or domestic partner, not both."
)


@dataclass(frozen=True)
class EligibilityResult:
    """Outcome of validating an employee record before it is persisted."""

    ok: bool
    reason: Optional[str] = None

    @classmethod
    def accepted(cls) -> "EligibilityResult":
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: str) -> "EligibilityResult":
        return cls(ok=False, reason=reason)


def is_eligible(employee: Employee) -> bool:
    """Return False iff the dependents include both a spouse and a domestic partner."""
    relationships = {d.relationship for d in employee.dependents}
    has_spouse = Relationship.SPOUSE in relationships
    has_partner = Relationship.DOMESTIC_PARTNER in relationships
    return not (has_spouse and has_partner)


def validate_for_write(employee: Employee) -> EligibilityResult:
    """Validate an employee record for create/update.

    Args:
        employee: The full record, dependents populated.

    Returns:
        An accepted result, or a rejected one naming the violated rule.
    """
    if is_eligible(employee):
        return EligibilityResult.accepted()
    return EligibilityResult.rejected(PARTNER_RULE_MESSAGE)
