"""Custom exceptions for household-settle."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import GuardViolation


class HouseholdSettleError(Exception):
    """Base exception for all household-settle errors."""

    pass


class ConfigurationError(HouseholdSettleError):
    """Raised when configuration is invalid or missing."""

    pass


class SnapshotError(HouseholdSettleError):
    """Raised when a household snapshot cannot be read or parsed."""

    pass


class GuardViolationError(HouseholdSettleError):
    """Raised when a membership change breaks a household invariant."""

    def __init__(self, violation: "GuardViolation", message: str | None = None):
        self.violation = violation
        super().__init__(message or violation.message)


class MemberNotFoundError(HouseholdSettleError):
    """Raised when a member id is not part of the household."""

    def __init__(self, member_id: str, household_id: str):
        self.member_id = member_id
        self.household_id = household_id
        super().__init__(f"Member {member_id} is not part of household {household_id}")
