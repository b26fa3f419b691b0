"""Pydantic domain models for household-settle."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import GuardViolationError

# ============================================================================
# Ledger Models
# ============================================================================


class ExpenseEntry(BaseModel):
    """A single recorded household expense.

    Entries are owned by the ledger storage; this package only reads snapshots
    of them.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    amount: float = Field(ge=0, allow_inf_nan=False)
    payer_ids: tuple[str, ...] = ()
    paid_by: str | None = None  # single payer, entries predating multi-payer
    beneficiary_ids: tuple[str, ...] = ()
    description: str = ""
    category: str = "general"
    entry_date: date | None = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def entry_day(self) -> date:
        """Calendar day the entry counts for (entry date, else creation day)."""
        if self.entry_date is not None:
            return self.entry_date
        return self.created_at.date()


class Balance(BaseModel):
    """A member's net position versus the group (positive = owed to them)."""

    model_config = ConfigDict(frozen=True)

    member_id: str
    value: float


class ReimbursementShare(BaseModel):
    """One row of a reimbursement preview for a draft entry."""

    model_config = ConfigDict(frozen=True)

    member_id: str
    value: float


class SettlementTransfer(BaseModel):
    """A recommended payment from a debtor to a creditor."""

    model_config = ConfigDict(frozen=True)

    from_member_id: str
    to_member_id: str
    amount: float = Field(gt=0)


# ============================================================================
# Household Models
# ============================================================================


class MemberRole(str, Enum):
    """Role of a member inside a household."""

    OWNER = "owner"
    MEMBER = "member"


class HouseholdMember(BaseModel):
    """A member of a household."""

    user_id: str
    role: MemberRole = MemberRole.MEMBER


class HouseholdSnapshot(BaseModel):
    """Everything the finance workflow needs about one household.

    Supplied by the storage layer (or a JSON export of it); the snapshot is
    read once per request and never written back.
    """

    household_id: str
    members: list[HouseholdMember] = Field(default_factory=list)
    entries: list[ExpenseEntry] = Field(default_factory=list)
    last_cash_audit_at: datetime | None = None

    def get_member(self, user_id: str) -> HouseholdMember | None:
        """Find a member by user id."""
        for member in self.members:
            if member.user_id == user_id:
                return member
        return None

    @property
    def owner_count(self) -> int:
        return sum(1 for member in self.members if member.role == MemberRole.OWNER)


# ============================================================================
# Guard Models
# ============================================================================

_VIOLATION_MESSAGES = {
    "balance-not-zero": "You can only leave the household once your balance is settled to 0.",
    "last-owner-cannot-leave": "You are the last owner. Promote another member to owner first.",
    "last-owner-cannot-be-removed": "The last owner cannot be removed.",
    "owner-must-remain": "At least one owner must remain in the household.",
    "owner-only": "Only owners can dissolve the household.",
    "not-last-member": "The household can only be dissolved by its last member.",
}


class GuardViolation(str, Enum):
    """Business rule violated by a membership change."""

    BALANCE_NOT_ZERO = "balance-not-zero"
    LAST_OWNER_CANNOT_LEAVE = "last-owner-cannot-leave"
    LAST_OWNER_CANNOT_BE_REMOVED = "last-owner-cannot-be-removed"
    OWNER_MUST_REMAIN = "owner-must-remain"
    DISSOLVE_OWNER_ONLY = "owner-only"
    DISSOLVE_NOT_LAST_MEMBER = "not-last-member"

    @property
    def message(self) -> str:
        """User-facing explanation of the violation."""
        return _VIOLATION_MESSAGES[self.value]


class GuardResult(BaseModel):
    """Outcome of a guard check: success, or exactly one violation."""

    model_config = ConfigDict(frozen=True)

    violation: GuardViolation | None = None

    @classmethod
    def passed(cls) -> "GuardResult":
        return cls()

    @classmethod
    def failed(cls, violation: GuardViolation) -> "GuardResult":
        return cls(violation=violation)

    @property
    def ok(self) -> bool:
        return self.violation is None

    @property
    def message(self) -> str | None:
        """Message to surface to the user, None when the check passed."""
        return self.violation.message if self.violation else None

    def raise_for_violation(self) -> None:
        """Raise GuardViolationError if the check failed."""
        if self.violation is not None:
            raise GuardViolationError(self.violation)
