"""Precondition checks for membership changes.

Each check returns a GuardResult instead of raising, so callers can show the
violation to the user or escalate it with ``raise_for_violation()``.
"""

from ..finance.money import TOLERANCE
from ..models import GuardResult, GuardViolation, MemberRole


def _is_owner(role: MemberRole | str) -> bool:
    return role == MemberRole.OWNER


def check_can_leave_with_balance(
    balance: float, tolerance: float = TOLERANCE
) -> GuardResult:
    """A member may only leave once their balance is settled to (nearly) zero."""
    if abs(balance) > tolerance:
        return GuardResult.failed(GuardViolation.BALANCE_NOT_ZERO)
    return GuardResult.passed()


def check_can_leave_as_owner(role: MemberRole | str, owner_count: int) -> GuardResult:
    """The last owner cannot leave."""
    if _is_owner(role) and owner_count <= 1:
        return GuardResult.failed(GuardViolation.LAST_OWNER_CANNOT_LEAVE)
    return GuardResult.passed()


def check_can_remove_owner(
    target_role: MemberRole | str, owner_count: int
) -> GuardResult:
    """The last owner cannot be removed by someone else."""
    if _is_owner(target_role) and owner_count <= 1:
        return GuardResult.failed(GuardViolation.LAST_OWNER_CANNOT_BE_REMOVED)
    return GuardResult.passed()


def check_can_demote_owner(
    target_role: MemberRole | str, owner_count: int
) -> GuardResult:
    """The last owner cannot be demoted to a regular member."""
    if _is_owner(target_role) and owner_count <= 1:
        return GuardResult.failed(GuardViolation.OWNER_MUST_REMAIN)
    return GuardResult.passed()


def check_can_dissolve_household(
    actor_role: MemberRole | str, member_count: int
) -> GuardResult:
    """Only an owner who is the last remaining member may dissolve a household."""
    if not _is_owner(actor_role):
        return GuardResult.failed(GuardViolation.DISSOLVE_OWNER_ONLY)
    if member_count != 1:
        return GuardResult.failed(GuardViolation.DISSOLVE_NOT_LAST_MEMBER)
    return GuardResult.passed()
