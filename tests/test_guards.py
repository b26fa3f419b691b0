"""Tests for membership guards."""

import pytest

from household_settle.exceptions import GuardViolationError, HouseholdSettleError
from household_settle.membership.guards import (
    check_can_demote_owner,
    check_can_dissolve_household,
    check_can_leave_as_owner,
    check_can_leave_with_balance,
    check_can_remove_owner,
)
from household_settle.models import GuardResult, GuardViolation, MemberRole


class TestLeaveWithBalance:
    """A member may only leave with a (nearly) zero balance."""

    @pytest.mark.parametrize("balance", [0, 0.002, -0.002, 0.004, -0.004])
    def test_within_tolerance_passes(self, balance):
        assert check_can_leave_with_balance(balance).ok

    @pytest.mark.parametrize("balance", [0.01, -0.01, 25, -300])
    def test_outstanding_balance_fails(self, balance):
        result = check_can_leave_with_balance(balance)

        assert not result.ok
        assert result.violation == GuardViolation.BALANCE_NOT_ZERO

    def test_custom_tolerance(self):
        assert check_can_leave_with_balance(0.5, tolerance=1.0).ok


class TestOwnerGuards:
    """At least one owner must always remain."""

    def test_last_owner_cannot_leave(self):
        result = check_can_leave_as_owner(MemberRole.OWNER, owner_count=1)

        assert result.violation == GuardViolation.LAST_OWNER_CANNOT_LEAVE

    def test_owner_can_leave_when_another_remains(self):
        assert check_can_leave_as_owner(MemberRole.OWNER, owner_count=2).ok

    def test_regular_member_can_always_leave(self):
        assert check_can_leave_as_owner(MemberRole.MEMBER, owner_count=1).ok

    def test_last_owner_cannot_be_removed(self):
        result = check_can_remove_owner(MemberRole.OWNER, owner_count=1)

        assert result.violation == GuardViolation.LAST_OWNER_CANNOT_BE_REMOVED

    def test_owner_can_be_removed_when_another_remains(self):
        assert check_can_remove_owner(MemberRole.OWNER, owner_count=2).ok

    def test_last_owner_cannot_be_demoted(self):
        result = check_can_demote_owner(MemberRole.OWNER, owner_count=1)

        assert result.violation == GuardViolation.OWNER_MUST_REMAIN

    def test_owner_can_be_demoted_when_another_remains(self):
        assert check_can_demote_owner(MemberRole.OWNER, owner_count=2).ok

    def test_plain_string_roles_accepted(self):
        """Roles straight from storage are plain strings."""
        assert not check_can_remove_owner("owner", owner_count=0).ok
        assert check_can_remove_owner("member", owner_count=0).ok


class TestDissolveHousehold:
    """Only the last remaining owner may dissolve a household."""

    def test_non_owner_rejected(self):
        result = check_can_dissolve_household(MemberRole.MEMBER, member_count=1)

        assert result.violation == GuardViolation.DISSOLVE_OWNER_ONLY

    def test_owner_with_other_members_rejected(self):
        result = check_can_dissolve_household(MemberRole.OWNER, member_count=2)

        assert result.violation == GuardViolation.DISSOLVE_NOT_LAST_MEMBER

    def test_last_owner_may_dissolve(self):
        assert check_can_dissolve_household(MemberRole.OWNER, member_count=1).ok


class TestGuardResult:
    """Test the success/failure value returned by guards."""

    def test_passed_has_no_message(self):
        result = GuardResult.passed()

        assert result.ok
        assert result.message is None
        result.raise_for_violation()

    def test_failed_carries_message(self):
        result = GuardResult.failed(GuardViolation.OWNER_MUST_REMAIN)

        assert result.message == "At least one owner must remain in the household."

    def test_raise_for_violation(self):
        result = check_can_leave_with_balance(0.01)

        with pytest.raises(GuardViolationError, match="balance is settled") as exc_info:
            result.raise_for_violation()

        assert exc_info.value.violation == GuardViolation.BALANCE_NOT_ZERO
        assert isinstance(exc_info.value, HouseholdSettleError)

    def test_violation_kinds_are_distinct(self):
        values = {violation.value for violation in GuardViolation}

        assert values == {
            "balance-not-zero",
            "last-owner-cannot-leave",
            "last-owner-cannot-be-removed",
            "owner-must-remain",
            "owner-only",
            "not-last-member",
        }
        assert all(violation.message for violation in GuardViolation)
