"""Household membership invariants."""

from .guards import (
    check_can_demote_owner,
    check_can_dissolve_household,
    check_can_leave_as_owner,
    check_can_leave_with_balance,
    check_can_remove_owner,
)

__all__ = [
    "check_can_demote_owner",
    "check_can_dissolve_household",
    "check_can_leave_as_owner",
    "check_can_leave_with_balance",
    "check_can_remove_owner",
]
