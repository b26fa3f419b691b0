"""Service layer that composes the finance engine for one household.

The engine functions stay pure; this module decides which entries and members
they are run over (audit window, membership fallback) and logs the outcome.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from ..exceptions import MemberNotFoundError
from ..membership.guards import (
    check_can_demote_owner,
    check_can_dissolve_household,
    check_can_leave_as_owner,
    check_can_leave_with_balance,
    check_can_remove_owner,
)
from ..models import (
    Balance,
    ExpenseEntry,
    GuardResult,
    HouseholdMember,
    HouseholdSnapshot,
    ReimbursementShare,
    SettlementTransfer,
)
from .balances import (
    balance_for_member,
    calculate_balances,
    resolve_settlement_member_ids,
)
from .planner import SettlementPlanner, plan_settlement_transfers
from .preview import calculate_reimbursement_preview

logger = logging.getLogger(__name__)


def entries_since_audit(
    entries: Sequence[ExpenseEntry], last_cash_audit_at: datetime | None
) -> list[ExpenseEntry]:
    """
    Entries that count toward the current settlement period.

    An audit settles everything recorded up to and including its calendar
    day, so only entries dated strictly after that day are kept.
    """
    if last_cash_audit_at is None:
        return list(entries)
    audit_day = last_cash_audit_at.date()
    return [entry for entry in entries if entry.entry_day > audit_day]


class HouseholdFinanceService:
    """Balances, transfers and membership checks for a household snapshot."""

    def __init__(
        self,
        snapshot: HouseholdSnapshot,
        planner: SettlementPlanner | None = None,
    ):
        """Initialize the service for a snapshot."""
        self.snapshot = snapshot
        self.planner = planner

    def current_entries(self, include_all: bool = False) -> list[ExpenseEntry]:
        """Entries of the current period, or the whole ledger."""
        if include_all:
            return list(self.snapshot.entries)
        return entries_since_audit(
            self.snapshot.entries, self.snapshot.last_cash_audit_at
        )

    def settlement_member_ids(self, include_all: bool = False) -> list[str]:
        """Members to settle: the household, else the payers in the ledger."""
        member_ids = [member.user_id for member in self.snapshot.members]
        resolved = resolve_settlement_member_ids(
            member_ids, self.current_entries(include_all)
        )
        if not member_ids:
            logger.info(
                f"No membership data for household {self.snapshot.household_id}, "
                f"settling {len(resolved)} payers found in the ledger"
            )
        return resolved

    def balances(self, include_all: bool = False) -> list[Balance]:
        """Balance of every settlement member."""
        entries = self.current_entries(include_all)
        balances = calculate_balances(entries, self.settlement_member_ids(include_all))
        logger.info(
            f"Computed {len(balances)} balances from {len(entries)} entries "
            f"(household {self.snapshot.household_id})"
        )
        return balances

    def settlement_transfers(self, include_all: bool = False) -> list[SettlementTransfer]:
        """Transfers that would settle the current balances."""
        transfers = plan_settlement_transfers(
            self.balances(include_all), planner=self.planner
        )
        logger.info(f"Planned {len(transfers)} settlement transfers")
        return transfers

    def preview(
        self, amount: float, payer_ids: Sequence[str], beneficiary_ids: Sequence[str]
    ) -> list[ReimbursementShare]:
        """Reimbursement preview for a draft entry; the ledger is not touched."""
        return calculate_reimbursement_preview(amount, payer_ids, beneficiary_ids)

    def _require_member(self, member_id: str) -> HouseholdMember:
        member = self.snapshot.get_member(member_id)
        if member is None:
            raise MemberNotFoundError(member_id, self.snapshot.household_id)
        return member

    def check_can_leave(self, member_id: str) -> GuardResult:
        """
        Check whether a member may leave the household.

        The balance is computed over the entries since the last cash audit
        only. An unsettled balance is reported before the last-owner rule.

        Raises:
            MemberNotFoundError: If the member is not part of the household
        """
        member = self._require_member(member_id)

        balance = balance_for_member(
            self.current_entries(), self.settlement_member_ids(), member_id
        )
        result = check_can_leave_with_balance(balance)
        if result.ok:
            result = check_can_leave_as_owner(member.role, self.snapshot.owner_count)

        if not result.ok:
            logger.warning(
                f"Member {member_id} cannot leave household "
                f"{self.snapshot.household_id}: {result.violation.value}"
            )
        return result

    def check_can_remove(self, target_id: str) -> GuardResult:
        """Check whether a member may be removed by someone else."""
        target = self._require_member(target_id)
        return check_can_remove_owner(target.role, self.snapshot.owner_count)

    def check_can_demote(self, target_id: str) -> GuardResult:
        """Check whether a member may lose the owner role."""
        target = self._require_member(target_id)
        return check_can_demote_owner(target.role, self.snapshot.owner_count)

    def check_can_dissolve(self, actor_id: str) -> GuardResult:
        """Check whether a member may dissolve the household."""
        actor = self._require_member(actor_id)
        return check_can_dissolve_household(actor.role, len(self.snapshot.members))
