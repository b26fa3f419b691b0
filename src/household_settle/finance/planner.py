"""Debt simplification: turn balances into settlement transfers.

The default planner is a greedy largest-creditor/largest-debtor match. It
yields at most ``creditors + debtors - 1`` transfers and runs in O(n log n),
but it is not guaranteed to find the fewest possible transfers (that problem
is NP-hard in general). Alternative planners can be passed to
``plan_settlement_transfers`` as long as they implement ``SettlementPlanner``.
"""

import logging
import math
from collections.abc import Sequence
from typing import Protocol

from ..models import Balance, SettlementTransfer
from .money import TOLERANCE

logger = logging.getLogger(__name__)


class SettlementPlanner(Protocol):
    """Strategy that turns balances into transfers."""

    def plan(
        self, balances: Sequence[Balance], tolerance: float
    ) -> list[SettlementTransfer]: ...


class GreedySettlementPlanner:
    """Match the largest remaining creditor with the largest remaining debtor."""

    def plan(
        self, balances: Sequence[Balance], tolerance: float = TOLERANCE
    ) -> list[SettlementTransfer]:
        # Non-finite balances cannot be settled and would stall the merge
        settleable = [b for b in balances if math.isfinite(b.value)]

        # [member_id, remaining] pairs, largest magnitude first, ties in input order
        creditors = sorted(
            ([b.member_id, b.value] for b in settleable if b.value > tolerance),
            key=lambda pair: pair[1],
            reverse=True,
        )
        debtors = sorted(
            ([b.member_id, -b.value] for b in settleable if b.value < -tolerance),
            key=lambda pair: pair[1],
            reverse=True,
        )

        transfers: list[SettlementTransfer] = []
        creditor_idx = 0
        debtor_idx = 0

        while creditor_idx < len(creditors) and debtor_idx < len(debtors):
            creditor = creditors[creditor_idx]
            debtor = debtors[debtor_idx]
            amount = min(creditor[1], debtor[1])

            if amount > tolerance:
                transfers.append(
                    SettlementTransfer(
                        from_member_id=debtor[0],
                        to_member_id=creditor[0],
                        amount=amount,
                    )
                )

            creditor[1] -= amount
            debtor[1] -= amount

            if creditor[1] <= tolerance:
                creditor_idx += 1
            if debtor[1] <= tolerance:
                debtor_idx += 1

        logger.debug(
            f"Planned {len(transfers)} transfers for "
            f"{len(creditors)} creditors and {len(debtors)} debtors"
        )
        return transfers


def plan_settlement_transfers(
    balances: Sequence[Balance],
    tolerance: float = TOLERANCE,
    planner: SettlementPlanner | None = None,
) -> list[SettlementTransfer]:
    """
    Compute transfers that bring every balance back to zero.

    Args:
        balances: Member balances, ideally summing to zero
        tolerance: Amounts at or below this are treated as settled
        planner: Strategy to use (greedy by default)

    Returns:
        Transfers in the order the planner generated them
    """
    return (planner or GreedySettlementPlanner()).plan(balances, tolerance)
