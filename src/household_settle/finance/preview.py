"""Reimbursement preview for an entry that is still being drafted."""

import math
from collections.abc import Sequence

from ..models import ReimbursementShare
from .money import TOLERANCE
from .splitter import split_evenly


def calculate_reimbursement_preview(
    amount: float,
    payer_ids: Sequence[str],
    beneficiary_ids: Sequence[str],
    tolerance: float = TOLERANCE,
) -> list[ReimbursementShare]:
    """
    Show who would be out of pocket because of a single draft entry.

    This is not a balance snapshot: members whose net position for this entry
    is zero or negative are left out.

    Args:
        amount: Draft amount
        payer_ids: Members advancing the money
        beneficiary_ids: Members consuming it
        tolerance: Values at or below this are treated as zero

    Returns:
        Members owed money for this entry, largest first. Empty when the
        amount is negative or not finite, or either member list is empty.
    """
    if not math.isfinite(amount) or amount < 0 or not payer_ids or not beneficiary_ids:
        return []

    paid_shares = split_evenly(amount, payer_ids)
    consumed_shares = split_evenly(amount, beneficiary_ids)
    union_member_ids = dict.fromkeys([*payer_ids, *beneficiary_ids])

    shares = [
        ReimbursementShare(
            member_id=member_id,
            value=paid_shares.get(member_id, 0.0) - consumed_shares.get(member_id, 0.0),
        )
        for member_id in union_member_ids
    ]
    return sorted(
        (share for share in shares if share.value > tolerance),
        key=lambda share: share.value,
        reverse=True,
    )
