"""Per-member balances folded from a ledger of expense entries."""

import logging
from collections.abc import Mapping, Sequence
from functools import reduce

from ..models import Balance, ExpenseEntry
from .splitter import split_evenly

logger = logging.getLogger(__name__)


def entry_payers(entry: ExpenseEntry) -> list[str]:
    """
    Members who advanced the money for an entry.

    Entries recorded before multi-payer support only carry ``paid_by``; they
    are treated as paid in full by that member. Skipping this fallback would
    leave such entries crediting nobody, so balances would no longer sum to 0.
    """
    if entry.payer_ids:
        return list(entry.payer_ids)
    if entry.paid_by:
        return [entry.paid_by]
    return []


def entry_beneficiaries(
    entry: ExpenseEntry, fallback_member_ids: Sequence[str]
) -> list[str]:
    """Members who consumed an entry, defaulting to everyone settling up."""
    if entry.beneficiary_ids:
        return list(entry.beneficiary_ids)
    return list(fallback_member_ids)


def resolve_settlement_member_ids(
    member_ids: Sequence[str], entries: Sequence[ExpenseEntry]
) -> list[str]:
    """
    Pick the members whose balances should be reported.

    Uses household membership when it is known, otherwise the payers seen in
    the ledger (in order of first appearance).
    """
    if member_ids:
        return list(dict.fromkeys(member_ids))
    return list(
        dict.fromkeys(payer for entry in entries for payer in entry_payers(entry))
    )


def _apply_entry(
    totals: Mapping[str, float], entry: ExpenseEntry, member_ids: Sequence[str]
) -> dict[str, float]:
    """Return new running totals with one entry applied."""
    paid_shares = split_evenly(entry.amount, entry_payers(entry))
    consumed_shares = split_evenly(
        entry.amount, entry_beneficiaries(entry, member_ids)
    )
    return {
        member_id: totals[member_id]
        + (paid_shares.get(member_id, 0.0) - consumed_shares.get(member_id, 0.0))
        for member_id in member_ids
    }


def calculate_balances(
    entries: Sequence[ExpenseEntry], settlement_member_ids: Sequence[str]
) -> list[Balance]:
    """
    Compute each settlement member's net balance over a ledger.

    Members outside ``settlement_member_ids`` still shift the shares of the
    members inside it, but get no balance of their own.

    Args:
        entries: Ledger snapshot (already windowed by the caller)
        settlement_member_ids: Members to report, in tie-break order

    Returns:
        Balances sorted descending by value; equal values keep the order of
        ``settlement_member_ids``
    """
    member_ids = list(dict.fromkeys(settlement_member_ids))
    if not member_ids:
        return []

    initial = {member_id: 0.0 for member_id in member_ids}
    totals = reduce(
        lambda running, entry: _apply_entry(running, entry, member_ids),
        entries,
        initial,
    )

    logger.debug(
        f"Computed balances for {len(member_ids)} members over {len(entries)} entries"
    )

    balances = [Balance(member_id=m, value=totals[m]) for m in member_ids]
    return sorted(balances, key=lambda balance: balance.value, reverse=True)


def balance_for_member(
    entries: Sequence[ExpenseEntry],
    settlement_member_ids: Sequence[str],
    member_id: str,
) -> float:
    """Balance of a single member, 0 when they are not being settled."""
    for balance in calculate_balances(entries, settlement_member_ids):
        if balance.member_id == member_id:
            return balance.value
    return 0.0
