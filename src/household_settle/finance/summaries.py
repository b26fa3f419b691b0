"""Spending summaries shown next to the balances."""

from collections.abc import Sequence
from datetime import date, timedelta

from ..models import ExpenseEntry
from .balances import entry_payers
from .splitter import split_evenly


def total_amount(entries: Sequence[ExpenseEntry]) -> float:
    """Sum of all entry amounts."""
    return sum((entry.amount for entry in entries), 0.0)


def paid_totals_by_member(entries: Sequence[ExpenseEntry]) -> list[tuple[str, float]]:
    """How much each member has paid, largest first."""
    totals: dict[str, float] = {}
    for entry in entries:
        for member_id, share in split_evenly(entry.amount, entry_payers(entry)).items():
            totals[member_id] = totals.get(member_id, 0.0) + share
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def totals_by_category(entries: Sequence[ExpenseEntry]) -> dict[str, float]:
    """Spending per category, in order of first appearance."""
    totals: dict[str, float] = {}
    for entry in entries:
        totals[entry.category] = totals.get(entry.category, 0.0) + entry.amount
    return totals


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``."""
    return day - timedelta(days=day.weekday())


def weekly_paid_series(
    entries: Sequence[ExpenseEntry], member_ids: Sequence[str] = ()
) -> tuple[list[date], dict[str, list[float]]]:
    """
    Amount paid per member per week.

    Args:
        entries: Entries to chart
        member_ids: Members to include; defaults to every payer seen

    Returns:
        Tuple of (sorted week labels, one value list per member aligned with
        the labels)
    """
    by_week: dict[date, dict[str, float]] = {}
    for entry in entries:
        week = by_week.setdefault(week_start(entry.entry_day), {})
        for member_id, share in split_evenly(entry.amount, entry_payers(entry)).items():
            week[member_id] = week.get(member_id, 0.0) + share

    labels = sorted(by_week)
    series_ids = list(member_ids) or list(
        dict.fromkeys(payer for entry in entries for payer in entry_payers(entry))
    )
    datasets = {
        member_id: [by_week[label].get(member_id, 0.0) for label in labels]
        for member_id in series_ids
    }
    return labels, datasets


def filter_entries(
    entries: Sequence[ExpenseEntry],
    date_from: date | None = None,
    date_to: date | None = None,
    member_id: str | None = None,
    category: str | None = None,
    search: str = "",
) -> list[ExpenseEntry]:
    """
    Narrow the ledger down for browsing.

    Args:
        entries: Entries to filter
        date_from: Earliest entry day to keep (inclusive)
        date_to: Latest entry day to keep (inclusive)
        member_id: Keep entries this member paid for or benefits from
        category: Keep entries of this category only
        search: Case-insensitive text the description must contain

    Returns:
        Matching entries in their original order
    """
    needle = search.strip().lower()

    def matches(entry: ExpenseEntry) -> bool:
        involved = (*entry_payers(entry), *entry.beneficiary_ids)
        if member_id and member_id not in involved:
            return False
        if category and entry.category != category:
            return False
        if date_from and entry.entry_day < date_from:
            return False
        if date_to and entry.entry_day > date_to:
            return False
        if needle and needle not in entry.description.lower():
            return False
        return True

    return [entry for entry in entries if matches(entry)]
