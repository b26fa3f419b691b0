"""Expense settlement engine: shares, balances, previews and transfers."""

from .money import TOLERANCE, format_money, to_minor_units
from .splitter import split_evenly
from .balances import (
    balance_for_member,
    calculate_balances,
    entry_beneficiaries,
    entry_payers,
    resolve_settlement_member_ids,
)
from .preview import calculate_reimbursement_preview
from .planner import (
    GreedySettlementPlanner,
    SettlementPlanner,
    plan_settlement_transfers,
)

__all__ = [
    "TOLERANCE",
    "format_money",
    "to_minor_units",
    "split_evenly",
    "balance_for_member",
    "calculate_balances",
    "entry_beneficiaries",
    "entry_payers",
    "resolve_settlement_member_ids",
    "calculate_reimbursement_preview",
    "GreedySettlementPlanner",
    "SettlementPlanner",
    "plan_settlement_transfers",
]
