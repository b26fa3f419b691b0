"""household-settle - Balances and settlement transfers for shared households."""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .finance import (
    TOLERANCE,
    calculate_balances,
    calculate_reimbursement_preview,
    plan_settlement_transfers,
    split_evenly,
)
from .finance.service import HouseholdFinanceService, entries_since_audit
from .models import (
    Balance,
    ExpenseEntry,
    GuardResult,
    GuardViolation,
    HouseholdSnapshot,
    ReimbursementShare,
    SettlementTransfer,
)
from .snapshot import load_snapshot

__all__ = [
    "Settings",
    "load_settings",
    "TOLERANCE",
    "calculate_balances",
    "calculate_reimbursement_preview",
    "plan_settlement_transfers",
    "split_evenly",
    "HouseholdFinanceService",
    "entries_since_audit",
    "Balance",
    "ExpenseEntry",
    "GuardResult",
    "GuardViolation",
    "HouseholdSnapshot",
    "ReimbursementShare",
    "SettlementTransfer",
    "load_snapshot",
]
