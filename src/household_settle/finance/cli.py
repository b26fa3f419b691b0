"""CLI commands for household balances and settlement transfers."""

import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..config import load_settings
from ..exceptions import HouseholdSettleError
from ..models import Balance, ReimbursementShare, SettlementTransfer
from ..output import console, resolve_snapshot_path, setup_logging
from ..snapshot import load_snapshot
from .money import format_money
from .preview import calculate_reimbursement_preview
from .service import HouseholdFinanceService
from .summaries import (
    filter_entries,
    paid_totals_by_member,
    total_amount,
    totals_by_category,
    weekly_paid_series,
)

app = typer.Typer(
    name="finance",
    help="Balances, settlement transfers and reimbursement previews",
)

SNAPSHOT_ARGUMENT = typer.Argument(
    None, help="Household snapshot JSON (defaults to HOUSEHOLD_SETTLE_SNAPSHOT_PATH)"
)
ALL_ENTRIES_OPTION = typer.Option(
    False, "--all-entries", help="Ignore the last cash audit and use the whole ledger"
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose output")


def _fail(error: Exception, verbose: bool):
    console.print(f"\n[bold red]Error:[/bold red] {escape(str(error))}")
    if verbose:
        raise error
    sys.exit(1)


def display_balances(balances: list[Balance], currency_symbol: str):
    """Display member balances in a table."""
    table = Table(title="Balances", show_header=True, header_style="bold magenta")
    table.add_column("Member", style="cyan")
    table.add_column("Balance", justify="right", width=14)

    for balance in balances:
        table.add_row(balance.member_id, format_money(balance.value, currency_symbol))

    console.print(table)


def display_transfers(transfers: list[SettlementTransfer], currency_symbol: str):
    """Display settlement transfers in a table."""
    if not transfers:
        console.print("[green]Everyone is settled up.[/green]")
        return

    table = Table(title="Settlement Transfers", show_header=True, header_style="bold magenta")
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column("Amount", justify="right", width=14)

    for transfer in transfers:
        table.add_row(
            transfer.from_member_id,
            transfer.to_member_id,
            format_money(transfer.amount, currency_symbol),
        )

    console.print(table)
    console.print(f"  Total transfers: {len(transfers)}")


def display_preview(shares: list[ReimbursementShare], currency_symbol: str):
    """Display who is out of pocket for a draft entry."""
    if not shares:
        console.print("[yellow]No one is out of pocket for this entry.[/yellow]")
        return

    table = Table(title="Reimbursement Preview", show_header=True, header_style="bold magenta")
    table.add_column("Member", style="cyan")
    table.add_column("Gets back", justify="right", width=14)

    for share in shares:
        table.add_row(share.member_id, format_money(share.value, currency_symbol))

    console.print(table)


def display_weekly_paid(
    labels: list[date], datasets: dict[str, list[float]], currency_symbol: str
):
    """Display how much each member paid per week."""
    if not labels:
        return

    table = Table(title="Paid per Week", show_header=True, header_style="bold magenta")
    table.add_column("Week of", style="dim")
    for member_id in datasets:
        table.add_column(member_id, justify="right", width=14)

    for index, label in enumerate(labels):
        table.add_row(
            label.isoformat(),
            *(format_money(values[index], currency_symbol) for values in datasets.values()),
        )

    console.print(table)


@app.command()
def balances(
    snapshot: Optional[Path] = SNAPSHOT_ARGUMENT,
    all_entries: bool = ALL_ENTRIES_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Show every member's balance for the current settlement period."""
    try:
        settings = load_settings()
        setup_logging(verbose, settings.log_level)
        service = HouseholdFinanceService(
            load_snapshot(resolve_snapshot_path(snapshot, settings))
        )
        display_balances(service.balances(include_all=all_entries), settings.currency_symbol)
    except HouseholdSettleError as e:
        _fail(e, verbose)


@app.command()
def settle(
    snapshot: Optional[Path] = SNAPSHOT_ARGUMENT,
    all_entries: bool = ALL_ENTRIES_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    Suggest transfers that settle all balances.

    Uses a greedy largest-creditor/largest-debtor match, which keeps the
    number of transfers low but is not guaranteed to be the minimum.
    """
    try:
        settings = load_settings()
        setup_logging(verbose, settings.log_level)
        service = HouseholdFinanceService(
            load_snapshot(resolve_snapshot_path(snapshot, settings))
        )
        display_transfers(
            service.settlement_transfers(include_all=all_entries),
            settings.currency_symbol,
        )
    except HouseholdSettleError as e:
        _fail(e, verbose)


@app.command()
def preview(
    amount: float = typer.Argument(..., help="Amount of the draft entry"),
    payer: list[str] = typer.Option(..., "--payer", "-p", help="Member who paid (repeatable)"),
    beneficiary: list[str] = typer.Option(
        ..., "--beneficiary", "-b", help="Member who benefits (repeatable)"
    ),
    verbose: bool = VERBOSE_OPTION,
):
    """Preview reimbursements for an entry before recording it."""
    try:
        settings = load_settings()
        setup_logging(verbose, settings.log_level)
    except HouseholdSettleError as e:
        _fail(e, verbose)
        return

    # A member named twice on the command line still counts once
    shares = calculate_reimbursement_preview(
        amount, list(dict.fromkeys(payer)), list(dict.fromkeys(beneficiary))
    )
    display_preview(shares, settings.currency_symbol)


@app.command()
def summary(
    snapshot: Optional[Path] = SNAPSHOT_ARGUMENT,
    all_entries: bool = ALL_ENTRIES_OPTION,
    date_from: Optional[datetime] = typer.Option(
        None, "--from", formats=["%Y-%m-%d"], help="Only entries on or after this day"
    ),
    date_to: Optional[datetime] = typer.Option(
        None, "--to", formats=["%Y-%m-%d"], help="Only entries on or before this day"
    ),
    member: Optional[str] = typer.Option(
        None, "--member", "-m", help="Only entries this member paid for or shares"
    ),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only this category"),
    search: str = typer.Option("", "--search", "-s", help="Text the description must contain"),
    verbose: bool = VERBOSE_OPTION,
):
    """Show spending totals per member, per category and per week."""
    try:
        settings = load_settings()
        setup_logging(verbose, settings.log_level)
        service = HouseholdFinanceService(
            load_snapshot(resolve_snapshot_path(snapshot, settings))
        )
    except HouseholdSettleError as e:
        _fail(e, verbose)
        return

    entries = filter_entries(
        service.current_entries(include_all=all_entries),
        date_from=date_from.date() if date_from else None,
        date_to=date_to.date() if date_to else None,
        member_id=member,
        category=category,
        search=search,
    )
    symbol = settings.currency_symbol

    console.print(f"\n[bold]Total spent:[/bold] {format_money(total_amount(entries), symbol)}")
    console.print(f"  Entries: {len(entries)}\n")

    paid_table = Table(title="Paid by Member", show_header=True, header_style="bold magenta")
    paid_table.add_column("Member", style="cyan")
    paid_table.add_column("Paid", justify="right", width=14)
    for member_id, paid in paid_totals_by_member(entries):
        paid_table.add_row(member_id, format_money(paid, symbol))
    console.print(paid_table)

    category_table = Table(title="By Category", show_header=True, header_style="bold magenta")
    category_table.add_column("Category", style="yellow")
    category_table.add_column("Amount", justify="right", width=14)
    for category_name, amount in totals_by_category(entries).items():
        category_table.add_row(category_name, format_money(amount, symbol))
    console.print(category_table)

    labels, datasets = weekly_paid_series(
        entries, [m.user_id for m in service.snapshot.members]
    )
    display_weekly_paid(labels, datasets, symbol)
