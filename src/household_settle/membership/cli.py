"""CLI commands for checking membership changes against household rules."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..config import load_settings
from ..exceptions import HouseholdSettleError
from ..finance.service import HouseholdFinanceService
from ..models import GuardResult
from ..output import console, resolve_snapshot_path, setup_logging
from ..snapshot import load_snapshot

app = typer.Typer(
    name="members",
    help="Check whether membership changes are allowed",
)

SNAPSHOT_ARGUMENT = typer.Argument(
    None, help="Household snapshot JSON (defaults to HOUSEHOLD_SETTLE_SNAPSHOT_PATH)"
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose output")


def _run_check(
    member_id: str,
    snapshot: Path | None,
    verbose: bool,
    action: str,
    check: Callable[[HouseholdFinanceService, str], GuardResult],
):
    """Run a guard against a snapshot and exit 2 when it is violated."""
    try:
        settings = load_settings()
        setup_logging(verbose, settings.log_level)
        service = HouseholdFinanceService(
            load_snapshot(resolve_snapshot_path(snapshot, settings))
        )
        result = check(service, member_id)
    except HouseholdSettleError as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)

    if result.ok:
        console.print(f"[bold green]✓ {member_id} can {action}.[/bold green]")
        return

    console.print(
        f"[bold red]✗ {member_id} cannot {action}:[/bold red] {result.message} "
        f"[dim]({result.violation.value})[/dim]"
    )
    sys.exit(2)


@app.command("check-leave")
def check_leave(
    member_id: str = typer.Argument(..., help="Member who wants to leave"),
    snapshot: Optional[Path] = SNAPSHOT_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
):
    """Check whether a member may leave (balance settled, not the last owner)."""
    _run_check(
        member_id, snapshot, verbose, "leave the household",
        HouseholdFinanceService.check_can_leave,
    )


@app.command("check-remove")
def check_remove(
    member_id: str = typer.Argument(..., help="Member to remove"),
    snapshot: Optional[Path] = SNAPSHOT_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
):
    """Check whether a member may be removed from the household."""
    _run_check(
        member_id, snapshot, verbose, "be removed",
        HouseholdFinanceService.check_can_remove,
    )


@app.command("check-demote")
def check_demote(
    member_id: str = typer.Argument(..., help="Owner to demote"),
    snapshot: Optional[Path] = SNAPSHOT_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
):
    """Check whether an owner may be demoted to a regular member."""
    _run_check(
        member_id, snapshot, verbose, "be demoted",
        HouseholdFinanceService.check_can_demote,
    )


@app.command("check-dissolve")
def check_dissolve(
    member_id: str = typer.Argument(..., help="Member dissolving the household"),
    snapshot: Optional[Path] = SNAPSHOT_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
):
    """Check whether a member may dissolve the household."""
    _run_check(
        member_id, snapshot, verbose, "dissolve the household",
        HouseholdFinanceService.check_can_dissolve,
    )
