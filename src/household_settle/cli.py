"""CLI for household-settle."""

import typer

from .finance.cli import app as finance_app
from .membership.cli import app as members_app

app = typer.Typer(
    name="household-settle",
    help="Balances and settlement transfers for shared household expenses",
)

app.add_typer(finance_app, name="finance", help="Balances, transfers and previews")
app.add_typer(members_app, name="members", help="Membership change checks")


if __name__ == "__main__":
    app()
