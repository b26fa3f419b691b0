"""Monetary constants and display rounding."""

from decimal import ROUND_HALF_UP, Decimal

# Slack below which a balance, preview value or transfer counts as zero.
# Stored data and the UI rely on this exact value.
TOLERANCE = 0.004


def to_minor_units(amount: float) -> int:
    """
    Convert a major-unit amount to integer minor units (cents).
    Uses ROUND_HALF_UP for consistency.

    Only used for display; computed balances are never rounded.

    Args:
        amount: Amount in major units

    Returns:
        Amount in minor units (integer)
    """
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_money(amount: float, currency_symbol: str = "€", use_color: bool = True) -> str:
    """
    Format money in accounting style with alignment.

    Negative amounts use parentheses: (€85.02)
    Positive amounts have spaces:      €85.02
    """
    cents = to_minor_units(amount)
    abs_amount = Decimal(abs(cents)) / 100
    if cents < 0:
        if use_color:
            return f"({currency_symbol}[red]{abs_amount:,.2f}[/red])"
        return f"({currency_symbol}{abs_amount:,.2f})"
    if use_color:
        return f" [green]{currency_symbol}{abs_amount:,.2f}[/green] "
    return f" {currency_symbol}{abs_amount:,.2f} "
