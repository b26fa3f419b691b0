"""Even splitting of an amount across members."""

from collections.abc import Sequence


def split_evenly(amount: float, member_ids: Sequence[str]) -> dict[str, float]:
    """
    Divide an amount into equal shares, one per listed member.

    Ids are not de-duplicated: a member listed twice receives two shares.
    No rounding is applied.

    Args:
        amount: Amount to divide
        member_ids: Members sharing the amount

    Returns:
        Mapping of member id to share, empty when there is no one to charge
    """
    if not member_ids:
        return {}

    base = amount / len(member_ids)
    shares: dict[str, float] = {}
    for member_id in member_ids:
        shares[member_id] = shares.get(member_id, 0.0) + base
    return shares
