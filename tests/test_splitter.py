"""Tests for even share splitting."""

import pytest

from household_settle.finance.splitter import split_evenly


class TestSplitEvenly:
    """Test dividing an amount across members."""

    def test_three_way_split(self):
        """30 across three members gives 10 each."""
        shares = split_evenly(30, ["u1", "u2", "u3"])

        assert shares == {"u1": pytest.approx(10), "u2": pytest.approx(10), "u3": pytest.approx(10)}

    def test_empty_members_returns_empty_mapping(self):
        """No members means no one to charge."""
        assert split_evenly(50, []) == {}

    def test_zero_amount(self):
        """A zero amount still produces a share per member."""
        assert split_evenly(0, ["u1", "u2"]) == {"u1": 0.0, "u2": 0.0}

    def test_repeated_member_accumulates_shares(self):
        """A member listed twice receives two shares."""
        shares = split_evenly(30, ["u1", "u1", "u2"])

        assert shares["u1"] == pytest.approx(20)
        assert shares["u2"] == pytest.approx(10)

    def test_no_rounding_applied(self):
        """Shares keep full precision."""
        shares = split_evenly(10, ["u1", "u2", "u3"])

        assert shares["u1"] == 10 / 3


class TestSplitConservation:
    """Shares always sum back to the amount."""

    @pytest.mark.parametrize(
        "amount, member_ids",
        [
            (100, ["u1", "u2", "u3"]),
            (0.01, ["u1", "u2", "u3", "u4", "u5", "u6", "u7"]),
            (1234.56, ["u1", "u2", "u2", "u3"]),
            (99.99, ["u1"]),
            (-42.5, ["u1", "u2", "u3"]),
        ],
    )
    def test_shares_sum_to_amount(self, amount, member_ids):
        shares = split_evenly(amount, member_ids)

        assert sum(shares.values()) == pytest.approx(amount, abs=1e-9)
