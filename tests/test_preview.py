"""Tests for the reimbursement preview of a draft entry."""

import math

import pytest

from household_settle.finance.balances import calculate_balances
from household_settle.finance.preview import calculate_reimbursement_preview
from household_settle.models import ExpenseEntry, ReimbursementShare


class TestReimbursementPreview:
    """Test who is out of pocket for a single entry."""

    def test_single_payer_for_three(self):
        """Only the payer shows up; the beneficiaries' negative rows are dropped."""
        preview = calculate_reimbursement_preview(100, ["u1"], ["u1", "u2", "u3"])

        assert len(preview) == 1
        assert preview[0].member_id == "u1"
        assert preview[0].value == pytest.approx(66.6666666, abs=1e-6)

    def test_below_tolerance_is_dropped(self):
        """Tiny positive noise does not show up."""
        assert calculate_reimbursement_preview(0.005, ["u1"], ["u1", "u2", "u3"]) == []

    def test_payer_not_beneficiary_gets_full_amount(self):
        preview = calculate_reimbursement_preview(50, ["u1"], ["u2", "u3"])

        assert preview == [ReimbursementShare(member_id="u1", value=50)]

    def test_multiple_payers_sorted_descending(self):
        preview = calculate_reimbursement_preview(120, ["u1", "u2"], ["u2", "u3", "u4"])

        assert [share.member_id for share in preview] == ["u1", "u2"]
        assert preview[0].value == pytest.approx(60)
        assert preview[1].value == pytest.approx(20)

    def test_payers_equal_beneficiaries_is_empty(self):
        assert calculate_reimbursement_preview(90, ["u1", "u2"], ["u1", "u2"]) == []

    @pytest.mark.parametrize(
        "amount, payers, beneficiaries",
        [
            (-10, ["u1"], ["u2"]),
            (math.nan, ["u1"], ["u2"]),
            (math.inf, ["u1"], ["u2"]),
            (10, [], ["u2"]),
            (10, ["u1"], []),
        ],
    )
    def test_invalid_input_gives_empty_preview(self, amount, payers, beneficiaries):
        assert calculate_reimbursement_preview(amount, payers, beneficiaries) == []

    def test_zero_amount(self):
        assert calculate_reimbursement_preview(0, ["u1"], ["u2"]) == []

    def test_custom_tolerance(self):
        preview = calculate_reimbursement_preview(0.005, ["u1"], ["u2"], tolerance=0.001)

        assert preview == [ReimbursementShare(member_id="u1", value=0.005)]


class TestPreviewMatchesBalances:
    """A one-entry ledger and the preview agree on who is owed money."""

    @pytest.mark.parametrize(
        "amount, payers, beneficiaries",
        [
            (100, ["u1"], ["u1", "u2", "u3"]),
            (75.5, ["u1", "u2"], ["u3"]),
            (42, ["u2", "u3"], ["u1", "u2", "u3", "u4"]),
        ],
    )
    def test_positive_members_agree(self, amount, payers, beneficiaries):
        entry = ExpenseEntry(
            id="e1", amount=amount, payer_ids=payers, beneficiary_ids=beneficiaries
        )
        members = list(dict.fromkeys([*payers, *beneficiaries]))

        balances = calculate_balances([entry], members)
        preview = calculate_reimbursement_preview(amount, payers, beneficiaries)

        owed = [b for b in balances if b.value > 0.004]
        assert [b.member_id for b in owed] == [share.member_id for share in preview]
        for balance, share in zip(owed, preview):
            assert balance.value == pytest.approx(share.value)

    def test_deterministic(self):
        first = calculate_reimbursement_preview(80, ["u2", "u1"], ["u3", "u4"])
        second = calculate_reimbursement_preview(80, ["u2", "u1"], ["u3", "u4"])

        assert first == second
        assert [share.member_id for share in first] == ["u2", "u1"]
