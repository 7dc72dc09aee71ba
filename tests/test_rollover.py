"""
Tests for bonus rollover tracking
Run with: pytest tests/test_rollover.py -v
"""

import pytest
from igaming.core.rollover import (
    RolloverSummary,
    can_withdraw,
    rollover_progress,
    rollover_remaining,
    rollover_required,
    summarize_rollover,
)


class TestRolloverRequired:

    def test_multiplies_deposit(self):
        assert rollover_required(1000.0, 3.0) == 3000.0
        assert rollover_required(250.0, 1.5) == 375.0

    def test_negative_inputs(self):
        assert rollover_required(-10.0, 3.0) == 0.0
        assert rollover_required(100.0, -1.0) == 0.0

    def test_zero_multiplier(self):
        assert rollover_required(100.0, 0.0) == 0.0


class TestRolloverRemaining:

    def test_outstanding(self):
        assert rollover_remaining(3000.0, 800.0) == 2200.0

    def test_never_negative(self):
        assert rollover_remaining(3000.0, 5000.0) == 0.0

    def test_can_withdraw(self):
        assert can_withdraw(0.0)
        assert can_withdraw(-1.0)
        assert not can_withdraw(0.01)


class TestRolloverProgress:

    def test_half_way(self):
        assert rollover_progress(3000.0, 1500.0) == 50.0

    def test_rounded(self):
        assert rollover_progress(3000.0, 800.0) == pytest.approx(26.67)

    def test_capped_at_hundred(self):
        assert rollover_progress(3000.0, 9000.0) == 100.0

    def test_floored_at_zero(self):
        assert rollover_progress(3000.0, -50.0) == 0.0

    def test_no_requirement_is_complete(self):
        assert rollover_progress(0.0, 0.0) == 100.0
        assert rollover_progress(-5.0, 0.0) == 100.0


class TestSummarizeRollover:
    """Composite summary"""

    def test_in_progress(self):
        summary = summarize_rollover(1000.0, 3.0, 800.0)

        assert summary.required == 3000.0
        assert summary.remaining == 2200.0
        assert summary.progress == pytest.approx(26.67)
        assert summary.can_withdraw is False

    def test_complete(self):
        summary = summarize_rollover(1000.0, 3.0, 3000.0)

        assert summary.remaining == 0.0
        assert summary.progress == 100.0
        assert summary.can_withdraw is True

    @pytest.mark.parametrize("deposit,mult,wagered", [
        (1000.0, 3.0, 12000.0),
        (-100.0, 2.0, 50.0),
        (100.0, -2.0, -50.0),
        (0.0, 0.0, 0.0),
        (333.33, 1.7, 12.5),
    ])
    def test_bounds_hold_for_any_input(self, deposit, mult, wagered):
        summary = summarize_rollover(deposit, mult, wagered)

        assert 0.0 <= summary.progress <= 100.0
        assert summary.remaining >= 0.0
        assert summary.can_withdraw == (summary.remaining <= 0)

    def test_to_dict(self):
        summary = summarize_rollover(100.0, 2.0, 50.0)

        assert summary.to_dict() == {
            "required": 200.0,
            "remaining": 150.0,
            "progress": 25.0,
            "can_withdraw": False,
        }

    def test_frozen(self):
        summary = RolloverSummary(required=1.0, remaining=1.0, progress=0.0, can_withdraw=False)
        with pytest.raises(AttributeError):
            summary.required = 5.0
