"""
Tests for the shared rounding primitives
Run with: pytest tests/test_rounding.py -v
"""

import math
from decimal import Decimal

import pytest
from igaming.core.rounding import clamp, quantize_half_up, round_half_up


class TestRoundHalfUp:
    """Halves round away from zero, unlike the built-in round"""

    def test_half_rounds_up(self):
        assert round_half_up(2.675) == 2.68
        assert round_half_up(0.125) == 0.13
        assert round_half_up(1.005) == 1.01

    def test_half_rounds_away_from_zero_for_negatives(self):
        assert round_half_up(-0.125) == -0.13
        assert round_half_up(-2.675) == -2.68

    def test_other_precisions(self):
        assert round_half_up(2.85, 4) == 2.85
        assert round_half_up(1.97959183, 4) == 1.9796
        assert round_half_up(1234.5, 0) == 1235.0

    def test_integers_pass_through(self):
        assert round_half_up(3000) == 3000.0

    def test_non_finite_unchanged(self):
        assert math.isnan(round_half_up(float("nan")))
        assert round_half_up(float("inf")) == float("inf")

    def test_negative_places_rejected(self):
        with pytest.raises(ValueError):
            quantize_half_up(1.0, -1)


class TestClamp:
    def test_inside(self):
        assert clamp(50.0, 0.0, 100.0) == 50.0

    def test_outside(self):
        assert clamp(-5.0, 0.0, 100.0) == 0.0
        assert clamp(150.0, 0.0, 100.0) == 100.0


class TestLargeMagnitudes:
    """Values wider than the default 28-digit decimal context"""

    def test_money_places(self):
        assert round_half_up(1e27) == 1e27
        assert round_half_up(-3.5e40) == -3.5e40

    def test_multiplier_places(self):
        assert round_half_up(9.5e24, 4) == 9.5e24

    def test_quantized_keeps_every_digit(self):
        assert quantize_half_up(1e27, 2) == Decimal("1E+27")
        assert quantize_half_up(1e27, 2).as_tuple().exponent == -2
