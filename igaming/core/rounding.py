"""Rounding primitives, the single source of truth for monetary rounding.

Every rounded figure the library returns goes through :func:`round_half_up`.
Financial comparisons downstream (``remaining <= 0``, ``bet > balance``)
depend on all components agreeing on the same rounding rule, so nothing
else in the codebase should call the built-in :func:`round` on money.

Design decisions
----------------
* Python's built-in ``round`` uses banker's rounding (half-to-even) on the
  binary float, so ``round(2.675, 2) == 2.67`` and ``round(0.125, 2) == 0.12``.
  Hosts compare these numbers against ledger values rounded half away from
  zero, which is what most payment stacks and spreadsheet tools do.
* We quantize ``Decimal(repr(value))`` rather than ``Decimal(value)``.
  ``repr`` gives the shortest string that round-trips to the same float, so
  ``2.675`` is rounded as the decimal the caller typed, not as
  ``2.67499999999999982236431605997495353221893310546875``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

#: Decimal places used for every monetary amount.
MONEY_PLACES: Final[int] = 2

#: Decimal places used for multipliers.
MULTIPLIER_PLACES: Final[int] = 4


def to_decimal(value: float | int) -> Decimal:
    """Convert a float to the ``Decimal`` of its shortest repr."""
    return Decimal(repr(float(value)))


def quantize_half_up(value: float | int, places: int) -> Decimal:
    """Round ``value`` half away from zero and keep it as a ``Decimal``.

    Used by the money formatter, which needs the exact digits rather than
    a float that may print with representation noise.

    Raises:
        ValueError: If ``places`` is negative.
    """
    if places < 0:
        raise ValueError(f"places must be ≥ 0, got {places!r}.")
    exponent = Decimal(1).scaleb(-places)
    exact = to_decimal(value)
    with localcontext() as ctx:
        # Coefficient after quantizing holds every integer digit plus `places`.
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return exact.quantize(exponent, rounding=ROUND_HALF_UP)


def round_half_up(value: float | int, places: int = MONEY_PLACES) -> float:
    """Round ``value`` to ``places`` decimals, halves away from zero.

    Examples::

        round_half_up(2.675)      → 2.68   (built-in round gives 2.67)
        round_half_up(-0.125)     → -0.13
        round_half_up(26.666, 2)  → 26.67
        round_half_up(2.85, 4)    → 2.85

    Args:
        value: Number to round.  NaN and infinities are returned unchanged.
        places: Decimal places to keep.

    Returns:
        The rounded value as a ``float``.
    """
    value = float(value)
    if value != value or value in (float("inf"), float("-inf")):
        return value
    return float(quantize_half_up(value, places))


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into the closed interval ``[lo, hi]``."""
    return max(lo, min(hi, value))
