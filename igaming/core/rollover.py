"""Bonus rollover (wagering requirement) tracking.

Rollover is the requirement to wager a multiple of the deposited amount
before funds become withdrawable.  Depositing 100 under a 3× rollover means
300 must be wagered first.

All functions are pure.  :func:`summarize_rollover` composes the other four
in dependency order: ``required`` is computed first and fed into the rest.

Typical usage::

    from igaming.core.rollover import summarize_rollover

    summary = summarize_rollover(1000.0, 3.0, 800.0)
    summary.required      # 3000.0
    summary.remaining     # 2200.0
    summary.progress      # 26.67
    summary.can_withdraw  # False
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from igaming.core.rounding import clamp, round_half_up


@dataclass(frozen=True)
class RolloverSummary:
    """Snapshot of a player's wagering requirement.

    Attributes:
        required: Total amount that must be wagered.
        remaining: Amount still to wager, never negative.
        progress: Completion percentage in ``[0, 100]``.
        can_withdraw: ``True`` once ``remaining`` reaches zero.
    """

    required: float
    remaining: float
    progress: float
    can_withdraw: bool

    def to_dict(self) -> dict:
        return asdict(self)


def rollover_required(total_deposited: float, multiplier: float) -> float:
    """Total wagering required, ``total_deposited × multiplier``.

    Negative deposits or multipliers are treated as "no requirement" and
    return ``0.0``.

    Examples::

        rollover_required(1000.0, 3.0)   → 3000.0
        rollover_required(250.0, 1.5)    →  375.0
        rollover_required(-10.0, 3.0)    →    0.0
    """
    if total_deposited < 0 or multiplier < 0:
        return 0.0
    return round_half_up(total_deposited * multiplier)


def rollover_remaining(required: float, wagered: float) -> float:
    """Amount still to wager, floored at zero."""
    return max(0.0, round_half_up(required - wagered))


def can_withdraw(remaining: float) -> bool:
    """True once nothing is left to wager."""
    return remaining <= 0


def rollover_progress(required: float, wagered: float) -> float:
    """Completion percentage, clamped to ``[0, 100]``.

    A requirement of zero (or less) is already complete, so progress is
    100 regardless of ``wagered``.

    Examples::

        rollover_progress(3000.0, 1500.0)  →  50.0
        rollover_progress(3000.0, 800.0)   →  26.67
        rollover_progress(3000.0, 9000.0)  → 100.0
        rollover_progress(0.0, 0.0)        → 100.0
    """
    if required <= 0:
        return 100.0
    return clamp(round_half_up(wagered / required * 100.0), 0.0, 100.0)


def summarize_rollover(
    total_deposited: float,
    multiplier: float,
    wagered: float,
) -> RolloverSummary:
    """Compute required, remaining, progress and withdrawability at once."""
    required = rollover_required(total_deposited, multiplier)
    remaining = rollover_remaining(required, wagered)
    progress = rollover_progress(required, wagered)
    return RolloverSummary(
        required=required,
        remaining=remaining,
        progress=progress,
        can_withdraw=can_withdraw(remaining),
    )
