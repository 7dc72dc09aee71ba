"""Return-to-player (RTP) mathematics.

Every function here is **pure**: no I/O, no logging, no side effects.

RTP is expressed as a percentage in ``[0, 100]``: an RTP of 95 means that,
over the long run, players receive 95 for every 100 wagered.  The house
edge is the complement, ``100 − RTP``.

The payout model
----------------
For a single-payout game where a bet ``B`` pays ``W`` with probability
``p`` and nothing otherwise, the expected return is ``p · W``.  Setting it
equal to the target fraction of the stake::

    p · W  =  (RTP / 100) · B
    W      =  B · (RTP / 100) / p                          (1)

so the multiplier that hits the target is ``(RTP / 100) / p``.  All of
:func:`win_from_rtp` and :func:`adjusted_multiplier` are equation (1).

Degenerate inputs (non-positive bet, RTP or probability) return ``0.0``
rather than raising: a zero payout is the safe answer for a round that
cannot pay, and hosts call these inside the game loop.
"""

from __future__ import annotations

from typing import Final

from igaming.core.rounding import MULTIPLIER_PLACES, clamp, round_half_up

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

#: Lower bound of the RTP scale.
RTP_MIN: Final[float] = 0.0

#: Upper bound of the RTP scale.
RTP_MAX: Final[float] = 100.0


# ---------------------------------------------------------------------------
# Payout sizing
# ---------------------------------------------------------------------------


def win_from_rtp(bet: float, rtp: float, hit_probability: float) -> float:
    """Payout needed for ``bet`` so the long-run return equals ``rtp``.

    Args:
        bet: Stake amount.
        rtp: Target RTP in ``[0, 100]``.
        hit_probability: Probability in ``(0, 1]`` that the round pays.

    Returns:
        Payout rounded to 2 decimals, or ``0.0`` if any argument is ≤ 0.

    Examples::

        win_from_rtp(100.0, 95.0, 1 / 3)  → 285.0   (2.85× the bet)
        win_from_rtp(100.0, 96.0, 0.5)    → 192.0
        win_from_rtp(0.0, 95.0, 0.5)      →   0.0
    """
    if bet <= 0 or rtp <= 0 or hit_probability <= 0:
        return 0.0
    return round_half_up(bet * (rtp / 100.0) / hit_probability)


def adjusted_multiplier(rtp: float, hit_probability: float) -> float:
    """Multiplier that yields ``rtp`` at the given hit probability.

    Rounded to 4 decimals because multipliers are later applied to stakes
    and 2 decimals would lose cents on large bets.

    Examples::

        adjusted_multiplier(95.0, 1 / 3)  → 2.85
        adjusted_multiplier(97.0, 0.49)   → 1.9796
    """
    if rtp <= 0 or hit_probability <= 0:
        return 0.0
    return round_half_up((rtp / 100.0) / hit_probability, MULTIPLIER_PLACES)


# ---------------------------------------------------------------------------
# House edge and range handling
# ---------------------------------------------------------------------------


def house_edge(rtp: float) -> float:
    """House edge percentage, ``max(0, 100 − rtp)``.

    An RTP above 100 (a promotional game that pays out more than it takes)
    reports an edge of 0, not a negative edge.
    """
    return max(0.0, RTP_MAX - rtp)


def validate_rtp_range(
    rtp: float,
    min_rtp: float = RTP_MIN,
    max_rtp: float = RTP_MAX,
) -> bool:
    """True if ``min_rtp <= rtp <= max_rtp``."""
    return min_rtp <= rtp <= max_rtp


def normalize_rtp(rtp: float) -> float:
    """Clamp ``rtp`` into ``[0, 100]``."""
    return clamp(float(rtp), RTP_MIN, RTP_MAX)


# ---------------------------------------------------------------------------
# Measured RTP
# ---------------------------------------------------------------------------


def effective_rtp(total_wins: float, total_bets: float) -> float:
    """Observed RTP from aggregate wins and bets.

    Examples::

        effective_rtp(950.0, 1000.0)  → 95.0
        effective_rtp(10.0, 0.0)      →  0.0   (no action yet)
    """
    if total_bets <= 0:
        return 0.0
    return round_half_up(total_wins / total_bets * 100.0)
