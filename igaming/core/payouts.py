"""Win, loss and ROI arithmetic for a single settled bet.

Pure functions, 2-decimal half-away-from-zero rounding throughout.

Conventions
-----------
* ``multiplier`` is the *gross* multiplier: a 2.5× win on a 100 stake pays
  250 back, of which 150 is profit.
* A multiplier of exactly ``0`` is a legal losing outcome and pays ``0``;
  a negative multiplier is meaningless and also pays ``0``.
"""

from __future__ import annotations

from igaming.core.rounding import round_half_up


def calculate_win(bet: float, multiplier: float) -> float:
    """Gross payout ``bet × multiplier``.

    Examples::

        calculate_win(100.0, 2.5)   → 250.0
        calculate_win(100.0, 0.0)   →   0.0
        calculate_win(-5.0, 2.0)    →   0.0
    """
    if bet <= 0 or multiplier < 0:
        return 0.0
    return round_half_up(bet * multiplier)


def calculate_net_win(bet: float, multiplier: float) -> float:
    """Profit after returning the stake, ``win − bet``.

    Negative on a losing multiplier: ``calculate_net_win(100.0, 0.5)`` is
    ``-50.0``.
    """
    return round_half_up(calculate_win(bet, multiplier) - bet)


def calculate_win_with_rtp(
    bet: float,
    multiplier: float,
    rtp: float,
    probability: float,
) -> float:
    """Payout with the base multiplier scaled to a target RTP.

    The base multiplier is stretched by ``(rtp / 100) / probability`` (see
    :func:`igaming.core.rtp.adjusted_multiplier`), so a game whose raw pay
    table is tuned for a 100% return can be re-targeted without rewriting
    the table.

    Examples::

        calculate_win_with_rtp(10.0, 2.0, 96.0, 0.5)  → 38.4
        calculate_win_with_rtp(10.0, 2.0, 0.0, 0.5)   →  0.0
    """
    if bet <= 0 or multiplier < 0 or rtp <= 0 or probability <= 0:
        return 0.0
    scaled_multiplier = (rtp / 100.0 / probability) * multiplier
    return round_half_up(bet * scaled_multiplier)


def calculate_loss(bet: float) -> float:
    """Amount lost on a losing bet: the stake, floored at zero."""
    return max(0.0, round_half_up(bet))


def calculate_roi(bet: float, win: float) -> float:
    """Return on investment as a percentage of the stake.

    Examples::

        calculate_roi(100.0, 150.0)  →   50.0
        calculate_roi(100.0, 0.0)    → -100.0
        calculate_roi(0.0, 50.0)     →    0.0
    """
    if bet <= 0:
        return 0.0
    return round_half_up((win - bet) / bet * 100.0)
