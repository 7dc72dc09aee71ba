"""
Bet validation and multi-balance allocation.

Implements the checks a host runs before accepting a wager:

    1. Amount limits — the stake must lie inside the table's
       ``[min_bet, max_bet]`` range and be strictly positive.
    2. Balance sufficiency — the stake must not exceed the sum of all of
       the player's balance buckets (main, bonus, referral, affiliate, …).
    3. Allocation — a greedy split of the stake across buckets in a fixed
       priority order, so real money is consumed before bonus money.

Failed checks come back as :class:`~igaming.core.validation.ValidationResult`
values; nothing here raises on a bad bet.
"""

import logging
import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

from dotenv import load_dotenv

from igaming.core.rounding import round_half_up
from igaming.core.validation import ValidationResult
from igaming.utils.money_format import number_format

load_dotenv()

logger = logging.getLogger(__name__)

#: Bucket consumption order when neither the caller nor the environment
#: overrides it.
DEFAULT_BALANCE_PRIORITY: Tuple[str, ...] = ("main", "bonus", "ref", "affiliate")


def _parse_priority(raw: str) -> Tuple[str, ...]:
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def _money(amount: float) -> str:
    return "$" + number_format(amount, 2, ".", ",")


class BetValidator:
    """
    Validates stakes against table limits and player balances.

    The allocation priority is resolved once at construction: an explicit
    ``priority`` argument wins, then the comma-separated
    ``BALANCE_PRIORITY`` environment variable, then
    :data:`DEFAULT_BALANCE_PRIORITY`.
    """

    def __init__(self, priority: Optional[Iterable[str]] = None):
        if priority is not None:
            self.priority = tuple(priority)
        else:
            raw = os.getenv("BALANCE_PRIORITY", "")
            self.priority = _parse_priority(raw) or DEFAULT_BALANCE_PRIORITY

    # ------------------------------------------------------------------
    # Amount and balance checks
    # ------------------------------------------------------------------

    def validate_amount(self, bet: float, min_bet: float, max_bet: float) -> ValidationResult:
        """
        Check ``bet`` against the table limits.

        The checks run in a fixed order and the first failure wins, so a
        negative stake on a table with a positive minimum reports the
        minimum-bet message, not the zero-bet one.
        """
        if bet < min_bet:
            result = ValidationResult.failure(f"Minimum bet is {_money(min_bet)}")
        elif bet > max_bet:
            result = ValidationResult.failure(f"Maximum bet is {_money(max_bet)}")
        elif bet <= 0:
            result = ValidationResult.failure("Bet must be greater than zero")
        else:
            return ValidationResult.success()

        logger.debug("Bet %.2f rejected: %s", bet, result.message)
        return result

    def validate_balance(self, bet: float, balances: Mapping[str, float]) -> ValidationResult:
        """Check that the combined balance covers ``bet``."""
        total_balance = sum(balances.values())
        if bet > total_balance:
            logger.info(
                "Insufficient balance: bet %.2f exceeds available %.2f", bet, total_balance
            )
            return ValidationResult.failure(
                f"Insufficient balance. Available: {_money(total_balance)}"
            )
        return ValidationResult.success()

    def validate(
        self,
        bet: float,
        min_bet: float,
        max_bet: float,
        balances: Mapping[str, float],
    ) -> ValidationResult:
        """Amount check, then balance check.  Stops at the first failure."""
        amount_result = self.validate_amount(bet, min_bet, max_bet)
        if not amount_result.valid:
            return amount_result
        return self.validate_balance(bet, balances)

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def allocate_balance(
        self,
        bet: float,
        balances: Mapping[str, float],
        priority: Optional[Iterable[str]] = None,
    ) -> Dict[str, float]:
        """
        Split ``bet`` across balance buckets.

        The algorithm:
        1. Walk the priority buckets in order, taking as much of each as
           is still needed.
        2. Walk any remaining buckets in the mapping's own order.
        3. Stop as soon as the stake is covered.

        Only buckets that contributed appear in the result; empty or
        missing buckets are skipped.  If the balances cannot cover the
        stake the result simply sums to less than ``bet``; call
        :meth:`validate_balance` first.

        Example::

            allocate_balance(120.0, {"main": 100.0, "bonus": 50.0})
            # {"main": 100.0, "bonus": 20.0}
        """
        order = self.priority if priority is None else tuple(priority)
        ranked = list(dict.fromkeys(name for name in order if name in balances))
        ranked += [name for name in balances if name not in order]

        allocation: Dict[str, float] = {}
        remaining = bet

        for name in ranked:
            if remaining <= 0:
                break
            available = balances[name]
            if available <= 0:
                continue
            used = min(remaining, available)
            allocation[name] = round_half_up(used)
            remaining -= used

        logger.debug("Allocated bet %.2f as %s", bet, allocation)
        return allocation
