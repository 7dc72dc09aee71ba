"""
Identifier generation for transactions, affiliates and vouchers.

Three flavours:

    1. Alphanumeric — independent uniform draws from ``0-9A-Za-z``.
    2. Hash-derived — MD5 of a timestamp plus a random component.  The hash
       only scrambles; it adds no security.
    3. Numeric — a fixed number of digits with no leading zero.

None of these is unique on its own: two alphanumeric draws of length ``n``
collide with probability ``1 / 62**n``.  When the host has a store to check
against, :meth:`IDGenerator.generate_unique_id_with_check` retries until
the host-supplied ``exists`` predicate says the candidate is free.
"""

import hashlib
import logging
import os
import string
import time
from typing import Callable, Optional

import numpy as np
from dotenv import load_dotenv

from igaming.core.errors import ExhaustedAttemptsError, InvalidInputError

load_dotenv()

logger = logging.getLogger(__name__)

ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase

DEFAULT_ID_LENGTH = 8

#: MD5 hex digests are 32 characters; hash IDs cannot be longer.
_MD5_HEX_LENGTH = 32


class IDGenerator:
    """
    Draws identifiers from its own ``numpy`` random generator.

    Args:
        seed: Seed for a fresh generator; ``None`` uses OS entropy.
        rng: Existing generator to draw from.  Takes precedence over ``seed``.
        max_attempts: Default retry budget for
            :meth:`generate_unique_id_with_check`.  Falls back to the
            ``ID_MAX_ATTEMPTS`` environment variable, then 100.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        max_attempts: Optional[int] = None,
    ):
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        if max_attempts is None:
            max_attempts = int(os.getenv("ID_MAX_ATTEMPTS", "100"))
        self.max_attempts = max_attempts
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be ≥ 1, got {self.max_attempts!r}.")

    # ------------------------------------------------------------------
    # Generators
    # ------------------------------------------------------------------

    def generate_unique_id(
        self,
        length: int = DEFAULT_ID_LENGTH,
        prefix: str = "",
        uppercase: bool = True,
    ) -> str:
        """Random alphanumeric ID, e.g. ``"A3F9B2C1"``."""
        picks = self._rng.integers(0, len(ALPHABET), size=max(length, 0))
        body = "".join(ALPHABET[i] for i in picks)
        if uppercase:
            body = body.upper()
        return prefix + body

    def generate_from_hash(self, length: int = DEFAULT_ID_LENGTH, prefix: str = "") -> str:
        """Uppercase hex ID cut from an MD5 digest (at most 32 characters)."""
        seed_material = f"{time.time_ns()}:{self._rng.integers(0, 2**62)}"
        digest = hashlib.md5(seed_material.encode()).hexdigest()
        return prefix + digest[: min(max(length, 0), _MD5_HEX_LENGTH)].upper()

    def generate_numeric_id(self, length: int = DEFAULT_ID_LENGTH, prefix: str = "") -> str:
        """
        Exactly ``length`` digits, uniform over ``[10**(length-1), 10**length - 1]``.

        Built digit by digit (first digit 1-9, the rest 0-9), which is the
        same distribution as drawing the integer directly but has no upper
        limit on ``length``.

        Raises:
            InvalidInputError: If ``length < 1``.
        """
        if length < 1:
            raise InvalidInputError(f"Numeric ID length must be ≥ 1, got {length!r}.")
        lead = int(self._rng.integers(1, 10))
        rest = self._rng.integers(0, 10, size=length - 1)
        return prefix + str(lead) + "".join(str(d) for d in rest)

    def generate_unique_id_with_check(
        self,
        exists: Callable[[str], bool],
        length: int = DEFAULT_ID_LENGTH,
        max_attempts: Optional[int] = None,
        prefix: str = "",
    ) -> str:
        """
        Alphanumeric ID for which ``exists(candidate)`` is false.

        ``exists`` is the host's lookup (a database query, a set
        membership test, …).  It is called once per candidate.

        Raises:
            ExhaustedAttemptsError: If every one of ``max_attempts``
                candidates already exists.
            InvalidInputError: If ``max_attempts < 1``; ``exists`` is never
                called.
        """
        attempts = self.max_attempts if max_attempts is None else max_attempts
        if attempts < 1:
            raise InvalidInputError(f"max_attempts must be ≥ 1, got {attempts!r}.")
        for attempt in range(1, attempts + 1):
            candidate = self.generate_unique_id(length, prefix)
            if not exists(candidate):
                return candidate
            logger.debug("ID collision on attempt %d: %s", attempt, candidate)

        logger.warning("Could not generate a unique ID after %d attempts", attempts)
        raise ExhaustedAttemptsError(
            f"Could not generate unique ID after {attempts} attempts",
            attempts=attempts,
        )
