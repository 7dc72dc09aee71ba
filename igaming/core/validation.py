"""Validation result value type.

A :class:`ValidationResult` is what every bet check returns.  Failure is an
expected outcome, so it is carried as data rather than raised.

Typical usage::

    from igaming.services.bet_validator import BetValidator

    result = BetValidator().validate_amount(5.0, 10.0, 1000.0)
    if not result.valid:
        print(result.message)       # "Minimum bet is $10.00"

    # Or, for exception-style callers:
    result.raise_if_invalid()       # raises ValidationError
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from igaming.core.errors import ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of a validation.

    Build instances with :meth:`success` or :meth:`failure`; the direct
    constructor enforces the same invariant so a hand-built instance can
    never be inconsistent.

    Attributes:
        valid: ``True`` when the check passed.
        message: Human-readable reason.  Set if and only if ``valid`` is
            ``False``.
    """

    valid: bool
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.valid and self.message is not None:
            raise ValueError("A valid result cannot carry a message.")
        if not self.valid and not self.message:
            raise ValueError("An invalid result requires a message.")

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)

    @property
    def is_invalid(self) -> bool:
        return not self.valid

    def __bool__(self) -> bool:
        return self.valid

    def raise_if_invalid(self) -> None:
        """Raise :class:`ValidationError` carrying ``message`` on failure."""
        if not self.valid:
            raise ValidationError(self.message or "Validation failed")
