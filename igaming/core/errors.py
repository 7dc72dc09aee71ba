"""Exception taxonomy.

Two families only:

* :class:`InvalidInputError` — the arguments can never produce a result
  (empty weight vector, non-positive weight sum, zero-length ID).  Raised
  immediately, no partial result.
* :class:`ExhaustedAttemptsError` — a bounded retry loop spent its whole
  budget without success.

A failed *validation* (bet out of range, insufficient balance, bad CPF) is
not an error; it is a normal return value.  :class:`ValidationError` exists
only for callers that opt into exception-style control flow through
:meth:`~igaming.core.validation.ValidationResult.raise_if_invalid`.
"""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Arguments outside the domain of the operation."""


class EmptyWeightsError(InvalidInputError):
    """Weight vector has no entries."""


class InvalidWeightsError(InvalidInputError):
    """Weight vector sums to zero or less."""


class ExhaustedAttemptsError(RuntimeError):
    """A retry loop gave up after ``attempts`` tries."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts


class ValidationError(ValueError):
    """A failed ``ValidationResult`` converted into an exception."""
