"""Brazilian taxpayer document validation (CPF and CNPJ).

* **CPF** — *Cadastro de Pessoas Físicas*, 11 digits, individuals.
* **CNPJ** — *Cadastro Nacional da Pessoa Jurídica*, 14 digits, companies.

Both end in two mod-11 check digits.  For a weight table ``k`` over the
leading digits ``d``::

    r      =  (Σ d_i · k_i)  mod 11
    check  =  0            if r < 2
              11 − r       otherwise

The first check digit covers the base number, the second covers the base
plus the first check digit.  Strings of a single repeated digit
(``111.111.111-11``) pass the arithmetic but are not issued, so they are
rejected explicitly.

Input may be punctuated or not; every non-digit is stripped first.
"""

from __future__ import annotations

import re
from typing import Final, Sequence

_NON_DIGIT = re.compile(r"[^0-9]")

CPF_LENGTH: Final[int] = 11
CNPJ_LENGTH: Final[int] = 14

#: CPF weights: 10..2 over the first 9 digits, 11..2 over the first 10.
_CPF_WEIGHTS_1: Final[tuple] = tuple(range(10, 1, -1))
_CPF_WEIGHTS_2: Final[tuple] = tuple(range(11, 1, -1))

#: CNPJ weights over the first 12 and first 13 digits.
_CNPJ_WEIGHTS_1: Final[tuple] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_2: Final[tuple] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def strip_non_digits(value: str) -> str:
    """Remove everything but ``0-9``: ``'123.456.789-09'`` → ``'12345678909'``."""
    return _NON_DIGIT.sub("", value)


def _check_digit(digits: str, weights: Sequence[int]) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _is_repeated(digits: str) -> bool:
    return digits == digits[0] * len(digits)


def _validate(digits: str, length: int, weights_1: Sequence[int], weights_2: Sequence[int]) -> bool:
    if len(digits) != length or _is_repeated(digits):
        return False

    first = _check_digit(digits[: length - 2], weights_1)
    if int(digits[length - 2]) != first:
        return False

    second = _check_digit(digits[: length - 1], weights_2)
    return int(digits[length - 1]) == second


def validate_cpf(value: str) -> bool:
    """True if ``value`` is a well-formed CPF with correct check digits.

    Examples::

        validate_cpf("123.456.789-09")  → True
        validate_cpf("12345678909")     → True
        validate_cpf("111.111.111-11")  → False   (repeated digits)
        validate_cpf("123")             → False   (length)
    """
    return _validate(strip_non_digits(value), CPF_LENGTH, _CPF_WEIGHTS_1, _CPF_WEIGHTS_2)


def validate_cnpj(value: str) -> bool:
    """True if ``value`` is a well-formed CNPJ with correct check digits.

    Examples::

        validate_cnpj("11.222.333/0001-81")  → True
        validate_cnpj("11222333000181")      → True
        validate_cnpj("00000000000000")      → False
    """
    return _validate(strip_non_digits(value), CNPJ_LENGTH, _CNPJ_WEIGHTS_1, _CNPJ_WEIGHTS_2)


def format_cpf(value: str) -> str:
    """Render as ``###.###.###-##``; other lengths come back digits-only."""
    d = strip_non_digits(value)
    if len(d) != CPF_LENGTH:
        return d
    return f"{d[0:3]}.{d[3:6]}.{d[6:9]}-{d[9:11]}"


def format_cnpj(value: str) -> str:
    """Render as ``##.###.###/####-##``; other lengths come back digits-only."""
    d = strip_non_digits(value)
    if len(d) != CNPJ_LENGTH:
        return d
    return f"{d[0:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:14]}"
