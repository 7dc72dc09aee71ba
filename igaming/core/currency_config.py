"""Currency formatting rules: every per-locale constant in one place.

This module is the **registry** for symbols, separators and default
precision.  Nowhere else in the codebase should a currency symbol or a
thousands separator be hard-coded.

Architecture
------------
:class:`CurrencyFormat` is a frozen dataclass carrying one formatting rule.
Named constructors (:meth:`CurrencyFormat.brazilian`,
:meth:`CurrencyFormat.dollar`, …) return pre-populated instances, and
:data:`LOCALE_FORMATS` maps every accepted locale / currency tag to one of
them.  To support a new currency:

1. Add a ``@classmethod`` constructor here.
2. Register its tags in :data:`LOCALE_FORMATS`.
3. :func:`igaming.utils.money_format.format_money` picks it up with no
   further changes.

Unknown tags resolve to :meth:`CurrencyFormat.international`, which uses
dollar-style grouping and a caller-supplied symbol.

Typical usage::

    from igaming.core.currency_config import resolve_locale

    rule = resolve_locale("de_DE")
    rule.symbol            # "€"
    rule.decimal_sep       # ","

    # Override a single field for a one-off rendering:
    from dataclasses import replace
    plain_real = replace(resolve_locale("pt_BR"), symbol_spacing="")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Final


@dataclass(frozen=True)
class CurrencyFormat:
    """Immutable formatting rule for a single currency family.

    Attributes:
        code: ISO 4217 code, or ``"INTL"`` for the fallback rule.
        symbol: Currency symbol prefixed to the amount.
        thousands_sep: Digit-group separator (``","`` in ``1,234``).
        decimal_sep: Separator before the fractional digits.
        default_decimals: Fractional digits used when the caller does not
            ask for a specific precision.  The won has no minor unit in
            everyday use, so it defaults to 0.
        symbol_spacing: Text placed between symbol and number.  Only the
            Brazilian real uses a space (``R$ 1.234,56``).
    """

    code: str
    symbol: str
    thousands_sep: str = ","
    decimal_sep: str = "."
    default_decimals: int = 2
    symbol_spacing: str = ""

    @classmethod
    def brazilian(cls) -> "CurrencyFormat":
        return cls(code="BRL", symbol="R$", thousands_sep=".", decimal_sep=",", symbol_spacing=" ")

    @classmethod
    def dollar(cls) -> "CurrencyFormat":
        return cls(code="USD", symbol="$")

    @classmethod
    def pound(cls) -> "CurrencyFormat":
        return cls(code="GBP", symbol="£")

    @classmethod
    def euro(cls) -> "CurrencyFormat":
        return cls(code="EUR", symbol="€", thousands_sep=".", decimal_sep=",")

    @classmethod
    def rupee(cls) -> "CurrencyFormat":
        return cls(code="INR", symbol="₹")

    @classmethod
    def yuan(cls) -> "CurrencyFormat":
        return cls(code="CNY", symbol="¥")

    @classmethod
    def won(cls) -> "CurrencyFormat":
        return cls(code="KRW", symbol="₩", default_decimals=0)

    @classmethod
    def international(cls, symbol: str = "$") -> "CurrencyFormat":
        """Fallback rule: dollar grouping with an arbitrary symbol."""
        return cls(code="INTL", symbol=symbol)


#: Default locale when the caller does not name one.
DEFAULT_LOCALE: Final[str] = "pt_BR"

_BRAZILIAN: Final[CurrencyFormat] = CurrencyFormat.brazilian()
_DOLLAR: Final[CurrencyFormat] = CurrencyFormat.dollar()
_POUND: Final[CurrencyFormat] = CurrencyFormat.pound()
_EURO: Final[CurrencyFormat] = CurrencyFormat.euro()
_RUPEE: Final[CurrencyFormat] = CurrencyFormat.rupee()
_YUAN: Final[CurrencyFormat] = CurrencyFormat.yuan()
_WON: Final[CurrencyFormat] = CurrencyFormat.won()

#: Locale and currency tags → formatting rule.
LOCALE_FORMATS: Final[Dict[str, CurrencyFormat]] = {
    "pt_BR": _BRAZILIAN,
    "BRL": _BRAZILIAN,
    "en_US": _DOLLAR,
    "USD": _DOLLAR,
    "en_GB": _POUND,
    "GBP": _POUND,
    "de_DE": _EURO,
    "fr_FR": _EURO,
    "es_ES": _EURO,
    "it_IT": _EURO,
    "EUR": _EURO,
    "en_IN": _RUPEE,
    "INR": _RUPEE,
    "zh_CN": _YUAN,
    "CNY": _YUAN,
    "ko_KR": _WON,
    "KRW": _WON,
}


def resolve_locale(locale: str, fallback_symbol: str = "$") -> CurrencyFormat:
    """Rule registered for ``locale``, or the international fallback."""
    rule = LOCALE_FORMATS.get(locale)
    if rule is None:
        return CurrencyFormat.international(fallback_symbol)
    return rule
