"""
Utility: money string rendering

Turns amounts into display strings using the rules registered in
:mod:`igaming.core.currency_config`.  Rounding is half away from zero, the
same rule the calculators use, so a payout of ``2.675`` is shown as
``2,68`` and not ``2,67``.

Usage:
    from igaming.utils.money_format import format_money, format_compact

    format_money(1234.56)                    # "R$ 1.234,56"
    format_money(1234.56, locale="en_US")    # "$1,234.56"
    format_money(1234.5, locale="ko_KR")     # "₩1,235"
    format_compact(1_500_000)                # "1,5M"
"""

from typing import Optional

from igaming.core.currency_config import DEFAULT_LOCALE, CurrencyFormat, resolve_locale
from igaming.core.rounding import quantize_half_up


def number_format(
    amount: float,
    decimals: int = 2,
    decimal_sep: str = ".",
    thousands_sep: str = ",",
) -> str:
    """Group and round ``amount`` without any currency symbol.

    A value that rounds to zero is rendered without a minus sign.
    """
    quantized = quantize_half_up(amount, decimals)
    negative = quantized < 0
    digits = format(quantized.copy_abs(), "f")

    whole, _, fraction = digits.partition(".")
    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)

    rendered = thousands_sep.join(groups)
    if fraction:
        rendered = f"{rendered}{decimal_sep}{fraction}"
    return f"-{rendered}" if negative else rendered


def apply_format(amount: float, rule: CurrencyFormat, decimals: Optional[int] = None) -> str:
    """Render ``amount`` with a specific rule."""
    places = rule.default_decimals if decimals is None else decimals
    number = number_format(amount, places, rule.decimal_sep, rule.thousands_sep)
    return f"{rule.symbol}{rule.symbol_spacing}{number}"


def format_money(amount: float, decimals: Optional[int] = None, locale: str = DEFAULT_LOCALE) -> str:
    """
    Render ``amount`` for ``locale``.

    Args:
        amount: Amount to format.
        decimals: Fractional digits.  ``None`` uses the locale's default
                  (2 everywhere except the won, which uses 0).
                  Pass ``2`` explicitly for the older behaviour where every
                  locale, the won included, rendered two decimals
                  (``₩1,234.50`` rather than ``₩1,235``).
        locale: Locale or currency tag (``"pt_BR"``, ``"USD"``, …).
                Unknown tags fall back to ``$1,234.56``.

    Returns:
        Formatted string such as ``"R$ 1.234,56"``.
    """
    return apply_format(amount, resolve_locale(locale), decimals)


def format_brazilian(amount: float, decimals: int = 2) -> str:
    """R$ 1.234,56"""
    return apply_format(amount, CurrencyFormat.brazilian(), decimals)


def format_dollar(amount: float, decimals: int = 2) -> str:
    """$1,234.56"""
    return apply_format(amount, CurrencyFormat.dollar(), decimals)


def format_pound(amount: float, decimals: int = 2) -> str:
    """£1,234.56"""
    return apply_format(amount, CurrencyFormat.pound(), decimals)


def format_euro(amount: float, decimals: int = 2) -> str:
    """€1.234,56"""
    return apply_format(amount, CurrencyFormat.euro(), decimals)


def format_rupee(amount: float, decimals: int = 2) -> str:
    """₹1,234.56"""
    return apply_format(amount, CurrencyFormat.rupee(), decimals)


def format_yuan(amount: float, decimals: int = 2) -> str:
    """¥1,234.56"""
    return apply_format(amount, CurrencyFormat.yuan(), decimals)


def format_won(amount: float, decimals: int = 0) -> str:
    """₩1,234"""
    return apply_format(amount, CurrencyFormat.won(), decimals)


def format_international(amount: float, decimals: int = 2, symbol: str = "$") -> str:
    """Dollar-style grouping behind an arbitrary ``symbol``."""
    return apply_format(amount, CurrencyFormat.international(symbol), decimals)


def format_number(amount: float, decimals: int = 2, locale: str = DEFAULT_LOCALE) -> str:
    """Grouped number using the locale's separators, no symbol."""
    rule = resolve_locale(locale)
    return number_format(amount, decimals, rule.decimal_sep, rule.thousands_sep)


def format_compact(amount: float, decimals: int = 1) -> str:
    """
    Short form for dashboards: ``1,2K``, ``1,5M``.

    Values of at least one million are divided by 1e6 and suffixed ``M``,
    values of at least one thousand by 1e3 and suffixed ``K``.  Brazilian
    separators; negatives keep a leading ``-``.
    """
    magnitude = abs(amount)
    sign = "-" if amount < 0 else ""

    if magnitude >= 1_000_000:
        return f"{sign}{number_format(magnitude / 1_000_000, decimals, ',', '.')}M"
    if magnitude >= 1_000:
        return f"{sign}{number_format(magnitude / 1_000, decimals, ',', '.')}K"
    return f"{sign}{number_format(magnitude, decimals, ',', '.')}"
