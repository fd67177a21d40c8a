"""
Money display strings.

CLDR-driven through Babel, so symbol placement and grouping follow the
locale: 1234.5 USD -> "$1,234.50", CAD -> "CA$1,234.50" in en_US.
"""

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from babel.numbers import format_currency as babel_format_currency
from babel.numbers import format_decimal, get_currency_precision, get_currency_symbol

from .config import settings

logger = logging.getLogger(__name__)

_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")

INFINITY = "∞"
NOT_A_NUMBER = "NaN"


def _quantize(amount: float, digits: int) -> Decimal:
    """Round half away from zero to the currency's minor unit, like browser Intl."""
    exponent = Decimal(1).scaleb(-digits)
    return Decimal(str(amount)).quantize(exponent, rounding=ROUND_HALF_UP)


def _non_finite(amount: float, symbol: str, suffix: str = "") -> str:
    """inf -> "$∞", -inf -> "-$∞", nan -> "NaN"."""
    if math.isnan(amount):
        return f"{NOT_A_NUMBER} {suffix}".rstrip()
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{INFINITY} {suffix}".rstrip()


def format_currency(amount: float, currency: str, locale: Optional[str] = None) -> str:
    """
    Format amount as money in the given currency.

    Deterministic for a given (amount, currency, locale). A currency code that
    isn't three letters can't be looked up, so the amount is shown as a plain
    two-decimal number followed by whatever code was given. Infinite and NaN
    amounts (overflowed quotes) render as "$∞" and "NaN" instead of raising.
    """
    locale = locale or settings.CURRENCY_LOCALE
    code = (currency or "").strip().upper()

    if not _CURRENCY_CODE.match(code):
        logger.warning(f"Not a currency code: {currency!r}, formatting as plain number")
        if not math.isfinite(amount):
            return _non_finite(amount, "", suffix=currency)
        number = format_decimal(_quantize(amount, 2), format="#,##0.00", locale=locale)
        return f"{number} {currency}".rstrip()

    if not math.isfinite(amount):
        logger.warning(f"Non-finite amount {amount} {code}")
        return _non_finite(amount, get_currency_symbol(code, locale=locale))

    value = _quantize(amount, get_currency_precision(code))
    return babel_format_currency(value, code, locale=locale)
