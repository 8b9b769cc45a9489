"""
Currency precision and display formatting for PayoffLab.

The simulator works in floats; this module is only used when amounts are
shown to people (CLI output, summaries).
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum


class RoundingPolicy(Enum):
    """Rounding policies for displayed amounts."""

    BANKERS = ROUND_HALF_EVEN
    HALF_UP = ROUND_HALF_UP


class Currency:
    """
    Currency definition with precision and rounding rules.

    Attributes:
        code: ISO currency code (e.g., 'EUR', 'USD', 'JPY')
        decimals: Number of decimal places for this currency
        rounding: Rounding policy for display
    """

    def __init__(
        self,
        code: str,
        decimals: int = 2,
        rounding: RoundingPolicy = RoundingPolicy.HALF_UP,
    ):
        self.code = code.upper()
        self.decimals = decimals
        self.rounding = rounding

    def quantize(self, amount: Decimal | float | int | str) -> Decimal:
        """Quantize amount to currency precision."""
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        quantum = Decimal("1").scaleb(-self.decimals)  # e.g., 0.01 for 2 dp, 1 for 0 dp
        return amount.quantize(quantum, rounding=self.rounding.value)

    def format(self, amount: Decimal | float | int | str) -> str:
        """Format with thousands separators, e.g. ``1,234.56 USD``."""
        value = self.quantize(amount)
        return f"{value:,.{self.decimals}f} {self.code}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency('{self.code}', decimals={self.decimals})"


# Standard currency definitions
USD = Currency("USD", decimals=2)
EUR = Currency("EUR", decimals=2)
GBP = Currency("GBP", decimals=2)
JPY = Currency("JPY", decimals=0)

# Currency registry
CURRENCIES: dict[str, Currency] = {
    "USD": USD,
    "EUR": EUR,
    "GBP": GBP,
    "JPY": JPY,
}


def get_currency(code: str) -> Currency:
    """Get currency by code."""
    code = code.upper()
    if code not in CURRENCIES:
        # Default to 2 decimal places for unknown currencies
        return Currency(code, decimals=2)
    return CURRENCIES[code]


def format_amount(value: Decimal | float | int | str, currency_code: str = "USD") -> str:
    """Format an amount for display in the given currency."""
    return get_currency(currency_code).format(value)
