"""Decimal helpers for currency arithmetic."""

from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
CENTAVO = Decimal("0.01")


def arredondar(valor: Decimal) -> Decimal:
    """Round a monetary value to cents (half up, as the payslip shows it)."""
    return Decimal(valor).quantize(CENTAVO, rounding=ROUND_HALF_UP)


def somar(valores) -> Decimal:
    """Sum an iterable of Decimals, returning Decimal("0") when empty."""
    return sum(valores, ZERO)
