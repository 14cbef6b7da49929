"""Value formatters for display."""

from decimal import Decimal


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format decimal as Brazilian currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    negative = value < 0
    value = abs(value)

    formatted = f"{value:,.2f}"

    # Brazilian format: . for thousands, , for decimals
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def format_percentage(value: Decimal, decimals: int = 2) -> str:
    """
    Format a percentage value.

    Args:
        value: Decimal value (e.g., 7.5 for 7.5%)
        decimals: Number of decimal places

    Returns:
        Formatted string like "7,50%"
    """
    formatted = f"{value:.{decimals}f}".replace(".", ",")
    return f"{formatted}%"


def format_number(value: Decimal, decimals: int = 2) -> str:
    """Format a plain number with a decimal comma ("12,50")."""
    return f"{value:.{decimals}f}".replace(".", ",")
