"""Input validators for payroll calculations.

All validators raise :class:`ValidationError` so callers get a single error
type regardless of which input was wrong.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from escopo_folha.shared.exceptions import ValidationError

DIAS_FERIAS_MINIMO = 1
DIAS_FERIAS_MAXIMO = 30


def validar_valor(valor: Any, campo: str) -> Decimal:
    """
    Validate that a monetary value is present, numeric and non-negative.

    Args:
        valor: Value to check (Decimal, int or numeric string)
        campo: Field name used in the error message

    Returns:
        The value as Decimal

    Raises:
        ValidationError: If the value is missing, not numeric or negative
    """
    if valor is None or isinstance(valor, bool):
        raise ValidationError(f"{campo} não informado")

    try:
        numero = valor if isinstance(valor, Decimal) else Decimal(str(valor))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"{campo} inválido: {valor!r}") from e

    if not numero.is_finite():
        raise ValidationError(f"{campo} inválido: {valor!r}")
    if numero < 0:
        raise ValidationError(f"{campo} não pode ser negativo: {numero}")
    return numero


def validar_salario(salario: Any) -> Decimal:
    """Validate a base salary (or pro-labore)."""
    return validar_valor(salario, "Salário base")


def validar_data(valor: Any, campo: str) -> date:
    """Validate that a value is a real date."""
    if isinstance(valor, datetime):
        return valor.date()
    if not isinstance(valor, date):
        raise ValidationError(f"{campo} inválida: {valor!r}")
    return valor


def validar_ano(ano: Any) -> int:
    """Validate a reference year (1 to 9999, as ``datetime.date`` accepts)."""
    if isinstance(ano, bool) or not isinstance(ano, int):
        raise ValidationError(f"Ano de referência inválido: {ano!r}")
    if not date.min.year <= ano <= date.max.year:
        raise ValidationError(f"Ano de referência fora do intervalo: {ano}")
    return ano


def validar_dias_ferias(dias: Any) -> int:
    """Validate the number of vacation days (1 to 30)."""
    if isinstance(dias, bool) or not isinstance(dias, int):
        raise ValidationError(f"Dias de férias inválidos: {dias!r}")
    if not DIAS_FERIAS_MINIMO <= dias <= DIAS_FERIAS_MAXIMO:
        raise ValidationError(
            f"Dias de férias devem estar entre {DIAS_FERIAS_MINIMO} e "
            f"{DIAS_FERIAS_MAXIMO}: {dias}"
        )
    return dias
