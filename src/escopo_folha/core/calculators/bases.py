"""Contribution base aggregation."""

from decimal import Decimal
from typing import Iterable

from escopo_folha.core.models.enums import BaseIncidencia
from escopo_folha.core.models.results import ComputedEvent
from escopo_folha.shared.money import ZERO, arredondar, somar


def somar_base(eventos: Iterable[ComputedEvent], base: BaseIncidencia) -> Decimal:
    """Sum the earnings that count toward a contribution base.

    Only earning lines flagged for ``base`` contribute; deduction lines never
    do, whatever their flags.

    Args:
        eventos: Computed payslip lines
        base: INSS, FGTS or IRRF

    Returns:
        Non-negative base rounded to cents
    """
    total = somar(
        e.provento for e in eventos if e.is_provento and e.rubrica.incide(base)
    )
    return max(arredondar(total), ZERO)


def calcular_bases(eventos: list[ComputedEvent]) -> dict[BaseIncidencia, Decimal]:
    """Aggregate all three bases at once."""
    return {base: somar_base(eventos, base) for base in BaseIncidencia}
