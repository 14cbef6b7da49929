"""Payslip event list builder."""

from decimal import Decimal
from typing import Iterable, Optional

from escopo_folha.core.models.enums import UnidadeReferencia
from escopo_folha.core.models.results import CalculationResult, ComputedEvent
from escopo_folha.core.models.rubrica import Rubrica
from escopo_folha.shared.money import ZERO, arredondar


class EventListBuilder:
    """Collects computed lines and turns them into a result.

    Amounts added through :meth:`provento` and :meth:`desconto` are rounded
    to cents, so the totals of the final result are exact sums of what the
    payslip shows.
    """

    def __init__(self, eventos: Optional[Iterable[ComputedEvent]] = None):
        self.eventos: list[ComputedEvent] = list(eventos or [])

    def add(self, evento: ComputedEvent) -> ComputedEvent:
        self.eventos.append(evento)
        return evento

    def provento(
        self,
        rubrica: Rubrica,
        valor: Decimal,
        referencia: Decimal = ZERO,
        unidade: UnidadeReferencia = UnidadeReferencia.NENHUMA,
    ) -> ComputedEvent:
        """Add an earning line."""
        return self.add(
            ComputedEvent(
                rubrica=rubrica,
                referencia=Decimal(referencia),
                unidade=unidade,
                provento=arredondar(valor),
            )
        )

    def desconto(
        self,
        rubrica: Rubrica,
        valor: Decimal,
        referencia: Decimal = ZERO,
        unidade: UnidadeReferencia = UnidadeReferencia.NENHUMA,
    ) -> ComputedEvent:
        """Add a deduction line."""
        return self.add(
            ComputedEvent(
                rubrica=rubrica,
                referencia=Decimal(referencia),
                unidade=unidade,
                desconto=arredondar(valor),
            )
        )

    def build(self, result_cls: type[CalculationResult] = CalculationResult, **kwargs):
        """Create the result with totals derived from the collected lines."""
        return result_cls.from_events(self.eventos, **kwargs)
