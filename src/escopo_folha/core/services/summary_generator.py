"""Payroll summary (resumo da folha) over several calculation results."""

from typing import Iterable

from escopo_folha.core.models.results import (
    CalculationResult,
    PayrollResult,
    ResumoFolha,
    TerminationResult,
    ThirteenthResult,
    VacationResult,
)
from escopo_folha.shared.money import ZERO


def tipo_resultado(resultado: CalculationResult) -> str:
    """Label used to group results in the summary."""
    if isinstance(resultado, PayrollResult):
        return "pro_labore" if resultado.socio else "folha"
    if isinstance(resultado, ThirteenthResult):
        return "decimo_terceiro"
    if isinstance(resultado, VacationResult):
        return "ferias"
    if isinstance(resultado, TerminationResult):
        return "rescisao"
    return "outros"


class PayrollSummaryGenerator:
    """Adds up payslips, 13th salaries, vacations and terminations of a period."""

    def __init__(self, resultados: Iterable[CalculationResult]):
        self.resultados = list(resultados)

    def generate(self) -> ResumoFolha:
        """Generate the period summary."""
        quantidade_por_tipo: dict[str, int] = {}
        totais = {
            "total_proventos": ZERO,
            "total_descontos": ZERO,
            "total_liquido": ZERO,
            "total_inss": ZERO,
            "total_irrf": ZERO,
            "total_fgts": ZERO,
            "total_base_inss": ZERO,
            "total_base_irrf": ZERO,
            "total_base_fgts": ZERO,
        }

        for resultado in self.resultados:
            tipo = tipo_resultado(resultado)
            quantidade_por_tipo[tipo] = quantidade_por_tipo.get(tipo, 0) + 1

            totais["total_proventos"] += resultado.total_proventos
            totais["total_descontos"] += resultado.total_descontos
            totais["total_liquido"] += resultado.liquido
            totais["total_inss"] += resultado.valor_inss
            totais["total_irrf"] += resultado.valor_irrf
            totais["total_fgts"] += resultado.valor_fgts
            totais["total_base_inss"] += resultado.base_inss
            totais["total_base_irrf"] += resultado.base_irrf
            totais["total_base_fgts"] += resultado.base_fgts

        return ResumoFolha(
            quantidade=len(self.resultados),
            quantidade_por_tipo=quantidade_por_tipo,
            **totais,
        )


def generate_summary(resultados: Iterable[CalculationResult]) -> ResumoFolha:
    """Convenience function to summarize calculation results.

    Args:
        resultados: Results of any calculator

    Returns:
        ResumoFolha with totals and a count per result kind
    """
    return PayrollSummaryGenerator(resultados).generate()
