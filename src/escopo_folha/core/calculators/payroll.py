"""Monthly payroll calculator."""

from decimal import Decimal
from typing import Optional

from loguru import logger

from escopo_folha.core.calculators.automatic import resolver_eventos
from escopo_folha.core.calculators.bases import somar_base
from escopo_folha.core.calculators.brackets import calcular_inss, calcular_irrf
from escopo_folha.core.calculators.events import EventListBuilder
from escopo_folha.core.models.enums import BaseIncidencia, UnidadeReferencia
from escopo_folha.core.models.results import ComputedEvent, PayrollResult
from escopo_folha.core.models.workers import Funcionario
from escopo_folha.core.rules import catalog
from escopo_folha.core.rules.tax_tables import TabelasFiscais, obter_tabelas
from escopo_folha.shared.money import ZERO, arredondar
from escopo_folha.shared.validators import validar_salario, validar_valor

DIAS_MES_COMERCIAL = Decimal("30")


def evento_salario_base(trabalhador: Funcionario) -> ComputedEvent:
    """Build the opening line of a payslip (base salary or pro-labore, 30 days)."""
    salario = validar_salario(trabalhador.salario_base)
    rubrica = catalog.PRO_LABORE if trabalhador.is_socio else catalog.SALARIO_BASE
    return ComputedEvent(
        rubrica=rubrica,
        referencia=DIAS_MES_COMERCIAL,
        unidade=UnidadeReferencia.DIAS,
        provento=salario,
    )


class PayrollCalculator:
    """Calculates a monthly payslip.

    Steps:
    - Resolve automatic lines (overtime, premiums, family allowance...)
    - INSS on the INSS base (progressive table, or flat rate for partners)
    - IRRF on the IRRF base net of INSS and dependents
    - FGTS on the FGTS base (informational, employer-side)
    """

    def __init__(
        self,
        trabalhador: Funcionario,
        eventos: list[ComputedEvent],
        tabelas: Optional[TabelasFiscais] = None,
    ):
        self.trabalhador = trabalhador
        self.eventos = eventos
        self.tabelas = tabelas or obter_tabelas()

    def calculate(self) -> PayrollResult:
        """Run the calculation and return the payslip."""
        self._validate()
        socio = self.trabalhador.is_socio

        # INSS/IRRF lines from a previous run are always recomputed
        eventos = [
            e for e in self.eventos if e.rubrica.codigo not in catalog.CODIGOS_CALCULADOS
        ]
        eventos = resolver_eventos(eventos, self.trabalhador, self.tabelas)
        builder = EventListBuilder(eventos)

        base_inss = somar_base(eventos, BaseIncidencia.INSS)
        inss = calcular_inss(base_inss, self.tabelas, socio=socio)
        if inss.valor > 0:
            builder.desconto(
                catalog.INSS, inss.valor, inss.aliquota, UnidadeReferencia.PERCENTUAL
            )

        base_irrf = somar_base(eventos, BaseIncidencia.IRRF)
        irrf = calcular_irrf(
            base_irrf, self.trabalhador.dependentes_irrf, inss.valor, self.tabelas
        )
        if irrf.valor > 0:
            builder.desconto(
                catalog.IRRF, irrf.valor, irrf.aliquota, UnidadeReferencia.PERCENTUAL
            )

        if socio:
            base_fgts = ZERO
            valor_fgts = ZERO
        else:
            base_fgts = somar_base(eventos, BaseIncidencia.FGTS)
            valor_fgts = arredondar(base_fgts * self.tabelas.aliquota_fgts)

        result = builder.build(
            PayrollResult,
            base_inss=base_inss,
            base_irrf=base_irrf,
            base_fgts=base_fgts,
            valor_inss=inss.valor,
            valor_irrf=irrf.valor,
            valor_fgts=valor_fgts,
            socio=socio,
        )
        logger.debug(
            "Payroll {}: INSS {} on {}, IRRF {} on {}, FGTS {} on {}, net {}",
            self.trabalhador.nome or "-",
            inss.valor,
            base_inss,
            irrf.valor,
            base_irrf,
            valor_fgts,
            base_fgts,
            result.liquido,
        )
        return result

    def _validate(self) -> None:
        validar_salario(self.trabalhador.salario_base)
        for evento in self.eventos:
            campo = f"Rubrica {evento.rubrica.codigo}"
            validar_valor(evento.provento, f"{campo}: provento")
            validar_valor(evento.desconto, f"{campo}: desconto")
            validar_valor(evento.referencia, f"{campo}: referência")


def calculate_payroll(
    trabalhador: Funcionario,
    eventos: Optional[list[ComputedEvent]] = None,
    tabelas: Optional[TabelasFiscais] = None,
) -> PayrollResult:
    """Convenience function to calculate a monthly payslip.

    Args:
        trabalhador: Employee or partner
        eventos: Lines of the period (default: base salary only)
        tabelas: Tax tables (default: ANO_PADRAO)

    Returns:
        PayrollResult with INSS/IRRF lines appended
    """
    if eventos is None:
        eventos = [evento_salario_base(trabalhador)]
    return PayrollCalculator(trabalhador, eventos, tabelas).calculate()
