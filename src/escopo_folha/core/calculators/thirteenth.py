"""13th salary (décimo terceiro) calculator."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from loguru import logger

from escopo_folha.core.calculators.bases import somar_base
from escopo_folha.core.calculators.brackets import calcular_inss, calcular_irrf
from escopo_folha.core.calculators.events import EventListBuilder
from escopo_folha.core.models.enums import (
    BaseIncidencia,
    ParcelaDecimoTerceiro,
    UnidadeReferencia,
)
from escopo_folha.core.models.results import ThirteenthResult
from escopo_folha.core.models.workers import Funcionario
from escopo_folha.core.rules import catalog
from escopo_folha.core.rules.tax_tables import TabelasFiscais, obter_tabelas
from escopo_folha.shared.dates import meses_entre
from escopo_folha.shared.exceptions import ValidationError
from escopo_folha.shared.money import arredondar
from escopo_folha.shared.validators import validar_ano, validar_data, validar_salario

MESES_ANO = 12


def meses_trabalhados_no_ano(admissao: date, ano: int) -> int:
    """Months (twelfths) of 13th salary earned in the year, capped at 12."""
    return min(MESES_ANO, meses_entre(date(ano, 12, 31), admissao) + 1)


class ThirteenthSalaryCalculator:
    """Calculates one installment of the 13th salary.

    The full amount is ``salary / 12 * months worked``. The first
    installment pays half of it without deductions. The second and single
    installments pay the full amount and withhold INSS/IRRF on it; the
    second also deducts what was advanced in the first.
    """

    def __init__(
        self,
        trabalhador: Funcionario,
        ano: int,
        parcela: Union[ParcelaDecimoTerceiro, str],
        tabelas: Optional[TabelasFiscais] = None,
    ):
        self.trabalhador = trabalhador
        self.ano = ano
        self.parcela = parcela
        self.tabelas = tabelas or obter_tabelas()

    def calculate(self) -> ThirteenthResult:
        salario = validar_salario(self.trabalhador.salario_base)
        admissao = validar_data(self.trabalhador.data_admissao, "Data de admissão")
        ano = validar_ano(self.ano)
        parcela = self._parcela()
        if admissao > date(ano, 12, 31):
            raise ValidationError(
                f"Admissão em {admissao:%d/%m/%Y} posterior ao ano de referência {ano}"
            )

        meses = meses_trabalhados_no_ano(admissao, ano)
        valor_integral = arredondar(salario / MESES_ANO * meses)
        primeira_parcela = valor_primeira_parcela(valor_integral)

        builder = EventListBuilder()

        if parcela == ParcelaDecimoTerceiro.PRIMEIRA:
            builder.provento(
                catalog.DECIMO_TERCEIRO_PRIMEIRA,
                primeira_parcela,
                meses,
                UnidadeReferencia.AVOS,
            )
        elif parcela == ParcelaDecimoTerceiro.SEGUNDA:
            builder.provento(
                catalog.DECIMO_TERCEIRO_INTEGRAL,
                valor_integral,
                meses,
                UnidadeReferencia.AVOS,
            )
            builder.desconto(catalog.DECIMO_TERCEIRO_ADIANTADO, primeira_parcela)
        else:
            builder.provento(
                catalog.DECIMO_TERCEIRO_UNICA,
                valor_integral,
                meses,
                UnidadeReferencia.AVOS,
            )

        # Withholding is on the full amount, only when it is settled
        base_inss = somar_base(builder.eventos, BaseIncidencia.INSS)
        base_irrf = somar_base(builder.eventos, BaseIncidencia.IRRF)

        inss = calcular_inss(base_inss, self.tabelas, socio=self.trabalhador.is_socio)
        if inss.valor > 0:
            builder.desconto(
                catalog.INSS_DECIMO_TERCEIRO,
                inss.valor,
                inss.aliquota,
                UnidadeReferencia.PERCENTUAL,
            )

        irrf = calcular_irrf(
            base_irrf, self.trabalhador.dependentes_irrf, inss.valor, self.tabelas
        )
        if irrf.valor > 0:
            builder.desconto(
                catalog.IRRF_DECIMO_TERCEIRO,
                irrf.valor,
                irrf.aliquota,
                UnidadeReferencia.PERCENTUAL,
            )

        logger.debug(
            "13th {} {}: {}/12 of {} = {}, INSS {}, IRRF {}",
            ano,
            parcela.value,
            meses,
            salario,
            valor_integral,
            inss.valor,
            irrf.valor,
        )
        return builder.build(
            ThirteenthResult,
            base_inss=base_inss,
            base_irrf=base_irrf,
            valor_inss=inss.valor,
            valor_irrf=irrf.valor,
            ano=ano,
            parcela=parcela,
            meses_trabalhados=meses,
            valor_integral=valor_integral,
        )

    def _parcela(self) -> ParcelaDecimoTerceiro:
        try:
            return ParcelaDecimoTerceiro(self.parcela)
        except ValueError:
            raise ValidationError(f"Parcela do 13º inválida: {self.parcela!r}") from None


def valor_primeira_parcela(valor_integral: Decimal) -> Decimal:
    """First installment: half of the full amount."""
    return arredondar(valor_integral / 2)


def calculate_thirteenth(
    trabalhador: Funcionario,
    ano: int,
    parcela: Union[ParcelaDecimoTerceiro, str],
    tabelas: Optional[TabelasFiscais] = None,
) -> ThirteenthResult:
    """Convenience function to calculate a 13th salary installment.

    Args:
        trabalhador: Employee or partner
        ano: Reference year
        parcela: primeira, segunda or unica
        tabelas: Tax tables (default: ANO_PADRAO)

    Returns:
        ThirteenthResult
    """
    return ThirteenthSalaryCalculator(trabalhador, ano, parcela, tabelas).calculate()
