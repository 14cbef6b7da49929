"""Vacation pay (férias) calculator."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from loguru import logger

from escopo_folha.core.calculators.bases import somar_base
from escopo_folha.core.calculators.brackets import calcular_inss, calcular_irrf
from escopo_folha.core.calculators.events import EventListBuilder
from escopo_folha.core.models.enums import BaseIncidencia, UnidadeReferencia
from escopo_folha.core.models.results import VacationResult
from escopo_folha.core.models.workers import Funcionario
from escopo_folha.core.rules import catalog
from escopo_folha.core.rules.tax_tables import TabelasFiscais, obter_tabelas
from escopo_folha.shared.validators import (
    validar_data,
    validar_dias_ferias,
    validar_salario,
)

DIAS_MES_COMERCIAL = Decimal("30")
DIAS_ABONO = 10
TERCO = Decimal("3")


class VacationCalculator:
    """Calculates vacation pay.

    Only vacation pay and its constitutional 1/3 bonus are taxed. The sold
    days (abono pecuniário) with their own 1/3 and the 13th salary advance
    are paid gross, outside the INSS/IRRF bases. The advance is deducted in
    the December 13th calculation, not here.
    """

    def __init__(
        self,
        trabalhador: Funcionario,
        data_inicio: date,
        dias: int,
        vender_dias: bool = False,
        adiantar_decimo_terceiro: bool = False,
        tabelas: Optional[TabelasFiscais] = None,
    ):
        self.trabalhador = trabalhador
        self.data_inicio = data_inicio
        self.dias = dias
        self.vender_dias = vender_dias
        self.adiantar_decimo_terceiro = adiantar_decimo_terceiro
        self.tabelas = tabelas or obter_tabelas()

    def calculate(self) -> VacationResult:
        salario = validar_salario(self.trabalhador.salario_base)
        inicio = validar_data(self.data_inicio, "Data de início das férias")
        dias = validar_dias_ferias(self.dias)
        valor_dia = salario / DIAS_MES_COMERCIAL

        builder = EventListBuilder()

        ferias = valor_dia * dias
        builder.provento(catalog.FERIAS, ferias, dias, UnidadeReferencia.DIAS)
        builder.provento(catalog.TERCO_FERIAS, ferias / TERCO)

        if self.vender_dias:
            abono = valor_dia * DIAS_ABONO
            builder.provento(
                catalog.ABONO_PECUNIARIO, abono, DIAS_ABONO, UnidadeReferencia.DIAS
            )
            builder.provento(catalog.TERCO_ABONO, abono / TERCO)

        if self.adiantar_decimo_terceiro:
            builder.provento(catalog.ADIANTAMENTO_DECIMO_TERCEIRO, salario / 2)

        base_inss = somar_base(builder.eventos, BaseIncidencia.INSS)
        base_irrf = somar_base(builder.eventos, BaseIncidencia.IRRF)

        inss = calcular_inss(base_inss, self.tabelas, socio=self.trabalhador.is_socio)
        if inss.valor > 0:
            builder.desconto(
                catalog.INSS_FERIAS, inss.valor, inss.aliquota, UnidadeReferencia.PERCENTUAL
            )

        irrf = calcular_irrf(
            base_irrf, self.trabalhador.dependentes_irrf, inss.valor, self.tabelas
        )
        if irrf.valor > 0:
            builder.desconto(
                catalog.IRRF_FERIAS, irrf.valor, irrf.aliquota, UnidadeReferencia.PERCENTUAL
            )

        logger.debug(
            "Vacation from {}: {} days, INSS {} on {}, IRRF {} on {}",
            inicio,
            dias,
            inss.valor,
            base_inss,
            irrf.valor,
            base_irrf,
        )
        return builder.build(
            VacationResult,
            base_inss=base_inss,
            base_irrf=base_irrf,
            valor_inss=inss.valor,
            valor_irrf=irrf.valor,
            data_inicio=inicio,
            data_fim=inicio + timedelta(days=dias - 1),
            data_retorno=inicio + timedelta(days=dias),
            dias=dias,
            vender_dias=self.vender_dias,
            adiantar_decimo_terceiro=self.adiantar_decimo_terceiro,
        )


def calculate_vacation(
    trabalhador: Funcionario,
    data_inicio: date,
    dias: int,
    vender_dias: bool = False,
    adiantar_decimo_terceiro: bool = False,
    tabelas: Optional[TabelasFiscais] = None,
) -> VacationResult:
    """Convenience function to calculate vacation pay."""
    return VacationCalculator(
        trabalhador,
        data_inicio,
        dias,
        vender_dias=vender_dias,
        adiantar_decimo_terceiro=adiantar_decimo_terceiro,
        tabelas=tabelas,
    ).calculate()
