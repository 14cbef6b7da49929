"""Termination payout (rescisão) calculator."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from loguru import logger

from escopo_folha.core.calculators.bases import somar_base
from escopo_folha.core.calculators.brackets import calcular_inss, calcular_irrf
from escopo_folha.core.calculators.events import EventListBuilder
from escopo_folha.core.models.enums import (
    BaseIncidencia,
    MotivoRescisao,
    TipoAviso,
    UnidadeReferencia,
)
from escopo_folha.core.models.results import TerminationResult
from escopo_folha.core.models.workers import Funcionario
from escopo_folha.core.rules import catalog
from escopo_folha.core.rules.tax_tables import TabelasFiscais, obter_tabelas
from escopo_folha.shared.dates import dias_no_mes, meses_entre
from escopo_folha.shared.exceptions import ValidationError
from escopo_folha.shared.money import ZERO
from escopo_folha.shared.validators import validar_data, validar_salario, validar_valor

MESES_ANO = 12
DIAS_AVISO = 30
TERCO = Decimal("3")


class TerminationCalculator:
    """Calculates the termination payout (TRCT lines).

    Earnings:
    - Salary balance for the days worked in the termination month
    - Indemnified notice (one salary), only on dismissal without cause
    - Proportional vacation + 1/3 for the current acquisition period
    - Proportional 13th salary for the current year
    - 40% FGTS penalty, only on dismissal without cause

    INSS is withheld separately on the salary balance and on the 13th.
    IRRF is withheld once on balance + vacation + 1/3 + 13th. Notice pay
    and the FGTS penalty stay outside both bases.
    """

    def __init__(
        self,
        trabalhador: Funcionario,
        data_rescisao: date,
        motivo: Union[MotivoRescisao, str],
        aviso: Union[TipoAviso, str],
        saldo_fgts: Decimal = ZERO,
        tabelas: Optional[TabelasFiscais] = None,
    ):
        self.trabalhador = trabalhador
        self.data_rescisao = data_rescisao
        self.motivo = motivo
        self.aviso = aviso
        self.saldo_fgts = saldo_fgts
        self.tabelas = tabelas or obter_tabelas()

    def calculate(self) -> TerminationResult:
        salario = validar_salario(self.trabalhador.salario_base)
        data = validar_data(self.data_rescisao, "Data da rescisão")
        admissao = validar_data(self.trabalhador.data_admissao, "Data de admissão")
        saldo_fgts = validar_valor(self.saldo_fgts, "Saldo do FGTS")
        motivo, aviso = self._motivo_aviso()
        if admissao > data:
            raise ValidationError(
                f"Data da rescisão ({data:%d/%m/%Y}) anterior à admissão "
                f"({admissao:%d/%m/%Y})"
            )
        sem_justa_causa = motivo == MotivoRescisao.DISPENSA_SEM_JUSTA_CAUSA

        builder = EventListBuilder()

        dias_trabalhados = data.day
        saldo = builder.provento(
            catalog.SALDO_SALARIO,
            salario / dias_no_mes(data) * dias_trabalhados,
            dias_trabalhados,
            UnidadeReferencia.DIAS,
        )

        if sem_justa_causa and aviso == TipoAviso.INDENIZADO:
            builder.provento(
                catalog.AVISO_PREVIO_INDENIZADO, salario, DIAS_AVISO, UnidadeReferencia.DIAS
            )

        meses_ferias = meses_entre(data, admissao) % MESES_ANO + 1
        ferias = salario / MESES_ANO * meses_ferias
        builder.provento(
            catalog.FERIAS_PROPORCIONAIS, ferias, meses_ferias, UnidadeReferencia.AVOS
        )
        builder.provento(catalog.TERCO_FERIAS_PROPORCIONAIS, ferias / TERCO)

        meses_decimo = data.month
        decimo = builder.provento(
            catalog.DECIMO_TERCEIRO_PROPORCIONAL,
            salario / MESES_ANO * meses_decimo,
            meses_decimo,
            UnidadeReferencia.AVOS,
        )

        socio = self.trabalhador.is_socio
        base_inss_saldo = somar_base([saldo], BaseIncidencia.INSS)
        base_inss_decimo = somar_base([decimo], BaseIncidencia.INSS)
        inss_saldo = calcular_inss(base_inss_saldo, self.tabelas, socio=socio)
        inss_decimo = calcular_inss(base_inss_decimo, self.tabelas, socio=socio)
        if inss_saldo.valor > 0:
            builder.desconto(
                catalog.INSS_SALDO_SALARIO,
                inss_saldo.valor,
                inss_saldo.aliquota,
                UnidadeReferencia.PERCENTUAL,
            )
        if inss_decimo.valor > 0:
            builder.desconto(
                catalog.INSS_DECIMO_TERCEIRO_RESCISAO,
                inss_decimo.valor,
                inss_decimo.aliquota,
                UnidadeReferencia.PERCENTUAL,
            )
        total_inss = inss_saldo.valor + inss_decimo.valor

        base_irrf = somar_base(builder.eventos, BaseIncidencia.IRRF)
        irrf = calcular_irrf(
            base_irrf, self.trabalhador.dependentes_irrf, total_inss, self.tabelas
        )
        if irrf.valor > 0:
            builder.desconto(
                catalog.IRRF_RESCISAO, irrf.valor, irrf.aliquota, UnidadeReferencia.PERCENTUAL
            )

        multa = ZERO
        if sem_justa_causa and saldo_fgts > 0:
            multa = builder.provento(
                catalog.MULTA_FGTS,
                saldo_fgts * self.tabelas.multa_fgts,
                self.tabelas.multa_fgts * 100,
                UnidadeReferencia.PERCENTUAL,
            ).provento

        logger.debug(
            "Termination on {} ({}, notice {}): INSS {}, IRRF {} on {}, FGTS penalty {}",
            data,
            motivo.value,
            aviso.value,
            total_inss,
            irrf.valor,
            base_irrf,
            multa,
        )
        return builder.build(
            TerminationResult,
            base_inss=base_inss_saldo + base_inss_decimo,
            base_irrf=base_irrf,
            valor_inss=total_inss,
            valor_irrf=irrf.valor,
            data_rescisao=data,
            motivo=motivo,
            aviso=aviso,
            saldo_fgts=saldo_fgts,
            multa_fgts=multa,
        )

    def _motivo_aviso(self) -> tuple[MotivoRescisao, TipoAviso]:
        try:
            motivo = MotivoRescisao(self.motivo)
        except ValueError:
            raise ValidationError(f"Motivo de rescisão inválido: {self.motivo!r}") from None
        try:
            aviso = TipoAviso(self.aviso)
        except ValueError:
            raise ValidationError(f"Tipo de aviso prévio inválido: {self.aviso!r}") from None
        return motivo, aviso


def calculate_termination(
    trabalhador: Funcionario,
    data_rescisao: date,
    motivo: Union[MotivoRescisao, str],
    aviso: Union[TipoAviso, str],
    saldo_fgts: Decimal = ZERO,
    tabelas: Optional[TabelasFiscais] = None,
) -> TerminationResult:
    """Convenience function to calculate a termination payout."""
    return TerminationCalculator(
        trabalhador, data_rescisao, motivo, aviso, saldo_fgts, tabelas
    ).calculate()
