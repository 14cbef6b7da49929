"""Automatic payslip lines resolved from the earning-line rule."""

from decimal import Decimal
from typing import Optional

from loguru import logger

from escopo_folha.core.models.enums import BaseIncidencia, TipoRegra, UnidadeReferencia
from escopo_folha.core.models.results import ComputedEvent
from escopo_folha.core.models.workers import Funcionario
from escopo_folha.core.calculators.bases import somar_base
from escopo_folha.core.rules.tax_tables import TabelasFiscais
from escopo_folha.shared.money import ZERO, arredondar

CEM = Decimal("100")


def _com_valor(
    evento: ComputedEvent,
    valor: Decimal,
    referencia: Decimal,
    unidade: UnidadeReferencia,
) -> ComputedEvent:
    """Copy the event with the computed amount on the side of its kind."""
    valor = arredondar(valor)
    return evento.model_copy(
        update={
            "referencia": referencia,
            "unidade": unidade,
            "provento": valor if evento.is_provento else ZERO,
            "desconto": ZERO if evento.is_provento else valor,
        }
    )


def calcular_evento_automatico(
    evento: ComputedEvent,
    trabalhador: Funcionario,
    tabelas: TabelasFiscais,
) -> Optional[ComputedEvent]:
    """Resolve a salary-driven rule (everything except family allowance).

    Hour-based rules read the number of hours from the event reference.

    Returns:
        The recalculated event, or None when the line has no automatic rule
    """
    regra = evento.rubrica.regra
    salario = trabalhador.salario_base
    valor_hora = salario / tabelas.divisor_horas_mensais

    if regra == TipoRegra.DESCONTO_VALE_TRANSPORTE:
        return _com_valor(
            evento,
            salario * tabelas.aliquota_vale_transporte,
            tabelas.aliquota_vale_transporte * CEM,
            UnidadeReferencia.PERCENTUAL,
        )

    if regra == TipoRegra.HORAS_EXTRAS_50:
        horas = evento.referencia
        return _com_valor(
            evento,
            valor_hora * tabelas.adicional_horas_extras_50 * horas,
            horas,
            UnidadeReferencia.HORAS,
        )

    if regra == TipoRegra.ADICIONAL_NOTURNO:
        horas = evento.referencia
        return _com_valor(
            evento,
            valor_hora * tabelas.adicional_noturno * horas,
            horas,
            UnidadeReferencia.HORAS,
        )

    if regra == TipoRegra.PERICULOSIDADE:
        return _com_valor(
            evento,
            salario * tabelas.adicional_periculosidade,
            tabelas.adicional_periculosidade * CEM,
            UnidadeReferencia.PERCENTUAL,
        )

    if regra == TipoRegra.INSALUBRIDADE:
        percentual = evento.rubrica.grau_insalubridade.percentual
        return _com_valor(
            evento,
            tabelas.salario_minimo * percentual,
            percentual * CEM,
            UnidadeReferencia.PERCENTUAL,
        )

    return None


def calcular_salario_familia(
    evento: ComputedEvent,
    trabalhador: Funcionario,
    base_inss: Decimal,
    tabelas: TabelasFiscais,
) -> ComputedEvent:
    """Resolve the family allowance line.

    Due only when the INSS base is within the allowance ceiling and the
    worker has at least one eligible dependent. Partners are not entitled.
    The reference is always the number of eligible dependents.
    """
    dependentes = 0 if trabalhador.is_socio else trabalhador.dependentes_salario_familia
    valor = ZERO
    if dependentes > 0 and base_inss <= tabelas.salario_familia_limite:
        valor = dependentes * tabelas.salario_familia_valor
    return _com_valor(evento, valor, Decimal(dependentes), UnidadeReferencia.DEPENDENTES)


def resolver_eventos(
    eventos: list[ComputedEvent],
    trabalhador: Funcionario,
    tabelas: TabelasFiscais,
) -> list[ComputedEvent]:
    """Recalculate every automatic line of a payslip, keeping line order.

    Salary-driven rules go first; family allowance is resolved afterwards
    because it depends on the INSS base of the other lines.
    """
    resolvidos = [
        calcular_evento_automatico(e, trabalhador, tabelas) or e for e in eventos
    ]

    base_inss = somar_base(
        (e for e in resolvidos if e.rubrica.regra != TipoRegra.SALARIO_FAMILIA),
        BaseIncidencia.INSS,
    )
    resultado = [
        calcular_salario_familia(e, trabalhador, base_inss, tabelas)
        if e.rubrica.regra == TipoRegra.SALARIO_FAMILIA
        else e
        for e in resolvidos
    ]

    logger.debug(
        "Automatic lines resolved: {} of {} (INSS base {})",
        sum(1 for e in eventos if e.rubrica.regra != TipoRegra.GENERICA),
        len(eventos),
        base_inss,
    )
    return resultado
