"""Progressive bracket lookup for INSS and IRRF."""

from decimal import Decimal

from escopo_folha.core.models.brackets import BracketResult, BracketTable, Faixa
from escopo_folha.core.rules.tax_tables import TabelasFiscais
from escopo_folha.shared.money import ZERO, arredondar

CEM = Decimal("100")
SEM_IMPOSTO = BracketResult(ZERO, ZERO)


def selecionar_faixa(base: Decimal, tabela: BracketTable) -> Faixa:
    """Pick the first bracket whose limit covers the base, else the last one."""
    for faixa in tabela.faixas:
        if faixa.limite is None or base <= faixa.limite:
            return faixa
    return tabela.faixa_superior


def aplicar_tabela(base: Decimal, tabela: BracketTable) -> BracketResult:
    """Apply a progressive table to a base.

    ``valor = base * aliquota - deducao`` for the selected bracket, clamped
    at zero and rounded to cents after the subtraction. Above the highest
    limit of a table with a fixed ceiling, the ceiling value is returned
    whatever the base.

    Args:
        base: Calculation base
        tabela: Bracket table

    Returns:
        BracketResult(valor, aliquota) with the nominal rate in percent
    """
    if base <= 0:
        return SEM_IMPOSTO

    if tabela.valor_teto is not None and base > tabela.limite_maximo:
        return BracketResult(tabela.valor_teto, tabela.faixa_superior.aliquota * CEM)

    faixa = selecionar_faixa(base, tabela)
    valor = arredondar(base * faixa.aliquota - faixa.deducao)
    return BracketResult(max(valor, ZERO), faixa.aliquota * CEM)


def calcular_inss(
    base: Decimal, tabelas: TabelasFiscais, socio: bool = False
) -> BracketResult:
    """Calculate the INSS contribution.

    Employees use the progressive table. Partners (pro-labore) pay a flat
    rate capped at the table's ceiling value.
    """
    if not socio:
        return aplicar_tabela(base, tabelas.inss)

    if base <= 0:
        return SEM_IMPOSTO
    valor = min(arredondar(base * tabelas.aliquota_inss_socio), tabelas.teto_inss)
    return BracketResult(valor, tabelas.aliquota_inss_socio * CEM)


def calcular_irrf(
    base: Decimal,
    dependentes: int,
    inss: Decimal,
    tabelas: TabelasFiscais,
) -> BracketResult:
    """Calculate withheld income tax.

    The base is reduced by the INSS withheld and by the fixed deduction per
    IRRF dependent before the table is applied.

    Args:
        base: Gross IRRF base
        dependentes: Number of IRRF-eligible dependents
        inss: INSS withheld on the same payment
        tabelas: Tax tables in force

    Returns:
        BracketResult(valor, aliquota)
    """
    base_apos_inss = base - inss
    if base_apos_inss <= 0:
        return SEM_IMPOSTO

    base_liquida = base_apos_inss - dependentes * tabelas.deducao_dependente_irrf
    return aplicar_tabela(base_liquida, tabelas.irrf)
