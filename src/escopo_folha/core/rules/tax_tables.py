"""Payroll tax tables, versioned by tax year.

Each year is an immutable :class:`TabelasFiscais` so that payslips of past
periods can be recalculated with the values in force at the time.

Sources:
- INSS: Portaria Interministerial MPS/MF nº 2/2024 and nº 6/2025
- IRRF: Lei 14.848/2024 (2024) and MP 1.294/2025 (2025)
- Salário-família and salário mínimo: same portarias / decretos
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from escopo_folha.core.models.brackets import BracketTable
from escopo_folha.shared.exceptions import ConfigurationError


class TabelasFiscais(BaseModel):
    """Tax tables and payroll constants for one year."""

    ano: int = Field(..., description="Tax year the values are in force")
    inss: BracketTable = Field(..., description="Progressive INSS table + ceiling")
    irrf: BracketTable = Field(..., description="Monthly IRRF table")
    deducao_dependente_irrf: Decimal = Field(..., description="IRRF deduction per dependent")
    salario_familia_limite: Decimal = Field(..., description="Max remuneration for family allowance")
    salario_familia_valor: Decimal = Field(..., description="Family allowance per dependent")
    salario_minimo: Decimal = Field(..., description="National minimum wage")

    aliquota_inss_socio: Decimal = Field(default=Decimal("0.11"))
    aliquota_fgts: Decimal = Field(default=Decimal("0.08"))
    multa_fgts: Decimal = Field(default=Decimal("0.40"))
    divisor_horas_mensais: Decimal = Field(default=Decimal("220"))
    adicional_horas_extras_50: Decimal = Field(default=Decimal("1.5"))
    adicional_noturno: Decimal = Field(default=Decimal("0.20"))
    adicional_periculosidade: Decimal = Field(default=Decimal("0.30"))
    aliquota_vale_transporte: Decimal = Field(default=Decimal("0.06"))

    @property
    def teto_inss(self) -> Decimal:
        """Maximum INSS contribution (flat ceiling value)."""
        return self.inss.valor_teto or Decimal("0")

    model_config = {"frozen": True}


# === 2024 ===

TABELAS_2024 = TabelasFiscais(
    ano=2024,
    inss=BracketTable.from_tuples(
        [
            (Decimal("1412.00"), Decimal("0.075"), Decimal("0")),
            (Decimal("2666.68"), Decimal("0.09"), Decimal("21.18")),
            (Decimal("4000.03"), Decimal("0.12"), Decimal("101.18")),
            (Decimal("7786.02"), Decimal("0.14"), Decimal("181.18")),
        ],
        valor_teto=Decimal("908.85"),
    ),
    irrf=BracketTable.from_tuples(
        [
            (Decimal("2259.20"), Decimal("0"), Decimal("0")),
            (Decimal("2826.65"), Decimal("0.075"), Decimal("169.44")),
            (Decimal("3751.05"), Decimal("0.15"), Decimal("381.44")),
            (Decimal("4664.68"), Decimal("0.225"), Decimal("662.77")),
            (None, Decimal("0.275"), Decimal("896.00")),
        ]
    ),
    deducao_dependente_irrf=Decimal("189.59"),
    salario_familia_limite=Decimal("1819.26"),
    salario_familia_valor=Decimal("62.04"),
    salario_minimo=Decimal("1412.00"),
)

# === 2025 ===

TABELAS_2025 = TabelasFiscais(
    ano=2025,
    inss=BracketTable.from_tuples(
        [
            (Decimal("1518.00"), Decimal("0.075"), Decimal("0")),
            (Decimal("2793.88"), Decimal("0.09"), Decimal("22.77")),
            (Decimal("4190.83"), Decimal("0.12"), Decimal("106.59")),
            (Decimal("8157.41"), Decimal("0.14"), Decimal("190.40")),
        ],
        valor_teto=Decimal("951.63"),
    ),
    irrf=BracketTable.from_tuples(
        [
            (Decimal("2428.80"), Decimal("0"), Decimal("0")),
            (Decimal("2826.65"), Decimal("0.075"), Decimal("182.16")),
            (Decimal("3751.05"), Decimal("0.15"), Decimal("394.16")),
            (Decimal("4664.68"), Decimal("0.225"), Decimal("675.49")),
            (None, Decimal("0.275"), Decimal("908.73")),
        ]
    ),
    deducao_dependente_irrf=Decimal("189.59"),
    salario_familia_limite=Decimal("1906.04"),
    salario_familia_valor=Decimal("65.00"),
    salario_minimo=Decimal("1518.00"),
)

TABELAS_POR_ANO: dict[int, TabelasFiscais] = {
    TABELAS_2024.ano: TABELAS_2024,
    TABELAS_2025.ano: TABELAS_2025,
}

# Tables used when the caller does not pick a year
ANO_PADRAO = 2024


def obter_tabelas(ano: int | None = None) -> TabelasFiscais:
    """Get the tax tables in force for a year.

    Args:
        ano: Tax year (default: ANO_PADRAO)

    Returns:
        Tables for that year

    Raises:
        ConfigurationError: If no tables are registered for the year
    """
    if ano is None:
        ano = ANO_PADRAO
    try:
        return TABELAS_POR_ANO[ano]
    except KeyError:
        disponiveis = ", ".join(str(a) for a in sorted(TABELAS_POR_ANO))
        raise ConfigurationError(
            f"Tabelas fiscais de {ano} não cadastradas (disponíveis: {disponiveis})"
        ) from None


def anos_disponiveis() -> list[int]:
    return sorted(TABELAS_POR_ANO)
