"""Calculation result models."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from escopo_folha.core.models.enums import (
    MotivoRescisao,
    ParcelaDecimoTerceiro,
    TipoAviso,
    UnidadeReferencia,
)
from escopo_folha.core.models.rubrica import Rubrica
from escopo_folha.shared.formatters import format_number, format_percentage
from escopo_folha.shared.money import ZERO, somar


class ComputedEvent(BaseModel):
    """A computed payslip line."""

    rubrica: Rubrica = Field(..., description="Earning-line definition")
    referencia: Decimal = Field(default=ZERO, description="Reference quantity")
    unidade: UnidadeReferencia = Field(default=UnidadeReferencia.NENHUMA)
    provento: Decimal = Field(default=ZERO, description="Gross amount")
    desconto: Decimal = Field(default=ZERO, description="Withheld amount")

    @property
    def is_provento(self) -> bool:
        return self.rubrica.is_provento

    @property
    def valor(self) -> Decimal:
        """Amount that counts for this line's kind."""
        return self.provento if self.is_provento else self.desconto

    @property
    def referencia_formatada(self) -> str:
        """Reference as printed on the payslip ("30 dias", "10/12", "7,50%")."""
        unidade = self.unidade
        if unidade == UnidadeReferencia.NENHUMA:
            return ""
        if unidade == UnidadeReferencia.PERCENTUAL:
            return format_percentage(self.referencia)
        if unidade == UnidadeReferencia.AVOS:
            return f"{int(self.referencia)}/12"
        if unidade == UnidadeReferencia.DIAS:
            return f"{int(self.referencia)} dias"
        if unidade == UnidadeReferencia.DEPENDENTES:
            return f"{int(self.referencia)} dep."
        return f"{format_number(self.referencia)} h"

    model_config = {"frozen": True}


class CalculationResult(BaseModel):
    """Payslip totals and contribution bases.

    Build it through :meth:`from_events` so that totals always add up:
    ``total_proventos - total_descontos == liquido``.
    """

    eventos: list[ComputedEvent] = Field(default_factory=list)
    total_proventos: Decimal = Field(default=ZERO)
    total_descontos: Decimal = Field(default=ZERO)
    liquido: Decimal = Field(default=ZERO)
    base_inss: Decimal = Field(default=ZERO)
    base_irrf: Decimal = Field(default=ZERO)
    base_fgts: Decimal = Field(default=ZERO)
    valor_inss: Decimal = Field(default=ZERO, description="INSS withheld")
    valor_irrf: Decimal = Field(default=ZERO, description="IRRF withheld")
    valor_fgts: Decimal = Field(
        default=ZERO, description="Employer FGTS deposit (not a deduction)"
    )

    @classmethod
    def from_events(cls, eventos: list[ComputedEvent], **kwargs) -> "CalculationResult":
        """Create a result, deriving totals from the events."""
        total_proventos = somar(e.provento for e in eventos if e.is_provento)
        total_descontos = somar(e.desconto for e in eventos if not e.is_provento)
        return cls(
            eventos=list(eventos),
            total_proventos=total_proventos,
            total_descontos=total_descontos,
            liquido=total_proventos - total_descontos,
            **kwargs,
        )

    def evento(self, codigo: str) -> Optional[ComputedEvent]:
        """Return the first event with the given earning-line code."""
        for evento in self.eventos:
            if evento.rubrica.codigo == codigo:
                return evento
        return None

    @property
    def proventos(self) -> list[ComputedEvent]:
        return [e for e in self.eventos if e.is_provento]

    @property
    def descontos(self) -> list[ComputedEvent]:
        return [e for e in self.eventos if not e.is_provento]


class PayrollResult(CalculationResult):
    """Monthly payslip result."""

    socio: bool = Field(default=False, description="Pro-labore (partner) payslip")


class ThirteenthResult(CalculationResult):
    """13th salary result."""

    ano: int = Field(..., description="Reference year")
    parcela: ParcelaDecimoTerceiro
    meses_trabalhados: int = Field(..., ge=0, le=12)
    valor_integral: Decimal = Field(..., description="Full 13th amount for the year")


class VacationResult(CalculationResult):
    """Vacation pay result."""

    data_inicio: date
    data_fim: date = Field(..., description="Last vacation day")
    data_retorno: date = Field(..., description="First working day after vacation")
    dias: int
    vender_dias: bool = Field(default=False)
    adiantar_decimo_terceiro: bool = Field(default=False)


class TerminationResult(CalculationResult):
    """Termination payout result."""

    data_rescisao: date
    motivo: MotivoRescisao
    aviso: TipoAviso
    saldo_fgts: Decimal = Field(default=ZERO)
    multa_fgts: Decimal = Field(default=ZERO, description="40% FGTS penalty paid")


class ResumoFolha(BaseModel):
    """Aggregated totals over several calculation results."""

    quantidade: int = Field(default=0)
    quantidade_por_tipo: dict[str, int] = Field(default_factory=dict)
    total_proventos: Decimal = Field(default=ZERO)
    total_descontos: Decimal = Field(default=ZERO)
    total_liquido: Decimal = Field(default=ZERO)
    total_inss: Decimal = Field(default=ZERO)
    total_irrf: Decimal = Field(default=ZERO)
    total_fgts: Decimal = Field(default=ZERO)
    total_base_inss: Decimal = Field(default=ZERO)
    total_base_irrf: Decimal = Field(default=ZERO)
    total_base_fgts: Decimal = Field(default=ZERO)
