"""Progressive bracket table models."""

from decimal import Decimal
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, model_validator

from escopo_folha.shared.exceptions import ConfigurationError


class Faixa(BaseModel):
    """One bracket: applies to bases up to ``limite`` (None = no upper limit)."""

    limite: Optional[Decimal] = Field(default=None, description="Upper limit (inclusive)")
    aliquota: Decimal = Field(..., description="Nominal rate as a fraction (0.075)")
    deducao: Decimal = Field(default=Decimal("0"), description="Amount to deduct")

    model_config = {"frozen": True}


class BracketResult(NamedTuple):
    """Outcome of a bracket lookup."""

    valor: Decimal
    aliquota: Decimal  # nominal rate of the selected bracket, in percent


class BracketTable(BaseModel):
    """Ordered progressive-rate table (INSS, IRRF).

    Brackets are sorted by strictly increasing limit. Only the last bracket
    may be open-ended. When ``valor_teto`` is set, bases above the highest
    limit pay that fixed amount instead of the formula (INSS ceiling).
    """

    faixas: tuple[Faixa, ...] = Field(..., description="Brackets, ascending")
    valor_teto: Optional[Decimal] = Field(
        default=None, description="Fixed value above the highest limit"
    )

    @model_validator(mode="after")
    def check_faixas(self) -> "BracketTable":
        if not self.faixas:
            raise ConfigurationError("Tabela progressiva sem faixas")

        anterior: Optional[Decimal] = None
        for i, faixa in enumerate(self.faixas):
            if faixa.aliquota < 0 or faixa.aliquota > 1:
                raise ConfigurationError(
                    f"Alíquota fora do intervalo 0-1 na faixa {i + 1}: {faixa.aliquota}"
                )
            if faixa.limite is None:
                if i != len(self.faixas) - 1:
                    raise ConfigurationError(
                        "Apenas a última faixa pode não ter limite superior"
                    )
                continue
            if anterior is not None and faixa.limite <= anterior:
                raise ConfigurationError(
                    f"Faixas fora de ordem: {faixa.limite} após {anterior}"
                )
            anterior = faixa.limite

        if self.valor_teto is not None and self.faixas[-1].limite is None:
            raise ConfigurationError(
                "Tabela com última faixa sem limite não admite valor de teto"
            )
        return self

    @classmethod
    def from_tuples(
        cls,
        faixas: list[tuple],
        valor_teto: Optional[Decimal] = None,
    ) -> "BracketTable":
        """Build a table from ``(limite, aliquota, deducao)`` tuples."""
        return cls(
            faixas=tuple(
                Faixa(limite=limite, aliquota=aliquota, deducao=deducao)
                for limite, aliquota, deducao in faixas
            ),
            valor_teto=valor_teto,
        )

    @property
    def limite_maximo(self) -> Optional[Decimal]:
        """Highest finite limit (None when the table has no finite limit)."""
        limites = [f.limite for f in self.faixas if f.limite is not None]
        return limites[-1] if limites else None

    @property
    def faixa_superior(self) -> Faixa:
        return self.faixas[-1]

    model_config = {"frozen": True}
