"""Earning-line (rubrica) model."""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from escopo_folha.core.models.enums import (
    BaseIncidencia,
    GrauInsalubridade,
    TipoRegra,
    TipoRubrica,
)
from escopo_folha.shared.exceptions import ValidationError

CODIGO_SALARIO_FAMILIA = "0005"
CODIGO_VALE_TRANSPORTE = "0004"


def inferir_regra(
    codigo: str, descricao: str
) -> tuple[TipoRegra, Optional[GrauInsalubridade]]:
    """Infer the calculation rule of a legacy earning line.

    Catalogs created before the rule tag existed only carry a code and a
    free-text description. This maps them to an explicit rule once, when the
    Rubrica is built.

    Args:
        codigo: Earning-line code
        descricao: Earning-line description

    Returns:
        Tuple of (rule kind, unhealthy-conditions tier or None)
    """
    if codigo == CODIGO_SALARIO_FAMILIA:
        return TipoRegra.SALARIO_FAMILIA, None
    if codigo == CODIGO_VALE_TRANSPORTE:
        return TipoRegra.DESCONTO_VALE_TRANSPORTE, None

    texto = descricao.lower()
    if "horas extras 50%" in texto:
        return TipoRegra.HORAS_EXTRAS_50, None
    if "adicional noturno" in texto:
        return TipoRegra.ADICIONAL_NOTURNO, None
    if "periculosidade" in texto:
        return TipoRegra.PERICULOSIDADE, None
    if "insalubridade" in texto:
        if "40%" in texto or "máximo" in texto:
            return TipoRegra.INSALUBRIDADE, GrauInsalubridade.MAXIMO
        if "20%" in texto or "médio" in texto:
            return TipoRegra.INSALUBRIDADE, GrauInsalubridade.MEDIO
        if "10%" in texto or "mínimo" in texto:
            return TipoRegra.INSALUBRIDADE, GrauInsalubridade.MINIMO

    return TipoRegra.GENERICA, None


class Rubrica(BaseModel):
    """Payroll earning-line definition."""

    codigo: str = Field(..., description="Earning-line code")
    descricao: str = Field(..., description="Description shown on the payslip")
    tipo: TipoRubrica = Field(..., description="Earning or deduction")
    incide_inss: bool = Field(default=False, description="Counts toward INSS base")
    incide_fgts: bool = Field(default=False, description="Counts toward FGTS base")
    incide_irrf: bool = Field(default=False, description="Counts toward IRRF base")
    natureza_esocial: Optional[str] = Field(
        default=None, description="eSocial nature code"
    )
    regra: TipoRegra = Field(default=TipoRegra.GENERICA)
    grau_insalubridade: Optional[GrauInsalubridade] = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def resolve_regra(cls, data: Any) -> Any:
        """Tag legacy lines that come without an explicit rule."""
        if isinstance(data, dict) and data.get("regra") is None:
            regra, grau = inferir_regra(
                str(data.get("codigo", "")), str(data.get("descricao", ""))
            )
            data = {**data, "regra": regra}
            if data.get("grau_insalubridade") is None:
                data["grau_insalubridade"] = grau
        return data

    @model_validator(mode="after")
    def check_grau(self) -> "Rubrica":
        """Unhealthy-conditions lines need a tier.

        Raises the package ValidationError, which pydantic lets propagate
        unchanged, so direct construction and the loader fail the same way.
        """
        if self.regra == TipoRegra.INSALUBRIDADE and self.grau_insalubridade is None:
            raise ValidationError(
                f"Rubrica {self.codigo}: insalubridade exige grau (mínimo, médio ou máximo)"
            )
        return self

    @property
    def is_provento(self) -> bool:
        return self.tipo == TipoRubrica.PROVENTO

    def incide(self, base: BaseIncidencia) -> bool:
        """Check whether this line counts toward the given base."""
        return {
            BaseIncidencia.INSS: self.incide_inss,
            BaseIncidencia.FGTS: self.incide_fgts,
            BaseIncidencia.IRRF: self.incide_irrf,
        }[base]

    model_config = {"frozen": True}
