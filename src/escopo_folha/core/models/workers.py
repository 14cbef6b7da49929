"""Employee and partner models."""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class Dependente(BaseModel):
    """Dependent of an employee or partner."""

    nome: str = Field(default="", description="Full name of dependent")
    cpf: Optional[str] = Field(default=None, description="CPF of dependent")
    data_nascimento: Optional[date] = Field(default=None)
    salario_familia: bool = Field(
        default=False, description="Eligible for family allowance"
    )
    irrf: bool = Field(default=False, description="Deductible from IRRF base")

    model_config = {"frozen": True}


class Funcionario(BaseModel):
    """Employee (CLT) paid through the payroll."""

    nome: str = Field(default="", description="Full name")
    cpf: Optional[str] = Field(default=None)
    cargo: Optional[str] = Field(default=None)
    salario_base: Optional[Decimal] = Field(default=None, description="Monthly base salary")
    data_admissao: Optional[date] = Field(default=None, description="Admission date")
    dependentes: list[Dependente] = Field(default_factory=list)

    @property
    def is_socio(self) -> bool:
        """Partners follow their own INSS/FGTS rules."""
        return False

    @property
    def dependentes_irrf(self) -> int:
        """Count dependents deductible from the IRRF base."""
        return sum(1 for d in self.dependentes if d.irrf)

    @property
    def dependentes_salario_familia(self) -> int:
        """Count dependents eligible for family allowance."""
        return sum(1 for d in self.dependentes if d.salario_familia)

    model_config = {"frozen": True}


class Socio(Funcionario):
    """Partner/owner paid by pro-labore.

    The pro-labore takes the place of the base salary and the company entry
    date the place of the admission date; both names are accepted on input.
    """

    participacao: Decimal = Field(default=Decimal("0"), description="Equity share (%)")
    is_administrador: bool = Field(default=False)

    @model_validator(mode="before")
    @classmethod
    def map_pro_labore(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if "pro_labore" in data:
                data.setdefault("salario_base", data.pop("pro_labore"))
            if "data_entrada" in data:
                data.setdefault("data_admissao", data.pop("data_entrada"))
        return data

    @property
    def is_socio(self) -> bool:
        return True

    @property
    def pro_labore(self) -> Optional[Decimal]:
        return self.salario_base
