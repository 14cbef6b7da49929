"""Enumerations for payroll domain models."""

from decimal import Decimal
from enum import Enum


class TipoRubrica(str, Enum):
    """Earning-line kind."""

    PROVENTO = "provento"
    DESCONTO = "desconto"


class BaseIncidencia(str, Enum):
    """Contribution bases an earning line can count toward."""

    INSS = "inss"
    FGTS = "fgts"
    IRRF = "irrf"


class TipoRegra(str, Enum):
    """Automatic calculation rule attached to an earning line."""

    SALARIO_FAMILIA = "salario_familia"
    DESCONTO_VALE_TRANSPORTE = "desconto_vale_transporte"
    HORAS_EXTRAS_50 = "horas_extras_50"
    ADICIONAL_NOTURNO = "adicional_noturno"
    PERICULOSIDADE = "periculosidade"
    INSALUBRIDADE = "insalubridade"
    GENERICA = "generica"


class GrauInsalubridade(str, Enum):
    """Unhealthy-conditions tier (percentage of the minimum wage)."""

    MINIMO = "minimo"  # 10%
    MEDIO = "medio"  # 20%
    MAXIMO = "maximo"  # 40%

    @property
    def percentual(self) -> Decimal:
        """Rate applied over the minimum wage."""
        return {
            GrauInsalubridade.MINIMO: Decimal("0.10"),
            GrauInsalubridade.MEDIO: Decimal("0.20"),
            GrauInsalubridade.MAXIMO: Decimal("0.40"),
        }[self]


class UnidadeReferencia(str, Enum):
    """Unit of the reference quantity shown on a payslip line."""

    DIAS = "dias"
    HORAS = "horas"
    PERCENTUAL = "percentual"
    DEPENDENTES = "dependentes"
    AVOS = "avos"  # twelfths (13th salary, proportional vacation)
    NENHUMA = "nenhuma"


class ParcelaDecimoTerceiro(str, Enum):
    """13th salary installment."""

    PRIMEIRA = "primeira"
    SEGUNDA = "segunda"
    UNICA = "unica"


class MotivoRescisao(str, Enum):
    """Termination reason."""

    DISPENSA_SEM_JUSTA_CAUSA = "dispensa_sem_justa_causa"
    PEDIDO_DEMISSAO = "pedido_demissao"


class TipoAviso(str, Enum):
    """Notice period type."""

    INDENIZADO = "indenizado"
    TRABALHADO = "trabalhado"
