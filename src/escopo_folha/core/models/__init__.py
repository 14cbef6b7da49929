"""Domain models for payroll calculations."""

from escopo_folha.core.models.brackets import BracketResult, BracketTable, Faixa
from escopo_folha.core.models.enums import (
    BaseIncidencia,
    GrauInsalubridade,
    MotivoRescisao,
    ParcelaDecimoTerceiro,
    TipoAviso,
    TipoRegra,
    TipoRubrica,
    UnidadeReferencia,
)
from escopo_folha.core.models.results import (
    CalculationResult,
    ComputedEvent,
    PayrollResult,
    ResumoFolha,
    TerminationResult,
    ThirteenthResult,
    VacationResult,
)
from escopo_folha.core.models.rubrica import Rubrica, inferir_regra
from escopo_folha.core.models.workers import Dependente, Funcionario, Socio

__all__ = [
    "BaseIncidencia",
    "BracketResult",
    "BracketTable",
    "CalculationResult",
    "ComputedEvent",
    "Dependente",
    "Faixa",
    "Funcionario",
    "GrauInsalubridade",
    "MotivoRescisao",
    "ParcelaDecimoTerceiro",
    "PayrollResult",
    "ResumoFolha",
    "Rubrica",
    "Socio",
    "TerminationResult",
    "ThirteenthResult",
    "TipoAviso",
    "TipoRegra",
    "TipoRubrica",
    "UnidadeReferencia",
    "VacationResult",
    "inferir_regra",
]
