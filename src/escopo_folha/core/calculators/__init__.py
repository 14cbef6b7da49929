"""Payroll calculators."""

from escopo_folha.core.calculators.automatic import (
    calcular_evento_automatico,
    calcular_salario_familia,
    resolver_eventos,
)
from escopo_folha.core.calculators.bases import calcular_bases, somar_base
from escopo_folha.core.calculators.brackets import (
    aplicar_tabela,
    calcular_inss,
    calcular_irrf,
    selecionar_faixa,
)
from escopo_folha.core.calculators.events import EventListBuilder
from escopo_folha.core.calculators.payroll import (
    PayrollCalculator,
    calculate_payroll,
    evento_salario_base,
)
from escopo_folha.core.calculators.termination import (
    TerminationCalculator,
    calculate_termination,
)
from escopo_folha.core.calculators.thirteenth import (
    ThirteenthSalaryCalculator,
    calculate_thirteenth,
)
from escopo_folha.core.calculators.vacation import VacationCalculator, calculate_vacation

__all__ = [
    "EventListBuilder",
    "PayrollCalculator",
    "TerminationCalculator",
    "ThirteenthSalaryCalculator",
    "VacationCalculator",
    "aplicar_tabela",
    "calcular_bases",
    "calcular_evento_automatico",
    "calcular_inss",
    "calcular_irrf",
    "calcular_salario_familia",
    "calculate_payroll",
    "calculate_termination",
    "calculate_thirteenth",
    "calculate_vacation",
    "evento_salario_base",
    "resolver_eventos",
    "selecionar_faixa",
    "somar_base",
]
