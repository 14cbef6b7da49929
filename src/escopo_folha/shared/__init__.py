"""Shared utilities for Escopo Folha."""

from escopo_folha.shared.dates import dias_no_mes, meses_entre
from escopo_folha.shared.exceptions import (
    ConfigurationError,
    EscopoFolhaError,
    LoaderError,
    ValidationError,
)
from escopo_folha.shared.money import ZERO, arredondar, somar

__all__ = [
    # Errors
    "ConfigurationError",
    "EscopoFolhaError",
    "LoaderError",
    "ValidationError",
    # Money
    "ZERO",
    "arredondar",
    "somar",
    # Dates
    "dias_no_mes",
    "meses_entre",
]
