"""Custom exceptions for Escopo Folha."""


class EscopoFolhaError(Exception):
    """Base exception for all Escopo Folha errors."""

    pass


class ValidationError(EscopoFolhaError):
    """Invalid calculation input (salary, dates, days, amounts)."""

    pass


class ConfigurationError(EscopoFolhaError):
    """Invalid or unknown tax configuration (bracket tables, tax year)."""

    pass


class LoaderError(EscopoFolhaError):
    """Error reading an input file."""

    pass
