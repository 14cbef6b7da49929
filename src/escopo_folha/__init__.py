"""Escopo Folha - Calculadora de folha de pagamento (INSS, IRRF, FGTS)."""

__version__ = "0.1.0"
