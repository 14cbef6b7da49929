"""Tax tables and built-in earning lines."""

from escopo_folha.core.rules.tax_tables import (
    ANO_PADRAO,
    TABELAS_2024,
    TABELAS_2025,
    TABELAS_POR_ANO,
    TabelasFiscais,
    anos_disponiveis,
    obter_tabelas,
)

__all__ = [
    "ANO_PADRAO",
    "TABELAS_2024",
    "TABELAS_2025",
    "TABELAS_POR_ANO",
    "TabelasFiscais",
    "anos_disponiveis",
    "obter_tabelas",
]
