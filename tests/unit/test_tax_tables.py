"""Tests for the yearly tax tables."""

from decimal import Decimal

import pydantic
import pytest

from escopo_folha.core.calculators import aplicar_tabela
from escopo_folha.core.rules import (
    ANO_PADRAO,
    TABELAS_2024,
    TABELAS_2025,
    anos_disponiveis,
    obter_tabelas,
)
from escopo_folha.shared.exceptions import ConfigurationError


class TestObterTabelas:
    """Tests for table lookup by year."""

    def test_default_year(self):
        assert obter_tabelas() is obter_tabelas(ANO_PADRAO)
        assert ANO_PADRAO == 2024

    def test_by_year(self):
        assert obter_tabelas(2024) is TABELAS_2024
        assert obter_tabelas(2025) is TABELAS_2025

    def test_unknown_year(self):
        with pytest.raises(ConfigurationError, match="1999"):
            obter_tabelas(1999)

    def test_anos_disponiveis(self):
        assert anos_disponiveis() == [2024, 2025]


class TestTabelasFiscais:
    """Tests for table contents."""

    @pytest.mark.parametrize("tabelas", [TABELAS_2024, TABELAS_2025])
    def test_ceiling_matches_formula_at_top_limit(self, tabelas):
        no_limite = aplicar_tabela(tabelas.inss.limite_maximo, tabelas.inss).valor
        assert abs(no_limite - tabelas.teto_inss) <= Decimal("0.02")

    @pytest.mark.parametrize("tabelas", [TABELAS_2024, TABELAS_2025])
    def test_irrf_is_continuous_between_brackets(self, tabelas):
        for faixa in tabelas.irrf.faixas[:-1]:
            abaixo = aplicar_tabela(faixa.limite, tabelas.irrf).valor
            acima = aplicar_tabela(faixa.limite + Decimal("0.01"), tabelas.irrf).valor
            assert abs(acima - abaixo) <= Decimal("0.05")

    def test_constants(self):
        assert TABELAS_2024.teto_inss == Decimal("908.85")
        assert TABELAS_2024.aliquota_fgts == Decimal("0.08")
        assert TABELAS_2024.divisor_horas_mensais == Decimal("220")
        assert TABELAS_2025.salario_minimo == Decimal("1518.00")

    def test_frozen(self):
        with pytest.raises(pydantic.ValidationError):
            TABELAS_2024.salario_minimo = Decimal("1")
