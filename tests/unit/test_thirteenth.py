"""Tests for the 13th salary calculator."""

from datetime import date
from decimal import Decimal

import pytest

from escopo_folha.core.calculators import calculate_thirteenth
from escopo_folha.core.calculators.thirteenth import (
    meses_trabalhados_no_ano,
    valor_primeira_parcela,
)
from escopo_folha.core.models import Funcionario, ParcelaDecimoTerceiro, Socio
from escopo_folha.shared.exceptions import ValidationError


class TestMesesTrabalhados:
    """Tests for months earned in the year."""

    def test_admitted_before_the_year(self):
        assert meses_trabalhados_no_ano(date(2020, 3, 10), 2024) == 12

    def test_admitted_during_the_year(self):
        assert meses_trabalhados_no_ano(date(2024, 3, 15), 2024) == 10
        assert meses_trabalhados_no_ano(date(2024, 6, 10), 2024) == 7

    def test_admitted_on_last_day(self):
        assert meses_trabalhados_no_ano(date(2024, 12, 31), 2024) == 1


class TestThirteenthInstallments:
    """Tests for each installment."""

    def test_first_installment_is_half_without_deductions(self, funcionario, tabelas):
        result = calculate_thirteenth(funcionario, 2024, "primeira", tabelas)

        assert result.parcela == ParcelaDecimoTerceiro.PRIMEIRA
        assert result.meses_trabalhados == 12
        assert result.valor_integral == Decimal("3000.00")
        assert [e.rubrica.codigo for e in result.eventos] == ["130"]
        assert result.evento("130").provento == Decimal("1500.00")
        assert result.evento("130").referencia_formatada == "12/12"
        assert result.total_descontos == Decimal("0")
        assert result.liquido == Decimal("1500.00")
        assert result.base_inss == Decimal("0")

    def test_second_installment_withholds_on_full_amount(self, funcionario, tabelas):
        result = calculate_thirteenth(
            funcionario, 2024, ParcelaDecimoTerceiro.SEGUNDA, tabelas
        )

        assert [e.rubrica.codigo for e in result.eventos] == ["131", "132", "134", "135"]
        assert result.evento("131").provento == Decimal("3000.00")
        assert result.evento("132").desconto == Decimal("1500.00")
        assert result.base_inss == Decimal("3000.00")
        assert result.valor_inss == Decimal("258.82")
        assert result.valor_irrf == Decimal("36.15")
        assert result.total_descontos == Decimal("1794.97")
        assert result.liquido == Decimal("1205.03")

    def test_single_installment(self, funcionario, tabelas):
        result = calculate_thirteenth(funcionario, 2024, "unica", tabelas)

        assert [e.rubrica.codigo for e in result.eventos] == ["133", "134", "135"]
        assert result.evento("133").provento == Decimal("3000.00")
        assert result.liquido == Decimal("2705.03")

    def test_installments_add_up_to_full_amount(self, tabelas):
        funcionario = Funcionario(
            salario_base=Decimal("1000.00"), data_admissao=date(2024, 6, 10)
        )
        primeira = calculate_thirteenth(funcionario, 2024, "primeira", tabelas)
        segunda = calculate_thirteenth(funcionario, 2024, "segunda", tabelas)

        assert segunda.valor_integral == Decimal("583.33")
        assert primeira.liquido == Decimal("291.67")
        bruto_segunda = segunda.evento("131").provento - segunda.evento("132").desconto
        assert primeira.liquido + bruto_segunda == segunda.valor_integral

    def test_partner_flat_inss(self, tabelas):
        socio = Socio(pro_labore=Decimal("5000.00"), data_entrada=date(2019, 1, 2))
        result = calculate_thirteenth(socio, 2024, "unica", tabelas)
        assert result.valor_inss == Decimal("550.00")

    def test_valor_primeira_parcela_rounds_half_up(self):
        assert valor_primeira_parcela(Decimal("583.33")) == Decimal("291.67")


class TestThirteenthValidation:
    """Tests for input validation."""

    def test_invalid_installment(self, funcionario, tabelas):
        with pytest.raises(ValidationError):
            calculate_thirteenth(funcionario, 2024, "terceira", tabelas)

    def test_missing_admission(self, tabelas):
        funcionario = Funcionario(salario_base=Decimal("2000.00"))
        with pytest.raises(ValidationError):
            calculate_thirteenth(funcionario, 2024, "unica", tabelas)

    def test_admitted_after_reference_year(self, tabelas):
        funcionario = Funcionario(
            salario_base=Decimal("2000.00"), data_admissao=date(2025, 1, 2)
        )
        with pytest.raises(ValidationError):
            calculate_thirteenth(funcionario, 2024, "unica", tabelas)

    def test_missing_salary(self, tabelas):
        funcionario = Funcionario(data_admissao=date(2020, 1, 1))
        with pytest.raises(ValidationError):
            calculate_thirteenth(funcionario, 2024, "primeira", tabelas)

    @pytest.mark.parametrize("ano", [0, 10000, "2024"])
    def test_invalid_year(self, funcionario, tabelas, ano):
        """Test that an out-of-range year fails before any date arithmetic."""
        with pytest.raises(ValidationError, match="Ano"):
            calculate_thirteenth(funcionario, ano, "unica", tabelas)
