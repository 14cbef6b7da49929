"""Tests for automatic payslip lines and earning-line rule inference."""

from decimal import Decimal

import pytest

from escopo_folha.core.calculators import (
    calcular_evento_automatico,
    calcular_salario_familia,
    resolver_eventos,
)
from escopo_folha.core.models import (
    ComputedEvent,
    Dependente,
    Funcionario,
    GrauInsalubridade,
    Rubrica,
    Socio,
    TipoRegra,
    TipoRubrica,
    UnidadeReferencia,
    inferir_regra,
)
from escopo_folha.core.rules import TABELAS_2024
from escopo_folha.core.rules import catalog
from escopo_folha.shared.exceptions import ValidationError


def _rubrica(codigo: str, descricao: str, tipo=TipoRubrica.PROVENTO, **kwargs) -> Rubrica:
    return Rubrica.model_validate(
        {
            "codigo": codigo,
            "descricao": descricao,
            "tipo": tipo,
            "incide_inss": True,
            "incide_fgts": True,
            "incide_irrf": True,
            **kwargs,
        }
    )


def _evento(rubrica: Rubrica, referencia: str = "0") -> ComputedEvent:
    return ComputedEvent(rubrica=rubrica, referencia=Decimal(referencia))


@pytest.fixture
def horista() -> Funcionario:
    """Employee whose hourly wage is exactly R$ 10,00."""
    return Funcionario(nome="Carlos", salario_base=Decimal("2200.00"))


class TestInferirRegra:
    """Tests for rule inference on legacy earning lines."""

    @pytest.mark.parametrize(
        "codigo,descricao,esperado",
        [
            ("0005", "Qualquer descrição", TipoRegra.SALARIO_FAMILIA),
            ("0004", "Vale", TipoRegra.DESCONTO_VALE_TRANSPORTE),
            ("0210", "HORAS EXTRAS 50%", TipoRegra.HORAS_EXTRAS_50),
            ("0220", "Adicional Noturno", TipoRegra.ADICIONAL_NOTURNO),
            ("0230", "Adicional de Periculosidade", TipoRegra.PERICULOSIDADE),
            ("0300", "Gratificação", TipoRegra.GENERICA),
        ],
    )
    def test_rule_from_code_or_description(self, codigo, descricao, esperado):
        regra, _ = inferir_regra(codigo, descricao)
        assert regra == esperado

    @pytest.mark.parametrize(
        "descricao,grau",
        [
            ("Insalubridade 40%", GrauInsalubridade.MAXIMO),
            ("Insalubridade grau máximo", GrauInsalubridade.MAXIMO),
            ("Insalubridade 20%", GrauInsalubridade.MEDIO),
            ("INSALUBRIDADE GRAU MÉDIO", GrauInsalubridade.MEDIO),
            ("Insalubridade 10%", GrauInsalubridade.MINIMO),
        ],
    )
    def test_unhealthy_tier(self, descricao, grau):
        assert inferir_regra("0240", descricao) == (TipoRegra.INSALUBRIDADE, grau)

    def test_unhealthy_without_tier_is_generic(self):
        assert inferir_regra("0240", "Adicional de insalubridade") == (
            TipoRegra.GENERICA,
            None,
        )

    def test_code_wins_over_description(self):
        regra, _ = inferir_regra("0005", "Horas extras 50%")
        assert regra == TipoRegra.SALARIO_FAMILIA

    def test_rubrica_is_tagged_on_creation(self):
        rubrica = _rubrica("0240", "Insalubridade 20%")
        assert rubrica.regra == TipoRegra.INSALUBRIDADE
        assert rubrica.grau_insalubridade == GrauInsalubridade.MEDIO

    def test_explicit_rule_is_kept(self):
        rubrica = _rubrica("0210", "Horas extras 50%", regra=TipoRegra.GENERICA)
        assert rubrica.regra == TipoRegra.GENERICA

    def test_explicit_unhealthy_requires_tier(self):
        """Test that a tierless unhealthy line fails with the package error."""
        with pytest.raises(ValidationError, match="0240"):
            _rubrica("0240", "Adicional", regra=TipoRegra.INSALUBRIDADE)


class TestCalcularEventoAutomatico:
    """Tests for salary-driven automatic lines."""

    def test_overtime(self, horista):
        evento = _evento(_rubrica("0210", "Horas extras 50%"), "10")
        resultado = calcular_evento_automatico(evento, horista, TABELAS_2024)
        assert resultado.provento == Decimal("150.00")
        assert resultado.referencia == Decimal("10")
        assert resultado.unidade == UnidadeReferencia.HORAS

    def test_night_premium(self, horista):
        evento = _evento(_rubrica("0220", "Adicional noturno"), "10")
        resultado = calcular_evento_automatico(evento, horista, TABELAS_2024)
        assert resultado.provento == Decimal("20.00")
        assert resultado.referencia_formatada == "10,00 h"

    def test_hazard_premium(self, horista):
        evento = _evento(_rubrica("0230", "Periculosidade"))
        resultado = calcular_evento_automatico(evento, horista, TABELAS_2024)
        assert resultado.provento == Decimal("660.00")
        assert resultado.referencia == Decimal("30")
        assert resultado.unidade == UnidadeReferencia.PERCENTUAL

    def test_unhealthy_uses_minimum_wage(self, horista):
        evento = _evento(_rubrica("0240", "Insalubridade 20%"))
        resultado = calcular_evento_automatico(evento, horista, TABELAS_2024)
        assert resultado.provento == Decimal("282.40")
        assert resultado.referencia == Decimal("20")

    def test_transport_voucher_is_a_deduction(self, horista):
        evento = _evento(catalog.VALE_TRANSPORTE)
        resultado = calcular_evento_automatico(evento, horista, TABELAS_2024)
        assert resultado.desconto == Decimal("132.00")
        assert resultado.provento == Decimal("0")
        assert resultado.referencia_formatada == "6,00%"

    def test_generic_line_is_not_touched(self, horista):
        evento = _evento(_rubrica("0300", "Gratificação"))
        assert calcular_evento_automatico(evento, horista, TABELAS_2024) is None


class TestSalarioFamilia:
    """Tests for the family allowance line."""

    @pytest.fixture
    def evento(self) -> ComputedEvent:
        return _evento(catalog.SALARIO_FAMILIA)

    def _funcionario(self, salario: str, dependentes: int) -> Funcionario:
        return Funcionario(
            salario_base=Decimal(salario),
            dependentes=[Dependente(salario_familia=True) for _ in range(dependentes)],
        )

    def test_paid_per_dependent_within_limit(self, evento):
        funcionario = self._funcionario("1500.00", 2)
        resultado = calcular_salario_familia(
            evento, funcionario, Decimal("1500.00"), TABELAS_2024
        )
        assert resultado.provento == Decimal("124.08")
        assert resultado.referencia == Decimal("2")
        assert resultado.referencia_formatada == "2 dep."

    def test_limit_is_inclusive(self, evento):
        funcionario = self._funcionario("1819.26", 1)
        resultado = calcular_salario_familia(
            evento, funcionario, Decimal("1819.26"), TABELAS_2024
        )
        assert resultado.provento == Decimal("62.04")

    def test_zero_above_limit(self, evento):
        funcionario = self._funcionario("2000.00", 2)
        resultado = calcular_salario_familia(
            evento, funcionario, Decimal("2000.00"), TABELAS_2024
        )
        assert resultado.provento == Decimal("0")
        assert resultado.referencia == Decimal("2")

    def test_zero_without_dependents(self, evento):
        funcionario = self._funcionario("1000.00", 0)
        resultado = calcular_salario_familia(
            evento, funcionario, Decimal("1000.00"), TABELAS_2024
        )
        assert resultado.provento == Decimal("0")
        assert resultado.referencia == Decimal("0")

    def test_only_eligible_dependents_count(self, evento):
        funcionario = Funcionario(
            salario_base=Decimal("1000.00"),
            dependentes=[Dependente(salario_familia=True), Dependente(irrf=True)],
        )
        resultado = calcular_salario_familia(
            evento, funcionario, Decimal("1000.00"), TABELAS_2024
        )
        assert resultado.provento == Decimal("62.04")

    def test_partner_not_entitled(self, evento):
        socio = Socio(
            pro_labore=Decimal("1000.00"),
            dependentes=[Dependente(salario_familia=True)],
        )
        resultado = calcular_salario_familia(evento, socio, Decimal("1000.00"), TABELAS_2024)
        assert resultado.provento == Decimal("0")


class TestResolverEventos:
    """Tests for resolving a whole payslip."""

    def _linhas(self, horas: str) -> list[ComputedEvent]:
        salario = ComputedEvent(
            rubrica=catalog.SALARIO_BASE,
            referencia=Decimal("30"),
            unidade=UnidadeReferencia.DIAS,
            provento=Decimal("1700.00"),
        )
        return [
            salario,
            _evento(_rubrica("0210", "Horas extras 50%"), horas),
            _evento(catalog.SALARIO_FAMILIA),
        ]

    @pytest.fixture
    def funcionario(self) -> Funcionario:
        return Funcionario(
            salario_base=Decimal("1700.00"),
            dependentes=[Dependente(salario_familia=True)],
        )

    def test_family_allowance_sees_resolved_overtime(self, funcionario):
        # 1700 + 115.91 = 1815.91, within the limit
        eventos = resolver_eventos(self._linhas("10"), funcionario, TABELAS_2024)
        assert eventos[1].provento == Decimal("115.91")
        assert eventos[2].provento == Decimal("62.04")

    def test_overtime_can_push_base_above_limit(self, funcionario):
        # 1700 + 139.09 = 1839.09, above the limit
        eventos = resolver_eventos(self._linhas("12"), funcionario, TABELAS_2024)
        assert eventos[1].provento == Decimal("139.09")
        assert eventos[2].provento == Decimal("0")

    def test_keeps_order_and_generic_lines(self, funcionario):
        linhas = self._linhas("10")
        eventos = resolver_eventos(linhas, funcionario, TABELAS_2024)
        assert [e.rubrica.codigo for e in eventos] == ["100", "0210", "0005"]
        assert eventos[0] == linhas[0]
