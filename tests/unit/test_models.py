"""Tests for domain models."""

from datetime import date
from decimal import Decimal

import pydantic
import pytest

from escopo_folha.core.models import (
    BaseIncidencia,
    CalculationResult,
    ComputedEvent,
    Dependente,
    Funcionario,
    GrauInsalubridade,
    Socio,
    ThirteenthResult,
    TipoRubrica,
    UnidadeReferencia,
)
from escopo_folha.core.rules import catalog


class TestRubrica:
    """Tests for Rubrica model."""

    def test_incide(self):
        assert catalog.SALARIO_BASE.incide(BaseIncidencia.INSS) is True
        assert catalog.FERIAS_PROPORCIONAIS.incide(BaseIncidencia.INSS) is False
        assert catalog.FERIAS_PROPORCIONAIS.incide(BaseIncidencia.IRRF) is True

    def test_is_provento(self):
        assert catalog.SALARIO_BASE.is_provento is True
        assert catalog.INSS.is_provento is False

    def test_frozen(self):
        with pytest.raises(pydantic.ValidationError):
            catalog.SALARIO_BASE.descricao = "Outro"

    def test_catalog_codes_are_unique(self):
        rubricas = [v for v in vars(catalog).values() if isinstance(v, type(catalog.INSS))]
        codigos = [r.codigo for r in rubricas]
        assert len(codigos) == len(set(codigos))

    def test_grau_percentual(self):
        assert GrauInsalubridade.MINIMO.percentual == Decimal("0.10")
        assert GrauInsalubridade.MAXIMO.percentual == Decimal("0.40")


class TestComputedEvent:
    """Tests for ComputedEvent model."""

    @pytest.mark.parametrize(
        "unidade,referencia,esperado",
        [
            (UnidadeReferencia.DIAS, "30", "30 dias"),
            (UnidadeReferencia.AVOS, "10", "10/12"),
            (UnidadeReferencia.PERCENTUAL, "7.5", "7,50%"),
            (UnidadeReferencia.DEPENDENTES, "2", "2 dep."),
            (UnidadeReferencia.HORAS, "12.5", "12,50 h"),
            (UnidadeReferencia.NENHUMA, "0", ""),
        ],
    )
    def test_referencia_formatada(self, unidade, referencia, esperado):
        evento = ComputedEvent(
            rubrica=catalog.SALARIO_BASE, referencia=Decimal(referencia), unidade=unidade
        )
        assert evento.referencia_formatada == esperado

    def test_valor_follows_kind(self):
        provento = ComputedEvent(rubrica=catalog.SALARIO_BASE, provento=Decimal("10"))
        desconto = ComputedEvent(rubrica=catalog.INSS, desconto=Decimal("3"))
        assert provento.valor == Decimal("10")
        assert desconto.valor == Decimal("3")


class TestCalculationResult:
    """Tests for result totals."""

    def test_from_events(self):
        eventos = [
            ComputedEvent(rubrica=catalog.SALARIO_BASE, provento=Decimal("2000.00")),
            ComputedEvent(rubrica=catalog.SALARIO_FAMILIA, provento=Decimal("62.04")),
            ComputedEvent(rubrica=catalog.INSS, desconto=Decimal("158.82")),
        ]
        result = CalculationResult.from_events(eventos, base_inss=Decimal("2000.00"))

        assert result.total_proventos == Decimal("2062.04")
        assert result.total_descontos == Decimal("158.82")
        assert result.liquido == Decimal("1903.22")
        assert result.base_inss == Decimal("2000.00")
        assert len(result.proventos) == 2
        assert len(result.descontos) == 1

    def test_empty(self):
        result = CalculationResult.from_events([])
        assert result.liquido == Decimal("0")
        assert result.evento("100") is None

    def test_subclass_fields(self):
        result = ThirteenthResult.from_events(
            [],
            ano=2024,
            parcela="primeira",
            meses_trabalhados=12,
            valor_integral=Decimal("0"),
        )
        assert isinstance(result, ThirteenthResult)

    def test_months_bounded(self):
        with pytest.raises(pydantic.ValidationError):
            ThirteenthResult.from_events(
                [], ano=2024, parcela="unica", meses_trabalhados=13, valor_integral=Decimal("0")
            )


class TestWorkers:
    """Tests for Funcionario and Socio."""

    def test_dependent_counts(self):
        funcionario = Funcionario(
            salario_base=Decimal("2000"),
            dependentes=[
                Dependente(nome="A", irrf=True, salario_familia=True),
                Dependente(nome="B", irrf=True),
                Dependente(nome="C"),
            ],
        )
        assert funcionario.dependentes_irrf == 2
        assert funcionario.dependentes_salario_familia == 1
        assert funcionario.is_socio is False

    def test_socio_accepts_pro_labore(self):
        socio = Socio(pro_labore=Decimal("5000"), data_entrada=date(2019, 1, 2))
        assert socio.salario_base == Decimal("5000")
        assert socio.pro_labore == Decimal("5000")
        assert socio.data_admissao == date(2019, 1, 2)
        assert socio.is_socio is True

    def test_socio_accepts_salario_base(self):
        socio = Socio(salario_base=Decimal("4000"))
        assert socio.pro_labore == Decimal("4000")

    def test_parsing_from_json_types(self):
        funcionario = Funcionario.model_validate(
            {"salario_base": "2500.50", "data_admissao": "2024-01-15"}
        )
        assert funcionario.salario_base == Decimal("2500.50")
        assert funcionario.data_admissao == date(2024, 1, 15)

    def test_rubrica_type_from_string(self):
        evento = ComputedEvent.model_validate(
            {
                "rubrica": {"codigo": "0300", "descricao": "Prêmio", "tipo": "provento"},
                "provento": "10",
            }
        )
        assert evento.rubrica.tipo == TipoRubrica.PROVENTO
