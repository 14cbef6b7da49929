"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from escopo_folha.core.models import (
    ComputedEvent,
    Dependente,
    Funcionario,
    Rubrica,
    Socio,
    TipoRubrica,
    UnidadeReferencia,
)
from escopo_folha.core.rules import TABELAS_2024, TabelasFiscais


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def funcionario_path(fixtures_dir: Path) -> Path:
    """Return path to sample employee input file."""
    return fixtures_dir / "funcionario.json"


@pytest.fixture
def tabelas() -> TabelasFiscais:
    return TABELAS_2024


@pytest.fixture
def funcionario() -> Funcionario:
    """Employee earning R$ 3.000,00 with no dependents."""
    return Funcionario(
        nome="Maria Souza",
        cargo="Analista",
        salario_base=Decimal("3000.00"),
        data_admissao=date(2020, 3, 10),
    )


@pytest.fixture
def socio() -> Socio:
    """Partner with R$ 5.000,00 pro-labore."""
    return Socio(
        nome="João Lima",
        pro_labore=Decimal("5000.00"),
        data_entrada=date(2019, 1, 2),
        participacao=Decimal("50"),
        is_administrador=True,
    )


@pytest.fixture
def dependente_completo() -> Dependente:
    """Dependent eligible for both IRRF deduction and family allowance."""
    return Dependente(nome="Ana", salario_familia=True, irrf=True)


def _make_event(
    codigo: str,
    descricao: str,
    provento: str = "0",
    desconto: str = "0",
    tipo: TipoRubrica = TipoRubrica.PROVENTO,
    referencia: str = "0",
    **flags,
) -> ComputedEvent:
    """Build a payslip line with an ad-hoc earning line."""
    rubrica = Rubrica.model_validate(
        {"codigo": codigo, "descricao": descricao, "tipo": tipo, **flags}
    )
    return ComputedEvent(
        rubrica=rubrica,
        referencia=Decimal(referencia),
        unidade=UnidadeReferencia.NENHUMA,
        provento=Decimal(provento),
        desconto=Decimal(desconto),
    )


@pytest.fixture
def make_event():
    """Factory for payslip lines with ad-hoc earning lines."""
    return _make_event

