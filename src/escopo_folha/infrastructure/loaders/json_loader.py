"""Loader for payroll input files (.json).

Expected layout::

    {
      "funcionario": {"nome": "...", "salario_base": 3000, "data_admissao": "2024-01-15",
                      "dependentes": [{"nome": "...", "irrf": true, "salario_familia": true}]},
      "rubricas": [{"codigo": "0210", "descricao": "HORAS EXTRAS 50%", "tipo": "provento",
                    "incide_inss": true, "incide_fgts": true, "incide_irrf": true}],
      "eventos": [{"rubrica": "0210", "referencia": 10}]
    }

A partner file uses ``"socio"`` instead of ``"funcionario"`` (``pro_labore``
and ``data_entrada`` are accepted). An event's ``rubrica`` is either a full
earning-line object or a code from ``rubricas`` or the built-in catalog.
"""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

import pydantic
from pydantic import BaseModel, Field

from escopo_folha.core.models.results import ComputedEvent
from escopo_folha.core.models.rubrica import Rubrica
from escopo_folha.core.models.workers import Funcionario, Socio
from escopo_folha.core.rules import catalog
from escopo_folha.shared.exceptions import LoaderError, ValidationError

CATALOGO_PADRAO: dict[str, Rubrica] = {
    rubrica.codigo: rubrica
    for rubrica in vars(catalog).values()
    if isinstance(rubrica, Rubrica)
}


class PayrollInput(BaseModel):
    """Worker and period lines read from an input file."""

    trabalhador: Funcionario
    eventos: Optional[list[ComputedEvent]] = Field(
        default=None, description="Period lines (None = base salary only)"
    )


class JSONInputLoader:
    """Reads a payroll input file."""

    def __init__(self, file_path: Path):
        self.file_path = file_path

    def load(self) -> PayrollInput:
        """Load and validate the file.

        Raises:
            LoaderError: If the file cannot be read or is not valid JSON
            ValidationError: If the content does not describe a valid worker
        """
        data = self._read()
        try:
            trabalhador = self._load_trabalhador(data)
            eventos = self._load_eventos(data)
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Dados inválidos em {self.file_path.name}: {e}"
            ) from e
        return PayrollInput(trabalhador=trabalhador, eventos=eventos)

    def _read(self) -> dict[str, Any]:
        try:
            text = self.file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise LoaderError(f"Não foi possível ler {self.file_path}: {e}") from e

        try:
            # Decimal keeps currency values exact
            data = json.loads(text, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise LoaderError(f"JSON inválido em {self.file_path.name}: {e}") from e

        if not isinstance(data, dict):
            raise LoaderError(f"{self.file_path.name}: o conteúdo deve ser um objeto JSON")
        return data

    def _load_trabalhador(self, data: dict[str, Any]) -> Funcionario:
        if "socio" in data:
            return Socio.model_validate(data["socio"])
        if "funcionario" in data:
            return Funcionario.model_validate(data["funcionario"])
        raise LoaderError(
            f"{self.file_path.name}: informe 'funcionario' ou 'socio'"
        )

    def _load_eventos(self, data: dict[str, Any]) -> Optional[list[ComputedEvent]]:
        if data.get("eventos") is None:
            return None
        if not isinstance(data["eventos"], list):
            raise LoaderError(f"{self.file_path.name}: 'eventos' deve ser uma lista")

        itens_rubricas = data.get("rubricas") or []
        if not isinstance(itens_rubricas, list):
            raise LoaderError(f"{self.file_path.name}: 'rubricas' deve ser uma lista")

        rubricas = dict(CATALOGO_PADRAO)
        for item in itens_rubricas:
            if not isinstance(item, dict):
                raise LoaderError(f"{self.file_path.name}: rubrica inválida: {item!r}")
            rubrica = Rubrica.model_validate(item)
            rubricas[rubrica.codigo] = rubrica

        eventos = []
        for item in data["eventos"]:
            if not isinstance(item, dict):
                raise LoaderError(f"{self.file_path.name}: evento inválido: {item!r}")
            item = dict(item)
            codigo = item.get("rubrica")
            if isinstance(codigo, str):
                if codigo not in rubricas:
                    raise ValidationError(
                        f"{self.file_path.name}: rubrica {codigo} não cadastrada"
                    )
                item["rubrica"] = rubricas[codigo]
            eventos.append(ComputedEvent.model_validate(item))
        return eventos


def load_input_file(file_path: Path) -> PayrollInput:
    """Load a payroll input file."""
    loader = JSONInputLoader(file_path)
    return loader.load()
