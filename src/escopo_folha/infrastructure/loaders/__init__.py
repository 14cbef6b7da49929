"""Input file loaders."""

from escopo_folha.infrastructure.loaders.json_loader import (
    CATALOGO_PADRAO,
    JSONInputLoader,
    PayrollInput,
    load_input_file,
)

__all__ = [
    "CATALOGO_PADRAO",
    "JSONInputLoader",
    "PayrollInput",
    "load_input_file",
]
