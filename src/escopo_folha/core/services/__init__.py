"""Domain services for Escopo Folha."""

from escopo_folha.core.services.summary_generator import (
    PayrollSummaryGenerator,
    generate_summary,
)

__all__ = [
    "PayrollSummaryGenerator",
    "generate_summary",
]
