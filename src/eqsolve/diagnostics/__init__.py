from .adapters import adapt_solve_error, build_diagnostic_event, residual_diagnostics
from .catalog import CLI_EQUATION_INVALID, DIAGNOSTIC_CATALOG, CatalogEntry
from .models import DiagnosticEvent, Severity, SolverStage
from .sort import diagnostic_sort_key, sort_diagnostics

__all__ = [
    "CLI_EQUATION_INVALID",
    "DIAGNOSTIC_CATALOG",
    "CatalogEntry",
    "DiagnosticEvent",
    "Severity",
    "SolverStage",
    "adapt_solve_error",
    "build_diagnostic_event",
    "diagnostic_sort_key",
    "residual_diagnostics",
    "sort_diagnostics",
]
