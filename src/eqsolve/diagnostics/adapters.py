from __future__ import annotations

from collections.abc import Mapping

from eqsolve.solver.errors import SolveError, SolveErrorCode
from eqsolve.solver.residual import ResidualMetrics, SolveStatus

from .catalog import DIAGNOSTIC_CATALOG, RESIDUAL_DEGRADED, RESIDUAL_FAIL
from .models import DiagnosticEvent

_MATRIX_ELEMENT_ID = "matrix"
_ROW_SCOPED_CODES = frozenset({SolveErrorCode.E_SOLVE_DEPENDENT, SolveErrorCode.E_SOLVE_EMPTY})


def build_diagnostic_event(
    code: str,
    message: str,
    *,
    element_id: str,
    row: int | None = None,
    witness: Mapping[str, str | int | float | None] | None = None,
) -> DiagnosticEvent:
    """Build an event whose severity, stage and suggested action come from the catalog."""
    try:
        entry = DIAGNOSTIC_CATALOG[code]
    except KeyError as exc:
        raise ValueError(f"unknown diagnostic code '{code}'") from exc
    return DiagnosticEvent(
        code=code,
        severity=entry.severity,
        solver_stage=entry.solver_stage,
        message=message,
        suggested_action=entry.suggested_action,
        element_id=element_id,
        row=row,
        witness=dict(witness or {}),
    )


def adapt_solve_error(
    error: SolveError,
    *,
    element_id: str = _MATRIX_ELEMENT_ID,
) -> DiagnosticEvent:
    detail = error.detail
    return build_diagnostic_event(
        detail.code.value,
        detail.message,
        element_id=element_id,
        row=detail.witness.get("row") if detail.code in _ROW_SCOPED_CODES else None,
        witness=detail.witness,
    )


def residual_diagnostics(
    status: SolveStatus,
    metrics: ResidualMetrics,
    *,
    element_id: str = _MATRIX_ELEMENT_ID,
) -> tuple[DiagnosticEvent, ...]:
    if status == "pass":
        return ()
    return (
        build_diagnostic_event(
            RESIDUAL_DEGRADED if status == "degraded" else RESIDUAL_FAIL,
            f"relative residual {metrics.res_rel:.3e} is outside the pass band",
            element_id=element_id,
            witness={
                "res_l2": metrics.res_l2,
                "res_linf": metrics.res_linf,
                "res_rel": metrics.res_rel,
                "status": status,
            },
        ),
    )
