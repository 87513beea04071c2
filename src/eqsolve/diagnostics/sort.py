from __future__ import annotations

from collections.abc import Iterable

from .models import DiagnosticEvent, Severity, SolverStage

# errors before warnings, then pipeline order
_SEVERITY_RANK = {severity: rank for rank, severity in enumerate(Severity)}
_STAGE_RANK = {stage: rank for rank, stage in enumerate(SolverStage)}


def diagnostic_sort_key(event: DiagnosticEvent) -> tuple[int, int, int, str, str]:
    return (
        _SEVERITY_RANK[event.severity],
        _STAGE_RANK[event.solver_stage],
        -1 if event.row is None else event.row,
        event.code,
        event.message,
    )


def sort_diagnostics(events: Iterable[DiagnosticEvent]) -> tuple[DiagnosticEvent, ...]:
    return tuple(sorted(events, key=diagnostic_sort_key))
