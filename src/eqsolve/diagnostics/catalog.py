from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from eqsolve.polynomial.errors import PolynomialErrorCode
from eqsolve.solver.errors import SolveErrorCode

from .models import Severity, SolverStage

RESIDUAL_DEGRADED = "W_SOLVE_RESIDUAL_DEGRADED"
RESIDUAL_FAIL = "E_SOLVE_RESIDUAL_FAIL"
CLI_EQUATION_INVALID = "E_CLI_EQUATION_INVALID"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    severity: Severity
    solver_stage: SolverStage
    suggested_action: str


DIAGNOSTIC_CATALOG: Mapping[str, CatalogEntry] = MappingProxyType(
    {
        SolveErrorCode.E_MATRIX_TOO_SMALL.value: CatalogEntry(
            Severity.ERROR, SolverStage.VALIDATE, "declare a matrix size >= 1"
        ),
        SolveErrorCode.E_MATRIX_EQUATION_AMOUNT.value: CatalogEntry(
            Severity.ERROR,
            SolverStage.VALIDATE,
            "add exactly one equation per declared unknown",
        ),
        SolveErrorCode.E_MATRIX_COEFFICIENT_AMOUNT.value: CatalogEntry(
            Severity.ERROR,
            SolverStage.VALIDATE,
            "give every equation one coefficient per declared unknown",
        ),
        SolveErrorCode.E_SOLVE_DEPENDENT.value: CatalogEntry(
            Severity.ERROR,
            SolverStage.SOLVE,
            "replace a redundant equation with an independent one",
        ),
        SolveErrorCode.E_SOLVE_EMPTY.value: CatalogEntry(
            Severity.ERROR,
            SolverStage.SOLVE,
            "check the equations for contradictory right-hand sides",
        ),
        RESIDUAL_DEGRADED: CatalogEntry(
            Severity.WARNING,
            SolverStage.POSTPROCESS,
            "inspect the system for near-singular rows before trusting the solution",
        ),
        RESIDUAL_FAIL: CatalogEntry(
            Severity.ERROR,
            SolverStage.POSTPROCESS,
            "the solution does not satisfy the input equations; rescale or reformulate",
        ),
        CLI_EQUATION_INVALID: CatalogEntry(
            Severity.ERROR,
            SolverStage.PARSE,
            "write each equation as 'c0,c1,...=result' with finite numbers",
        ),
        PolynomialErrorCode.E_POLY_BUILD_INVALID.value: CatalogEntry(
            Severity.ERROR,
            SolverStage.PARSE,
            "pass every coefficient as a finite decimal number",
        ),
        PolynomialErrorCode.E_POLY_EVAL_EMPTY.value: CatalogEntry(
            Severity.ERROR,
            SolverStage.SOLVE,
            "provide at least one polynomial coefficient",
        ),
    }
)
