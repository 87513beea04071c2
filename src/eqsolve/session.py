from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from eqsolve.diagnostics import (
    DiagnosticEvent,
    adapt_solve_error,
    residual_diagnostics,
    sort_diagnostics,
)
from eqsolve.solver import (
    CoefficientMatrix,
    Equation,
    ResidualMetrics,
    SolveError,
    SolverSettings,
    SolveStatus,
    classify_status,
    load_solver_settings,
    residual_against,
    solve_system,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionResult:
    solution: NDArray[np.float64] | None
    residual: ResidualMetrics | None
    status: SolveStatus
    diagnostics: tuple[DiagnosticEvent, ...]

    @property
    def solved(self) -> bool:
        return self.solution is not None


class MatrixSolver:
    """Incremental front end for hosts that feed equations one at a time.

    Failures are reported as diagnostics on the returned ``SessionResult``;
    the pending matrix is left untouched so the caller can inspect it. Once
    solved, further ``solve`` calls return the same result until ``reset``.
    """

    def __init__(self, size: int, *, settings: SolverSettings | None = None) -> None:
        self._settings = settings if settings is not None else load_solver_settings()
        self._size = size
        self._matrix = CoefficientMatrix.new(size)
        self._solved: SessionResult | None = None

    @property
    def matrix(self) -> CoefficientMatrix:
        return self._matrix

    def add_eq(self, values: Sequence[float] | ArrayLike, result: float) -> None:
        coefficients = np.asarray(values, dtype=np.float64).reshape(-1)
        self._matrix = self._matrix.add_equation(Equation(coefficients, result))
        _LOGGER.debug("added equation %d: %s", len(self._matrix.equations) - 1, coefficients)

    def reset(self) -> None:
        self._matrix = CoefficientMatrix.new(self._size)
        self._solved = None

    def solve(self) -> SessionResult:
        if self._solved is not None:
            _LOGGER.debug("session already solved; returning stored result")
            return self._solved

        precision = self._settings.rendering.float_precision
        original = self._matrix
        _LOGGER.info("Before:\n%s", original.render(precision))
        try:
            solved = solve_system(original, settings=self._settings)
        except SolveError as exc:
            _LOGGER.warning("solve failed: %s", exc)
            return SessionResult(
                solution=None,
                residual=None,
                status="fail",
                diagnostics=(adapt_solve_error(exc),),
            )

        solution = solved.solution()
        metrics = residual_against(original, solution)
        status = classify_status(metrics.res_rel, self._settings.residual)
        self._matrix = solved
        _LOGGER.info("Solved:\n%s", solved.render(precision))
        self._solved = SessionResult(
            solution=solution,
            residual=metrics,
            status=status,
            diagnostics=sort_diagnostics(residual_diagnostics(status, metrics)),
        )
        return self._solved
