from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .matrix import CoefficientMatrix
from .settings import SolverSettings


def solve_system(
    matrix: CoefficientMatrix, *, settings: SolverSettings | None = None
) -> CoefficientMatrix:
    return matrix.validate().convert().solve(settings=settings)


def solve_equations(
    coefficients: Sequence[Sequence[float]] | NDArray[np.float64],
    results: Sequence[float] | ArrayLike,
    *,
    settings: SolverSettings | None = None,
) -> NDArray[np.float64]:
    """Solve ``coefficients @ x = results`` and return ``x``.

    Raises ``SolveError`` when the system is malformed or has no unique solution.
    """
    matrix = CoefficientMatrix.from_rows(coefficients, results)
    return solve_system(matrix, settings=settings).solution()
