from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .equation import Equation
from .errors import (
    MatrixStageError,
    dependent_solution_set,
    empty_solution_set,
    too_small,
    unfitting_coefficient_amount,
    unfitting_equation_amount,
)
from .settings import SolverSettings, load_solver_settings


class MatrixStage(StrEnum):
    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"
    TRIANGULAR = "triangular"
    SOLVED = "solved"


@dataclass(frozen=True, slots=True)
class CoefficientMatrix:
    """A square linear system moving through ``validate -> convert -> solve``.

    Every stage returns a new matrix value; equations held by an earlier
    value are never modified. After ``solve`` row ``i`` reads ``x_i = result``.
    """

    size: int
    equations: tuple[Equation, ...] = ()
    stage: MatrixStage = MatrixStage.UNVALIDATED

    @classmethod
    def new(cls, size: int) -> CoefficientMatrix:
        if isinstance(size, bool):
            raise TypeError("matrix size must be an integer")
        return cls(size=operator.index(size))

    @classmethod
    def from_rows(
        cls,
        coefficients: Sequence[Sequence[float]] | NDArray[np.float64],
        results: Sequence[float] | ArrayLike,
        *,
        size: int | None = None,
    ) -> CoefficientMatrix:
        rows = [list(row) for row in coefficients]
        values = [float(value) for value in np.asarray(results, dtype=np.float64).reshape(-1)]
        if len(rows) != len(values):
            raise ValueError("coefficient rows and results must have the same length")
        matrix = cls.new(len(rows) if size is None else size)
        for row, result in zip(rows, values, strict=True):
            matrix = matrix.add_equation(Equation(row, result))
        return matrix

    def add_equation(self, equation: Equation) -> CoefficientMatrix:
        self._require_stage("add an equation to", (MatrixStage.UNVALIDATED,))
        return CoefficientMatrix(
            size=self.size,
            equations=(*self.equations, equation.copy()),
            stage=MatrixStage.UNVALIDATED,
        )

    def validate(self) -> CoefficientMatrix:
        self._require_stage("validate", (MatrixStage.UNVALIDATED,))
        if self.size < 1:
            raise too_small(self.size)
        if len(self.equations) != self.size:
            raise unfitting_equation_amount(len(self.equations), self.size)

        unfitting_amount: int | None = None
        for equation in self.equations:
            if len(equation) != self.size:
                unfitting_amount = len(equation)
        if unfitting_amount is not None:
            raise unfitting_coefficient_amount(unfitting_amount, self.size)

        return CoefficientMatrix(
            size=self.size,
            equations=tuple(equation.copy() for equation in self.equations),
            stage=MatrixStage.VALIDATED,
        )

    def convert(self) -> CoefficientMatrix:
        """Reduce to upper triangular form with partial pivoting."""
        self._require_stage("convert", (MatrixStage.VALIDATED,))
        work = self.augmented_array()
        size = self.size
        for a in range(size - 1):
            best = a + int(np.argmax(np.abs(work[a:, a])))
            if abs(work[best, a]) > abs(work[a, a]):
                work[[a, best]] = work[[best, a]]

            pivot = work[a, a]
            if pivot == 0.0:
                # column is zero from row a down; solve classifies the system
                continue
            ratios = work[a + 1 :, a] / pivot
            work[a + 1 :, a:] -= np.outer(ratios, work[a, a:])

        return self._with_array(work, MatrixStage.TRIANGULAR)

    def solve(self, *, settings: SolverSettings | None = None) -> CoefficientMatrix:
        """Gauss-Jordan reduce a triangular matrix so the result column is the solution."""
        self._require_stage("solve", (MatrixStage.VALIDATED, MatrixStage.TRIANGULAR))
        tolerance = (settings if settings is not None else load_solver_settings()).zero_tolerance
        work = self.augmented_array()
        size = self.size
        for i in range(size - 1, -1, -1):
            divisor = work[i, i]
            if abs(divisor) <= tolerance:
                if abs(work[i, size]) <= tolerance:
                    raise dependent_solution_set(i)
                raise empty_solution_set(i)

            work[i, :] /= divisor
            if i > 0:
                work[:i, :] -= np.outer(work[:i, i], work[i, :])

        return self._with_array(work, MatrixStage.SOLVED)

    def solution(self) -> NDArray[np.float64]:
        self._require_stage("read the solution of", (MatrixStage.SOLVED,))
        return np.array([equation.result for equation in self.equations], dtype=np.float64)

    def augmented_array(self) -> NDArray[np.float64]:
        """Rows as ``[c0, ..., c_{n-1}, result]``; requires equal-length rows."""
        if not self.equations:
            return np.zeros((0, self.size + 1), dtype=np.float64)
        return np.vstack([equation.augmented() for equation in self.equations])

    def coefficient_array(self) -> NDArray[np.float64]:
        return self.augmented_array()[:, :-1]

    def result_array(self) -> NDArray[np.float64]:
        return self.augmented_array()[:, -1]

    def render(self, precision: int | None = None) -> str:
        return "".join(f"{equation.render(precision)}\n" for equation in self.equations)

    def __str__(self) -> str:
        return self.render(load_solver_settings().rendering.float_precision)

    def _with_array(self, work: NDArray[np.float64], stage: MatrixStage) -> CoefficientMatrix:
        return CoefficientMatrix(
            size=self.size,
            equations=tuple(Equation._from_augmented_row(row) for row in work),
            stage=stage,
        )

    def _require_stage(self, operation: str, allowed: tuple[MatrixStage, ...]) -> None:
        if self.stage not in allowed:
            raise MatrixStageError(
                operation,
                self.stage.value,
                tuple(stage.value for stage in allowed),
            )
