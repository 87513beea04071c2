from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .matrix import CoefficientMatrix
from .settings import ResidualThresholds, load_solver_settings

SolveStatus: TypeAlias = Literal["pass", "degraded", "fail"]

_DEFAULT_THRESHOLDS = load_solver_settings().residual
EPSILON = _DEFAULT_THRESHOLDS.epsilon
PASS_MAX = _DEFAULT_THRESHOLDS.pass_max
DEGRADED_MAX = _DEFAULT_THRESHOLDS.degraded_max


@dataclass(frozen=True, slots=True)
class ResidualMetrics:
    res_l2: float
    res_linf: float
    res_rel: float


def compute_residual_metrics(
    A: ArrayLike,
    b: ArrayLike,
    x: ArrayLike,
    *,
    epsilon: float = EPSILON,
) -> ResidualMetrics:
    matrix = np.asarray(A, dtype=np.float64)
    vector = np.asarray(b, dtype=np.float64)
    solution = np.asarray(x, dtype=np.float64)
    residual = (matrix @ solution) - vector
    res_l2 = _vector_l2_norm(residual)
    res_linf = _vector_inf_norm(residual)
    denominator = (
        (_matrix_inf_norm(matrix) * _vector_inf_norm(solution)) + _vector_inf_norm(vector) + epsilon
    )
    return ResidualMetrics(res_l2=res_l2, res_linf=res_linf, res_rel=res_linf / denominator)


def residual_against(original: CoefficientMatrix, x: ArrayLike) -> ResidualMetrics:
    """Substitute ``x`` back into the equations of ``original``."""
    return compute_residual_metrics(original.coefficient_array(), original.result_array(), x)


def classify_status(res_rel: float, thresholds: ResidualThresholds | None = None) -> SolveStatus:
    bands = thresholds if thresholds is not None else _DEFAULT_THRESHOLDS
    if res_rel <= bands.pass_max:
        return "pass"
    if res_rel <= bands.degraded_max:
        return "degraded"
    return "fail"


def _vector_l2_norm(vector: NDArray[np.float64]) -> float:
    if vector.size == 0:
        return 0.0
    return float(np.linalg.norm(vector, ord=2))


def _vector_inf_norm(vector: NDArray[np.float64]) -> float:
    if vector.size == 0:
        return 0.0
    return float(np.max(np.abs(vector)))


def _matrix_inf_norm(matrix: NDArray[np.float64]) -> float:
    if matrix.size == 0:
        return 0.0
    return float(np.max(np.sum(np.abs(matrix), axis=1)))
