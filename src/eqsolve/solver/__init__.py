from .equation import Equation, format_scalar
from .errors import (
    EquationIndexError,
    MatrixStageError,
    SolveError,
    SolveErrorCode,
    SolveErrorDetail,
    dependent_solution_set,
    empty_solution_set,
    too_small,
    unfitting_coefficient_amount,
    unfitting_equation_amount,
)
from .matrix import CoefficientMatrix, MatrixStage
from .pipeline import solve_equations, solve_system
from .residual import (
    DEGRADED_MAX,
    EPSILON,
    PASS_MAX,
    ResidualMetrics,
    SolveStatus,
    classify_status,
    compute_residual_metrics,
    residual_against,
)
from .settings import (
    DEFAULT_SETTINGS_PATH,
    RenderSettings,
    ResidualThresholds,
    SolverConfigError,
    SolverSettings,
    load_solver_settings,
)

__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "DEGRADED_MAX",
    "EPSILON",
    "PASS_MAX",
    "CoefficientMatrix",
    "Equation",
    "EquationIndexError",
    "MatrixStage",
    "MatrixStageError",
    "RenderSettings",
    "ResidualMetrics",
    "ResidualThresholds",
    "SolveError",
    "SolveErrorCode",
    "SolveErrorDetail",
    "SolveStatus",
    "SolverConfigError",
    "SolverSettings",
    "classify_status",
    "compute_residual_metrics",
    "dependent_solution_set",
    "empty_solution_set",
    "format_scalar",
    "load_solver_settings",
    "residual_against",
    "solve_equations",
    "solve_system",
    "too_small",
    "unfitting_coefficient_amount",
    "unfitting_equation_amount",
]
