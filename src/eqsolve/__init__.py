import logging as _logging

from .polynomial import Polynomial, PolynomialError, polynomial
from .session import MatrixSolver, SessionResult
from .solver import (
    CoefficientMatrix,
    Equation,
    EquationIndexError,
    MatrixStage,
    MatrixStageError,
    SolveError,
    SolveErrorCode,
    solve_equations,
    solve_system,
)

__all__ = [
    "CoefficientMatrix",
    "Equation",
    "EquationIndexError",
    "MatrixSolver",
    "MatrixStage",
    "MatrixStageError",
    "Polynomial",
    "PolynomialError",
    "SessionResult",
    "SolveError",
    "SolveErrorCode",
    "polynomial",
    "solve_equations",
    "solve_system",
]

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
