from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


class SolveErrorCode(StrEnum):
    E_MATRIX_TOO_SMALL = "E_MATRIX_TOO_SMALL"
    E_MATRIX_EQUATION_AMOUNT = "E_MATRIX_EQUATION_AMOUNT"
    E_MATRIX_COEFFICIENT_AMOUNT = "E_MATRIX_COEFFICIENT_AMOUNT"
    E_SOLVE_DEPENDENT = "E_SOLVE_DEPENDENT"
    E_SOLVE_EMPTY = "E_SOLVE_EMPTY"


@dataclass(frozen=True, slots=True)
class SolveErrorDetail:
    code: SolveErrorCode
    message: str
    witness: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("solve error message must be non-empty")
        canonical_witness = {key: self.witness[key] for key in sorted(self.witness)}
        object.__setattr__(self, "witness", MappingProxyType(canonical_witness))


class SolveError(ValueError):
    def __init__(self, detail: SolveErrorDetail) -> None:
        super().__init__(f"{detail.code.value}: {detail.message}")
        self.detail = detail

    @property
    def code(self) -> SolveErrorCode:
        return self.detail.code


class EquationIndexError(IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"coefficient index {index} out of range for equation of length {length}")
        self.index = index
        self.length = length


class MatrixStageError(ValueError):
    """Raised when a pipeline stage is invoked on a matrix in the wrong stage."""

    def __init__(self, operation: str, stage: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"cannot {operation} a matrix in stage '{stage}'; "
            f"expected one of: {', '.join(allowed)}"
        )
        self.operation = operation
        self.stage = stage
        self.allowed = allowed


def too_small(size: int) -> SolveError:
    return SolveError(
        SolveErrorDetail(
            code=SolveErrorCode.E_MATRIX_TOO_SMALL,
            message=f"Matrix size of {size} is too small",
            witness={"size": size},
        )
    )


def unfitting_equation_amount(amount: int, size: int) -> SolveError:
    return SolveError(
        SolveErrorDetail(
            code=SolveErrorCode.E_MATRIX_EQUATION_AMOUNT,
            message=f"Amount {amount} of equations does not fit in matrix of size {size}",
            witness={"amount": amount, "size": size},
        )
    )


def unfitting_coefficient_amount(amount: int, size: int) -> SolveError:
    return SolveError(
        SolveErrorDetail(
            code=SolveErrorCode.E_MATRIX_COEFFICIENT_AMOUNT,
            message=f"Amount {amount} of coefficients does not fit in matrix of size {size}",
            witness={"amount": amount, "size": size},
        )
    )


def dependent_solution_set(row: int) -> SolveError:
    return SolveError(
        SolveErrorDetail(
            code=SolveErrorCode.E_SOLVE_DEPENDENT,
            message="The system of equations is dependent",
            witness={"row": row},
        )
    )


def empty_solution_set(row: int) -> SolveError:
    return SolveError(
        SolveErrorDetail(
            code=SolveErrorCode.E_SOLVE_EMPTY,
            message="The system of equations has no solution",
            witness={"row": row},
        )
    )
