from __future__ import annotations

from collections.abc import Iterable, Sequence

from eqsolve.parser import ParseError, parse_number
from eqsolve.solver.equation import format_scalar

from .errors import PolynomialError, PolynomialErrorCode


class Polynomial:
    """Single-variable polynomial, coefficients ordered highest degree first."""

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Sequence[float]) -> None:
        self._coefficients = tuple(float(value) for value in coefficients)

    @classmethod
    def build(cls, args: Iterable[str]) -> Polynomial:
        coefficients: list[float] = []
        for arg in args:
            try:
                coefficients.append(parse_number(arg))
            except ParseError as exc:
                raise PolynomialError(PolynomialErrorCode.E_POLY_BUILD_INVALID, arg) from exc
        return cls(coefficients)

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._coefficients

    @property
    def degree(self) -> int | None:
        if not self._coefficients:
            return None
        return len(self._coefficients) - 1

    def eval(self, x: float) -> float:
        if not self._coefficients:
            raise PolynomialError(PolynomialErrorCode.E_POLY_EVAL_EMPTY)
        leading, *rest = self._coefficients
        total = leading
        for coefficient in rest:
            total = coefficient + total * x
        return total

    __call__ = eval

    def __len__(self) -> int:
        return len(self._coefficients)

    def __str__(self) -> str:
        return f"[{', '.join(format_scalar(value) for value in self._coefficients)}]"

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)


def polynomial(*coefficients: float) -> Polynomial:
    return Polynomial(coefficients)
