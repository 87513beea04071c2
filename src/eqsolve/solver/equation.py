from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .errors import EquationIndexError


def format_scalar(value: float, precision: int | None = None) -> str:
    if precision is None:
        return repr(float(value))
    return f"{float(value):.{precision}f}"


class Equation:
    """One row of a linear system: ``c0*x0 + c1*x1 + ... = result``.

    The coefficient count is fixed at construction; individual coefficient
    values and the result may be replaced in place.
    """

    __slots__ = ("_coefficients", "_result")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, coefficients: Iterable[float] | ArrayLike, result: float) -> None:
        values = np.array(coefficients, dtype=np.float64)
        if values.ndim != 1:
            raise ValueError("equation coefficients must be a one-dimensional sequence")
        if not np.isfinite(values).all():
            raise ValueError("equation coefficients must be finite")
        result_value = float(result)
        if not np.isfinite(result_value):
            raise ValueError("equation result must be finite")
        self._coefficients: NDArray[np.float64] = values
        self._result = result_value

    @classmethod
    def _from_augmented_row(cls, row: NDArray[np.float64]) -> Equation:
        equation = cls.__new__(cls)
        equation._coefficients = np.array(row[:-1], dtype=np.float64)
        equation._result = float(row[-1])
        return equation

    @property
    def coefficients(self) -> tuple[float, ...]:
        return tuple(float(value) for value in self._coefficients)

    @property
    def result(self) -> float:
        return self._result

    @result.setter
    def result(self, value: float) -> None:
        self._result = float(value)

    def __len__(self) -> int:
        return int(self._coefficients.shape[0])

    def __iter__(self) -> Iterator[float]:
        return iter(self.coefficients)

    def __getitem__(self, index: int) -> float:
        return float(self._coefficients[self._checked_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._coefficients[self._checked_index(index)] = float(value)

    def _checked_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int | np.integer):
            raise TypeError("equation indices must be integers")
        length = len(self)
        if not 0 <= index < length:
            raise EquationIndexError(int(index), length)
        return int(index)

    def copy(self) -> Equation:
        return Equation._from_augmented_row(self.augmented())

    def augmented(self) -> NDArray[np.float64]:
        """Coefficients followed by the result, as a new float64 array."""
        return np.append(self._coefficients, self._result)

    def render(self, precision: int | None = None) -> str:
        coefficients = ", ".join(format_scalar(value, precision) for value in self._coefficients)
        return f"[{coefficients}] = {format_scalar(self._result, precision)}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Equation({list(self.coefficients)!r}, {self._result!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Equation):
            return NotImplemented
        return self._result == other._result and bool(
            np.array_equal(self._coefficients, other._coefficients)
        )
