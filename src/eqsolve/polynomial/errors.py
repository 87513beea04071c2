from __future__ import annotations

from enum import StrEnum


class PolynomialErrorCode(StrEnum):
    E_POLY_EVAL_EMPTY = "E_POLY_EVAL_EMPTY"
    E_POLY_BUILD_INVALID = "E_POLY_BUILD_INVALID"


_MESSAGES: dict[PolynomialErrorCode, str] = {
    PolynomialErrorCode.E_POLY_EVAL_EMPTY: "Failed to evaluate function",
    PolynomialErrorCode.E_POLY_BUILD_INVALID: "Invalid input coefficient",
}


class PolynomialError(ValueError):
    def __init__(self, code: PolynomialErrorCode, input_text: str | None = None) -> None:
        super().__init__(f"{code.value}: {_MESSAGES[code]}")
        self.code = code
        self.message = _MESSAGES[code]
        self.input_text = input_text
