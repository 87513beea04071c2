from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ParseErrorCode(StrEnum):
    E_PARSE_NUMBER_INVALID = "E_PARSE_NUMBER_INVALID"
    E_PARSE_NUMBER_NONFINITE = "E_PARSE_NUMBER_NONFINITE"
    E_PARSE_EQUATION_INVALID = "E_PARSE_EQUATION_INVALID"


@dataclass(frozen=True, slots=True)
class ParseErrorDetail:
    code: ParseErrorCode
    message: str
    input_text: str
    token: str | None = None
    position: int | None = None


class ParseError(ValueError):
    """Raised for equation or coefficient text that cannot be read as numbers.

    ``position`` is the coefficient index the failure refers to; it is
    ``None`` for the whole equation or for its right-hand side.
    """

    def __init__(
        self,
        code: ParseErrorCode,
        message: str,
        input_text: str,
        *,
        token: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(f"{code.value}: {message}")
        self.detail = ParseErrorDetail(
            code=code,
            message=message,
            input_text=input_text,
            token=token,
            position=position,
        )
