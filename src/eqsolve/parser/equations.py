from __future__ import annotations

import math

from eqsolve.solver.equation import Equation

from .errors import ParseError, ParseErrorCode


def parse_number(text: str) -> float:
    """Read one finite decimal, e.g. ``-6``, ``4.5``, ``.5`` or ``1e-3``."""
    token = text.strip()
    # float() also takes "1_000"; equation text does not
    if not token or "_" in token:
        raise ParseError(
            ParseErrorCode.E_PARSE_NUMBER_INVALID,
            f"'{token}' is not a decimal number",
            text,
            token=token,
        )
    try:
        value = float(token)
    except ValueError as exc:
        raise ParseError(
            ParseErrorCode.E_PARSE_NUMBER_INVALID,
            f"'{token}' is not a decimal number",
            text,
            token=token,
        ) from exc
    if not math.isfinite(value):
        raise ParseError(
            ParseErrorCode.E_PARSE_NUMBER_NONFINITE,
            f"'{token}' is not finite",
            text,
            token=token,
        )
    return value


def parse_equation(text: str) -> Equation:
    """Parse ``"c0, c1, ... = result"`` into an :class:`Equation`.

    An empty left-hand side yields an equation with no coefficients, which
    ``validate`` later rejects as an unfitting coefficient amount.
    """
    if text.count("=") != 1:
        raise ParseError(
            ParseErrorCode.E_PARSE_EQUATION_INVALID,
            "equation must contain exactly one '='",
            text,
        )
    lhs, _, rhs = text.partition("=")
    tokens = lhs.split(",") if lhs.strip() else []
    coefficients = [_operand(text, token, position) for position, token in enumerate(tokens)]
    return Equation(coefficients, _operand(text, rhs, None))


def _operand(text: str, token: str, position: int | None) -> float:
    try:
        return parse_number(token)
    except ParseError as exc:
        where = "result" if position is None else f"coefficient {position}"
        raise ParseError(
            ParseErrorCode.E_PARSE_EQUATION_INVALID,
            f"invalid {where}: {exc.detail.message}",
            text,
            token=exc.detail.token,
            position=position,
        ) from exc
