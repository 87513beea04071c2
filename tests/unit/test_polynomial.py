from __future__ import annotations

import pytest

from eqsolve.polynomial import Polynomial, PolynomialError, PolynomialErrorCode, polynomial

pytestmark = pytest.mark.unit


def test_horner_evaluation() -> None:
    assert polynomial(1.0, 2.0, 3.0).eval(2.0) == 11.0
    assert polynomial(2.0, 0.0, -1.0).eval(-3.0) == 17.0
    assert polynomial(5.0).eval(100.0) == 5.0


def test_polynomial_is_callable() -> None:
    assert polynomial(1.0, 1.0)(4.0) == 5.0


def test_empty_polynomial_cannot_be_evaluated() -> None:
    with pytest.raises(PolynomialError) as exc_info:
        Polynomial([]).eval(1.0)

    assert exc_info.value.code is PolynomialErrorCode.E_POLY_EVAL_EMPTY
    assert str(exc_info.value) == "E_POLY_EVAL_EMPTY: Failed to evaluate function"


def test_build_from_string_arguments() -> None:
    built = Polynomial.build(["3", "-1.5", "0"])
    assert built == polynomial(3.0, -1.5, 0.0)
    assert built.degree == 2
    assert len(built) == 3


def test_build_rejects_invalid_coefficient() -> None:
    with pytest.raises(PolynomialError) as exc_info:
        Polynomial.build(["1", "x"])

    assert exc_info.value.code is PolynomialErrorCode.E_POLY_BUILD_INVALID
    assert exc_info.value.input_text == "x"
    assert exc_info.value.message == "Invalid input coefficient"


def test_build_accepts_no_arguments() -> None:
    empty = Polynomial.build([])
    assert empty.coefficients == ()
    assert empty.degree is None


def test_rendering_and_hashing() -> None:
    assert str(polynomial(1.0, 2.0)) == "[1.0, 2.0]"
    assert repr(polynomial(1.0)) == "Polynomial([1.0])"
    assert len({polynomial(1.0, 2.0), polynomial(1.0, 2.0)}) == 1
