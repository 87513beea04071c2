from .errors import PolynomialError, PolynomialErrorCode
from .horner import Polynomial, polynomial

__all__ = [
    "Polynomial",
    "PolynomialError",
    "PolynomialErrorCode",
    "polynomial",
]
