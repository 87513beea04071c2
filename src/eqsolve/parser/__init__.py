from .equations import parse_equation, parse_number
from .errors import ParseError, ParseErrorCode, ParseErrorDetail

__all__ = [
    "ParseError",
    "ParseErrorCode",
    "ParseErrorDetail",
    "parse_equation",
    "parse_number",
]
