"""Parsers for uploaded financial statement tables."""

from .numbers import parse_number
from .statement_parser import StatementParser

__all__ = [
    "StatementParser",
    "parse_number",
]
