from __future__ import annotations

from .parser import compose_pattern, parse, parse_table
from .schema import ColumnRegistry, ColumnSpec, Matcher, ParsedTable, Record

__all__ = [
    "ColumnRegistry",
    "ColumnSpec",
    "Matcher",
    "ParsedTable",
    "Record",
    "compose_pattern",
    "parse",
    "parse_table",
]
