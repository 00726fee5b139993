from __future__ import annotations

import re
from collections.abc import Sequence

from loguru import logger

from .schema import ColumnRegistry, ColumnSpec, ParsedTable, Record


def compose_pattern(columns: Sequence[ColumnSpec]) -> re.Pattern[str]:
    """Join the column matchers, in the given order, into one full-line row pattern."""
    body = r"\s+".join(column.group for column in columns)
    return re.compile(rf"\s*{body}\s*")


def parse_table(
    stdout: str,
    columns: Sequence[str],
    registry: ColumnRegistry,
) -> ParsedTable:
    """Parse tool table output into records, keeping the lines that did not match.

    Every line must match the composed row pattern in full; anything else
    (banners, progress messages, the column header) is left out of the
    records. An empty `columns` selects the registry's default column.
    """
    specs = registry.resolve(columns)
    names = [spec.name for spec in specs]
    pattern = compose_pattern(specs)

    records: list[Record] = []
    unparsed: list[str] = []
    header_seen = False
    for line in stdout.splitlines():
        # only the first such line ahead of any row is a header
        if not header_seen and not records and _is_header(line, names):
            header_seen = True
            continue
        match = pattern.fullmatch(line)
        if match is None:
            if line.strip():
                logger.trace("Skipping non-row line: {!r}", line)
                unparsed.append(line)
            continue
        records.append(dict(zip(names, match.groups(), strict=True)))

    return ParsedTable(records=records, unparsed=unparsed)


def parse(stdout: str, columns: Sequence[str], registry: ColumnRegistry) -> list[Record]:
    """Parse tool table output into records, silently dropping non-matching lines."""
    return parse_table(stdout, columns, registry).records


def _is_header(line: str, names: Sequence[str]) -> bool:
    return line.split() == list(names)
