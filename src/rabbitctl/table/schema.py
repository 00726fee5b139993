from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Self

from attrs import field, frozen

from rabbitctl.command.exceptions import InvalidOption

type Record = dict[str, str]
"""One parsed row, keyed by column name in requested order."""


class Matcher(StrEnum):
    """Token shapes a column value can take in the tools' table output."""

    WORD = r"\w+"
    ALPHA = r"[^\s\d]+"
    TOKEN = r"\S+"
    NUMBER = r"-?\d+(?:\.\d+)?"
    BOOL = r"true|false"
    LIST = r"\[[^\]]*\]"
    PEER = r"\S+ -> \S+"
    CHANNEL = r"\S+ -> \S+ \(\d+\)"


@frozen
class ColumnSpec:
    name: str
    matcher: Matcher = Matcher.TOKEN

    @property
    def group(self) -> str:
        return f"({self.matcher.value})"


@frozen
class ColumnRegistry:
    """Known columns of one listing verb."""

    columns: Mapping[str, ColumnSpec]
    default: str = field()

    @default.validator
    def _check_default(self, _attribute: object, value: str) -> None:
        if value not in self.columns:
            raise ValueError(f"default column {value!r} is not registered")

    @classmethod
    def of(cls, default: str, **matchers: Matcher) -> Self:
        """Build a registry from ``column=Matcher`` pairs.

        Names that are not identifiers go through a dict:
        ``ColumnRegistry.of("name", **{"apply-to": Matcher.WORD})``.
        """
        columns = {name: ColumnSpec(name, matcher) for name, matcher in matchers.items()}
        return cls(columns=columns, default=default)

    def resolve(self, requested: Sequence[str]) -> tuple[ColumnSpec, ...]:
        """Look up the requested columns, falling back to the default column."""
        if not requested:
            return (self.columns[self.default],)

        unknown = [name for name in requested if name not in self.columns]
        if unknown:
            known = ", ".join(self.columns)
            raise InvalidOption(
                f"unknown column(s) {', '.join(unknown)}; expected one of: {known}"
            )
        if len(set(requested)) != len(requested):
            raise InvalidOption(f"duplicate columns requested: {', '.join(requested)}")
        return tuple(self.columns[name] for name in requested)

    def __contains__(self, name: object) -> bool:
        return name in self.columns


@frozen
class ParsedTable:
    records: list[Record]
    unparsed: list[str]
    """Non-blank lines that did not match the requested row shape."""
