from __future__ import annotations

from collections.abc import Mapping

from attrs import field, frozen

from .exceptions import InvalidOption

type FlagValue = str | int | None
type Flags = Mapping[str, FlagValue]
"""Operation-specific flags; a ``None`` value renders as a bare switch."""


@frozen
class CommonOptions:
    """Cross-cutting options accepted by nearly every verb."""

    node: str | None = None
    """Target node, e.g. ``rabbit@host``. ``None`` lets the tool pick its default."""

    quiet: bool | None = None
    """Suppress informational output from the tool. ``None`` defers to the defaults."""

    timeout_seconds: int | None = None
    """Timeout passed to the tool with ``-t``. Must be positive when set."""

    vhost: str | None = None
    """Virtual host scope passed with ``-p``."""

    def merge(self, other: CommonOptions | None) -> CommonOptions:
        """Return a copy where every field set on `other` wins."""
        if other is None:
            return self
        return CommonOptions(
            node=other.node if other.node is not None else self.node,
            quiet=other.quiet if other.quiet is not None else self.quiet,
            timeout_seconds=(
                other.timeout_seconds
                if other.timeout_seconds is not None
                else self.timeout_seconds
            ),
            vhost=other.vhost if other.vhost is not None else self.vhost,
        )


def _check_verb(_instance: object, _attribute: object, value: str) -> None:
    if not value or not value.strip():
        raise InvalidOption("verb must be a non-empty string")


@frozen
class CommandSpec:
    """One invocation of an external tool, before common options are applied."""

    verb: str = field(validator=_check_verb)
    positionals: tuple[str, ...] = field(default=(), converter=tuple)
    flags: Flags = field(factory=dict, converter=dict)

    def to_args(self, options: CommonOptions) -> list[str]:
        from .builder import build_args

        return build_args(options, self.verb, self.positionals, self.flags)
