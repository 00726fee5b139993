from __future__ import annotations

from collections.abc import Sequence

from .exceptions import InvalidOption
from .schema import CommonOptions, Flags


def build_args(
    options: CommonOptions,
    verb: str,
    positionals: Sequence[str] = (),
    flags: Flags | None = None,
) -> list[str]:
    """Translate common options and one verb into the tool's argument vector.

    Common options are always emitted first and in a fixed order
    (node, quiet, timeout, vhost), followed by the verb, the positionals
    in caller order and finally the operation flags.
    """
    if not verb or not verb.strip():
        raise InvalidOption("verb must be a non-empty string")

    args: list[str] = []
    if options.node:
        args.extend(["-n", options.node])
    if options.quiet:
        args.append("-q")
    if options.timeout_seconds is not None:
        args.extend(["-t", str(validate_timeout(options.timeout_seconds))])
    if options.vhost is not None:
        args.extend(["-p", options.vhost])

    args.append(verb)
    for value in positionals:
        if not isinstance(value, str):
            raise InvalidOption(
                f"positional arguments must be strings, got {value!r} for {verb}"
            )
        args.append(value)

    if flags:
        for name, value in flags.items():
            args.append(format_flag(name))
            if value is not None:
                args.append(str(value))

    return args


def validate_timeout(seconds: object) -> int:
    """Return `seconds` if it is a positive integer, raise InvalidOption otherwise."""
    # bool is an int subclass
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise InvalidOption(f"timeout must be a positive integer, got {seconds!r}")
    if seconds <= 0:
        raise InvalidOption(f"timeout must be positive, got {seconds}")
    return seconds


def format_flag(name: str) -> str:
    """Render a flag key, ``apply_to`` becomes ``--apply-to``."""
    if not name or name.strip("-") == "":
        raise InvalidOption(f"invalid flag name: {name!r}")
    if name.startswith("-"):
        return name
    return "--" + name.replace("_", "-")
