from __future__ import annotations

from rabbitctl.exceptions import RabbitCtlError


class InvalidOption(RabbitCtlError, ValueError):
    """Raised when a structurally invalid option is supplied, before anything is spawned."""
