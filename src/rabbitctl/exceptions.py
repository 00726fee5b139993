from __future__ import annotations


class RabbitCtlError(Exception):
    """Base exception for the rabbitctl package."""
