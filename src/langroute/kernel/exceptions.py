"""Unified exception hierarchy for langroute.

Request handling never raises: extractors return ``None``, rewriters return
their input unchanged and validators return booleans. The only exceptions
raised by the package describe a broken configuration and surface once, at
startup, when the engine is assembled.
"""

from __future__ import annotations


class LangRouteException(Exception):
    """Base exception for all langroute errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CONFIG_INVALID").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(LangRouteException):
    """The locale configuration is invalid (fatal at startup)."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="CONFIG_INVALID", context=context)
