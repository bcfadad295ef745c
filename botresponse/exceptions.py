"""Common exception definitions."""
from __future__ import annotations

from typing import Any


class BotResponseError(Exception):
    """Base class for bot response errors."""


class ResponseConfigError(BotResponseError, RuntimeError):
    """Configuration error."""


class ResponseValidationError(BotResponseError, ValueError):
    """Stored content or response record cannot be used."""


class UnsupportedConversion(BotResponseError, ValueError):
    """Conversion target is not one of the button-bearing kinds."""

    def __init__(self, target_kind: Any) -> None:
        super().__init__(f"type {target_kind} is not supported by content type conversion")
        self.target_kind = target_kind


class InvalidToggleSource(BotResponseError, ValueError):
    """Payload tag does not allow toggling button persistence."""

    def __init__(self, recorded_kind: Any) -> None:
        super().__init__(
            f"kind must be TextWithButtonsPayload or QuickRepliesPayload to toggle button persistence, got {recorded_kind}"
        )
        self.recorded_kind = recorded_kind


__all__ = [
    "BotResponseError",
    "ResponseConfigError",
    "ResponseValidationError",
    "UnsupportedConversion",
    "InvalidToggleSource",
]
