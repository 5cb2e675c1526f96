"""Custom exception types raised by getxgen."""

from __future__ import annotations

__all__ = ["EmptyNameError", "GetxGenError", "UsageError"]


class GetxGenError(RuntimeError):
    """Base class for errors raised by the scaffolding utilities."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UsageError(GetxGenError):
    """Raised when the command line arguments cannot be parsed."""


class EmptyNameError(GetxGenError, ValueError):
    """Raised when no feature name can be derived from the user input."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"could not derive names from input '{raw}'.")
