"""
Exceptions raised by the LK30 codec.

Everything derives from ``CodecError``, which is a ``ValueError`` so callers
that already guard parsing with ``except ValueError`` keep working.
"""
from __future__ import annotations

from typing import Optional


class CodecError(ValueError):
    """Base class for all payload codec failures."""
    pass


class OutOfRangeError(CodecError):
    """
    Raised when an uplink is shorter than its fixed layout, or a numeric
    downlink field does not fit its wire width after any offset is applied.
    """
    pass


class UnsupportedFunctionError(CodecError):
    """Raised when a downlink names a function code the encoder has no layout for."""

    def __init__(self, function_code: Optional[object]) -> None:
        self.function_code = function_code
        super().__init__(f"Unsupported downlink function code: {function_code!r}")


class InvalidCommandError(CodecError):
    """Raised when a downlink object is missing fields or carries values of the wrong type."""
    pass


__all__ = [
    "CodecError",
    "InvalidCommandError",
    "OutOfRangeError",
    "UnsupportedFunctionError",
]
