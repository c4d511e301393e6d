# File: variantcollapse/errors.py
# Location: variantcollapse/variantcollapse/errors.py
"""
Exception classes for variantcollapse.

Precondition violations (wrong shapes, missing output matrices, empty
observation sets) are programming errors and raise ``PreconditionError``.
Degenerate numeric cases such as an all-missing marker are not errors and
never raise.
"""

from __future__ import annotations

from typing import Any


class CollapsingError(Exception):
    """Base exception for all variantcollapse errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize collapsing error.

        Parameters
        ----------
        message : str
            Error message
        details : dict, optional
            Additional error details
        """
        super().__init__(message)
        self.details = details or {}


class PreconditionError(CollapsingError, ValueError):
    """Raised when a caller violates an input precondition."""

    def __init__(self, message: str, argument: str):
        """Initialize precondition error."""
        super().__init__(message, {"argument": argument})
        self.argument = argument
