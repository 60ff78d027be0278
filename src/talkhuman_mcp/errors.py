"""Boundary validation shared by every adapter."""

from __future__ import annotations

from typing import Any


NO_TEXT_MESSAGE = "No text provided for analysis"


class InputError(ValueError):
    """Caller supplied missing or malformed input."""


def require_text(value: Any) -> str:
    """Return ``value`` if it is a non-empty string, else raise InputError."""

    if not isinstance(value, str) or not value:
        raise InputError(NO_TEXT_MESSAGE)
    return value
