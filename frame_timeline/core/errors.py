"""Exceptions raised for timeline misuse that can be detected up front."""

from __future__ import annotations


class TimelineError(Exception):
    """Base class for all timeline errors."""


class UnitTypeError(TimelineError, TypeError):
    """A time sample is not of a signed integer unit type."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(
            f"{name} must be a signed integer, got {type(value).__name__} ({value!r})"
        )
        self.name = name
        self.value = value
