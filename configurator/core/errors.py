"""Reported configuration errors.

These halt the pipeline at sectioning; the generator turns them into a
message on the result instead of letting them escape.
"""

from __future__ import annotations


class ConfiguratorError(ValueError):
    """Base class for errors shown to the user as a message."""


class InvalidHeightError(ConfiguratorError):
    def __init__(self, message: str = "Height must be positive.") -> None:
        super().__init__(message)


class UnsectionizableHeightError(ConfiguratorError):
    def __init__(self, message: str = "Unable to sectionize height under constraints.") -> None:
        super().__init__(message)
