"""Engine exceptions. Degenerate geometry is never an error."""

from __future__ import annotations


class InvalidPointSetError(ValueError):
    """The point collection cannot be hulled (None, or non-finite coordinates)."""


class EmptyPointSetError(InvalidPointSetError):
    """No points were given and the config does not allow an empty result."""
