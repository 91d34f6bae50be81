from __future__ import annotations


class LayoutError(Exception):
    """Base class for grid configuration errors."""


class InvalidSpan(LayoutError, ValueError):
    """A cell span is malformed or reaches outside the grid it is placed in."""


class NoFillTarget(LayoutError):
    """Strict layouts require at least one Fill track per axis."""

    def __init__(self, axis: str) -> None:
        super().__init__(f"no Fill track on the {axis} axis")
        self.axis = axis


class MeasurementUnavailable(RuntimeError):
    """The host toolkit could not measure a run of text."""


class OutOfBoundsClick(LookupError):
    """A point falls outside every line of a text block.

    The hit tester reports this as a plain miss; the type exists for callers
    that want to name the condition explicitly.
    """
