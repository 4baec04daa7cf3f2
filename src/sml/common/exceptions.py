"""Contains all the custom-defined exceptions used in SML."""

from __future__ import annotations


class DimensionError(ValueError):
    """Exception indicating vectors of incompatible length were passed to an operation."""


class DegenerateInputError(ValueError):
    """Exception indicating input which makes a computation undefined, e.g. a zero-norm vector.

    Only raised when degenerate-input validation is turned on, see :class:`.BehavioralConfig`.
    """
