"""
errors.py - Module to hold the exceptions raised on violated preconditions.
"""


class CpPrimitivesError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(CpPrimitivesError, ValueError):
    """The call parameters are malformed regardless of any data (e.g. start > end)."""


class OutOfRangeError(CpPrimitivesError, IndexError):
    """An index or bound lies outside the valid domain for the current size."""


class EmptyStructureError(CpPrimitivesError, LookupError):
    """The operation is meaningless on a structure holding no elements."""
