"""Errors raised while building proof assignments.

Both kinds are deterministic validation failures: retrying with the same
input fails the same way, so callers fix the input and call again.
"""


class AssignmentError(ValueError):
    """Base class for assignment construction failures."""


class InvalidInputError(AssignmentError):
    """A required input is missing or malformed (e.g. an empty commitment)."""


class EncodingError(AssignmentError):
    """A scalar cannot be encoded for the circuit (non-finite, non-integral, out of range)."""
