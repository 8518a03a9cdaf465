"""Canonical scalar encoding for circuit assignments.

The prover consumes every input as a decimal string. This module is the one
place those strings are produced:

- encode_int: signed base-10, "-" only for negatives, no padding or separators
- encode_flag: mirror flags as "1"/"0"
- distance_bound: smallest integer upper bound of a Euclidean distance

Floats never reach the encoder. A float coordinate is either non-finite or a
value whose integer meaning is ambiguous, and both are rejected.
"""

import math
import numbers
from typing import Any, Sequence

import numpy as np

from df_assignments.errors import EncodingError
from df_assignments.primitives.field import is_representable

# The move circuit bit-decomposes distmax^2 into 64 bits.
DISTANCE_SQUARED_BITS = 64


def as_int(value: Any, name: str = "value") -> int:
    """Return value as a Python int or raise EncodingError.

    Accepts int and numpy integer types. Rejects bool, floats and anything else.
    """
    if isinstance(value, (bool, np.bool_)):
        raise EncodingError(f"{name} must be an integer, got boolean {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise EncodingError(f"{name} is not finite: {value!r}")
        raise EncodingError(f"{name} is not an integer: {value!r}")
    raise EncodingError(f"{name} must be an integer, got {type(value).__name__}")


def encode_int(value: Any, name: str = "value") -> str:
    """Encode a signed integer as a canonical decimal string."""
    n = as_int(value, name)
    if not is_representable(n):
        raise EncodingError(f"{name}={n} does not fit the BN254 scalar field")
    return str(n)


def encode_flag(flag: Any, name: str = "flag") -> str:
    """Encode a boolean as "1" or "0"."""
    if not isinstance(flag, (bool, np.bool_)):
        raise EncodingError(f"{name} must be a boolean, got {type(flag).__name__}")
    return "1" if flag else "0"


def encode_scalar(value: Any, name: str = "value") -> str:
    """Encode an integer or boolean scalar."""
    if isinstance(value, (bool, np.bool_)):
        return encode_flag(value, name)
    return encode_int(value, name)


def distance_bound(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Ceiling of the Euclidean distance between two grid points.

    Computed with integer square roots, so the result is exactly
    ceil(sqrt(dx^2 + dy^2)) for any magnitude and is never below the true
    distance.

    Raises:
        EncodingError: If a coordinate is not an integer, or the bound squared
            does not fit the circuit's 64-bit comparison
    """
    dx = as_int(a[0], "x") - as_int(b[0], "x")
    dy = as_int(a[1], "y") - as_int(b[1], "y")
    squared = dx * dx + dy * dy

    bound = math.isqrt(squared)
    if bound * bound < squared:
        bound += 1

    if bound * bound >= 1 << DISTANCE_SQUARED_BITS:
        raise EncodingError(
            f"distance bound {bound} exceeds the {DISTANCE_SQUARED_BITS}-bit circuit range"
        )
    return bound
