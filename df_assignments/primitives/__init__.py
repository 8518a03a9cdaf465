"""Primitives - field and scalar encoding building blocks."""

from df_assignments.primitives.encoding import (
    DISTANCE_SQUARED_BITS,
    as_int,
    distance_bound,
    encode_flag,
    encode_int,
    encode_scalar,
)
from df_assignments.primitives.field import (
    BN254_PRIME,
    FF,
    MAX_SIGNED,
    MIN_SIGNED,
    is_representable,
    parse_commitment,
    to_field,
    to_signed,
)

__all__ = [
    # Field
    "FF",
    "BN254_PRIME",
    "MAX_SIGNED",
    "MIN_SIGNED",
    "is_representable",
    "to_field",
    "to_signed",
    "parse_commitment",
    # Encoding
    "DISTANCE_SQUARED_BITS",
    "as_int",
    "encode_int",
    "encode_flag",
    "encode_scalar",
    "distance_bound",
]
