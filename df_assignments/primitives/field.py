"""BN254 scalar field GF(r).

Both circuits are compiled over the BN254 scalar field, so every public and
private input is ultimately an element of FF. Uses galois for field
arithmetic, like the rest of the proving stack.

Signed integers are mapped to the field the way gnark does it: a negative
value v becomes r + v. The representable signed range is therefore
[-(r-1)/2, (r-1)/2]; anything outside it would alias another value.
"""

import re

import galois

from df_assignments.errors import EncodingError

# --- Field Construction ---

BN254_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# 5 generates the multiplicative group. Passing it avoids factoring r - 1.
FF = galois.GF(BN254_PRIME, primitive_element=5, verify=False)
"""Scalar field of BN254 (a.k.a. bn128 / alt_bn128 Fr)."""

MAX_SIGNED = (BN254_PRIME - 1) // 2
MIN_SIGNED = -MAX_SIGNED


# --- Signed Mapping ---

def is_representable(value: int) -> bool:
    """True if value round-trips through the field as a signed integer."""
    return MIN_SIGNED <= value <= MAX_SIGNED


def to_field(value: int) -> FF:
    """Map a signed integer into FF.

    Raises:
        EncodingError: If value is outside the signed representable range
    """
    if not is_representable(value):
        raise EncodingError(f"{value} is outside the BN254 signed range")
    return FF(value % BN254_PRIME)


def to_signed(elem: FF) -> int:
    """Inverse of to_field: canonical representative in [MIN_SIGNED, MAX_SIGNED]."""
    n = int(elem)
    return n - BN254_PRIME if n > MAX_SIGNED else n


# --- Commitments ---

# Same digits big.Int.SetString(s, 16) accepts: no prefix, sign, spaces or underscores.
_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def parse_commitment(commitment: str) -> FF:
    """Parse a hex location hash into a field element.

    The verifier reads location hashes as base-16 big integers, so only
    plain hex digits are accepted. A 0x prefix is rejected because the
    verifier would reject it too.

    Raises:
        EncodingError: If the string is not plain hex or the value is >= r
    """
    if not _HEX_RE.fullmatch(commitment):
        raise EncodingError(f"commitment {commitment!r} is not a hex string")
    n = int(commitment, 16)
    if n >= BN254_PRIME:
        raise EncodingError(f"commitment {commitment!r} is not a BN254 field element")
    return FF(n)
