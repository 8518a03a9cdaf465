"""Wire contract between assignments, the prover and the verifier.

Field names and their order are part of the circuit interface:

    init: x, y, r, scale, x_mirror, y_mirror, pub, perl
    move: x1, y1, x2, y2, r, distmax, scale, x_mirror, y_mirror, pub1, pub2, perl2

The prover service receives the full mapping wrapped in a request envelope.
The verifier only sees the public inputs, which it rebuilds from the
transaction and maps into the BN254 scalar field in declaration order.
"""

import json
import re
from dataclasses import fields
from typing import Any, Dict, Mapping, Tuple, Type, Union

from df_assignments.errors import EncodingError, InvalidInputError
from df_assignments.primitives.encoding import encode_int
from df_assignments.primitives.field import FF, parse_commitment, to_field
from df_assignments.protocol.assignments import (
    INIT_CIRCUIT,
    MOVE_CIRCUIT,
    HomeClaimAssignment,
    MoveAssignment,
    require_commitment,
)

Assignment = Union[HomeClaimAssignment, MoveAssignment]

ASSIGNMENT_TYPES: Dict[str, Type[Any]] = {
    INIT_CIRCUIT: HomeClaimAssignment,
    MOVE_CIRCUIT: MoveAssignment,
}

_DECIMAL_RE = re.compile(r"^-?(0|[1-9][0-9]*)$")


def wire_names(cls: Type[Any]) -> Tuple[str, ...]:
    """Circuit input names of an assignment type, in wire order."""
    return tuple(f.metadata['wire'] for f in fields(cls))


def public_names(cls: Type[Any]) -> Tuple[str, ...]:
    """Public input names of an assignment type, in verifier order."""
    return tuple(f.metadata['wire'] for f in fields(cls) if f.metadata['public'])


# --- Serialization ---

def assignment_to_dict(assignment: Assignment) -> Dict[str, str]:
    """Flat mapping from circuit input name to string value, in wire order."""
    return {f.metadata['wire']: getattr(assignment, f.name) for f in fields(assignment)}


def assignment_to_json(assignment: Assignment) -> str:
    """Compact JSON of assignment_to_dict. Byte-identical for equal assignments."""
    return json.dumps(assignment_to_dict(assignment), separators=(",", ":"))


def public_inputs(assignment: Assignment) -> Dict[str, str]:
    """The subset of inputs the verifier reconstructs, in verifier order."""
    return {
        f.metadata['wire']: getattr(assignment, f.name)
        for f in fields(assignment)
        if f.metadata['public']
    }


def public_witness(assignment: Assignment) -> FF:
    """Public inputs as BN254 field elements, in verifier order.

    Location hashes are read as hexadecimal, everything else as signed
    decimal. This is the vector the verifier checks the proof against, so a
    client can confirm its transaction matches before submitting.
    """
    values = []
    for f in fields(assignment):
        if not f.metadata['public']:
            continue
        raw = getattr(assignment, f.name)
        if f.metadata['commitment']:
            values.append(int(parse_commitment(raw)))
        else:
            values.append(int(to_field(int(raw))))
    return FF(values)


def proof_request(assignment: Assignment) -> Dict[str, Any]:
    """Request body for the prover service."""
    return {
        "circuitType": assignment.circuit,
        "circuitAssignments": assignment_to_dict(assignment),
    }


# --- Deserialization ---

def assignment_from_dict(circuit: str, data: Mapping[str, Any]) -> Assignment:
    """Rebuild an assignment from its wire mapping, e.g. to retry a failed proof.

    Every scalar must already be in canonical form; nothing is re-encoded or
    normalized, so a stored assignment comes back byte-identical.

    Raises:
        InvalidInputError: Unknown circuit, missing or unexpected keys, empty commitment
        EncodingError: A scalar value is not a canonical decimal string
    """
    if circuit not in ASSIGNMENT_TYPES:
        raise InvalidInputError(
            f"unknown circuit {circuit!r}. Available: {list(ASSIGNMENT_TYPES.keys())}"
        )
    cls = ASSIGNMENT_TYPES[circuit]

    expected = set(wire_names(cls))
    missing = expected - set(data)
    extra = set(data) - expected
    if missing or extra:
        raise InvalidInputError(
            f"{circuit} assignment keys mismatch: missing={sorted(missing)} extra={sorted(extra)}"
        )

    kwargs: Dict[str, str] = {}
    for f in fields(cls):
        wire = f.metadata['wire']
        value = data[wire]
        if f.metadata['commitment']:
            kwargs[f.name] = require_commitment(value, wire)
        else:
            kwargs[f.name] = _canonical_decimal(value, wire)
    return cls(**kwargs)


def _canonical_decimal(value: Any, name: str) -> str:
    if not isinstance(value, str) or not _DECIMAL_RE.match(value) or value == "-0":
        raise EncodingError(f"{name}={value!r} is not a canonical decimal string")
    return encode_int(int(value), name)
