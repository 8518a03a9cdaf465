"""Assignment records for the init and move circuits.

Assignments are frozen value objects. Every field is already a canonical
string; serialization lives in protocol/wire.py and is driven by the field
metadata declared here:

    wire:       circuit input name (the order of declaration is the wire order)
    public:     True if the verifier rebuilds this input from the transaction
    commitment: True for location hashes, carried as verbatim strings
"""

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Sequence

from df_assignments.errors import InvalidInputError
from df_assignments.primitives.encoding import as_int


def _input(wire: str, public: bool = False, commitment: bool = False) -> Any:
    return field(metadata={'wire': wire, 'public': public, 'commitment': commitment})


class GridCoordinate(NamedTuple):
    """Signed grid position. Never clamped, mirrored, or normalized."""
    x: int
    y: int

    @classmethod
    def of(cls, value: Sequence[Any]) -> 'GridCoordinate':
        """Coerce an (x, y) pair, keeping the values exactly as given."""
        try:
            x, y = value
        except (TypeError, ValueError):
            raise InvalidInputError(f"coordinate must be an (x, y) pair, got {value!r}") from None
        return cls(as_int(x, "x"), as_int(y, "y"))


def require_commitment(commitment: Any, name: str = "commitment") -> str:
    """Return the commitment unchanged, or raise if it is not a non-empty string."""
    if not isinstance(commitment, str):
        raise InvalidInputError(f"{name} must be a string, got {type(commitment).__name__}")
    if not commitment:
        raise InvalidInputError(f"{name} must not be empty")
    return commitment


# Circuit identifiers used by the prover service.
INIT_CIRCUIT = "init"
MOVE_CIRCUIT = "move"


@dataclass(frozen=True)
class HomeClaimAssignment:
    """Inputs for the claim-home-planet (init) circuit.

    The init circuit keeps r private; the verifier checks the proof against
    scale, mirror flags, the location hash and the Perlin value only.
    """
    x: str = _input('x')
    y: str = _input('y')
    world_radius: str = _input('r')
    scale: str = _input('scale', public=True)
    mirror_x: str = _input('x_mirror', public=True)
    mirror_y: str = _input('y_mirror', public=True)
    commitment: str = _input('pub', public=True, commitment=True)
    terrain_value: str = _input('perl', public=True)

    circuit = INIT_CIRCUIT


@dataclass(frozen=True)
class MoveAssignment:
    """Inputs for the send-energy (move) circuit."""
    x_from: str = _input('x1')
    y_from: str = _input('y1')
    x_to: str = _input('x2')
    y_to: str = _input('y2')
    world_radius: str = _input('r', public=True)
    max_distance: str = _input('distmax', public=True)
    scale: str = _input('scale', public=True)
    mirror_x: str = _input('x_mirror', public=True)
    mirror_y: str = _input('y_mirror', public=True)
    commitment_from: str = _input('pub1', public=True, commitment=True)
    commitment_to: str = _input('pub2', public=True, commitment=True)
    terrain_value_to: str = _input('perl2', public=True)

    circuit = MOVE_CIRCUIT
