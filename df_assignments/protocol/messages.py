"""Transaction bodies for claim-home-planet and send-energy.

The verifier rebuilds the public witness from these messages, not from the
assignment. Deriving the public fields from the assignment keeps the message
and the proof in agreement: a message carrying a different Perlin value or
distance bound than the proof was generated for can never verify.
"""

from dataclasses import dataclass
from typing import Any, Dict

from df_assignments.errors import InvalidInputError
from df_assignments.primitives.encoding import as_int
from df_assignments.protocol.assignments import HomeClaimAssignment, MoveAssignment

# The backend rejects location hashes of any other length.
LOCATION_HASH_LENGTH = 64

@dataclass(frozen=True)
class ClaimHomePlanetMsg:
    """Body of tx claim-home-planet."""
    location_hash: str
    perlin: int
    proof: str  # Base64 Groth16 proof

    def to_json(self) -> Dict[str, Any]:
        return {
            "locationHash": self.location_hash,
            "perlin": self.perlin,
            "proof": self.proof,
        }

@dataclass(frozen=True)
class SendEnergyMsg:
    """Body of tx send-energy."""
    location_hash_from: str
    location_hash_to: str
    perlin_to: int
    radius_to: int
    max_distance: int
    energy: int
    proof: str  # Base64 Groth16 proof

    def to_json(self) -> Dict[str, Any]:
        return {
            "locationHashFrom": self.location_hash_from,
            "locationHashTo": self.location_hash_to,
            "perlinTo": self.perlin_to,
            "radiusTo": self.radius_to,
            "maxDistance": self.max_distance,
            "energy": self.energy,
            "proof": self.proof,
        }

def _require_location_hash(location_hash: str, name: str) -> str:
    if len(location_hash) != LOCATION_HASH_LENGTH:
        raise InvalidInputError(
            f"{name} must be {LOCATION_HASH_LENGTH} characters long, got {len(location_hash)}"
        )
    return location_hash

def _require_proof(proof: Any) -> str:
    if not isinstance(proof, str) or not proof:
        raise InvalidInputError("proof must be a non-empty string")
    return proof

def claim_home_planet_msg(assignment: HomeClaimAssignment, proof: str) -> ClaimHomePlanetMsg:
    """Transaction body for a proven init assignment.

    Raises:
        InvalidInputError: If the location hash is not 64 characters or proof is empty
    """
    return ClaimHomePlanetMsg(
        location_hash=_require_location_hash(assignment.commitment, "location_hash"),
        perlin=int(assignment.terrain_value),
        proof=_require_proof(proof),
    )

def send_energy_msg(assignment: MoveAssignment, energy: int, proof: str) -> SendEnergyMsg:
    """Transaction body for a proven move assignment.

    Raises:
        InvalidInputError: If a location hash is not 64 characters, energy is
            not positive, or proof is empty
    """
    energy = as_int(energy, "energy")
    if energy < 1:
        raise InvalidInputError(f"energy must be positive, got {energy}")
    return SendEnergyMsg(
        location_hash_from=_require_location_hash(assignment.commitment_from, "location_hash_from"),
        location_hash_to=_require_location_hash(assignment.commitment_to, "location_hash_to"),
        perlin_to=int(assignment.terrain_value_to),
        radius_to=int(assignment.world_radius),
        max_distance=int(assignment.max_distance),
        energy=energy,
        proof=_require_proof(proof),
    )
