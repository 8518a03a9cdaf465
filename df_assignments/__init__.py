"""
Proof assignments for the claim-home-planet and send-energy circuits.

Turns private game state (grid coordinates, location hashes, Perlin values)
and the world constants into the exact input set the Groth16 circuits and
the backend verifier expect.

This package provides:
- BN254 scalar field helpers (via galois)
- Canonical scalar encoding and the distance bound
- HomeClaimAssignmentBuilder / MoveAssignmentBuilder
- Wire serialization, public witness and prover request envelope
- Transaction bodies derived from a proven assignment

Usage:
    from df_assignments import GameConfig, MoveAssignmentBuilder, proof_request

    config = GameConfig(world_radius=8000, scale=512, mirror_x=False, mirror_y=True)
    assignment = MoveAssignmentBuilder().build(
        (10, -3), (14, 0), hash_from, hash_to, perlin_to, config,
    )
    request = proof_request(assignment)
"""

from df_assignments.config import GameConfig
from df_assignments.errors import AssignmentError, EncodingError, InvalidInputError
from df_assignments.primitives.encoding import (
    distance_bound,
    encode_flag,
    encode_int,
    encode_scalar,
)
from df_assignments.protocol import (
    ClaimHomePlanetMsg,
    GridCoordinate,
    HomeClaimAssignment,
    HomeClaimAssignmentBuilder,
    MoveAssignment,
    MoveAssignmentBuilder,
    SendEnergyMsg,
    assignment_from_dict,
    assignment_to_dict,
    assignment_to_json,
    claim_home_planet_msg,
    proof_request,
    public_inputs,
    public_witness,
    send_energy_msg,
)

__version__ = "0.1.0"
__all__ = [
    # Config
    "GameConfig",
    # Errors
    "AssignmentError",
    "InvalidInputError",
    "EncodingError",
    # Encoding
    "encode_int",
    "encode_flag",
    "encode_scalar",
    "distance_bound",
    # Assignments
    "GridCoordinate",
    "HomeClaimAssignment",
    "MoveAssignment",
    "HomeClaimAssignmentBuilder",
    "MoveAssignmentBuilder",
    # Wire
    "assignment_to_dict",
    "assignment_to_json",
    "assignment_from_dict",
    "public_inputs",
    "public_witness",
    "proof_request",
    # Messages
    "ClaimHomePlanetMsg",
    "SendEnergyMsg",
    "claim_home_planet_msg",
    "send_energy_msg",
]
