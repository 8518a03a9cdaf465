"""Protocol - assignment records, builders and their wire contract."""

from df_assignments.protocol.assignments import (
    INIT_CIRCUIT,
    MOVE_CIRCUIT,
    GridCoordinate,
    HomeClaimAssignment,
    MoveAssignment,
)
from df_assignments.protocol.home_claim import HomeClaimAssignmentBuilder
from df_assignments.protocol.messages import (
    ClaimHomePlanetMsg,
    SendEnergyMsg,
    claim_home_planet_msg,
    send_energy_msg,
)
from df_assignments.protocol.move import MoveAssignmentBuilder
from df_assignments.protocol.wire import (
    assignment_from_dict,
    assignment_to_dict,
    assignment_to_json,
    proof_request,
    public_inputs,
    public_names,
    public_witness,
    wire_names,
)

__all__ = [
    # Records
    "GridCoordinate",
    "HomeClaimAssignment",
    "MoveAssignment",
    "INIT_CIRCUIT",
    "MOVE_CIRCUIT",
    # Builders
    "HomeClaimAssignmentBuilder",
    "MoveAssignmentBuilder",
    # Wire
    "wire_names",
    "public_names",
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
