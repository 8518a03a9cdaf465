"""Assignment builder for tx send-energy."""

import logging
from typing import Any, Sequence

from df_assignments.config import GameConfig
from df_assignments.errors import InvalidInputError
from df_assignments.primitives.encoding import distance_bound, encode_flag, encode_int
from df_assignments.protocol.assignments import (
    GridCoordinate,
    MoveAssignment,
    require_commitment,
)

logger = logging.getLogger(__name__)


class MoveAssignmentBuilder:
    """Encodes a two-coordinate transit claim for the move circuit.

    The circuit proves, without revealing either coordinate:
        x2^2 + y2^2 < r^2
        (x1 - x2)^2 + (y1 - y2)^2 <= distmax^2
        MiMC(x1, y1) = pub1, MiMC(x2, y2) = pub2
        perlin(x2, y2) = perl2

    Only the destination's Perlin value is an input; the source was proven
    when it was claimed.

    distmax is the exact ceiling of the distance between the raw coordinates.
    Mirroring is carried only as the x_mirror/y_mirror flags and never
    applied to the coordinates here.

    Args:
        allow_zero_distance: Accept coord_from == coord_to. Off by default,
            since a move onto the same planet is not a meaningful transaction.
    """

    def __init__(self, allow_zero_distance: bool = False):
        self.allow_zero_distance = allow_zero_distance

    def build(
        self,
        coord_from: Sequence[Any],
        coord_to: Sequence[Any],
        commitment_from: str,
        commitment_to: str,
        terrain_value_to: int,
        config: GameConfig,
    ) -> MoveAssignment:
        """Build the move circuit assignment.

        Raises:
            InvalidInputError: If a commitment is empty, a coordinate is
                malformed, or the move has zero distance and that is not allowed
            EncodingError: If a scalar cannot be encoded or the distance bound
                is out of circuit range
        """
        commitment_from = require_commitment(commitment_from, "commitment_from")
        commitment_to = require_commitment(commitment_to, "commitment_to")
        src = GridCoordinate.of(coord_from)
        dst = GridCoordinate.of(coord_to)

        if src == dst and not self.allow_zero_distance:
            raise InvalidInputError("coord_from and coord_to are the same point")

        max_distance = distance_bound(src, dst)

        assignment = MoveAssignment(
            x_from=encode_int(src.x, "x_from"),
            y_from=encode_int(src.y, "y_from"),
            x_to=encode_int(dst.x, "x_to"),
            y_to=encode_int(dst.y, "y_to"),
            world_radius=encode_int(config.world_radius, "world_radius"),
            max_distance=encode_int(max_distance, "max_distance"),
            scale=encode_int(config.scale, "scale"),
            mirror_x=encode_flag(config.mirror_x, "mirror_x"),
            mirror_y=encode_flag(config.mirror_y, "mirror_y"),
            commitment_from=commitment_from,
            commitment_to=commitment_to,
            terrain_value_to=encode_int(terrain_value_to, "terrain_value_to"),
        )
        logger.debug(
            "Built move assignment %s -> %s (distmax=%s)",
            commitment_from, commitment_to, assignment.max_distance,
        )
        return assignment
