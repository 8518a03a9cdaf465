"""Assignment builder for tx claim-home-planet."""

import logging
from typing import Any, Sequence

from df_assignments.config import GameConfig
from df_assignments.primitives.encoding import encode_flag, encode_int
from df_assignments.protocol.assignments import (
    GridCoordinate,
    HomeClaimAssignment,
    require_commitment,
)

logger = logging.getLogger(__name__)


class HomeClaimAssignmentBuilder:
    """Encodes a single-coordinate claim for the init circuit.

    The circuit proves, without revealing (x, y):
        x^2 + y^2 < r^2
        MiMC(x, y) = pub
        perlin(x, y) = perl

    The builder does not check any of these. It forwards the coordinate and
    commitment exactly as given so the assignment matches what was committed.
    """

    def build(
        self,
        coordinate: Sequence[Any],
        commitment: str,
        terrain_value: int,
        config: GameConfig,
    ) -> HomeClaimAssignment:
        """Build the init circuit assignment.

        Args:
            coordinate: (x, y) of the planet being claimed
            commitment: Location hash previously published for the coordinate
            terrain_value: Perlin value at the coordinate
            config: World constants snapshot

        Returns:
            HomeClaimAssignment with every field canonically encoded

        Raises:
            InvalidInputError: If the commitment is empty or the coordinate malformed
            EncodingError: If a scalar cannot be encoded
        """
        commitment = require_commitment(commitment)
        point = GridCoordinate.of(coordinate)

        assignment = HomeClaimAssignment(
            x=encode_int(point.x, "x"),
            y=encode_int(point.y, "y"),
            world_radius=encode_int(config.world_radius, "world_radius"),
            scale=encode_int(config.scale, "scale"),
            mirror_x=encode_flag(config.mirror_x, "mirror_x"),
            mirror_y=encode_flag(config.mirror_y, "mirror_y"),
            commitment=commitment,
            terrain_value=encode_int(terrain_value, "terrain_value"),
        )
        logger.debug("Built init assignment for %s (perl=%s)", commitment, assignment.terrain_value)
        return assignment
