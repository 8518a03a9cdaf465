"""Game configuration snapshot consumed by the assignment builders.

GameConfig is the read-only view of the world constants that both circuits
take as inputs. Build it directly when the values are already validated, or
load it from the backend's world constants document:

    config = GameConfig.from_json("world.json", scale_override=0)
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from df_assignments.errors import EncodingError, InvalidInputError
from df_assignments.primitives.encoding import as_int

logger = logging.getLogger(__name__)

# The Perlin circuit divides by scale, which must be a power of two up to this.
MAX_SCALE = 16384

# Both circuits bit-decompose r^2 into 64 bits.
RADIUS_SQUARED_BITS = 64


@dataclass(frozen=True)
class GameConfig:
    """World constants shared by the init and move circuits.

    Fields:
        world_radius: Radius of the playable disc (the circuits check x^2 + y^2 < r^2)
        scale: Perlin noise scale, a power of two
        mirror_x: Terrain is mirrored across the y axis
        mirror_y: Terrain is mirrored across the x axis
    """
    world_radius: int
    scale: int
    mirror_x: bool
    mirror_y: bool

    @classmethod
    def from_world_constants(
        cls,
        data: Mapping[str, Any],
        radius_override: int = 0,
        scale_override: int = 0,
    ) -> 'GameConfig':
        """Build from a world constants mapping.

        Accepts the bare constants or the {"constants": {...}} envelope the
        backend serves. An override below 1 keeps the world value.

        Example structure:
        {
          "constants": {
            "RadiusMax": 8000,
            "Scale": 512,
            "XMirror": 0,
            "YMirror": 1,
            ...
          }
        }

        Raises:
            InvalidInputError: If a required key is missing or a value is out
                of the range the circuits accept
        """
        constants = data.get('constants', data)
        radius = _constant(constants, 'RadiusMax')
        scale = _constant(constants, 'Scale')
        mirror_x = _constant(constants, 'XMirror', flag=True) != 0
        mirror_y = _constant(constants, 'YMirror', flag=True) != 0

        if radius_override >= 1:
            logger.debug("Overriding world radius %d with %d", radius, radius_override)
            radius = radius_override
        if scale_override >= 1:
            logger.debug("Overriding scale %d with %d", scale, scale_override)
            scale = scale_override

        _check_radius(radius)
        _check_scale(scale)

        config = cls(world_radius=radius, scale=scale, mirror_x=mirror_x, mirror_y=mirror_y)
        logger.info(
            "Loaded game config: radius=%d scale=%d mirror=(%s, %s)",
            config.world_radius, config.scale, config.mirror_x, config.mirror_y,
        )
        return config

    @classmethod
    def from_json(cls, path: str, radius_override: int = 0, scale_override: int = 0) -> 'GameConfig':
        """Load from a world constants JSON file."""
        with open(path, 'r') as f:
            data = json.load(f)
        return cls.from_world_constants(data, radius_override, scale_override)


def _check_radius(radius: int) -> None:
    if radius < 1:
        raise InvalidInputError(f"world radius must be positive, got {radius}")
    if radius * radius >= 1 << RADIUS_SQUARED_BITS:
        raise InvalidInputError(
            f"world radius {radius} too large: r^2 must fit in {RADIUS_SQUARED_BITS} bits"
        )


def _check_scale(scale: int) -> None:
    if scale < 1 or scale > MAX_SCALE or scale & (scale - 1):
        raise InvalidInputError(f"scale must be a power of two in [1, {MAX_SCALE}], got {scale}")


def _constant(constants: Mapping[str, Any], key: str, flag: bool = False) -> int:
    """Read an integer constant without truncating or coercing it.

    Mirror flags may also be JSON booleans.
    """
    try:
        value = constants[key]
    except KeyError:
        raise InvalidInputError(f"world constants missing key {key!r}") from None
    if flag and isinstance(value, bool):
        return int(value)
    try:
        return as_int(value, key)
    except EncodingError as e:
        raise InvalidInputError(f"malformed world constants: {e}") from e
