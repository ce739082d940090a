"""Visibility domain logic for hexsight.

Ready-made field of view values and helpers that run the scan over a text
map and collect the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TypeVar

from hexsight.config import get_settings
from hexsight.domain.hex_fov import HexFov
from hexsight.interfaces.fov_value import FovValue
from hexsight.schemas.map import HexMapSpec
from hexsight.utils.hex_math import HexCoord, hex_length

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FovValue)


@dataclass(frozen=True)
class RadiusFov(FovValue):
    """Open ground: every cell closer than ``range`` steps is visible."""

    range: int

    def advance(self, offset: HexCoord) -> RadiusFov | None:
        if hex_length(offset) < self.range:
            return self
        return None


@dataclass(frozen=True)
class MapSight(FovValue):
    """Line of sight over a ``HexMapSpec``.

    The value remembers whether the cell it was advanced into blocks sight.
    Blocking cells are visible themselves but nothing is seen through them.
    Only ``radius`` and ``opaque`` take part in equality, so a ring splits
    exactly where terrain switches between open and blocking.

    Attributes:
        hex_map: Map being looked at
        origin: Viewer position on the map
        radius: Sight radius in hexes
        opaque: Whether the cell this value belongs to blocks sight
        corners: Whether fake isometric wall corners are revealed
    """

    hex_map: HexMapSpec = field(compare=False, repr=False)
    origin: HexCoord = field(compare=False)
    radius: int
    opaque: bool = False
    corners: bool = field(default=True, compare=False)

    def advance(self, offset: HexCoord) -> MapSight | None:
        if self.opaque or hex_length(offset) > self.radius:
            return None
        terrain = self.hex_map.terrain_at(self.origin + offset)
        if terrain is None:
            return None
        return replace(self, opaque=terrain.blocks_sight)

    def is_fake_isometric_wall(self, offset: HexCoord) -> bool:
        if not self.corners:
            return False
        terrain = self.hex_map.terrain_at(self.origin + offset)
        return terrain is not None and terrain.is_wall


def field_of_view(init: T) -> dict[HexCoord, T]:
    """Run a field of view to completion and map each visible offset to its value.

    When the scan yields an offset more than once, the last value wins.
    ``init`` must bound itself or this never returns.
    """
    return dict(HexFov(init))


def compute_visible(
    hex_map: HexMapSpec,
    origin: HexCoord,
    radius: int | None = None,
    corners: bool | None = None,
) -> set[HexCoord]:
    """Get all map coordinates visible from ``origin``.

    Args:
        hex_map: Map to look at
        origin: Viewer position
        radius: Sight radius, defaults to the configured default radius
        corners: Reveal fake isometric wall corners, defaults to the configured setting

    Returns:
        Set of absolute map coordinates, including the origin

    Raises:
        ValueError: If the origin lies outside the map or the radius is out of range
    """
    settings = get_settings()
    if radius is None:
        radius = settings.default_radius
    if corners is None:
        corners = settings.fake_isometric_corners

    if not 0 <= radius <= settings.max_radius:
        msg = f"Sight radius must be between 0 and {settings.max_radius}, got {radius}"
        raise ValueError(msg)
    if not hex_map.in_bounds(origin):
        msg = (
            f"Origin ({origin.x}, {origin.y}) lies outside the "
            f"{hex_map.width}x{hex_map.height} map"
        )
        raise ValueError(msg)

    sight = MapSight(hex_map=hex_map, origin=origin, radius=radius, corners=corners)
    visible = {origin + offset for offset in field_of_view(sight)}

    logger.debug(
        "%d cells visible from (%d, %d) within radius %d", len(visible), origin.x, origin.y, radius
    )
    return visible
