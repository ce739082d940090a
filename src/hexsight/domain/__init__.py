"""Pure field of view logic for hexsight."""

from hexsight.domain.arc import Arc
from hexsight.domain.hex_fov import HexFov
from hexsight.domain.polar import PolarPoint

__all__ = [
    "Arc",
    "HexFov",
    "PolarPoint",
]
