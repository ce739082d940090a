"""Symmetric shadowcasting field of view for hexagonal grids."""

from hexsight.domain.hex_fov import HexFov
from hexsight.interfaces.fov_value import FovValue
from hexsight.utils.hex_math import HexCoord

__all__ = [
    "FovValue",
    "HexCoord",
    "HexFov",
]

__version__ = "0.1.0"
