"""Utility functions for the hexsight field of view library."""

from hexsight.utils.hex_math import (
    ORIGIN,
    Dir6,
    Dir12,
    HexCoord,
    hex_distance,
    hex_length,
    hex_neighbors,
    hex_ring,
    hexes_in_range,
)

__all__ = [
    "ORIGIN",
    "Dir6",
    "Dir12",
    "HexCoord",
    "hex_distance",
    "hex_length",
    "hex_neighbors",
    "hex_ring",
    "hexes_in_range",
]
