"""Enumerations for the map-backed visibility helpers."""

from __future__ import annotations

from enum import StrEnum


class Terrain(StrEnum):
    """Terrain kinds, valued by their glyph in map text."""

    FLOOR = "."
    WALL = "#"
    ROCK = "*"

    @property
    def blocks_sight(self) -> bool:
        return self is not Terrain.FLOOR

    @property
    def is_wall(self) -> bool:
        """Thin wall drawn in fake isometric style, as opposed to a solid block."""
        return self is Terrain.WALL


ORIGIN_GLYPH = "@"
