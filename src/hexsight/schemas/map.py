"""Text map format for the map-backed visibility helpers.

A map is a list of equal-length rows. The character at column ``x`` of row
``y`` is the terrain of ``HexCoord(x, y)``, so the text shows the map as a
lozenge. One ``@`` may mark the viewer's position, which is floor.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hexsight.domain.enums import ORIGIN_GLYPH, Terrain
from hexsight.utils.hex_math import HexCoord

_GLYPHS = {terrain.value for terrain in Terrain} | {ORIGIN_GLYPH}


class HexMapSpec(BaseModel):
    rows: list[str] = Field(..., min_length=1, description="Map rows, one glyph per cell")

    model_config = ConfigDict(frozen=True)

    @field_validator("rows")
    @classmethod
    def _check_rows(cls, rows: list[str]) -> list[str]:
        width = len(rows[0])
        if width == 0:
            raise ValueError("map rows must not be empty")
        origins = 0
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has width {len(row)}, expected {width}")
            unknown = set(row) - _GLYPHS
            if unknown:
                raise ValueError(f"row {y} has unknown glyphs {sorted(unknown)}")
            origins += row.count(ORIGIN_GLYPH)
        if origins > 1:
            raise ValueError(
                f"map marks {origins} origins with '{ORIGIN_GLYPH}', expected at most one"
            )
        return rows

    @classmethod
    def from_text(cls, text: str) -> HexMapSpec:
        """Parse map text, ignoring blank lines and trailing whitespace."""
        rows = [line.rstrip() for line in text.splitlines()]
        return cls(rows=[row for row in rows if row])

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def origin(self) -> HexCoord | None:
        """Position marked with ``@``, if any."""
        for y, row in enumerate(self.rows):
            x = row.find(ORIGIN_GLYPH)
            if x >= 0:
                return HexCoord(x, y)
        return None

    def in_bounds(self, coord: HexCoord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def terrain_at(self, coord: HexCoord) -> Terrain | None:
        """Terrain at ``coord``, or None outside the map."""
        if not self.in_bounds(coord):
            return None
        glyph = self.rows[coord.y][coord.x]
        if glyph == ORIGIN_GLYPH:
            return Terrain.FLOOR
        return Terrain(glyph)
