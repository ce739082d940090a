"""Command line entrypoint printing what is visible on a text map."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from hexsight.config import get_settings
from hexsight.domain.enums import ORIGIN_GLYPH
from hexsight.domain.visibility import compute_visible
from hexsight.schemas.map import HexMapSpec
from hexsight.utils.hex_math import HexCoord

logger = logging.getLogger(__name__)

UNSEEN_GLYPH = " "


def render_visibility(hex_map: HexMapSpec, origin: HexCoord, visible: set[HexCoord]) -> str:
    """Draw the map with unseen cells blanked out and the viewer as ``@``."""
    lines = []
    for y, row in enumerate(hex_map.rows):
        chars = []
        for x in range(len(row)):
            coord = HexCoord(x, y)
            if coord == origin:
                chars.append(ORIGIN_GLYPH)
            elif coord in visible:
                chars.append(hex_map.terrain_at(coord).value)
            else:
                chars.append(UNSEEN_GLYPH)
        lines.append("".join(chars).rstrip())
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexsight", description="Show the field of view from a point on a hex map"
    )
    parser.add_argument("map", type=Path, help="Map text file")
    parser.add_argument(
        "--origin",
        nargs=2,
        type=int,
        metavar=("X", "Y"),
        help="Viewer position (defaults to the '@' in the map)",
    )
    parser.add_argument("--radius", type=int, help="Sight radius in hexes")
    parser.add_argument(
        "--no-corners",
        action="store_true",
        help="Do not reveal acute corners of fake isometric walls",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    try:
        hex_map = HexMapSpec.from_text(args.map.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"cannot read map: {exc}")
    except ValidationError as exc:
        parser.error(f"invalid map {args.map}: {exc.errors()[0]['msg']}")

    if args.origin is not None:
        origin = HexCoord(*args.origin)
    elif hex_map.origin is not None:
        origin = hex_map.origin
    else:
        parser.error(f"no --origin given and {args.map} has no '{ORIGIN_GLYPH}'")

    corners = False if args.no_corners else None
    logger.info("looking from (%d, %d) on %s", origin.x, origin.y, args.map)

    try:
        visible = compute_visible(hex_map, origin, radius=args.radius, corners=corners)
    except ValueError as exc:
        parser.error(str(exc))

    print(render_visibility(hex_map, origin, visible))


if __name__ == "__main__":  # pragma: no cover - manual launch helper
    main()
