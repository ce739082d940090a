"""End-to-end tests for the hexsight command line tool."""

from pathlib import Path

import pytest

from hexsight.main import main, render_visibility
from hexsight.schemas.map import HexMapSpec
from hexsight.utils.hex_math import HexCoord

ROOM = """\
.......
.......
...##..
...@#..
.......
.......
.......
"""


@pytest.fixture
def room_file(tmp_path: Path) -> Path:
    path = tmp_path / "room.txt"
    path.write_text(ROOM, encoding="utf-8")
    return path


def test_render_blanks_unseen_cells():
    hex_map = HexMapSpec(rows=["...", ".#.", "..."])
    visible = {HexCoord(0, 0), HexCoord(1, 1), HexCoord(2, 2)}
    assert render_visibility(hex_map, HexCoord(0, 0), visible) == "@\n #\n  ."


def test_prints_visible_map(room_file, capsys):
    main([str(room_file), "--radius", "1"])
    out = capsys.readouterr().out.splitlines()
    # (4, 2) is the acute wall corner revealed between (3, 2) and (4, 3).
    assert out[2] == "  .##"
    assert out[3] == "  .@#"
    assert out[4] == "   .."


def test_corner_flag_changes_output(room_file, capsys):
    main([str(room_file), "--radius", "3"])
    with_corners = capsys.readouterr().out.splitlines()
    main([str(room_file), "--radius", "3", "--no-corners"])
    without_corners = capsys.readouterr().out.splitlines()

    # The acute corner at (4, 2) is only drawn with corners enabled.
    assert with_corners[2][4] == "#"
    assert len(without_corners[2]) <= 4 or without_corners[2][4] == " "


def test_explicit_origin(tmp_path, capsys):
    path = tmp_path / "open.txt"
    path.write_text("...\n...\n...\n", encoding="utf-8")
    main([str(path), "--origin", "0", "0", "--radius", "1"])
    assert capsys.readouterr().out.splitlines() == ["@.", "..", ""]


def test_missing_origin_is_an_error(tmp_path, capsys):
    path = tmp_path / "open.txt"
    path.write_text("...\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 2
    assert "has no '@'" in capsys.readouterr().err


def test_invalid_map_is_an_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("..x\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main([str(path)])
    assert "unknown glyphs" in capsys.readouterr().err


def test_radius_above_cap_is_an_error(room_file, capsys):
    with pytest.raises(SystemExit):
        main([str(room_file), "--radius", "1000"])
    assert "Sight radius must be between" in capsys.readouterr().err


def test_unreadable_map_is_an_error(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.txt")])
    assert "cannot read map" in capsys.readouterr().err


def test_undecodable_map_is_an_error(tmp_path, capsys):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"..\xe9\n.@.\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 2
    assert "cannot read map" in capsys.readouterr().err
