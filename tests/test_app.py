import pytest

from solong.app import TILE_SIZE, TextureSet, load_textures, main, tile_layout
from solong.game import Direction, Game
from solong.mapcheck import validate_rows

ROWS = ["11111", "1PCE1", "11111"]

TILE_XPM = '/* XPM */\nstatic char *t[] = {\n"1 1 1 1",\n"a c red",\n"a"\n};\n'


@pytest.fixture
def game():
    return Game(validate_rows(ROWS))


def test_layout_covers_every_cell(game):
    layout = tile_layout(game)
    assert len(layout) == len(ROWS) * len(ROWS[0])
    assert layout[0] == ("wall", 0, 0)


def test_layout_places_player(game):
    layout = tile_layout(game)
    assert ("player", TILE_SIZE, TILE_SIZE) in layout
    assert ("collect", 2 * TILE_SIZE, TILE_SIZE) in layout
    assert ("exit", 3 * TILE_SIZE, TILE_SIZE) in layout


def test_layout_follows_moves(game):
    game.move(Direction.RIGHT)
    layout = tile_layout(game)
    assert ("player", 2 * TILE_SIZE, TILE_SIZE) in layout
    assert ("floor", TILE_SIZE, TILE_SIZE) in layout
    assert not any(name == "collect" for name, _, _ in layout)


def test_load_textures_all_present(tmp_path):
    for name in ("collect", "exit", "floor", "player", "wall"):
        (tmp_path / f"{name}.xpm").write_text(TILE_XPM)
    textures = load_textures(tmp_path)
    assert textures.wall.pixel(0, 0) == 0xFF0000
    assert textures.collect == textures.player


def test_load_textures_reports_missing(tmp_path, capsys):
    for name in ("collect", "exit", "floor", "player"):
        (tmp_path / f"{name}.xpm").write_text(TILE_XPM)
    textures = load_textures(tmp_path)
    assert textures.wall is None
    assert textures.floor.width == 1
    assert "wall.xpm" in capsys.readouterr().out


def test_texture_set_defaults_empty():
    assert TextureSet() == TextureSet(None, None, None, None, None)


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_main_wrong_argument_count(argv):
    assert main(argv) == 0


def test_main_rejects_bad_extension(tmp_path, capsys):
    assert main([str(tmp_path / "map.txt")]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_rejects_invalid_map(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1P0E1\n11111\n")
    assert main([str(path)]) == 1
    assert "Error" in capsys.readouterr().err