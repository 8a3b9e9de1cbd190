import pygame
import pytest

from mermaidgame.app import TILE_SIZE, Textures, main, render, tile_layout
from mermaidgame.game import Direction, Game
from mermaidgame.mapfile import parse_map

MAP_TEXT = "11111\n1PCE1\n1V0C1\n11111\n"

COLORS = {
    "grass": (0, 0, 255, 255),
    "wall": (255, 0, 0, 255),
    "player": (0, 255, 0, 255),
    "player_reversed": (0, 128, 0, 255),
    "coin": (255, 255, 0, 255),
    "coin_reversed": (128, 128, 0, 255),
    "door": (255, 0, 255, 255),
    "villain": (0, 255, 255, 255),
}


def solid_textures():
    surfaces = {}
    for name, color in COLORS.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
        surface.fill(color)
        surfaces[name] = surface
    return Textures(**surfaces)


def center(row, col):
    return (col * TILE_SIZE + TILE_SIZE // 2, row * TILE_SIZE + TILE_SIZE // 2)


@pytest.fixture
def game():
    return Game(parse_map(MAP_TEXT))


def test_layout_covers_every_cell_with_grass(game):
    layout = tile_layout(game, TILE_SIZE)
    grass = [pos for name, pos in layout if name == "grass"]
    assert len(grass) == game.width * game.height
    assert layout[0] == ("grass", (0, 0))


def test_layout_sprites_match_map(game):
    layout = tile_layout(game, 10)
    walls = [pos for name, pos in layout if name == "wall"]
    assert len(walls) == sum(row.count("1") for row in game.rows)
    assert ("door", (30, 10)) in layout
    assert ("villain", (10, 20)) in layout
    assert [pos for name, pos in layout if name == "coin"] == [(20, 10), (30, 20)]


def test_layout_player_last_and_facing(game):
    assert tile_layout(game, 10)[-1] == ("player", (10, 10))
    game.press(97)
    assert tile_layout(game, 10)[-1] == ("player_reversed", (10, 10))


def test_render_draws_sprites(game):
    surface = pygame.Surface((game.width * TILE_SIZE, game.height * TILE_SIZE))
    render(surface, game, solid_textures(), False)
    assert tuple(surface.get_at(center(1, 1)))[:3] == COLORS["player"][:3]
    assert tuple(surface.get_at(center(3, 2)))[:3] == COLORS["wall"][:3]
    assert tuple(surface.get_at(center(2, 3)))[:3] == COLORS["coin"][:3]
    assert tuple(surface.get_at(center(2, 2)))[:3] == COLORS["grass"][:3]


def test_render_reversed_coin(game):
    surface = pygame.Surface((game.width * TILE_SIZE, game.height * TILE_SIZE))
    render(surface, game, solid_textures(), True)
    assert tuple(surface.get_at(center(2, 3)))[:3] == COLORS["coin_reversed"][:3]


def test_render_after_move(game):
    game.press(100)
    surface = pygame.Surface((game.width * TILE_SIZE, game.height * TILE_SIZE))
    render(surface, game, solid_textures(), False)
    assert tuple(surface.get_at(center(1, 2)))[:3] == COLORS["player"][:3]
    assert tuple(surface.get_at(center(1, 1)))[:3] == COLORS["grass"][:3]


def test_textures_load(tmp_path):
    for filename in (
        "ocean1.xpm", "coral1.xpm", "ariel1.xpm", "ariel_reversed.xpm",
        "coin2.xpm", "reversed_coin.xpm", "door3.xpm", "ursula.xpm",
    ):
        (tmp_path / filename).write_text(
            '/* XPM */\nstatic char *x[] = {\n"2 1 2 1",\n'
            '"a c #FF0000",\n"b c None",\n"ab"\n};\n'
        )
    textures = Textures.load(tmp_path)
    assert textures.wall.get_size() == (2, 1)
    assert tuple(textures.villain.get_at((0, 0))) == (255, 0, 0, 255)
    assert tuple(textures.grass.get_at((1, 0)))[3] == 0


def test_main_without_map_returns_zero():
    assert main([]) == 0


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().out == "Error\nInvalid filename!"


def test_main_wrong_extension(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text(MAP_TEXT)
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid file format!"


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1PXE1\n11111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map"