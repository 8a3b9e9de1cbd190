"""The graphical game: textures, drawing and the event loop."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from mermaidgame.game import CoinAnimator, Direction, Game, Outcome
from mermaidgame.mapfile import MapError, load_map
from mermaidgame.xpm import TRANSPARENT, XpmError, XpmImage, read_xpm

TILE_SIZE = 60
TEXT_COLOR = (255, 255, 255)
MOVES_LABEL = "the number of moves = "
_LABEL_POS = (0, 10)
_COUNT_POS = (225, 10)
_FONT_SIZE = 20
_FPS = 60

_TEXTURE_FILES = {
    "grass": "ocean1.xpm",
    "wall": "coral1.xpm",
    "player": "ariel1.xpm",
    "player_reversed": "ariel_reversed.xpm",
    "coin": "coin2.xpm",
    "coin_reversed": "reversed_coin.xpm",
    "door": "door3.xpm",
    "villain": "ursula.xpm",
}

_TILE_SPRITES = {"1": "wall", "E": "door", "C": "coin", "V": "villain"}


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                surface.set_at((x, y), (0, 0, 0, 0))
            else:
                surface.set_at(
                    (x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)
                )
    return surface


@dataclass
class Textures:
    """The sprites used to draw the map."""

    grass: pygame.Surface
    wall: pygame.Surface
    player: pygame.Surface
    player_reversed: pygame.Surface
    coin: pygame.Surface
    coin_reversed: pygame.Surface
    door: pygame.Surface
    villain: pygame.Surface

    @classmethod
    def load(cls, directory: Union[str, Path]) -> "Textures":
        """Load every sprite from the XPM files in ``directory``."""
        base = Path(directory)
        return cls(**{
            name: _to_surface(read_xpm(base / filename))
            for name, filename in _TEXTURE_FILES.items()
        })


def tile_layout(game: Game, tile_size: int = TILE_SIZE) -> list[tuple[str, tuple[int, int]]]:
    """Return the sprites to draw, in order, with their pixel positions."""
    layout = []
    for row, line in enumerate(game.rows):
        for col, char in enumerate(line):
            position = (col * tile_size, row * tile_size)
            layout.append(("grass", position))
            sprite = _TILE_SPRITES.get(char)
            if sprite is not None:
                layout.append((sprite, position))
    player_row, player_col = game.player
    player_sprite = "player_reversed" if game.facing is Direction.LEFT else "player"
    layout.append((player_sprite, (player_col * tile_size, player_row * tile_size)))
    return layout


def render(surface: pygame.Surface, game: Game, textures: Textures, coin: bool) -> None:
    """Draw the map and the move counter; ``coin`` selects the reversed coin."""
    sprites = {
        "grass": textures.grass,
        "wall": textures.wall,
        "player": textures.player,
        "player_reversed": textures.player_reversed,
        "coin": textures.coin_reversed if coin else textures.coin,
        "door": textures.door,
        "villain": textures.villain,
    }
    surface.fill((0, 0, 0))
    for name, position in tile_layout(game, TILE_SIZE):
        surface.blit(sprites[name], position)
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None, _FONT_SIZE)
    rise = font.get_ascent()
    for text, (x, baseline) in ((MOVES_LABEL, _LABEL_POS), (str(game.moves), _COUNT_POS)):
        surface.blit(font.render(text, True, TEXT_COLOR), (x, max(0, baseline - rise)))


def _keycode(key: int) -> int:
    return {
        pygame.K_ESCAPE: 53,
        pygame.K_LEFT: 123,
        pygame.K_RIGHT: 124,
        pygame.K_DOWN: 125,
        pygame.K_UP: 126,
    }.get(key, key)


def _play(game: Game, textures_dir: Path) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width * TILE_SIZE, game.height * TILE_SIZE))
        pygame.display.set_caption("Map")
        try:
            textures = Textures.load(textures_dir)
        except XpmError as error:
            print(f"Error\n{error}")
            return 1
        animator = CoinAnimator()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                code = _keycode(event.key)
                print(code)
                outcome = game.press(code)
                if outcome is Outcome.QUIT:
                    return 0
                if outcome is Outcome.WON:
                    print("YOU WON", end="")
                    return 0
                if outcome is Outcome.LOST:
                    print("YOU LOSE", end="")
                    return 0
                print(f"the number of movements = {game.moves}")
            render(screen, game, textures, animator.tick())
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    try:
        game_map = load_map(args[0])
    except MapError as error:
        print(f"Error\n{error}", end="")
        return 1
    print("Valid path.")
    return _play(Game(game_map), Path("textures"))


if __name__ == "__main__":
    sys.exit(main())