"""The game window and the command that starts it."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from solong.game import (
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    Game,
    MoveOutcome,
)
from solong.mapcheck import MapError, load_map
from solong.printf import ft_printf
from solong.xpm import XpmError, XpmImage, load_xpm

TILE_SIZE = 64
WINDOW_TITLE = "so_long"
DEFAULT_TEXTURE_DIR = Path("src") / "textures"
TEXTURE_NAMES = ("collect", "exit", "floor", "player", "wall")

_CELL_TEXTURES = {
    "1": "wall",
    "0": "floor",
    "E": "exit",
    "C": "collect",
    "P": "player",
}


@dataclass(frozen=True)
class TextureSet:
    """The images for each kind of tile; a texture that failed to load is None."""

    collect: Optional[XpmImage] = None
    exit: Optional[XpmImage] = None
    floor: Optional[XpmImage] = None
    player: Optional[XpmImage] = None
    wall: Optional[XpmImage] = None


def load_textures(texture_dir: Union[str, os.PathLike] = DEFAULT_TEXTURE_DIR) -> TextureSet:
    """Load the tile textures from ``texture_dir``, reporting each one that fails."""
    loaded: dict[str, Optional[XpmImage]] = {}
    for name in TEXTURE_NAMES:
        try:
            loaded[name] = load_xpm(Path(texture_dir) / f"{name}.xpm")
        except XpmError:
            print(f"Error: could not load {name}.xpm!")
            loaded[name] = None
    return TextureSet(**loaded)


def tile_layout(game: Game) -> list[tuple[str, int, int]]:
    """The tiles to draw as (texture name, x pixel, y pixel), row by row."""
    return [
        (_CELL_TEXTURES[cell], col * TILE_SIZE, row * TILE_SIZE)
        for row, line in enumerate(game.rows)
        for col, cell in enumerate(line)
        if cell in _CELL_TEXTURES
    ]


def _texture_map(textures: TextureSet) -> dict[str, Optional[XpmImage]]:
    return {
        "collect": textures.collect,
        "exit": textures.exit,
        "floor": textures.floor,
        "player": textures.player,
        "wall": textures.wall,
    }


def _to_surface(image: XpmImage):
    import pygame

    data = bytearray()
    for value in image.pixels:
        data += (value & 0xFFFFFF).to_bytes(3, "big")
    return pygame.image.frombuffer(data, (image.width, image.height), "RGB")


def _key_codes() -> dict[int, int]:
    import pygame

    return {
        pygame.K_ESCAPE: KEY_ESCAPE,
        pygame.K_w: KEY_W,
        pygame.K_a: KEY_A,
        pygame.K_s: KEY_S,
        pygame.K_d: KEY_D,
        pygame.K_UP: KEY_UP,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_DOWN: KEY_DOWN,
        pygame.K_RIGHT: KEY_RIGHT,
    }


def _draw(screen, game: Game, surfaces: dict) -> None:
    import pygame

    for name, x, y in tile_layout(game):
        surface = surfaces.get(name)
        if surface is not None:
            screen.blit(surface, (x, y))
    pygame.display.flip()


def run(game: Game, texture_dir: Union[str, os.PathLike] = DEFAULT_TEXTURE_DIR) -> MoveOutcome:
    """Open the game window and play until the player wins or quits."""
    import pygame

    textures = load_textures(texture_dir)
    rows = game.rows
    width, height = len(rows[0]), len(rows)
    if width <= 0 or height <= 0:
        raise RuntimeError("map dimensions are invalid")
    try:
        pygame.display.init()
        screen = pygame.display.set_mode((width * TILE_SIZE, height * TILE_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
    except pygame.error as exc:
        pygame.display.quit()
        raise RuntimeError(f"cannot open the game window: {exc}") from exc
    try:
        surfaces = {
            name: _to_surface(image)
            for name, image in _texture_map(textures).items()
            if image is not None
        }
        key_codes = _key_codes()
        _draw(screen, game, surfaces)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return MoveOutcome.QUIT
            if event.type != pygame.KEYUP:
                continue
            outcome = game.handle_key(key_codes.get(event.key, event.key))
            if outcome is MoveOutcome.QUIT:
                return outcome
            if outcome is MoveOutcome.WON:
                ft_printf("You finished the game, congratulations!\n")
                ft_printf("Move count: %d\n", game.moves)
                return outcome
            if outcome in (MoveOutcome.MOVED, MoveOutcome.COLLECTED):
                _draw(screen, game, surfaces)
    finally:
        pygame.display.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on the map file named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 0
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    try:
        run(Game(game_map))
    except RuntimeError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())