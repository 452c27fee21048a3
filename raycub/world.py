"""Building the game state from a parsed map description."""

from __future__ import annotations

from collections.abc import Sequence

from raycub.model import (
    CHARSET_SIZE,
    PI,
    PI_2,
    Game,
    GridPosition,
    MapConfig,
    Position,
    Texture,
    Tile,
)
from raycub.textures import Loader, assign_textures, assign_textures_bonus

WALL_MAP_COLOR = 0xFF000000

_ORIENTATIONS = (0.0, PI_2, PI, 3 * PI_2)


def pack_rgb(rgb: Sequence[int]) -> int:
    """Pack red, green and blue components into one ``0xRRGGBB`` value."""
    red, green, blue = rgb
    return (red << 16) + (green << 8) + blue


def player_orientation(directions: Sequence[int]) -> float:
    """Starting angle, in radians, for the first set direction flag."""
    for flag, angle in zip(directions, _ORIENTATIONS):
        if flag == 1:
            return angle
    raise ValueError("no player direction is set")


def build_tiles(config: MapConfig) -> list[list[Tile]]:
    """Turn the map rows of ``config`` into a grid of tiles."""
    if len(config.rows) < config.height:
        raise ValueError("the map has fewer rows than its height")
    grid: list[list[Tile]] = []
    for row in config.rows[: config.height]:
        if len(row) < config.width:
            raise ValueError("a map row is shorter than the map width")
        grid.append([Tile(type=char) for char in row[: config.width]])
    return grid


def assign_vars(game: Game) -> None:
    """Reset counters, flags and all textures to their starting values."""
    game.frames = 0
    game.minimap = False
    game.info = False
    game.border_color = 0
    game.textures = {chr(code): Texture() for code in range(CHARSET_SIZE)}
    game.textures["1"].map_color = WALL_MAP_COLOR


def assign_to_cube(config: MapConfig, loader: Loader, bonus: bool = False) -> Game:
    """Create the game state for ``config``, loading textures with ``loader``.

    With ``bonus`` the per-character animated textures are used and the
    minimap starts shown.
    """
    game = Game()
    game.tiles = build_tiles(config)
    game.map_size = GridPosition(config.width, config.height)
    game.floor_color = pack_rgb(config.floor_color)
    game.ceiling_color = pack_rgb(config.ceiling_color)
    column, row = config.player_position
    game.position = Position(column + 0.5, row + 0.5)
    game.orientation = player_orientation(config.player_directions)
    game.keys.reset()
    assign_vars(game)
    game.minimap = bool(bonus)
    if bonus:
        assign_textures_bonus(game, config, loader)
    else:
        assign_textures(game, config, loader)
    return game