"""Loading wall textures for every map character."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from raycub.model import CHARSET_SIZE, Direction, Game, MapConfig, Texture, TextureSpec

Loader = Callable[[str], Any]

_FLOOR_CHARS = frozenset("0ONSEW")


class TextureLoadError(Exception):
    """A texture image could not be loaded."""

    def __init__(self, path: str | None) -> None:
        super().__init__(f"Can't load texture: {path}")
        self.path = path


def texture_kind(char: str) -> int:
    """Default kind of a map character: 0 for walkable cells, 1 otherwise."""
    return 0 if char in _FLOOR_CHARS else 1


def _caching_loader(loader: Loader) -> Callable[[str | None], Any]:
    cache: dict[str, Any] = {}

    def load(path: str | None) -> Any:
        if path is None:
            raise TextureLoadError(path)
        if path not in cache:
            frame = loader(path)
            if frame is None:
                raise TextureLoadError(path)
            cache[path] = frame
        return cache[path]

    return load


def _characters() -> list[str]:
    return [chr(code) for code in range(CHARSET_SIZE)]


def assign_textures(game: Game, config: MapConfig, loader: Loader) -> None:
    """Give every map character the four wall textures of ``config``.

    ``loader`` turns an image path into a frame, or returns None when it
    fails, which raises :class:`TextureLoadError`.
    """
    load = _caching_loader(loader)
    paths = {
        Direction.NORTH: config.north,
        Direction.SOUTH: config.south,
        Direction.WEST: config.west,
        Direction.EAST: config.east,
    }
    for char in _characters():
        texture = game.textures.setdefault(char, Texture())
        for direction, path in paths.items():
            texture.frame_sets[direction] = [load(path)]
        texture.empty = False
        texture.kind = texture_kind(char)


def assign_textures_bonus(game: Game, config: MapConfig, loader: Loader) -> None:
    """Give every map character the animated textures declared for it.

    Frame slots left out in the map file stay None. Speed, kind and minimap
    colour override the defaults when the file sets them; a set kind is
    reduced to 0 or 1.
    """
    load = _caching_loader(loader)
    for char in _characters():
        spec = config.texture_specs.get(char) or TextureSpec()
        texture = game.textures.setdefault(char, Texture())
        for direction in Direction:
            texture.frame_sets[direction] = [
                None if path is None else load(path)
                for path in spec.frames.get(direction, [])
            ]
        texture.empty = all(texture.frame_count(direction) == 0 for direction in Direction)
        if spec.speed is not None:
            texture.anim_delay = spec.speed
        if spec.map_color is not None:
            texture.map_color = spec.map_color
        if spec.kind is not None:
            texture.kind = int(bool(spec.kind))
        else:
            texture.kind = texture_kind(char)