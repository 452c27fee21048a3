"""Core data types and constants shared by the parser and the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from enum import IntEnum, IntFlag
from typing import Any

PI = math.pi
PI_2 = math.pi / 2
PI_3 = math.pi / 3
PI_4 = math.pi / 4
PI_6 = math.pi / 6
PI_12 = math.pi / 12

WINDOW_NAME = "Cub3D"
HEIGHT = 900
WIDTH = 1200
FOV = PI_3
RAYS = 600
WALK_SPEED = 0.05
TRANSL_SPEED = 0.02
ROT_SPEED = 0.02908882086641849395
ROT_SPEED_MOUSE = 0.001

MAX_FRAME = 200
CHARSET_SIZE = 128
DEFAULT_ANIM_DELAY = 16


class Direction(IntEnum):
    """Compass direction of a wall face."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


class MlxEvent(IntEnum):
    """Window event codes."""

    ON_KEYDOWN = 2
    ON_KEYUP = 3
    ON_MOUSEDOWN = 4
    ON_MOUSEUP = 5
    ON_MOUSEMOVE = 6
    ON_EXPOSE = 12
    ON_DESTROY = 17


class MlxMask(IntFlag):
    """Window event masks."""

    NO_MASK = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    MOUSE_MOVE = 1 << 6
    MOUSE_MOVE_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    DESTROY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass
class Position:
    """A point in map space, in tile units."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class GridPosition:
    """An integer point or size on the map grid."""

    x: int = 0
    y: int = 0


@dataclass
class Keys:
    """Which movement keys are currently held."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    rot_left: bool = False
    rot_right: bool = False

    def reset(self) -> None:
        """Release every key."""
        for item in fields(self):
            setattr(self, item.name, False)


@dataclass
class Tile:
    """One cell of the map."""

    type: str
    is_solid: bool = False


def _empty_frame_lists() -> dict[Direction, list[Any]]:
    return {direction: [] for direction in Direction}


@dataclass
class TextureSpec:
    """Texture settings declared in the map file for one map character.

    ``frames`` holds the animation frame paths per direction; a slot may be
    None when the file left it out. ``speed``, ``kind`` and ``map_color``
    are None when the file does not set them.
    """

    frames: dict[Direction, list[str | None]] = field(default_factory=_empty_frame_lists)
    speed: int | None = None
    kind: int | None = None
    map_color: int | None = None

    def __post_init__(self) -> None:
        for direction in Direction:
            self.frames.setdefault(direction, [])
        for direction, paths in self.frames.items():
            if len(paths) > MAX_FRAME:
                raise ValueError(
                    f"{Direction(direction).name} has {len(paths)} frames, "
                    f"at most {MAX_FRAME} are allowed"
                )


def _default_specs() -> dict[str, TextureSpec]:
    return {chr(code): TextureSpec() for code in range(CHARSET_SIZE)}


def _check_rgb(name: str, value: tuple[int, int, int]) -> None:
    if len(value) != 3:
        raise ValueError(f"{name} needs three components")


@dataclass
class MapConfig:
    """Everything read from a map description file."""

    rows: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0
    map_position: int = 0
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor_color: tuple[int, int, int] = (0, 0, 0)
    ceiling_color: tuple[int, int, int] = (0, 0, 0)
    minimap_color: tuple[int, int, int] = (0, 0, 0)
    player_directions: tuple[int, int, int, int] = (0, 0, 0, 0)
    player_position: tuple[int, int] = (0, 0)
    texture_specs: dict[str, TextureSpec] = field(default_factory=_default_specs)

    def __post_init__(self) -> None:
        _check_rgb("floor_color", self.floor_color)
        _check_rgb("ceiling_color", self.ceiling_color)
        _check_rgb("minimap_color", self.minimap_color)
        if len(self.player_directions) != 4:
            raise ValueError("player_directions needs four flags")
        if len(self.player_position) != 2:
            raise ValueError("player_position needs two coordinates")


@dataclass
class Texture:
    """Loaded animation frames and display settings for one map character.

    ``frame_sets`` holds the frames per direction; a slot may be None where
    no frame was given.
    """

    empty: bool = True
    frame_sets: dict[Direction, list[Any]] = field(default_factory=_empty_frame_lists)
    anim_index: dict[Direction, int] = field(
        default_factory=lambda: {direction: 0 for direction in Direction}
    )
    animating: dict[Direction, bool] = field(
        default_factory=lambda: {direction: True for direction in Direction}
    )
    anim_delay: int = DEFAULT_ANIM_DELAY
    anim_counter: int = 0
    kind: int = 0
    map_color: int = 0

    def frame_count(self, direction: Direction) -> int:
        """Number of frames actually present for ``direction``."""
        return sum(frame is not None for frame in self.frame_sets.get(direction, []))

    def frames(self, direction: Direction) -> list[Any]:
        """A copy of the frame slots for ``direction``."""
        return list(self.frame_sets.get(direction, []))


def _default_textures() -> dict[str, Texture]:
    return {chr(code): Texture() for code in range(CHARSET_SIZE)}


@dataclass
class Game:
    """State of a running game."""

    tiles: list[list[Tile]] = field(default_factory=list)
    map_size: GridPosition = field(default_factory=GridPosition)
    border_color: int = 0
    floor_color: int = 0
    ceiling_color: int = 0
    textures: dict[str, Texture] = field(default_factory=_default_textures)
    orientation: float = 0.0
    position: Position = field(default_factory=Position)
    keys: Keys = field(default_factory=Keys)
    minimap: bool = False
    info: bool = False
    frames: int = 0
    canvas: Any = None