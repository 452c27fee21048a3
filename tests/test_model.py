import pytest

from raycub.model import (
    CHARSET_SIZE,
    DEFAULT_ANIM_DELAY,
    MAX_FRAME,
    Direction,
    Game,
    Keys,
    MapConfig,
    MlxMask,
    Texture,
    TextureSpec,
)


def test_keys_reset_releases_every_key():
    keys = Keys(forward=True, backward=True, left=True, right=True,
                rot_left=True, rot_right=True)
    keys.reset()
    assert keys == Keys()


def test_direction_order_matches_player_flags():
    assert [d.name for d in Direction] == ["NORTH", "SOUTH", "WEST", "EAST"]
    texture = Texture()
    for count, direction in enumerate(Direction, start=1):
        texture.frame_sets[direction] = ["frame"] * count
    assert [texture.frame_count(d) for d in Direction] == [1, 2, 3, 4]
    assert texture.frame_count(Direction.WEST) == 3


def test_masks_combine():
    combined = MlxMask.KEY_PRESS | MlxMask.KEY_RELEASE
    assert MlxMask(0b11) == combined
    assert MlxMask(1) == MlxMask.KEY_PRESS
    assert MlxMask(1 << 17) == MlxMask.DESTROY
    assert MlxMask.KEY_RELEASE in combined
    assert MlxMask.DESTROY not in combined


def test_texture_defaults_follow_initial_values():
    texture = Texture()
    assert texture.empty is True
    assert texture.anim_delay == DEFAULT_ANIM_DELAY
    assert all(texture.animating[d] for d in Direction)
    assert all(texture.frame_count(d) == 0 for d in Direction)


def test_frame_count_skips_missing_slots():
    texture = Texture()
    texture.frame_sets[Direction.NORTH] = ["a", None, "b"]
    assert texture.frame_count(Direction.NORTH) == 2
    assert texture.frame_count(Direction.SOUTH) == 0


def test_frames_returns_copy():
    texture = Texture()
    texture.frame_sets[Direction.EAST] = ["x"]
    frames = texture.frames(Direction.EAST)
    frames.append("y")
    assert texture.frames(Direction.EAST) == ["x"]


def test_texture_spec_limits_frames():
    with pytest.raises(ValueError):
        TextureSpec(frames={Direction.NORTH: ["p"] * (MAX_FRAME + 1)})


def test_texture_spec_fills_missing_directions():
    spec = TextureSpec(frames={Direction.WEST: ["w.xpm"]})
    assert set(spec.frames) == set(Direction)
    assert spec.frames[Direction.WEST] == ["w.xpm"]
    assert spec.speed is None


def test_map_config_has_spec_for_every_character():
    config = MapConfig()
    assert len(config.texture_specs) == CHARSET_SIZE
    assert config.texture_specs["1"] is not config.texture_specs["0"]


def test_map_config_rejects_bad_color():
    with pytest.raises(ValueError):
        MapConfig(floor_color=(1, 2))


def test_game_textures_are_independent():
    game = Game()
    assert len(game.textures) == CHARSET_SIZE
    game.textures["1"].map_color = 5
    assert game.textures["0"].map_color == 0
    assert Game().textures["1"].map_color == 0