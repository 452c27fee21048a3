import pytest

from raycub.grid import load_map_grid, pad_map_line


def test_pad_replaces_spaces_and_newline():
    assert pad_map_line("1 01\n", 6) == "1A01AA"


def test_pad_truncates_long_line():
    result = pad_map_line("111111111", 4)
    assert result == "1111"


def test_pad_empty_line_is_all_filler():
    assert pad_map_line("", 3) == "AAA"


@pytest.mark.parametrize("line", ["10N1", "  1 1 \n", "\n", "1\t0"])
@pytest.mark.parametrize("width", [0, 1, 5, 12])
def test_pad_invariants(line, width):
    result = pad_map_line(line, width)
    assert len(result) == width
    assert " " not in result
    assert "\n" not in result


def test_pad_keeps_other_characters():
    assert pad_map_line("1\t0", 3)[1] == "\t"


def test_pad_negative_width():
    with pytest.raises(ValueError):
        pad_map_line("1", -1)


def _write(tmp_path, text):
    path = tmp_path / "level.cub"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_skips_header_and_pads(tmp_path):
    header = ["NO ./north.xpm\n", "\n"]
    body = ["111\n", "1N0 1\n", "11111"]
    path = _write(tmp_path, "".join(header + body))
    rows = load_map_grid(path, len(header), 5, len(body))
    assert rows == [pad_map_line(line, 5) for line in body]


def test_load_stops_at_height(tmp_path):
    path = _write(tmp_path, "111\n101\n111\nextra\n")
    rows = load_map_grid(path, 0, 3, 2)
    assert len(rows) == 2
    assert rows[0] == pad_map_line("111\n", 3)


def test_load_short_file_gives_fewer_rows(tmp_path):
    path = _write(tmp_path, "header\n111\n")
    rows = load_map_grid(path, 1, 3, 5)
    assert len(rows) == 1


def test_load_position_past_end(tmp_path):
    path = _write(tmp_path, "one\n")
    assert load_map_grid(path, 4, 3, 2) == []


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_map_grid(tmp_path / "absent.cub", 0, 3, 3)