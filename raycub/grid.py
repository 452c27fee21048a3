"""Reading the map block of a map file into a padded grid of characters."""

from __future__ import annotations

import os

from raycub.lines import LineReader

FILLER = "A"
_BLANKS = (" ", "\n")


def pad_map_line(line: str, width: int) -> str:
    """Fit one map line to ``width`` characters.

    Spaces and newlines become the filler character ``A``; the line is cut
    at ``width`` and padded with ``A`` when shorter.
    """
    if width < 0:
        raise ValueError("width must not be negative")
    cells = (FILLER if char in _BLANKS else char for char in line[:width])
    return "".join(cells).ljust(width, FILLER)


def load_map_grid(
    path: str | os.PathLike[str], position: int, width: int, height: int
) -> list[str]:
    """Read the map rows of the file at ``path``.

    The first ``position`` lines are skipped, then up to ``height`` lines
    are read and each is padded to ``width`` with :func:`pad_map_line`.
    A file that ends early gives fewer rows. An unreadable file raises
    OSError.
    """
    if position < 0 or height < 0:
        raise ValueError("position and height must not be negative")
    with open(path, encoding="utf-8", newline="") as handle:
        reader = LineReader(handle)
        for _ in range(position):
            if reader.read_line() is None:
                return []
        rows: list[str] = []
        for line in reader:
            if len(rows) >= height:
                break
            rows.append(pad_map_line(line, width))
        return rows