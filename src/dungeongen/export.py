# src/dungeongen/export.py
"""
Text export of a finished grid (one line per row, cells joined by a delimiter)
plus the matching reader and a glyph dump for debugging.
"""

import os
from typing import IO, Iterable, List, Mapping, Sequence, Union

from .tiles import GLYPHS, TILE_NAMES, is_valid_tile

Sink = Union[str, os.PathLike, IO[str]]

def format_grid(grid: Sequence[Sequence[int]], delimiter: str = ",") -> str:
    return "".join(delimiter.join(str(t) for t in row) + "\n" for row in grid)

def write_grid(grid: Sequence[Sequence[int]], sink: Sink, delimiter: str = ",") -> None:
    """Write to a path (created/overwritten) or to any text stream."""
    text = format_grid(grid, delimiter)
    if hasattr(sink, "write"):
        sink.write(text)
        return
    with open(sink, "w", encoding="utf-8", newline="") as f:
        f.write(text)

def parse_grid(lines: Iterable[str], delimiter: str = ",") -> List[List[int]]:
    rows = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            continue
        rows.append([int(x) for x in line.split(delimiter)])
    if rows and any(len(r) != len(rows[0]) for r in rows):
        raise ValueError("grid rows have different lengths")
    for row in rows:
        for t in row:
            if not is_valid_tile(t):
                raise ValueError(f"unknown tile value {t}; expected one of {TILE_NAMES}")
    return rows

def read_grid(source: Sink, delimiter: str = ",") -> List[List[int]]:
    if hasattr(source, "read"):
        return parse_grid(source, delimiter)
    with open(source, encoding="utf-8") as f:
        return parse_grid(f, delimiter)

def dump_ascii(grid: Sequence[Sequence[int]], glyphs: Mapping[int, str] = GLYPHS) -> str:
    return "\n".join("".join(glyphs[t] for t in row) for row in grid)
