# maze_solver/maze_io/maze_loader.py
"""
Maze loader: turns the text maze format into a Grid.

Format: one line per row, '.' empty, '#' wall, 'S' start, 'E' end.
Blank lines are ignored; every remaining row must have the same width.
"""

import logging
from pathlib import Path
from typing import List, Union

from maze_solver.pathfinding.grid import Grid, Tile, TileType
from maze_solver.pathfinding.errors import MalformedInputError

logger = logging.getLogger(__name__)


def _split_rows(text: str) -> List[str]:
    return [line.rstrip("\r") for line in text.split("\n") if line.rstrip("\r")]


def parse_maze(text: str) -> Grid:
    """Parse maze text into a Grid, rejecting ragged rows and unknown characters."""
    rows = _split_rows(text)
    if not rows:
        raise MalformedInputError("Maze is empty.")

    width = len(rows[0])
    height = len(rows)

    tiles: List[Tile] = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MalformedInputError(
                f"Inconsistent row lengths in maze: row {y} has {len(row)} characters, expected {width}."
            )
        for x, char in enumerate(row):
            try:
                tile_type = TileType(char)
            except ValueError:
                raise MalformedInputError(f"Invalid character {char!r} in maze at ({x}, {y}).") from None
            tiles.append(Tile(tile_type, x, y))

    return Grid(width, height, tiles)


def load_maze(filepath: Union[str, Path]) -> Grid:
    """Read and parse a maze file."""
    maze_file = Path(filepath)
    if not maze_file.exists():
        raise FileNotFoundError(f"Maze file not found: {maze_file}")

    try:
        with open(maze_file, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Maze file is not valid UTF-8: {maze_file}") from e

    grid = parse_maze(text)

    logger.info(f"Loaded {grid.width} x {grid.height} maze from {maze_file}")
    return grid
