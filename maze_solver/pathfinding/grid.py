# maze_solver/pathfinding/grid.py
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

from maze_solver.pathfinding.errors import MalformedInputError, MissingEndpointsError


class TileType(Enum):
    EMPTY = "."
    WALL = "#"
    START = "S"
    END = "E"


class Direction(Enum):
    """Facing of a tile. Members are listed in neighbour expansion order."""
    NORTH = (0, -1, "^")
    SOUTH = (0, 1, "v")
    EAST = (1, 0, ">")
    WEST = (-1, 0, "<")

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def glyph(self) -> str:
        return self.value[2]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Look up a direction by case-insensitive name, e.g. 'east'."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


@dataclass
class SearchState:
    """Per-tile A* bookkeeping. g_cost is None until the tile is reached."""
    g_cost: Optional[int] = None
    h_cost: int = 0
    approach_direction: Optional[Direction] = None
    parent: Optional[int] = None
    is_on_solution_path: bool = False

    @property
    def f_cost(self) -> int:
        return (self.g_cost or 0) + self.h_cost

    def reset(self):
        self.g_cost = None
        self.h_cost = 0
        self.approach_direction = None
        self.parent = None
        self.is_on_solution_path = False


@dataclass(frozen=True)
class Tile:
    """A maze cell. Type and position are fixed at load; only the search state changes."""
    tile_type: TileType
    x: int
    y: int
    state: SearchState = field(default_factory=SearchState)

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_wall(self) -> bool:
        return self.tile_type is TileType.WALL


class Grid:
    """
    Rectangular maze stored as a flat, row-major list of tiles.

    A grid always holds exactly one START and one END tile; both are located
    once at construction and exposed as flat indices.
    """

    def __init__(self, width: int, height: int, tiles: List[Tile]):
        if width <= 0 or height <= 0:
            raise MalformedInputError("Maze must have at least one row and one column.")
        if len(tiles) != width * height:
            raise MalformedInputError(
                f"Expected {width * height} tiles for a {width} x {height} maze, got {len(tiles)}"
            )
        self.width = width
        self.height = height
        self.tiles = tiles
        self.start_index = self._locate(TileType.START)
        self.end_index = self._locate(TileType.END)

    def _locate(self, tile_type: TileType) -> int:
        found = [i for i, t in enumerate(self.tiles) if t.tile_type is tile_type]
        if not found:
            raise MissingEndpointsError(
                f"Maze must have a start (S) and an end (E); no '{tile_type.value}' tile found."
            )
        if len(found) > 1:
            raise MalformedInputError(
                f"Maze must have exactly one '{tile_type.value}' tile, found {len(found)}."
            )
        return found[0]

    @property
    def start(self) -> Tile:
        return self.tiles[self.start_index]

    @property
    def end(self) -> Tile:
        return self.tiles[self.end_index]

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Tile:
        return self.tiles[self.index(x, y)]

    def rows(self) -> Iterator[List[Tile]]:
        for y in range(self.height):
            yield self.tiles[y * self.width:(y + 1) * self.width]

    def reset_search_state(self):
        """Return every tile to the unvisited state so the grid can be solved again."""
        for tile in self.tiles:
            tile.state.reset()
