# maze_solver/pathfinding/directed_astar.py
import heapq
import logging
import itertools
from typing import List, Tuple, Dict, Optional, Iterator
from dataclasses import dataclass, field

from config.settings import MOVE_COST, TURN_COST, START_FACING
from maze_solver.pathfinding.grid import Grid, Tile, TileType, Direction
from maze_solver.pathfinding.errors import MissingEndpointsError

logger = logging.getLogger(__name__)


@dataclass
class PathStep:
    """One tile of a reconstructed path and the facing used to enter it."""
    x: int
    y: int
    direction: Direction

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass
class PathResult:
    """
    Result of a solve run. total_cost is None when the end is unreachable.

    visited_count is the number of frontier pushes: the start push plus one per
    relaxation. The start tile is never re-entered, so no push is counted for it
    beyond the first.
    """
    total_cost: Optional[int] = None
    visited_count: int = 0
    path: List[PathStep] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.total_cost is not None


def step_cost(facing: Optional[Direction], heading: Direction) -> int:
    """Cost of one move: straight ahead is MOVE_COST, anything else also pays TURN_COST."""
    if facing is heading:
        return MOVE_COST
    return MOVE_COST + TURN_COST


class DirectedGridPathfinder:
    """
    Directional A* over a maze grid where turning is expensive.

    Features:
    - Cost model: 1 per step forward, +1000 whenever the facing changes
    - Turn-aware heuristic (Manhattan distance plus expected turns)
    - Frontier ordered by f-cost, ties broken by the lower h-cost
    - Each tile remembers only the single direction of its cheapest arrival
    """

    def __init__(self, start_facing: str = START_FACING):
        self.start_facing = Direction.from_name(start_facing)

        # Statistics
        self.total_requests = 0
        self.successful_paths = 0
        self.last_visited_count = 0

    def solve(self, grid: Grid) -> PathResult:
        """Find the cheapest route from the start tile to the end tile of the grid."""
        self.total_requests += 1

        # Reset grid state and locate the endpoints
        start_idx, end_idx = self._prepare(grid)
        start_tile = grid.tiles[start_idx]
        end_tile = grid.tiles[end_idx]
        logger.debug(f"Solving {grid.width}x{grid.height} maze from {start_tile.pos} to {end_tile.pos}")

        start_tile.state.g_cost = 0
        start_tile.state.approach_direction = self.start_facing
        start_tile.state.h_cost = self._heuristic(start_tile, end_tile)

        # Entries are (f, h, seq, g, index); seq keeps equal keys in insertion order
        open_set: List[Tuple[int, int, int, int, int]] = []
        counter = itertools.count()
        heapq.heappush(open_set, self._entry(start_tile, start_idx, counter))
        visited_count = 1
        total_cost: Optional[int] = None

        while open_set:
            _, _, _, g_cost, current_idx = heapq.heappop(open_set)
            current = grid.tiles[current_idx]

            # A cheaper arrival was recorded after this entry was pushed
            if g_cost != current.state.g_cost:
                continue

            if current_idx == end_idx:
                total_cost = current.state.g_cost
                break

            for direction, neighbor_idx in self._get_neighbors(grid, current):
                neighbor = grid.tiles[neighbor_idx]
                tentative_g_cost = current.state.g_cost + step_cost(current.state.approach_direction, direction)

                if neighbor.state.g_cost is None or tentative_g_cost < neighbor.state.g_cost:
                    neighbor.state.approach_direction = direction
                    neighbor.state.g_cost = tentative_g_cost
                    neighbor.state.h_cost = self._heuristic(neighbor, end_tile)
                    neighbor.state.parent = current_idx
                    heapq.heappush(open_set, self._entry(neighbor, neighbor_idx, counter))
                    visited_count += 1

        self.last_visited_count = visited_count

        if total_cost is None:
            logger.info(f"No path found to the goal after {visited_count} relaxations")
            return PathResult(total_cost=None, visited_count=visited_count)

        self.successful_paths += 1
        path = self._reconstruct_path(grid, start_idx, end_idx)
        logger.debug(f"Best path cost {total_cost} over {len(path)} tiles, search count {visited_count}")
        return PathResult(total_cost=total_cost, visited_count=visited_count, path=path)

    def _prepare(self, grid: Grid) -> Tuple[int, int]:
        """Reset every search state and return (start_index, end_index)."""
        grid.reset_search_state()

        start_idx = end_idx = None
        for i, tile in enumerate(grid.tiles):
            if tile.tile_type is TileType.START:
                start_idx = i
            elif tile.tile_type is TileType.END:
                end_idx = i

        if start_idx is None or end_idx is None:
            raise MissingEndpointsError("Maze must have a start (S) and an end (E).")
        return start_idx, end_idx

    @staticmethod
    def _entry(tile: Tile, index: int, counter: Iterator[int]) -> Tuple[int, int, int, int, int]:
        return (tile.state.f_cost, tile.state.h_cost, next(counter), tile.state.g_cost, index)

    @staticmethod
    def _desired_direction(tile: Tile, goal: Tile) -> Direction:
        """Direction that closes the gap to the goal, x axis first."""
        if tile.x < goal.x:
            return Direction.EAST
        if tile.x > goal.x:
            return Direction.WEST
        if tile.y < goal.y:
            return Direction.SOUTH
        return Direction.NORTH

    def _heuristic(self, tile: Tile, goal: Tile) -> int:
        """Manhattan distance plus an estimate of the turns still required."""
        manhattan = abs(tile.x - goal.x) + abs(tile.y - goal.y)

        rotation_cost = 0
        if tile.state.approach_direction is not self._desired_direction(tile, goal):
            rotation_cost += TURN_COST

        # Not on the goal's row or column: at least one more turn is needed
        if tile.x != goal.x and tile.y != goal.y:
            rotation_cost += TURN_COST

        return manhattan + rotation_cost

    def _get_neighbors(self, grid: Grid, tile: Tile) -> List[Tuple[Direction, int]]:
        """Open neighbours of a tile in N, S, E, W order."""
        neighbors = []
        for direction in Direction:
            x, y = tile.x + direction.dx, tile.y + direction.dy
            if not grid.in_bounds(x, y):
                continue
            neighbor_idx = grid.index(x, y)
            if grid.tiles[neighbor_idx].is_wall:
                continue
            neighbors.append((direction, neighbor_idx))
        return neighbors

    def _reconstruct_path(self, grid: Grid, start_idx: int, end_idx: int) -> List[PathStep]:
        """Walk parent links from the end back to the start, flagging each tile on the way."""
        path = []
        current_idx = end_idx

        while True:
            tile = grid.tiles[current_idx]
            tile.state.is_on_solution_path = True
            path.append(PathStep(tile.x, tile.y, tile.state.approach_direction))
            if current_idx == start_idx:
                break
            current_idx = tile.state.parent

        path.reverse()
        return path

    def get_statistics(self) -> Dict:
        """Get solver statistics."""
        success_rate = (self.successful_paths / self.total_requests * 100) if self.total_requests > 0 else 0

        return {
            'total_requests': self.total_requests,
            'successful_paths': self.successful_paths,
            'success_rate': success_rate,
            'last_visited_count': self.last_visited_count,
        }
