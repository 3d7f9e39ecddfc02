# maze_solver/maze_io/maze_renderer.py
import logging
from pathlib import Path
from typing import Union

from maze_solver.pathfinding.grid import Grid, Tile, TileType
from maze_solver.pathfinding.directed_astar import PathResult

logger = logging.getLogger(__name__)


def tile_to_char(tile: Tile) -> str:
    """Path tiles between the endpoints show their approach arrow; everything else its own glyph."""
    state = tile.state
    if (state.is_on_solution_path
            and state.approach_direction is not None
            and tile.tile_type not in (TileType.START, TileType.END)):
        return state.approach_direction.glyph
    return tile.tile_type.value


def render_grid(grid: Grid) -> str:
    return "".join("".join(tile_to_char(t) for t in row) + "\n" for row in grid.rows())


def render_summary(grid: Grid, result: PathResult, solve_time_ms: int) -> str:
    lines = [
        f"Dimensions: {grid.width} x {grid.height}",
        f"Solved in: {solve_time_ms} ms. Search count: {result.visited_count}",
    ]
    if result.success:
        lines.append(f"Best path cost {result.total_cost} points")
    else:
        lines.append("No path found to the goal.")
    return "\n".join(lines) + "\n"


def render_report(grid: Grid, result: PathResult, solve_time_ms: int) -> str:
    """Summary block followed by the full rendered maze."""
    return render_summary(grid, result, solve_time_ms) + render_grid(grid)


def write_report(filepath: Union[str, Path], text: str):
    output_file = Path(filepath)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(text)
    logger.info(f"Wrote solved maze to {output_file}")
