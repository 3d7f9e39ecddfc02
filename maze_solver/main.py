#!/usr/bin/env python3
# maze_solver/main.py

"""
Main entry point for the directed maze solver.

This script wires the solver together with its collaborators:
- Maze loader (text file -> Grid)
- DirectedGridPathfinder (directional A*)
- Renderer (solved Grid -> report file)
- Stopwatch for reporting solve time
"""

import logging
import sys
import argparse
from typing import Optional

from config.schemas import SolverConfig, SolveReport
from maze_solver.pathfinding import DirectedGridPathfinder, MazeError
from maze_solver.maze_io import load_maze, render_summary, render_report, write_report
from maze_solver.utils.config_loader import load_solver_config
from maze_solver.utils.logger_config import setup_logging, get_solver_logger
from maze_solver.utils.stopwatch import Stopwatch

logger = logging.getLogger(__name__)


class MazeSolverApp:
    """
    Orchestrates one load -> solve -> render run from a SolverConfig.
    """

    def __init__(self, config: SolverConfig):
        self.config = config
        self.pathfinder = DirectedGridPathfinder()
        self.stopwatch = Stopwatch()
        self.solver_logger = get_solver_logger(self.stopwatch, name='solver.app')

    def run(self, input_path: Optional[str] = None, output_path: Optional[str] = None) -> SolveReport:
        """Solve the configured maze and write the report. Raises MazeError on bad input."""
        input_path = input_path or self.config.maze.input_file
        output_path = output_path or self.config.maze.output_file

        grid = load_maze(input_path)

        self.stopwatch.start()
        result = self.pathfinder.solve(grid)
        solve_time_ms = self.stopwatch.elapsed_ms()

        if result.success:
            self.solver_logger.info(f"Best path cost {result.total_cost} points, search count {result.visited_count}")
        else:
            self.solver_logger.info(f"No path found to the goal, search count {result.visited_count}")

        for line in render_summary(grid, result, solve_time_ms).splitlines():
            logger.info(line)

        if output_path:
            write_report(output_path, render_report(grid, result, solve_time_ms))

        return SolveReport(
            input_file=str(input_path),
            width=grid.width,
            height=grid.height,
            reachable=result.success,
            path_cost=result.total_cost,
            path_length=len(result.path),
            search_count=result.visited_count,
            solve_time_ms=solve_time_ms,
        )


def main(argv=None):
    """Main function."""
    parser = argparse.ArgumentParser(description="Directed maze solver (turns cost 1000, steps cost 1)")
    parser.add_argument("--input", help="Maze file to solve (overrides the config).")
    parser.add_argument("--output", help="Where to write the solved maze (overrides the config).")
    parser.add_argument("--config", help="Path to a YAML solver configuration.")
    parser.add_argument("--log-level", help="Console log level, e.g. DEBUG or INFO.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the solve report as JSON on stdout."
    )
    args = parser.parse_args(argv)

    try:
        config = load_solver_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Failed to load configuration: {e}")
        return 1

    log_level = (args.log_level or config.logging.level).upper()
    setup_logging(
        log_level=getattr(logging, log_level, logging.INFO),
        log_dir=config.logging.log_dir,
        file_logging=config.logging.file_logging,
    )

    app = MazeSolverApp(config)
    try:
        report = app.run(input_path=args.input, output_path=args.output)
    except (MazeError, FileNotFoundError) as e:
        logger.error(f"Error: {e}")
        return 1

    if args.json:
        print(report.model_dump_json(indent=2))

    return 0

if __name__ == "__main__":
    sys.exit(main())
