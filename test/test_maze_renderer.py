#!/usr/bin/env python3
"""
Tests for rendering a solved maze back to text.
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from maze_solver.maze_io import parse_maze, render_grid, render_summary, render_report, write_report, tile_to_char
from maze_solver.pathfinding import DirectedGridPathfinder, Direction

ONE_TURN = "#####\n#S..#\n###.#\n###E#\n#####\n"


class TestMazeRenderer:

    def setup_method(self):
        self.grid = parse_maze(ONE_TURN)
        self.result = DirectedGridPathfinder().solve(self.grid)

    def test_unsolved_grid_renders_original(self):
        grid = parse_maze(ONE_TURN)
        assert render_grid(grid) == ONE_TURN

    def test_path_drawn_with_arrows(self):
        assert render_grid(self.grid) == "#####\n#S>>#\n###v#\n###E#\n#####\n"

    def test_direction_without_path_flag_is_not_drawn(self):
        tile = self.grid.get(2, 1)
        tile.state.is_on_solution_path = False
        assert tile.state.approach_direction is Direction.EAST
        assert tile_to_char(tile) == "."

    def test_summary(self):
        summary = render_summary(self.grid, self.result, 12)
        assert summary == (
            "Dimensions: 5 x 5\n"
            "Solved in: 12 ms. Search count: 5\n"
            "Best path cost 1004 points\n"
        )

    def test_summary_unreachable(self):
        grid = parse_maze("#######\n#S..#E#\n#######\n")
        result = DirectedGridPathfinder().solve(grid)
        summary = render_summary(grid, result, 0)
        assert summary.splitlines()[-1] == "No path found to the goal."

    def test_report_and_write(self, tmp_path):
        report = render_report(self.grid, self.result, 3)
        output_file = tmp_path / "out" / "output.txt"
        write_report(output_file, report)

        text = output_file.read_text(encoding="utf-8")
        assert text.startswith("Dimensions: 5 x 5\n")
        assert text.endswith("#S>>#\n###v#\n###E#\n#####\n")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
