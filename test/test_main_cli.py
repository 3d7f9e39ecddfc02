#!/usr/bin/env python3
"""
End-to-end tests for the command-line entry point.
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import json
import logging
import pytest

from config.schemas import SolverConfig
from maze_solver.main import main, MazeSolverApp

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


class TestMainCli:

    def setup_method(self):
        self.config_text = "maze: {}\nlogging:\n  level: WARNING\n  file_logging: false\n"

    def teardown_method(self):
        for name in (None, 'solver'):
            logging.getLogger(name).handlers.clear()

    def write_config(self, tmp_path):
        config_file = tmp_path / "solver_config.yml"
        config_file.write_text(self.config_text, encoding="utf-8")
        return str(config_file)

    def test_solves_and_writes_output(self, tmp_path, capsys):
        output_file = tmp_path / "output.txt"
        code = main([
            "--config", self.write_config(tmp_path),
            "--input", os.path.join(DATA_DIR, "example_small.txt"),
            "--output", str(output_file),
            "--json",
        ])

        assert code == 0
        report = json.loads(capsys.readouterr().out)
        assert report['path_cost'] == 7036
        assert report['reachable'] is True
        assert report['width'] == 15 and report['height'] == 15

        text = output_file.read_text(encoding="utf-8")
        assert "Best path cost 7036 points" in text
        assert text.splitlines()[3] == "###############"

    def test_unreachable_is_not_an_error(self, tmp_path, capsys):
        maze_file = tmp_path / "walled.txt"
        maze_file.write_text("#######\n#S..#E#\n#######\n", encoding="utf-8")

        code = main(["--config", self.write_config(tmp_path), "--input", str(maze_file),
                     "--output", str(tmp_path / "out.txt"), "--json"])

        assert code == 0
        report = json.loads(capsys.readouterr().out)
        assert report['reachable'] is False
        assert report['path_cost'] is None
        assert "No path found to the goal." in (tmp_path / "out.txt").read_text(encoding="utf-8")

    def test_malformed_maze_fails(self, tmp_path):
        maze_file = tmp_path / "bad.txt"
        maze_file.write_text("#S.E#\n#..#\n", encoding="utf-8")

        assert main(["--config", self.write_config(tmp_path), "--input", str(maze_file)]) == 1

    def test_missing_maze_fails(self, tmp_path):
        assert main(["--config", self.write_config(tmp_path), "--input", str(tmp_path / "none.txt")]) == 1

    def test_non_utf8_maze_fails(self, tmp_path):
        maze_file = tmp_path / "binary.txt"
        maze_file.write_bytes(b"\xff\xfeS.E\n")

        assert main(["--config", self.write_config(tmp_path), "--input", str(maze_file)]) == 1

    def test_invalid_yaml_config_fails(self, tmp_path):
        config_file = tmp_path / "broken.yml"
        config_file.write_text("maze: [\n", encoding="utf-8")

        assert main(["--config", str(config_file)]) == 1

    def test_missing_config_fails(self, tmp_path):
        assert main(["--config", str(tmp_path / "none.yml")]) == 1


class TestMazeSolverApp:

    def test_run_without_output_file(self, tmp_path):
        config = SolverConfig.model_validate({
            "maze": {"input_file": os.path.join(DATA_DIR, "example_large.txt"), "output_file": None},
            "logging": {"file_logging": False},
        })
        report = MazeSolverApp(config).run()

        assert report.path_cost == 11048
        assert report.path_length > 0
        assert report.search_count > 0
        assert not (tmp_path / "output.txt").exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
