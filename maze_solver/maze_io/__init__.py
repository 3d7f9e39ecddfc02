from .maze_loader import parse_maze, load_maze
from .maze_renderer import tile_to_char, render_grid, render_summary, render_report, write_report

__all__ = ['parse_maze', 'load_maze', 'tile_to_char', 'render_grid', 'render_summary', 'render_report', 'write_report']
