from .errors import MazeError, MalformedInputError, MissingEndpointsError
from .grid import Grid, Tile, TileType, Direction, SearchState
from .directed_astar import DirectedGridPathfinder, PathResult, PathStep, step_cost

__all__ = [
    'MazeError', 'MalformedInputError', 'MissingEndpointsError',
    'Grid', 'Tile', 'TileType', 'Direction', 'SearchState',
    'DirectedGridPathfinder', 'PathResult', 'PathStep', 'step_cost',
]
