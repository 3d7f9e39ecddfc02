# maze_solver/pathfinding/errors.py


class MazeError(Exception):
    """Base class for all maze loading and solving failures."""


class MalformedInputError(MazeError):
    """Raised when maze text is empty, ragged, or contains unknown characters."""


class MissingEndpointsError(MazeError):
    """Raised when a maze has no start (S) or no end (E) tile."""
