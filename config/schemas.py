# config/schemas.py
from typing import Optional
from pydantic import BaseModel, Field

from config.settings import DEFAULT_INPUT_FILE, DEFAULT_OUTPUT_FILE, LOG_LEVEL, LOG_DIR

# --- Schemas for the YAML solver configuration ---

class MazeSection(BaseModel):
    """Where the maze is read from and where the solved maze is written."""
    input_file: str = Field(DEFAULT_INPUT_FILE, description="Path of the text maze to solve.")
    output_file: Optional[str] = Field(DEFAULT_OUTPUT_FILE, description="Path for the rendered solution; null disables writing.")

class LoggingSection(BaseModel):
    level: str = Field(LOG_LEVEL, description="Console log level, e.g. 'INFO' or 'DEBUG'.")
    log_dir: str = Field(LOG_DIR, description="Directory for rotating log files.")
    file_logging: bool = Field(True, description="Whether log files are written at all.")

class SolverConfig(BaseModel):
    """
    Schema for config/solver_config.yml.
    """
    maze: MazeSection = Field(default_factory=MazeSection, description="Maze input/output settings.")
    logging: LoggingSection = Field(default_factory=LoggingSection, description="Logging settings.")

# --- Schema for the solve report ---

class SolveReport(BaseModel):
    """
    Summary of one solve run.
    Printed as JSON by `maze-solver --json`.
    """
    input_file: Optional[str] = Field(None, description="Maze file that was solved.")
    width: int = Field(..., gt=0, description="Maze width in tiles.")
    height: int = Field(..., gt=0, description="Maze height in tiles.")
    reachable: bool = Field(..., description="Whether the end tile can be reached.")
    path_cost: Optional[int] = Field(None, description="Best path cost, or null when unreachable.")
    path_length: int = Field(0, ge=0, description="Number of tiles on the reconstructed path, endpoints included.")
    search_count: int = Field(..., ge=0, description="Number of states pushed onto the frontier.")
    solve_time_ms: int = Field(..., ge=0, description="Wall-clock solve time in milliseconds.")
