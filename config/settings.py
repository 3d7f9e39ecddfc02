# config/settings.py

# Movement costs
# A step forward costs MOVE_COST; changing facing adds TURN_COST to that step.
MOVE_COST = 1
TURN_COST = 1000

# Initial facing of the start tile
START_FACING = "east"

# Logging
LOG_LEVEL = "INFO"
LOG_DIR = "logs"

# File names for the default maze input/output and the YAML configuration
DEFAULT_INPUT_FILE = "input.txt"
DEFAULT_OUTPUT_FILE = "output.txt"
SOLVER_CONFIG_FILE = "solver_config.yml"
