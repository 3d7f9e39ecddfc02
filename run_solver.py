#!/usr/bin/env python3
"""
Launcher script for the directed maze solver.
This script properly sets up the Python path and runs the solver CLI.
"""

import sys
import os

# Add the project root to Python path so that 'maze_solver' and 'config' can be imported
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

if __name__ == "__main__":
    from maze_solver.main import main
    # Pass all command-line arguments to the main function
    sys.exit(main(sys.argv[1:]))
