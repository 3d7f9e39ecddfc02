"""
Configuration loader for the directed maze solver.
Loads the YAML configuration file and validates it into a SolverConfig.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union

from config.schemas import SolverConfig
from config.settings import SOLVER_CONFIG_FILE

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

class ConfigLoader:
    """simplified config loader - load yaml file to SolverConfig"""

    def __init__(self, config_dir: Union[str, Path] = DEFAULT_CONFIG_DIR):
        self.config_dir = Path(config_dir)

    def load_raw(self, config_file: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """load yaml file to dict and check required sections"""
        config_file = Path(config_file) if config_file else self.config_dir / SOLVER_CONFIG_FILE

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_file}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_file}")

        # simple validation for required fields
        required_sections = ['maze', 'logging']
        for section in required_sections:
            if section not in config:
                raise ValueError(f"Missing required section: {section}")

        return config

    def load_solver_config(self, config_file: Optional[Union[str, Path]] = None) -> SolverConfig:
        """load and validate the solver config"""
        return SolverConfig.model_validate(self.load_raw(config_file))

# global config loader instance
_config_loader: Optional[ConfigLoader] = None

def get_config_loader() -> ConfigLoader:
    """get global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader

def load_solver_config(config_file: Optional[Union[str, Path]] = None) -> SolverConfig:
    """convenient function - load solver config"""
    return get_config_loader().load_solver_config(config_file)
