"""
Configuration handling for the Rule Cracker.
"""

import os
import json
from typing import Any, Optional, Union
from rule_cracker.utils.exceptions import ConfigError


class Config:
    """Configuration manager for the rule cracker"""

    DEFAULT_CONFIG = {
        "input": "input.txt",  # identifier:digest lines
        "output": "output.txt",
        "rules": "rules.conf",
        "error_log": "error.log",
        "algorithm": "sha256",
        "verbosity": "info",
        "log_file": None,
        "progress": True,
        "unsolved_preview": 6,
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize with optional path to config file"""
        self.config = self.DEFAULT_CONFIG.copy()
        self.config_path = config_path or os.path.expanduser("~/.rule_cracker_config.json")

        # Load config if it exists
        if os.path.exists(self.config_path):
            self.load()

    def load(self) -> None:
        """Load configuration from file"""
        try:
            with open(self.config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Error loading config file: {e}")
        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file must contain a JSON object: {self.config_path}")
        self.config.update(user_config)

    def save(self) -> None:
        """Save current configuration to file"""
        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_path, 'w') as f:
                json.dump(self.config, f, indent=2)
        except (OSError, TypeError) as e:
            raise ConfigError(f"Error saving config file: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value"""
        self.config[key] = value

    def __getitem__(self, key: str) -> Any:
        return self.config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.config[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.config


def verbosity_to_level(verbosity: Union[str, int]) -> int:
    """Convert verbosity string to logging level

    Args:
        verbosity: Verbosity string or logging level integer

    Returns:
        Logging level as integer
    """
    if isinstance(verbosity, int):
        return verbosity

    levels = {
        "debug": 10,
        "info": 20,
        "warning": 30,
        "error": 40,
        "critical": 50
    }

    return levels.get(verbosity.lower(), 20)  # Default to INFO
