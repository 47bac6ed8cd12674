"""
Logging utilities for the Rule Cracker.
"""

import logging
import os
import sys
from typing import Optional


def _ensure_parent_dir(path: str) -> None:
    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)


class Logger:
    """Custom logger for the rule cracker"""

    def __init__(self, name: str = "rule_cracker", log_file: Optional[str] = None,
                 level: int = logging.INFO, console: bool = True,
                 error_file: Optional[str] = None):
        """Initialize the logger

        Args:
            name: Logger name
            log_file: Optional file to log to
            level: Logging level
            console: Whether to log to console
            error_file: Optional file that receives timestamped errors only
        """
        self.logger = logging.getLogger(name)
        # Handlers filter by their own level; errors must reach the error log
        self.logger.setLevel(min(level, logging.ERROR) if error_file else level)
        self.logger.propagate = False

        # Clear any existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Add console handler if requested
        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # Add file handler if log file is specified
        if log_file:
            _ensure_parent_dir(log_file)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        # The error log is only created once something goes wrong
        if error_file:
            _ensure_parent_dir(error_file)
            error_handler = logging.FileHandler(error_file, delay=True)
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(logging.Formatter('%(asctime)s %(message)s'))
            self.logger.addHandler(error_handler)

    def get_logger(self):
        """Get the logger instance"""
        return self.logger
