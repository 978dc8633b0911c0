"""
Structured logging for report views.
Provides consistent console output for rendering and login flows.
"""

import logging
import sys
from typing import Any


class ReportLogger:
    """Custom logger for report rendering."""

    def __init__(self, name: str = "ReportViews", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Remove existing handlers
        self.logger.handlers.clear()

        # Console handler with formatting
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

    def set_level(self, level: str):
        """Change the log level at runtime."""
        self.logger.setLevel(getattr(logging, level.upper()))

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)

    def success(self, message: str):
        """Log success message."""
        self.logger.info(f"[OK] {message}")

    def metric(self, name: str, value: Any):
        """Log a metric."""
        self.logger.info(f"[METRIC] {name}: {value}")


# Global logger instance
logger = ReportLogger()
