"""
Utility functions for LoopStrength
"""

from .logging import get_logger, log_execution_time, setup_logging
from .validation import (validate_directory_exists, validate_environment,
                         validate_file_exists, validate_output_permissions,
                         validate_python_packages)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_execution_time",
    "validate_file_exists",
    "validate_directory_exists",
    "validate_output_permissions",
    "validate_python_packages",
    "validate_environment",
]
