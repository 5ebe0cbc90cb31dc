"""
Configuration management for LoopStrength

This module provides configuration loading, validation, and management
for the loop strength analysis pipeline.
"""

from .config import (REQUIRED_KEYS, Config, get_default_config, load_config,
                     parse_key_value_text, save_config, validate_config)
from .paths import PathConfig, validate_paths

__all__ = [
    "Config",
    "REQUIRED_KEYS",
    "load_config",
    "save_config",
    "validate_config",
    "get_default_config",
    "parse_key_value_text",
    "PathConfig",
    "validate_paths",
]
