"""
LoopStrength: differential chromatin loop strength against a random-loop null

LoopStrength compares the strength of Hi-C chromatin loops between two
conditions. Sample loops are scored with a log2 fold-change and tested
against the fold-changes of randomized loops with a two-sided empirical
p-value, corrected for multiple testing (Benjamini-Hochberg).

Main Components:
- Loop loading and loop-size filtering
- Fold-change estimation
- Empirical significance testing
- Results table and volcano plot

Example:
    >>> from loopstrength import LoopStrengthAnalysis
    >>> analysis = LoopStrengthAnalysis(config="config_loopstrength.txt")
    >>> result = analysis.run()
"""

import logging
import sys
from importlib import metadata
from typing import Any, Dict

try:
    __version__ = metadata.version("loopstrength")
except metadata.PackageNotFoundError:
    __version__ = "0.1.0-dev"

from . import loops, reporting, statistics, utils
from .config import Config, load_config
from .core import LoopStrengthAnalysis, LoopStrengthResult
from .exceptions import (ConfigError, DegenerateComputationWarning, InputIOError,
                         LoopParseError, LoopStrengthError, MissingConfigKeyError,
                         NonNumericFieldError, OutputIOError)
from .utils import setup_logging, validate_environment
from .utils.validation import CORE_PACKAGES, validate_python_packages

__all__ = [
    "__version__",
    "LoopStrengthAnalysis",
    "LoopStrengthResult",
    "Config",
    "load_config",
    "setup_logging",
    "validate_environment",
    "LoopStrengthError",
    "ConfigError",
    "MissingConfigKeyError",
    "InputIOError",
    "LoopParseError",
    "NonNumericFieldError",
    "OutputIOError",
    "DegenerateComputationWarning",
    "loops",
    "statistics",
    "reporting",
    "utils",
]

logger = logging.getLogger(__name__)


def get_info() -> Dict[str, Any]:
    """Get package information."""
    return {
        "name": "LoopStrength",
        "version": __version__,
        "description": "Differential chromatin loop strength against a random-loop null",
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        "modules": ["loops", "statistics", "reporting", "config", "utils"],
    }


def check_dependencies() -> Dict[str, bool]:
    """Check if key dependencies are available."""
    return validate_python_packages(CORE_PACKAGES)
