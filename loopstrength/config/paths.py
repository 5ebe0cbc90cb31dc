"""
Path configuration and validation for LoopStrength
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..exceptions import InputIOError, OutputIOError
from ..utils.validation import (validate_directory_exists, validate_file_exists,
                                validate_output_permissions)
from .config import Config

logger = logging.getLogger(__name__)


@dataclass
class PathConfig:
    """Input and output file locations for one analysis run"""

    sample_loops_path: Path
    random_loops_path: Path
    output_dir: Path
    results_filename: str = "output_loopstrength.txt"
    plot_filename: str = "volcano_plot.pdf"

    def __post_init__(self):
        """Convert string paths to Path objects"""
        for field_name in ("sample_loops_path", "random_loops_path", "output_dir"):
            value = getattr(self, field_name)
            if isinstance(value, str):
                setattr(self, field_name, Path(value))

    @classmethod
    def from_config(cls, config: Config) -> "PathConfig":
        return cls(
            sample_loops_path=config.sample_loops_path,
            random_loops_path=config.random_loops_path,
            output_dir=config.output_directory,
            results_filename=config.results_filename,
            plot_filename=f"{config.plot_basename}.{config.plot_format}",
        )

    @property
    def results_file(self) -> Path:
        return self.output_dir / self.results_filename

    @property
    def plot_file(self) -> Path:
        return self.output_dir / self.plot_filename

    def check_inputs(self) -> None:
        """Raise InputIOError for the first input file that cannot be read"""
        for label, path in (
            ("sample loops file", self.sample_loops_path),
            ("random loops file", self.random_loops_path),
        ):
            if not path.exists():
                raise InputIOError(path, f"{label} does not exist")
            if not validate_file_exists(path, label):
                raise InputIOError(path, f"{label} is not a readable file")

    def create_output_dir(self) -> Path:
        """Create the output directory if absent; safe to call repeatedly"""
        if not validate_directory_exists(self.output_dir, create_if_missing=True):
            raise OutputIOError(f"Cannot create output directory {self.output_dir}")

        if not validate_output_permissions(self.output_dir):
            raise OutputIOError(f"Output directory is not writable: {self.output_dir}")

        logger.debug(f"Output directory ready: {self.output_dir}")
        return self.output_dir


def validate_paths(path_config: PathConfig) -> List[str]:
    """Check that both input loop files exist; returns a list of issues"""
    issues = []

    for label, path in (
        ("Sample loops file", path_config.sample_loops_path),
        ("Random loops file", path_config.random_loops_path),
    ):
        if not path.is_file():
            issues.append(f"{label} not found: {path}")

    return issues
