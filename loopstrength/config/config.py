"""
Core configuration management for LoopStrength
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..exceptions import ConfigError, MissingConfigKeyError

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("sample_loops_path", "random_loops_path", "output_directory")

CORRECTION_METHODS = ("fdr_bh", "fdr_by", "bonferroni", "holm", "hommel")
LABEL_METRICS = ("pval", "padj")
PLOT_FORMATS = ("pdf", "png", "svg", "eps", "ps")


@dataclass
class Config:
    """Main configuration class for a loop strength analysis"""

    # Input/Output paths
    sample_loops_path: Optional[str] = None
    random_loops_path: Optional[str] = None
    output_directory: Optional[str] = None

    # Filtering and statistics
    min_loop_size: int = 1_000_000
    pseudocount: float = 1.0
    significance_threshold: float = 0.05
    correction_method: str = "fdr_bh"

    # Reporting
    label_by: str = "pval"
    decimal_separator: str = ","
    na_rep: str = "NA"
    results_filename: str = "output_loopstrength.txt"
    plot_basename: str = "volcano_plot"
    plot_format: str = "pdf"
    plot_width: float = 7.0
    plot_height: float = 5.0
    ylim_max: float = 2.5

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Config":
        """Build a Config from a raw mapping, checking required and unknown keys"""
        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a mapping of keys to values, got {type(config_dict).__name__}"
            )

        missing = [
            key
            for key in REQUIRED_KEYS
            if config_dict.get(key) is None or str(config_dict.get(key)).strip() == ""
        ]
        if missing:
            raise MissingConfigKeyError(missing)

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(config_dict) - set(known))
        if unknown:
            raise ConfigError(f"Unknown keys in config file: {', '.join(unknown)}")

        values = {}
        for key, raw_value in config_dict.items():
            values[key] = _coerce(key, raw_value, known[key].default)

        return cls(**values)


def _coerce(key: str, value: Any, default: Any) -> Any:
    """Convert a raw config value to the type of the field default"""
    try:
        if isinstance(default, bool):
            if isinstance(value, str):
                return value.strip().lower() in ("1", "true", "yes", "on")
            return bool(value)
        if isinstance(default, int):
            number = float(value)
            if not number.is_integer():
                raise ValueError(f"expected an integer, got {value!r}")
            return int(number)
        if isinstance(default, float):
            return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for '{key}': {value!r} ({e})") from e

    return str(value)


def parse_key_value_text(text: str) -> Dict[str, str]:
    """
    Parse the plain ``key=value`` configuration format

    One entry per line. Blank lines and lines starting with ``#`` are
    skipped, and only the first ``=`` separates key from value.
    """
    config_dict = {}

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            raise ConfigError(
                f"Malformed config line {line_number}: expected key=value, got {raw_line!r}"
            )

        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            raise ConfigError(f"Malformed config line {line_number}: empty key")

        config_dict[key] = value.strip()

    return config_dict


def load_config(config_file: Union[str, Path]) -> Config:
    """Load configuration from a key=value text, YAML or JSON file"""
    config_path = Path(config_file)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from {config_path}")

    try:
        text = config_path.read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

    suffix = config_path.suffix.lower()
    try:
        if suffix in [".yaml", ".yml"]:
            config_dict = yaml.safe_load(text) or {}
        elif suffix == ".json":
            config_dict = json.loads(text)
        else:
            config_dict = parse_key_value_text(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot parse configuration file {config_path}: {e}") from e

    return Config.from_dict(config_dict)


def save_config(
    config: Config, output_file: Union[str, Path], format: Optional[str] = None
) -> None:
    """
    Save configuration

    Args:
        config: Configuration to write
        output_file: Destination path
        format: "txt", "yaml" or "json"; inferred from the extension if None
    """
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.to_dict()
    if format is None:
        format = output_path.suffix.lower().lstrip(".")

    with open(output_path, "w") as f:
        if format in ["yaml", "yml"]:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
        elif format == "json":
            json.dump(config_dict, f, indent=2)
        else:
            for key, value in config_dict.items():
                f.write(f"{key}={'' if value is None else value}\n")

    logger.info(f"Configuration saved to {output_path}")


def validate_config(config: Config, check_paths: bool = True) -> List[str]:
    """
    Validate configuration and return list of issues

    Args:
        config: Configuration to check
        check_paths: Also check that the input files exist
    """
    issues = []

    for key in REQUIRED_KEYS:
        if not getattr(config, key):
            issues.append(f"Missing required setting: {key}")

    for key in ("sample_loops_path", "random_loops_path"):
        path = getattr(config, key)
        if check_paths and path and not Path(path).is_file():
            issues.append(f"Input file does not exist ({key}): {path}")

    if config.output_directory and Path(config.output_directory).is_file():
        issues.append(
            f"Output directory path points to a file: {config.output_directory}"
        )

    if config.min_loop_size < 0:
        issues.append("min_loop_size must be non-negative")

    if config.pseudocount <= 0:
        issues.append("pseudocount must be positive")

    if not 0 < config.significance_threshold < 1:
        issues.append("significance_threshold must be between 0 and 1")

    if config.correction_method not in CORRECTION_METHODS:
        issues.append(
            f"Unsupported correction_method '{config.correction_method}'. "
            f"Choose from: {', '.join(CORRECTION_METHODS)}"
        )

    if config.label_by not in LABEL_METRICS:
        issues.append(f"label_by must be one of: {', '.join(LABEL_METRICS)}")

    if len(config.decimal_separator) != 1 or config.decimal_separator == "\t":
        issues.append("decimal_separator must be a single non-tab character")

    if config.plot_format not in PLOT_FORMATS:
        issues.append(
            f"Unsupported plot_format '{config.plot_format}'. "
            f"Choose from: {', '.join(PLOT_FORMATS)}"
        )

    if config.plot_width <= 0 or config.plot_height <= 0:
        issues.append("plot_width and plot_height must be positive")

    if config.ylim_max <= 0:
        issues.append("ylim_max must be positive")

    return issues


def get_default_config() -> Config:
    """Get default configuration object"""
    return Config()
