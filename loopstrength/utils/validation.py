"""
Validation utilities for LoopStrength
"""

import importlib
import logging
import os
from pathlib import Path
from typing import Dict, List, Union

logger = logging.getLogger(__name__)

CORE_PACKAGES = ["numpy", "pandas", "matplotlib", "seaborn", "statsmodels", "yaml"]


def validate_file_exists(file_path: Union[str, Path], file_type: str = "file") -> bool:
    """
    Validate that a file exists and can be opened for reading

    Args:
        file_path: Path to file
        file_type: Type description for error messages

    Returns:
        True if file exists and is readable, False otherwise
    """
    path = Path(file_path)

    if not path.exists():
        logger.error(f"{file_type} not found: {path}")
        return False

    if not path.is_file():
        logger.error(f"{file_type} is not a file: {path}")
        return False

    if not os.access(path, os.R_OK):
        logger.error(f"{file_type} is not readable: {path}")
        return False

    return True


def validate_directory_exists(
    dir_path: Union[str, Path], create_if_missing: bool = False
) -> bool:
    """
    Validate that a directory exists

    Args:
        dir_path: Path to directory
        create_if_missing: Whether to create directory if missing

    Returns:
        True if directory exists or was created, False otherwise
    """
    path = Path(dir_path)

    if not path.exists():
        if create_if_missing:
            try:
                path.mkdir(parents=True, exist_ok=True)
                logger.info(f"Created directory: {path}")
                return True
            except OSError as e:
                logger.error(f"Could not create directory {path}: {e}")
                return False
        else:
            logger.error(f"Directory not found: {path}")
            return False

    if not path.is_dir():
        logger.error(f"Path is not a directory: {path}")
        return False

    return True


def validate_output_permissions(output_dir: Union[str, Path]) -> bool:
    """
    Check if an existing output directory is writable

    Args:
        output_dir: Output directory path

    Returns:
        True if writable, False otherwise
    """
    path = Path(output_dir)
    if not path.is_dir():
        return False
    return os.access(path, os.W_OK | os.X_OK)


def validate_python_packages(packages: List[str]) -> Dict[str, bool]:
    """
    Check if Python packages are importable

    Args:
        packages: List of import names

    Returns:
        Dictionary mapping package names to availability status
    """
    results = {}

    for package in packages:
        try:
            importlib.import_module(package)
            results[package] = True
            logger.debug(f"Package {package}: available")
        except ImportError:
            results[package] = False
            logger.debug(f"Package {package}: not available")

    return results


def validate_environment() -> List[str]:
    """Return a list of environment problems (missing core packages)"""
    issues = []

    package_status = validate_python_packages(CORE_PACKAGES)
    missing = [pkg for pkg, available in package_status.items() if not available]
    if missing:
        issues.append(f"Missing Python packages: {', '.join(missing)}")

    for issue in issues:
        logger.warning(f"  - {issue}")

    return issues
