"""
Exception classes for LoopStrength

Fatal errors derive from LoopStrengthError and also from the matching
builtin (OSError, ValueError, TypeError) so callers can catch either.
Degenerate statistical input is not an error; it is reported through
DegenerateComputationWarning.
"""

from typing import Iterable, List, Optional


class LoopStrengthError(Exception):
    """Base exception for all LoopStrength errors."""

    pass


# ============================================================================
# Configuration errors
# ============================================================================


class ConfigError(LoopStrengthError):
    """Raised when the configuration file is missing or malformed."""

    pass


class MissingConfigKeyError(ConfigError):
    """Raised when required configuration keys are absent."""

    def __init__(self, missing_keys: Iterable[str]):
        self.missing_keys: List[str] = list(missing_keys)
        super().__init__(
            f"Missing keys in config file: {', '.join(self.missing_keys)}"
        )


# ============================================================================
# Input errors
# ============================================================================


class InputIOError(LoopStrengthError, OSError):
    """Raised when an input loop file does not exist or cannot be read."""

    def __init__(self, path, reason: str = "file not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read input loops file {path}: {reason}")

    def __str__(self) -> str:
        return f"Cannot read input loops file {self.path}: {self.reason}"


class LoopParseError(LoopStrengthError, ValueError):
    """Raised when a loops file cannot be parsed into the expected columns."""

    def __init__(self, path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Error reading loops file {path}: {detail}")


class NonNumericFieldError(LoopParseError, TypeError):
    """Raised when a coordinate or strength column holds non-numeric values."""

    def __init__(self, path, column: str, example: Optional[str] = None):
        self.column = column
        example_str = f" (e.g. {example!r})" if example is not None else ""
        super().__init__(path, f"column '{column}' is not numeric{example_str}")


# ============================================================================
# Output errors
# ============================================================================


class OutputIOError(LoopStrengthError, OSError):
    """Raised when results cannot be written to the output directory."""

    def __init__(self, message: str, failures: Optional[dict] = None):
        self.message = message
        self.failures = dict(failures or {})
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# ============================================================================
# Warnings
# ============================================================================


class DegenerateComputationWarning(UserWarning):
    """Emitted when p-values cannot be defined (e.g. empty null distribution)."""

    pass
