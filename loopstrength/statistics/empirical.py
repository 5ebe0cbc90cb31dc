"""
Empirical p-values against a null fold-change distribution, and
multiple-testing correction
"""

import warnings

import numpy as np
from statsmodels.stats.multitest import multipletests

from ..exceptions import DegenerateComputationWarning
from ..loops.models import LoopOrigin, LoopSet
from ..utils import get_logger

logger = get_logger(__name__)


def null_distribution(random_set: LoopSet) -> np.ndarray:
    """The random loops' logFC values, as-is"""
    if random_set.origin is not LoopOrigin.RANDOM:
        raise ValueError(
            f"Null distribution must come from random loops, got {random_set.origin.value}"
        )
    if not random_set.has_columns("logFC"):
        raise ValueError("Random loops have no logFC column; compute fold-changes first")

    return random_set.loops["logFC"].to_numpy(dtype=float)


def empirical_pvalues(observed, null) -> np.ndarray:
    """
    Two-sided empirical p-values: ``mean(|null| >= |x|)`` for each ``x``

    Ties count as at least as extreme. Undefined p-values are NaN:
    every p-value is undefined when the null vector is empty or contains
    NaN, and a single p-value is undefined when its observed value is NaN.

    Args:
        observed: Observed fold-changes
        null: Null fold-changes

    Returns:
        Array of p-values, same length and order as ``observed``
    """
    observed = np.asarray(observed, dtype=float)
    null = np.asarray(null, dtype=float)

    pvalues = np.full(observed.shape, np.nan)
    if observed.size == 0:
        return pvalues

    if null.size == 0:
        warnings.warn(
            "Null distribution is empty; p-values are undefined",
            DegenerateComputationWarning,
            stacklevel=2,
        )
        return pvalues

    if np.isnan(null).any():
        warnings.warn(
            f"Null distribution has {int(np.isnan(null).sum())} undefined values; "
            f"p-values are undefined",
            DegenerateComputationWarning,
            stacklevel=2,
        )
        return pvalues

    null_abs = np.sort(np.abs(null))
    observed_abs = np.abs(observed)
    defined = ~np.isnan(observed_abs)

    # index of the first null magnitude >= |x|; everything from there on counts
    first_extreme = np.searchsorted(null_abs, observed_abs[defined], side="left")
    pvalues[defined] = (null_abs.size - first_extreme) / null_abs.size

    return pvalues


def adjust_pvalues(pvalues, method: str = "fdr_bh") -> np.ndarray:
    """
    Multiple-testing correction (Benjamini-Hochberg by default)

    Undefined (NaN) p-values are left out of the family and stay
    undefined. Output keeps the input length and order.
    """
    pvalues = np.asarray(pvalues, dtype=float)
    adjusted = np.full(pvalues.shape, np.nan)

    defined = ~np.isnan(pvalues)
    if defined.any():
        adjusted[defined] = multipletests(pvalues[defined], method=method)[1]

    return adjusted
