"""
Statistics module for LoopStrength

Fold-change estimation, empirical p-values against the random-loop null
distribution, and multiple-testing correction.
"""

from .empirical import adjust_pvalues, empirical_pvalues, null_distribution
from .fold_change import (DEFAULT_PSEUDOCOUNT, add_log_fold_change,
                          compute_log_fold_change)
from .tester import (SIGNIFICANCE_THRESHOLD, SignificanceResult,
                     SignificanceTester, classify_loops)

__all__ = [
    "DEFAULT_PSEUDOCOUNT",
    "SIGNIFICANCE_THRESHOLD",
    "compute_log_fold_change",
    "add_log_fold_change",
    "null_distribution",
    "empirical_pvalues",
    "adjust_pvalues",
    "SignificanceTester",
    "SignificanceResult",
    "classify_loops",
]
