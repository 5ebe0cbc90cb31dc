"""
Significance testing of sample loops against the random-loop null
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from ..loops.models import LoopOrigin, LoopSet
from ..utils import get_logger
from .empirical import adjust_pvalues, empirical_pvalues, null_distribution

logger = get_logger(__name__)

SIGNIFICANCE_THRESHOLD = 0.05

UP = "Up"
DOWN = "Down"
NOT_SIGNIFICANT = "Not Significant"


@dataclass
class SignificanceResult:
    """Result of testing the sample loops"""

    loops: LoopSet
    null_size: int
    alpha: float = SIGNIFICANCE_THRESHOLD
    correction_method: str = "fdr_bh"

    # Statistics
    n_tested: int = 0
    n_defined: int = 0
    n_nominal: int = 0
    n_significant: int = 0
    n_up: int = 0
    n_down: int = 0
    min_padj: Optional[float] = None

    # Set when p-values could not be computed normally
    degenerate: Optional[str] = None

    @property
    def table(self) -> pd.DataFrame:
        return self.loops.loops

    def to_dict(self) -> Dict[str, Any]:
        return {
            "null_size": self.null_size,
            "alpha": self.alpha,
            "correction_method": self.correction_method,
            "n_tested": self.n_tested,
            "n_defined": self.n_defined,
            "n_nominal": self.n_nominal,
            "n_significant": self.n_significant,
            "n_up": self.n_up,
            "n_down": self.n_down,
            "min_padj": self.min_padj,
            "degenerate": self.degenerate,
        }


def classify_loops(
    results_df: pd.DataFrame, alpha: float = SIGNIFICANCE_THRESHOLD
) -> pd.Series:
    """Label each loop Up / Down / Not Significant from padj and logFC"""
    significant = results_df["padj"] < alpha

    labels = pd.Series(NOT_SIGNIFICANT, index=results_df.index, dtype=object)
    labels[significant & (results_df["logFC"] > 0)] = UP
    labels[significant & (results_df["logFC"] < 0)] = DOWN

    return labels


class SignificanceTester:
    """Empirical two-sided test of sample fold-changes with FDR correction"""

    def __init__(
        self,
        alpha: float = SIGNIFICANCE_THRESHOLD,
        correction_method: str = "fdr_bh",
    ):
        self.alpha = alpha
        self.correction_method = correction_method

    def test(self, sample: LoopSet, random: LoopSet) -> SignificanceResult:
        """
        Add ``pval`` and ``padj`` to the sample loops

        Never raises on degenerate input: empty sets or an empty null give
        undefined p-values and a ``degenerate`` reason on the result.
        """
        if sample.origin is not LoopOrigin.SAMPLE:
            raise ValueError(f"Expected sample loops, got {sample.origin.value}")
        if not sample.has_columns("logFC"):
            raise ValueError("Sample loops have no logFC column; compute fold-changes first")

        null = null_distribution(random)
        observed = sample.loops["logFC"].to_numpy(dtype=float)

        logger.info(
            f"Testing {len(observed)} sample loops against a null of {len(null)} random loops"
        )

        degenerate = None
        if len(observed) == 0:
            degenerate = "no sample loops left after filtering"
        elif len(null) == 0:
            degenerate = "null distribution is empty (no random loops left after filtering)"
        elif np.isnan(null).any():
            degenerate = "null distribution contains undefined fold-changes"

        pvalues = empirical_pvalues(observed, null)
        padj = adjust_pvalues(pvalues, method=self.correction_method)

        if degenerate:
            logger.warning(f"Degenerate test: {degenerate}; p-values are undefined")

        results_df = sample.loops.assign(pval=pvalues, padj=padj)
        result = SignificanceResult(
            loops=sample.with_loops(results_df),
            null_size=len(null),
            alpha=self.alpha,
            correction_method=self.correction_method,
            degenerate=degenerate,
        )
        self._calculate_statistics(result)

        logger.info(
            f"{result.n_significant} of {result.n_tested} loops significant "
            f"(padj < {self.alpha}); {result.n_nominal} with pval < {self.alpha}"
        )

        return result

    def _calculate_statistics(self, result: SignificanceResult) -> None:
        """Fill in summary counts"""
        results_df = result.table
        labels = classify_loops(results_df, self.alpha)

        result.n_tested = len(results_df)
        result.n_defined = int(results_df["pval"].notna().sum())
        result.n_nominal = int((results_df["pval"] < self.alpha).sum())
        result.n_up = int((labels == UP).sum())
        result.n_down = int((labels == DOWN).sum())
        result.n_significant = int((results_df["padj"] < self.alpha).sum())

        if result.n_defined > 0:
            result.min_padj = float(results_df["padj"].min())
