"""
Log2 fold-change between mutant and control loop strengths
"""

import numpy as np

from ..loops.models import LoopSet
from ..utils import get_logger

logger = get_logger(__name__)

DEFAULT_PSEUDOCOUNT = 1.0


def compute_log_fold_change(control, mutant, pseudocount: float = DEFAULT_PSEUDOCOUNT):
    """
    Pseudocount-stabilized log2 ratio ``log2((mutant + pc) / (control + pc))``

    Negative strengths are not range-checked; if they make the ratio
    negative the result is NaN.
    """
    control = np.asarray(control, dtype=float)
    mutant = np.asarray(mutant, dtype=float)

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log2((mutant + pseudocount) / (control + pseudocount))


def add_log_fold_change(
    loop_set: LoopSet, pseudocount: float = DEFAULT_PSEUDOCOUNT
) -> LoopSet:
    """Return a new LoopSet with a ``logFC`` column"""
    loops = loop_set.loops
    log_fc = compute_log_fold_change(
        loops["strength_control"].to_numpy(),
        loops["strength_mutant"].to_numpy(),
        pseudocount=pseudocount,
    )

    n_undefined = int((~np.isfinite(log_fc)).sum())
    if n_undefined:
        logger.warning(
            f"{n_undefined} {loop_set.origin.value} loops have an undefined logFC "
            f"(negative strengths?)"
        )

    logger.debug(f"Computed logFC for {len(loops)} {loop_set.origin.value} loops")

    return loop_set.with_loops(loops.assign(logFC=log_fc))
