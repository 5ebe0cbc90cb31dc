"""
Loop size annotation and filtering
"""

from ..utils import get_logger
from .models import LoopSet

logger = get_logger(__name__)

MIN_LOOP_SIZE = 1_000_000


def add_loop_size(loop_set: LoopSet) -> LoopSet:
    """Add ``loop_size = startB - startA``; anchor order is not checked"""
    loops = loop_set.loops
    return loop_set.with_loops(loops.assign(loop_size=loops["startB"] - loops["startA"]))


def filter_by_size(loop_set: LoopSet, min_size: int = MIN_LOOP_SIZE) -> LoopSet:
    """
    Keep loops with ``loop_size >= min_size``

    Loops whose second anchor starts before the first get a negative
    size. They are reported and then dropped by the same threshold.
    """
    if not loop_set.has_columns("loop_size"):
        loop_set = add_loop_size(loop_set)

    loops = loop_set.loops
    n_inverted = int((loops["loop_size"] < 0).sum())
    if n_inverted:
        logger.warning(
            f"{n_inverted} {loop_set.origin.value} loops have startB < startA "
            f"(negative loop_size); anchors are not reordered"
        )

    keep = loops["loop_size"] >= min_size
    filtered = loops.loc[keep].reset_index(drop=True)

    logger.info(
        f"Kept {len(filtered)}/{len(loops)} {loop_set.origin.value} loops "
        f"with loop_size >= {min_size:,}"
    )
    if filtered.empty:
        logger.warning(f"No {loop_set.origin.value} loops left after size filtering")

    return loop_set.with_loops(filtered)
