"""
Loop set summary metrics
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .models import LoopSet


@dataclass
class LoopSetSummary:
    """Descriptive metrics for one loop set"""

    origin: str
    num_loops: int

    intra_chromosomal: int = 0
    inter_chromosomal: int = 0
    inverted_anchors: int = 0

    min_size: Optional[float] = None
    median_size: Optional[float] = None
    max_size: Optional[float] = None

    def __post_init__(self):
        """Calculate derived metrics"""
        if self.num_loops > 0:
            self.intra_chromosomal_fraction = self.intra_chromosomal / self.num_loops
        else:
            self.intra_chromosomal_fraction = 0.0

    def to_dict(self) -> Dict[str, Any]:
        summary = asdict(self)
        summary["intra_chromosomal_fraction"] = self.intra_chromosomal_fraction
        return summary


def summarize_loop_set(loop_set: LoopSet) -> LoopSetSummary:
    """Compute chromosome and size statistics for a loop set"""
    loops = loop_set.loops
    num_loops = len(loops)

    if num_loops == 0:
        return LoopSetSummary(origin=loop_set.origin.value, num_loops=0)

    intra = int((loops["chrA"] == loops["chrB"]).sum())
    summary = LoopSetSummary(
        origin=loop_set.origin.value,
        num_loops=num_loops,
        intra_chromosomal=intra,
        inter_chromosomal=num_loops - intra,
    )

    if "loop_size" in loops.columns:
        sizes = loops["loop_size"]
        summary.inverted_anchors = int((sizes < 0).sum())
        summary.min_size = float(sizes.min())
        summary.median_size = float(sizes.median())
        summary.max_size = float(sizes.max())

    return summary
