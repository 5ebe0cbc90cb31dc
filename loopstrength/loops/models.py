"""
Loop set containers

A LoopSet never changes after construction: every pipeline stage builds
a new frame and wraps it in a new LoopSet.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List

import pandas as pd

LOOP_COLUMNS = [
    "chrA",
    "startA",
    "endA",
    "chrB",
    "startB",
    "endB",
    "loop_id",
    "strength_control",
    "strength_mutant",
]

STRING_COLUMNS = ["chrA", "chrB", "loop_id"]
NUMERIC_COLUMNS = [col for col in LOOP_COLUMNS if col not in STRING_COLUMNS]
STRENGTH_COLUMNS = ["strength_control", "strength_mutant"]

# Derived columns, in the order the pipeline adds them
DERIVED_COLUMNS = ["loop_size", "logFC", "pval", "padj"]
RESULT_COLUMNS = LOOP_COLUMNS + DERIVED_COLUMNS


class LoopOrigin(str, Enum):
    """Where a loop set comes from"""

    SAMPLE = "sample"
    RANDOM = "random"


@dataclass(frozen=True, eq=False)
class LoopSet:
    """An ordered table of loops sharing one origin"""

    origin: LoopOrigin
    loops: pd.DataFrame = field(repr=False)

    def __len__(self) -> int:
        return len(self.loops)

    @property
    def columns(self) -> List[str]:
        return list(self.loops.columns)

    @property
    def is_empty(self) -> bool:
        return len(self.loops) == 0

    def has_columns(self, *columns: str) -> bool:
        return all(col in self.loops.columns for col in columns)

    def with_loops(self, loops: pd.DataFrame) -> "LoopSet":
        """Return a new LoopSet of the same origin wrapping ``loops``"""
        return LoopSet(origin=self.origin, loops=loops)

    def __repr__(self) -> str:
        return f"LoopSet(origin={self.origin.value!r}, n_loops={len(self)})"


@dataclass(frozen=True, eq=False)
class LoopSetPair:
    """The sample and random loop sets of one run"""

    sample: LoopSet
    random: LoopSet

    def __post_init__(self):
        if self.sample.origin is not LoopOrigin.SAMPLE:
            raise ValueError(f"sample slot holds a {self.sample.origin.value} loop set")
        if self.random.origin is not LoopOrigin.RANDOM:
            raise ValueError(f"random slot holds a {self.random.origin.value} loop set")

    def map(self, func: Callable[[LoopSet], LoopSet]) -> "LoopSetPair":
        """Apply the same stage to both loop sets"""
        return LoopSetPair(sample=func(self.sample), random=func(self.random))
