"""
Loop loading module for LoopStrength

This module reads sample and random loop files, annotates loop sizes
and removes loops shorter than the minimum genomic span.
"""

from .filtering import MIN_LOOP_SIZE, add_loop_size, filter_by_size
from .loader import load_loop_sets, read_loop_file, read_loop_sets
from .models import (DERIVED_COLUMNS, LOOP_COLUMNS, RESULT_COLUMNS, LoopOrigin,
                     LoopSet, LoopSetPair)
from .validation import LoopSetSummary, summarize_loop_set

__all__ = [
    "LOOP_COLUMNS",
    "DERIVED_COLUMNS",
    "RESULT_COLUMNS",
    "MIN_LOOP_SIZE",
    "LoopOrigin",
    "LoopSet",
    "LoopSetPair",
    "read_loop_file",
    "read_loop_sets",
    "load_loop_sets",
    "add_loop_size",
    "filter_by_size",
    "LoopSetSummary",
    "summarize_loop_set",
]
