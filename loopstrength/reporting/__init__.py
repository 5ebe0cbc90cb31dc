"""
Reporting module for LoopStrength

Writes the results table and the volcano plot.
"""

from .reporter import Reporter
from .table import write_results_table
from .volcano import plot_volcano, volcano_points

__all__ = [
    "Reporter",
    "write_results_table",
    "plot_volcano",
    "volcano_points",
]
