"""
Writes the results table and the volcano plot for a tested loop set
"""

from pathlib import Path
from typing import Dict

from ..config import Config, PathConfig
from ..exceptions import OutputIOError
from ..statistics.tester import SignificanceResult
from ..utils import get_logger
from .table import write_results_table
from .volcano import plot_volcano

logger = get_logger(__name__)


class Reporter:
    """Produces the two output files of a run"""

    def __init__(self, config: Config):
        self.config = config
        self.paths = PathConfig.from_config(config)

    def write(self, result: SignificanceResult) -> Dict[str, Path]:
        """
        Write the results table and the volcano plot

        Both outputs are attempted even if the first fails; any failure is
        raised afterwards as a single OutputIOError naming every output
        that could not be written.

        Returns:
            Mapping of output name ("table", "plot") to written path
        """
        self.paths.create_output_dir()

        output_files: Dict[str, Path] = {}
        failures: Dict[str, OSError] = {}

        try:
            output_files["table"] = write_results_table(
                result.table,
                self.paths.results_file,
                decimal=self.config.decimal_separator,
                na_rep=self.config.na_rep,
            )
        except OSError as e:
            logger.error(f"Could not write results table {self.paths.results_file}: {e}")
            failures["table"] = e

        try:
            output_files["plot"] = plot_volcano(
                result.table,
                self.paths.plot_file,
                alpha=self.config.significance_threshold,
                label_by=self.config.label_by,
                ylim=(0.0, self.config.ylim_max),
                figsize=(self.config.plot_width, self.config.plot_height),
                plot_format=self.config.plot_format,
            )
        except OSError as e:
            logger.error(f"Could not write volcano plot {self.paths.plot_file}: {e}")
            failures["plot"] = e

        if failures:
            details = "; ".join(f"{name}: {error}" for name, error in failures.items())
            raise OutputIOError(f"Failed to write outputs ({details})", failures)

        return output_files
