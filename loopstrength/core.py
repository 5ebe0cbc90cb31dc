"""
Core LoopStrength analysis orchestrator
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from .config import Config, PathConfig, load_config, validate_config
from .exceptions import ConfigError
from .loops import (LoopSetPair, LoopSetSummary, filter_by_size, read_loop_sets,
                    summarize_loop_set)
from .reporting import Reporter
from .statistics import SignificanceResult, SignificanceTester, add_log_fold_change
from .utils import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class LoopStrengthResult:
    """Everything produced by one pipeline run"""

    significance: SignificanceResult
    sample_summary: LoopSetSummary
    random_summary: LoopSetSummary
    output_directory: Path
    output_files: Dict[str, Path] = field(default_factory=dict)
    execution_times: Dict[str, float] = field(default_factory=dict)

    def summary(self) -> Dict[str, Any]:
        return {
            "output_directory": str(self.output_directory),
            "sample": self.sample_summary.to_dict(),
            "random": self.random_summary.to_dict(),
            "significance": self.significance.to_dict(),
            "output_files": {k: str(v) for k, v in self.output_files.items()},
        }


class LoopStrengthAnalysis:
    """
    Loop strength pipeline: load/filter, fold-change, empirical test, report

    Stages run strictly in sequence and each returns new loop sets; no
    stage modifies the tables of an earlier one.
    """

    def __init__(
        self,
        config: Union[str, Path, Config, Dict[str, Any]],
        log_level: Optional[str] = None,
        log_file: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the analysis

        Args:
            config: Configuration file path, Config object, or config dict
            log_level: If given, configure logging at this level
            log_file: Optional log file path (used with log_level)
        """
        if log_level is not None:
            setup_logging(level=log_level, log_file=log_file)

        if isinstance(config, (str, Path)):
            self.config = load_config(config)
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        elif isinstance(config, Config):
            self.config = config
        else:
            raise ConfigError(
                "Invalid config type. Expected str, Path, dict, or Config object"
            )

        issues = validate_config(self.config, check_paths=False)
        if issues:
            raise ConfigError("Invalid configuration: " + "; ".join(issues))

        self.paths = PathConfig.from_config(self.config)
        self.tester = SignificanceTester(
            alpha=self.config.significance_threshold,
            correction_method=self.config.correction_method,
        )
        self.reporter = Reporter(self.config)

        self.execution_times: Dict[str, float] = {}

    def run(self) -> LoopStrengthResult:
        """Run all four stages and write the outputs"""
        logger.info("=" * 60)
        logger.info("Starting loop strength analysis")
        logger.info("=" * 60)

        start_time = time.time()

        # Pre-flight: nothing is computed if an input is missing
        self.paths.check_inputs()

        # Summaries describe the loaded loops, so inverted anchors are still present
        loop_sets = self._run_step("load", self.load_loops)
        sample_summary = summarize_loop_set(loop_sets.sample)
        random_summary = summarize_loop_set(loop_sets.random)

        loop_sets = self._run_step("filter", self.filter_loops, loop_sets)

        loop_sets = self._run_step("fold_change", self.compute_fold_changes, loop_sets)
        significance = self._run_step("significance", self.test_significance, loop_sets)
        output_files = self._run_step("report", self.reporter.write, significance)

        self.execution_times["total"] = time.time() - start_time

        result = LoopStrengthResult(
            significance=significance,
            sample_summary=sample_summary,
            random_summary=random_summary,
            output_directory=self.paths.output_dir,
            output_files=output_files,
            execution_times=dict(self.execution_times),
        )

        self._log_summary(result)
        return result

    def load_loops(self) -> LoopSetPair:
        """Stage 1a: read both loop files and add loop sizes"""
        return read_loop_sets(self.paths.sample_loops_path, self.paths.random_loops_path)

    def filter_loops(self, loop_sets: LoopSetPair) -> LoopSetPair:
        """Stage 1b: drop loops shorter than min_loop_size"""
        return loop_sets.map(
            lambda loop_set: filter_by_size(loop_set, self.config.min_loop_size)
        )

    def compute_fold_changes(self, loop_sets: LoopSetPair) -> LoopSetPair:
        """Stage 2: add logFC to both loop sets"""
        return loop_sets.map(
            lambda loop_set: add_log_fold_change(
                loop_set, pseudocount=self.config.pseudocount
            )
        )

    def test_significance(self, loop_sets: LoopSetPair) -> SignificanceResult:
        """Stage 3: empirical p-values and FDR correction for the sample loops"""
        return self.tester.test(loop_sets.sample, loop_sets.random)

    def _run_step(self, step: str, func: Callable, *args):
        step_start = time.time()
        logger.info(f"{'=' * 20} STEP: {step.upper()} {'=' * 20}")

        result = func(*args)

        step_time = time.time() - step_start
        self.execution_times[step] = step_time
        logger.info(f"Step {step} completed in {step_time:.2f} seconds")
        return result

    def _log_summary(self, result: LoopStrengthResult) -> None:
        significance = result.significance

        logger.info("=" * 50)
        logger.info("LOOP STRENGTH SUMMARY")
        logger.info("=" * 50)
        logger.info(
            f"Sample loops loaded: {result.sample_summary.num_loops} "
            f"({result.sample_summary.intra_chromosomal} intra-chromosomal, "
            f"{result.sample_summary.inverted_anchors} inverted); tested: {significance.n_tested}"
        )
        logger.info(f"Random loops (null): {significance.null_size}")
        logger.info(
            f"Significant (padj < {significance.alpha}): {significance.n_significant} "
            f"({significance.n_up} up, {significance.n_down} down)"
        )
        if significance.degenerate:
            logger.warning(f"Degenerate result: {significance.degenerate}")

        for step, exec_time in self.execution_times.items():
            logger.info(f"  {step}: {exec_time:.2f} seconds")

    def get_execution_times(self) -> Dict[str, float]:
        """Get execution times for all steps"""
        return self.execution_times
