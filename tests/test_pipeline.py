"""
End-to-end tests for the LoopStrengthAnalysis orchestrator.
"""

import pytest

from loopstrength import LoopStrengthAnalysis
from loopstrength.config import Config, load_config
from loopstrength.exceptions import (ConfigError, InputIOError,
                                     MissingConfigKeyError)
from loopstrength.loops import RESULT_COLUMNS


def table_rows(path):
    lines = path.read_text().splitlines()
    return [dict(zip(RESULT_COLUMNS, line.split("\t"))) for line in lines[1:]]


class TestLoopStrengthAnalysis:
    def test_run_from_config_file(self, config_file, tmp_path):
        result = LoopStrengthAnalysis(config_file).run()

        assert result.output_directory == tmp_path / "results"
        assert result.output_files["table"].exists()
        assert result.output_files["plot"].exists()

        rows = table_rows(result.output_files["table"])
        assert [row["loop_id"] for row in rows] == ["loop_1", "loop_2", "loop_3", "loop_4"]
        assert [row["pval"] for row in rows] == ["1,0", "0,6", "0,2", "0,0"]
        assert rows[3]["logFC"] == "4,0"
        assert rows[3]["loop_size"] == "2000000"

    def test_summaries(self, config_file):
        result = LoopStrengthAnalysis(config_file).run()

        assert result.sample_summary.num_loops == 5
        assert result.random_summary.num_loops == 6
        assert result.significance.n_tested == 4
        assert result.significance.null_size == 5
        assert result.significance.n_significant == 1
        assert result.summary()["significance"]["n_up"] == 1

    def test_execution_times(self, config_file):
        analysis = LoopStrengthAnalysis(config_file)
        analysis.run()

        times = analysis.get_execution_times()
        for step in ["load", "filter", "fold_change", "significance", "report", "total"]:
            assert step in times

    def test_inverted_anchors_are_counted_before_filtering(self, write_loops, make_row, random_file, tmp_path):
        sample_file = write_loops(
            "inverted.tsv",
            [
                make_row("inv", 5_000_000, 1_000_000, 1, 1),
                make_row("ok", 1_000_000, 3_000_000, 1, 3),
            ],
        )
        config = Config(
            sample_loops_path=str(sample_file),
            random_loops_path=str(random_file),
            output_directory=str(tmp_path / "results"),
        )

        result = LoopStrengthAnalysis(config).run()

        assert result.sample_summary.inverted_anchors == 1
        assert result.sample_summary.min_size == -4_000_000
        assert result.significance.n_tested == 1
        assert [row["loop_id"] for row in table_rows(result.output_files["table"])] == ["ok"]

    def test_rerun_is_byte_identical(self, config_file, tmp_path):
        LoopStrengthAnalysis(config_file).run()
        first = (tmp_path / "results" / "output_loopstrength.txt").read_bytes()

        LoopStrengthAnalysis(config_file).run()
        second = (tmp_path / "results" / "output_loopstrength.txt").read_bytes()

        assert first == second

    def test_config_object_and_dict(self, config_file):
        config = load_config(config_file)

        from_object = LoopStrengthAnalysis(config).run()
        from_dict = LoopStrengthAnalysis(config.to_dict()).run()

        assert from_object.significance.n_tested == from_dict.significance.n_tested

    def test_settings_reach_the_stages(self, config_file):
        config = load_config(config_file)
        config.min_loop_size = 2_000_000
        config.significance_threshold = 0.5
        config.plot_format = "png"

        result = LoopStrengthAnalysis(config).run()

        assert result.significance.n_tested == 3
        assert result.significance.alpha == 0.5
        assert result.output_files["plot"].suffix == ".png"

    def test_empty_null_still_writes_outputs(self, write_loops, make_row, sample_file, tmp_path):
        random_file = write_loops("short_random.tsv", [make_row("r", 0, 10_000, 1, 1)])
        config = Config(
            sample_loops_path=str(sample_file),
            random_loops_path=str(random_file),
            output_directory=str(tmp_path / "results"),
        )

        result = LoopStrengthAnalysis(config).run()

        assert result.significance.degenerate is not None
        rows = table_rows(result.output_files["table"])
        assert all(row["pval"] == "NA" and row["padj"] == "NA" for row in rows)
        assert result.output_files["plot"].exists()

    def test_missing_input_stops_before_output(self, sample_file, tmp_path):
        config = Config(
            sample_loops_path=str(sample_file),
            random_loops_path=str(tmp_path / "absent.tsv"),
            output_directory=str(tmp_path / "results"),
        )

        with pytest.raises(InputIOError):
            LoopStrengthAnalysis(config).run()
        assert not (tmp_path / "results").exists()

    def test_missing_config_key(self, tmp_path):
        path = tmp_path / "config_loopstrength.txt"
        path.write_text("sample_loops_path=a.tsv\n")
        with pytest.raises(MissingConfigKeyError):
            LoopStrengthAnalysis(path)

    def test_invalid_setting(self, config_file):
        config = load_config(config_file)
        config.significance_threshold = 2.0
        with pytest.raises(ConfigError, match="significance_threshold"):
            LoopStrengthAnalysis(config)

    def test_invalid_config_type(self):
        with pytest.raises(ConfigError):
            LoopStrengthAnalysis(42)
