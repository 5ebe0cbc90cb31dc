"""
Unit tests for loop loading, size annotation and filtering.
"""

import pandas as pd
import pytest

from loopstrength.exceptions import (InputIOError, LoopParseError,
                                     NonNumericFieldError)
from loopstrength.loops import (LOOP_COLUMNS, LoopOrigin, LoopSet, LoopSetPair,
                                add_loop_size, filter_by_size, load_loop_sets,
                                read_loop_file, read_loop_sets,
                                summarize_loop_set)


class TestReadLoopFile:
    def test_columns_and_rows(self, sample_file):
        loop_set = read_loop_file(sample_file, LoopOrigin.SAMPLE)

        assert loop_set.origin is LoopOrigin.SAMPLE
        assert loop_set.columns == LOOP_COLUMNS
        assert len(loop_set) == 5
        assert list(loop_set.loops["loop_id"]) == [
            "loop_1",
            "loop_2",
            "loop_3",
            "loop_4",
            "short_loop",
        ]

    def test_numeric_columns(self, sample_file):
        loops = read_loop_file(sample_file, LoopOrigin.SAMPLE).loops
        for col in ["startA", "startB", "strength_control", "strength_mutant"]:
            assert pd.api.types.is_numeric_dtype(loops[col])

    def test_identifiers_kept_as_text(self, write_loops, make_row):
        path = write_loops("ids.tsv", [make_row("007", 0, 2_000_000, 1, 2)])
        loops = read_loop_file(path, LoopOrigin.SAMPLE).loops
        assert loops.loc[0, "loop_id"] == "007"

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputIOError) as excinfo:
            read_loop_file(tmp_path / "absent.tsv", LoopOrigin.SAMPLE)
        assert isinstance(excinfo.value, OSError)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(InputIOError):
            read_loop_file(tmp_path, LoopOrigin.RANDOM)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.tsv"
        path.write_text("")
        with pytest.raises(LoopParseError, match="no lines"):
            read_loop_file(path, LoopOrigin.SAMPLE)

    def test_wrong_column_count(self, tmp_path):
        path = tmp_path / "eight.tsv"
        path.write_text("chr1\t0\t10\tchr1\t2000000\t2000010\tloop\t5\n")
        with pytest.raises(LoopParseError, match="found 8"):
            read_loop_file(path, LoopOrigin.SAMPLE)

    def test_ragged_rows_keep_cause(self, write_loops, make_row):
        path = write_loops(
            "ragged.tsv",
            [make_row("a", 0, 2_000_000, 1, 2), make_row("b", 0, 2_000_000, 1, 2) + ["extra"]],
        )
        with pytest.raises(LoopParseError) as excinfo:
            read_loop_file(path, LoopOrigin.SAMPLE)
        assert excinfo.value.__cause__ is not None

    def test_non_numeric_strength(self, write_loops, make_row):
        path = write_loops("bad.tsv", [make_row("a", 0, 2_000_000, 1, "high")])
        with pytest.raises(NonNumericFieldError) as excinfo:
            read_loop_file(path, LoopOrigin.SAMPLE)
        assert excinfo.value.column == "strength_mutant"
        assert isinstance(excinfo.value, TypeError)

    def test_missing_strength(self, tmp_path):
        path = tmp_path / "missing.tsv"
        path.write_text("chr1\t0\t10\tchr1\t2000000\t2000010\tloop\t\t4\n")
        with pytest.raises(LoopParseError, match="strength_control"):
            read_loop_file(path, LoopOrigin.SAMPLE)


class TestLoopSize:
    def test_loop_size_is_start_difference(self, sample_set):
        sized = add_loop_size(sample_set)
        expected = sample_set.loops["startB"] - sample_set.loops["startA"]
        assert list(sized.loops["loop_size"]) == list(expected)

    def test_original_set_is_not_modified(self, sample_set):
        add_loop_size(sample_set)
        assert "loop_size" not in sample_set.columns

    def test_threshold_boundary(self, make_row):
        rows = [
            make_row("below", 0, 999_999, 1, 1),
            make_row("exact", 0, 1_000_000, 1, 1),
        ]
        loop_set = LoopSet(LoopOrigin.RANDOM, pd.DataFrame(rows, columns=LOOP_COLUMNS))

        filtered = filter_by_size(add_loop_size(loop_set))

        assert list(filtered.loops["loop_id"]) == ["exact"]

    def test_all_survivors_above_floor(self, sample_set, random_set):
        for loop_set in (sample_set, random_set):
            filtered = filter_by_size(add_loop_size(loop_set))
            assert (filtered.loops["loop_size"] >= 1_000_000).all()

    def test_inverted_loops_are_dropped_not_fixed(self, make_row, caplog):
        rows = [make_row("inverted", 5_000_000, 1_000_000, 1, 1)]
        loop_set = LoopSet(LoopOrigin.SAMPLE, pd.DataFrame(rows, columns=LOOP_COLUMNS))

        sized = add_loop_size(loop_set)
        assert sized.loops.loc[0, "loop_size"] == -4_000_000

        filtered = filter_by_size(sized)
        assert filtered.is_empty
        assert "negative loop_size" in caplog.text

    def test_custom_threshold(self, sample_set):
        filtered = filter_by_size(add_loop_size(sample_set), min_size=2_000_000)
        assert list(filtered.loops["loop_id"]) == ["loop_1", "loop_2", "loop_4"]

    def test_index_is_reset(self, sample_set):
        filtered = filter_by_size(add_loop_size(sample_set), min_size=2_000_000)
        assert list(filtered.loops.index) == [0, 1, 2]

    def test_empty_result_is_allowed(self, sample_set):
        filtered = filter_by_size(add_loop_size(sample_set), min_size=10**9)
        assert filtered.is_empty
        assert "loop_size" in filtered.columns


class TestLoadLoopSets:
    def test_pair_is_sized_and_filtered(self, sample_file, random_file):
        pair = load_loop_sets(sample_file, random_file)

        assert isinstance(pair, LoopSetPair)
        assert len(pair.sample) == 4
        assert len(pair.random) == 5
        assert "short_loop" not in set(pair.sample.loops["loop_id"])
        assert "rand_short" not in set(pair.random.loops["loop_id"])

    def test_read_keeps_short_and_inverted_loops(self, write_loops, make_row, random_file):
        sample_file = write_loops(
            "mixed.tsv",
            [make_row("inv", 5_000_000, 1_000_000, 1, 1), make_row("short", 0, 10_000, 1, 1)],
        )
        pair = read_loop_sets(sample_file, random_file)

        assert list(pair.sample.loops["loop_size"]) == [-4_000_000, 10_000]
        assert len(pair.random) == 6

    def test_missing_random_file(self, sample_file, tmp_path):
        with pytest.raises(InputIOError):
            load_loop_sets(sample_file, tmp_path / "absent.tsv")

    def test_pair_rejects_swapped_origins(self, sample_set, random_set):
        with pytest.raises(ValueError):
            LoopSetPair(sample=random_set, random=sample_set)

    def test_map_applies_to_both(self, sample_set, random_set):
        pair = LoopSetPair(sample=sample_set, random=random_set).map(add_loop_size)
        assert pair.sample.has_columns("loop_size")
        assert pair.random.has_columns("loop_size")
        assert pair.sample.origin is LoopOrigin.SAMPLE


class TestSummarizeLoopSet:
    def test_counts(self, sample_set):
        summary = summarize_loop_set(add_loop_size(sample_set))

        assert summary.origin == "sample"
        assert summary.num_loops == 5
        assert summary.inter_chromosomal == 1
        assert summary.intra_chromosomal == 4
        assert summary.min_size == 500_000
        assert summary.max_size == 2_500_000
        assert summary.intra_chromosomal_fraction == pytest.approx(0.8)

    def test_empty_set(self, sample_set):
        empty = sample_set.with_loops(sample_set.loops.iloc[0:0])
        summary = summarize_loop_set(empty)
        assert summary.num_loops == 0
        assert summary.min_size is None
        assert summary.to_dict()["intra_chromosomal_fraction"] == 0.0
