"""
Shared test fixtures for the LoopStrength test suite.
"""

import logging

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from loopstrength.loops import LOOP_COLUMNS, LoopOrigin, LoopSet

# ============================================================================
# Loop rows
# ============================================================================


def loop_row(loop_id, start_a, start_b, control, mutant, chrom_a="chr1", chrom_b=None):
    """One nine-field loop record with 10 kb anchors."""
    return [
        chrom_a,
        start_a,
        start_a + 10000,
        chrom_b or chrom_a,
        start_b,
        start_b + 10000,
        loop_id,
        control,
        mutant,
    ]


@pytest.fixture
def make_row():
    return loop_row


@pytest.fixture
def write_loops(tmp_path):
    """Write loop rows to a header-less TSV file and return its path."""

    def _write(name, rows):
        path = tmp_path / name
        path.write_text("".join("\t".join(str(v) for v in row) + "\n" for row in rows))
        return path

    return _write


@pytest.fixture
def sample_rows():
    """Four long sample loops (logFC 0, 1, 2, 4) and one short loop."""
    return [
        loop_row("loop_1", 1_000_000, 3_000_000, 1, 1),
        loop_row("loop_2", 2_000_000, 4_500_000, 1, 3),
        loop_row("loop_3", 5_000_000, 6_000_000, 0, 3, chrom_a="chr2"),
        loop_row("loop_4", 7_000_000, 9_000_000, 0, 15, chrom_a="chr2", chrom_b="chr3"),
        loop_row("short_loop", 1_000_000, 1_500_000, 10, 80),
    ]


@pytest.fixture
def random_rows():
    """Null loops with logFC 0, 1, -1, 2, 0 and one short loop."""
    return [
        loop_row("rand_1", 1_000_000, 2_000_000, 1, 1),
        loop_row("rand_2", 3_000_000, 5_000_000, 1, 3),
        loop_row("rand_3", 4_000_000, 6_000_000, 3, 1),
        loop_row("rand_4", 8_000_000, 9_500_000, 0, 3),
        loop_row("rand_5", 2_000_000, 4_000_000, 2, 2),
        loop_row("rand_short", 2_000_000, 2_999_999, 0, 100),
    ]


@pytest.fixture
def sample_file(write_loops, sample_rows):
    return write_loops("real_loops.tsv", sample_rows)


@pytest.fixture
def random_file(write_loops, random_rows):
    return write_loops("random_loops.tsv", random_rows)


@pytest.fixture
def config_file(tmp_path, sample_file, random_file):
    """A key=value configuration pointing at the sample and random files."""
    path = tmp_path / "config_loopstrength.txt"
    path.write_text(
        f"sample_loops_path={sample_file}\n"
        f"random_loops_path={random_file}\n"
        f"output_directory={tmp_path / 'results'}\n"
    )
    return path


# ============================================================================
# In-memory loop sets
# ============================================================================


def make_loop_set(origin, rows):
    loops = pd.DataFrame(rows, columns=LOOP_COLUMNS)
    return LoopSet(origin=origin, loops=loops)


@pytest.fixture
def sample_set(sample_rows):
    return make_loop_set(LoopOrigin.SAMPLE, sample_rows)


@pytest.fixture
def random_set(random_rows):
    return make_loop_set(LoopOrigin.RANDOM, random_rows)


# ============================================================================
# Logging isolation
# ============================================================================


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    package = logging.getLogger("loopstrength")
    handlers = list(root.handlers)
    levels = (root.level, package.level)
    yield
    root.handlers[:] = handlers
    root.setLevel(levels[0])
    package.setLevel(levels[1])
