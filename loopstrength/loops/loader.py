"""
Reading loop files into LoopSets
"""

import os
from pathlib import Path
from typing import Union

import pandas as pd

from ..exceptions import InputIOError, LoopParseError, NonNumericFieldError
from ..utils import get_logger, log_execution_time
from .filtering import MIN_LOOP_SIZE, add_loop_size, filter_by_size
from .models import (LOOP_COLUMNS, NUMERIC_COLUMNS, STRENGTH_COLUMNS, LoopOrigin,
                     LoopSet, LoopSetPair)

logger = get_logger(__name__)

# Columns a loop cannot be scored without
REQUIRED_VALUE_COLUMNS = ["startA", "startB"] + STRENGTH_COLUMNS


def read_loop_file(loops_file: Union[str, Path], origin: LoopOrigin) -> LoopSet:
    """
    Load one header-less, tab-delimited loops file

    Args:
        loops_file: Path to the nine-column loops file
        origin: Whether the file holds sample or random loops

    Returns:
        LoopSet with the nine standard columns, in file order

    Raises:
        InputIOError: The file does not exist or cannot be read
        LoopParseError: The file cannot be split into nine columns, or
            a required value is missing
        NonNumericFieldError: A coordinate or strength column is not numeric
    """
    loops_path = Path(loops_file)

    if not loops_path.exists():
        raise InputIOError(loops_path, "file not found")
    if not loops_path.is_file():
        raise InputIOError(loops_path, "not a regular file")
    if not os.access(loops_path, os.R_OK):
        raise InputIOError(loops_path, "permission denied")

    try:
        loops_df = pd.read_csv(loops_path, sep="\t", header=None, dtype=str)
    except pd.errors.EmptyDataError as e:
        raise LoopParseError(loops_path, f"no lines available in input ({e})") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise LoopParseError(loops_path, str(e)) from e
    except OSError as e:
        raise InputIOError(loops_path, str(e)) from e

    n_cols = loops_df.shape[1]
    if n_cols != len(LOOP_COLUMNS):
        raise LoopParseError(
            loops_path,
            f"expected {len(LOOP_COLUMNS)} tab-separated columns, found {n_cols}",
        )

    loops_df.columns = LOOP_COLUMNS

    for col in NUMERIC_COLUMNS:
        converted = pd.to_numeric(loops_df[col], errors="coerce")
        bad = converted.isna() & loops_df[col].notna()
        if bad.any():
            raise NonNumericFieldError(loops_path, col, loops_df.loc[bad, col].iloc[0])
        loops_df[col] = converted

    for col in REQUIRED_VALUE_COLUMNS:
        n_missing = int(loops_df[col].isna().sum())
        if n_missing:
            raise LoopParseError(
                loops_path, f"column '{col}' has {n_missing} missing value(s)"
            )

    logger.info(f"Loaded {len(loops_df)} {origin.value} loops from {loops_path}")

    return LoopSet(origin=origin, loops=loops_df)


@log_execution_time
def read_loop_sets(
    sample_loops_path: Union[str, Path], random_loops_path: Union[str, Path]
) -> LoopSetPair:
    """Read both loop files and add ``loop_size``, without filtering"""
    pair = LoopSetPair(
        sample=read_loop_file(sample_loops_path, LoopOrigin.SAMPLE),
        random=read_loop_file(random_loops_path, LoopOrigin.RANDOM),
    )
    return pair.map(add_loop_size)


def load_loop_sets(
    sample_loops_path: Union[str, Path],
    random_loops_path: Union[str, Path],
    min_loop_size: int = MIN_LOOP_SIZE,
) -> LoopSetPair:
    """
    Load, size and filter the sample and random loop sets

    Either set may end up empty after filtering; that is left for the
    downstream stages to handle.
    """
    pair = read_loop_sets(sample_loops_path, random_loops_path)
    return pair.map(lambda loop_set: filter_by_size(loop_set, min_loop_size))
