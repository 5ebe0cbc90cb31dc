"""
Results table output
"""

import csv
from pathlib import Path
from typing import Union

import pandas as pd

from ..loops.models import RESULT_COLUMNS
from ..utils import get_logger

logger = get_logger(__name__)


def write_results_table(
    results_df: pd.DataFrame,
    output_file: Union[str, Path],
    decimal: str = ",",
    na_rep: str = "NA",
) -> Path:
    """
    Write the tested sample loops as a tab-delimited table with a header

    Rows keep their current order. Decimal separator defaults to a comma;
    undefined p-values are written as ``na_rep``.

    Args:
        results_df: Sample loops with loop_size, logFC, pval and padj
        output_file: Destination path
        decimal: Decimal separator for floating-point columns
        na_rep: Marker for undefined values

    Returns:
        Path of the written file
    """
    missing = [col for col in RESULT_COLUMNS if col not in results_df.columns]
    if missing:
        raise ValueError(f"Results table is missing columns: {missing}")

    output_path = Path(output_file)

    results_df[RESULT_COLUMNS].to_csv(
        output_path,
        sep="\t",
        index=False,
        header=True,
        decimal=decimal,
        na_rep=na_rep,
        quoting=csv.QUOTE_NONE,
        escapechar="\\",
        lineterminator="\n",
    )

    logger.info(f"Results table saved: {output_path} ({len(results_df)} loops)")
    return output_path
