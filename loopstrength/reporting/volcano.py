"""
Volcano plot of loop fold-change against adjusted significance
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from ..statistics.tester import SIGNIFICANCE_THRESHOLD
from ..utils import get_logger

logger = get_logger(__name__)

DEFAULT_YLIM = (0.0, 2.5)
DEFAULT_FIGSIZE = (7.0, 5.0)

# Fixed timestamps keep vector outputs reproducible between runs
_REPRODUCIBLE_METADATA = {
    "pdf": {"CreationDate": None},
    "svg": {"Date": None},
}


def volcano_points(
    results_df: pd.DataFrame,
    alpha: float = SIGNIFICANCE_THRESHOLD,
    label_by: str = "pval",
    ylim: Tuple[float, float] = DEFAULT_YLIM,
) -> pd.DataFrame:
    """
    Compute plot coordinates and label flags for each loop

    ``y`` is ``-log10(padj)``. A ``padj`` of zero gives an infinite ``y``,
    which is pinned to the top of ``ylim``. Other loops are drawn only when
    both coordinates are finite and ``y`` lies inside ``ylim``. A loop is
    labelled when drawn and its ``label_by`` value is below ``alpha``.

    Returns:
        DataFrame with loop_id, x, y, visible and labelled columns, in
        the input order
    """
    if label_by not in ("pval", "padj"):
        raise ValueError(f"label_by must be 'pval' or 'padj', got {label_by!r}")

    with np.errstate(divide="ignore", invalid="ignore"):
        y = -np.log10(results_df["padj"].to_numpy(dtype=float))
    y = np.where(np.isposinf(y), ylim[1], y)
    x = results_df["logFC"].to_numpy(dtype=float)

    visible = np.isfinite(x) & np.isfinite(y) & (y >= ylim[0]) & (y <= ylim[1])
    labelled = visible & (results_df[label_by].to_numpy(dtype=float) < alpha)

    return pd.DataFrame(
        {
            "loop_id": results_df["loop_id"].to_numpy(),
            "x": x,
            "y": y,
            "visible": visible,
            "labelled": labelled,
        },
        index=results_df.index,
    )


def plot_volcano(
    results_df: pd.DataFrame,
    output_file: Union[str, Path],
    alpha: float = SIGNIFICANCE_THRESHOLD,
    label_by: str = "pval",
    ylim: Tuple[float, float] = DEFAULT_YLIM,
    figsize: Tuple[float, float] = DEFAULT_FIGSIZE,
    plot_format: Optional[str] = None,
) -> Path:
    """
    Draw the volcano plot and save it

    Args:
        results_df: Sample loops with logFC, pval and padj
        output_file: Destination path
        alpha: Significance threshold for the reference line and labels
        label_by: Column compared against ``alpha`` to decide labels
        ylim: Fixed y-axis range
        figsize: Figure size in inches
        plot_format: Output format; taken from the file suffix when None

    Returns:
        Path of the saved figure
    """
    output_path = Path(output_file)
    if plot_format is None:
        plot_format = output_path.suffix.lstrip(".").lower() or "pdf"

    points = volcano_points(results_df, alpha=alpha, label_by=label_by, ylim=ylim)
    shown = points[points["visible"]]

    n_hidden = len(points) - len(shown)
    if n_hidden:
        logger.warning(
            f"{n_hidden} loops not drawn (undefined padj or finite y outside {ylim})"
        )

    with sns.axes_style("whitegrid"):
        fig, ax = plt.subplots(1, 1, figsize=figsize)

        ax.scatter(shown["x"], shown["y"], color="black", s=12, alpha=1)
        ax.axhline(y=-np.log10(alpha), color="red", linestyle="--")

        for _, row in shown[shown["labelled"]].iterrows():
            ax.annotate(
                str(row["loop_id"]),
                xy=(row["x"], row["y"]),
                xytext=(4, 4),
                textcoords="offset points",
                fontsize=8,
                annotation_clip=True,
            )

        ax.set_xlabel("log2 Fold Change")
        ax.set_ylabel("-log10(p-value)")
        ax.set_ylim(*ylim)
        sns.despine(ax=ax, left=True, bottom=True)

        fig.tight_layout()

    try:
        fig.savefig(
            output_path,
            format=plot_format,
            dpi=300,
            bbox_inches="tight",
            metadata=_REPRODUCIBLE_METADATA.get(plot_format),
        )
    finally:
        plt.close(fig)

    logger.info(
        f"Volcano plot saved: {output_path} "
        f"({len(shown)} points, {int(shown['labelled'].sum())} labelled)"
    )
    return output_path
