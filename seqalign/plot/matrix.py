"""
DP matrix visualization for seqalign.

Draws the best-score layer of a result computed with return_data=True as
a heatmap and overlays the traceback path recovered from the aligned
strings.
"""

from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from ..dp_core import GAP, AlignmentResult
from .colors import HEATMAP_COLORMAPS, NT_COLOR, PATH_COLOR


def alignment_path(result: AlignmentResult) -> List[Tuple[int, int]]:
    """
    DP cells visited by the alignment, from its first cell to its last.

    An alignment whose characters are exactly its reported region starts
    at (start_pos1, start_pos2); one padded with free end gaps covers both
    inputs and starts at (0, 0).
    """
    if result.alignment_length == 0:
        return []
    n1 = len(result.aligned_seq1.replace(GAP, ""))
    n2 = len(result.aligned_seq2.replace(GAP, ""))
    if (n1, n2) == (result.end_pos1 - result.start_pos1,
                    result.end_pos2 - result.start_pos2):
        i, j = result.start_pos1, result.start_pos2
    else:
        # free end gaps put every input character into the alignment
        i, j = 0, 0
    path = [(i, j)]
    for a, b in zip(result.aligned_seq1, result.aligned_seq2):
        if a != GAP:
            i += 1
        if b != GAP:
            j += 1
        path.append((i, j))
    return path



def plot_dp_matrix(
    result: AlignmentResult,
    seq1: Optional[str] = None,
    seq2: Optional[str] = None,
    figsize: Tuple[int, int] = (8, 6),
    annotate: bool = True,
    marker_size: int = 14,
    marker_width: int = 2,
    colormap: str = HEATMAP_COLORMAPS["diverging"],
) -> plt.Figure:
    """
    Heatmap of the H layer of a result with its traceback path.

    Parameters
    ----------
    result : AlignmentResult
        Must carry DP tables (computed with return_data=True).
    seq1, seq2 : str, optional
        Prepared input sequences used for the axis labels.
    figsize : tuple
    annotate : bool
        Write scores into the cells.
    marker_size, marker_width : int
        Path marker appearance.
    colormap : str
        Seaborn/matplotlib colormap name.

    Returns
    -------
    fig : matplotlib.Figure
    """
    data = result.data
    if data is None:
        raise ValueError("result has no DP tables; align with return_data=True")

    H = data.dense("H") if hasattr(data, "dense") else data.H
    mat_plot = np.array(H, dtype=float)
    mat_plot[~np.isfinite(mat_plot)] = np.nan  # band edges and unreachable cells

    rows, cols = mat_plot.shape
    yticklabels = [""] + list(seq1 if seq1 is not None else " " * (rows - 1))
    xticklabels = [""] + list(seq2 if seq2 is not None else " " * (cols - 1))

    cmap = sns.color_palette(colormap, as_cmap=True).with_extremes(bad="grey")

    fig, ax = plt.subplots(figsize=figsize)
    sns.heatmap(
        mat_plot,
        ax=ax,
        cmap=cmap,
        center=0,
        square=True,
        cbar=True,
        annot=annotate,
        fmt=".0f",
        xticklabels=xticklabels,
        yticklabels=yticklabels,
    )
    ax.set_title(f"H (score {result.score:g})")
    ax.set_xlabel("seq2 (columns)")
    ax.set_ylabel("seq1 (rows)")
    ax.tick_params(top=True, bottom=False, labeltop=True, labelbottom=False)
    ax.xaxis.set_label_position("top")

    for tick, lab in zip(ax.get_xticklabels(), xticklabels):
        tick.set_rotation(0)
        tick.set_color(NT_COLOR.get(lab, "black"))
    for tick, lab in zip(ax.get_yticklabels(), yticklabels):
        tick.set_rotation(0)
        tick.set_color(NT_COLOR.get(lab, "black"))

    for i, j in alignment_path(result):
        ax.plot(
            j + 0.5,
            i + 0.5,
            marker="s",
            markersize=marker_size,
            markeredgecolor=PATH_COLOR,
            markerfacecolor="none",
            alpha=0.9,
            markeredgewidth=marker_width,
        )

    fig.tight_layout()
    return fig
