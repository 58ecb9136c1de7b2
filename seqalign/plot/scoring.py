"""
Scoring system visualization for seqalign.
"""

from typing import Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..matrices import MatrixSpec, matrix_to_array


def _text_color(val: float, v: float, cmap) -> str:
    rgb = cmap((val + v) / (2 * v))
    lum = 0.2126 * rgb[0] + 0.7152 * rgb[1] + 0.0722 * rgb[2]
    return "white" if lum < 0.5 else "black"


def plot_score_matrix(
    matrix: MatrixSpec,
    gap_open: float,
    gap_extend: float,
    figsize: Tuple[float, float] = (9, 6),
    annotate: bool = True,
) -> plt.Figure:
    """
    Display a scoring scheme: a heatmap of the substitution matrix and a
    panel showing the affine gap penalties.

    Parameters
    ----------
    matrix : str or nested mapping
        Registry name or literal scoring matrix.
    gap_open, gap_extend : float
        Gap penalties shown in the second panel.
    figsize : tuple, optional
        Figure size (width, height).
    annotate : bool
        Write each score into its cell.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    labels, s = matrix_to_array(matrix)
    k = len(labels)

    cmap = plt.cm.RdBu.copy()  # negative=red, positive=blue
    cmap.set_bad("white")
    v = float(np.max(np.abs(np.concatenate([s.ravel(), [gap_open, gap_extend]]))))
    v = v or 1.0

    fig, ax = plt.subplots(
        1, 2, figsize=figsize, gridspec_kw={"width_ratios": [6, 1]}
    )

    # ---------------- substitution ----------------
    ax[0].imshow(s, cmap=cmap, vmin=-v, vmax=v)
    if annotate:
        for i in range(k):
            for j in range(k):
                val = s[i, j]
                ax[0].text(j, i, f"{val:.0f}", ha="center", va="center",
                           fontsize=7 if k > 10 else 10,
                           color=_text_color(val, v, cmap))
    ax[0].set_xticks(np.arange(k), labels)
    ax[0].set_yticks(np.arange(k), labels)
    ax[0].set_title("Substitution Matrix\ns(a, b)")
    ax[0].set_xlabel("Seq2 residue")
    ax[0].set_ylabel("Seq1 residue")
    for sp in ax[0].spines.values():
        sp.set_visible(False)

    # ---------------- gaps ----------------
    g = np.array([[gap_open], [gap_extend]], dtype=float)
    ax[1].imshow(g, cmap=cmap, vmin=-v, vmax=v)
    ax[1].text(0, 0, f"{gap_open:g}", ha="center", va="center",
               color=_text_color(gap_open, v, cmap))
    ax[1].text(0, 1, f"{gap_extend:g}", ha="center", va="center",
               color=_text_color(gap_extend, v, cmap))
    ax[1].set_xticks([])
    ax[1].set_yticks([0, 1])
    ax[1].set_yticklabels(["Gap Open", "Gap Extend"])
    ax[1].set_title("Affine Gaps")
    for sp in ax[1].spines.values():
        sp.set_visible(False)

    plt.tight_layout()
    return fig
