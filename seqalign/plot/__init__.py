"""
seqalign plotting package.

Requires the plot extra (matplotlib and seaborn):
    pip install "seqalign[plot]"

Submodules:
    - plot.colors: Color constants
    - plot.scoring: Scoring system visualization
    - plot.matrix: DP matrix heatmaps with traceback path

Example imports:
    from seqalign.plot import plot_dp_matrix
    from seqalign.plot.scoring import plot_score_matrix
"""

from .colors import HEATMAP_COLORMAPS, NT_COLOR, PATH_COLOR
from .matrix import alignment_path, plot_dp_matrix
from .scoring import plot_score_matrix

__all__ = [
    "HEATMAP_COLORMAPS",
    "NT_COLOR",
    "PATH_COLOR",
    "alignment_path",
    "plot_dp_matrix",
    "plot_score_matrix",
]
