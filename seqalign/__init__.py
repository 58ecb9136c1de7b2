"""
seqalign: pairwise sequence alignment.
"""

import logging

# =============================================================================
# CORE ALIGNMENT
# =============================================================================

from .aligners import (
    align_global,
    align_local,
    align_semiglobal,
    align_overlap,
    GlobalAligner,
    LocalAligner,
    SemiGlobalAligner,
    OverlapAligner,
)
from .banded import align_banded, band_cells, BandedAligner
from .hirschberg import align_space_efficient, hirschberg, nw_score_row, SpaceEfficientAligner

from .dp_core import (
    AlignmentResult,
    Direction,
    GotohData,
    DirectionData,
)

from .options import AlignmentOptions, resolve_options


# =============================================================================
# SCORING MATRICES
# =============================================================================

from .matrices import (
    MATRICES,
    BLOSUM45,
    BLOSUM50,
    BLOSUM62,
    BLOSUM80,
    BLOSUM90,
    PAM30,
    PAM70,
    PAM120,
    PAM250,
    DNA_SIMPLE,
    DNA_FULL,
    get_matrix,
    get_score,
    resolve_matrix,
    simple_matrix,
    matrix_to_array,
    is_symmetric,
    transpose,
)

from .errors import (
    AlignmentError,
    InvalidInputType,
    EmptySequence,
    InvalidGapPenalty,
    UnknownScoringMatrix,
    BandConstraintViolated,
)


# =============================================================================
# VALIDATION AND TESTING
# =============================================================================

from .default import align_params, get_default_scoring
from .validation import (
    nwg_global,
    score_alignment,
    check_alignment_validity,
    random_sequence,
    mutate_sequence,
    benchmark_aligners,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


# =============================================================================
# PLOTTING (requires both matplotlib and seaborn -- install with pip install seqalign[plot])
# =============================================================================
def _missing_plot_dep(func_name: str) -> ImportError:
    return ImportError(
        f"{func_name} requires plotting dependencies.\n"
        'Install with: pip install "seqalign[plot]"'
    )

try:
    from .plot import plot_dp_matrix, plot_score_matrix
    PLOT_AVAILABLE = True
except ImportError:
    # These will raise ImportError if accessed without matplotlib/seaborn
    def plot_dp_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_dp_matrix")
    def plot_score_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_score_matrix")
    PLOT_AVAILABLE = False


__all__ = [
    # Core alignment
    "AlignmentResult",
    "AlignmentOptions",
    "resolve_options",
    "align_global",
    "align_local",
    "align_semiglobal",
    "align_overlap",
    "align_banded",
    "align_space_efficient",
    "GlobalAligner",
    "LocalAligner",
    "SemiGlobalAligner",
    "OverlapAligner",
    "BandedAligner",
    "SpaceEfficientAligner",
    # DP core
    "Direction",
    "GotohData",
    "DirectionData",
    "band_cells",
    "hirschberg",
    "nw_score_row",
    # Scoring matrices
    "MATRICES",
    "BLOSUM45",
    "BLOSUM50",
    "BLOSUM62",
    "BLOSUM80",
    "BLOSUM90",
    "PAM30",
    "PAM70",
    "PAM120",
    "PAM250",
    "DNA_SIMPLE",
    "DNA_FULL",
    "get_matrix",
    "get_score",
    "resolve_matrix",
    "simple_matrix",
    "matrix_to_array",
    "is_symmetric",
    "transpose",
    # Errors
    "AlignmentError",
    "InvalidInputType",
    "EmptySequence",
    "InvalidGapPenalty",
    "UnknownScoringMatrix",
    "BandConstraintViolated",
    # Validation
    "align_params",
    "get_default_scoring",
    "nwg_global",
    "score_alignment",
    "check_alignment_validity",
    "random_sequence",
    "mutate_sequence",
    "benchmark_aligners",
    # Plotting
    "PLOT_AVAILABLE",
    "plot_dp_matrix",
    "plot_score_matrix",
]
