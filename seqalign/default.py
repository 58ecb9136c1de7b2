"""
default.py — Default parameters for seqalign

Provides the per-aligner default scoring schemes.  Every aligner uses
BLOSUM62 with affine (-10, -1) gap penalties except the space-efficient
aligner, which uses a linear gap of -1 per position.
"""

from typing import Any, Dict

# Scoring matrix used when none is given
MATRIX = "BLOSUM62"

## Affine gap penalties
GAP_OPEN = -10.0
GAP_EXTEND = -1.0

## Linear gap penalty for the space-efficient aligner
LINEAR_GAP = -1.0

# Band half-width for the banded aligner
BANDWIDTH = 10

# Local alignments scoring below this are reported as empty
MIN_SCORE = 0.0

# Gap models accepted by the global and local aligners
GAP_MODELS = ("affine", "direction")
GAP_MODEL = "affine"

_COMMON = {
    "matrix": MATRIX,
    "gap_open": GAP_OPEN,
    "gap_extend": GAP_EXTEND,
    "score_normalize": False,
}

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "global": {**_COMMON, "case_normalize": True, "gap_model": GAP_MODEL},
    "local": {
        **_COMMON,
        "case_normalize": True,
        "gap_model": GAP_MODEL,
        "min_score": MIN_SCORE,
    },
    "semiglobal": dict(_COMMON),
    "overlap": dict(_COMMON),
    "banded": {**_COMMON, "bandwidth": BANDWIDTH},
    "space_efficient": {**_COMMON, "gap_open": LINEAR_GAP},
}


def align_params(variant: str = "global") -> dict:
    """
    Bundle the default options of one aligner into a dict for easy unpacking.

    Parameters:
        variant (str): One of "global", "local", "semiglobal", "overlap",
            "banded" or "space_efficient".

    Usage:
        result = align_banded(s1, s2, **align_params("banded"))
    """
    try:
        return dict(DEFAULTS[variant])
    except KeyError:
        raise ValueError(
            f"Unknown aligner {variant!r}; expected one of {sorted(DEFAULTS)}"
        ) from None


def get_default_scoring():
    """
    Convenience helper returning the default scoring components:

        matrix, gap_open, gap_extend
    """
    return (
        MATRIX,
        GAP_OPEN,
        GAP_EXTEND,
    )
