"""
validation.py — independent baselines and helpers for randomized tests

This module provides an independent affine-gap global scorer (nwg_global),
a column-by-column alignment scorer (score_alignment), a validity check
for AlignmentResult values, random sequence and mutation helpers, and a
small timeit benchmark across the aligners.

nwg_global and score_alignment do not use dp_core: they reimplement the
recurrences directly so that bugs in the DP core cannot mask each other
during testing.
"""

import timeit
from typing import Dict, Optional, Tuple

import numpy as np

from . import default
from .aligners import (
    align_banded,
    align_global,
    align_local,
    align_overlap,
    align_semiglobal,
    align_space_efficient,
)
from .dp_core import GAP, AlignmentResult
from .matrices import MatrixSpec, get_score, resolve_matrix

DNA_BASES = "ACGT"

# ---------------------------------------------------------------------------
# Default scoring for tests and demos
# ---------------------------------------------------------------------------
DEFAULT_MATRIX = "DNA_SIMPLE"
DEFAULT_GAP_OPEN = default.GAP_OPEN
DEFAULT_GAP_EXTEND = default.GAP_EXTEND


def nwg_global(
    X: str,
    Y: str,
    matrix: MatrixSpec = DEFAULT_MATRIX,
    gap_open: float = DEFAULT_GAP_OPEN,
    gap_extend: float = DEFAULT_GAP_EXTEND,
) -> float:
    """
    Standard global Needleman-Wunsch/Gotoh score of (X, Y).
    """
    matrix = resolve_matrix(matrix)
    n, m = len(X), len(Y)
    gs, ge = gap_open, gap_extend
    NEG = float("-inf")

    # three Gotoh layers as plain lists
    Yg = [[NEG] * (m + 1) for _ in range(n + 1)]
    M  = [[NEG] * (m + 1) for _ in range(n + 1)]
    Xg = [[NEG] * (m + 1) for _ in range(n + 1)]

    M[0][0] = 0.0
    for j in range(1, m + 1):
        Yg[0][j] = gs + (j - 1) * ge
    for i in range(1, n + 1):
        Xg[i][0] = gs + (i - 1) * ge

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            Yg[i][j] = max(Yg[i][j - 1] + ge, M[i][j - 1] + gs, Xg[i][j - 1] + gs)
            M[i][j] = max(Yg[i - 1][j - 1], M[i - 1][j - 1], Xg[i - 1][j - 1]) \
                + get_score(matrix, X[i - 1], Y[j - 1])
            Xg[i][j] = max(Yg[i - 1][j] + gs, M[i - 1][j] + gs, Xg[i - 1][j] + ge)
    return max(Yg[n][m], M[n][m], Xg[n][m])


def score_alignment(
    aligned1: str,
    aligned2: str,
    matrix: MatrixSpec = DEFAULT_MATRIX,
    gap_open: float = DEFAULT_GAP_OPEN,
    gap_extend: float = DEFAULT_GAP_EXTEND,
) -> float:
    """
    Re-score alignment strings under the affine gap model.

    The first column of a run of gaps in the same sequence costs gap_open,
    each following column gap_extend.  Pass gap_extend=gap_open to score
    with a linear gap cost.
    """
    matrix = resolve_matrix(matrix)
    score = 0.0
    in_gap1 = in_gap2 = False
    for a, b in zip(aligned1, aligned2):
        if a == GAP:
            score += gap_extend if in_gap1 else gap_open
            in_gap1, in_gap2 = True, False
        elif b == GAP:
            score += gap_extend if in_gap2 else gap_open
            in_gap1, in_gap2 = False, True
        else:
            score += get_score(matrix, a, b)
            in_gap1 = in_gap2 = False
    return score


# ---------------------------------------------------------------------------
# Alignment validity helper
# ---------------------------------------------------------------------------

def check_alignment_validity(
    result: AlignmentResult,
    seq1: str,
    seq2: str,
    matrix: Optional[MatrixSpec] = None,
    gap_open: Optional[float] = None,
    gap_extend: Optional[float] = None,
    region_only: bool = False,
) -> Tuple[bool, str]:
    """
    Check that an AlignmentResult is internally consistent.

    Verifies that the aligned strings:
    - Have the same length, equal to alignment_length
    - Don't have simultaneous gaps at any position
    - Reconstruct the input without gaps: all of seq1/seq2, or with
      region_only the slices [start_pos:end_pos]
    - Agree with identity and identity_percent
    - Re-score to the reported score, if a matrix is given

    Parameters
    ----------
    result : AlignmentResult
        Output of any aligner, without score normalisation.
    seq1, seq2 : str
        Prepared (trimmed, upper-cased) input sequences.
    matrix, gap_open, gap_extend : scoring params, optional
        Needed only for the score check.

    Returns
    -------
    valid : bool
        True if the alignment passes all checks.
    message : str
        Description of what was checked or what failed.
    """
    a1, a2 = result.aligned_seq1, result.aligned_seq2

    if len(a1) != len(a2):
        return False, f"Length mismatch: aligned_seq1={len(a1)}, aligned_seq2={len(a2)}"
    if len(a1) != result.alignment_length:
        return False, (f"alignment_length {result.alignment_length} "
                       f"does not match aligned length {len(a1)}")

    for i, (x, y) in enumerate(zip(a1, a2)):
        if x == GAP and y == GAP:
            return False, f"Double gap found in alignment at position {i}"

    if region_only:
        want1 = seq1[result.start_pos1:result.end_pos1]
        want2 = seq2[result.start_pos2:result.end_pos2]
    else:
        want1, want2 = seq1, seq2
    if a1.replace(GAP, "") != want1:
        return False, f"aligned_seq1 does not reconstruct {want1!r}"
    if a2.replace(GAP, "") != want2:
        return False, f"aligned_seq2 does not reconstruct {want2!r}"

    identity = sum(1 for x, y in zip(a1, a2) if x == y and x != GAP)
    if identity != result.identity:
        return False, f"Identity mismatch: computed {identity}, reported {result.identity}"
    percent = identity / len(a1) * 100 if a1 else 0.0
    if not np.isclose(percent, result.identity_percent):
        return False, (f"identity_percent mismatch: computed {percent}, "
                       f"reported {result.identity_percent}")

    if matrix is not None:
        computed = score_alignment(a1, a2, matrix, gap_open, gap_extend)
        if not np.isclose(computed, result.score):
            return False, f"Score mismatch: computed {computed}, reported {result.score}"

    return True, f"Valid alignment of length {len(a1)}"


# ---------------------------------------------------------------------------
# Random sequence generation and mutation helpers
# ---------------------------------------------------------------------------

def random_sequence(
    length: int,
    rng: np.random.Generator,
    alphabet: str = DNA_BASES,
) -> str:
    """
    Generate a random sequence of a given length over `alphabet`.

    Parameters
    ----------
    length : int
        Length of the sequence to generate.
    rng : np.random.Generator
        NumPy random generator instance.
    alphabet : str
        Symbols to draw from uniformly (default "ACGT").
    """
    return "".join(rng.choice(list(alphabet), size=length))


def mutate_sequence(
    seq: str,
    rng: np.random.Generator,
    sub_rate: float = 0.1,
    indel_rate: float = 0.05,
    alphabet: str = DNA_BASES,
) -> str:
    """
    Apply random substitutions, deletions and insertions to a sequence.

    Parameters
    ----------
    seq : str
        Input sequence.
    rng : numpy random generator
        Random number generator (e.g., np.random.default_rng(seed)).
    sub_rate : float
        Per-symbol substitution probability (default 0.1).
    indel_rate : float
        Per-symbol insertion/deletion probability (default 0.05).
    alphabet : str
        Symbols used for substitutions and insertions.

    Returns
    -------
    str
        Mutated sequence.
    """
    symbols = list(alphabet)
    result = []

    for base in seq:
        # Deletion
        if rng.random() < indel_rate:
            continue

        # Substitution
        if rng.random() < sub_rate:
            others = [b for b in symbols if b != base]
            base = str(rng.choice(others))

        result.append(base)

        # Insertion (after current symbol)
        if rng.random() < indel_rate:
            result.append(str(rng.choice(symbols)))

    return "".join(result)


# ---------------------------------------------------------------------------
# Benchmarking
# ---------------------------------------------------------------------------

def benchmark_aligners(
    n1: int,
    n2: int,
    rng: np.random.Generator,
    n_samples: int = 3,
    bandwidth: Optional[int] = None,
    matrix: MatrixSpec = DEFAULT_MATRIX,
    gap_open: float = DEFAULT_GAP_OPEN,
    gap_extend: float = DEFAULT_GAP_EXTEND,
) -> Dict[str, float]:
    """
    Time every aligner on one random pair using timeit.

    Parameters
    ----------
    n1, n2 : int
        Sequence lengths.
    rng : np.random.Generator
        Random number generator.
    n_samples : int
        Number of timed runs per aligner.
    bandwidth : int, optional
        Band half-width; defaults to |n1 - n2| + 10.
    matrix, gap_open, gap_extend : scoring params

    Returns
    -------
    dict
        Aligner name -> mean seconds per call.
    """
    seq1 = random_sequence(n1, rng)
    seq2 = random_sequence(n2, rng)
    if bandwidth is None:
        bandwidth = abs(n1 - n2) + 10
    scoring = {"matrix": matrix, "gap_open": gap_open, "gap_extend": gap_extend}

    runs = {
        "global": lambda: align_global(seq1, seq2, **scoring),
        "local": lambda: align_local(seq1, seq2, **scoring),
        "semiglobal": lambda: align_semiglobal(seq1, seq2, **scoring),
        "overlap": lambda: align_overlap(seq1, seq2, **scoring),
        "banded": lambda: align_banded(seq1, seq2, bandwidth=bandwidth, **scoring),
        "space_efficient": lambda: align_space_efficient(seq1, seq2, **scoring),
    }
    return {
        name: timeit.timeit(run, number=n_samples) / n_samples
        for name, run in runs.items()
    }
