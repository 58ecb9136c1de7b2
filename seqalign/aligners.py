"""
aligners.py — User-facing full-matrix aligners

This module wraps the DP core into four alignment semantics that differ
only in boundary conditions and in where the traceback starts:

  - align_global     : Needleman-Wunsch, every end gap penalised.
  - align_local      : Smith-Waterman, best-scoring pair of substrings.
  - align_semiglobal : leading and trailing gaps free on both sequences.
  - align_overlap    : suffix of seq1 and prefix of seq2 free.

Each function resolves options, prepares the sequences, fills the DP,
traces back and returns an AlignmentResult.  The *Aligner classes hold a
fixed set of options and expose align(seq1, seq2).
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np

from .dp_core import (
    GAP,
    AlignmentResult,
    fill_direction,
    fill_gotoh,
    finish_result,
    traceback_direction,
    traceback_gotoh,
)
from .options import AlignmentOptions, BaseAligner, prepare_call
from .banded import BandedAligner, align_banded
from .hirschberg import SpaceEfficientAligner, align_space_efficient

logger = logging.getLogger(__name__)

SeqLike = Union[str, Sequence[str]]


# ---------------------------------------------------------------------------
# Global and local (gap model selectable)
# ---------------------------------------------------------------------------

def _fill(s1, s2, matrix, opts: AlignmentOptions, local: bool):
    if opts.gap_model == "direction":
        data = fill_direction(s1, s2, matrix, opts.gap_open, opts.gap_extend, local=local)
        return data, traceback_direction
    data = fill_gotoh(s1, s2, matrix, opts.gap_open, opts.gap_extend, local=local)
    return data, traceback_gotoh


def align_global(
    seq1: SeqLike,
    seq2: SeqLike,
    options: Optional[AlignmentOptions] = None,
    *,
    return_data: bool = False,
    **overrides: Any,
) -> AlignmentResult:
    """
    Global (Needleman-Wunsch) alignment of two sequences.

    Both sequences are aligned end to end; every gap, including leading
    and trailing ones, costs gap_open for its first column and gap_extend
    for each further column.

    Parameters
    ----------
    seq1, seq2 : str or sequence of 1-char str
        Sequences to align.  With case_normalize (the default) they are
        trimmed and upper-cased first.

    options : AlignmentOptions, optional
        Explicit options; keyword overrides take precedence over them.

    return_data : bool, default False
        If True, attach the filled DP tables to the result.

    **overrides
        Any AlignmentOptions field, e.g. matrix="PAM250", gap_open=-8.

    Returns
    -------
    AlignmentResult
        Positions are always (0, 0, len(seq1), len(seq2)).

    Usage:
        align_global("HEAGAWGHEE", "PAWHEAE", matrix="PAM250",
                     gap_open=-8, gap_extend=-2).score  # 10.0
    """
    s1, s2, opts, matrix = prepare_call(
        "global", seq1, seq2, options, overrides,
        honour_case=True, per_sequence_message=True,
    )
    m, n = len(s1), len(s2)
    data, traceback = _fill(s1, s2, matrix, opts, local=False)
    aligned1, aligned2, _, _ = traceback(s1, s2, data, m, n)
    return finish_result(
        aligned1, aligned2, data.H[m, n], (0, 0, m, n),
        score_normalize=opts.score_normalize,
        data=data if return_data else None,
    )


def align_local(
    seq1: SeqLike,
    seq2: SeqLike,
    options: Optional[AlignmentOptions] = None,
    *,
    return_data: bool = False,
    **overrides: Any,
) -> AlignmentResult:
    """
    Local (Smith-Waterman) alignment of two sequences.

    Scores are floored at 0.  The traceback starts at the highest-scoring
    cell; when several cells share the maximum, the first one in row-major
    order wins.  It stops at the first cell scoring 0.

    If the best score is below min_score, the result is empty: no aligned
    characters, score 0, all positions 0 and identity_percent 0.

    Returns
    -------
    AlignmentResult
        start_pos*/end_pos* delimit the aligned substrings of each input.
    """
    s1, s2, opts, matrix = prepare_call(
        "local", seq1, seq2, options, overrides,
        honour_case=True, per_sequence_message=True,
    )
    data, traceback = _fill(s1, s2, matrix, opts, local=True)
    data_out = data if return_data else None

    end1, end2 = np.unravel_index(int(np.argmax(data.H)), data.H.shape)
    best = data.H[end1, end2]
    if best < opts.min_score:
        logger.debug("Local best %.3f below min_score %.3f", best, opts.min_score)
        return finish_result("", "", 0.0, (0, 0, 0, 0), data=data_out)

    logger.debug("Local best %.3f at (%d, %d)", best, end1, end2)
    aligned1, aligned2, start1, start2 = traceback(
        s1, s2, data, int(end1), int(end2), local=True
    )
    return finish_result(
        aligned1, aligned2, best, (start1, start2, end1, end2),
        score_normalize=opts.score_normalize,
        data=data_out,
    )


# ---------------------------------------------------------------------------
# Free end gaps: semi-global and overlap
# ---------------------------------------------------------------------------

def _leading_gaps(s1: str, s2: str, i: int, j: int) -> Tuple[str, str]:
    """Free leading columns for the unreached prefixes s1[:i] and s2[:j]."""
    return (
        GAP * j + s1[:i],
        s2[:j] + GAP * i,
    )


def _trailing_gaps(s1: str, s2: str, i: int, j: int) -> Tuple[str, str]:
    """Free trailing columns for the unreached suffixes s1[i:] and s2[j:]."""
    rest1, rest2 = s1[i:], s2[j:]
    return (
        rest1 + GAP * len(rest2),
        GAP * len(rest1) + rest2,
    )


def _with_free_ends(s1: str, s2: str, core1: str, core2: str,
                    start: Tuple[int, int], end: Tuple[int, int]) -> Tuple[str, str]:
    lead1, lead2 = _leading_gaps(s1, s2, *start)
    tail1, tail2 = _trailing_gaps(s1, s2, *end)
    return lead1 + core1 + tail1, lead2 + core2 + tail2


def align_semiglobal(
    seq1: SeqLike,
    seq2: SeqLike,
    options: Optional[AlignmentOptions] = None,
    *,
    return_data: bool = False,
    **overrides: Any,
) -> AlignmentResult:
    """
    Semi-global alignment: end gaps are free on both sequences.

    Row 0 and column 0 start at zero.  The traceback starts at the best
    cell of the last row or the last column (the last row is scanned first
    and a later cell must score strictly higher to win).  Unreached
    prefixes and suffixes are added as free gap columns, so every input
    character appears in the alignment.

    Returns
    -------
    AlignmentResult
        start_pos* is the cell where the scored part of the alignment
        begins, end_pos* the cell where it ends.  Older releases always
        reported start_pos1 = start_pos2 = 0 here.
    """
    s1, s2, opts, matrix = prepare_call("semiglobal", seq1, seq2, options, overrides)
    m, n = len(s1), len(s2)
    data = fill_gotoh(s1, s2, matrix, opts.gap_open, opts.gap_extend,
                      free_top=True, free_left=True)
    H = data.H

    best, end1, end2 = -np.inf, m, n
    for j in range(n + 1):
        if H[m, j] > best:
            best, end1, end2 = H[m, j], m, j
    for i in range(m + 1):
        if H[i, n] > best:
            best, end1, end2 = H[i, n], i, n
    logger.debug("Semi-global best %.3f at (%d, %d)", best, end1, end2)

    core1, core2, start1, start2 = traceback_gotoh(s1, s2, data, end1, end2)
    aligned1, aligned2 = _with_free_ends(s1, s2, core1, core2,
                                         (start1, start2), (end1, end2))
    return finish_result(
        aligned1, aligned2, best, (start1, start2, end1, end2),
        score_normalize=opts.score_normalize,
        data=data if return_data else None,
    )


def align_overlap(
    seq1: SeqLike,
    seq2: SeqLike,
    options: Optional[AlignmentOptions] = None,
    *,
    return_data: bool = False,
    **overrides: Any,
) -> AlignmentResult:
    """
    Overlap alignment: a suffix of seq1 overlapping a prefix of seq2.

    Column 0 carries the penalised affine ramp, row 0 is free.  The
    traceback starts at the best cell of the last column.  The unconsumed
    suffix of seq1 and prefix of seq2 are free; the prefix of seq1 and the
    suffix of seq2 are fully penalised.

    Returns
    -------
    AlignmentResult
        start_pos1 = 0, start_pos2 = where the traceback reached row 0,
        end_pos1 = best row, end_pos2 = len(seq2).  Older releases always
        reported start_pos2 = 0.
    """
    s1, s2, opts, matrix = prepare_call("overlap", seq1, seq2, options, overrides)
    m, n = len(s1), len(s2)
    data = fill_gotoh(s1, s2, matrix, opts.gap_open, opts.gap_extend,
                      free_top=True, free_left=False)
    H = data.H

    best, end1 = -np.inf, m
    for i in range(m + 1):
        if H[i, n] > best:
            best, end1 = H[i, n], i
    logger.debug("Overlap best %.3f at row %d", best, end1)

    core1, core2, start1, start2 = traceback_gotoh(s1, s2, data, end1, n)
    aligned1, aligned2 = _with_free_ends(s1, s2, core1, core2,
                                         (start1, start2), (end1, n))
    return finish_result(
        aligned1, aligned2, best, (0, start2, end1, n),
        score_normalize=opts.score_normalize,
        data=data if return_data else None,
    )


# ---------------------------------------------------------------------------
# Aligner objects
# ---------------------------------------------------------------------------

class GlobalAligner(BaseAligner):
    """Needleman-Wunsch global aligner with fixed options."""

    variant = "global"
    _align = staticmethod(align_global)


class LocalAligner(BaseAligner):
    """Smith-Waterman local aligner with fixed options."""

    variant = "local"
    _align = staticmethod(align_local)


class SemiGlobalAligner(BaseAligner):
    """Semi-global aligner (free end gaps) with fixed options."""

    variant = "semiglobal"
    _align = staticmethod(align_semiglobal)


class OverlapAligner(BaseAligner):
    """Overlap aligner (free seq1 suffix, free seq2 prefix) with fixed options."""

    variant = "overlap"
    _align = staticmethod(align_overlap)


__all__ = [
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
]
