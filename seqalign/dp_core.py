"""
dp_core.py — seqalign dynamic programming core

This module implements the two DP primitives shared by the aligners:

  - the exact three-state affine-gap (Gotoh) recurrence with per-state
    traceback, used by every full-matrix aligner and by the banded one;
  - the single-matrix "direction-remembered" recurrence, which charges
    gap_extend only when the best predecessor already ended in a gap of
    the same orientation.

Conventions: seq1 runs down the rows (index i), seq2 across the columns
(index j).  E holds scores ending in a gap in seq2 (a move "up"),
F holds scores ending in a gap in seq1 (a move "left").
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .matrices import get_score

logger = logging.getLogger(__name__)

GAP = "-"

# E/F trace values: how the gap state at a cell was entered
OPEN = 0
EXTEND = 1


class Direction(IntEnum):
    """Traceback direction recorded for the best-score layer."""

    NONE = 0
    DIAGONAL = 1
    UP = 2
    LEFT = 3


# ---------------------------------------------------------------------------
# DP state and output containers
# ---------------------------------------------------------------------------

@dataclass
class GotohData:
    """
    Score and traceback arrays of the affine-gap DP.

    Score layers
    ------------
    H : (m+1, n+1) array of float
        Best score of any alignment of seq1[:i] and seq2[:j].
    E, F : (m+1, n+1) arrays of float
        Best score ending in a gap in seq2 (E) or in seq1 (F).
        Unreachable cells hold -inf.

    Traceback layers
    ----------------
    H_trace : (m+1, n+1) array of int
        A Direction per cell.  UP means "continue in E at this cell",
        LEFT means "continue in F at this cell".
    E_trace, F_trace : (m+1, n+1) arrays of int
        OPEN if the gap was opened from H at the predecessor cell,
        EXTEND if it continues the gap state of the predecessor.
    """

    H: NDArray[np.floating]
    E: NDArray[np.floating]
    F: NDArray[np.floating]

    H_trace: NDArray[np.integer]
    E_trace: NDArray[np.integer]
    F_trace: NDArray[np.integer]

    def cell(self, i: int, j: int) -> Optional[Tuple[int, int]]:
        """Array index of DP cell (i, j), or None if it is not stored."""
        return (i, j)


@dataclass
class DirectionData:
    """
    Score and direction arrays of the direction-remembered DP.

    H : (m+1, n+1) array of float
    trace : (m+1, n+1) array of int (Direction values)
    """

    H: NDArray[np.floating]
    trace: NDArray[np.integer]


DPData = Union[GotohData, DirectionData]


@dataclass
class AlignmentResult:
    """
    Result of a single pairwise alignment.

    Attributes
    ----------
    aligned_seq1, aligned_seq2 : str
        Equal-length aligned sequences, '-' marking gaps.

    score : float
        Alignment score, divided by alignment_length when score
        normalisation was requested.

    start_pos1, start_pos2, end_pos1, end_pos2 : int
        0-based half-open bounds of the aligned region in each input.

    identity : int
        Columns where both characters are equal and not a gap.

    identity_percent : float
        identity / alignment_length * 100, or 0 for an empty alignment.

    alignment_length : int
        Number of alignment columns, gaps included.

    data : GotohData, DirectionData or None
        Full DP tables, if requested with return_data=True.
    """

    aligned_seq1: str
    aligned_seq2: str
    score: float
    start_pos1: int
    start_pos2: int
    end_pos1: int
    end_pos2: int
    identity: int
    identity_percent: float
    alignment_length: int
    data: Optional[DPData] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with camelCase keys, without the DP tables."""
        return {
            _camel(f.name): getattr(self, f.name)
            for f in fields(self)
            if f.name != "data"
        }

    def to_tuple(self) -> Tuple[str, str, float]:
        """
        Convert to the short tuple format.

        Returns
        -------
        tuple
            (aligned_seq1, aligned_seq2, score)
        """
        return (self.aligned_seq1, self.aligned_seq2, self.score)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# ---------------------------------------------------------------------------
# Affine-gap (Gotoh) primitive
# ---------------------------------------------------------------------------

def init_gotoh(
    m: int,
    n: int,
    gap_open: float,
    gap_extend: float,
    free_top: bool = False,
    free_left: bool = False,
    local: bool = False,
) -> GotohData:
    """
    Allocate the Gotoh arrays and set the boundary row and column.

    A penalised border carries the affine ramp gap_open + gap_extend*(k-1)
    in both H and the matching gap layer (F for row 0, E for column 0).
    A free border (free_top for row 0, free_left for column 0, both in
    local mode) is all zeros with direction NONE, so a traceback reaching
    it stops there.
    """
    shape = (m + 1, n + 1)
    H = np.full(shape, -np.inf, dtype=float)
    E = np.full(shape, -np.inf, dtype=float)
    F = np.full(shape, -np.inf, dtype=float)
    H_trace = np.full(shape, int(Direction.NONE), dtype=int)
    E_trace = np.full(shape, OPEN, dtype=int)
    F_trace = np.full(shape, OPEN, dtype=int)

    H[0, 0] = 0.0

    # First row: leading gaps in seq1 (F layer)
    if free_top or local:
        H[0, 1:] = 0.0
    else:
        for j in range(1, n + 1):
            H[0, j] = F[0, j] = gap_open + (j - 1) * gap_extend
            H_trace[0, j] = Direction.LEFT
            F_trace[0, j] = OPEN if j == 1 else EXTEND

    # First column: leading gaps in seq2 (E layer)
    if free_left or local:
        H[1:, 0] = 0.0
    else:
        for i in range(1, m + 1):
            H[i, 0] = E[i, 0] = gap_open + (i - 1) * gap_extend
            H_trace[i, 0] = Direction.UP
            E_trace[i, 0] = OPEN if i == 1 else EXTEND

    return GotohData(H=H, E=E, F=F, H_trace=H_trace, E_trace=E_trace, F_trace=F_trace)


def gotoh_update(
    data: GotohData,
    i: int,
    j: int,
    pair_score: float,
    gap_open: float,
    gap_extend: float,
    local: bool = False,
) -> None:
    """
    Three-state affine-gap update at cell (i, j).

        E(i,j) = max(H(i-1,j) + gap_open, E(i-1,j) + gap_extend)
        F(i,j) = max(H(i,j-1) + gap_open, F(i,j-1) + gap_extend)
        H(i,j) = max(H(i-1,j-1) + pair_score, E(i,j), F(i,j))

    Ties in E and F prefer opening; ties in H prefer the diagonal, then E,
    then F.  In local mode H is floored at 0, recording NONE when the
    floor wins or ties.  Predecessors not stored by `data` count as -inf.
    """
    H, E, F = data.H, data.E, data.F
    here = data.cell(i, j)
    up = data.cell(i - 1, j)
    left = data.cell(i, j - 1)
    diag = data.cell(i - 1, j - 1)

    # E: gap in seq2 (move up)
    if up is None:
        E[here] = -np.inf
        data.E_trace[here] = OPEN
    else:
        e_open = H[up] + gap_open
        e_extend = E[up] + gap_extend
        if e_open >= e_extend:
            E[here] = e_open
            data.E_trace[here] = OPEN
        else:
            E[here] = e_extend
            data.E_trace[here] = EXTEND

    # F: gap in seq1 (move left)
    if left is None:
        F[here] = -np.inf
        data.F_trace[here] = OPEN
    else:
        f_open = H[left] + gap_open
        f_extend = F[left] + gap_extend
        if f_open >= f_extend:
            F[here] = f_open
            data.F_trace[here] = OPEN
        else:
            F[here] = f_extend
            data.F_trace[here] = EXTEND

    # H: best of the three
    diagonal = -np.inf if diag is None else H[diag] + pair_score
    best = max(diagonal, E[here], F[here])
    if local and best <= 0:
        H[here] = 0.0
        data.H_trace[here] = Direction.NONE
        return
    H[here] = best
    if best == -np.inf:
        data.H_trace[here] = Direction.NONE
    elif diagonal == best:
        data.H_trace[here] = Direction.DIAGONAL
    elif E[here] == best:
        data.H_trace[here] = Direction.UP
    else:
        data.H_trace[here] = Direction.LEFT


def fill_gotoh(
    s1: str,
    s2: str,
    matrix: Mapping[str, Mapping[str, float]],
    gap_open: float,
    gap_extend: float,
    free_top: bool = False,
    free_left: bool = False,
    local: bool = False,
) -> GotohData:
    """
    Run the full-matrix affine-gap DP for (s1, s2).

    Parameters
    ----------
    s1, s2 : str
        Sequences on the rows and the columns.
    matrix : nested mapping
        Substitution scores, looked up with get_score.
    gap_open, gap_extend : float
        Affine gap penalties.
    free_top, free_left, local : bool
        Boundary conditions, see init_gotoh.

    Returns
    -------
    GotohData
    """
    m, n = len(s1), len(s2)
    logger.debug("Gotoh fill: %d x %d (free_top=%s, free_left=%s, local=%s)",
                 m, n, free_top, free_left, local)
    data = init_gotoh(m, n, gap_open, gap_extend,
                      free_top=free_top, free_left=free_left, local=local)
    for i in range(1, m + 1):
        a = s1[i - 1]
        for j in range(1, n + 1):
            gotoh_update(data, i, j, get_score(matrix, a, s2[j - 1]),
                         gap_open, gap_extend, local=local)
    return data


def traceback_gotoh(
    s1: str,
    s2: str,
    data: GotohData,
    i: int,
    j: int,
    local: bool = False,
) -> Tuple[str, str, int, int]:
    """
    Recover one best alignment ending at cell (i, j) in the H layer.

    The walk follows the H/E/F states and stops at (0, 0), at a cell whose
    H direction is NONE, or in local mode at a cell with H <= 0.

    Returns
    -------
    aligned1, aligned2 : str
        Aligned columns from the stopping cell to (i, j).
    stop_i, stop_j : int
        Cell where the walk stopped.
    """
    H = data.H
    aln1: List[str] = []
    aln2: List[str] = []
    state = "H"

    while True:
        if state == "H":
            if i == 0 and j == 0:
                break
            here = data.cell(i, j)
            if here is None:
                break
            if local and H[here] <= 0:
                break
            direction = data.H_trace[here]
            if direction == Direction.DIAGONAL:
                aln1.append(s1[i - 1])
                aln2.append(s2[j - 1])
                i, j = i - 1, j - 1
            elif direction == Direction.UP:
                state = "E"
            elif direction == Direction.LEFT:
                state = "F"
            else:
                break

        elif state == "E":  # gap in seq2, move up
            trace = data.E_trace[data.cell(i, j)]
            aln1.append(s1[i - 1])
            aln2.append(GAP)
            i -= 1
            state = "H" if trace == OPEN else "E"

        else:  # state == "F", gap in seq1, move left
            trace = data.F_trace[data.cell(i, j)]
            aln1.append(GAP)
            aln2.append(s2[j - 1])
            j -= 1
            state = "H" if trace == OPEN else "F"

    aln1.reverse()
    aln2.reverse()
    return "".join(aln1), "".join(aln2), i, j


# ---------------------------------------------------------------------------
# Direction-remembered primitive
# ---------------------------------------------------------------------------

def fill_direction(
    s1: str,
    s2: str,
    matrix: Mapping[str, Mapping[str, float]],
    gap_open: float,
    gap_extend: float,
    local: bool = False,
) -> DirectionData:
    """
    Single-matrix DP that prices a gap by its best predecessor's direction.

    A vertical move costs gap_extend if the cell above was itself reached
    by a vertical move, gap_open otherwise; likewise for horizontal moves.
    Global mode uses penalised borders and the tie order diagonal, up,
    left.  Local mode uses zero borders and takes a move only if it scores
    strictly above 0 and strictly above the earlier candidates.
    """
    m, n = len(s1), len(s2)
    logger.debug("Direction fill: %d x %d (local=%s)", m, n, local)
    H = np.zeros((m + 1, n + 1), dtype=float)
    trace = np.full((m + 1, n + 1), int(Direction.NONE), dtype=int)

    if not local:
        for i in range(1, m + 1):
            H[i, 0] = gap_open + gap_extend * (i - 1)
            trace[i, 0] = Direction.UP
        for j in range(1, n + 1):
            H[0, j] = gap_open + gap_extend * (j - 1)
            trace[0, j] = Direction.LEFT

    for i in range(1, m + 1):
        a = s1[i - 1]
        for j in range(1, n + 1):
            diagonal = H[i - 1, j - 1] + get_score(matrix, a, s2[j - 1])
            up = H[i - 1, j] + (gap_extend if trace[i - 1, j] == Direction.UP else gap_open)
            left = H[i, j - 1] + (gap_extend if trace[i, j - 1] == Direction.LEFT else gap_open)

            if local:
                best, direction = 0.0, Direction.NONE
                for value, candidate in ((diagonal, Direction.DIAGONAL),
                                         (up, Direction.UP),
                                         (left, Direction.LEFT)):
                    if value > best:
                        best, direction = value, candidate
            elif diagonal >= up and diagonal >= left:
                best, direction = diagonal, Direction.DIAGONAL
            elif up >= left:
                best, direction = up, Direction.UP
            else:
                best, direction = left, Direction.LEFT

            H[i, j] = best
            trace[i, j] = direction

    return DirectionData(H=H, trace=trace)


def traceback_direction(
    s1: str,
    s2: str,
    data: DirectionData,
    i: int,
    j: int,
    local: bool = False,
) -> Tuple[str, str, int, int]:
    """
    Follow recorded directions back from (i, j).

    Stops at (0, 0), at a NONE direction, or in local mode at a cell
    scoring <= 0.  Returns the aligned strings and the stopping cell.
    """
    aln1: List[str] = []
    aln2: List[str] = []
    while i > 0 or j > 0:
        if local and data.H[i, j] <= 0:
            break
        direction = data.trace[i, j]
        if direction == Direction.DIAGONAL:
            aln1.append(s1[i - 1])
            aln2.append(s2[j - 1])
            i, j = i - 1, j - 1
        elif direction == Direction.UP:
            aln1.append(s1[i - 1])
            aln2.append(GAP)
            i -= 1
        elif direction == Direction.LEFT:
            aln1.append(GAP)
            aln2.append(s2[j - 1])
            j -= 1
        else:
            break
    aln1.reverse()
    aln2.reverse()
    return "".join(aln1), "".join(aln2), i, j


# ---------------------------------------------------------------------------
# Result assembly
# ---------------------------------------------------------------------------

def alignment_stats(aligned1: str, aligned2: str) -> Tuple[int, int, float]:
    """
    Identity count, alignment length and identity percent of an alignment.

    identity_percent is 0.0 for an empty alignment.
    """
    identity = sum(1 for a, b in zip(aligned1, aligned2) if a == b and a != GAP)
    length = len(aligned1)
    percent = identity / length * 100 if length else 0.0
    return identity, length, percent


def finish_result(
    aligned1: str,
    aligned2: str,
    score: float,
    positions: Tuple[int, int, int, int],
    score_normalize: bool = False,
    data: Optional[DPData] = None,
) -> AlignmentResult:
    """
    Build an AlignmentResult from aligned strings and a raw score.

    positions is (start_pos1, start_pos2, end_pos1, end_pos2).  With
    score_normalize the score is divided by the alignment length; an
    empty alignment keeps its raw score.
    """
    identity, length, percent = alignment_stats(aligned1, aligned2)
    score = float(score)
    if score_normalize and length:
        score = score / length
    start1, start2, end1, end2 = positions
    return AlignmentResult(
        aligned_seq1=aligned1,
        aligned_seq2=aligned2,
        score=score,
        start_pos1=int(start1),
        start_pos2=int(start2),
        end_pos1=int(end1),
        end_pos2=int(end2),
        identity=identity,
        identity_percent=percent,
        alignment_length=length,
        data=data,
    )
