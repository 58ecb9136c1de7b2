"""
banded.py — global alignment restricted to a diagonal band

Only cells with |j - i| <= k are computed.  Each layer is stored in a
dense (m+1, 2k+1) buffer where cell (i, j) lives at column j - i + k;
anything outside the band reads as -inf.  The recurrence, boundary ramps
and tie-breaks are those of the full-matrix global aligner, so whenever
the optimal global alignment stays inside the band both give the same
score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .dp_core import (
    EXTEND,
    OPEN,
    AlignmentResult,
    Direction,
    GotohData,
    finish_result,
    gotoh_update,
    traceback_gotoh,
)
from .errors import BandConstraintViolated
from .matrices import get_score
from .options import AlignmentOptions, BaseAligner, prepare_call

logger = logging.getLogger(__name__)


@dataclass
class BandedData(GotohData):
    """
    Gotoh layers stored by (row, diagonal offset).

    Attributes
    ----------
    k : int
        Band half-width.
    n : int
        Length of seq2 (number of DP columns minus one).
    """

    k: int = 0
    n: int = 0

    def cell(self, i: int, j: int) -> Optional[Tuple[int, int]]:
        d = j - i
        if i < 0 or j < 0 or j > self.n or abs(d) > self.k:
            return None
        return (i, d + self.k)

    def dense(self, layer: str = "H") -> NDArray[np.floating]:
        """Full (m+1, n+1) view of a score layer, -inf outside the band."""
        band = getattr(self, layer)
        m = band.shape[0] - 1
        out = np.full((m + 1, self.n + 1), -np.inf, dtype=float)
        for i in range(m + 1):
            for j in range(max(0, i - self.k), min(self.n, i + self.k) + 1):
                out[i, j] = band[i, j - i + self.k]
        return out


def band_cells(m: int, n: int, k: int) -> int:
    """Number of DP cells (i, j), 0 <= i <= m, 0 <= j <= n, with |j - i| <= k."""
    total = 0
    for i in range(m + 1):
        lo, hi = max(0, i - k), min(n, i + k)
        if hi >= lo:
            total += hi - lo + 1
    return total


def init_banded(m: int, n: int, k: int, gap_open: float, gap_extend: float) -> BandedData:
    """
    Allocate band buffers and set the penalised borders inside the band.
    """
    shape = (m + 1, 2 * k + 1)
    data = BandedData(
        H=np.full(shape, -np.inf, dtype=float),
        E=np.full(shape, -np.inf, dtype=float),
        F=np.full(shape, -np.inf, dtype=float),
        H_trace=np.full(shape, int(Direction.NONE), dtype=int),
        E_trace=np.full(shape, OPEN, dtype=int),
        F_trace=np.full(shape, OPEN, dtype=int),
        k=k,
        n=n,
    )
    data.H[data.cell(0, 0)] = 0.0

    for j in range(1, min(k, n) + 1):
        c = data.cell(0, j)
        data.H[c] = data.F[c] = gap_open + (j - 1) * gap_extend
        data.H_trace[c] = Direction.LEFT
        data.F_trace[c] = OPEN if j == 1 else EXTEND

    for i in range(1, min(k, m) + 1):
        c = data.cell(i, 0)
        data.H[c] = data.E[c] = gap_open + (i - 1) * gap_extend
        data.H_trace[c] = Direction.UP
        data.E_trace[c] = OPEN if i == 1 else EXTEND

    return data


def align_banded(
    seq1,
    seq2,
    options: Optional[AlignmentOptions] = None,
    *,
    return_data: bool = False,
    **overrides: Any,
) -> AlignmentResult:
    """
    Banded global alignment.

    Parameters
    ----------
    seq1, seq2 : str or sequence of 1-char str
        Always trimmed and upper-cased.
    options : AlignmentOptions, optional
    return_data : bool, default False
        If True, attach the BandedData buffers to the result.
    **overrides
        Any AlignmentOptions field; bandwidth defaults to 10 and may be
        given as an integral float (2.0).

    Raises
    ------
    BandConstraintViolated
        If bandwidth is negative, if |len(seq1) - len(seq2)| > bandwidth,
        if (m, n) cannot be reached inside the band, or if the traceback
        stops short of (0, 0).
    """
    s1, s2, opts, matrix = prepare_call("banded", seq1, seq2, options, overrides)
    k = opts.bandwidth
    if isinstance(k, bool) or not isinstance(k, (int, float, np.integer, np.floating)):
        raise TypeError(f"bandwidth must be an integer, got {type(k).__name__}")
    if isinstance(k, (float, np.floating)) and not float(k).is_integer():
        raise TypeError(f"bandwidth must be an integer, got {k}")
    k = int(k)
    if k < 0:
        raise BandConstraintViolated("bandwidth must be non-negative")

    m, n = len(s1), len(s2)
    diff = abs(m - n)
    if diff > k:
        raise BandConstraintViolated(
            f"Sequence length difference ({diff}) exceeds bandwidth ({k}). "
            f"Increase bandwidth or use standard alignment."
        )

    logger.debug("Banded fill: %d x %d, k=%d, %d cells", m, n, k, band_cells(m, n, k))
    gs, ge = opts.gap_open, opts.gap_extend
    data = init_banded(m, n, k, gs, ge)
    for i in range(1, m + 1):
        a = s1[i - 1]
        for j in range(max(1, i - k), min(n, i + k) + 1):
            gotoh_update(data, i, j, get_score(matrix, a, s2[j - 1]), gs, ge)

    score = data.H[data.cell(m, n)]
    if score == -np.inf:
        raise BandConstraintViolated(
            f"Alignment could not reach end position - sequences may diverge "
            f"beyond bandwidth ({k}). Increase bandwidth or use standard alignment."
        )

    aligned1, aligned2, i, j = traceback_gotoh(s1, s2, data, m, n)
    if (i, j) != (0, 0):
        raise BandConstraintViolated(
            f"Traceback failed at position ({i},{j}). "
            f"This may indicate bandwidth is too small."
        )

    return finish_result(
        aligned1, aligned2, score, (0, 0, m, n),
        score_normalize=opts.score_normalize,
        data=data if return_data else None,
    )


class BandedAligner(BaseAligner):
    """Banded global aligner with fixed options."""

    variant = "banded"
    _align = staticmethod(align_banded)
