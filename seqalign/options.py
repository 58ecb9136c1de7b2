"""
options.py — alignment options and input preparation

AlignmentOptions carries the user's choices; any field left as None is
filled from the aligner's defaults in seqalign.default when the options
are resolved.  Gap penalties are validated here, once, for every aligner.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Tuple, Union

from .default import DEFAULTS, GAP_MODELS
from .errors import EmptySequence, InvalidGapPenalty, InvalidInputType
from .matrices import MatrixSpec, resolve_matrix


@dataclass(frozen=True)
class AlignmentOptions:
    """
    Options shared by all aligners.

    Attributes
    ----------
    matrix : str or nested mapping
        Registry name (case-insensitive) or a literal scoring matrix.

    gap_open, gap_extend : float
        Affine gap penalties, both <= 0.  The first column of a gap run
        costs gap_open, each further column gap_extend.  The space-efficient
        aligner charges gap_open for every gap column.

    case_normalize : bool
        Trim whitespace and upper-case both sequences before aligning.
        Honoured by the global and local aligners; the others always do it.

    score_normalize : bool
        Divide the final score by the alignment length.

    bandwidth : int
        Band half-width k for the banded aligner.

    min_score : float
        Local alignments scoring below this are returned empty.

    gap_model : {"affine", "direction"}
        Gap model of the global and local aligners.  "affine" is exact
        three-state Gotoh; "direction" reproduces the single-matrix scheme
        that remembers only the best predecessor's direction.
    """

    matrix: Optional[MatrixSpec] = None
    gap_open: Optional[float] = None
    gap_extend: Optional[float] = None
    case_normalize: Optional[bool] = None
    score_normalize: Optional[bool] = None
    bandwidth: Optional[int] = None
    min_score: Optional[float] = None
    gap_model: Optional[str] = None


_FIELD_NAMES = frozenset(f.name for f in fields(AlignmentOptions))


def resolve_options(
    options: Optional[AlignmentOptions],
    defaults: Mapping[str, Any],
    **overrides: Any,
) -> AlignmentOptions:
    """
    Merge explicit options, keyword overrides and aligner defaults.

    Precedence is overrides > options > defaults.  Fields an aligner has no
    default for stay None.

    Raises
    ------
    TypeError
        If an override names an unknown option.
    InvalidGapPenalty
        If gap_open or gap_extend is positive.
    ValueError
        If gap_model is not one of the known models.
    """
    unknown = set(overrides) - _FIELD_NAMES
    if unknown:
        raise TypeError(f"Unknown alignment option(s): {', '.join(sorted(unknown))}")

    if options is None:
        options = AlignmentOptions()
    elif not isinstance(options, AlignmentOptions):
        raise TypeError(
            f"options must be an AlignmentOptions, got {type(options).__name__}"
        )

    merged = {}
    for name in _FIELD_NAMES:
        value = overrides.get(name)
        if value is None:
            value = getattr(options, name)
        if value is None:
            value = defaults.get(name)
        merged[name] = value
    resolved = replace(options, **merged)

    for name in ("gap_open", "gap_extend"):
        value = getattr(resolved, name)
        if value is not None and value > 0:
            raise InvalidGapPenalty(f"{name} must be <= 0, got {value}")
    if resolved.gap_model is not None and resolved.gap_model not in GAP_MODELS:
        raise ValueError(
            f"Unknown gap model {resolved.gap_model!r}; expected one of {GAP_MODELS}"
        )
    return resolved


# ---------------------------------------------------------------------------
# Sequence preparation
# ---------------------------------------------------------------------------

def as_text(seq: Any, name: str) -> str:
    """
    Accept a str, or a non-str sequence of single characters.

    Raises InvalidInputType for anything else, before any normalisation.
    """
    if isinstance(seq, str):
        return seq
    if isinstance(seq, Sequence) and all(
        isinstance(c, str) and len(c) == 1 for c in seq
    ):
        return "".join(seq)
    raise InvalidInputType(f"{name} must be a string, got {type(seq).__name__}")


def prepare_sequences(
    seq1: Union[str, Sequence[str]],
    seq2: Union[str, Sequence[str]],
    normalize: bool = True,
    per_sequence_message: bool = False,
) -> Tuple[str, str]:
    """
    Type-check, optionally trim and upper-case, and reject empty inputs.

    Parameters
    ----------
    normalize : bool
        Trim surrounding whitespace and upper-case both sequences.
    per_sequence_message : bool
        Name the offending sequence in the EmptySequence message
        ("seq1 is empty or contains only whitespace") instead of the
        combined "sequences cannot be empty".
    """
    s1 = as_text(seq1, "seq1")
    s2 = as_text(seq2, "seq2")
    if normalize:
        s1 = s1.strip().upper()
        s2 = s2.strip().upper()

    if per_sequence_message:
        for name, s in (("seq1", s1), ("seq2", s2)):
            if not s.strip():
                raise EmptySequence(f"{name} is empty or contains only whitespace")
    elif not s1 or not s2:
        raise EmptySequence("sequences cannot be empty")
    return s1, s2


def prepare_call(
    variant: str,
    seq1: Any,
    seq2: Any,
    options: Optional[AlignmentOptions],
    overrides: Mapping[str, Any],
    honour_case: bool = False,
    per_sequence_message: bool = False,
):
    """
    Common entry sequence of every aligner.

    Checks input types first, then resolves options against the defaults
    of `variant`, then normalises and checks the sequences.  Aligners that
    do not honour case_normalize always trim and upper-case.

    Returns
    -------
    s1, s2 : str
        Prepared sequences.
    opts : AlignmentOptions
        Fully resolved options.
    matrix : nested mapping
        Resolved scoring matrix.
    """
    seq1 = as_text(seq1, "seq1")
    seq2 = as_text(seq2, "seq2")
    opts = resolve_options(options, DEFAULTS[variant], **overrides)
    normalize = bool(opts.case_normalize) if honour_case else True
    s1, s2 = prepare_sequences(seq1, seq2, normalize, per_sequence_message)
    return s1, s2, opts, resolve_matrix(opts.matrix)


class BaseAligner:
    """
    Holds resolved, immutable options and aligns pairs of sequences.

    Subclasses set `variant` (a key of seqalign.default.DEFAULTS) and
    `_align`, the module-level function doing the work.
    """

    variant = ""

    def __init__(self, options: Optional[AlignmentOptions] = None, **overrides: Any):
        self._options = resolve_options(options, DEFAULTS[self.variant], **overrides)

    @property
    def options(self) -> AlignmentOptions:
        return self._options

    def align(self, seq1, seq2, *, return_data: bool = False):
        return type(self)._align(seq1, seq2, self._options, return_data=return_data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._options!r})"
