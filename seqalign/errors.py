"""
errors.py — exception types raised by the aligners

Every error derives from AlignmentError and from the builtin exception a
caller would naturally catch (TypeError for bad input types, ValueError
for everything else).
"""


class AlignmentError(Exception):
    """Base class for all seqalign errors."""


class InvalidInputType(AlignmentError, TypeError):
    """A sequence argument is not a character sequence."""


class EmptySequence(AlignmentError, ValueError):
    """A sequence is empty after trimming."""


class InvalidGapPenalty(AlignmentError, ValueError):
    """A gap penalty is positive."""


class UnknownScoringMatrix(AlignmentError, ValueError):
    """A scoring matrix name is not in the registry."""


class BandConstraintViolated(AlignmentError, ValueError):
    """The banded aligner cannot produce an alignment inside the band."""
