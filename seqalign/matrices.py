"""
matrices.py — substitution matrices for pairwise alignment

This module holds the built-in scoring matrices and the small API used by
every aligner to look them up:

  - MATRICES        : registry of built-in matrices by name.
  - get_matrix      : case-insensitive lookup by name.
  - get_score       : symmetric pair lookup, 0 for unknown symbols.
  - resolve_matrix  : accept either a registry name or a literal matrix.
  - simple_matrix   : match/mismatch matrix over a small alphabet.
  - matrix_to_array : (alphabet, ndarray) view for plotting and numeric work.

A ScoringMatrix is a plain nested mapping, matrix[a][b] -> score.  The
tables below are kept in the NCBI text layout and parsed on import.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import UnknownScoringMatrix

ScoringMatrix = Dict[str, Dict[str, float]]
MatrixSpec = Union[str, Mapping[str, Mapping[str, float]]]


# ---------------------------------------------------------------------------
# Raw tables (rows and columns in the same order)
# ---------------------------------------------------------------------------

# BLOSUM45: distantly related proteins.
_BLOSUM45 = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  5 -2 -1 -2 -1 -1 -1  0 -2 -1 -1 -1 -1 -2 -1  1  0 -2 -2  0
R -2  7  0 -1 -3  1  0 -2  0 -3 -2  3 -1 -2 -2 -1 -1 -2 -1 -2
N -1  0  6  2 -2  0  0  0  1 -2 -3  0 -2 -2 -2  1  0 -4 -2 -3
D -2 -1  2  7 -3  0  2 -1  0 -4 -3  0 -3 -4 -1  0 -1 -4 -2 -3
C -1 -3 -2 -3 12 -3 -3 -3 -3 -3 -2 -3 -2 -2 -4 -1 -1 -5 -3 -1
Q -1  1  0  0 -3  6  2 -2  1 -2 -2  1  0 -4 -1  0 -1 -2 -1 -3
E -1  0  0  2 -3  2  6 -2  0 -3 -2  1 -2 -3  0  0 -1 -3 -2 -3
G  0 -2  0 -1 -3 -2 -2  7 -2 -4 -3 -2 -2 -3 -2  0 -2 -2 -3 -3
H -2  0  1  0 -3  1  0 -2 10 -3 -2 -1  0 -2 -2 -1 -2 -3  2 -3
I -1 -3 -2 -4 -3 -2 -3 -4 -3  5  2 -3  2  0 -2 -2 -1 -2  0  3
L -1 -2 -3 -3 -2 -2 -2 -3 -2  2  5 -3  2  1 -3 -3 -1 -2  0  1
K -1  3  0  0 -3  1  1 -2 -1 -3 -3  5 -1 -3 -1 -1 -1 -2 -1 -2
M -1 -1 -2 -3 -2  0 -2 -2  0  2  2 -1  6  0 -2 -2 -1 -2  0  1
F -2 -2 -2 -4 -2 -4 -3 -3 -2  0  1 -3  0  8 -3 -2 -1  1  3  0
P -1 -2 -2 -1 -4 -1  0 -2 -2 -2 -3 -1 -2 -3  9 -1 -1 -3 -3 -3
S  1 -1  1  0 -1  0  0  0 -1 -2 -3 -1 -2 -2 -1  4  2 -4 -2 -1
T  0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -1 -1  2  5 -3 -1  0
W -2 -2 -4 -4 -5 -2 -3 -2 -3 -2 -2 -2 -2  1 -3 -4 -3 15  3 -3
Y -2 -1 -2 -2 -3 -1 -2 -3  2  0  0 -1  0  3 -3 -2 -1  3  8 -1
V  0 -2 -3 -3 -1 -3 -3 -3 -3  3  1 -2  1  0 -3 -1  0 -3 -1  5
"""

# BLOSUM50.
_BLOSUM50 = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  5 -2 -1 -2 -1 -1 -1  0 -2 -1 -2 -1 -1 -3 -1  1  0 -3 -2  0
R -2  7 -1 -2 -4  1  0 -3  0 -4 -3  3 -2 -3 -3 -1 -1 -3 -1 -3
N -1 -1  7  2 -2  0  0  0  1 -3 -4  0 -2 -4 -2  1  0 -4 -2 -3
D -2 -2  2  8 -4  0  2 -1 -1 -4 -4 -1 -4 -5 -1  0 -1 -5 -3 -4
C -1 -4 -2 -4 13 -3 -3 -3 -3 -2 -2 -3 -2 -2 -4 -1 -1 -5 -3 -1
Q -1  1  0  0 -3  7  2 -2  1 -3 -2  2  0 -4 -1  0 -1 -1 -1 -3
E -1  0  0  2 -3  2  6 -3  0 -4 -3  1 -2 -3 -1 -1 -1 -3 -2 -3
G  0 -3  0 -1 -3 -2 -3  8 -2 -4 -4 -2 -3 -4 -2  0 -2 -3 -3 -4
H -2  0  1 -1 -3  1  0 -2 10 -4 -3  0 -1 -1 -2 -1 -2 -3  2 -4
I -1 -4 -3 -4 -2 -3 -4 -4 -4  5  2 -3  2  0 -3 -3 -1 -3 -1  4
L -2 -3 -4 -4 -2 -2 -3 -4 -3  2  5 -3  3  1 -4 -3 -1 -2 -1  1
K -1  3  0 -1 -3  2  1 -2  0 -3 -3  6 -2 -4 -1  0 -1 -3 -2 -3
M -1 -2 -2 -4 -2  0 -2 -3 -1  2  3 -2  7  0 -3 -2 -1 -1  0  1
F -3 -3 -4 -5 -2 -4 -3 -4 -1  0  1 -4  0  8 -4 -3 -2  1  4 -1
P -1 -3 -2 -1 -4 -1 -1 -2 -2 -3 -4 -1 -3 -4 10 -1 -1 -4 -3 -3
S  1 -1  1  0 -1  0 -1  0 -1 -3 -3  0 -2 -3 -1  5  2 -4 -2 -2
T  0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -2 -1  2  5 -3 -2  0
W -3 -3 -4 -5 -5 -1 -3 -3 -3 -3 -2 -3 -1  1 -4 -4 -3 15  2 -3
Y -2 -1 -2 -3 -3 -1 -2 -3  2 -1 -1 -2  0  4 -3 -2 -2  2  8 -1
V  0 -3 -3 -4 -1 -3 -3 -4 -4  4  1 -3  1 -1 -3 -2  0 -3 -1  5
"""

# BLOSUM62: the default for protein alignment.
_BLOSUM62 = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  4 -1 -2 -2  0 -1 -1  0 -2 -1 -1 -1 -1 -2 -1  1  0 -3 -2  0
R -1  5  0 -2 -3  1  0 -2  0 -3 -2  2 -1 -3 -2 -1 -1 -3 -2 -3
N -2  0  6  1 -3  0  0  0  1 -3 -3  0 -2 -3 -2  1  0 -4 -2 -3
D -2 -2  1  6 -3  0  2 -1 -1 -3 -4 -1 -3 -3 -1  0 -1 -4 -3 -3
C  0 -3 -3 -3  9 -3 -4 -3 -3 -1 -1 -3 -1 -2 -3 -1 -1 -2 -2 -1
Q -1  1  0  0 -3  5  2 -2  0 -3 -2  1  0 -3 -1  0 -1 -2 -1 -2
E -1  0  0  2 -4  2  5 -2  0 -3 -3  1 -2 -3 -1  0 -1 -3 -2 -2
G  0 -2  0 -1 -3 -2 -2  6 -2 -4 -4 -2 -3 -3 -2  0 -2 -2 -3 -3
H -2  0  1 -1 -3  0  0 -2  8 -3 -3 -1 -2 -1 -2 -1 -2 -2  2 -3
I -1 -3 -3 -3 -1 -3 -3 -4 -3  4  2 -3  1  0 -3 -2 -1 -3 -1  3
L -1 -2 -3 -4 -1 -2 -3 -4 -3  2  4 -2  2  0 -3 -2 -1 -2 -1  1
K -1  2  0 -1 -3  1  1 -2 -1 -3 -2  5 -1 -3 -1  0 -1 -3 -2 -2
M -1 -1 -2 -3 -1  0 -2 -3 -2  1  2 -1  5  0 -2 -1 -1 -1 -1  1
F -2 -3 -3 -3 -2 -3 -3 -3 -1  0  0 -3  0  6 -4 -2 -2  1  3 -1
P -1 -2 -2 -1 -3 -1 -1 -2 -2 -3 -3 -1 -2 -4  7 -1 -1 -4 -3 -2
S  1 -1  1  0 -1  0  0  0 -1 -2 -2  0 -1 -2 -1  4  1 -3 -2 -2
T  0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -2 -1  1  5 -2 -2  0
W -3 -3 -4 -4 -2 -2 -3 -2 -2 -3 -2 -3 -1  1 -4 -3 -2 11  2 -3
Y -2 -2 -2 -3 -2 -1 -2 -3  2 -1 -1 -2 -1  3 -3 -2 -2  2  7 -1
V  0 -3 -3 -3 -1 -2 -2 -3 -3  3  1 -2  1 -1 -2 -2  0 -3 -1  4
"""

# BLOSUM80: closely related proteins.
_BLOSUM80 = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  7 -3 -3 -3 -1 -2 -2  0 -3 -3 -3 -1 -2 -4 -1  2  0 -5 -4 -1
R -3  9 -1 -3 -6  1 -1 -4  0 -5 -4  3 -3 -5 -3 -2 -2 -5 -4 -4
N -3 -1  9  2 -5  0 -1 -1  1 -6 -6  0 -4 -6 -4  1  0 -6 -4 -5
D -3 -3  2 10 -7 -1  2 -3 -2 -7 -7 -2 -6 -6 -3 -1 -2 -8 -6 -6
C -1 -6 -5 -7 13 -5 -7 -6 -7 -2 -3 -6 -3 -4 -6 -2 -2 -5 -5 -2
Q -2  1  0 -1 -5  9  3 -4  1 -5 -4  2 -1 -6 -3 -1 -1 -4 -3 -4
E -2 -1 -1  2 -7  3  8 -4  0 -6 -6  1 -4 -6 -2 -1 -2 -6 -5 -4
G  0 -4 -1 -3 -6 -4 -4  9 -4 -7 -7 -3 -5 -6 -4 -1 -3 -6 -6 -6
H -3  0  1 -2 -7  1  0 -4 12 -6 -5 -1 -4 -2 -4 -2 -3 -4  3 -6
I -3 -5 -6 -7 -2 -5 -6 -7 -6  7  2 -5  2 -2 -5 -4 -2 -5 -3  4
L -3 -4 -6 -7 -3 -4 -6 -7 -5  2  6 -4  3  0 -5 -5 -3 -4 -3  1
K -1  3  0 -2 -6  2  1 -3 -1 -5 -4  8 -3 -5 -2 -1 -1 -6 -4 -4
M -2 -3 -4 -6 -3 -1 -4 -5 -4  2  3 -3 10  0 -4 -3 -2 -3 -3  1
F -4 -5 -6 -6 -4 -6 -6 -6 -2 -2  0 -5  0 10 -6 -4 -4  0  4 -3
P -1 -3 -4 -3 -6 -3 -2 -4 -4 -5 -5 -2 -4 -6 12 -2 -3 -7 -6 -4
S  2 -2  1 -1 -2 -1 -1 -1 -2 -4 -5 -1 -3 -4 -2  7  2 -6 -3 -3
T  0 -2  0 -2 -2 -1 -2 -3 -3 -2 -3 -1 -2 -4 -3  2  8 -5 -3  0
W -5 -5 -6 -8 -5 -4 -6 -6 -4 -5 -4 -6 -3  0 -7 -6 -5 16  3 -5
Y -4 -4 -4 -6 -5 -3 -5 -6  3 -3 -3 -4 -3  4 -6 -3 -3  3 11 -3
V -1 -4 -5 -6 -2 -4 -4 -6 -6  4  1 -4  1 -3 -4 -3  0 -5 -3  7
"""

# BLOSUM90.
_BLOSUM90 = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  5 -2 -2 -3 -1 -1 -1  0 -2 -2 -2 -1 -2 -3 -1  1  0 -4 -3 -1
R -2  6 -1 -3 -5  1 -1 -3  0 -4 -3  2 -2 -4 -3 -1 -2 -4 -3 -3
N -2 -1  7  1 -4  0 -1 -1  0 -4 -4  0 -3 -4 -3  0  0 -5 -3 -4
D -3 -3  1  7 -5 -1  1 -2 -2 -5 -5 -1 -4 -5 -3 -1 -2 -6 -4 -5
C -1 -5 -4 -5  9 -4 -6 -4 -5 -2 -2 -4 -2 -3 -4 -2 -2 -4 -4 -2
Q -1  1  0 -1 -4  7  2 -3  1 -4 -3  1  0 -4 -2 -1 -1 -3 -3 -3
E -1 -1 -1  1 -6  2  6 -3 -1 -4 -4  0 -3 -5 -2 -1 -1 -5 -4 -3
G  0 -3 -1 -2 -4 -3 -3  6 -3 -5 -5 -2 -4 -5 -3 -1 -3 -4 -5 -5
H -2  0  0 -2 -5  1 -1 -3  8 -4 -4 -1 -3 -2 -3 -2 -2 -3  1 -4
I -2 -4 -4 -5 -2 -4 -4 -5 -4  5  1 -4  1 -1 -4 -3 -1 -4 -2  3
L -2 -3 -4 -5 -2 -3 -4 -5 -4  1  5 -3  2  0 -4 -3 -2 -3 -2  0
K -1  2  0 -1 -4  1  0 -2 -1 -4 -3  6 -2 -4 -2 -1 -1 -5 -3 -3
M -2 -2 -3 -4 -2  0 -3 -4 -3  1  2 -2  7 -1 -3 -2 -1 -2 -2  0
F -3 -4 -4 -5 -3 -4 -5 -5 -2 -1  0 -4 -1  7 -4 -3 -3  0  3 -2
P -1 -3 -3 -3 -4 -2 -2 -3 -3 -4 -4 -2 -3 -4  8 -2 -2 -5 -4 -3
S  1 -1  0 -1 -2 -1 -1 -1 -2 -3 -3 -1 -2 -3 -2  5  1 -4 -3 -2
T  0 -2  0 -2 -2 -1 -1 -3 -2 -1 -2 -1 -1 -3 -2  1  6 -4 -2 -1
W -4 -4 -5 -6 -4 -3 -5 -4 -3 -4 -3 -5 -2  0 -5 -4 -4 11  2 -3
Y -3 -3 -3 -4 -4 -3 -4 -5  1 -2 -2 -3 -2  3 -4 -3 -2  2  8 -3
V -1 -3 -4 -5 -2 -3 -3 -5 -4  3  0 -3  0 -2 -3 -2 -1 -3 -3  5
"""

# PAM30: short, highly similar peptides.
_PAM30 = """
    A   R   N   D   C   Q   E   G   H   I   L   K   M   F   P   S   T   W   Y   V
A   6  -7  -4  -3  -6  -4  -2  -2  -7  -5  -6  -7  -5  -8  -2   0  -1 -13  -8  -2
R  -7   8  -6 -10  -8  -2  -9  -9  -2  -5  -8   0  -4  -9  -4  -3  -6  -2 -10  -8
N  -4  -6   8   2 -11  -3  -2  -3   0  -5  -7  -1  -9  -9  -6   0  -2  -8  -4  -8
D  -3 -10   2   8 -14  -2   2  -3  -4  -7 -12  -4 -11 -15  -8  -4  -5 -15 -11  -8
C  -6  -8 -11 -14  10 -14 -14  -9  -7  -6 -15 -14 -13 -13  -8  -3  -8 -15  -4  -6
Q  -4  -2  -3  -2 -14   8   1  -7   1  -8  -5  -3  -4 -13  -3  -5  -5 -13 -12  -7
E  -2  -9  -2   2 -14   1   8  -4  -5  -5  -9  -4  -7 -14  -5  -4  -6 -17  -8  -6
G  -2  -9  -3  -3  -9  -7  -4   6  -9 -11 -10  -7  -8  -9  -6  -2  -6 -15 -14  -5
H  -7  -2   0  -4  -7   1  -5  -9   9  -9  -6  -6 -10  -6  -4  -6  -7  -7  -3  -6
I  -5  -5  -5  -7  -6  -8  -5 -11  -9   8  -1  -6  -1  -2  -8  -7  -2 -14  -6   2
L  -6  -8  -7 -12 -15  -5  -9 -10  -6  -1   7  -8   1  -3  -7  -8  -7  -6  -7  -2
K  -7   0  -1  -4 -14  -3  -4  -7  -6  -6  -8   7  -2 -14  -6  -4  -3 -12  -9  -9
M  -5  -4  -9 -11 -13  -4  -7  -8 -10  -1   1  -2  11  -4  -8  -5  -4 -13 -11  -1
F  -8  -9  -9 -15 -13 -13 -14  -9  -6  -2  -3 -14  -4   9 -10  -6  -9  -4   2  -8
P  -2  -4  -6  -8  -8  -3  -5  -6  -4  -8  -7  -6  -8 -10   8  -2  -4 -14 -13  -6
S   0  -3   0  -4  -3  -5  -4  -2  -6  -7  -8  -4  -5  -6  -2   6   0  -5  -7  -6
T  -1  -6  -2  -5  -8  -5  -6  -6  -7  -2  -7  -3  -4  -9  -4   0   7 -13  -6  -3
W -13  -2  -8 -15 -15 -13 -17 -15  -7 -14  -6 -12 -13  -4 -14  -5 -13  13  -5 -15
Y  -8 -10  -4 -11  -4 -12  -8 -14  -3  -6  -7  -9 -11   2 -13  -7  -6  -5  10  -7
V  -2  -8  -8  -8  -6  -7  -6  -5  -6   2  -2  -9  -1  -8  -6  -6  -3 -15  -7   7
"""

# PAM70.
_PAM70 = """
    A   R   N   D   C   Q   E   G   H   I   L   K   M   F   P   S   T   W   Y   V
A   5  -4  -2  -1  -4  -2  -1   0  -4  -2  -4  -4  -3  -6   0   1   1  -9  -5  -1
R  -4   8  -3  -6  -5   0  -5  -6   0  -3  -6   2  -2  -7  -2  -1  -4   0  -7  -5
N  -2  -3   6   3  -7  -1   0  -1   1  -3  -5   0  -5  -6  -3   1   0  -6  -3  -5
D  -1  -6   3   6  -9   0   3  -1  -1  -5  -8  -2  -7 -10  -4  -1  -2 -10  -7  -5
C  -4  -5  -7  -9   9  -9  -9  -6  -5  -4 -10  -9  -9  -8  -5  -1  -5 -11  -2  -4
Q  -2   0  -1   0  -9   7   2  -4   2  -5  -3  -1  -2  -9  -1  -3  -3  -8  -8  -4
E  -1  -5   0   3  -9   2   6  -2  -2  -4  -6  -2  -4  -9  -3  -2  -3 -11  -6  -4
G   0  -6  -1  -1  -6  -4  -2   6  -6  -6  -7  -5  -6  -7  -3   0  -3 -10  -9  -3
H  -4   0   1  -1  -5   2  -2  -6   8  -6  -4  -3  -6  -4  -2  -3  -4  -5  -1  -4
I  -2  -3  -3  -5  -4  -5  -4  -6  -6   7   1  -4   1   0  -5  -4  -1  -9  -4   3
L  -4  -6  -5  -8 -10  -3  -6  -7  -4   1   6  -5   2  -1  -5  -6  -4  -4  -4   0
K  -4   2   0  -2  -9  -1  -2  -5  -3  -4  -5   6   0  -9  -4  -2  -1  -7  -7  -6
M  -3  -2  -5  -7  -9  -2  -4  -6  -6   1   2   0  10  -2  -5  -3  -2  -8  -7   0
F  -6  -7  -6 -10  -8  -9  -9  -7  -4   0  -1  -9  -2   8  -7  -4  -6  -2   4  -5
P   0  -2  -3  -4  -5  -1  -3  -3  -2  -5  -5  -4  -5  -7   7   0  -2  -9  -9  -3
S   1  -1   1  -1  -1  -3  -2   0  -3  -4  -6  -2  -3  -4   0   5   2  -3  -5  -3
T   1  -4   0  -2  -5  -3  -3  -3  -4  -1  -4  -1  -2  -6  -2   2   6  -8  -4  -1
W  -9   0  -6 -10 -11  -8 -11 -10  -5  -9  -4  -7  -8  -2  -9  -3  -8  13  -3 -10
Y  -5  -7  -3  -7  -2  -8  -6  -9  -1  -4  -4  -7  -7   4  -9  -5  -4  -3   9  -5
V  -1  -5  -5  -5  -4  -4  -4  -3  -4   3   0  -6   0  -5  -3  -3  -1 -10  -5   6
"""

# PAM120.
_PAM120 = """
    A   R   N   D   C   Q   E   G   H   I   L   K   M   F   P   S   T   W   Y   V
A   3  -3  -1   0  -3  -1   0   1  -3  -1  -3  -2  -2  -4   1   1   1  -7  -4   0
R  -3   6  -1  -3  -4   1  -3  -4   1  -2  -4   2  -1  -5  -1  -1  -2   1  -5  -3
N  -1  -1   4   2  -5   0   1   0   2  -2  -4   1  -3  -4  -2   1   0  -4  -2  -3
D   0  -3   2   5  -7   1   3   0   0  -3  -5  -1  -4  -7  -3   0  -1  -8  -5  -3
C  -3  -4  -5  -7   9  -7  -7  -4  -4  -3  -7  -7  -6  -6  -4   0  -3  -8  -1  -3
Q  -1   1   0   1  -7   6   2  -3   3  -3  -2   0  -1  -6   0  -2  -2  -6  -5  -3
E   0  -3   1   3  -7   2   5  -1  -1  -3  -4  -1  -3  -7  -2  -1  -2  -8  -5  -3
G   1  -4   0   0  -4  -3  -1   5  -4  -4  -5  -3  -4  -5  -2   1  -1  -8  -6  -2
H  -3   1   2   0  -4   3  -1  -4   7  -4  -3  -2  -4  -3  -1  -2  -3  -3  -1  -3
I  -1  -2  -2  -3  -3  -3  -3  -4  -4   6   1  -3   1   0  -3  -2   0  -6  -2   3
L  -3  -4  -4  -5  -7  -2  -4  -5  -3   1   5  -4   3   0  -3  -4  -3  -3  -2   1
K  -2   2   1  -1  -7   0  -1  -3  -2  -3  -4   5   0  -7  -2  -1  -1  -5  -5  -4
M  -2  -1  -3  -4  -6  -1  -3  -4  -4   1   3   0   8  -1  -3  -2  -1  -6  -4   1
F  -4  -5  -4  -7  -6  -6  -7  -5  -3   0   0  -7  -1   8  -5  -3  -4  -1   4  -3
P   1  -1  -2  -3  -4   0  -2  -2  -1  -3  -3  -2  -3  -5   6   1  -1  -7  -6  -2
S   1  -1   1   0   0  -2  -1   1  -2  -2  -4  -1  -2  -3   1   3   2  -2  -3  -2
T   1  -2   0  -1  -3  -2  -2  -1  -3   0  -3  -1  -1  -4  -1   2   4  -6  -3   0
W  -7   1  -4  -8  -8  -6  -8  -8  -3  -6  -3  -5  -6  -1  -7  -2  -6  12  -2  -8
Y  -4  -5  -2  -5  -1  -5  -5  -6  -1  -2  -2  -5  -4   4  -6  -3  -3  -2   8  -3
V   0  -3  -3  -3  -3  -3  -3  -2  -3   3   1  -4   1  -3  -2  -2   0  -8  -3   5
"""

# PAM250: distant homologs.
_PAM250 = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  2 -2  0  0 -2  0  0  1 -1 -1 -2 -1 -1 -3  1  1  1 -6 -3  0
R -2  6  0 -1 -4  1 -1 -3  2 -2 -3  3  0 -4  0  0 -1  2 -4 -2
N  0  0  2  2 -4  1  1  0  2 -2 -3  1 -2 -3  0  1  0 -4 -2 -2
D  0 -1  2  4 -5  2  3  1  1 -2 -4  0 -3 -6 -1  0  0 -7 -4 -2
C -2 -4 -4 -5 12 -5 -5 -3 -3 -2 -6 -5 -5 -4 -3  0 -2 -8  0 -2
Q  0  1  1  2 -5  4  2 -1  3 -2 -2  1 -1 -5  0 -1 -1 -5 -4 -2
E  0 -1  1  3 -5  2  4  0  1 -2 -3  0 -2 -5 -1  0  0 -7 -4 -2
G  1 -3  0  1 -3 -1  0  5 -2 -3 -4 -2 -3 -5  0  1  0 -7 -5 -1
H -1  2  2  1 -3  3  1 -2  6 -2 -2  0 -2 -2  0 -1 -1 -3  0 -2
I -1 -2 -2 -2 -2 -2 -2 -3 -2  5  2 -2  2  1 -2 -1  0 -5 -1  4
L -2 -3 -3 -4 -6 -2 -3 -4 -2  2  6 -3  4  2 -3 -3 -2 -2 -1  2
K -1  3  1  0 -5  1  0 -2  0 -2 -3  5  0 -5 -1  0  0 -3 -4 -2
M -1  0 -2 -3 -5 -1 -2 -3 -2  2  4  0  6  0 -2 -2 -1 -4 -2  2
F -3 -4 -3 -6 -4 -5 -5 -5 -2  1  2 -5  0  9 -5 -3 -3  0  7 -1
P  1  0  0 -1 -3  0 -1  0  0 -2 -3 -1 -2 -5  6  1  0 -6 -5 -1
S  1  0  1  0  0 -1  0  1 -1 -1 -3  0 -2 -3  1  2  1 -2 -3 -1
T  1 -1  0  0 -2 -1  0  0 -1  0 -2  0 -1 -3  0  1  3 -5 -3  0
W -6  2 -4 -7 -8 -5 -7 -7 -3 -5 -2 -3 -4  0 -6 -2 -5 17  0 -6
Y -3 -4 -2 -4  0 -4 -4 -5  0 -1 -1 -4 -2  7 -5 -3 -3  0 10 -2
V  0 -2 -2 -2 -2 -2 -2 -1 -2  4  2 -2  2 -1 -1 -1  0 -6 -2  4
"""

# Match +5, mismatch -4. T and U are interchangeable, N never matches.
_DNA_SIMPLE = """
   A  C  G  T  U  N
A  5 -4 -4 -4 -4 -4
C -4  5 -4 -4 -4 -4
G -4 -4  5 -4 -4 -4
T -4 -4 -4  5  5 -4
U -4 -4 -4  5  5 -4
N -4 -4 -4 -4 -4 -4
"""

# Match +5, transition (A/G, C/T) -1, transversion -4.
_DNA_FULL = """
   A  C  G  T  U  N
A  5 -4 -1 -4 -4 -4
C -4  5 -4 -1 -1 -4
G -1 -4  5 -4 -4 -4
T -4 -1 -4  5  5 -4
U -4 -1 -4  5  5 -4
N -4 -4 -4 -4 -4 -4
"""

# ---------------------------------------------------------------------------
# Parsing and registry
# ---------------------------------------------------------------------------

def _parse_table(text: str) -> ScoringMatrix:
    """
    Parse a whitespace-separated square table into a nested mapping.

    The first line holds the column symbols; every following line holds a
    row symbol followed by one integer score per column.
    """
    lines = [line.split() for line in text.strip().splitlines()]
    columns = lines[0]
    matrix: ScoringMatrix = {}
    for row in lines[1:]:
        symbol, scores = row[0], row[1:]
        if len(scores) != len(columns):
            raise ValueError(
                f"Row {symbol!r} has {len(scores)} scores, expected {len(columns)}"
            )
        matrix[symbol] = {c: int(s) for c, s in zip(columns, scores)}
    return matrix


BLOSUM45: ScoringMatrix = _parse_table(_BLOSUM45)
BLOSUM50: ScoringMatrix = _parse_table(_BLOSUM50)
BLOSUM62: ScoringMatrix = _parse_table(_BLOSUM62)
BLOSUM80: ScoringMatrix = _parse_table(_BLOSUM80)
BLOSUM90: ScoringMatrix = _parse_table(_BLOSUM90)
PAM30: ScoringMatrix = _parse_table(_PAM30)
PAM70: ScoringMatrix = _parse_table(_PAM70)
PAM120: ScoringMatrix = _parse_table(_PAM120)
PAM250: ScoringMatrix = _parse_table(_PAM250)
DNA_SIMPLE: ScoringMatrix = _parse_table(_DNA_SIMPLE)
DNA_FULL: ScoringMatrix = _parse_table(_DNA_FULL)

MATRICES: Dict[str, ScoringMatrix] = {
    "BLOSUM45": BLOSUM45,
    "BLOSUM50": BLOSUM50,
    "BLOSUM62": BLOSUM62,
    "BLOSUM80": BLOSUM80,
    "BLOSUM90": BLOSUM90,
    "PAM30": PAM30,
    "PAM70": PAM70,
    "PAM120": PAM120,
    "PAM250": PAM250,
    "DNA_SIMPLE": DNA_SIMPLE,
    "DNA_FULL": DNA_FULL,
}


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def get_matrix(name: str) -> ScoringMatrix:
    """
    Return a built-in scoring matrix by name (case-insensitive).

    Raises
    ------
    UnknownScoringMatrix
        If the name is not registered.  The message lists every
        available name.
    """
    matrix = MATRICES.get(name.upper())
    if matrix is None:
        raise UnknownScoringMatrix(
            f"Unknown scoring matrix: {name}. "
            f"Available matrices: {', '.join(MATRICES)}"
        )
    return matrix


def get_score(matrix: Mapping[str, Mapping[str, float]], a: str, b: str) -> float:
    """
    Score for aligning characters a and b.

    Both characters are upper-cased first.  A pair missing from the matrix
    scores 0; this function never raises for unknown symbols.
    """
    row = matrix.get(a.upper())
    if row is None:
        return 0
    return row.get(b.upper(), 0)


def resolve_matrix(matrix: MatrixSpec) -> Mapping[str, Mapping[str, float]]:
    """Turn a registry name or a literal nested mapping into a matrix."""
    if isinstance(matrix, str):
        return get_matrix(matrix)
    if isinstance(matrix, Mapping):
        return matrix
    raise TypeError(
        f"matrix must be a matrix name or a nested mapping, got {type(matrix).__name__}"
    )


# ---------------------------------------------------------------------------
# Construction and conversion helpers
# ---------------------------------------------------------------------------

def simple_matrix(
    match: float,
    mismatch: float,
    alphabet: str = "ACGTUN",
) -> ScoringMatrix:
    """
    Build a match/mismatch matrix over `alphabet`.

    Usage:
        align_local(s1, s2, matrix=simple_matrix(5, -4), gap_open=-3)
    """
    symbols = list(dict.fromkeys(alphabet.upper()))
    return {
        a: {b: (match if a == b else mismatch) for b in symbols}
        for a in symbols
    }


def matrix_to_array(
    matrix: MatrixSpec,
) -> Tuple[List[str], NDArray[np.floating]]:
    """
    Dense view of a scoring matrix.

    Returns
    -------
    alphabet : list of str
        Row symbols in the matrix's own order, followed by any symbols that
        only appear as columns.
    scores : (K, K) array of float
        scores[i, j] = get_score(matrix, alphabet[i], alphabet[j]).
    """
    matrix = resolve_matrix(matrix)
    alphabet = list(matrix)
    for row in matrix.values():
        for symbol in row:
            if symbol not in alphabet:
                alphabet.append(symbol)

    scores = np.zeros((len(alphabet), len(alphabet)), dtype=float)
    for i, a in enumerate(alphabet):
        for j, b in enumerate(alphabet):
            scores[i, j] = get_score(matrix, a, b)
    return alphabet, scores


def is_symmetric(matrix: MatrixSpec) -> bool:
    """True if matrix[a][b] == matrix[b][a] for every pair of symbols."""
    _, scores = matrix_to_array(matrix)
    return bool(np.array_equal(scores, scores.T))


def transpose(matrix: MatrixSpec) -> ScoringMatrix:
    """Matrix with rows and columns swapped: result[b][a] == matrix[a][b]."""
    matrix = resolve_matrix(matrix)
    out: ScoringMatrix = {}
    for a, row in matrix.items():
        for b, score in row.items():
            out.setdefault(b, {})[a] = score
    return out
