"""
conftest.py — Shared pytest fixtures for the seqalign test suite

Provides common scoring parameters and random number generators used
across all test modules.
"""

import pytest
import numpy as np

from seqalign.validation import random_sequence

PROTEIN_ALPHABET = "ARNDCQEGHILKMFPSTWYV"


# ---------------------------------------------------------------------------
# Default scoring fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def score_matrix() -> str:
    """+5/-4 nucleotide matrix."""
    return "DNA_SIMPLE"


@pytest.fixture
def gap_open() -> float:
    """Gap opening penalty."""
    return -5.0


@pytest.fixture
def gap_extend() -> float:
    """Gap extension penalty."""
    return -2.0


@pytest.fixture
def scoring_params(score_matrix, gap_open, gap_extend):
    """Bundle all scoring parameters into a dict for easy unpacking."""
    return {
        "matrix": score_matrix,
        "gap_open": gap_open,
        "gap_extend": gap_extend,
    }


# ---------------------------------------------------------------------------
# Random number generator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(888)


@pytest.fixture
def rng_alt():
    """Alternative seed for diversity in randomized tests."""
    return np.random.default_rng(123)


# ---------------------------------------------------------------------------
# Sequence generation helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def random_dna_factory():
    """Factory fixture returning a function to generate random DNA strings."""
    def _random_dna(length: int, rng: np.random.Generator) -> str:
        return random_sequence(length, rng)
    return _random_dna


@pytest.fixture
def random_protein_factory():
    """Factory fixture returning a function to generate random protein strings."""
    def _random_protein(length: int, rng: np.random.Generator) -> str:
        return random_sequence(length, rng, alphabet=PROTEIN_ALPHABET)
    return _random_protein
