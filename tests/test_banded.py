# test_banded.py

import re

import numpy as np
import pytest

from seqalign import BandedAligner, align_banded, align_global
from seqalign.banded import BandedData, band_cells
from seqalign.errors import BandConstraintViolated, EmptySequence
from seqalign.validation import check_alignment_validity


class TestBandCells:
    @pytest.mark.parametrize("m, n, k, expected", [
        (3, 3, 0, 4),
        (2, 2, 10, 9),
        (4, 2, 1, 8),
    ])
    def test_count(self, m, n, k, expected):
        assert band_cells(m, n, k) == expected


class TestAgreesWithGlobal:
    """ A band covering the whole matrix reproduces the global aligner. """
    @pytest.mark.parametrize("seq1, seq2", [
        ("ACGTA", "ACGT"),
        ("AACCGGTT", "ACGT"),
        ("ACCGT", "ACG"),
        ("GATTACA", "GCATGCT"),
    ])
    def test_wide_band(self, scoring_params, seq1, seq2):
        k = max(len(seq1), len(seq2))
        banded = align_banded(seq1, seq2, bandwidth=k, **scoring_params)
        full = align_global(seq1, seq2, **scoring_params)
        assert banded.score == full.score
        assert (banded.aligned_seq1, banded.aligned_seq2) == \
            (full.aligned_seq1, full.aligned_seq2)

    def test_random_pairs(self, rng, random_dna_factory, scoring_params):
        for _ in range(20):
            a = random_dna_factory(int(rng.integers(1, 25)), rng)
            b = random_dna_factory(int(rng.integers(1, 25)), rng)
            k = max(len(a), len(b))
            assert align_banded(a, b, bandwidth=k, **scoring_params).score == \
                align_global(a, b, **scoring_params).score

    def test_narrow_band_never_beats_global(self, rng_alt, random_dna_factory, scoring_params):
        for _ in range(20):
            a = random_dna_factory(int(rng_alt.integers(5, 25)), rng_alt)
            b = random_dna_factory(int(rng_alt.integers(5, 25)), rng_alt)
            k = abs(len(a) - len(b))
            res = align_banded(a, b, bandwidth=k, **scoring_params)
            assert res.score <= align_global(a, b, **scoring_params).score
            valid, msg = check_alignment_validity(res, a, b, **scoring_params)
            assert valid, msg


class TestBandwidth:
    @pytest.mark.parametrize("bandwidth", [0, 3, 10])
    def test_self_alignment(self, rng, random_protein_factory, bandwidth):
        for _ in range(10):
            seq = random_protein_factory(int(rng.integers(1, 30)), rng)
            res = align_banded(seq, seq, bandwidth=bandwidth)
            assert res.identity == len(seq)
            assert "-" not in res.aligned_seq1 + res.aligned_seq2

    def test_zero_band_is_diagonal(self, scoring_params):
        res = align_banded("ACGT", "AGGT", bandwidth=0, **scoring_params)
        assert res.score == 11.0
        assert (res.aligned_seq1, res.aligned_seq2) == ("ACGT", "AGGT")

    def test_default_bandwidth(self):
        assert BandedAligner().options.bandwidth == 10
        align_banded("A", "A" * 11)
        with pytest.raises(BandConstraintViolated,
                           match=re.escape("Sequence length difference (11) exceeds bandwidth (10)")):
            align_banded("A", "A" * 12)

    def test_length_difference(self, scoring_params):
        with pytest.raises(BandConstraintViolated, match="Increase bandwidth"):
            align_banded("ACGTACGT", "ACG", bandwidth=2, **scoring_params)

    def test_negative(self):
        with pytest.raises(BandConstraintViolated, match="bandwidth must be non-negative"):
            align_banded("ACGT", "ACGT", bandwidth=-1)

    @pytest.mark.parametrize("bandwidth", [2.5, True, "3"])
    def test_not_integer(self, bandwidth):
        with pytest.raises(TypeError, match="bandwidth must be an integer"):
            align_banded("ACGT", "ACGT", bandwidth=bandwidth)

    def test_numpy_integer(self, scoring_params):
        res = align_banded("ACGT", "ACGT", bandwidth=np.int64(1), **scoring_params)
        assert res.score == 20.0

    @pytest.mark.parametrize("bandwidth", [2.0, np.float64(2.0)])
    def test_integral_float(self, scoring_params, bandwidth):
        res = align_banded("ACGTA", "ACGT", bandwidth=bandwidth, **scoring_params)
        assert res.score == align_banded("ACGTA", "ACGT", bandwidth=2, **scoring_params).score
        with pytest.raises(BandConstraintViolated, match=re.escape("exceeds bandwidth (2).")):
            align_banded("ACGTACGT", "ACG", bandwidth=bandwidth, **scoring_params)

    def test_empty(self):
        with pytest.raises(EmptySequence, match="sequences cannot be empty"):
            align_banded("", "ACGT")


class TestBandedData:
    def test_storage(self, scoring_params):
        res = align_banded("ACGT", "ACGT", bandwidth=1, return_data=True, **scoring_params)
        data = res.data
        assert isinstance(data, BandedData)
        assert data.H.shape == (5, 3)
        assert data.cell(0, 3) is None
        assert data.cell(2, 3) == (2, 2)

    def test_dense(self, scoring_params):
        res = align_banded("ACGT", "ACGT", bandwidth=1, return_data=True, **scoring_params)
        H = res.data.dense()
        assert H.shape == (5, 5)
        assert H[4, 4] == res.score
        assert H[0, 3] == -np.inf
        assert H[1, 1] == 5.0
