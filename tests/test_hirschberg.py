# test_hirschberg.py

import numpy as np
import pytest

from seqalign import GlobalAligner, SpaceEfficientAligner, align_global, align_space_efficient
from seqalign.errors import EmptySequence, InvalidGapPenalty
from seqalign.hirschberg import hirschberg, linear_score, nw_score_row
from seqalign.matrices import DNA_SIMPLE, transpose
from seqalign.validation import check_alignment_validity, mutate_sequence, nwg_global


class TestBuildingBlocks:
    """ Score rows and the single-character base case. """
    def test_score_row(self):
        row = nw_score_row("AC", "AC", DNA_SIMPLE, -1)
        assert np.array_equal(row, [-2.0, 4.0, 10.0])

    def test_score_row_empty_a(self):
        row = nw_score_row("", "ACG", DNA_SIMPLE, -2)
        assert np.array_equal(row, [0.0, -2.0, -4.0, -6.0])

    @pytest.mark.parametrize("a, b, expected", [
        ("A", "CCC", ("A---", "-CCC")),   # unpaired beats a mismatch
        ("A", "CAC", ("-A-", "CAC")),
        ("A", "AA", ("A-", "AA")),        # lowest offset wins the tie
        ("ACGT", "", ("ACGT", "----")),
        ("", "AC", ("--", "AC")),
    ])
    def test_hirschberg_small(self, a, b, expected):
        assert hirschberg(a, b, DNA_SIMPLE, -1) == expected

    def test_linear_score(self):
        assert linear_score("A-CG", "AAC-", DNA_SIMPLE, -2) == 6.0


class TestSpaceEfficient:
    def test_identical(self):
        res = align_space_efficient("ACGT", "ACGT", matrix="DNA_SIMPLE")
        assert res.score == 20.0
        assert res.identity_percent == 100.0

    def test_all_gaps_beat_mismatches(self):
        res = align_space_efficient("AAAA", "CCCC", matrix="DNA_SIMPLE")
        assert res.score == -8.0
        assert res.identity == 0
        assert res.alignment_length == 8

    def test_gap_extend_ignored(self):
        a = align_space_efficient("ACGTACGT", "ACGACG", matrix="DNA_SIMPLE", gap_open=-3)
        b = align_space_efficient("ACGTACGT", "ACGACG", matrix="DNA_SIMPLE",
                                  gap_open=-3, gap_extend=-0.1)
        assert a.score == b.score

    def test_positions(self):
        res = align_space_efficient("ACGTA", "ACG", matrix="DNA_SIMPLE")
        assert (res.start_pos1, res.start_pos2, res.end_pos1, res.end_pos2) == (0, 0, 5, 3)

    def test_score_normalize(self):
        res = align_space_efficient("ACGT", "ACGT", matrix="DNA_SIMPLE", score_normalize=True)
        assert res.score == 5.0

    def test_errors(self):
        with pytest.raises(EmptySequence, match="sequences cannot be empty"):
            align_space_efficient(" ", "ACGT")
        with pytest.raises(InvalidGapPenalty):
            align_space_efficient("ACGT", "ACGT", gap_open=2)

    def test_aligner_object(self):
        aligner = SpaceEfficientAligner(matrix="DNA_SIMPLE", gap_open=-2)
        assert aligner.options.gap_open == -2
        assert aligner.align("acgt", "acgt").aligned_seq1 == "ACGT"

    @pytest.mark.parametrize("return_data", [False, True])
    def test_aligner_accepts_return_data(self, return_data):
        res = SpaceEfficientAligner(matrix="DNA_SIMPLE").align(
            "ACGT", "AGT", return_data=return_data
        )
        assert res.data is None
        assert res.aligned_seq1 == "ACGT"


class TestShorterOnRows:
    """ The shorter input is placed on the score rows. """
    def test_longer_seq2_keeps_orientation(self):
        res = align_space_efficient("ACG", "TTACGTT", matrix="DNA_SIMPLE", gap_open=-1)
        assert res.aligned_seq1.replace("-", "") == "ACG"
        assert res.aligned_seq2 == "TTACGTT"
        assert (res.end_pos1, res.end_pos2) == (3, 7)
        assert res.score == nwg_global("ACG", "TTACGTT", "DNA_SIMPLE", -1, -1)

    def test_swap_gives_mirrored_score(self, rng, random_dna_factory):
        for _ in range(15):
            a = random_dna_factory(int(rng.integers(1, 10)), rng)
            b = a + random_dna_factory(int(rng.integers(1, 10)), rng)
            forward = align_space_efficient(a, b, matrix="DNA_SIMPLE", gap_open=-2)
            reverse = align_space_efficient(b, a, matrix="DNA_SIMPLE", gap_open=-2)
            assert forward.score == reverse.score

    def test_asymmetric_matrix(self):
        skewed = {"A": {"A": 1, "C": 5}, "C": {"A": -5, "C": 1}}
        res = align_space_efficient("A", "CC", matrix=skewed, gap_open=-1)
        assert res.score == 4.0
        assert res.score == nwg_global("A", "CC", skewed, -1, -1)
        assert transpose(skewed)["C"]["A"] == 5


class TestOptimality:
    """ Linear-space result matches full-matrix linear-gap scores. """
    @pytest.mark.parametrize("gap", [-1.0, -3.0, -6.0])
    def test_random_pairs(self, rng, random_dna_factory, gap):
        for _ in range(20):
            a = random_dna_factory(int(rng.integers(1, 20)), rng)
            b = random_dna_factory(int(rng.integers(1, 20)), rng)
            res = align_space_efficient(a, b, matrix="DNA_SIMPLE", gap_open=gap)
            assert res.score == pytest.approx(nwg_global(a, b, "DNA_SIMPLE", gap, gap))
            valid, msg = check_alignment_validity(res, a, b, "DNA_SIMPLE", gap, gap)
            assert valid, msg

    def test_matches_global_linear(self, rng_alt, random_protein_factory):
        for _ in range(10):
            a = random_protein_factory(int(rng_alt.integers(1, 15)), rng_alt)
            b = random_protein_factory(int(rng_alt.integers(1, 15)), rng_alt)
            full = align_global(a, b, gap_open=-4, gap_extend=-4)
            res = align_space_efficient(a, b, gap_open=-4)
            assert res.score == full.score

    def test_agrees_with_global_aligner(self, rng, random_dna_factory):
        for _ in range(40):
            a = random_dna_factory(int(rng.integers(1, 16)), rng)
            b = random_dna_factory(int(rng.integers(1, 16)), rng)
            full = GlobalAligner(matrix="DNA_SIMPLE", gap_open=-3, gap_extend=-3).align(a, b)
            res = SpaceEfficientAligner(matrix="DNA_SIMPLE", gap_open=-3).align(a, b)
            assert res.score == full.score, f"{a} vs {b}"
            assert res.identity == full.identity, f"{a} vs {b}"

    def test_long_related_pair(self, rng):
        a = "".join(rng.choice(list("ACGT"), size=300))
        b = mutate_sequence(a, rng)
        res = align_space_efficient(a, b, matrix="DNA_SIMPLE", gap_open=-2)
        assert res.score == pytest.approx(nwg_global(a, b, "DNA_SIMPLE", -2, -2))
        valid, msg = check_alignment_validity(res, a, b)
        assert valid, msg
