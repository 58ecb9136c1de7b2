# test_local.py

import pytest

from seqalign import LocalAligner, align_global, align_local, simple_matrix
from seqalign.errors import EmptySequence, InvalidGapPenalty
from seqalign.validation import check_alignment_validity


class TestKnownAlignments:
    """ Smith-Waterman on hand-checked inputs. """
    @pytest.mark.parametrize("gap_model", ["affine", "direction"])
    def test_wikipedia_example(self, gap_model):
        res = align_local("TGTTACGG", "GGTTGACTA", matrix=simple_matrix(5, -4),
                          gap_open=-3, gap_extend=-1, gap_model=gap_model)
        assert res.score == 22.0
        assert (res.aligned_seq1, res.aligned_seq2) == ("GTT-AC", "GTTGAC")
        assert (res.start_pos1, res.start_pos2) == (1, 1)
        assert (res.end_pos1, res.end_pos2) == (6, 7)

    def test_embedded_motif(self, scoring_params):
        res = align_local("AAACGTAAA", "CGT", **scoring_params)
        assert res.score == 15.0
        assert res.aligned_seq1 == res.aligned_seq2 == "CGT"
        assert (res.start_pos1, res.start_pos2, res.end_pos1, res.end_pos2) == (3, 0, 6, 3)

    def test_first_maximum_wins(self, scoring_params):
        # "AC" occurs twice in seq2; the first occurrence is reported
        res = align_local("AC", "ACAC", **scoring_params)
        assert res.score == 10.0
        assert (res.start_pos1, res.start_pos2, res.end_pos1, res.end_pos2) == (0, 0, 2, 2)

    def test_internal_gap(self):
        res = align_local("ACCGT", "ACG", matrix="DNA_SIMPLE", gap_open=-2, gap_extend=-0.5)
        assert res.score == 13.0
        assert (res.aligned_seq1, res.aligned_seq2) == ("ACCG", "A-CG")


class TestEmptyResults:
    """ No positive-scoring pair, or best below min_score. """
    def test_no_similarity(self, scoring_params):
        res = align_local("AAAA", "TTTT", **scoring_params)
        assert res.score == 0.0
        assert res.aligned_seq1 == res.aligned_seq2 == ""
        assert res.alignment_length == 0
        assert res.identity_percent == 0.0

    def test_below_min_score(self, scoring_params):
        res = align_local("AAACGTAAA", "CGT", min_score=16, **scoring_params)
        assert res.score == 0.0
        assert res.aligned_seq1 == ""
        assert (res.start_pos1, res.start_pos2, res.end_pos1, res.end_pos2) == (0, 0, 0, 0)

    def test_at_min_score(self, scoring_params):
        res = align_local("AAACGTAAA", "CGT", min_score=15, **scoring_params)
        assert res.aligned_seq1 == "CGT"

    def test_empty_score_not_normalized(self, scoring_params):
        res = align_local("AAAA", "TTTT", score_normalize=True, **scoring_params)
        assert res.score == 0.0


class TestErrors:
    """ Input validation matches the global aligner. """
    def test_empty(self):
        with pytest.raises(EmptySequence, match="seq2 is empty or contains only whitespace"):
            align_local("ACGT", "  ")

    def test_positive_gap(self):
        with pytest.raises(InvalidGapPenalty):
            align_local("ACGT", "ACGT", gap_extend=2)


class TestProperties:
    """ Randomized consistency checks. """
    @pytest.mark.parametrize("gap_model", ["affine", "direction"])
    def test_region_is_consistent(self, rng, random_dna_factory, scoring_params, gap_model):
        for _ in range(25):
            a = random_dna_factory(int(rng.integers(1, 20)), rng)
            b = random_dna_factory(int(rng.integers(1, 20)), rng)
            res = align_local(a, b, gap_model=gap_model, **scoring_params)
            assert res.score >= 0
            valid, msg = check_alignment_validity(res, a, b, region_only=True, **scoring_params)
            assert valid, msg

    def test_at_least_global(self, rng_alt, random_dna_factory, scoring_params):
        for _ in range(20):
            a = random_dna_factory(int(rng_alt.integers(1, 20)), rng_alt)
            b = random_dna_factory(int(rng_alt.integers(1, 20)), rng_alt)
            assert align_local(a, b, **scoring_params).score >= \
                align_global(a, b, **scoring_params).score

    def test_self_alignment(self, rng, random_protein_factory):
        seq = random_protein_factory(25, rng)
        res = align_local(seq, seq)
        assert res.aligned_seq1 == seq
        assert (res.start_pos1, res.end_pos1) == (0, len(seq))

    def test_return_data_floor(self, scoring_params):
        res = align_local("ACGT", "TTTT", return_data=True, **scoring_params)
        assert (res.data.H >= 0).all()


class TestAlignerObject:
    def test_local_aligner(self, scoring_params):
        aligner = LocalAligner(min_score=100, **scoring_params)
        assert aligner.align("ACGT", "ACGT").aligned_seq1 == ""
        assert aligner.options.min_score == 100
        assert "LocalAligner" in repr(aligner)
