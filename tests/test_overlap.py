# test_overlap.py

import pytest

from seqalign import OverlapAligner, align_global, align_overlap, align_semiglobal
from seqalign.errors import EmptySequence
from seqalign.validation import check_alignment_validity


class TestOverlap:
    """ Free seq2 prefix and free seq1 suffix. """
    def test_dovetail(self, scoring_params):
        res = align_overlap("ACGTTTTT", "GGGGACGT", **scoring_params)
        assert res.score == 20.0
        assert res.aligned_seq1 == "----ACGTTTTT"
        assert res.aligned_seq2 == "GGGGACGT----"
        assert (res.start_pos1, res.start_pos2, res.end_pos1, res.end_pos2) == (0, 4, 4, 8)

    def test_internal_gap(self):
        res = align_overlap("ACCGT", "ACG", matrix="DNA_SIMPLE",
                            gap_open=-2, gap_extend=-0.5)
        assert res.score == 13.0
        assert (res.aligned_seq1, res.aligned_seq2) == ("ACCGT", "A-CG-")

    def test_seq1_prefix_is_penalised(self, scoring_params):
        res = align_overlap("TTTTACGT", "ACGT", **scoring_params)
        assert res.score == 20.0 - 5 - 2 * 3
        assert (res.aligned_seq1, res.aligned_seq2) == ("TTTTACGT", "----ACGT")
        assert (res.start_pos1, res.start_pos2, res.end_pos1, res.end_pos2) == (0, 0, 8, 4)

    def test_seq2_suffix_is_penalised(self, scoring_params):
        res = align_overlap("ACGT", "ACGTTTTT", **scoring_params)
        assert res.score == 20.0 - 5 - 2 * 3
        assert (res.aligned_seq1, res.aligned_seq2) == ("ACG----T", "ACGTTTTT")
        assert (res.end_pos1, res.end_pos2) == (4, 8)

    def test_free_ends_differ_from_semiglobal(self, scoring_params):
        # the same pairs are free on both ends under semi-global scoring
        assert align_semiglobal("TTTTACGT", "ACGT", **scoring_params).score == 20.0
        assert align_semiglobal("ACGT", "ACGTTTTT", **scoring_params).score == 20.0

    def test_identity_counts_whole_alignment(self, scoring_params):
        res = align_overlap("ACGTTTTT", "GGGGACGT", **scoring_params)
        assert res.identity == 4
        assert res.identity_percent == pytest.approx(100 * 4 / 12)

    def test_empty(self):
        with pytest.raises(EmptySequence, match="sequences cannot be empty"):
            align_overlap("ACGT", "")


class TestProperties:
    def test_covers_inputs(self, rng_alt, random_dna_factory, scoring_params):
        for _ in range(25):
            a = random_dna_factory(int(rng_alt.integers(1, 20)), rng_alt)
            b = random_dna_factory(int(rng_alt.integers(1, 20)), rng_alt)
            res = align_overlap(a, b, **scoring_params)
            valid, msg = check_alignment_validity(res, a, b)
            assert valid, msg
            assert res.start_pos1 == 0
            assert res.end_pos2 == len(b)
            assert res.score >= align_global(a, b, **scoring_params).score

    @pytest.mark.parametrize("matrix", ["BLOSUM62", "PAM250"])
    def test_self_alignment(self, rng, random_protein_factory, matrix):
        for _ in range(10):
            seq = random_protein_factory(int(rng.integers(1, 30)), rng)
            res = align_overlap(seq, seq, matrix=matrix)
            assert res.identity == len(seq)
            assert "-" not in res.aligned_seq1 + res.aligned_seq2

    def test_return_data(self, scoring_params):
        res = OverlapAligner(**scoring_params).align("ACGT", "GACG", return_data=True)
        assert res.data.H.shape == (5, 5)
        assert res.data.H[res.end_pos1, 4] == res.score
