# test_validation.py

import pytest

from seqalign import AlignmentResult, align_params, get_default_scoring
from seqalign.options import AlignmentOptions, resolve_options
from seqalign.validation import (
    benchmark_aligners,
    check_alignment_validity,
    mutate_sequence,
    nwg_global,
    random_sequence,
    score_alignment,
)


def _result(a1, a2, score=0.0, identity=None):
    if identity is None:
        identity = sum(1 for x, y in zip(a1, a2) if x == y and x != "-")
    percent = identity / len(a1) * 100 if a1 else 0.0
    return AlignmentResult(a1, a2, score, 0, 0, 0, 0, identity, percent, len(a1))


class TestBaselines:
    """ Independent scorers used by the randomized tests. """
    def test_nwg_global(self):
        assert nwg_global("ACGTA", "ACGT", "DNA_SIMPLE", -5, -2) == 15.0
        assert nwg_global("HEAGAWGHEE", "PAWHEAE", "PAM250", -8, -2) == 10.0

    @pytest.mark.parametrize("a1, a2, expected", [
        ("ACGT", "ACGT", 20.0),
        ("ACGTA", "ACGT-", 15.0),
        ("A--T", "ACGT", 5 - 5 - 2 + 5),
        ("A-C", "AG-", 5 - 5 - 5),      # switching sides opens a new gap
    ])
    def test_score_alignment(self, a1, a2, expected):
        assert score_alignment(a1, a2, "DNA_SIMPLE", -5, -2) == expected


class TestValidity:
    def test_valid(self):
        ok, msg = check_alignment_validity(_result("AC-T", "ACGT", 10.0), "ACT", "ACGT",
                                           "DNA_SIMPLE", -5, -2)
        assert ok, msg

    @pytest.mark.parametrize("result, needle", [
        (_result("ACT", "AC"), "Length mismatch"),
        (_result("A-CT", "A-GT"), "Double gap"),
        (_result("ACGT", "ACGA"), "does not reconstruct"),
        (_result("ACT", "ACG", identity=1), "Identity mismatch"),
    ])
    def test_invalid(self, result, needle):
        ok, msg = check_alignment_validity(result, "ACT", "ACG")
        assert not ok
        assert needle in msg

    def test_score_mismatch(self):
        ok, msg = check_alignment_validity(_result("ACGT", "ACGT", 1.0), "ACGT", "ACGT",
                                           "DNA_SIMPLE", -5, -2)
        assert not ok
        assert "Score mismatch" in msg


class TestSequenceHelpers:
    def test_random_sequence(self, rng):
        seq = random_sequence(50, rng)
        assert len(seq) == 50
        assert set(seq) <= set("ACGT")

    def test_mutate_without_rates_is_identity(self, rng):
        seq = random_sequence(40, rng)
        assert mutate_sequence(seq, rng, sub_rate=0.0, indel_rate=0.0) == seq

    def test_mutate_substitutions_only(self, rng):
        seq = random_sequence(40, rng)
        out = mutate_sequence(seq, rng, sub_rate=1.0, indel_rate=0.0)
        assert len(out) == len(seq)
        assert all(x != y for x, y in zip(seq, out))


class TestDefaults:
    def test_align_params(self):
        params = align_params("banded")
        assert params["bandwidth"] == 10
        assert params["matrix"] == "BLOSUM62"
        assert align_params("space_efficient")["gap_open"] == -1.0

    def test_align_params_copy(self):
        align_params()["gap_open"] = 0
        assert align_params()["gap_open"] == -10.0

    def test_unknown_variant(self):
        with pytest.raises(ValueError, match="Unknown aligner"):
            align_params("needleman")

    def test_default_scoring(self):
        assert get_default_scoring() == ("BLOSUM62", -10.0, -1.0)


class TestOptions:
    """ Precedence and validation of alignment options. """
    def test_precedence(self):
        defaults = align_params("global")
        opts = resolve_options(AlignmentOptions(gap_open=-3, gap_extend=-2), defaults,
                               gap_extend=-1)
        assert opts.gap_open == -3
        assert opts.gap_extend == -1
        assert opts.matrix == "BLOSUM62"
        assert opts.bandwidth is None

    def test_frozen(self):
        opts = AlignmentOptions(gap_open=-3)
        with pytest.raises(AttributeError):
            opts.gap_open = -4

    def test_bad_options_type(self):
        with pytest.raises(TypeError, match="options must be an AlignmentOptions"):
            resolve_options({"gap_open": -3}, align_params())


class TestBenchmark:
    def test_all_aligners_timed(self, rng):
        timings = benchmark_aligners(12, 10, rng, n_samples=1)
        assert set(timings) == {
            "global", "local", "semiglobal", "overlap", "banded", "space_efficient",
        }
        assert all(t >= 0 for t in timings.values())
