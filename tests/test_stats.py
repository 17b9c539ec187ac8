"""Tests for the statistics engine."""

import math

from biotools.sequence import SequenceType
from biotools.stats import (
    CompositionEntry,
    composition,
    composition_breakdown,
    compute_stats,
    gc_content,
    summarize,
)


class TestComposition:

    def test_first_seen_order(self):
        counts = composition("GATTACA")
        assert counts == {"G": 1, "A": 3, "T": 2, "C": 1}
        assert list(counts) == ["G", "A", "T", "C"]

    def test_empty(self):
        assert composition("") == {}

    def test_control_characters_keep_their_key(self):
        assert composition("A\x00A\x01") == {"A": 2, "\x00": 1, "\x01": 1}

    def test_non_ascii(self):
        assert composition("\u00c5A\u00c5") == {"\u00c5": 2, "A": 1}

    def test_plain_int_counts(self):
        counts = composition("AAC")
        assert all(type(v) is int for v in counts.values())
        assert all(type(k) is str for k in counts)


class TestGCContent:

    def test_half(self):
        assert gc_content({"A": 1, "T": 1, "G": 1, "C": 1}) == 50.0

    def test_one_decimal(self):
        assert gc_content({"G": 1, "A": 2}) == 33.3
        assert gc_content({"G": 2, "A": 1}) == 66.7

    def test_rounds_half_up(self):
        """62.5 tenths rounds to 6.3, not to the even 6.2."""
        assert gc_content({"G": 1, "A": 15}) == 6.3

    def test_ambiguity_codes_excluded(self):
        assert gc_content({"G": 1, "A": 1, "N": 5, "-": 2}) == 50.0

    def test_no_bases(self):
        assert math.isnan(gc_content({"N": 3}))
        assert math.isnan(gc_content({}))


class TestComputeStats:

    def test_dna(self):
        stats = compute_stats("ATGC")
        assert stats.to_dict() == {
            "length": 4,
            "composition": {"A": 1, "T": 1, "G": 1, "C": 1},
            "sequence_type": "dna",
            "gc_content": 50.0,
            "molecular_weight": 2600,
        }

    def test_rna(self):
        stats = compute_stats("augg")
        assert stats.sequence_type == SequenceType.RNA
        assert stats.composition == {"A": 1, "U": 1, "G": 2}
        assert stats.gc_content == 50.0
        assert stats.molecular_weight == 4 * 340

    def test_protein(self, protein_sequence):
        stats = compute_stats(protein_sequence)
        assert stats.sequence_type == SequenceType.PROTEIN
        assert stats.gc_content is None
        assert stats.molecular_weight == len(protein_sequence) * 110

    def test_unknown(self):
        stats = compute_stats("ACGTU")
        assert stats.sequence_type == SequenceType.UNKNOWN
        assert stats.gc_content is None
        assert stats.molecular_weight is None
        assert "gc_content" not in stats.to_dict()
        assert "molecular_weight" not in stats.to_dict()

    def test_whitespace_removed_before_counting(self):
        stats = compute_stats("at gc\nGG\r\n")
        assert stats.length == 6
        assert stats.composition == {"A": 1, "T": 1, "G": 3, "C": 1}
        assert stats.molecular_weight == 6 * 650

    def test_nul_in_input(self):
        assert compute_stats("A\x00").composition == {"A": 1, "\x00": 1}

    def test_empty(self):
        stats = compute_stats("")
        assert stats.length == 0
        assert stats.composition == {}
        assert stats.sequence_type == SequenceType.UNKNOWN
        assert stats.to_dict() == {
            "length": 0,
            "composition": {},
            "sequence_type": "unknown",
        }


class TestBreakdown:

    def test_sorted_by_count(self):
        entries = composition_breakdown({"G": 1, "A": 3, "T": 2, "C": 1})
        assert [e.symbol for e in entries] == ["A", "T", "G", "C"]
        assert entries[0] == CompositionEntry("A", 3, 42.9)
        assert entries[-1].percent == 14.3

    def test_ties_keep_first_seen_order(self):
        entries = composition_breakdown({"C": 2, "A": 2, "G": 2})
        assert [e.symbol for e in entries] == ["C", "A", "G"]

    def test_empty(self):
        assert composition_breakdown({}) == []


class TestSummarize:

    def test_non_letters_dropped(self):
        summary = summarize("1 ACGT 60\n2 ACGU")
        assert summary.length == 8
        assert summary.sequence_type == SequenceType.UNKNOWN

    def test_text(self):
        assert str(summarize("acgt")) == "Detected DNA sequence, length: 4"
