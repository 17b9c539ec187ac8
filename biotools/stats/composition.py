"""
Sequence statistics: composition, GC content and molecular weight.

The weight estimate uses a flat average mass per residue, which is
enough for a quick order-of-magnitude figure but not for anything that
needs real monoisotopic masses.
"""

import math
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping

import numpy as np

from biotools.results import StatsResult
from biotools.sequence.classify import SequenceType, classify, clean_sequence

# Average mass per residue in Daltons
RESIDUE_WEIGHTS = {
    SequenceType.DNA: 650,
    SequenceType.RNA: 340,
    SequenceType.PROTEIN: 110,
}

NUCLEOTIDE_BASES = ("A", "T", "U", "G", "C")

_NON_LETTERS = re.compile(r"[^A-Za-z]")


@dataclass(frozen=True)
class CompositionEntry:
    """One row of a composition breakdown."""
    symbol: str
    count: int
    percent: float


@dataclass(frozen=True)
class SequenceSummary:
    """Detected type and letter count of a sequence."""
    sequence_type: SequenceType
    length: int

    def __str__(self) -> str:
        return (
            f"Detected {self.sequence_type.value.upper()} sequence, "
            f"length: {self.length}"
        )


def _round_one_decimal(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def composition(sequence: str) -> Dict[str, int]:
    """
    Count each distinct symbol of an already cleaned sequence.

    Args:
        sequence: Sequence without whitespace

    Returns:
        Mapping of symbol to count, ordered by first appearance

    Example:
        >>> composition("GATTACA")
        {'G': 1, 'A': 3, 'T': 2, 'C': 1}
    """
    if not sequence:
        return {}

    # Code points, so NUL and other control characters keep their own key
    raw = sequence.encode("utf-32-le", "surrogatepass")
    codes = np.frombuffer(raw, dtype=np.uint32)
    unique, first_index, counts = np.unique(
        codes, return_index=True, return_counts=True
    )
    order = np.argsort(first_index)
    return {chr(int(unique[i])): int(counts[i]) for i in order}


def gc_content(counts: Mapping[str, int]) -> float:
    """
    GC percentage over A, T, U, G and C counts.

    Ambiguity codes and gaps do not count toward the total. Returns NaN
    when no canonical base is present.

    Args:
        counts: Symbol counts as returned by composition()

    Returns:
        Percentage rounded to one decimal place
    """
    total = sum(counts.get(base, 0) for base in NUCLEOTIDE_BASES)
    if total == 0:
        return float("nan")
    gc = counts.get("G", 0) + counts.get("C", 0)
    return _round_one_decimal(gc / total * 100)


def compute_stats(sequence: str) -> StatsResult:
    """
    Compute descriptive statistics for a sequence.

    Whitespace is removed and the sequence uppercased before counting.
    GC content is reported for DNA and RNA only; the molecular weight
    estimate is reported for DNA, RNA and protein.

    Args:
        sequence: Raw sequence text

    Returns:
        StatsResult for the cleaned sequence

    Example:
        >>> stats = compute_stats("ATGC")
        >>> stats.gc_content, stats.molecular_weight
        (50.0, 2600)
    """
    cleaned = clean_sequence(sequence)
    counts = composition(cleaned)
    sequence_type = classify(sequence)

    gc = None
    if sequence_type.is_nucleic:
        value = gc_content(counts)
        if not math.isnan(value):
            gc = value

    weight = None
    if sequence_type in RESIDUE_WEIGHTS:
        weight = len(cleaned) * RESIDUE_WEIGHTS[sequence_type]

    return StatsResult(
        length=len(cleaned),
        composition=counts,
        sequence_type=sequence_type,
        gc_content=gc,
        molecular_weight=weight,
    )


def composition_breakdown(counts: Mapping[str, int]) -> List[CompositionEntry]:
    """
    Sort a composition by count and attach percentages.

    Ties keep their original (first-seen) order.

    Args:
        counts: Symbol counts

    Returns:
        Entries sorted by descending count, percent rounded to one decimal
    """
    total = sum(counts.values())
    if total == 0:
        return []

    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [
        CompositionEntry(symbol, count, _round_one_decimal(count / total * 100))
        for symbol, count in ranked
    ]


def summarize(sequence: str) -> SequenceSummary:
    """
    Classify a sequence using its ASCII letters only.

    Digits, punctuation and whitespace (FASTA line numbers, gaps) are
    dropped before classification and counting.
    """
    letters = _NON_LETTERS.sub("", sequence)
    return SequenceSummary(classify(letters), len(letters))
