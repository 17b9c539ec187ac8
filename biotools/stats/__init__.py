"""
Descriptive statistics for biological sequences.

This module provides:
- Symbol composition (first-seen order)
- GC content for nucleic acids
- Molecular weight estimates
- Ranked composition breakdowns and short summaries
"""

from biotools.stats.composition import (
    compute_stats,
    composition,
    gc_content,
    composition_breakdown,
    summarize,
    CompositionEntry,
    SequenceSummary,
    RESIDUE_WEIGHTS,
)

__all__ = [
    "compute_stats",
    "composition",
    "gc_content",
    "composition_breakdown",
    "summarize",
    "CompositionEntry",
    "SequenceSummary",
    "RESIDUE_WEIGHTS",
]
