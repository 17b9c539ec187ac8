"""
biotools: a small toolkit for biological sequences

This package provides tools for:
- Detecting whether a sequence is DNA, RNA or protein
- Validating DNA/RNA alphabets
- Reverse complement, transcription, reverse transcription and translation
- Composition, GC content and molecular weight statistics
- Dispatching operations by identifier with uniform result records

All functions are pure and stateless; lookup tables are read-only.
"""

import logging

__version__ = "0.1.0"

from biotools.errors import (
    BiotoolsError,
    ValidationError,
    UnsupportedOperationError,
    RemoteOperationError,
    ServiceError,
)

from biotools.sequence import (
    SequenceType,
    classify,
    is_valid_dna,
    is_valid_rna,
    reverse_complement,
    transcribe,
    reverse_transcribe,
    translate,
    to_uppercase,
    to_lowercase,
    remove_newlines,
    CODON_TABLE,
)

from biotools.results import OperationResult, StatsResult, parse_result

from biotools.stats import compute_stats, composition_breakdown, summarize

from biotools.operations import Operation, dispatch, available_operations

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "BiotoolsError",
    "ValidationError",
    "UnsupportedOperationError",
    "RemoteOperationError",
    "ServiceError",
    # Classification and transforms
    "SequenceType",
    "classify",
    "is_valid_dna",
    "is_valid_rna",
    "reverse_complement",
    "transcribe",
    "reverse_transcribe",
    "translate",
    "to_uppercase",
    "to_lowercase",
    "remove_newlines",
    "CODON_TABLE",
    # Results and statistics
    "OperationResult",
    "StatsResult",
    "parse_result",
    "compute_stats",
    "composition_breakdown",
    "summarize",
    # Dispatch
    "Operation",
    "dispatch",
    "available_operations",
]
